"""
The MODEL layer contains the loss field, the text catalogue and the UI state.
Only `state.py` knows about Qt (for its change signal); everything else is
plain Python/NumPy.
"""
