"""
Rendering Engine
================
Turns a loss field snapshot into an RGBA image and an overlay description.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
"""
