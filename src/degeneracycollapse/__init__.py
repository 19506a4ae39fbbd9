"""Degeneracy Collapse Simulator."""
__version__ = "0.1.0"
