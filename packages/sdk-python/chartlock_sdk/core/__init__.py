"""
Core SDK Module
===============

Loading and rendering of state documents.
"""

from .loader import dump_state, load_state

__all__ = [
    "load_state",
    "dump_state",
]
