"""Core character types shared across syntax and runtime layers.

This package provides the buffer and view types that both the syntax layer
(parsing) and runtime layer (validation, rendering) depend on. By isolating
them here, we maintain a clean dependency graph:

    core <- syntax <- runtime

Exports:
    FixedString: Immutable fixed-size character buffer
    StringSlice: Non-owning view over character data

Python 3.13+.
"""

from .buffer import NUL, FixedString
from .slice import StringSlice

__all__ = ["NUL", "FixedString", "StringSlice"]
