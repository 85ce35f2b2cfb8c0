"""Hypothesis strategies for staticfmt property-based testing.

Usage:
    from tests.strategies import literal_text, pattern_with_args
"""

from .patterns import (
    LITERAL_ALPHABET,
    int_args,
    literal_text,
    pattern_with_args,
    string_args,
    unregistered_codes,
)

__all__ = [
    "LITERAL_ALPHABET",
    "int_args",
    "literal_text",
    "pattern_with_args",
    "string_args",
    "unregistered_codes",
]
