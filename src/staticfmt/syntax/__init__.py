"""Pattern syntax package.

Provides the parsing modes, the parser, and the Pattern representation.
Separate from runtime so tooling can inspect patterns without rendering.

Python 3.13+.
"""

from staticfmt.core import FixedString, StringSlice

from .modes import PRINTF_MODE, ParsingMode, PrintfMode
from .parser import PatternParser
from .pattern import FormatOptions, Pattern, PatternElement, Specifier

__all__ = [
    "PRINTF_MODE",
    "FormatOptions",
    "ParsingMode",
    "Pattern",
    "PatternElement",
    "PatternParser",
    "PrintfMode",
    "Specifier",
    "parse",
]


def parse(source: str | StringSlice | FixedString) -> Pattern:
    """Parse printf-style pattern text with the built-in conversions.

    Convenience function for PatternParser().parse().

    Example:
        >>> from staticfmt.syntax import parse
        >>> pattern = parse("%d-%s")
        >>> pattern.argument_count
        2
    """
    return PatternParser().parse(source)
