"""Parsing modes: where the next delimiter sits in a slice.

A parsing mode is the sole hook a pattern syntax implements. The parser
asks it for the position of the next delimiter and handles everything
else (escapes, conversion lookup, span collection) itself.

Only the printf mode exists. A brace-delimited mode would implement the
same protocol with ``{``/``}`` delimiters.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from staticfmt.constants import PRINTF_DELIMITER
from staticfmt.core import StringSlice

__all__ = ["PRINTF_MODE", "ParsingMode", "PrintfMode"]


@runtime_checkable
class ParsingMode(Protocol):
    """Protocol for pattern syntaxes.

    Attributes:
        name: Short identifier used in logs and cache keys
        delimiters: Characters that open a specifier
    """

    name: str
    delimiters: frozenset[str]

    def find_delimiter(self, view: StringSlice) -> int:
        """Index of the first delimiter in ``view``, or ``len(view)`` if none."""
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class PrintfMode:
    """printf-style syntax: ``%`` opens every specifier.

    Example:
        >>> PRINTF_MODE.find_delimiter(StringSlice.of("50%% off"))
        2
        >>> PRINTF_MODE.find_delimiter(StringSlice.of("plain"))
        5
    """

    name: str = "printf"
    delimiters: frozenset[str] = field(default=frozenset({PRINTF_DELIMITER}))

    def find_delimiter(self, view: StringSlice) -> int:
        if len(self.delimiters) == 1:
            (delimiter,) = self.delimiters
            return view.find(delimiter)
        return view.find_any(self.delimiters)


PRINTF_MODE: PrintfMode = PrintfMode()
