"""Per-type formatters: render one argument into a FixedString.

Formatters are total over values that passed validation. They perform
no padding, no width handling and no locale-aware output.

Python 3.13+. Zero external dependencies.
"""

import operator
from collections.abc import Callable
from typing import TypeAlias

from staticfmt.core import FixedString, StringSlice

__all__ = [
    "Formatter",
    "format_integer",
    "format_literal",
    "format_string",
]

Formatter: TypeAlias = Callable[[object], FixedString]

_DIGITS = "0123456789"


def format_literal(text: str) -> FixedString:
    """Emit stored literal text verbatim.

    Example:
        >>> format_literal("%")
        FixedString('%', size=1)
    """
    return FixedString(text)


def format_integer(value: object) -> FixedString:
    """Render an integral value as decimal text.

    Zero renders as ``"0"``. Otherwise digits of the magnitude are extracted
    least-significant first and reversed; negatives get a leading ``-``.
    No leading zeros, no padding.

    Args:
        value: Any integral value (``int`` or ``numbers.Integral`` with
            ``__index__``)

    Returns:
        Buffer holding exactly the rendered digits

    Example:
        >>> str(format_integer(120))
        '120'
        >>> str(format_integer(-7))
        '-7'
        >>> str(format_integer(0))
        '0'
    """
    number = operator.index(value)  # type: ignore[arg-type]
    if number == 0:
        return FixedString(_DIGITS[0])

    magnitude = abs(number)
    digits: list[str] = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(_DIGITS[digit])
    if number < 0:
        digits.append("-")
    digits.reverse()
    return FixedString("".join(digits))


def format_string(value: object) -> FixedString:
    """Copy a string slice verbatim; no escaping, no truncation.

    Example:
        >>> format_string("USER")
        FixedString('USER', size=4)
    """
    return FixedString.from_slice(StringSlice.of(value))  # type: ignore[arg-type]
