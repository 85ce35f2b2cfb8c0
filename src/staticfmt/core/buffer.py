"""Fixed-length immutable character buffers.

A FixedString owns exactly N characters. N is fixed at construction and
propagates through concatenation: joining buffers of sizes N1 and N2
yields a buffer of size N1 + N2, so the size of any rendered output is
the algebraic sum of its parts.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .slice import StringSlice

__all__ = ["NUL", "FixedString"]

NUL: str = "\0"


@dataclass(frozen=True, slots=True, eq=False)
class FixedString:
    """Immutable character buffer of fixed size.

    Example:
        >>> greeting = FixedString("Hello") + FixedString(", world")
        >>> greeting.size
        12
        >>> greeting == "Hello, world"
        True
        >>> greeting.null_terminated().size
        13
    """

    chars: str

    def __post_init__(self) -> None:
        """Validate that the buffer owns text.

        Raises:
            TypeError: If chars is not a str
        """
        if not isinstance(self.chars, str):
            msg = f"FixedString.chars must be str, got {type(self.chars).__name__}"
            raise TypeError(msg)

    @classmethod
    def empty(cls) -> FixedString:
        """Zero-size buffer."""
        return cls("")

    @classmethod
    def from_slice(cls, view: StringSlice) -> FixedString:
        """Copy the characters a slice views into a new buffer."""
        return cls(view.text)

    @classmethod
    def concat(cls, parts: Iterable[FixedString]) -> FixedString:
        """Join buffers in order.

        Equivalent to folding ``+`` over ``parts`` but copies each
        character exactly once.

        Args:
            parts: Buffers to join, left to right

        Returns:
            Buffer whose size is the sum of the parts' sizes
        """
        return cls("".join(part.chars for part in parts))

    @property
    def size(self) -> int:
        """Number of characters owned by the buffer."""
        return len(self.chars)

    def data(self) -> str:
        """Characters as a plain string."""
        return self.chars

    def null_terminated(self) -> FixedString:
        """Return a new buffer of size N+1 ending in a NUL character."""
        return self + FixedString(NUL)

    def __add__(self, other: object) -> FixedString:
        if isinstance(other, FixedString):
            return FixedString(self.chars + other.chars)
        from .slice import StringSlice  # noqa: PLC0415 - circular

        if isinstance(other, StringSlice):
            return FixedString(self.chars + other.text)
        return NotImplemented

    def __len__(self) -> int:
        return len(self.chars)

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int):
            msg = f"FixedString indices must be integers, not {type(index).__name__}"
            raise TypeError(msg)
        return self.chars[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.chars)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedString):
            return self.chars == other.chars
        if isinstance(other, str):
            return self.chars == other
        from .slice import StringSlice  # noqa: PLC0415 - circular

        if isinstance(other, StringSlice):
            return self.chars == other.text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.chars)

    def __str__(self) -> str:
        return self.chars

    def __repr__(self) -> str:
        return f"FixedString({self.chars!r}, size={self.size})"
