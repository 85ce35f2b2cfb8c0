"""Non-owning views over character data.

A StringSlice is ``{source, start, length}``: it never copies or owns the
characters it views. Every slice operation derives a new view from a
known-length one, so bounds hold by construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .buffer import NUL, FixedString

__all__ = ["StringSlice"]


@dataclass(frozen=True, slots=True, eq=False)
class StringSlice:
    """Immutable view of ``length`` characters of ``source`` from ``start``.

    Key Design Decisions:
        1. Frozen dataclass - views never change after construction
        2. Offsets, not copies - prefix/remove_prefix are O(1)
        3. find() returns length on miss - no None or -1 sentinel handling

    Example:
        >>> view = StringSlice.of("Hello %s")
        >>> view.find("%")
        6
        >>> view.prefix(5).text
        'Hello'
        >>> view.remove_prefix(6).text
        '%s'
        >>> view.find("x") == len(view)
        True
    """

    source: str
    start: int = 0
    length: int | None = None

    def __post_init__(self) -> None:
        """Resolve default length and validate bounds.

        Raises:
            ValueError: If the view would reach outside ``source``
        """
        if self.length is None:
            object.__setattr__(self, "length", len(self.source) - self.start)
        if self.start < 0 or self.start > len(self.source):
            msg = f"StringSlice.start {self.start} outside source of length {len(self.source)}"
            raise ValueError(msg)
        if self.length < 0 or self.start + self.length > len(self.source):  # type: ignore[operator]
            msg = (
                f"StringSlice.length {self.length} from {self.start} "
                f"exceeds source of length {len(self.source)}"
            )
            raise ValueError(msg)

    @classmethod
    def of(cls, value: str | FixedString | StringSlice) -> StringSlice:
        """View over a string, buffer, or existing slice.

        A buffer whose last character is NUL is viewed without it, so a
        ``null_terminated()`` buffer decays to the same text it was built from.
        Equality does not decay: ``StringSlice.of(buf) != buf`` for such a
        buffer, in either operand order, since the buffer still owns the NUL.
        """
        match value:
            case StringSlice():
                return value
            case FixedString():
                chars = value.chars
                if chars.endswith(NUL):
                    return cls(chars, 0, len(chars) - 1)
                return cls(chars)
            case str():
                return cls(value)
            case _:
                msg = f"Cannot view {type(value).__name__} as a StringSlice"
                raise TypeError(msg)

    @property
    def size(self) -> int:
        """Number of characters in view."""
        return self.length  # type: ignore[return-value]

    @property
    def end(self) -> int:
        """Offset in ``source`` one past the last viewed character."""
        return self.start + self.size

    @property
    def text(self) -> str:
        """Viewed characters as a string."""
        return self.source[self.start : self.end]

    def find(self, char: str) -> int:
        """Index of the first ``char``, or ``len(self)`` if absent."""
        index = self.source.find(char, self.start, self.end)
        return self.size if index == -1 else index - self.start

    def find_any(self, chars: frozenset[str]) -> int:
        """Index of the first character in ``chars``, or ``len(self)`` if none."""
        for offset in range(self.size):
            if self.source[self.start + offset] in chars:
                return offset
        return self.size

    def prefix(self, length: int) -> StringSlice:
        """First ``length`` characters; the whole view if ``length >= len(self)``."""
        if length >= self.size:
            return self
        return StringSlice(self.source, self.start, length)

    def remove_prefix(self, length: int) -> StringSlice:
        """View without its first ``length`` characters; empty if ``length >= len(self)``."""
        if length >= self.size:
            return StringSlice(self.source, self.end, 0)
        return StringSlice(self.source, self.start + length, self.size - length)

    def peek(self, index: int) -> str | None:
        """Character at ``index``, or None past the end of the view."""
        if 0 <= index < self.size:
            return self.source[self.start + index]
        return None

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int):
            msg = f"StringSlice indices must be integers, not {type(index).__name__}"
            raise TypeError(msg)
        if index < 0:
            index += self.size
        if not 0 <= index < self.size:
            msg = f"StringSlice index {index} out of range for length {self.size}"
            raise IndexError(msg)
        return self.source[self.start + index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.text)

    def __bool__(self) -> bool:
        return self.size > 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringSlice):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        if isinstance(other, FixedString):
            return self.text == other.chars
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"StringSlice({self.text!r}, start={self.start})"
