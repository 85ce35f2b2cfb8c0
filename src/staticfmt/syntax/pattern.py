"""Parsed pattern representation.

A Pattern is K+1 literal spans interleaved with K specifiers, in source
order::

    literals[0] specifiers[0] literals[1] ... specifiers[K-1] literals[K]

Patterns are built once by the parser and never mutated; the same
Pattern can be validated and rendered any number of times, from any
number of threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

from staticfmt.conversions import ConversionDescriptor, TypeRequirement
from staticfmt.core import StringSlice
from staticfmt.diagnostics import SourceSpan
from staticfmt.enums import SpecifierKind

from .position import span_for

__all__ = ["FormatOptions", "Pattern", "PatternElement", "Specifier"]


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Per-specifier options.

    Reserved for width, precision and padding; no option is implemented,
    so every specifier carries the empty default.
    """


@dataclass(frozen=True, slots=True)
class Specifier:
    """One parsed ``%<code>`` unit.

    Attributes:
        descriptor: Registry descriptor (or escape descriptor for ``%%``)
        index: Positional argument index; None for non-consuming specifiers
        start: Offset of the delimiter in the pattern text
        end: Offset one past the conversion code
        options: Per-specifier options (always empty)
    """

    descriptor: ConversionDescriptor
    index: int | None
    start: int
    end: int
    options: FormatOptions = field(default_factory=FormatOptions)

    def __post_init__(self) -> None:
        """Validate that only consuming specifiers carry an index."""
        if self.descriptor.consumes_arg != (self.index is not None):
            msg = (
                f"Specifier '%{self.descriptor.code}' index {self.index!r} "
                f"does not match consumes_arg={self.descriptor.consumes_arg}"
            )
            raise ValueError(msg)

    @property
    def code(self) -> str:
        return self.descriptor.code

    @property
    def kind(self) -> SpecifierKind:
        return self.descriptor.kind

    @property
    def requirement(self) -> TypeRequirement | None:
        return self.descriptor.requirement

    @property
    def consumes_arg(self) -> bool:
        return self.index is not None


PatternElement: TypeAlias = StringSlice | Specifier


@dataclass(frozen=True, slots=True)
class Pattern:
    """Immutable parsed pattern.

    Attributes:
        source: View over the full pattern text
        literals: K+1 literal spans, viewing ``source``
        specifiers: K specifiers in source order
        mode: Name of the parsing mode that produced the pattern

    Example:
        >>> from staticfmt import parse
        >>> pattern = parse("%d-%s")
        >>> [str(span) for span in pattern.literals]
        ['', '-', '']
        >>> pattern.argument_count
        2
    """

    source: StringSlice
    literals: tuple[StringSlice, ...]
    specifiers: tuple[Specifier, ...]
    mode: str = "printf"

    def __post_init__(self) -> None:
        """Validate the interleaving invariant.

        Raises:
            ValueError: If there is not exactly one more literal than specifiers
        """
        if len(self.literals) != len(self.specifiers) + 1:
            msg = (
                f"Pattern must have len(specifiers) + 1 literals, got "
                f"{len(self.literals)} literals for {len(self.specifiers)} specifiers"
            )
            raise ValueError(msg)

    @property
    def text(self) -> str:
        """Full pattern text."""
        return self.source.text

    @property
    def argument_count(self) -> int:
        """Number of specifiers that consume an argument."""
        return sum(1 for spec in self.specifiers if spec.index is not None)

    @property
    def literal_length(self) -> int:
        """Characters contributed to every rendering by literal spans."""
        return sum(len(span) for span in self.literals)

    def positional_specifiers(self) -> tuple[Specifier, ...]:
        """Argument-consuming specifiers, ordered by positional index."""
        return tuple(spec for spec in self.specifiers if spec.index is not None)

    def elements(self) -> Iterator[PatternElement]:
        """Yield literal spans and specifiers interleaved in source order."""
        yield self.literals[0]
        for spec, span in zip(self.specifiers, self.literals[1:], strict=True):
            yield spec
            yield span

    def span_of(self, specifier: Specifier) -> SourceSpan:
        """Line/column location of ``specifier`` within the pattern text."""
        return span_for(self.text, specifier.start, specifier.end)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return (
            f"Pattern({self.text!r}, specifiers={len(self.specifiers)}, "
            f"arguments={self.argument_count})"
        )
