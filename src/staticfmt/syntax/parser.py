"""Pattern parser: pattern text to Pattern.

Single left-to-right pass over a shrinking view of the pattern. Each
step asks the parsing mode for the next delimiter and then:

    1. No delimiter: the rest of the view is the final literal span.
    2. Doubled delimiter: escape specifier rendering the delimiter;
       no argument consumed.
    3. Delimiter + code: registry lookup; consuming conversions take the
       next positional index.
    4. Delimiter at the very end: incomplete specifier.

Spans and specifiers are collected into lists and frozen into a Pattern
only once the whole text has been consumed, so a failing parse never
exposes a partial Pattern.

Python 3.13+. Zero external dependencies.
"""

from staticfmt.constants import MAX_PATTERN_LENGTH
from staticfmt.conversions import (
    ConversionDescriptor,
    ConversionRegistry,
    get_shared_registry,
)
from staticfmt.core import FixedString, StringSlice
from staticfmt.diagnostics import (
    ErrorTemplate,
    FormatSyntaxError,
    IncompleteSpecifierError,
    UnrecognizedConversionCodeError,
)

from .modes import PRINTF_MODE, ParsingMode
from .pattern import Pattern, Specifier
from .position import span_for

__all__ = ["PatternParser"]

# Delimiter plus one conversion character.
_SPECIFIER_WIDTH: int = 2


class PatternParser:
    """Parses pattern text against a conversion registry.

    The parser holds no per-parse state; one instance may parse any number
    of patterns concurrently.

    Example:
        >>> parser = PatternParser()
        >>> pattern = parser.parse("Hello %%%s%%")
        >>> [spec.code for spec in pattern.specifiers]
        ['%', 's', '%']
        >>> [spec.index for spec in pattern.specifiers]
        [None, 0, None]
    """

    __slots__ = ("_max_pattern_length", "_mode", "_registry")

    def __init__(
        self,
        registry: ConversionRegistry | None = None,
        *,
        mode: ParsingMode = PRINTF_MODE,
        max_pattern_length: int = MAX_PATTERN_LENGTH,
    ) -> None:
        """Initialize parser.

        Args:
            registry: Conversion registry (default: shared frozen registry)
            mode: Parsing mode locating delimiters (default: printf)
            max_pattern_length: Longest accepted pattern, in characters
        """
        self._registry = registry if registry is not None else get_shared_registry()
        self._mode = mode
        self._max_pattern_length = max_pattern_length

    @property
    def registry(self) -> ConversionRegistry:
        return self._registry

    @property
    def mode(self) -> ParsingMode:
        return self._mode

    def parse(self, source: str | StringSlice | FixedString) -> Pattern:
        """Parse pattern text into an immutable Pattern.

        Args:
            source: Pattern text, or a view/buffer holding it

        Returns:
            Pattern with len(specifiers) + 1 literal spans

        Raises:
            UnrecognizedConversionCodeError: A ``%<code>`` with no registry entry
            IncompleteSpecifierError: The pattern ends with a lone delimiter
            FormatSyntaxError: The pattern exceeds max_pattern_length
        """
        view = StringSlice.of(source)
        if len(view) > self._max_pattern_length:
            raise FormatSyntaxError(
                ErrorTemplate.pattern_too_long(len(view), self._max_pattern_length)
            )

        literals: list[StringSlice] = []
        specifiers: list[Specifier] = []
        next_index = 0
        remaining = view

        while True:
            found = self._mode.find_delimiter(remaining)
            if found == len(remaining):
                literals.append(remaining)
                break

            start = remaining.start - view.start + found
            descriptor = self._descriptor_at(view, remaining, found)

            index: int | None = None
            if descriptor.consumes_arg:
                index = next_index
                next_index += 1

            literals.append(remaining.prefix(found))
            specifiers.append(
                Specifier(
                    descriptor=descriptor,
                    index=index,
                    start=start,
                    end=start + _SPECIFIER_WIDTH,
                )
            )
            remaining = remaining.remove_prefix(found + _SPECIFIER_WIDTH)

        return Pattern(
            source=view,
            literals=tuple(literals),
            specifiers=tuple(specifiers),
            mode=self._mode.name,
        )

    def _descriptor_at(
        self,
        view: StringSlice,
        remaining: StringSlice,
        found: int,
    ) -> ConversionDescriptor:
        """Resolve the specifier whose delimiter sits at ``remaining[found]``."""
        delimiter = remaining[found]
        code = remaining.peek(found + 1)
        offset = remaining.start + found - view.start

        if code is None:
            span = span_for(view.text, offset, offset + 1)
            raise IncompleteSpecifierError(
                ErrorTemplate.incomplete_specifier(span), position=offset
            )

        if code == delimiter:
            return ConversionDescriptor.escape(delimiter)

        descriptor = self._registry.lookup(code)
        if descriptor is None:
            span = span_for(view.text, offset, offset + _SPECIFIER_WIDTH)
            raise UnrecognizedConversionCodeError(
                ErrorTemplate.unrecognized_conversion(code, span, self._registry),
                code=code,
                position=offset,
            )
        return descriptor

    def __repr__(self) -> str:
        return f"PatternParser(mode={self._mode.name!r}, registry={self._registry!r})"
