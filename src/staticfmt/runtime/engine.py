"""StaticFormatter - Main API composing parse, validate and render.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Sequence
from typing import TypeAlias

from staticfmt.constants import LOG_TRUNCATE_DEBUG, LOG_TRUNCATE_WARNING
from staticfmt.conversions import (
    ConversionRegistry,
    Formatter,
    TypeRequirement,
    get_shared_registry,
)
from staticfmt.core import FixedString, StringSlice
from staticfmt.diagnostics import FormatSyntaxError, ValidationResult
from staticfmt.syntax import PRINTF_MODE, ParsingMode, Pattern, PatternParser

from .cache import PatternCache
from .config import EngineConfig
from .renderer import render
from .validator import validate

__all__ = ["StaticFormatter", "format_pattern"]

logger = logging.getLogger(__name__)

PatternSource: TypeAlias = str | StringSlice | FixedString | Pattern


class StaticFormatter:
    """Format engine owning a conversion registry, a parser and a cache.

    ``format()`` is the single entry point most callers need: it parses
    (or reuses) the pattern, validates the arguments, and renders. Parse
    and validation failures are raised before any rendering happens.

    Thread Safety:
        Parsing, validation and rendering are pure. The pattern cache is
        internally locked. add_conversion()/add_literal() mutate the
        registry; complete them before sharing the formatter across threads.

    Examples:
        >>> formatter = StaticFormatter()
        >>> str(formatter.format("Hello %%%s%%, this is number %d and %d", ["USER", 1, 5]))
        'Hello %USER%, this is number 1 and 5'
        >>>
        >>> # Parse once, render many times
        >>> pattern = formatter.parse("%d items")
        >>> str(formatter.format(pattern, [3]))
        '3 items'
        >>>
        >>> # Memoise parsed patterns
        >>> cached = StaticFormatter(EngineConfig(cache_enabled=True))
    """

    __slots__ = ("_cache", "_config", "_parser", "_registry")

    def __init__(
        self,
        config: EngineConfig | None = None,
        /,
        *,
        registry: ConversionRegistry | None = None,
        mode: ParsingMode = PRINTF_MODE,
    ) -> None:
        """Initialize formatter.

        Args:
            config: Engine configuration (default: EngineConfig())
            registry: Conversion registry to copy (default: shared registry
                with ``d`` and ``s``). The formatter always works on its own
                copy, so later changes to ``registry`` do not leak in.
            mode: Parsing mode (default: printf)
        """
        self._config = config if config is not None else EngineConfig()
        source_registry = registry if registry is not None else get_shared_registry()
        self._registry = source_registry.copy()
        self._parser = PatternParser(
            self._registry,
            mode=mode,
            max_pattern_length=self._config.max_pattern_length,
        )

        self._cache: PatternCache | None = None
        if self._config.cache_enabled:
            self._cache = PatternCache(maxsize=self._config.cache_size)

        logger.info(
            "StaticFormatter initialized (mode=%s, conversions=%s, cache=%s)",
            mode.name,
            "".join(self._registry.list_codes()),
            "enabled" if self._cache is not None else "disabled",
        )

    @property
    def config(self) -> EngineConfig:
        """Configuration this formatter was built with (read-only)."""
        return self._config

    @property
    def registry(self) -> ConversionRegistry:
        """Frozen snapshot of the formatter's conversions.

        Changes go through add_conversion()/add_literal(), which keep the
        pattern cache consistent. Use ``registry.copy()`` for a mutable
        registry to build another formatter from.
        """
        snapshot = self._registry.copy()
        snapshot.freeze()
        return snapshot

    @property
    def cache_enabled(self) -> bool:
        return self._cache is not None

    def cache_stats(self) -> dict[str, int | float] | None:
        """Pattern cache statistics, or None when caching is disabled."""
        return self._cache.get_stats() if self._cache is not None else None

    def clear_cache(self) -> None:
        """Drop every cached Pattern."""
        if self._cache is not None:
            self._cache.clear()
            logger.debug("Pattern cache manually cleared")

    def add_conversion(
        self,
        code: str,
        requirement: TypeRequirement,
        formatter: Formatter,
    ) -> None:
        """Register an argument-consuming conversion on this formatter.

        Clears the pattern cache, since cached Patterns were parsed against
        the previous registry.
        """
        self._registry.register(code, requirement, formatter)
        logger.debug("Added conversion: %%%s", code)
        self.clear_cache()

    def add_literal(self, code: str, text: str) -> None:
        """Register a non-consuming conversion rendering ``text``."""
        self._registry.register_literal(code, text)
        logger.debug("Added literal conversion: %%%s", code)
        self.clear_cache()

    def parse(self, source: PatternSource) -> Pattern:
        """Parse pattern text, reusing a cached Pattern when available.

        Raises:
            FormatSyntaxError: Unrecognized or incomplete conversion, or
                pattern too long
        """
        if isinstance(source, Pattern):
            return source

        text = str(StringSlice.of(source))
        if self._cache is not None:
            cached = self._cache.get(self._parser.mode.name, text)
            if cached is not None:
                logger.debug("Pattern cache hit: %s", text[:LOG_TRUNCATE_DEBUG])
                return cached

        try:
            pattern = self._parser.parse(source)
        except FormatSyntaxError as e:
            logger.warning(
                "Failed to parse pattern %r: %s",
                text[:LOG_TRUNCATE_WARNING],
                e.diagnostic.message if e.diagnostic else e,
            )
            raise

        if self._cache is not None:
            self._cache.put(pattern)
        return pattern

    def validate(self, pattern: PatternSource, args: Sequence[object] = ()) -> ValidationResult:
        """Check ``args`` against ``pattern`` and collect every failure."""
        return validate(self.parse(pattern), args)

    def render(self, pattern: PatternSource, args: Sequence[object] = ()) -> FixedString:
        """Render without validating. Call only after validate() succeeded."""
        return render(self.parse(pattern), args)

    def format(self, pattern: PatternSource, args: Sequence[object] = ()) -> FixedString:
        """Parse, validate and render in one step.

        Args:
            pattern: Pattern text, or a Pattern parsed earlier
            args: Ordered argument values

        Returns:
            Rendered buffer

        Raises:
            FormatSyntaxError: Pattern text could not be parsed
            FormatArgumentError: First argument count or type failure
        """
        parsed = self.parse(pattern)
        args = tuple(args)
        result = validate(parsed, args)
        if not result.is_valid:
            logger.warning(
                "Arguments rejected for pattern %r: %d error(s)",
                parsed.text[:LOG_TRUNCATE_WARNING],
                result.error_count,
            )
            for error in result.errors:
                logger.debug("  - %s: %s", type(error).__name__, error.diagnostic or error)
            result.raise_for_errors()

        output = render(parsed, args)
        logger.debug(
            "Formatted %r -> %r",
            parsed.text[:LOG_TRUNCATE_DEBUG],
            str(output)[:LOG_TRUNCATE_DEBUG],
        )
        return output

    def __repr__(self) -> str:
        return (
            f"StaticFormatter(mode={self._parser.mode.name!r}, "
            f"conversions={self._registry.list_codes()!r}, cache={self.cache_enabled})"
        )


def format_pattern(pattern: PatternSource, args: Sequence[object] = ()) -> FixedString:
    """Parse, validate and render with the built-in conversions.

    Accepts raw pattern text or a pre-parsed Pattern.

    Example:
        >>> str(format_pattern("%d-%s", [3, "x"]))
        '3-x'

    Raises:
        FormatSyntaxError: Pattern text could not be parsed
        FormatArgumentError: First argument count or type failure
    """
    parsed = pattern if isinstance(pattern, Pattern) else PatternParser().parse(pattern)
    args = tuple(args)
    validate(parsed, args).raise_for_errors()
    return render(parsed, args)
