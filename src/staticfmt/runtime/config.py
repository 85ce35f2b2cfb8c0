"""Engine configuration for StaticFormatter.

Provides a single frozen dataclass that encapsulates all tunable
parameters of a StaticFormatter.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from staticfmt.constants import DEFAULT_CACHE_SIZE, MAX_PATTERN_LENGTH

__all__ = ["EngineConfig"]


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable configuration for StaticFormatter.

    All fields have sensible defaults; ``EngineConfig()`` with no arguments
    produces a usable configuration.

    Attributes:
        cache_enabled: Memoise parsed Patterns by pattern text (default: False)
        cache_size: Maximum cached Patterns (default: 1000)
        max_pattern_length: Longest accepted pattern in characters
            (default: 1 MiB)

    Example:
        >>> config = EngineConfig(cache_enabled=True, cache_size=64)
        >>> formatter = StaticFormatter(config)
        >>> formatter.cache_enabled
        True
    """

    cache_enabled: bool = False
    cache_size: int = DEFAULT_CACHE_SIZE
    max_pattern_length: int = MAX_PATTERN_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If cache_size or max_pattern_length is not positive
        """
        if self.cache_size <= 0:
            msg = "cache_size must be positive"
            raise ValueError(msg)
        if self.max_pattern_length <= 0:
            msg = "max_pattern_length must be positive"
            raise ValueError(msg)
