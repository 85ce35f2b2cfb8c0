"""Shared constants for staticfmt.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Pattern syntax: Delimiter and escape characters of the printf mode
- Input limits: Size bounds on pattern text
- Cache limits: Memory bounds for the pattern cache
- Logging: Truncation lengths for pattern text in log records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern syntax
    "PRINTF_DELIMITER",
    "CONVERSION_CODE_LENGTH",
    # Input limits
    "MAX_PATTERN_LENGTH",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    # Logging
    "LOG_TRUNCATE_WARNING",
    "LOG_TRUNCATE_DEBUG",
]

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# The single delimiter character of printf-style patterns.
# "%%" renders a literal "%"; "%<code>" is a conversion.
PRINTF_DELIMITER: str = "%"

# A conversion is exactly one character following the delimiter.
CONVERSION_CODE_LENGTH: int = 1

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum pattern length in characters (1 MiB of text).
# Patterns are literals known ahead of time; anything larger is almost
# certainly generated data being passed where a pattern is expected.
MAX_PATTERN_LENGTH: int = 1024 * 1024

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum cached Patterns per StaticFormatter.
# 1000 entries covers the distinct literal patterns of a typical application.
DEFAULT_CACHE_SIZE: int = 1000

# ============================================================================
# LOGGING
# ============================================================================

# Warnings show more context as they're surfaced to users.
# Debug messages are high-volume; shorter keeps logs manageable.
LOG_TRUNCATE_WARNING: int = 100
LOG_TRUNCATE_DEBUG: int = 50
