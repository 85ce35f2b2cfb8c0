"""staticfmt runtime package.

Provides validation, rendering, the pattern cache and the StaticFormatter
API. Depends on the syntax package for parsing.

Python 3.13+.
"""

from staticfmt.diagnostics import ValidationResult

from .cache import PatternCache
from .config import EngineConfig
from .engine import StaticFormatter, format_pattern
from .renderer import render
from .validator import validate

__all__ = [
    "EngineConfig",
    "PatternCache",
    "StaticFormatter",
    "ValidationResult",
    "format_pattern",
    "render",
    "validate",
]
