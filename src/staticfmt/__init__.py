"""staticfmt - ahead-of-time printf-style formatting.

Parses a literal pattern once into literal spans and typed conversion
specifiers, validates argument lists against it exactly (count and type),
and renders into a fixed-size buffer whose length is the sum of its parts.

Public API:
    parse - Parse pattern text into a Pattern
    validate - Check arguments against a Pattern, collecting every failure
    render - Render a validated Pattern into a FixedString
    format - Parse, validate and render in one step
    StaticFormatter - Engine with its own registry, configuration and cache
    FixedString / StringSlice - Buffer and view types

Exceptions:
    StaticFormatError - Base exception class
    FormatSyntaxError - Parse errors (UnrecognizedConversionCodeError, ...)
    FormatArgumentError - Validation errors (ArgumentCountMismatchError,
        TypeMismatchError)

Submodules:
    staticfmt.conversions - Conversion registry, type requirements, formatters
    staticfmt.syntax - Parsing modes, parser and Pattern representation
    staticfmt.diagnostics - Error types, codes and formatting
    staticfmt.runtime - Validator, renderer, cache and StaticFormatter
"""

# Essential Public API - Minimal exports for clean namespace
from .conversions import ConversionRegistry, create_default_registry, get_shared_registry
from .core import FixedString, StringSlice
from .diagnostics import (
    ArgumentCountMismatchError,
    FormatArgumentError,
    FormatSyntaxError,
    IncompleteSpecifierError,
    StaticFormatError,
    TypeMismatchError,
    UnrecognizedConversionCodeError,
    ValidationResult,
)
from .runtime import EngineConfig, StaticFormatter, render, validate
from .runtime import format_pattern as format  # noqa: A004 - public name
from .syntax import Pattern, Specifier, parse

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("staticfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArgumentCountMismatchError",
    "ConversionRegistry",
    "EngineConfig",
    "FixedString",
    "FormatArgumentError",
    "FormatSyntaxError",
    "IncompleteSpecifierError",
    "Pattern",
    "Specifier",
    "StaticFormatError",
    "StaticFormatter",
    "StringSlice",
    "TypeMismatchError",
    "UnrecognizedConversionCodeError",
    "ValidationResult",
    "__version__",
    "create_default_registry",
    "format",
    "get_shared_registry",
    "parse",
    "render",
    "validate",
]
