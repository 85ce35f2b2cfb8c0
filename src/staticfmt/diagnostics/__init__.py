"""Diagnostic system for staticfmt errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    ArgumentCountMismatchError,
    FormatArgumentError,
    FormatSyntaxError,
    IncompleteSpecifierError,
    RegistryFrozenError,
    StaticFormatError,
    TypeMismatchError,
    UnrecognizedConversionCodeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "ArgumentCountMismatchError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormatArgumentError",
    "FormatSyntaxError",
    "IncompleteSpecifierError",
    "OutputFormat",
    "RegistryFrozenError",
    "SourceSpan",
    "StaticFormatError",
    "TypeMismatchError",
    "UnrecognizedConversionCodeError",
    "ValidationResult",
]
