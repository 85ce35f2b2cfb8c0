"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Phase in which a failure was detected.

    Categories:
        SYNTAX: Pattern parsing failure (unknown or incomplete conversion)
        ARGUMENT: Argument validation failure (count or type mismatch)
        REGISTRY: Conversion registry misuse (invalid code, frozen registry)
    """

    SYNTAX = "syntax"
    ARGUMENT = "argument"
    REGISTRY = "registry"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2099: Argument errors (validation failures)
        3000-3099: Syntax errors (parser failures)
        4000-4099: Registry errors (conversion registration)
    """

    # Argument errors (2000-2099)
    ARGUMENT_COUNT_TOO_FEW = 2001
    ARGUMENT_COUNT_TOO_MANY = 2002
    TYPE_MISMATCH = 2003

    # Syntax errors (3000-3099)
    UNRECOGNIZED_CONVERSION = 3001
    INCOMPLETE_SPECIFIER = 3002
    PATTERN_TOO_LONG = 3003

    # Registry errors (4000-4099)
    INVALID_CONVERSION_CODE = 4001
    REGISTRY_FROZEN = 4002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 3000:
            return ErrorCategory.ARGUMENT
        if self.value < 4000:
            return ErrorCategory.SYNTAX
        return ErrorCategory.REGISTRY


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a specifier inside pattern text.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line
                or column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the pattern (None for argument-count errors)
        hint: Suggestion for fixing the error
        conversion: Conversion code involved (e.g. "d"), if any
        argument_index: Positional argument index involved, if any
        expected_type: Expected requirement category (e.g. "integral")
        received_type: Type name of the supplied argument
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    conversion: str | None = None
    argument_index: int | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def category(self) -> ErrorCategory:
        """Category of the underlying code."""
        return self.code.category

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[TYPE_MISMATCH]: Argument 0 does not satisfy '%d'
              --> line 1, column 1
              = argument: 0
              = expected: integral
              = received: str
              = help: Pass an int for '%d'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
