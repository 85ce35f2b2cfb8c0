"""Validation result for argument checking.

Collects every argument failure found while checking an argument list
against a Pattern, so callers can report all mismatches at once or
raise the first one.

Python 3.13+.
"""

from dataclasses import dataclass

from .errors import (
    ArgumentCountMismatchError,
    FormatArgumentError,
    TypeMismatchError,
)

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable outcome of validating arguments against a Pattern.

    Attributes:
        errors: Every failure found, count failure first, then type
            failures in positional order

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[FormatArgumentError, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True when no failures were found."""
        return len(self.errors) == 0

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def error_count(self) -> int:
        """Number of failures found."""
        return len(self.errors)

    @property
    def count_error(self) -> ArgumentCountMismatchError | None:
        """The argument-count failure, if any."""
        for error in self.errors:
            if isinstance(error, ArgumentCountMismatchError):
                return error
        return None

    @property
    def type_errors(self) -> tuple[TypeMismatchError, ...]:
        """Type failures in positional order."""
        return tuple(e for e in self.errors if isinstance(e, TypeMismatchError))

    def raise_for_errors(self) -> None:
        """Raise the first failure, if any.

        Raises:
            FormatArgumentError: The first collected failure
        """
        if self.errors:
            raise self.errors[0]

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a result with no failures."""
        return ValidationResult(errors=())

    @staticmethod
    def invalid(errors: tuple[FormatArgumentError, ...]) -> "ValidationResult":
        """Create a result carrying the given failures."""
        return ValidationResult(errors=errors)

    def format(self) -> str:
        """Format result as human-readable text, one failure per line."""
        if self.is_valid:
            return "Validation passed: arguments match pattern"
        lines = [f"Errors ({self.error_count}):"]
        for error in self.errors:
            if error.diagnostic is not None:
                lines.append(f"  [{error.diagnostic.code.name}]: {error.diagnostic.message}")
            else:
                lines.append(f"  {error}")
        return "\n".join(lines)
