"""staticfmt exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "ArgumentCountMismatchError",
    "FormatArgumentError",
    "FormatSyntaxError",
    "IncompleteSpecifierError",
    "RegistryFrozenError",
    "StaticFormatError",
    "TypeMismatchError",
    "UnrecognizedConversionCodeError",
]


class StaticFormatError(Exception):
    """Base exception for all staticfmt errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StaticFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Failure category, when a diagnostic is attached."""
        return self.diagnostic.category if self.diagnostic else None


class FormatSyntaxError(StaticFormatError):
    """Pattern text could not be parsed.

    Raised by the parser. No partial Pattern is ever returned.
    """


class UnrecognizedConversionCodeError(FormatSyntaxError):
    """A '%<code>' whose code has no registry entry.

    Attributes:
        code: The unrecognized conversion character
        position: Offset of the delimiter in the pattern
    """

    def __init__(self, message: str | Diagnostic, *, code: str, position: int) -> None:
        super().__init__(message)
        self.code = code
        self.position = position


class IncompleteSpecifierError(FormatSyntaxError):
    """Pattern ends with a delimiter and no conversion code.

    Attributes:
        position: Offset of the dangling delimiter
    """

    def __init__(self, message: str | Diagnostic, *, position: int) -> None:
        super().__init__(message)
        self.position = position


class FormatArgumentError(StaticFormatError):
    """Argument list does not match a parsed Pattern.

    Raised (or collected) by validation, always before rendering.
    """


class ArgumentCountMismatchError(FormatArgumentError):
    """Number of arguments differs from number of positional specifiers.

    Attributes:
        expected: Positional specifiers in the pattern
        supplied: Arguments passed by the caller
    """

    def __init__(self, message: str | Diagnostic, *, expected: int, supplied: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.supplied = supplied

    @property
    def too_few(self) -> bool:
        """True when fewer arguments than specifiers were supplied."""
        return self.supplied < self.expected

    @property
    def too_many(self) -> bool:
        """True when more arguments than specifiers were supplied."""
        return self.supplied > self.expected


class TypeMismatchError(FormatArgumentError):
    """Argument type fails its specifier's requirement.

    Attributes:
        index: Positional index of the offending argument
        expected: Requirement category (e.g. "integral", "string slice")
        received: Type name of the supplied value
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        index: int,
        expected: str,
        received: str,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.expected = expected
        self.received = received


class RegistryFrozenError(StaticFormatError, TypeError):
    """Attempt to register a conversion on a frozen registry."""
