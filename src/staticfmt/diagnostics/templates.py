"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every failure message:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    @staticmethod
    def unrecognized_conversion(
        code: str,
        span: SourceSpan | None,
        known_codes: Iterable[str] = (),
    ) -> Diagnostic:
        """Conversion code has no registry entry.

        Args:
            code: The character following the delimiter
            span: Location of the specifier in the pattern
            known_codes: Codes the registry does know, for the hint

        Returns:
            Diagnostic for UNRECOGNIZED_CONVERSION
        """
        msg = f"Unrecognized conversion '%{code}'"
        known = ", ".join(f"'%{c}'" for c in sorted(known_codes))
        hint = f"Known conversions: {known}" if known else "Register the conversion first"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_CONVERSION,
            message=msg,
            span=span,
            hint=f"{hint}; write '%%' for a literal '%'",
            conversion=code,
        )

    @staticmethod
    def incomplete_specifier(span: SourceSpan | None) -> Diagnostic:
        """Delimiter is the last character of the pattern.

        Args:
            span: Location of the dangling delimiter

        Returns:
            Diagnostic for INCOMPLETE_SPECIFIER
        """
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_SPECIFIER,
            message="Pattern ends with an incomplete conversion specifier",
            span=span,
            hint="Add a conversion code after '%' or write '%%' for a literal '%'",
        )

    @staticmethod
    def pattern_too_long(length: int, limit: int) -> Diagnostic:
        """Pattern exceeds the configured maximum length.

        Args:
            length: Actual pattern length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for PATTERN_TOO_LONG
        """
        msg = f"Pattern length {length} exceeds maximum of {limit} characters"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_LONG,
            message=msg,
            hint="Raise EngineConfig.max_pattern_length if this pattern is intended",
        )

    @staticmethod
    def argument_count_mismatch(expected: int, supplied: int) -> Diagnostic:
        """Argument count differs from positional specifier count.

        Args:
            expected: Number of argument-consuming specifiers
            supplied: Number of arguments passed

        Returns:
            Diagnostic for ARGUMENT_COUNT_TOO_FEW or ARGUMENT_COUNT_TOO_MANY
        """
        if supplied < expected:
            code = DiagnosticCode.ARGUMENT_COUNT_TOO_FEW
            msg = f"Too few arguments for format: expected {expected}, got {supplied}"
        else:
            code = DiagnosticCode.ARGUMENT_COUNT_TOO_MANY
            msg = f"Too many arguments for format: expected {expected}, got {supplied}"
        return Diagnostic(
            code=code,
            message=msg,
            hint="Pass exactly one argument per conversion; '%%' consumes none",
        )

    @staticmethod
    def type_mismatch(
        index: int,
        conversion: str,
        expected: str,
        received: str,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Argument fails its specifier's type requirement.

        Args:
            index: Positional index of the argument
            conversion: Conversion code of the specifier
            expected: Requirement category (e.g. "integral")
            received: Type name of the supplied value

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        msg = (
            f"Mismatched format types: argument {index} for '%{conversion}' "
            f"must be {expected}, got {received}"
        )
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=msg,
            span=span,
            hint=f"Convert argument {index} to {expected} before formatting",
            conversion=conversion,
            argument_index=index,
            expected_type=expected,
            received_type=received,
        )

    @staticmethod
    def invalid_conversion_code(code: str, reason: str) -> Diagnostic:
        """Registration attempted with an unusable conversion code.

        Args:
            code: The rejected code
            reason: Why it was rejected

        Returns:
            Diagnostic for INVALID_CONVERSION_CODE
        """
        msg = f"Invalid conversion code {code!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CONVERSION_CODE,
            message=msg,
            conversion=code,
        )

    @staticmethod
    def registry_frozen() -> Diagnostic:
        """Registration attempted on a frozen registry.

        Returns:
            Diagnostic for REGISTRY_FROZEN
        """
        return Diagnostic(
            code=DiagnosticCode.REGISTRY_FROZEN,
            message="Cannot modify frozen ConversionRegistry",
            hint="Use registry.copy() or create_default_registry() to get a mutable registry",
        )
