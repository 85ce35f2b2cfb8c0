"""Argument validation against a parsed Pattern.

Checks, in order:
    1. Count: len(args) must equal the number of argument-consuming
       specifiers. Too few and too many carry distinct diagnostic codes.
    2. Type: every consuming specifier whose index falls inside ``args``
       must accept ``args[index]``.

Every rule is evaluated and every failure collected; callers decide
whether to report all of them or raise the first.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from staticfmt.conversions import type_name
from staticfmt.diagnostics import (
    ArgumentCountMismatchError,
    ErrorTemplate,
    FormatArgumentError,
    TypeMismatchError,
    ValidationResult,
)
from staticfmt.syntax import Pattern, Specifier

__all__ = ["validate"]


def validate(pattern: Pattern, args: Sequence[object]) -> ValidationResult:
    """Check an argument list against a Pattern.

    Args:
        pattern: Parsed pattern
        args: Ordered argument values

    Returns:
        ValidationResult; ``is_valid`` is True only when count and every
        type match

    Example:
        >>> from staticfmt import parse
        >>> validate(parse("%d"), [1]).is_valid
        True
        >>> validate(parse("%d"), ["x"]).type_errors[0].index
        0
    """
    errors: list[FormatArgumentError] = []

    expected = pattern.argument_count
    supplied = len(args)
    if supplied != expected:
        errors.append(
            ArgumentCountMismatchError(
                ErrorTemplate.argument_count_mismatch(expected, supplied),
                expected=expected,
                supplied=supplied,
            )
        )

    for spec in pattern.positional_specifiers():
        index = spec.index
        if index is None or index >= supplied:
            continue
        value = args[index]
        if not spec.descriptor.accepts(value):
            errors.append(_type_mismatch(pattern, spec, index, value))

    if errors:
        return ValidationResult.invalid(tuple(errors))
    return ValidationResult.valid()


def _type_mismatch(
    pattern: Pattern,
    spec: Specifier,
    index: int,
    value: object,
) -> TypeMismatchError:
    expected = spec.descriptor.category or "no argument"
    received = type_name(value)
    return TypeMismatchError(
        ErrorTemplate.type_mismatch(
            index,
            spec.code,
            expected,
            received,
            pattern.span_of(spec),
        ),
        index=index,
        expected=expected,
        received=received,
    )
