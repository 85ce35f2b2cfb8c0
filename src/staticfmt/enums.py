"""Enumerations for staticfmt type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class RequirementKind(StrEnum):
    """How a conversion constrains the type of its argument.

    StrEnum provides automatic string conversion: str(RequirementKind.EXACT) == "exact"
    """

    EXACT = "exact"
    """Argument must be one specific type, or a type that decays to it: %s"""

    PREDICATE = "predicate"
    """Argument must satisfy a capability check: %d (any integral type)"""


class SpecifierKind(StrEnum):
    """What a parsed specifier does when rendered.

    StrEnum provides automatic string conversion: str(SpecifierKind.ESCAPE) == "escape"
    """

    ESCAPE = "escape"
    """Doubled delimiter rendering the delimiter itself: %%"""

    LITERAL = "literal"
    """Registered code rendering fixed text, consuming no argument"""

    CONVERSION = "conversion"
    """Registered code rendering its positional argument: %d, %s"""


__all__ = [
    "RequirementKind",
    "SpecifierKind",
]
