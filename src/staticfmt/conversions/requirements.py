"""Type requirements a conversion imposes on its argument.

Two kinds exist:
    - ExactType: the argument's type must be the target type, or one of the
      types that decay to it (``str`` and ``FixedString`` decay to
      ``StringSlice`` the way a character array decays to a view).
    - PredicateType: the argument must satisfy a capability check
      (``is_integral`` accepts every integer width and signedness).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import numbers
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from staticfmt.core import FixedString, StringSlice
from staticfmt.enums import RequirementKind

__all__ = [
    "INTEGRAL",
    "STRING_SLICE",
    "ExactType",
    "PredicateType",
    "TypeRequirement",
    "is_integral",
    "type_name",
]


def is_integral(value: object) -> bool:
    """True for integers of any width; False for bool.

    Accepts ``int`` and any registered ``numbers.Integral`` (e.g. numpy
    integer scalars). ``bool`` is excluded so ``%d`` never renders ``True``
    as ``1`` by accident.

    Example:
        >>> is_integral(-7)
        True
        >>> is_integral(True)
        False
        >>> is_integral(7.0)
        False
    """
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def type_name(value: object) -> str:
    """Qualified-enough type name for diagnostics."""
    return type(value).__name__


@dataclass(frozen=True, slots=True)
class ExactType:
    """Argument must be ``target`` or one of ``decays_from``.

    Attributes:
        target: The required type
        category: Human-readable name used in diagnostics
        decays_from: Types implicitly converted to ``target``
    """

    target: type
    category: str
    decays_from: tuple[type, ...] = ()

    @property
    def kind(self) -> RequirementKind:
        return RequirementKind.EXACT

    def is_satisfied_by(self, value: object) -> bool:
        """Check the argument against the requirement."""
        if type(value) is self.target:
            return True
        return bool(self.decays_from) and isinstance(value, self.decays_from)


@dataclass(frozen=True, slots=True)
class PredicateType:
    """Argument must satisfy ``predicate``.

    Attributes:
        predicate: Capability check applied to the argument
        category: Human-readable name used in diagnostics
    """

    predicate: Callable[[object], bool]
    category: str

    @property
    def kind(self) -> RequirementKind:
        return RequirementKind.PREDICATE

    def is_satisfied_by(self, value: object) -> bool:
        """Check the argument against the requirement."""
        return bool(self.predicate(value))


TypeRequirement: TypeAlias = ExactType | PredicateType

# Built-in requirements used by the default registry.
STRING_SLICE: ExactType = ExactType(
    target=StringSlice,
    category="string slice",
    decays_from=(str, FixedString),
)
INTEGRAL: PredicateType = PredicateType(predicate=is_integral, category="integral")
