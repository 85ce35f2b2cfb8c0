"""Conversion registry: one-character codes to typed conversions.

Maps each conversion code (the character after ``%``) to a
ConversionDescriptor holding:
    - the type requirement its argument must meet
    - whether it consumes a positional argument
    - how it renders

Architecture:
    - ConversionRegistry: Manages registration and lookup
    - create_default_registry(): Fresh registry with ``d`` and ``s``
    - get_shared_registry(): Frozen, lazily built shared instance

Example:
    >>> registry = create_default_registry()
    >>> registry.register_literal("n", "\\n")
    >>> registry.lookup("d").requirement.category
    'integral'
    >>> "n" in registry
    True

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from staticfmt.constants import CONVERSION_CODE_LENGTH, PRINTF_DELIMITER
from staticfmt.core import FixedString
from staticfmt.diagnostics import ErrorTemplate, RegistryFrozenError
from staticfmt.enums import SpecifierKind

from .formatters import Formatter, format_integer, format_literal, format_string
from .requirements import INTEGRAL, STRING_SLICE, TypeRequirement

__all__ = [
    "ConversionDescriptor",
    "ConversionRegistry",
    "create_default_registry",
    "get_shared_registry",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConversionDescriptor:
    """Immutable description of one conversion code.

    Attributes:
        code: The conversion character (e.g. "d")
        kind: ESCAPE, LITERAL or CONVERSION
        requirement: Type requirement of the argument (None when no
            argument is consumed)
        formatter: Renders the argument (None when no argument is consumed)
        literal: Text rendered by non-consuming descriptors
    """

    code: str
    kind: SpecifierKind
    requirement: TypeRequirement | None = None
    formatter: Formatter | None = None
    literal: str = ""

    @classmethod
    def conversion(
        cls,
        code: str,
        requirement: TypeRequirement,
        formatter: Formatter,
    ) -> ConversionDescriptor:
        """Descriptor consuming one argument."""
        return cls(
            code=code,
            kind=SpecifierKind.CONVERSION,
            requirement=requirement,
            formatter=formatter,
        )

    @classmethod
    def literal_text(cls, code: str, text: str) -> ConversionDescriptor:
        """Descriptor rendering ``text`` and consuming nothing."""
        return cls(code=code, kind=SpecifierKind.LITERAL, literal=text)

    @classmethod
    def escape(cls, delimiter: str) -> ConversionDescriptor:
        """Descriptor for a doubled delimiter, rendering the delimiter."""
        return cls(code=delimiter, kind=SpecifierKind.ESCAPE, literal=delimiter)

    @property
    def consumes_arg(self) -> bool:
        """True when the descriptor binds a positional argument."""
        return self.kind is SpecifierKind.CONVERSION

    @property
    def category(self) -> str | None:
        """Requirement category, for diagnostics and introspection."""
        return self.requirement.category if self.requirement is not None else None

    def accepts(self, value: object) -> bool:
        """Check ``value`` against the requirement; non-consuming accept nothing."""
        return self.requirement is not None and self.requirement.is_satisfied_by(value)

    def render(self, value: object = None) -> FixedString:
        """Render the argument (or the stored literal) into a buffer.

        Raises:
            TypeError: If the formatter returns something other than a FixedString
        """
        if self.formatter is None:
            return format_literal(self.literal)
        rendered = self.formatter(value)
        if not isinstance(rendered, FixedString):
            msg = (
                f"Formatter for '%{self.code}' must return FixedString, "
                f"got {type(rendered).__name__}"
            )
            raise TypeError(msg)
        return rendered


class ConversionRegistry:
    """Manages the mapping from conversion code to descriptor.

    Supports dict-like introspection:
        - list_codes(): List all registered codes
        - lookup(code): Get descriptor or None
        - __iter__ / __len__ / __contains__

    Memory Optimization:
        Uses __slots__ for memory efficiency (avoids per-instance __dict__).

    Example:
        >>> registry = ConversionRegistry()
        >>> registry.register("d", INTEGRAL, format_integer)
        >>> "d" in registry
        True
        >>> len(registry)
        1
    """

    __slots__ = ("_conversions", "_frozen")

    def __init__(self) -> None:
        """Initialize empty, mutable registry."""
        self._conversions: dict[str, ConversionDescriptor] = {}
        self._frozen = False

    def register(
        self,
        code: str,
        requirement: TypeRequirement,
        formatter: Formatter,
    ) -> None:
        """Register a conversion that consumes one argument.

        Re-registering a code replaces the previous descriptor.

        Args:
            code: Single conversion character
            requirement: Type requirement the argument must meet
            formatter: Callable rendering a validated argument

        Raises:
            RegistryFrozenError: If the registry is frozen
            ValueError: If ``code`` is not a single non-delimiter character
        """
        self._add(ConversionDescriptor.conversion(code, requirement, formatter))

    def register_literal(self, code: str, text: str) -> None:
        """Register a conversion that renders ``text`` and consumes nothing.

        Raises:
            RegistryFrozenError: If the registry is frozen
            ValueError: If ``code`` is not a single non-delimiter character
        """
        self._add(ConversionDescriptor.literal_text(code, text))

    def _add(self, descriptor: ConversionDescriptor) -> None:
        if self._frozen:
            raise RegistryFrozenError(ErrorTemplate.registry_frozen())
        self._check_code(descriptor.code)
        self._conversions[descriptor.code] = descriptor
        logger.debug("Registered conversion '%%%s' (%s)", descriptor.code, descriptor.kind)

    @staticmethod
    def _check_code(code: str) -> None:
        if not isinstance(code, str) or len(code) != CONVERSION_CODE_LENGTH:
            diagnostic = ErrorTemplate.invalid_conversion_code(
                str(code), "must be exactly one character"
            )
            raise ValueError(diagnostic.message)
        if code == PRINTF_DELIMITER:
            diagnostic = ErrorTemplate.invalid_conversion_code(
                code, "the delimiter is reserved for escapes"
            )
            raise ValueError(diagnostic.message)

    def lookup(self, code: str) -> ConversionDescriptor | None:
        """Descriptor for ``code``, or None if unregistered."""
        return self._conversions.get(code)

    def list_codes(self) -> list[str]:
        """All registered codes in registration order."""
        return list(self._conversions)

    def freeze(self) -> None:
        """Make the registry read-only. Irreversible; use copy() to edit."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def copy(self) -> ConversionRegistry:
        """Create an unfrozen shallow copy.

        Descriptors are immutable and shared; adding codes to the copy
        does not affect the original.
        """
        new_registry = ConversionRegistry()
        new_registry._conversions = self._conversions.copy()
        return new_registry

    def __iter__(self) -> Iterator[str]:
        return iter(self._conversions)

    def __len__(self) -> int:
        return len(self._conversions)

    def __contains__(self, code: object) -> bool:
        return code in self._conversions

    def __repr__(self) -> str:
        return f"ConversionRegistry(codes={self.list_codes()!r}, frozen={self._frozen})"


def create_default_registry() -> ConversionRegistry:
    """Create a new, mutable registry with the built-in conversions.

    Built-ins:
        - ``d``: any integral argument, rendered as decimal
        - ``s``: string slice argument, copied verbatim

    Returns:
        Fresh ConversionRegistry; callers may register additional codes.

    See Also:
        get_shared_registry: Returns a shared frozen registry.
    """
    registry = ConversionRegistry()
    registry.register("d", INTEGRAL, format_integer)
    registry.register("s", STRING_SLICE, format_string)
    return registry


# Module-level cached default registry for sharing across formatters.
# Initialized lazily on first access to avoid import-time side effects.
_SHARED_REGISTRY: ConversionRegistry | None = None


def get_shared_registry() -> ConversionRegistry:
    """Get a shared, frozen registry with the built-in conversions.

    Immutability:
        The returned registry is FROZEN. Calling register() on it raises
        RegistryFrozenError. To add conversions, use copy() or
        create_default_registry().

    Returns:
        Frozen shared ConversionRegistry with ``d`` and ``s``.
    """
    global _SHARED_REGISTRY  # noqa: PLW0603
    if _SHARED_REGISTRY is None:
        _SHARED_REGISTRY = create_default_registry()
        _SHARED_REGISTRY.freeze()
    return _SHARED_REGISTRY
