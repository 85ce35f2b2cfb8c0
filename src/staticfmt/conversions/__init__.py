"""Conversion codes: type requirements, formatters and the registry.

Sits between core and syntax in the dependency graph:

    core <- conversions <- syntax <- runtime

Python 3.13+.
"""

from .formatters import Formatter, format_integer, format_literal, format_string
from .registry import (
    ConversionDescriptor,
    ConversionRegistry,
    create_default_registry,
    get_shared_registry,
)
from .requirements import (
    INTEGRAL,
    STRING_SLICE,
    ExactType,
    PredicateType,
    TypeRequirement,
    is_integral,
    type_name,
)

__all__ = [
    "INTEGRAL",
    "STRING_SLICE",
    "ConversionDescriptor",
    "ConversionRegistry",
    "ExactType",
    "Formatter",
    "PredicateType",
    "TypeRequirement",
    "create_default_registry",
    "format_integer",
    "format_literal",
    "format_string",
    "get_shared_registry",
    "is_integral",
    "type_name",
]
