"""Pattern renderer: validated Pattern + arguments to FixedString.

Walks the pattern's elements in source order, renders each specifier with
its descriptor's formatter, and joins literal spans and rendered values
into one buffer. The output size is the sum of the parts' sizes.

Precondition: ``validate(pattern, args)`` succeeded. Rendering does not
re-check arguments; validation is the gate.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from staticfmt.core import FixedString, StringSlice
from staticfmt.syntax import Pattern

__all__ = ["render"]


def render(pattern: Pattern, args: Sequence[object] = ()) -> FixedString:
    """Render a validated Pattern.

    Args:
        pattern: Parsed pattern
        args: Arguments that passed validation against ``pattern``

    Returns:
        Buffer holding the literal spans and rendered specifiers in order

    Example:
        >>> from staticfmt import parse
        >>> str(render(parse("%d-%s"), [3, "x"]))
        '3-x'
    """
    parts: list[FixedString] = []
    for element in pattern.elements():
        if isinstance(element, StringSlice):
            parts.append(FixedString.from_slice(element))
        elif element.index is None:
            parts.append(element.descriptor.render())
        else:
            parts.append(element.descriptor.render(args[element.index]))
    return FixedString.concat(parts)
