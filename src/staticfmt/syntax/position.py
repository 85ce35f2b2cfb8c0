"""Position utilities for pattern text.

Converts character offsets to line/column positions for error reporting.
Patterns are usually single-line, but nothing forbids embedded newlines.
"""

from staticfmt.diagnostics import SourceSpan


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Example:
        >>> line_offset("a\\nb%d", 3)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))
    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Example:
        >>> column_offset("a\\nb%d", 3)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    line_start = source.rfind("\n", 0, pos)
    if line_start == -1:
        return pos
    return pos - line_start - 1


def span_for(source: str, start: int, end: int) -> SourceSpan:
    """Build a 1-indexed SourceSpan for ``source[start:end]``.

    Line and column are computed on demand; only error paths pay for it.
    """
    return SourceSpan(
        start=start,
        end=end,
        line=line_offset(source, start) + 1,
        column=column_offset(source, start) + 1,
    )
