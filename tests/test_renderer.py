"""Tests for rendering validated Patterns into FixedStrings."""

from __future__ import annotations

import pytest

from staticfmt import parse, render
from staticfmt.conversions import (
    ExactType,
    PredicateType,
    create_default_registry,
    format_integer,
)
from staticfmt.core import FixedString, StringSlice
from staticfmt.syntax import PatternParser

# ============================================================================
# BASIC RENDERING
# ============================================================================


class TestRender:
    """Test span and specifier rendering."""

    def test_literal_round_trip(self) -> None:
        """A %-free pattern renders to itself."""
        assert render(parse("just text"), []) == "just text"

    def test_escape(self) -> None:
        """'a%%b' renders 'a%b'."""
        assert render(parse("a%%b"), []) == "a%b"

    def test_positional_order(self) -> None:
        """'%d-%s' with [3, 'x'] renders '3-x'."""
        assert render(parse("%d-%s"), [3, "x"]) == "3-x"

    def test_default_args(self) -> None:
        """args defaults to no arguments."""
        assert render(parse("100%%")) == "100%"

    def test_end_to_end_example(self) -> None:
        """Escapes, strings and integers combine in one pattern."""
        pattern = parse("Hello %%%s%%, this is number %d and %d")

        assert render(pattern, ["USER", 1, 5]) == "Hello %USER%, this is number 1 and 5"

    def test_string_argument_types(self) -> None:
        """str, StringSlice and FixedString arguments render their text."""
        pattern = parse("[%s|%s|%s]")

        result = render(pattern, ["a", StringSlice("xbx", 1, 1), FixedString("c")])

        assert result == "[a|b|c]"

    def test_output_is_fixed_string(self) -> None:
        """The output is a FixedString."""
        assert isinstance(render(parse("%d"), [1]), FixedString)

    def test_output_size_is_sum_of_parts(self) -> None:
        """Size equals literal_length plus the rendered specifier sizes."""
        pattern = parse("id=%d name=%s%%")

        result = render(pattern, [-120, "bob"])

        assert result == "id=-120 name=bob%"
        assert result.size == pattern.literal_length + len("-120") + len("bob") + 1

    def test_same_pattern_many_renders(self) -> None:
        """One Pattern renders any number of argument lists."""
        pattern = parse("%d")

        assert [str(render(pattern, [n])) for n in (0, -7, 120)] == ["0", "-7", "120"]


# ============================================================================
# CUSTOM CONVERSIONS
# ============================================================================


class TestRenderCustomConversions:
    """Test rendering with user-registered conversions."""

    def test_literal_conversion(self) -> None:
        """A literal code renders its text."""
        registry = create_default_registry()
        registry.register_literal("n", "\n")
        pattern = PatternParser(registry).parse("a%nb")

        assert render(pattern, []) == "a\nb"

    def test_predicate_conversion(self) -> None:
        """A custom predicate conversion renders via its formatter."""
        registry = create_default_registry()
        registry.register(
            "x",
            PredicateType(predicate=lambda v: isinstance(v, int), category="int"),
            lambda v: FixedString(format(v, "x")),
        )
        pattern = PatternParser(registry).parse("0x%x")

        assert render(pattern, [255]) == "0xff"

    def test_formatter_returning_str_rejected(self) -> None:
        """A formatter must return a FixedString, not plain text."""
        registry = create_default_registry()
        registry.register(
            "x",
            PredicateType(predicate=lambda v: isinstance(v, int), category="int"),
            lambda v: format(v, "x"),  # type: ignore[arg-type, return-value]
        )
        pattern = PatternParser(registry).parse("0x%x")

        with pytest.raises(TypeError, match="Formatter for '%x' must return FixedString, got str"):
            render(pattern, [255])

    def test_exact_conversion(self) -> None:
        """A custom exact-type conversion renders via its formatter."""
        registry = create_default_registry()
        registry.register("b", ExactType(target=bool, category="boolean"), format_integer)
        pattern = PatternParser(registry).parse("%b")

        assert render(pattern, [True]) == "1"
