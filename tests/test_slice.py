"""Tests for StringSlice, the non-owning view type.

Validates bounds enforced by construction, the prefix/remove_prefix
edge cases and find() returning the length on a miss.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from staticfmt.core import FixedString, StringSlice

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestStringSliceConstruction:
    """Test construction and bounds checking."""

    def test_default_views_whole_source(self) -> None:
        """Omitted start/length view the entire source."""
        view = StringSlice("hello")

        assert view.start == 0
        assert view.size == 5
        assert view.text == "hello"

    def test_explicit_bounds(self) -> None:
        """start/length select a sub-range."""
        view = StringSlice("hello world", 6, 5)

        assert view.text == "world"
        assert view.end == 11

    def test_negative_start_rejected(self) -> None:
        """Negative start raises ValueError."""
        with pytest.raises(ValueError, match=r"StringSlice\.start"):
            StringSlice("abc", -1)

    def test_start_past_end_rejected(self) -> None:
        """start beyond the source raises ValueError."""
        with pytest.raises(ValueError, match=r"StringSlice\.start"):
            StringSlice("abc", 4)

    def test_length_past_end_rejected(self) -> None:
        """A view reaching past the source raises ValueError."""
        with pytest.raises(ValueError, match=r"StringSlice\.length"):
            StringSlice("abc", 1, 5)

    def test_negative_length_rejected(self) -> None:
        """Negative length raises ValueError."""
        with pytest.raises(ValueError, match=r"StringSlice\.length"):
            StringSlice("abc", 0, -1)

    def test_empty_view_at_end(self) -> None:
        """An empty view at the end of the source is valid."""
        view = StringSlice("abc", 3, 0)

        assert view.size == 0
        assert not view


# ============================================================================
# of() CONVERSIONS
# ============================================================================


class TestStringSliceOf:
    """Test StringSlice.of() decay rules."""

    def test_of_str(self) -> None:
        """A str becomes a full view."""
        assert StringSlice.of("abc") == "abc"

    def test_of_slice_is_identity(self) -> None:
        """An existing slice is returned as-is."""
        view = StringSlice("abcdef", 2, 2)

        assert StringSlice.of(view) is view

    def test_of_fixed_string(self) -> None:
        """A buffer becomes a view of its characters."""
        assert StringSlice.of(FixedString("abc")) == "abc"

    def test_of_null_terminated_buffer_drops_nul(self) -> None:
        """A NUL-terminated buffer decays to its text without the NUL."""
        buffer = FixedString("abc").null_terminated()

        view = StringSlice.of(buffer)

        assert view.size == 3
        assert view == "abc"

    def test_decayed_view_compares_by_owned_content(self) -> None:
        """Equality sees the NUL a buffer owns, identically in both operand orders."""
        buffer = FixedString("a").null_terminated()
        view = StringSlice.of(buffer)

        assert (view == buffer) is False
        assert (buffer == view) is False
        assert view == FixedString("a")
        assert FixedString("a") == view

    def test_of_unsupported_type(self) -> None:
        """Non-text values raise TypeError."""
        with pytest.raises(TypeError, match="Cannot view int"):
            StringSlice.of(5)  # type: ignore[arg-type]


# ============================================================================
# FIND
# ============================================================================


class TestStringSliceFind:
    """Test find() and find_any()."""

    def test_find_present(self) -> None:
        """find returns the index relative to the view."""
        view = StringSlice("xx%ab%", 2)

        assert view.find("%") == 0
        assert view.remove_prefix(1).find("%") == 2

    def test_find_absent_returns_length(self) -> None:
        """A miss returns the view's length."""
        view = StringSlice.of("plain")

        assert view.find("%") == len(view)

    def test_find_ignores_characters_outside_view(self) -> None:
        """Characters beyond the view are not found."""
        view = StringSlice("ab%", 0, 2)

        assert view.find("%") == 2

    def test_find_any(self) -> None:
        """find_any returns the first member of the set."""
        view = StringSlice.of("ab}c{")

        assert view.find_any(frozenset("{}")) == 2
        assert view.find_any(frozenset("xyz")) == len(view)

    @given(st.text(max_size=30), st.characters())
    def test_find_matches_str_find(self, text: str, char: str) -> None:
        """find agrees with str.find, mapping -1 to the length."""
        expected = text.find(char)

        result = StringSlice.of(text).find(char)

        assert result == (len(text) if expected == -1 else expected)


# ============================================================================
# PREFIX / REMOVE_PREFIX
# ============================================================================


class TestStringSlicePrefix:
    """Test prefix() and remove_prefix()."""

    def test_prefix(self) -> None:
        """prefix(n) returns the first n characters."""
        assert StringSlice.of("Hello %s").prefix(5) == "Hello"

    def test_prefix_longer_than_view(self) -> None:
        """prefix(n >= len) returns the whole view."""
        view = StringSlice.of("abc")

        assert view.prefix(3) is view
        assert view.prefix(10) is view

    def test_prefix_zero(self) -> None:
        """prefix(0) is empty."""
        assert StringSlice.of("abc").prefix(0).size == 0

    def test_remove_prefix(self) -> None:
        """remove_prefix(n) drops the first n characters."""
        view = StringSlice.of("Hello %s").remove_prefix(6)

        assert view == "%s"
        assert view.start == 6

    def test_remove_prefix_past_end(self) -> None:
        """remove_prefix(n >= len) is an empty view at the end."""
        view = StringSlice("abcdef", 1, 3).remove_prefix(9)

        assert view.size == 0
        assert view.start == 4

    @given(st.text(max_size=30), st.integers(min_value=0, max_value=40))
    def test_prefix_and_rest_reassemble(self, text: str, n: int) -> None:
        """prefix(n) + remove_prefix(n) is the original text."""
        view = StringSlice.of(text)

        assert view.prefix(n).text + view.remove_prefix(n).text == text


# ============================================================================
# SEQUENCE PROTOCOL AND EQUALITY
# ============================================================================


class TestStringSliceProtocol:
    """Test indexing, peek, equality and hashing."""

    def test_getitem(self) -> None:
        """Indices are relative to the view."""
        view = StringSlice("abcdef", 2, 3)

        assert view[0] == "c"
        assert view[-1] == "e"

    def test_getitem_out_of_range(self) -> None:
        """Indexing past the view raises IndexError even inside the source."""
        view = StringSlice("abcdef", 2, 3)

        with pytest.raises(IndexError):
            view[3]

    def test_getitem_non_integer(self) -> None:
        """Slicing raises TypeError."""
        with pytest.raises(TypeError, match="indices must be integers"):
            StringSlice.of("abc")[0:1]  # type: ignore[index]

    def test_peek(self) -> None:
        """peek returns None past the end instead of raising."""
        view = StringSlice("ab%", 0, 3)

        assert view.peek(2) == "%"
        assert view.peek(3) is None
        assert view.peek(-1) is None

    def test_iteration(self) -> None:
        """Iterating yields viewed characters only."""
        assert list(StringSlice("abcdef", 1, 2)) == ["b", "c"]

    def test_content_equality(self) -> None:
        """Slices over different sources compare by content."""
        left = StringSlice("xxabc", 2)
        right = StringSlice("abcyy", 0, 3)

        assert left == right
        assert hash(left) == hash(right)
        assert left == "abc"
        assert left == FixedString("abc")

    def test_str_and_repr(self) -> None:
        """str gives the text, repr includes the start offset."""
        view = StringSlice("xxabc", 2)

        assert str(view) == "abc"
        assert repr(view) == "StringSlice('abc', start=2)"
