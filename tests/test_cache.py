"""Tests for PatternCache, the thread-safe LRU of parsed Patterns."""

from __future__ import annotations

import threading

import pytest

from staticfmt import parse
from staticfmt.runtime import PatternCache

# ============================================================================
# BASIC OPERATIONS
# ============================================================================


class TestPatternCacheBasic:
    """Test get/put/clear."""

    def test_invalid_maxsize(self) -> None:
        """maxsize must be positive."""
        with pytest.raises(ValueError, match="maxsize must be positive"):
            PatternCache(maxsize=0)

    def test_miss_then_hit(self) -> None:
        """get() returns None until the Pattern is stored."""
        cache = PatternCache()
        pattern = parse("%d")

        assert cache.get("printf", "%d") is None
        cache.put(pattern)

        assert cache.get("printf", "%d") is pattern
        assert cache.hits == 1
        assert cache.misses == 1

    def test_keyed_by_mode(self) -> None:
        """The same text under another mode is a separate entry."""
        cache = PatternCache()
        cache.put(parse("%d"))

        assert cache.get("brace", "%d") is None

    def test_put_existing_key_replaces(self) -> None:
        """Storing equal text twice keeps one entry."""
        cache = PatternCache()
        cache.put(parse("%d"))
        replacement = parse("%d")

        cache.put(replacement)

        assert len(cache) == 1
        assert cache.get("printf", "%d") is replacement

    def test_clear_resets_stats(self) -> None:
        """clear() drops entries and metrics."""
        cache = PatternCache()
        cache.put(parse("%d"))
        cache.get("printf", "%d")

        cache.clear()

        assert len(cache) == 0
        assert cache.hits == 0
        assert cache.misses == 0


# ============================================================================
# LRU EVICTION
# ============================================================================


class TestPatternCacheEviction:
    """Test least-recently-used eviction."""

    def test_evicts_oldest(self) -> None:
        """The least recently used entry goes first."""
        cache = PatternCache(maxsize=2)
        cache.put(parse("a"))
        cache.put(parse("b"))
        cache.put(parse("c"))

        assert cache.get("printf", "a") is None
        assert cache.get("printf", "c") is not None
        assert len(cache) == 2

    def test_get_refreshes_recency(self) -> None:
        """A hit moves the entry to most recently used."""
        cache = PatternCache(maxsize=2)
        cache.put(parse("a"))
        cache.put(parse("b"))
        cache.get("printf", "a")

        cache.put(parse("c"))

        assert cache.get("printf", "a") is not None
        assert cache.get("printf", "b") is None


# ============================================================================
# STATS AND CONCURRENCY
# ============================================================================


class TestPatternCacheStats:
    """Test get_stats() and thread safety."""

    def test_stats(self) -> None:
        """Stats report size, capacity, hits, misses and hit rate."""
        cache = PatternCache(maxsize=10)
        cache.put(parse("%d"))
        cache.get("printf", "%d")
        cache.get("printf", "%s")
        cache.get("printf", "%d")

        assert cache.get_stats() == {
            "size": 1,
            "maxsize": 10,
            "hits": 2,
            "misses": 1,
            "hit_rate": 66.67,
        }

    def test_empty_stats(self) -> None:
        """A fresh cache has a zero hit rate."""
        assert PatternCache().get_stats()["hit_rate"] == 0.0

    def test_concurrent_access(self) -> None:
        """Concurrent put/get keep the size bounded and counts consistent."""
        cache = PatternCache(maxsize=8)
        patterns = [parse(f"item {n} %d") for n in range(32)]

        def worker() -> None:
            for pattern in patterns:
                cache.put(pattern)
                cache.get(pattern.mode, pattern.text)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) <= 8
        assert cache.hits + cache.misses == 4 * len(patterns)
