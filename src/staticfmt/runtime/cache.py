"""Thread-safe LRU cache of parsed Patterns.

Parsing is a pure function of (mode, pattern text), so a Pattern can be
computed once and reused for every argument list.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - LRU eviction via OrderedDict
    - Immutable keys: (mode name, pattern text)
    - Cleared by StaticFormatter when its registry changes

Python 3.13+.
"""

from collections import OrderedDict
from threading import RLock
from typing import TypeAlias

from staticfmt.syntax import Pattern

__all__ = ["PatternCache"]

_CacheKey: TypeAlias = tuple[str, str]


class PatternCache:
    """Thread-safe LRU cache for parsed Patterns.

    Transparent to caller - returns None on cache miss.

    Attributes:
        maxsize: Maximum number of cache entries
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
    """

    __slots__ = ("_cache", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, maxsize: int = 1000) -> None:
        """Initialize pattern cache.

        Args:
            maxsize: Maximum number of entries (default: 1000)
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[_CacheKey, Pattern] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(self, mode: str, text: str) -> Pattern | None:
        """Get the cached Pattern for ``text`` parsed in ``mode``, if any."""
        key = (mode, text)
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
                self._hits += 1
                return self._cache[key]

            self._misses += 1
            return None

    def put(self, pattern: Pattern) -> None:
        """Store a Pattern, evicting the least recently used entry if full."""
        key = (pattern.mode, pattern.text)
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self._maxsize:
                self._cache.popitem(last=False)

            self._cache[key] = pattern

    def clear(self) -> None:
        """Clear all cached entries and reset metrics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        with self._lock:
            return self._misses
