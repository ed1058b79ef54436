"""Tests for semantics/cache.py - LRU memoization of text analysis."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from code_harmonizer.semantics import ANCHOR, Coordinate, TextCache


class TestTextCache:
    def test_miss_then_hit(self):
        cache = TextCache()
        assert cache.get("get") is None
        cache.put("get", ANCHOR)
        assert cache.get("get") == ANCHOR
        assert cache.stats() == {"size": 1, "max_entries": 4096, "hits": 1, "misses": 1}

    def test_lru_eviction(self):
        """Least recently used entry is dropped first."""
        cache = TextCache(max_entries=2)
        cache.put("a", Coordinate(1, 0, 0, 0))
        cache.put("b", Coordinate(0, 1, 0, 0))
        cache.get("a")
        cache.put("c", Coordinate(0, 0, 1, 0))
        assert cache.get("b") is None
        assert cache.get("a") is not None
        assert cache.get("c") is not None

    def test_clear_resets_counters(self):
        cache = TextCache()
        cache.put("a", ANCHOR)
        cache.get("a")
        cache.clear()
        assert len(cache) == 0
        assert cache.hits == 0
        assert cache.misses == 0

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            TextCache(max_entries=0)

    def test_concurrent_access(self):
        """Parallel puts and gets keep the size bound."""
        cache = TextCache(max_entries=50)

        def work(i):
            cache.put(f"word{i}", ANCHOR)
            return cache.get(f"word{i}")

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(work, range(500)))
        assert len(cache) == 50
