"""Optional memoization for text analysis.

Caching is purely an optimization: a Vocabulary without a cache computes
exactly the same coordinates, just more slowly. The provided implementation
is safe to share between worker threads.

Usage:
    cache = TextCache(max_entries=4096)
    vocabulary = Vocabulary(cache=cache)
"""

from __future__ import annotations

from collections import OrderedDict
from threading import Lock
from typing import Optional

from .coordinates import Coordinate


class TextCache:
    """Thread-safe LRU cache keyed by the exact analyzed text.

    Attributes:
        hits: Number of lookups served from the cache
        misses: Number of lookups that missed
    """

    def __init__(self, max_entries: int = 4096) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._entries: OrderedDict[str, Coordinate] = OrderedDict()
        self._lock = Lock()
        self.hits = 0
        self.misses = 0

    def get(self, text: str) -> Optional[Coordinate]:
        with self._lock:
            coordinate = self._entries.get(text)
            if coordinate is None:
                self.misses += 1
                return None
            self._entries.move_to_end(text)
            self.hits += 1
            return coordinate

    def put(self, text: str, coordinate: Coordinate) -> None:
        with self._lock:
            self._entries[text] = coordinate
            self._entries.move_to_end(text)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> dict[str, int]:
        """Return size and hit/miss counters."""
        with self._lock:
            return {
                "size": len(self._entries),
                "max_entries": self._max_entries,
                "hits": self.hits,
                "misses": self.misses,
            }
