# labyrinth/util/caching.py

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

KeyType = TypeVar("KeyType")
ValueType = TypeVar("ValueType")


@dataclass
class CacheStats:
    """Statistics for a MemoCache instance."""

    hits: int = 0
    misses: int = 0

    @property
    def total_lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        if self.total_lookups == 0:
            return 0.0
        return (self.hits / self.total_lookups) * 100.0

    def __repr__(self) -> str:
        return f"{self.hits} hits, {self.misses} misses ({self.hit_rate:.1f}% hit rate)"


class MemoCache(Generic[KeyType, ValueType]):
    """
    A write-once memoization cache without eviction.

    Values are computed at most once per key and never replaced, so the cache
    is only appropriate for pure functions of the key over immutable inputs.
    Storing an equal value twice under a key is a no-op; storing a different
    one is an error.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._cache: dict[KeyType, ValueType] = {}
        self.stats = CacheStats()

    def get(self, key: KeyType) -> ValueType | None:
        """Return the value for ``key`` if present, otherwise None."""
        if key not in self._cache:
            self.stats.misses += 1
            return None
        self.stats.hits += 1
        return self._cache[key]

    def store(self, key: KeyType, value: ValueType) -> ValueType:
        """Store ``value`` under ``key`` and return the value kept in the cache.

        Raises:
            ValueError: If ``key`` already holds a different value.
        """
        kept = self._cache.setdefault(key, value)
        if kept is not value and kept != value:
            raise ValueError(
                f"{self.name} cache entry for {key!r} is write-once and "
                "already holds a different value"
            )
        return kept

    def get_or_compute(
        self, key: KeyType, compute: Callable[[KeyType], ValueType]
    ) -> ValueType:
        """Return the cached value for ``key``, computing and storing it on a miss."""
        cached = self.get(key)
        if cached is not None:
            return cached
        return self.store(key, compute(key))

    def require(self, key: KeyType) -> ValueType:
        """Return the cached value for ``key``, which must already be present.

        A missing key is a broken calling contract, not a recoverable miss.
        """
        if key not in self._cache:
            raise AssertionError(f"{self.name} cache should already hold {key!r}")
        self.stats.hits += 1
        return self._cache[key]

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __iter__(self) -> Iterator[KeyType]:
        return iter(self._cache)

    def __len__(self) -> int:
        return len(self._cache)

    def __str__(self) -> str:
        return (
            f"{self.name} Cache: {self.stats.hits} hits, {self.stats.misses} misses "
            f"({self.stats.hit_rate:.1f}% hit rate)"
        )

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} '{self.name}' "
            f"size={len(self)}, stats={self.stats!r}>"
        )
