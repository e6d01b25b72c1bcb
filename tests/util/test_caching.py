import pytest

from labyrinth.util.caching import CacheStats, MemoCache


class TestCacheStats:
    def test_initial_state(self) -> None:
        stats = CacheStats()
        assert stats.hits == 0
        assert stats.misses == 0
        assert stats.total_lookups == 0
        assert stats.hit_rate == 0.0

    def test_hit_rate_calculation(self) -> None:
        stats = CacheStats(hits=7, misses=3)
        assert stats.total_lookups == 10
        assert stats.hit_rate == 70.0

    def test_repr(self) -> None:
        stats = CacheStats(hits=12, misses=8)
        assert repr(stats) == "12 hits, 8 misses (60.0% hit rate)"


class TestMemoCache:
    def test_store_and_get_basic(self) -> None:
        cache: MemoCache[str, int] = MemoCache("test")

        assert cache.store("key1", 42) == 42
        assert len(cache) == 1

        assert cache.get("key1") == 42
        assert cache.stats.hits == 1
        assert cache.stats.misses == 0

    def test_get_nonexistent_key(self) -> None:
        cache: MemoCache[str, int] = MemoCache("test")

        assert cache.get("nonexistent") is None
        assert cache.stats.hits == 0
        assert cache.stats.misses == 1

    def test_storing_equal_value_again_is_a_noop(self) -> None:
        cache: MemoCache[str, frozenset[int]] = MemoCache("test")
        first = frozenset({1, 2})

        cache.store("key", first)
        kept = cache.store("key", frozenset({2, 1}))

        assert kept is first
        assert len(cache) == 1

    def test_storing_different_value_raises(self) -> None:
        cache: MemoCache[str, int] = MemoCache("test")
        cache.store("key", 1)

        with pytest.raises(ValueError, match="write-once"):
            cache.store("key", 2)
        assert cache.get("key") == 1

    def test_get_or_compute_computes_once(self) -> None:
        cache: MemoCache[int, int] = MemoCache("squares")
        calls: list[int] = []

        def square(key: int) -> int:
            calls.append(key)
            return key * key

        assert cache.get_or_compute(4, square) == 16
        assert cache.get_or_compute(4, square) == 16
        assert calls == [4]
        assert cache.stats.misses == 1
        assert cache.stats.hits == 1

    def test_get_or_compute_caches_empty_values(self) -> None:
        cache: MemoCache[str, frozenset[int]] = MemoCache("test")
        calls: list[str] = []

        def compute(key: str) -> frozenset[int]:
            calls.append(key)
            return frozenset()

        cache.get_or_compute("empty", compute)
        cache.get_or_compute("empty", compute)

        assert calls == ["empty"]

    def test_require_returns_present_value(self) -> None:
        cache: MemoCache[str, int] = MemoCache("test")
        cache.store("key", 3)
        assert cache.require("key") == 3

    def test_require_missing_key_is_an_assertion(self) -> None:
        cache: MemoCache[str, int] = MemoCache("visibility")
        with pytest.raises(AssertionError, match="visibility"):
            cache.require("missing")

    def test_container_protocol(self) -> None:
        cache: MemoCache[str, int] = MemoCache("test")
        cache.store("a", 1)
        cache.store("b", 2)

        assert "a" in cache
        assert "c" not in cache
        assert list(cache) == ["a", "b"]

    def test_string_representations(self) -> None:
        cache: MemoCache[str, int] = MemoCache("test")
        cache.store("a", 1)
        cache.get("a")
        cache.get("missing")

        assert str(cache) == "test Cache: 1 hits, 1 misses (50.0% hit rate)"
        assert repr(cache).startswith("<MemoCache 'test' size=1")
