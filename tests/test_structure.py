"""
Tests for structure interning, memo tables and contexts.
"""

import threading

import pytest

from surreal import (
    MemoTable,
    Side,
    StructureCache,
    StructureNotFoundError,
    SurrealConfig,
    SurrealContext,
    get_default_context,
    set_default_context,
)


class TestStructureCache:
    """Get-or-insert interning by structural content."""

    def test_interning_deduplicates(self):
        cache = StructureCache()
        zero = cache.intern([], [])
        one = cache.intern([zero], [])
        assert cache.intern([], []) == zero
        assert cache.intern([zero], []) == one
        assert len(cache) == 2

    def test_sides_are_sorted(self):
        cache = StructureCache()
        zero = cache.intern([], [])
        one = cache.intern([zero], [])
        both = cache.intern([one, zero], [])
        assert cache.left(both) == (zero, one)
        assert cache.intern([zero, one], []) == both

    def test_sort_key_is_used(self):
        cache = StructureCache()
        zero = cache.intern([], [])
        one = cache.intern([zero], [])
        x = cache.intern([zero, one], [], key=lambda k: -k)
        assert cache.left(x) == (one, zero)

    def test_children(self):
        cache = StructureCache()
        zero = cache.intern([], [])
        neg_one = cache.intern([], [zero])
        assert cache.children(neg_one, Side.RIGHT) == (zero,)
        assert cache.children(neg_one, Side.LEFT) == ()

    def test_depth(self):
        cache = StructureCache()
        zero = cache.intern([], [])
        one = cache.intern([zero], [])
        half = cache.intern([zero], [one])
        assert cache.depth(zero) == 0
        assert cache.depth(one) == 1
        assert cache.depth(half) == 2

    def test_missing_identifier(self):
        cache = StructureCache()
        cache.intern([], [])
        assert 0 in cache
        assert 5 not in cache
        with pytest.raises(StructureNotFoundError):
            cache.structure(5)
        with pytest.raises(LookupError):
            cache.left(-1)

    def test_concurrent_interning(self):
        """Threads interning the same content agree on one identifier."""
        cache = StructureCache()
        zero = cache.intern([], [])
        results = []

        def worker():
            results.append(cache.intern([zero], [zero]))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(set(results)) == 1
        assert len(cache) == 2


class TestMemoTable:
    """Lock-guarded memo tables."""

    def test_get_and_put(self):
        table = MemoTable("leq")
        assert table.get((1, 2)) is None
        table.put((1, 2), False)
        assert table.get((1, 2)) is False
        assert (1, 2) in table
        assert len(table) == 1

    def test_counters(self):
        table = MemoTable("add")
        table.get(1)
        table.put(1, 7)
        table.get(1)
        assert table.misses == 1
        assert table.hits == 1


class TestContext:
    """Contexts isolate caches; the default context is shared."""

    def test_contexts_are_isolated(self):
        a, b = SurrealContext(), SurrealContext()
        a.mint([], [])
        assert len(a.cache) == 1
        assert len(b.cache) == 0

    def test_config_is_propagated(self):
        ctx = SurrealContext(SurrealConfig(debug_checks=True))
        assert ctx.engine.debug_checks

    def test_stats(self):
        ctx = SurrealContext()
        zero = ctx.mint([], [])
        ctx.engine.add(zero, zero)
        stats = ctx.stats()
        assert stats["structures"] == 1
        assert stats["add"] == 1
        assert set(stats) == {"structures", "leq", "add", "neg", "mul"}

    def test_default_context_is_reused(self):
        assert get_default_context() is get_default_context()

    def test_default_context_can_be_replaced(self):
        ctx = SurrealContext()
        set_default_context(ctx)
        assert get_default_context() is ctx
        set_default_context(None)
        assert get_default_context() is not ctx


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
