"""
Tests for the recursive order relation.
"""

import itertools

import pytest

from surreal import SurrealContext, SurrealFinite, Ordering, generation


@pytest.fixture
def day5(ctx):
    return generation(5, ctx)


class TestOrderAxioms:
    """The order is a total order on well-formed numbers."""

    def test_reflexive(self, day5):
        for x in day5:
            assert x <= x

    def test_total(self, day5):
        for x, y in itertools.product(day5, repeat=2):
            assert x <= y or y <= x

    def test_transitive(self, day5):
        for x, y, z in itertools.product(day5, repeat=3):
            if x <= y and y <= z:
                assert x <= z
                if x < y or y < z:
                    assert x < z

    def test_strict_is_negated_leq(self, day5):
        for x, y in itertools.product(day5, repeat=2):
            assert (x < y) == (not y <= x)
            assert (x > y) == (y < x)
            assert (x >= y) == (y <= x)

    def test_generation_is_increasing(self, day5):
        for a, b in zip(day5, day5[1:]):
            assert a < b


class TestOrderOracle:
    """Identifier-level behaviour of the oracle."""

    def test_base_case(self, ctx, zero):
        assert ctx.oracle.leq(zero.key, zero.key)

    def test_compare_values(self, ctx, zero, one, neg_one):
        oracle = ctx.oracle
        assert oracle.compare(neg_one.key, zero.key) == Ordering.LESS
        assert oracle.compare(one.key, zero.key) == Ordering.GREATER
        assert oracle.compare(one.key, one.key) == Ordering.EQUAL

    def test_equal_across_structures(self, ctx, zero, one, neg_one):
        other_zero = SurrealFinite.new([neg_one], [one], ctx)
        assert ctx.oracle.equal(zero.key, other_zero.key)
        assert ctx.oracle.compare(zero.key, other_zero.key) == Ordering.EQUAL

    def test_memoized(self, ctx, zero, one):
        ctx.oracle.leq(zero.key, one.key)
        assert (zero.key, one.key) in ctx.oracle.memo
        hits = ctx.oracle.memo.hits
        assert ctx.oracle.leq(zero.key, one.key)
        assert ctx.oracle.memo.hits == hits + 1

    def test_separates(self, ctx, zero, one, half):
        assert ctx.oracle.separates(half.key)
        assert ctx.oracle.separates(zero.key)
        pseudo = SurrealFinite.new_unchecked([one], [zero], ctx)
        assert not ctx.oracle.separates(pseudo.key)

    def test_pseudo_number_is_fuzzy_with_zero(self):
        """{1|0} is neither <= 0 nor >= 0, so compare() calls each side greater."""
        ctx = SurrealContext()
        z = SurrealFinite.zero(ctx)
        o = SurrealFinite.one(ctx)
        pseudo = SurrealFinite.new_unchecked([o], [z], ctx)
        assert not ctx.oracle.leq(pseudo.key, z.key)
        assert not ctx.oracle.leq(z.key, pseudo.key)
        assert ctx.oracle.compare(pseudo.key, z.key) == Ordering.GREATER
        assert ctx.oracle.compare(z.key, pseudo.key) == Ordering.GREATER


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
