"""
Tests for lazy transfinite numbers and their truncation to finite ones.
"""

import pytest

from surreal import (
    NegSet,
    ProductionRule,
    RuleKind,
    ShiftSet,
    SurrealConfig,
    SurrealContext,
    SurrealInfinite,
    ZipSet,
    epsilon,
    from_double,
    omega,
)


class TestOptionSets:
    """Restartable lazy option sets."""

    def test_take_is_bounded(self, ctx):
        naturals = omega(ctx).left
        assert [x.to_double() for x in naturals.take(4)] == [1.0, 2.0, 3.0, 4.0]

    def test_iteration_restarts(self, ctx):
        naturals = omega(ctx).left
        first = [x.key for x in naturals.take(3)]
        second = [x.key for x in naturals.take(3)]
        assert first == second

    def test_epsilon_right_starts_at_half(self, ctx, half):
        """The seed 1 feeds the halving rule but is not itself an option."""
        assert [x.to_double() for x in epsilon(ctx).right.take(3)] == [0.5, 0.25, 0.125]
        assert epsilon(ctx).right.take(1) == [half]

    def test_finite_rule_runs_dry(self, zero, one):
        rule = ProductionRule.from_sequence([zero, one])
        assert rule.kind == RuleKind.FINITE
        assert len(rule.take(10)) == 2
        assert rule.materialize() == [zero, one]

    def test_infinite_rule_cannot_materialize(self, ctx):
        with pytest.raises(ValueError):
            omega(ctx).left.materialize()

    def test_seeded_rule(self, one):
        """The seed is handed to the first production call."""
        doubling = ProductionRule(RuleKind.INFINITE, lambda previous, _: previous + previous, one)
        assert [x.to_double() for x in doubling.take(3)] == [2.0, 4.0, 8.0]

    def test_zip_interleaves(self, zero, one, neg_one, half):
        zipped = ZipSet((
            ProductionRule.from_sequence([zero, one, half]),
            ProductionRule.from_sequence([neg_one]),
        ))
        assert [x.to_double() for x in zipped.take(10)] == [0.0, -1.0, 1.0, 0.5]
        assert zipped.kind == RuleKind.FINITE

    def test_zip_take_truncates_each_part(self, zero, one, neg_one):
        """take(n) reads n terms from every part, then interleaves them."""
        zipped = ZipSet((
            ProductionRule.from_sequence([zero, one]),
            ProductionRule.from_sequence([neg_one, zero]),
        ))
        assert [x.to_double() for x in zipped.take(2)] == [0.0, -1.0, 1.0, 0.0]
        assert [x.to_double() for x in zipped.take(1)] == [0.0, -1.0]

    def test_zip_of_infinite_parts(self, ctx):
        naturals = omega(ctx).left
        zipped = ZipSet((naturals, NegSet(naturals)))
        assert [x.to_double() for x in zipped.take(3)] == [1.0, -1.0, 2.0, -2.0, 3.0, -3.0]

    def test_zip_render_shows_display_terms(self, ctx):
        naturals = omega(ctx).left
        zipped = ZipSet((naturals, NegSet(naturals)))
        assert zipped.render(3) == "1 -1 ... "

    def test_zip_kind_follows_parts(self, ctx, zero):
        zipped = ZipSet((ProductionRule.from_sequence([zero]), omega(ctx).left))
        assert zipped.kind == RuleKind.INFINITE

    def test_shift_and_neg(self, zero, one, half):
        base = ProductionRule.from_sequence([zero, half])
        assert [x.to_double() for x in ShiftSet(one, base).take(5)] == [1.0, 1.5]
        assert [x.to_double() for x in NegSet(base).take(5)] == [0.0, -0.5]


class TestTruncation:
    """to_finite() hands transfinite values back to the finite engine."""

    def test_omega(self, ctx):
        """ω truncated to n terms is {1..n |} = n + 1."""
        assert omega(ctx).to_finite(3) == from_double(4.0, ctx)

    def test_default_precision_from_config(self):
        ctx = SurrealContext(SurrealConfig(truncation_precision=4))
        assert omega(ctx).to_finite() == from_double(5.0, ctx)

    def test_epsilon(self, ctx, zero):
        """ε truncated stays above 0 and below every listed right option."""
        eps = epsilon(ctx).to_finite(3)
        assert eps > zero
        assert eps < from_double(0.125, ctx)
        assert eps.to_double() == 0.0625

    def test_negative_omega(self, ctx):
        assert (-omega(ctx)).to_finite(3) == from_double(-4.0, ctx)

    def test_wrapped_finite(self, half):
        wrapped = half.to_infinite()
        assert wrapped.value is half
        assert wrapped.to_finite(5) == half

    def test_omega_plus_one(self, ctx, one):
        assert (omega(ctx) + one).to_finite(3) == from_double(5.0, ctx)
        assert (one + omega(ctx)).to_finite(3) == from_double(5.0, ctx)

    def test_omega_minus_one(self, ctx, one):
        """ω - 1 resolves through the negated wrapper and lands above 1."""
        truncated = (omega(ctx) - one).to_finite(3)
        assert truncated is not None
        assert truncated > from_double(1.0, ctx)

    def test_finite_arithmetic_through_wrapping(self, ctx, one, two):
        """2 - 1 computed lazily agrees with the finite engine."""
        difference = two.to_infinite() - one.to_infinite()
        assert difference.to_finite(5) == one

    def test_ill_formed_truncation_is_none(self, ctx, zero, one):
        bad = SurrealInfinite(
            left=ProductionRule.from_sequence([one]),
            right=ProductionRule.from_sequence([zero]),
            context=ctx,
        )
        assert bad.to_finite(2) is None

    def test_unresolved_nested_value_is_none(self, ctx, zero, one):
        bad = SurrealInfinite(
            left=ProductionRule.from_sequence([one]),
            right=ProductionRule.from_sequence([zero]),
            context=ctx,
        )
        outer = SurrealInfinite(
            left=ProductionRule.from_sequence([bad]),
            right=ProductionRule.empty(),
            context=ctx,
        )
        assert outer.to_finite(2) is None

    def test_nested_values_resolve(self, ctx):
        """{ω |} truncates through the nested ω."""
        outer = SurrealInfinite(
            left=ProductionRule.from_sequence([omega(ctx)]),
            right=ProductionRule.empty(),
            context=ctx,
        )
        assert outer.to_finite(3) == from_double(5.0, ctx)

    def test_custom_production_functions(self, ctx, zero):
        """SurrealInfinite.new builds both sides from production functions."""
        x = SurrealInfinite.new(
            lambda previous, index: from_double(-(index + 1.0), ctx),
            None,
            lambda previous, index: None,
            None,
            name="-ω-ish",
            context=ctx,
        )
        assert x.to_finite(3) == zero


class TestRendering:
    """Textual rendering of transfinite values."""

    def test_omega(self, ctx):
        assert str(omega(ctx)) == "< 1 2 3 4 5 ... | >"

    def test_epsilon(self, ctx):
        assert str(epsilon(ctx)) == "< 0 | 0.5 0.25 0.125 0.0625 0.03125 ... >"

    def test_negative_omega(self, ctx):
        assert str(-omega(ctx)) == "< | -1 -2 -3 -4 -5 ... >"

    def test_wrapped_finite(self, half):
        assert str(half.to_infinite()) == "0.5"

    def test_named_repr(self, ctx):
        assert repr(omega(ctx)) == "SurrealInfinite(ω)"

    def test_display_terms(self):
        ctx = SurrealContext(SurrealConfig(display_terms=3))
        assert str(omega(ctx)) == "< 1 2 ... | >"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
