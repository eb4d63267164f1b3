"""
Float Bridge

Conversions between finite surreal numbers and IEEE doubles:
1. to_double: the recursive midpoint projection (exact for dyadic values)
2. from_double: best-approximation search that walks outward in unit steps
   and then refines with halving increments until the projection matches
3. div_approx: division through the float projections (approximate only)
"""

from __future__ import annotations
from typing import Optional

import numpy as np

from .context import SurrealContext, get_default_context
from .finite import SurrealFinite
from .logging import get_logger

logger = get_logger(__name__)


def to_double(x: SurrealFinite) -> float:
    """Project a finite surreal number onto a double."""
    return x.to_double()


def from_double(f: float, context: Optional[SurrealContext] = None) -> SurrealFinite:
    """
    Build the surreal number whose projection is within tolerance of `f`.

    Each pass restarts from the last bound still below |f|, adds the current
    increment until |f| is reached, then halves the increment ({0 | inc} for
    positive increments, {inc | 0} for negative ones).
    """
    f = float(f)
    if not np.isfinite(f):
        raise ValueError(f"cannot convert non-finite value {f} to a surreal number")

    context = context if context is not None else get_default_context()
    tolerance = context.config.ftos_tolerance

    zero = SurrealFinite.zero(context)
    one = SurrealFinite.new([zero], [], context)
    neg_one = SurrealFinite.new([], [zero], context)

    increment = one if f > 0.0 else neg_one
    large_bound = zero
    small_bound = zero
    passes = 0

    while abs(f - large_bound.to_double()) > tolerance:
        large_bound = small_bound
        while abs(f) > abs(large_bound.to_double()):
            small_bound = large_bound
            large_bound += increment

        if increment > zero:
            increment = SurrealFinite.new([zero], [increment], context)
        else:
            increment = SurrealFinite.new([increment], [zero], context)
        passes += 1

    logger.debug("from_double(%r) settled after %d passes on #%d", f, passes, large_bound.key)
    return large_bound


def div_approx(x: SurrealFinite, y: SurrealFinite) -> SurrealFinite:
    """x / y through double precision; not exact."""
    if y.to_double() == 0.0:
        raise ZeroDivisionError("surreal division by zero")
    return from_double(np.float64(x.to_double()) / np.float64(y.to_double()), x.context)
