"""
Surreal Arithmetic

Addition, negation and multiplication follow Conway's defining equations,
each recursing into the operands' own options:

    x + y = { xl + y, x + yl | xr + y, x + yr }
    -x    = { -xr | -xl }
    x * y = { xl*y + x*yl - xl*yl, xr*y + x*yr - xr*yr
            | xl*y + x*yr - xl*yr, xr*y + x*yl - xr*yl }

Every recursive call lowers the construction depth of at least one operand,
so the recursion bottoms out at {|}. Results are minted without checking
that left < right: for well-formed operands the theorems guarantee it, and
re-validating at every node would dominate the cost.
"""

from __future__ import annotations
from typing import List, Tuple

from .memo import MemoTable
from .order import OrderOracle
from .structure import StructureCache


class ArithmeticEngine:
    """Memoized add / neg / mul over structure identifiers."""

    def __init__(self, cache: StructureCache, oracle: OrderOracle, debug_checks: bool = False):
        self._cache = cache
        self._oracle = oracle
        self.debug_checks = debug_checks

        self.add_memo: MemoTable[Tuple[int, int], int] = MemoTable("add")
        self.neg_memo: MemoTable[int, int] = MemoTable("neg")
        self.mul_memo: MemoTable[Tuple[int, int], int] = MemoTable("mul")

    def mint(self, left: List[int], right: List[int]) -> int:
        """Intern {left | right} without validating it."""
        return self._cache.intern(left, right, key=self._oracle.sort_key)

    def _mint_result(self, left: List[int], right: List[int]) -> int:
        result = self.mint(left, right)
        if self.debug_checks:
            assert self._oracle.separates(result), f"arithmetic produced pseudo-number #{result}"
        return result

    def add(self, x: int, y: int) -> int:
        cached = self.add_memo.get((x, y))
        if cached is not None:
            return cached

        new_left = [self.add(xl, y) for xl in self._cache.left(x)]
        new_left += [self.add(yl, x) for yl in self._cache.left(y)]

        new_right = [self.add(xr, y) for xr in self._cache.right(x)]
        new_right += [self.add(yr, x) for yr in self._cache.right(y)]

        result = self._mint_result(new_left, new_right)
        self.add_memo.put((x, y), result)
        return result

    def neg(self, x: int) -> int:
        cached = self.neg_memo.get(x)
        if cached is not None:
            return cached

        new_left = [self.neg(xr) for xr in self._cache.right(x)]
        new_right = [self.neg(xl) for xl in self._cache.left(x)]

        result = self._mint_result(new_left, new_right)
        self.neg_memo.put(x, result)
        return result

    def sub(self, x: int, y: int) -> int:
        return self.add(x, self.neg(y))

    def _product_term(self, a: int, y: int, x: int, b: int) -> int:
        """a*y + x*b - a*b, for an option a of x and an option b of y."""
        return self.add(
            self.add(self.mul(a, y), self.mul(x, b)),
            self.neg(self.mul(a, b)),
        )

    def mul(self, x: int, y: int) -> int:
        cached = self.mul_memo.get((x, y))
        if cached is not None:
            return cached

        x_left, x_right = self._cache.left(x), self._cache.right(x)
        y_left, y_right = self._cache.left(y), self._cache.right(y)

        new_left = [self._product_term(xl, y, x, yl) for xl in x_left for yl in y_left]
        new_left += [self._product_term(xr, y, x, yr) for xr in x_right for yr in y_right]

        new_right = [self._product_term(xl, y, x, yr) for xl in x_left for yr in y_right]
        new_right += [self._product_term(xr, y, x, yl) for xr in x_right for yl in y_left]

        result = self._mint_result(new_left, new_right)
        self.mul_memo.put((x, y), result)
        return result
