"""
Order relation on interned surreal structures.

x <= y holds iff
- no left option xl of x satisfies y <= xl, and
- no right option yr of y satisfies yr <= x.

{|} <= {|} is the vacuous base case. Equality and the three-way comparison
are derived from <=. The derived relation is a total order on well-formed
numbers only; pseudo-numbers may break antisymmetry or transitivity.
"""

from __future__ import annotations
from enum import IntEnum
from functools import cmp_to_key
from typing import Any, Callable, Tuple

from .memo import MemoTable
from .structure import StructureCache


class Ordering(IntEnum):
    """Result of a three-way comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


class OrderOracle:
    """Memoized <= over structure identifiers."""

    def __init__(self, cache: StructureCache):
        self._cache = cache
        self.memo: MemoTable[Tuple[int, int], bool] = MemoTable("leq")
        self.sort_key: Callable[[int], Any] = cmp_to_key(self.compare)

    def leq(self, x: int, y: int) -> bool:
        cached = self.memo.get((x, y))
        if cached is not None:
            return cached

        result = True
        for xl in self._cache.left(x):
            if self.leq(y, xl):
                result = False
                break

        if result:
            for yr in self._cache.right(y):
                if self.leq(yr, x):
                    result = False
                    break

        self.memo.put((x, y), result)
        return result

    def equal(self, x: int, y: int) -> bool:
        return self.leq(x, y) and self.leq(y, x)

    def less(self, x: int, y: int) -> bool:
        return self.compare(x, y) == Ordering.LESS

    def compare(self, x: int, y: int) -> Ordering:
        if not self.leq(x, y):
            return Ordering.GREATER
        if not self.leq(y, x):
            return Ordering.LESS
        return Ordering.EQUAL

    def separates(self, identifier: int) -> bool:
        """True if the greatest left option is below the least right option."""
        structure = self._cache.structure(identifier)
        if not structure.left or not structure.right:
            return True
        return self.compare(structure.left[-1], structure.right[0]) == Ordering.LESS
