"""
Numbers by birthday.

Day 1 holds only 0. Each later day keeps every number already born and adds
one new number below the minimum, one between each neighbouring pair and
one above the maximum:

    day 1: 0
    day 2: -1 0 1
    day 3: -2 -1 -1/2 0 1/2 1 2

Day n therefore lists 2**n - 1 numbers in increasing order.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

import numpy as np

from .context import SurrealContext, get_default_context
from .finite import SurrealFinite


def generation(day: int, context: Optional[SurrealContext] = None) -> List[SurrealFinite]:
    """All numbers born on or before `day`, in increasing order."""
    if day < 1:
        raise ValueError(f"days start at 1, got {day}")

    context = context if context is not None else get_default_context()
    numbers = [SurrealFinite.zero(context)]

    for _ in range(day - 1):
        born = [SurrealFinite.new([], [numbers[0]], context)]
        for i, x in enumerate(numbers):
            born.append(x)
            if i != len(numbers) - 1:
                born.append(SurrealFinite.new([x], [numbers[i + 1]], context))
        born.append(SurrealFinite.new([numbers[-1]], [], context))
        numbers = born

    return numbers


def projections(numbers: Sequence[SurrealFinite]) -> np.ndarray:
    """Float64 projections of `numbers`, in the given order."""
    return np.array([x.to_double() for x in numbers], dtype=np.float64)


if __name__ == "__main__":
    print("=== Surreal Numbers by Day ===\n")

    for day in range(1, 6):
        values = projections(generation(day))
        print(f"Day {day}: {len(values)} numbers")
        print(f"   {values}")
