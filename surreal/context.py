"""
Surreal Context

A context owns everything the finite engine memoizes:
- the structure cache (identifier -> {L | R})
- the four memo tables (<=, +, -, *)
- the configuration they run under

Handles carry the context that minted them and never mix with another
context's handles. A lazily created default context backs the convenience
constructors; tests build their own for isolation.
"""

from __future__ import annotations
import math
import threading
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Dict, Iterable, Optional

import numpy as np

from .arithmetic import ArithmeticEngine
from .errors import WellFormingError
from .logging import get_logger
from .memo import MemoTable
from .order import Ordering, OrderOracle
from .structure import StructureCache

logger = get_logger(__name__)


@dataclass
class SurrealConfig:
    """Configuration for a surreal context."""
    # Float bridge
    ftos_tolerance: float = float(np.finfo(np.float64).eps)

    # Transfinite hand-off
    truncation_precision: int = 10   # Terms taken per side by to_finite()
    display_terms: int = 6           # Terms rendered per side, the last as "..."

    # Safety
    check_remainder: bool = True     # Require a positive divisor for %
    debug_checks: bool = False       # Assert every arithmetic result is well-formed


@dataclass(eq=False)
class SurrealContext:
    """Structure cache, order oracle and arithmetic engine sharing one config."""
    config: SurrealConfig = field(default_factory=SurrealConfig)

    def __post_init__(self):
        self.cache = StructureCache()
        self.oracle = OrderOracle(self.cache)
        self.engine = ArithmeticEngine(
            self.cache, self.oracle, debug_checks=self.config.debug_checks
        )
        self.projections: MemoTable[int, float] = MemoTable("project")
        self.values: MemoTable[int, Fraction] = MemoTable("value")
        logger.debug("Created surreal context %#x with %s", id(self), self.config)

    def mint(self, left: Iterable[int], right: Iterable[int]) -> int:
        """Intern {left | right} without checking it is well-formed."""
        return self.engine.mint(list(left), list(right))

    def construct(self, left: Iterable[int], right: Iterable[int]) -> int:
        """
        Intern {left | right}, then reject it unless max(left) < min(right).

        The structure is minted before the check, so rejected pseudo-numbers
        still occupy the cache.
        """
        identifier = self.mint(left, right)
        structure = self.cache.structure(identifier)
        if structure.left and structure.right:
            greatest_left, least_right = structure.left[-1], structure.right[0]
            if self.oracle.compare(greatest_left, least_right) != Ordering.LESS:
                logger.debug(
                    "Rejected #%d: #%d is not below #%d",
                    identifier, greatest_left, least_right,
                )
                raise WellFormingError(greatest_left, least_right)
        return identifier

    def project(self, identifier: int) -> float:
        """
        Float projection of an identifier.

        {|} -> 0, {|R} -> min(R) - 1, {L|} -> max(L) + 1, {L|R} -> midpoint.
        Exact for every number reachable in few enough construction steps.
        """
        cached = self.projections.get(identifier)
        if cached is not None:
            return cached

        structure = self.cache.structure(identifier)
        if not structure.left and not structure.right:
            value = 0.0
        elif not structure.left:
            value = self.project(structure.right[0]) - 1.0
        elif not structure.right:
            value = self.project(structure.left[-1]) + 1.0
        else:
            value = (self.project(structure.left[-1]) + self.project(structure.right[0])) / 2.0

        self.projections.put(identifier, value)
        return value

    def value(self, identifier: int) -> Fraction:
        """
        Exact value of an identifier: the simplest number between max(L) and min(R).

        Unlike project(), equal numbers always get equal values, e.g.
        {0 | 3} and {0 |} are both 1. A pseudo-number has nothing between
        its sides and falls back to the midpoint.
        """
        cached = self.values.get(identifier)
        if cached is not None:
            return cached

        structure = self.cache.structure(identifier)
        lo = self.value(structure.left[-1]) if structure.left else None
        hi = self.value(structure.right[0]) if structure.right else None
        if lo is not None and hi is not None and lo >= hi:
            value = (lo + hi) / 2
        else:
            value = simplest_between(lo, hi)

        self.values.put(identifier, value)
        return value

    def stats(self) -> Dict[str, int]:
        """Sizes of the cache and memo tables."""
        return {
            "structures": len(self.cache),
            "leq": len(self.oracle.memo),
            "add": len(self.engine.add_memo),
            "neg": len(self.engine.neg_memo),
            "mul": len(self.engine.mul_memo),
        }


def simplest_between(lo: Optional[Fraction], hi: Optional[Fraction]) -> Fraction:
    """
    The earliest-born dyadic strictly between `lo` and `hi`.

    None stands for an unbounded side. Requires lo < hi.
    """
    if hi is not None and hi <= 0:
        return -simplest_between(-hi, None if lo is None else -lo)
    if lo is None or lo < 0:
        return Fraction(0)

    # 0 <= lo: the smallest integer above lo, else the dyadic of least denominator
    candidate = Fraction(math.floor(lo) + 1)
    denominator = 1
    while hi is not None and candidate >= hi:
        denominator *= 2
        candidate = Fraction(math.floor(lo * denominator) + 1, denominator)
    return candidate


_default_context: Optional[SurrealContext] = None
_default_lock = threading.Lock()


def get_default_context() -> SurrealContext:
    """Return the process-wide default context, creating it on first use."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = SurrealContext()
        return _default_context


def set_default_context(context: Optional[SurrealContext]) -> None:
    """Replace the default context; None discards it so the next use starts fresh."""
    global _default_context
    with _default_lock:
        _default_context = context
