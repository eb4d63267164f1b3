"""
Surreal: Conway's Surreal Numbers with Finite Sets

An exact symbolic model of the surreal numbers, following J. H. Conway's
construction as told in D. E. Knuth's *Surreal Numbers*.

This package provides:
- SurrealFinite: numbers {L | R} with finite option sets, interned and
  compared through a memoized order relation
- Arithmetic: +, -, *, % and unary - by the recursive defining equations
- SurrealContext / SurrealConfig: the structure cache and memo tables a
  set of numbers shares
- Float bridge: to_double, from_double, div_approx
- SurrealInfinite: lazy transfinite numbers (ω, ε) with truncation back to
  finite numbers
- generation / projections: the numbers born by a given day

Example usage:
    from surreal import zero, one, construct, from_double

    half = construct([zero()], [one()])
    print(half.to_double())                  # 0.5
    print(one() + one() == from_double(2.0))  # True
"""

__version__ = "0.1.0"
__author__ = "Surreal Team"

from .errors import (
    SurrealError,
    WellFormingError,
    StructureNotFoundError,
    ContextMismatchError,
)

from .structure import (
    Structure,
    StructureCache,
    Side,
)

from .memo import MemoTable

from .order import (
    OrderOracle,
    Ordering,
)

from .arithmetic import ArithmeticEngine

from .context import (
    SurrealConfig,
    SurrealContext,
    get_default_context,
    set_default_context,
)

from .finite import (
    SurrealFinite,
    zero,
    one,
    construct,
)

from .floats import (
    to_double,
    from_double,
    div_approx,
)

from .infinite import (
    SurrealInfinite,
    SurrealElement,
    OptionSet,
    ProductionRule,
    RuleKind,
    ZipSet,
    ShiftSet,
    NegSet,
    omega,
    epsilon,
)

from .days import (
    generation,
    projections,
)

__all__ = [
    # Errors
    "SurrealError",
    "WellFormingError",
    "StructureNotFoundError",
    "ContextMismatchError",
    # Core
    "Structure",
    "StructureCache",
    "Side",
    "MemoTable",
    "OrderOracle",
    "Ordering",
    "ArithmeticEngine",
    # Context
    "SurrealConfig",
    "SurrealContext",
    "get_default_context",
    "set_default_context",
    # Finite numbers
    "SurrealFinite",
    "zero",
    "one",
    "construct",
    # Float bridge
    "to_double",
    "from_double",
    "div_approx",
    # Transfinite hand-off
    "SurrealInfinite",
    "SurrealElement",
    "OptionSet",
    "ProductionRule",
    "RuleKind",
    "ZipSet",
    "ShiftSet",
    "NegSet",
    "omega",
    "epsilon",
    # Days
    "generation",
    "projections",
]
