"""
Finite Surreal Numbers

Conway's surreal numbers with finite option sets, as presented in Knuth's
*Surreal Numbers*. Every number is {L | R} where L and R are finite sets of
previously constructed numbers and every member of L is less than every
member of R.

This module provides:
1. SurrealFinite: an immutable handle onto an interned {L | R} structure
2. zero(), one(), construct(): the public constructors
3. Comparison and arithmetic operators routed through the context's
   order oracle and arithmetic engine

Two handles may be structurally different yet numerically equal, e.g.
{-1 | 1} == {|}. `==` always compares values; `key` exposes the structural
identifier for callers that need it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, Optional, Tuple, TYPE_CHECKING

from .context import SurrealContext, get_default_context
from .errors import ContextMismatchError, WellFormingError
from .order import Ordering

if TYPE_CHECKING:
    from .infinite import SurrealInfinite


def format_double(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True, eq=False)
class SurrealFinite:
    """
    A surreal number with finite left and right sets.

    Handles are immutable: `x += y` rebinds `x` to the handle of the sum
    and leaves every other reference to the old handle untouched.
    """
    key: int
    context: SurrealContext = field(repr=False)

    @classmethod
    def new(
        cls,
        left: Iterable[SurrealFinite],
        right: Iterable[SurrealFinite],
        context: Optional[SurrealContext] = None,
    ) -> SurrealFinite:
        """
        Create {left | right}.

        Raises WellFormingError if some member of `left` is not less than
        some member of `right`.
        """
        left, right = list(left), list(right)
        context = _resolve_context(context, left + right)
        try:
            key = context.construct(
                (x.key for x in left), (x.key for x in right)
            )
        except WellFormingError as error:
            raise WellFormingError(
                cls(error.left, context), cls(error.right, context)
            ) from None
        return cls(key, context)

    @classmethod
    def new_unchecked(
        cls,
        left: Iterable[SurrealFinite],
        right: Iterable[SurrealFinite],
        context: Optional[SurrealContext] = None,
    ) -> SurrealFinite:
        """Create {left | right} without the well-formedness check (may be a pseudo-number)."""
        left, right = list(left), list(right)
        context = _resolve_context(context, left + right)
        return cls(context.mint((x.key for x in left), (x.key for x in right)), context)

    @classmethod
    def zero(cls, context: Optional[SurrealContext] = None) -> SurrealFinite:
        """{|}"""
        return cls.new_unchecked([], [], context)

    @classmethod
    def one(cls, context: Optional[SurrealContext] = None) -> SurrealFinite:
        """{0 |}"""
        zero_ = cls.zero(context)
        return cls.new_unchecked([zero_], [], zero_.context)

    @property
    def left(self) -> Tuple[SurrealFinite, ...]:
        """Left options in increasing order."""
        return tuple(SurrealFinite(k, self.context) for k in self.context.cache.left(self.key))

    @property
    def right(self) -> Tuple[SurrealFinite, ...]:
        """Right options in increasing order."""
        return tuple(SurrealFinite(k, self.context) for k in self.context.cache.right(self.key))

    @property
    def depth(self) -> int:
        """Construction depth of this structure (not the birthday of its value)."""
        return self.context.cache.depth(self.key)

    def is_well_formed(self) -> bool:
        """True if this structure and every structure below it separate left from right."""
        oracle = self.context.oracle
        pending, seen = [self.key], set()
        while pending:
            key = pending.pop()
            if key in seen:
                continue
            seen.add(key)
            if not oracle.separates(key):
                return False
            structure = self.context.cache.structure(key)
            pending.extend(structure.left + structure.right)
        return True

    def to_double(self) -> float:
        return self.context.project(self.key)

    def to_fraction(self) -> Fraction:
        """Exact dyadic value; equal numbers always give equal fractions."""
        return self.context.value(self.key)

    def to_infinite(self) -> SurrealInfinite:
        from .infinite import SurrealInfinite
        return SurrealInfinite.from_finite(self)

    def to_element(self) -> SurrealFinite:
        """This number as an option-set element; finite numbers stand for themselves."""
        return self

    # Order

    def compare(self, other: SurrealFinite) -> Ordering:
        self._check_same_context(other)
        return self.context.oracle.compare(self.key, other.key)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        if other.context is not self.context:
            return False
        return self.context.oracle.equal(self.key, other.key)

    def __ne__(self, other) -> bool:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        return not self == other

    def __lt__(self, other: SurrealFinite) -> bool:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        return self.compare(other) == Ordering.LESS

    def __le__(self, other: SurrealFinite) -> bool:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        return self.compare(other) != Ordering.GREATER

    def __gt__(self, other: SurrealFinite) -> bool:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        return self.compare(other) == Ordering.GREATER

    def __ge__(self, other: SurrealFinite) -> bool:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        return self.compare(other) != Ordering.LESS

    def __hash__(self) -> int:
        return hash(self.to_fraction())

    # Arithmetic

    def __add__(self, other: SurrealFinite) -> SurrealFinite:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        self._check_same_context(other)
        return SurrealFinite(self.context.engine.add(self.key, other.key), self.context)

    def __neg__(self) -> SurrealFinite:
        return SurrealFinite(self.context.engine.neg(self.key), self.context)

    def __sub__(self, other: SurrealFinite) -> SurrealFinite:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        self._check_same_context(other)
        return SurrealFinite(self.context.engine.sub(self.key, other.key), self.context)

    def __mul__(self, other: SurrealFinite) -> SurrealFinite:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        self._check_same_context(other)
        return SurrealFinite(self.context.engine.mul(self.key, other.key), self.context)

    def __mod__(self, other: SurrealFinite) -> SurrealFinite:
        """
        Remainder by repeated subtraction while the dividend is >= the divisor.

        With `check_remainder` disabled a non-positive divisor loops forever.
        """
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        self._check_same_context(other)
        if self.context.config.check_remainder and not other > SurrealFinite.zero(self.context):
            raise ValueError(f"remainder needs a positive divisor, got {other}")

        total = self
        while total >= other:
            total -= other
        return total

    def _check_same_context(self, other: SurrealFinite) -> None:
        if other.context is not self.context:
            raise ContextMismatchError("surreal numbers from different contexts cannot be combined")

    def __str__(self) -> str:
        left = "".join(f"{format_double(x.to_double())} " for x in self.left)
        right = "".join(f"{format_double(x.to_double())} " for x in self.right)
        return f"< {left}| {right}>"


def _resolve_context(
    context: Optional[SurrealContext], members: Iterable[SurrealFinite]
) -> SurrealContext:
    """Pick the context shared by all members, falling back to the default."""
    for member in members:
        if context is None:
            context = member.context
        elif member.context is not context:
            raise ContextMismatchError("options belong to a different context")
    return context if context is not None else get_default_context()


def zero(context: Optional[SurrealContext] = None) -> SurrealFinite:
    return SurrealFinite.zero(context)


def one(context: Optional[SurrealContext] = None) -> SurrealFinite:
    return SurrealFinite.one(context)


def construct(
    left: Iterable[SurrealFinite],
    right: Iterable[SurrealFinite],
    context: Optional[SurrealContext] = None,
) -> SurrealFinite:
    return SurrealFinite.new(left, right, context)
