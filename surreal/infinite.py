"""
Transfinite Surreal Numbers (lazy hand-off)

Numbers such as ω = {1, 2, 3, ... |} and ε = {0 | 1/2, 1/4, 1/8, ...} have
infinite option sets, so they are kept lazy:

1. OptionSet: a restartable lazy sequence of elements; take(n) reads the
   first n and iterating again starts over from the first element
2. ProductionRule: an option set described by a production function
   (previous element, index) -> next element or None, tagged FINITE when it
   is backed by a finite list and INFINITE when it never runs dry
3. ZipSet / ShiftSet / NegSet: the lazy combinators behind +, - and unary -
4. SurrealInfinite: a pair of option sets, optionally named, optionally
   remembering the finite number it wraps

The only way back to the finite engine is SurrealInfinite.to_finite(n),
which truncates every option set to its first n terms. Transfinite
multiplication and comparison are not provided.
"""

from __future__ import annotations
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from .context import SurrealContext, get_default_context
from .errors import WellFormingError
from .finite import SurrealFinite, format_double
from .floats import from_double
from .logging import get_logger

logger = get_logger(__name__)

SurrealElement = Union[SurrealFinite, "SurrealInfinite"]
ProductionFn = Callable[[Optional[SurrealElement], int], Optional[SurrealElement]]


class RuleKind(IntEnum):
    """Whether an option set is known to run dry."""
    FINITE = 0      # Backed by a finite list
    INFINITE = 1    # Produces without end


def format_element(element: SurrealElement) -> str:
    """Finite elements print as their projection, named transfinite ones by name."""
    if isinstance(element, SurrealFinite):
        return format_double(element.to_double())
    if element.name is not None:
        return element.name
    return str(element)


class OptionSet(ABC):
    """A lazy, restartable left or right set of a transfinite number."""

    @property
    @abstractmethod
    def kind(self) -> RuleKind:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[SurrealElement]:
        """Start producing from the first element."""

    def take(self, n: int) -> List[SurrealElement]:
        """First n elements, or fewer if the set runs dry."""
        return list(itertools.islice(self, n))

    def take_fmt(self, n: int) -> List[str]:
        return [format_element(x) for x in self.take(n)]

    def materialize(self) -> List[SurrealElement]:
        """All elements of a FINITE set."""
        if self.kind == RuleKind.INFINITE:
            raise ValueError("cannot materialize an infinite option set")
        return list(self)

    def render(self, terms: int) -> str:
        """First `terms - 1` elements, then "..." if a further one exists."""
        parts = []
        for i, text in enumerate(self.take_fmt(terms)[:terms]):
            parts.append("... " if i == terms - 1 else f"{text} ")
        return "".join(parts)


@dataclass(frozen=True)
class ProductionRule(OptionSet):
    """
    Option set generated by `produce(previous, index)`.

    `seed` is passed as `previous` for index 0. Production stops at the
    first None.
    """
    rule_kind: RuleKind
    produce: ProductionFn
    seed: Optional[SurrealElement] = None

    @classmethod
    def from_sequence(cls, elements: Sequence[SurrealElement]) -> ProductionRule:
        items = tuple(elements)

        def produce(_previous: Optional[SurrealElement], index: int) -> Optional[SurrealElement]:
            return items[index] if index < len(items) else None

        return cls(RuleKind.FINITE, produce)

    @classmethod
    def empty(cls) -> ProductionRule:
        return cls.from_sequence(())

    @property
    def kind(self) -> RuleKind:
        return self.rule_kind

    def __iter__(self) -> Iterator[SurrealElement]:
        previous = self.seed
        for index in itertools.count():
            current = self.produce(previous, index)
            if current is None:
                return
            yield current
            previous = current


@dataclass(frozen=True)
class ZipSet(OptionSet):
    """
    Round-robin interleaving of several option sets.

    take(n) truncates every part to n terms before interleaving, so it can
    return up to n times as many elements as there are parts.
    """
    parts: Tuple[OptionSet, ...]

    @property
    def kind(self) -> RuleKind:
        if all(part.kind == RuleKind.FINITE for part in self.parts):
            return RuleKind.FINITE
        return RuleKind.INFINITE

    def __iter__(self) -> Iterator[SurrealElement]:
        iterators = [iter(part) for part in self.parts]
        while iterators:
            alive = []
            for iterator in iterators:
                try:
                    yield next(iterator)
                except StopIteration:
                    continue
                alive.append(iterator)
            iterators = alive

    def take(self, n: int) -> List[SurrealElement]:
        taken = [part.take(n) for part in self.parts]
        return [
            terms[i]
            for i in range(n)
            for terms in taken
            if i < len(terms)
        ]


@dataclass(frozen=True)
class ShiftSet(OptionSet):
    """Every element of `base` plus the fixed element `offset`."""
    offset: SurrealElement
    base: OptionSet

    @property
    def kind(self) -> RuleKind:
        return self.base.kind

    def __iter__(self) -> Iterator[SurrealElement]:
        for member in self.base:
            yield add_elements(member, self.offset)

    def take(self, n: int) -> List[SurrealElement]:
        return [add_elements(member, self.offset) for member in self.base.take(n)]

    def take_fmt(self, n: int) -> List[str]:
        offset = format_element(self.offset)
        return [f"({format_element(x)} + {offset})" for x in self.base.take(n)]


@dataclass(frozen=True)
class NegSet(OptionSet):
    """Every element of `base`, negated."""
    base: OptionSet

    @property
    def kind(self) -> RuleKind:
        return self.base.kind

    def __iter__(self) -> Iterator[SurrealElement]:
        for member in self.base:
            yield -member

    def take(self, n: int) -> List[SurrealElement]:
        return [-member for member in self.base.take(n)]

    def take_fmt(self, n: int) -> List[str]:
        return [f"-{format_element(x)}" for x in self.base.take(n)]


def add_elements(a: SurrealElement, b: SurrealElement) -> SurrealElement:
    """
    Sum of two option-set elements.

    Wrapped finite numbers are unwrapped first so that finite sums stay in
    the finite engine.
    """
    if isinstance(a, SurrealInfinite) and a.value is not None:
        a = a.value
    if isinstance(b, SurrealInfinite) and b.value is not None:
        b = b.value

    if isinstance(a, SurrealFinite) and isinstance(b, SurrealFinite):
        return a + b
    if isinstance(a, SurrealFinite):
        a = a.to_infinite()
    if isinstance(b, SurrealFinite):
        b = b.to_infinite()
    return a + b


@dataclass(frozen=True, eq=False, repr=False)
class SurrealInfinite:
    """
    A surreal number whose option sets may be infinite.

    `value` is set only for wrapped finite numbers. No order relation is
    defined: truncate with to_finite() and compare the results instead.
    """
    left: OptionSet
    right: OptionSet
    context: SurrealContext = field(default_factory=get_default_context)
    name: Optional[str] = None
    value: Optional[SurrealFinite] = None

    @classmethod
    def new(
        cls,
        left: ProductionFn,
        left_seed: Optional[SurrealElement],
        right: ProductionFn,
        right_seed: Optional[SurrealElement],
        name: Optional[str] = None,
        context: Optional[SurrealContext] = None,
    ) -> SurrealInfinite:
        """Build from two unbounded production functions and their seeds."""
        return cls(
            left=ProductionRule(RuleKind.INFINITE, left, left_seed),
            right=ProductionRule(RuleKind.INFINITE, right, right_seed),
            context=context if context is not None else get_default_context(),
            name=name,
        )

    @classmethod
    def from_finite(cls, x: SurrealFinite) -> SurrealInfinite:
        """Wrap a finite number; its option sets are its own finite options."""
        return cls(
            left=ProductionRule.from_sequence(x.left),
            right=ProductionRule.from_sequence(x.right),
            context=x.context,
            value=x,
        )

    @classmethod
    def omega(cls, context: Optional[SurrealContext] = None) -> SurrealInfinite:
        """ω = {1, 2, 3, ... |}"""
        context = context if context is not None else get_default_context()

        def naturals(_previous: Optional[SurrealElement], index: int) -> SurrealElement:
            return from_double(index + 1.0, context)

        return cls(
            left=ProductionRule(RuleKind.INFINITE, naturals),
            right=ProductionRule.empty(),
            context=context,
            name="ω",
        )

    @classmethod
    def epsilon(cls, context: Optional[SurrealContext] = None) -> SurrealInfinite:
        """ε = {0 | 1/2, 1/4, 1/8, ...}"""
        context = context if context is not None else get_default_context()
        zero = SurrealFinite.zero(context)

        def halve(previous: Optional[SurrealElement], _index: int) -> SurrealElement:
            if not isinstance(previous, SurrealFinite):
                raise TypeError("ε halves finite elements only")
            return SurrealFinite.new([zero], [previous], context)

        return cls(
            left=ProductionRule.from_sequence([zero]),
            right=ProductionRule(RuleKind.INFINITE, halve, SurrealFinite.one(context)),
            context=context,
            name="ϵ",
        )

    def to_finite(self, precision: Optional[int] = None) -> Optional[SurrealFinite]:
        """
        Truncate both option sets to their first `precision` terms.

        Nested transfinite elements are truncated recursively with the same
        precision. Returns None if any of them fails to resolve or the
        truncation is not a well-formed number.
        """
        if precision is None:
            precision = self.context.config.truncation_precision

        def resolve(element: SurrealElement) -> Optional[SurrealFinite]:
            if isinstance(element, SurrealFinite):
                return element
            return element.to_finite(precision)

        left = [resolve(x) for x in self.left.take(precision)]
        right = [resolve(x) for x in self.right.take(precision)]

        if any(x is None for x in left) or any(x is None for x in right):
            logger.debug("Truncation of %r to %d terms left a nested value unresolved", self, precision)
            return None

        try:
            return SurrealFinite.new(left, right, self.context)
        except WellFormingError as error:
            logger.debug("Truncation of %r to %d terms is not well-formed: %s", self, precision, error)
            return None

    def to_element(self) -> SurrealInfinite:
        return self

    def __add__(self, other: Union[SurrealInfinite, SurrealFinite]) -> SurrealInfinite:
        if isinstance(other, SurrealFinite):
            other = other.to_infinite()
        if not isinstance(other, SurrealInfinite):
            return NotImplemented
        return SurrealInfinite(
            left=ZipSet((ShiftSet(self, other.left), ShiftSet(other, self.left))),
            right=ZipSet((ShiftSet(self, other.right), ShiftSet(other, self.right))),
            context=self.context,
        )

    def __radd__(self, other: SurrealFinite) -> SurrealInfinite:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        return other.to_infinite() + self

    def __neg__(self) -> SurrealInfinite:
        return SurrealInfinite(
            left=NegSet(self.right),
            right=NegSet(self.left),
            context=self.context,
        )

    def __sub__(self, other: Union[SurrealInfinite, SurrealFinite]) -> SurrealInfinite:
        if isinstance(other, SurrealFinite):
            other = other.to_infinite()
        if not isinstance(other, SurrealInfinite):
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: SurrealFinite) -> SurrealInfinite:
        if not isinstance(other, SurrealFinite):
            return NotImplemented
        return other.to_infinite() - self

    def __str__(self) -> str:
        if self.value is not None:
            return format_double(self.value.to_double())
        terms = self.context.config.display_terms
        return f"< {self.left.render(terms)}| {self.right.render(terms)}>"

    def __repr__(self) -> str:
        if self.name is not None:
            return f"SurrealInfinite({self.name})"
        return f"SurrealInfinite({self})"


def omega(context: Optional[SurrealContext] = None) -> SurrealInfinite:
    return SurrealInfinite.omega(context)


def epsilon(context: Optional[SurrealContext] = None) -> SurrealInfinite:
    return SurrealInfinite.epsilon(context)
