"""
Structure Cache for Finite Surreal Numbers

A finite surreal number is a pair of finite option sets {L | R}. This module
interns those pairs so that each distinct structure is stored once and
referred to by a small integer identifier:

1. Both sides are sorted under the surreal total order before interning
2. The sorted identifier tuples form the structural key (get-or-insert)
3. Identical sorted content always yields the identical identifier

Identifier equality therefore implies numeric equality, but not the other way
round: {-1 | 1} and {|} are different structures denoting the same number.
"""

from __future__ import annotations
import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .errors import StructureNotFoundError


class Side(IntEnum):
    """Which option set of a structure."""
    LEFT = 0
    RIGHT = 1


@dataclass(frozen=True)
class Structure:
    """
    An interned {left | right} pair.

    `left` and `right` hold child identifiers in increasing order.
    `depth` is the construction depth: 0 for {|}, otherwise one more than
    the deepest child. Every recursive operation strictly decreases the
    depth of at least one operand, which is what makes them terminate.
    """
    left: Tuple[int, ...]
    right: Tuple[int, ...]
    depth: int = 0

    @property
    def key(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        return (self.left, self.right)

    def side(self, side: Side) -> Tuple[int, ...]:
        return self.left if side == Side.LEFT else self.right


class StructureCache:
    """
    Append-only mapping identifier -> Structure with structural dedup.

    The lock guards a single lookup or insert. Sorting happens outside it
    because sorting consults the order relation, which reads the cache.
    """

    def __init__(self):
        self._structures: List[Structure] = []
        self._index: Dict[Tuple[Tuple[int, ...], Tuple[int, ...]], int] = {}
        self._lock = threading.Lock()

    def intern(
        self,
        left: Iterable[int],
        right: Iterable[int],
        key: Optional[Callable[[int], Any]] = None,
    ) -> int:
        """Sort both sides with `key` and return the identifier of the result."""
        sorted_left = tuple(sorted(left, key=key))
        sorted_right = tuple(sorted(right, key=key))
        structural_key = (sorted_left, sorted_right)

        with self._lock:
            existing = self._index.get(structural_key)
            if existing is not None:
                return existing

        # Children are already interned, so their depths can be read unlocked
        depth = 1 + max(
            (self.depth(child) for child in sorted_left + sorted_right),
            default=-1,
        )

        with self._lock:
            # Another thread may have inserted the same content meanwhile
            existing = self._index.get(structural_key)
            if existing is not None:
                return existing
            identifier = len(self._structures)
            self._structures.append(Structure(sorted_left, sorted_right, depth))
            self._index[structural_key] = identifier
            return identifier

    def structure(self, identifier: int) -> Structure:
        with self._lock:
            if 0 <= identifier < len(self._structures):
                return self._structures[identifier]
        raise StructureNotFoundError(identifier)

    def children(self, identifier: int, side: Side) -> Tuple[int, ...]:
        return self.structure(identifier).side(side)

    def left(self, identifier: int) -> Tuple[int, ...]:
        return self.structure(identifier).left

    def right(self, identifier: int) -> Tuple[int, ...]:
        return self.structure(identifier).right

    def depth(self, identifier: int) -> int:
        return self.structure(identifier).depth

    def __contains__(self, identifier: int) -> bool:
        with self._lock:
            return 0 <= identifier < len(self._structures)

    def __len__(self) -> int:
        with self._lock:
            return len(self._structures)
