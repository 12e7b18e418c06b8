"""
Perfect Matching Module

A Brauer diagram with m domain dots and k codomain dots is a perfect
matching on the endpoints 0..m+k-1: the first m indices are the domain
dots, the rest are the codomain dots.

PerfectMatching is kept in canonical form (each pair sorted, pairs sorted)
so that equality and hashing agree with equality of the matching itself.
"""

from __future__ import annotations

from itertools import combinations
from numbers import Integral
from typing import Callable, Iterable, List, NamedTuple, Set, Tuple, Union

import numpy as np

from .errors import MalformedMatchingError


# =============================================================================
# SECTION 1: Pair
# =============================================================================

class Pair(NamedTuple):
    """Two matched endpoints. Canonical when first < second."""
    first: int
    second: int

    @classmethod
    def sorted(cls, x: int, y: int) -> Pair:
        return cls(x, y) if x < y else cls(y, x)

    def sort(self) -> Pair:
        return Pair.sorted(self.first, self.second)

    def map(self, f: Callable[[int], int]) -> Pair:
        return Pair(f(self.first), f(self.second))

    def all(self, f: Callable[[int], bool]) -> bool:
        return f(self.first) and f(self.second)

    def any(self, f: Callable[[int], bool]) -> bool:
        return f(self.first) or f(self.second)

    def contains(self, x: int) -> bool:
        """True iff x lies strictly between the two endpoints."""
        lo, hi = min(self.first, self.second), max(self.first, self.second)
        return lo < x < hi

    def flip_upside_down(self, source: int, target: int) -> Pair:
        return self.map(lambda v: v + target if v < source else v - source)


PairLike = Union[Pair, Tuple[int, int]]


def shift_pairs(pairs: Iterable[Pair], threshold: int, shift_amount: int) -> Tuple[Pair, ...]:
    """Relabel v -> v + shift_amount for every endpoint v >= threshold."""
    return tuple(p.map(lambda v: v + shift_amount if v >= threshold else v) for p in pairs)


def _endpoint(v: object) -> int:
    # numpy integer types register as numbers.Integral
    if not isinstance(v, Integral):
        raise MalformedMatchingError(f"Endpoint {v!r} is not an integer")
    return int(v)


# =============================================================================
# SECTION 2: PerfectMatching
# =============================================================================

class PerfectMatching:
    """
    A set of n pairs covering 0..2n-1 exactly once.

    Attributes:
        pairs: Canonical tuple of Pair (each sorted, then sorted as a list)
    """

    __slots__ = ("pairs",)

    def __init__(self, pairs: Iterable[PairLike] = ()):
        candidate = [Pair(_endpoint(p[0]), _endpoint(p[1])) for p in pairs]
        expected = 2 * len(candidate)
        endpoints = sorted(v for p in candidate for v in p)
        if endpoints != list(range(expected)):
            raise MalformedMatchingError(
                f"Pairs {candidate} do not cover 0..{expected - 1} exactly once"
            )
        self.pairs: Tuple[Pair, ...] = tuple(sorted(p.sort() for p in candidate))

    @classmethod
    def from_partner_array(cls, partners: Union[Iterable[int], np.ndarray]) -> PerfectMatching:
        """
        Build from an involution array where partners[i] is matched with i.

        Raises:
            MalformedMatchingError: If partners is not a fixed-point-free involution
        """
        arr = np.asarray(list(partners) if not isinstance(partners, np.ndarray) else partners,
                         dtype=np.int64)
        n = len(arr)
        if np.any(arr < 0) or np.any(arr >= n) or np.any(arr == np.arange(n)) \
                or np.any(arr[arr] != np.arange(n)):
            raise MalformedMatchingError(f"{arr.tolist()} is not a fixed-point-free involution")
        return cls((i, int(j)) for i, j in enumerate(arr) if i < j)

    def partner_array(self) -> np.ndarray:
        """Involution array: result[i] is the endpoint matched with i."""
        partners = np.empty(self.num_endpoints, dtype=np.int64)
        for a, b in self.pairs:
            partners[a] = b
            partners[b] = a
        return partners

    @property
    def num_endpoints(self) -> int:
        return 2 * len(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self):
        return iter(self.pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PerfectMatching):
            return NotImplemented
        return self.pairs == other.pairs

    def __hash__(self) -> int:
        return hash(self.pairs)

    def __repr__(self) -> str:
        return f"PerfectMatching({[tuple(p) for p in self.pairs]})"

    # -------------------------------------------------------------------------
    # Relabeling
    # -------------------------------------------------------------------------

    def shift_index(self, threshold: int, shift_amount: int) -> Tuple[Pair, ...]:
        """
        Move every endpoint >= threshold up by shift_amount.

        The result leaves a gap in the index range, so it is returned as
        bare pairs to be spliced with other pairs into a new matching.
        """
        return shift_pairs(self.pairs, threshold, shift_amount)

    def flip_upside_down(self, source: int, target: int) -> PerfectMatching:
        """
        Reflect the diagram so that domain and codomain swap roles.

        Domain dot v becomes codomain dot v + target; codomain dot v
        becomes domain dot v - source.
        """
        return PerfectMatching(p.flip_upside_down(source, target) for p in self.pairs)

    # -------------------------------------------------------------------------
    # Planarity
    # -------------------------------------------------------------------------

    def non_crossing(self, source: int, target: int) -> bool:
        """
        Decide whether the diagram is Temperley-Lieb (drawable without crossings).

        Args:
            source: Number of domain dots
            target: Number of codomain dots

        Returns:
            True iff no two lines cross
        """
        blocked: Set[int] = set()
        for side_lines in (
            [p for p in self.pairs if p.all(lambda v: v < source)],
            [p for p in self.pairs if p.all(lambda v: v >= source)],
        ):
            for first_line, second_line in combinations(side_lines, 2):
                # exactly one endpoint inside means the two cups cross
                if first_line.contains(second_line.first) != first_line.contains(second_line.second):
                    return False
            for lo, hi in side_lines:
                blocked.update(range(lo + 1, hi))

        through_lines: List[Pair] = [
            p for p in self.pairs if p.first < source <= p.second
        ]
        if any(p.any(lambda v: v in blocked) for p in through_lines):
            return False

        # pairs are sorted by domain endpoint, so read off the codomain ends
        codomain_ends = np.array([p.second for p in through_lines], dtype=np.int64)
        return bool(np.all(np.diff(codomain_ends) >= 0))
