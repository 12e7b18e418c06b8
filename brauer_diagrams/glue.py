"""
Diagram Gluing Module

Vertical composition of single Brauer diagrams. Two diagrams are stacked
along their shared interface, the resulting strands are traced with a
union-find over all endpoints, and every closed loop is removed and
counted towards the power of the loop value δ.
"""

from __future__ import annotations

from typing import List, NamedTuple

import numpy as np

from .errors import CompositionArityMismatch, MalformedMatchingError
from .matching import Pair, PerfectMatching


class DisjointSet:
    """Union-find over 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int):
        self.parent = np.arange(size, dtype=np.int64)
        self.rank = np.zeros(size, dtype=np.int64)

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = int(self.parent[root])
        while self.parent[x] != root:
            self.parent[x], x = root, int(self.parent[x])
        return root

    def union(self, x: int, y: int) -> None:
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return
        if self.rank[rx] < self.rank[ry]:
            rx, ry = ry, rx
        self.parent[ry] = rx
        if self.rank[rx] == self.rank[ry]:
            self.rank[rx] += 1

    def num_components(self) -> int:
        return len({self.find(i) for i in range(len(self.parent))})


class TaggedMatching(NamedTuple):
    """
    A single diagram together with its shape and loop count.

    Represents δ^delta_power · matching, read as a map domain → codomain.
    Only used while composing; multiplication is vertical composition.
    """
    domain: int
    codomain: int
    delta_power: int
    matching: PerfectMatching

    def __mul__(self, other: TaggedMatching) -> TaggedMatching:
        return compose_tagged(self, other)


def compose_tagged(left: TaggedMatching, right: TaggedMatching) -> TaggedMatching:
    """
    Glue left's codomain onto right's domain.

    Endpoints of left keep their indices; endpoint p of right becomes
    p + left.domain, so right's domain dots land on left's codomain dots.

    Args:
        left: Diagram applied first
        right: Diagram applied second

    Returns:
        Composite diagram left.domain → right.codomain with the closed
        loops folded into delta_power

    Raises:
        CompositionArityMismatch: If left.codomain != right.domain
    """
    d_left, c_left, p_left, m_left = left
    d_right, c_right, p_right, m_right = right
    if c_left != d_right:
        raise CompositionArityMismatch(
            f"Cannot glue a diagram with codomain {c_left} onto one with domain {d_right}"
        )

    strands = DisjointSet(d_left + c_left + c_right)
    for a, b in m_left:
        strands.union(a, b)
    for a, b in m_right:
        strands.union(a + d_left, b + d_left)

    num_boundary = d_left + c_right

    def node(i: int) -> int:
        return i if i < d_left else i + c_left

    roots = [strands.find(node(i)) for i in range(num_boundary)]
    paired = [False] * num_boundary
    final_pairs: List[Pair] = []
    for i in range(num_boundary):
        if paired[i]:
            continue
        for j in range(i + 1, num_boundary):
            if not paired[j] and roots[i] == roots[j]:
                final_pairs.append(Pair(i, j))
                paired[i] = paired[j] = True
                break
        else:
            raise MalformedMatchingError(
                f"Boundary point {i} has no partner after gluing {m_left} and {m_right}"
            )

    delta_power = strands.num_components() + p_left + p_right - len(final_pairs)
    return TaggedMatching(d_left, c_right, delta_power, PerfectMatching(final_pairs))
