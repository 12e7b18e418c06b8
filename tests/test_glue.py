"""
Tests for Diagram Gluing
"""

import pytest

from brauer_diagrams.errors import CompositionArityMismatch
from brauer_diagrams.glue import DisjointSet, TaggedMatching, compose_tagged
from brauer_diagrams.matching import PerfectMatching


def identity(n, power=0):
    return TaggedMatching(n, n, power, PerfectMatching((i, i + n) for i in range(n)))


def cup(power=0):
    return TaggedMatching(0, 2, power, PerfectMatching([(0, 1)]))


def cap(power=0):
    return TaggedMatching(2, 0, power, PerfectMatching([(0, 1)]))


class TestDisjointSet:
    def test_initially_separate(self):
        ds = DisjointSet(4)
        assert ds.num_components() == 4
        assert ds.find(2) == 2

    def test_union(self):
        ds = DisjointSet(5)
        ds.union(0, 1)
        ds.union(3, 4)
        ds.union(1, 4)
        assert ds.find(0) == ds.find(3)
        assert ds.find(2) != ds.find(0)
        assert ds.num_components() == 2

    def test_union_is_idempotent(self):
        ds = DisjointSet(3)
        ds.union(0, 1)
        ds.union(1, 0)
        assert ds.num_components() == 2


class TestComposeTagged:
    @pytest.mark.parametrize("n", range(5))
    def test_identity_squared(self, n):
        result = identity(n) * identity(n)
        assert result == identity(n)

    def test_cap_then_cup(self):
        result = compose_tagged(cap(), cup())
        assert result == TaggedMatching(2, 2, 0, PerfectMatching([(0, 1), (2, 3)]))

    def test_cup_then_cap_closes_loop(self):
        result = cup() * cap()
        assert result == TaggedMatching(0, 0, 1, PerfectMatching())

    def test_powers_add(self):
        result = cup(power=2) * cap(power=3)
        assert result.delta_power == 6

    def test_two_disjoint_loops(self):
        two_cups = TaggedMatching(0, 4, 0, PerfectMatching([(0, 1), (2, 3)]))
        two_caps = TaggedMatching(4, 0, 0, PerfectMatching([(0, 1), (2, 3)]))
        assert (two_cups * two_caps).delta_power == 2

    def test_nested_cups_against_side_by_side_caps(self):
        nested = TaggedMatching(0, 4, 0, PerfectMatching([(0, 3), (1, 2)]))
        two_caps = TaggedMatching(4, 0, 0, PerfectMatching([(0, 1), (2, 3)]))
        assert (nested * two_caps).delta_power == 1

    def test_loops_add_to_open_composition(self):
        # same boundary pairing as cap-then-cup, with one extra closed loop
        open_part = compose_tagged(cap(), cup())
        with_loop = compose_tagged(
            TaggedMatching(2, 2, 0, PerfectMatching([(0, 1), (2, 3)])),
            TaggedMatching(2, 2, 0, PerfectMatching([(0, 1), (2, 3)])),
        )
        assert with_loop.matching == open_part.matching
        assert with_loop.delta_power == open_part.delta_power + 1

    def test_snake(self):
        # (id ⊗ cup) then (cap ⊗ id) straightens to the identity
        id_cup = TaggedMatching(1, 3, 0, PerfectMatching([(0, 1), (2, 3)]))
        cap_id = TaggedMatching(3, 1, 0, PerfectMatching([(0, 1), (2, 3)]))
        assert id_cup * cap_id == identity(1)

    def test_result_shape(self):
        left = TaggedMatching(3, 1, 0, PerfectMatching([(0, 1), (2, 3)]))
        right = TaggedMatching(1, 3, 0, PerfectMatching([(0, 1), (2, 3)]))
        result = left * right
        assert (result.domain, result.codomain) == (3, 3)
        assert result.matching.num_endpoints == 6

    def test_arity_mismatch(self):
        with pytest.raises(CompositionArityMismatch):
            identity(2) * identity(3)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
