"""
Tests for the Categorical Framework
"""

import pytest

from brauer_diagrams.brauer import BrauerMorphism
from brauer_diagrams.categorical import (
    Composable,
    ComposableMutating,
    HasIdentity,
    Monoidal,
    MonoidalMorphism,
    compose_all,
)
from brauer_diagrams.errors import CompositionArityMismatch


class Arrow(Composable):
    """Minimal composable: an arrow between two named objects."""

    def __init__(self, source, target, name):
        self.source = source
        self.target = target
        self.name = name

    def domain(self):
        return self.source

    def codomain(self):
        return self.target

    def compose(self, other):
        self.composable(other)
        return Arrow(self.source, other.target, f"{other.name}∘{self.name}")


class TestContract:
    def test_abstract_classes(self):
        with pytest.raises(TypeError):
            Composable()
        with pytest.raises(TypeError):
            Monoidal()
        with pytest.raises(TypeError):
            HasIdentity()
        with pytest.raises(TypeError):
            ComposableMutating()

    def test_brauer_satisfies_contract(self):
        ident = BrauerMorphism.identity(2)
        assert isinstance(ident, MonoidalMorphism)
        assert isinstance(ident, HasIdentity)

    def test_composable_accepts_matching_ends(self):
        f = Arrow("A", "B", "f")
        g = Arrow("B", "C", "g")
        f.composable(g)

    def test_composable_rejects_mismatch(self):
        f = Arrow("A", "B", "f")
        g = Arrow("C", "D", "g")
        with pytest.raises(CompositionArityMismatch):
            f.composable(g)
        with pytest.raises(ValueError):
            f.compose(g)


class TestComposeAll:
    def test_folds_left_to_right(self):
        f = Arrow("A", "B", "f")
        g = Arrow("B", "C", "g")
        h = Arrow("C", "D", "h")
        composed = compose_all(f, g, h)
        assert composed.source == "A"
        assert composed.target == "D"
        assert composed.name == "h∘g∘f"

    def test_single_morphism(self):
        f = Arrow("A", "B", "f")
        assert compose_all(f) is f

    def test_rshift(self):
        f = Arrow("A", "B", "f")
        g = Arrow("B", "C", "g")
        assert (f >> g).name == "g∘f"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
