"""
Brauer Diagrams - Diagram Algebra for Monoidal Categories

Morphisms are formal linear combinations of perfect matchings. The package
provides composition (gluing diagrams and counting closed loops), the
monoidal product (stacking), the dagger (reflection) and a decision
procedure for Temperley-Lieb (non-crossing) diagrams.
"""

import logging

__version__ = "0.1.0"

from .errors import (
    DiagramAlgebraError,
    MalformedMatchingError,
    InjectivityViolation,
    CompositionArityMismatch,
)
from .linear_combination import LinearCombination
from .matching import Pair, PerfectMatching, shift_pairs
from .glue import TaggedMatching, compose_tagged
from .categorical import (
    Composable,
    ComposableMutating,
    HasIdentity,
    Monoidal,
    MonoidalMorphism,
    compose_all,
)
from .brauer import BrauerMorphism, NonCrossingStatus
from .monoidal import GenericMonoidalMorphism, GenericMonoidalMorphismLayer, interpret

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DiagramAlgebraError",
    "MalformedMatchingError",
    "InjectivityViolation",
    "CompositionArityMismatch",
    "LinearCombination",
    "Pair",
    "PerfectMatching",
    "shift_pairs",
    "TaggedMatching",
    "compose_tagged",
    "Composable",
    "ComposableMutating",
    "HasIdentity",
    "Monoidal",
    "MonoidalMorphism",
    "compose_all",
    "BrauerMorphism",
    "NonCrossingStatus",
    "GenericMonoidalMorphism",
    "GenericMonoidalMorphismLayer",
    "interpret",
]
