"""
Brauer Morphism Module

Morphisms of the Brauer category: formal linear combinations of
δ^k · (perfect matching), all sharing one domain size and one codomain
size. Composition glues diagrams and counts the closed loops removed,
the monoidal product stacks diagrams side by side, and the dagger flips
them upside down.

Temperley-Lieb morphisms are the Brauer morphisms whose diagrams are all
non-crossing. Whether a morphism is known to be one is tracked by a
conservative NonCrossingStatus that can only be upgraded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .categorical import HasIdentity, MonoidalMorphism
from .constants import DEFAULT_ONE, DEFAULT_ZERO, DELTA_SYMBOL
from .errors import CompositionArityMismatch
from .glue import TaggedMatching
from .linear_combination import Coefficient, LinearCombination
from .matching import PerfectMatching, shift_pairs

logger = logging.getLogger(__name__)

# (power of δ, diagram)
Term = Tuple[int, PerfectMatching]


class NonCrossingStatus(Enum):
    """What is known about planarity: only ever upgraded UNVERIFIED → VERIFIED."""
    UNVERIFIED = "unverified"
    VERIFIED = "verified"

    @classmethod
    def conjunction(cls, a: NonCrossingStatus, b: NonCrossingStatus) -> NonCrossingStatus:
        if a is cls.VERIFIED and b is cls.VERIFIED:
            return cls.VERIFIED
        return cls.UNVERIFIED


@dataclass(eq=False)
class BrauerMorphism(MonoidalMorphism, HasIdentity):
    """
    A morphism source → target in the Brauer category.

    A term (k, m) with coefficient c stands for c · δ^k · m, where m is a
    perfect matching on source + target endpoints (domain dots first).

    Attributes:
        diagram: Linear combination of (delta power, matching) terms
        source: Number of domain dots
        target: Number of codomain dots
        status: Whether every term is known to be non-crossing
    """
    diagram: LinearCombination[Term]
    source: int
    target: int
    status: NonCrossingStatus = field(default=NonCrossingStatus.UNVERIFIED)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls, on_this: int, one: Coefficient = DEFAULT_ONE) -> BrauerMorphism:
        """Identity on on_this dots: dot i is matched with dot i + on_this."""
        matching = PerfectMatching((i, i + on_this) for i in range(on_this))
        return cls(LinearCombination.singleton((0, matching), one),
                   on_this, on_this, NonCrossingStatus.VERIFIED)

    @classmethod
    def delta_polynomial(cls, coeffs: Sequence[Coefficient]) -> BrauerMorphism:
        """
        The element Σ coeffs[k] · δ^k of Hom(0, 0) = R[δ].

        Args:
            coeffs: Polynomial coefficients, constant term first

        Returns:
            Endomorphism of the empty object; an empty coeffs gives 0 · δ^0
        """
        empty = PerfectMatching()
        diagram: LinearCombination[Term] = LinearCombination(
            {(0, empty): coeffs[0] if len(coeffs) > 0 else DEFAULT_ZERO}
        )
        for power, coeff in enumerate(coeffs[1:], start=1):
            diagram += LinearCombination.singleton((power, empty), coeff)
        return cls(diagram, 0, 0, NonCrossingStatus.VERIFIED)

    @classmethod
    def scalar(cls, coeff: Coefficient) -> BrauerMorphism:
        """coeff times the identity on the empty object."""
        return cls.delta_polynomial([coeff])

    @classmethod
    def temperley_lieb_gens(cls, n: int, one: Coefficient = DEFAULT_ONE) -> List[BrauerMorphism]:
        """
        The Temperley-Lieb generators e_1 ... e_{n-1} in Hom(n, n).

        e_i caps domain dots i-1, i and cups codomain dots i-1, i (0-based),
        every other dot goes straight through.
        """
        gens = []
        for i in range(n - 1):
            pairs = [(i, i + 1), (i + n, i + 1 + n)]
            pairs.extend((j, j + n) for j in range(n) if j not in (i, i + 1))
            gens.append(cls(LinearCombination.singleton((0, PerfectMatching(pairs)), one),
                            n, n, NonCrossingStatus.VERIFIED))
        return gens

    @classmethod
    def symmetric_alg_gens(cls, n: int, one: Coefficient = DEFAULT_ONE) -> List[BrauerMorphism]:
        """
        The transpositions s_1 ... s_{n-1} in Hom(n, n).

        s_i crosses strands i-1 and i (0-based), every other dot goes
        straight through.
        """
        gens = []
        for i in range(n - 1):
            pairs = [(i, i + n + 1), (i + 1, i + n)]
            pairs.extend((j, j + n) for j in range(n) if j not in (i, i + 1))
            gens.append(cls(LinearCombination.singleton((0, PerfectMatching(pairs)), one),
                            n, n, NonCrossingStatus.UNVERIFIED))
        return gens

    def copy(self) -> BrauerMorphism:
        return BrauerMorphism(self.diagram.copy(), self.source, self.target, self.status)

    # -------------------------------------------------------------------------
    # Category structure
    # -------------------------------------------------------------------------

    def domain(self) -> int:
        return self.source

    def codomain(self) -> int:
        return self.target

    @property
    def is_def_tl(self) -> bool:
        """True only if every term has been established to be non-crossing."""
        return self.status is NonCrossingStatus.VERIFIED

    def compose(self, other: BrauerMorphism) -> BrauerMorphism:
        """
        Self followed by other, gluing every pair of diagrams.

        Each term is tagged with its shape so that TaggedMatching
        multiplication can glue it; the tags are dropped afterwards and
        terms that end up equal are summed.

        Raises:
            CompositionArityMismatch: If self.target != other.source
        """
        self.composable(other)
        tagged_self = self.diagram.inj_linearly_extend(
            lambda term: TaggedMatching(self.source, self.target, term[0], term[1])
        )
        tagged_other = other.diagram.inj_linearly_extend(
            lambda term: TaggedMatching(other.source, other.target, term[0], term[1])
        )
        product = tagged_self * tagged_other
        diagram = product.linearly_extend(lambda tagged: (tagged.delta_power, tagged.matching))
        logger.debug("composed %d x %d terms (%d -> %d -> %d) into %d terms",
                     len(self.diagram), len(other.diagram),
                     self.source, self.target, other.target, len(diagram))
        return BrauerMorphism(diagram, self.source, other.target,
                              NonCrossingStatus.conjunction(self.status, other.status))

    def tensor(self, other: BrauerMorphism) -> None:
        """
        Replace self with self ⊗ other, other's dots placed to the right.

        Domain dots of other are inserted after self's domain dots and its
        codomain dots after self's codomain dots; powers of δ add.
        """
        old_domain, old_codomain = self.source, self.target
        other_domain = other.source
        self.source += other.source
        self.target += other.target
        new_domain = self.source

        def stack(left: Term, right: Term) -> Term:
            left_power, left_matching = left
            right_power, right_matching = right
            shifted_left = left_matching.shift_index(old_domain, other_domain)
            shifted_right = shift_pairs(right_matching.shift_index(0, old_domain),
                                        new_domain, old_codomain)
            return (left_power + right_power, PerfectMatching(shifted_left + shifted_right))

        self.diagram = self.diagram.linear_combine(other.diagram, stack)
        self.status = NonCrossingStatus.conjunction(self.status, other.status)

    def __matmul__(self, other: BrauerMorphism) -> BrauerMorphism:
        result = self.copy()
        result.tensor(other)
        return result

    def dagger(self, conjugate: Optional[Callable[[Coefficient], Coefficient]] = None) -> BrauerMorphism:
        """
        Adjoint: flip every diagram upside down and conjugate every coefficient.

        Args:
            conjugate: Involution on coefficients (e.g. complex conjugation);
                coefficients are left unchanged when None

        Returns:
            New morphism target → source
        """
        diagram = self.diagram.inj_linearly_extend(
            lambda term: (term[0], term[1].flip_upside_down(self.source, self.target))
        )
        if conjugate is not None:
            diagram.change_coeffs(conjugate)
        return BrauerMorphism(diagram, self.target, self.source, self.status)

    def verify_non_crossing(self) -> bool:
        """
        Upgrade status to VERIFIED if every diagram is non-crossing.

        Never downgrades; does nothing when already VERIFIED.
        """
        if self.status is NonCrossingStatus.VERIFIED:
            return True
        if self.diagram.all_terms_satisfy(lambda term: term[1].non_crossing(self.source, self.target)):
            self.status = NonCrossingStatus.VERIFIED
        logger.debug("non-crossing check on %d terms: %s", len(self.diagram), self.status.value)
        return self.is_def_tl

    def simplify(self) -> None:
        """Remove terms with zero coefficient."""
        self.diagram.simplify()

    # -------------------------------------------------------------------------
    # Hom-space module structure
    # -------------------------------------------------------------------------

    def _check_same_shape(self, other: BrauerMorphism) -> None:
        if (self.source, self.target) != (other.source, other.target):
            raise CompositionArityMismatch(
                f"Cannot add morphisms {self.source} -> {self.target} "
                f"and {other.source} -> {other.target}"
            )

    def __add__(self, other: BrauerMorphism) -> BrauerMorphism:
        if not isinstance(other, BrauerMorphism):
            return NotImplemented
        self._check_same_shape(other)
        return BrauerMorphism(self.diagram + other.diagram, self.source, self.target,
                              NonCrossingStatus.conjunction(self.status, other.status))

    def __sub__(self, other: BrauerMorphism) -> BrauerMorphism:
        if not isinstance(other, BrauerMorphism):
            return NotImplemented
        self._check_same_shape(other)
        return BrauerMorphism(self.diagram - other.diagram, self.source, self.target,
                              NonCrossingStatus.conjunction(self.status, other.status))

    def __neg__(self) -> BrauerMorphism:
        return BrauerMorphism(-self.diagram, self.source, self.target, self.status)

    def __mul__(self, scalar: Any) -> BrauerMorphism:
        if isinstance(scalar, BrauerMorphism):
            return NotImplemented
        return BrauerMorphism(self.diagram * scalar, self.source, self.target, self.status)

    def __rmul__(self, scalar: Any) -> BrauerMorphism:
        return BrauerMorphism(scalar * self.diagram, self.source, self.target, self.status)

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BrauerMorphism):
            return NotImplemented
        return (self.diagram == other.diagram
                and self.source == other.source
                and self.target == other.target)

    __hash__ = None

    def __str__(self) -> str:
        if not self.diagram:
            return f"0 : {self.source} -> {self.target}"
        terms = []
        for (power, matching), coeff in self.diagram.items():
            loops = "" if power == 0 else f"{DELTA_SYMBOL}^{power}·"
            terms.append(f"{coeff}·{loops}{[tuple(p) for p in matching]}")
        return f"{' + '.join(terms)} : {self.source} -> {self.target}"
