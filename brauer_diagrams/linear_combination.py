"""
Linear Combination Module

Implements formal linear combinations: the free module over an arbitrary
hashable key type, with coefficients in any exact commutative ring.

A LinearCombination maps keys to coefficients. A missing key means
coefficient zero, but a key that is present with coefficient zero is kept
until simplify() is called, so structural equality is stricter than
mathematical equality unless both sides have been simplified.
"""

from __future__ import annotations

from typing import (
    Any, Callable, Dict, Generic, Hashable, ItemsView, Iterable, Iterator,
    KeysView, Mapping, Optional, Tuple, TypeVar, Union, ValuesView,
)

from .constants import DEFAULT_ONE, DEFAULT_ZERO, MAX_REPR_TERMS
from .errors import InjectivityViolation

K = TypeVar("K", bound=Hashable)
U = TypeVar("U", bound=Hashable)
V = TypeVar("V", bound=Hashable)

Coefficient = Any


class LinearCombination(Generic[K]):
    """
    A finite formal sum  Σ c_k · k  of distinct keys.

    Binary operators always return a new instance and never alias their
    operands; the in-place operators only mutate the left-hand side.

    Attributes:
        _terms: Mapping from key to coefficient
    """

    __slots__ = ("_terms",)
    __hash__ = None  # mutable

    def __init__(self, terms: Optional[Union[Mapping[K, Coefficient],
                                             Iterable[Tuple[K, Coefficient]]]] = None):
        if terms is None:
            self._terms: Dict[K, Coefficient] = {}
        else:
            self._terms = dict(terms)

    @classmethod
    def singleton(cls, key: K, one: Coefficient = DEFAULT_ONE) -> LinearCombination[K]:
        """The combination with the single term key ↦ one."""
        return cls({key: one})

    def copy(self) -> LinearCombination[K]:
        return LinearCombination(self._terms)

    # -------------------------------------------------------------------------
    # Mapping-like access
    # -------------------------------------------------------------------------

    def coefficient(self, key: K, default: Coefficient = DEFAULT_ZERO) -> Coefficient:
        """Coefficient of key, or default when the key is absent."""
        return self._terms.get(key, default)

    def keys(self) -> KeysView[K]:
        return self._terms.keys()

    def values(self) -> ValuesView[Coefficient]:
        return self._terms.values()

    def items(self) -> ItemsView[K, Coefficient]:
        return self._terms.items()

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[K]:
        return iter(self._terms)

    def __contains__(self, key: object) -> bool:
        return key in self._terms

    def __bool__(self) -> bool:
        return bool(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearCombination):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        shown = [f"{c!r}*{k!r}" for k, c in list(self._terms.items())[:MAX_REPR_TERMS]]
        if len(self._terms) > MAX_REPR_TERMS:
            shown.append(f"... ({len(self._terms) - MAX_REPR_TERMS} more)")
        return f"LinearCombination({' + '.join(shown) if shown else '0'})"

    # -------------------------------------------------------------------------
    # Module operations
    # -------------------------------------------------------------------------

    def _accumulate(self, key: K, coeff: Coefficient) -> None:
        if key in self._terms:
            self._terms[key] = self._terms[key] + coeff
        else:
            self._terms[key] = coeff

    def __add__(self, other: LinearCombination[K]) -> LinearCombination[K]:
        if not isinstance(other, LinearCombination):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __iadd__(self, other: LinearCombination[K]) -> LinearCombination[K]:
        if not isinstance(other, LinearCombination):
            return NotImplemented
        for key, coeff in other._terms.items():
            self._accumulate(key, coeff)
        return self

    def __sub__(self, other: LinearCombination[K]) -> LinearCombination[K]:
        if not isinstance(other, LinearCombination):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: LinearCombination[K]) -> LinearCombination[K]:
        if not isinstance(other, LinearCombination):
            return NotImplemented
        for key, coeff in other._terms.items():
            if key in self._terms:
                self._terms[key] = self._terms[key] - coeff
            else:
                self._terms[key] = -coeff
        return self

    def __neg__(self) -> LinearCombination[K]:
        return LinearCombination({k: -c for k, c in self._terms.items()})

    def __mul__(self, other: Any) -> LinearCombination:
        """
        Scale by a coefficient, or multiply two combinations.

        Multiplying two combinations requires keys that support `*`; the
        product is extended bilinearly.
        """
        if isinstance(other, LinearCombination):
            return self.linear_combine(other, lambda k1, k2: k1 * k2)
        return LinearCombination({k: c * other for k, c in self._terms.items()})

    def __rmul__(self, scalar: Coefficient) -> LinearCombination[K]:
        return LinearCombination({k: scalar * c for k, c in self._terms.items()})

    def __imul__(self, scalar: Coefficient) -> LinearCombination[K]:
        if isinstance(scalar, LinearCombination):
            return NotImplemented
        for key in self._terms:
            self._terms[key] = self._terms[key] * scalar
        return self

    # -------------------------------------------------------------------------
    # Structural operations
    # -------------------------------------------------------------------------

    def simplify(self, zero: Coefficient = DEFAULT_ZERO) -> None:
        """Drop every term whose coefficient equals zero."""
        self._terms = {k: c for k, c in self._terms.items() if not c == zero}

    def change_coeffs(self, coeff_changer: Callable[[Coefficient], Coefficient]) -> None:
        """Apply coeff_changer to every coefficient in place."""
        for key in self._terms:
            self._terms[key] = coeff_changer(self._terms[key])

    def all_terms_satisfy(self, predicate: Callable[[K], bool]) -> bool:
        return all(predicate(key) for key in self._terms)

    def linearly_extend(self, f: Callable[[K], V]) -> LinearCombination[V]:
        """
        Push the combination forward along f, summing colliding keys.

        Args:
            f: Any map on keys

        Returns:
            New combination Σ c_k · f(k)
        """
        result: LinearCombination[V] = LinearCombination()
        for key, coeff in self._terms.items():
            result._accumulate(f(key), coeff)
        return result

    def inj_linearly_extend(self, injection: Callable[[K], V]) -> LinearCombination[V]:
        """
        Push the combination forward along a map that must be injective.

        Raises:
            InjectivityViolation: If two distinct keys land on the same image
        """
        new_terms: Dict[V, Coefficient] = {}
        for key, coeff in self._terms.items():
            new_key = injection(key)
            if new_key in new_terms:
                raise InjectivityViolation(
                    f"Map passed as injective sent two keys to {new_key!r}"
                )
            new_terms[new_key] = coeff
        return LinearCombination(new_terms)

    def linear_combine(self, other: LinearCombination[U],
                       combiner: Callable[[K, U], V]) -> LinearCombination[V]:
        """
        Bilinear extension of combiner over both combinations.

        Every pair of terms (k1, c1), (k2, c2) contributes c1*c2 to the key
        combiner(k1, k2); colliding keys are summed.

        Args:
            other: Right-hand combination
            combiner: Map on pairs of keys

        Returns:
            New combination of size at most len(self) * len(other)
        """
        result: LinearCombination[V] = LinearCombination()
        for k1, c1 in self._terms.items():
            for k2, c2 in other._terms.items():
                result._accumulate(combiner(k1, k2), c1 * c2)
        return result
