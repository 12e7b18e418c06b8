"""
Categorical Framework Module

The abstract contract a morphism type must satisfy to be composed,
tensored and used as the target of an interpretation: composable
morphisms with a domain and codomain, identities on objects, and an
in-place monoidal product.
"""

from abc import ABC, abstractmethod
from functools import reduce
from typing import Any, TypeVar

from .errors import CompositionArityMismatch

M = TypeVar("M", bound="Composable")


def check_composable(first: Any, second: Any) -> None:
    """Raise CompositionArityMismatch unless second.domain() == first.codomain()."""
    if first.codomain() != second.domain():
        raise CompositionArityMismatch(
            f"Cannot compose: codomain {first.codomain()!r} "
            f"does not match domain {second.domain()!r}"
        )


class Composable(ABC):
    """A morphism that can be composed with morphisms whose domain matches its codomain."""

    @abstractmethod
    def domain(self) -> Any:
        """The source object."""

    @abstractmethod
    def codomain(self) -> Any:
        """The target object."""

    def composable(self, other: "Composable") -> None:
        """
        Check that other can follow self.

        Raises:
            CompositionArityMismatch: If self.codomain() != other.domain()
        """
        check_composable(self, other)

    @abstractmethod
    def compose(self: M, other: M) -> M:
        """
        Composite "self, then other" (other ∘ self in textbook notation).

        Args:
            other: Morphism whose domain is self.codomain()

        Returns:
            New morphism self.domain() → other.codomain()
        """

    def __rshift__(self: M, other: M) -> M:
        return self.compose(other)


class ComposableMutating(ABC):
    """A morphism whose composition replaces self instead of returning a new value."""

    @abstractmethod
    def domain(self) -> Any:
        """The source object."""

    @abstractmethod
    def codomain(self) -> Any:
        """The target object."""

    def composable(self, other: "ComposableMutating") -> None:
        check_composable(self, other)

    @abstractmethod
    def compose(self, other: "ComposableMutating") -> None:
        """Replace self with "self, then other"."""


class HasIdentity(ABC):
    """A morphism type with an identity on every object."""

    @classmethod
    @abstractmethod
    def identity(cls, on_this: Any) -> "HasIdentity":
        """Identity morphism on the given object."""


class Monoidal(ABC):
    """A morphism type with an in-place monoidal product."""

    @abstractmethod
    def tensor(self, other: "Monoidal") -> None:
        """Replace self with self ⊗ other."""


class MonoidalMorphism(Monoidal, Composable):
    """Composable and monoidal."""


def compose_all(first: M, *rest: M) -> M:
    """
    Compose a sequence of morphisms left to right.

    Args:
        first: Morphism applied first
        rest: Morphisms applied afterwards, in order

    Returns:
        first >> rest[0] >> ... >> rest[-1]
    """
    return reduce(lambda acc, nxt: acc.compose(nxt), rest, first)
