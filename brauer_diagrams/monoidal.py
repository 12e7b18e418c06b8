"""
Layered Monoidal Morphism Module

Black-box string diagrams in a monoidal category whose objects are lists
of wire labels. A morphism is a sequence of layers; each layer is a row of
boxes placed side by side. Such a morphism can be interpreted in any
concrete monoidal category (for instance BrauerMorphism) by replacing
every box with a concrete morphism, tensoring within layers and composing
the layers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Sequence, TypeVar

from .categorical import ComposableMutating, Monoidal, MonoidalMorphism
from .errors import CompositionArityMismatch

logger = logging.getLogger(__name__)

B = TypeVar("B")   # box label
L = TypeVar("L")   # wire label
T = TypeVar("T", bound=MonoidalMorphism)


@dataclass
class GenericMonoidalMorphismLayer(Generic[B, L]):
    """
    One row of boxes.

    Attributes:
        blocks: Boxes from left to right
        left_type: Wire labels entering the row
        right_type: Wire labels leaving the row
    """
    blocks: List[B] = field(default_factory=list)
    left_type: List[L] = field(default_factory=list)
    right_type: List[L] = field(default_factory=list)

    @classmethod
    def identity(cls, on_type: Sequence[L],
                 identity_box: Callable[[L], B]) -> GenericMonoidalMorphismLayer[B, L]:
        """A row of identity boxes, one per wire."""
        return cls([identity_box(t) for t in on_type], list(on_type), list(on_type))

    def copy(self) -> GenericMonoidalMorphismLayer[B, L]:
        return GenericMonoidalMorphismLayer(list(self.blocks), list(self.left_type),
                                            list(self.right_type))

    def tensor(self, other: GenericMonoidalMorphismLayer[B, L]) -> None:
        self.blocks.extend(other.blocks)
        self.left_type.extend(other.left_type)
        self.right_type.extend(other.right_type)


@dataclass
class GenericMonoidalMorphism(Monoidal, ComposableMutating, Generic[B, L]):
    """
    A stack of layers, read first layer first.

    Attributes:
        identity_box: Builds the identity box on a single wire label
        layers: The rows, each layer's right_type feeding the next left_type
    """
    identity_box: Callable[[L], B]
    layers: List[GenericMonoidalMorphismLayer[B, L]] = field(default_factory=list)

    @classmethod
    def identity(cls, on_type: Sequence[L],
                 identity_box: Callable[[L], B]) -> GenericMonoidalMorphism[B, L]:
        return cls(identity_box, [GenericMonoidalMorphismLayer.identity(on_type, identity_box)])

    def depth(self) -> int:
        return len(self.layers)

    def domain(self) -> List[L]:
        return list(self.layers[0].left_type) if self.layers else []

    def codomain(self) -> List[L]:
        return list(self.layers[-1].right_type) if self.layers else []

    def append_layer(self, next_layer: GenericMonoidalMorphismLayer[B, L]) -> None:
        """
        Put next_layer below the current last layer.

        Raises:
            CompositionArityMismatch: If the wire labels do not line up
        """
        if self.layers and self.layers[-1].right_type != next_layer.left_type:
            raise CompositionArityMismatch(
                f"Layer expecting {next_layer.left_type} cannot follow "
                f"a layer producing {self.layers[-1].right_type}"
            )
        self.layers.append(next_layer)

    def composable(self, other: GenericMonoidalMorphism[B, L]) -> None:
        """
        Check that other can follow self.

        Raises:
            CompositionArityMismatch: On a size or label mismatch of the shared interface
        """
        ours, theirs = self.codomain(), other.domain()
        if len(ours) != len(theirs):
            raise CompositionArityMismatch(
                f"Mismatch in cardinalities of common interface: {len(ours)} vs {len(theirs)}"
            )
        for idx, (w1, w2) in enumerate(zip(ours, theirs)):
            if w1 != w2:
                raise CompositionArityMismatch(
                    f"Mismatch in labels of common interface at index {idx}: {w1!r} vs {w2!r}"
                )

    def compose(self, other: GenericMonoidalMorphism[B, L]) -> None:
        """
        Replace self with self followed by other.

        other's layers are copied, so other (which may be self) is left
        untouched by this and by later in-place operations on self.
        """
        self.composable(other)
        for next_layer in [layer.copy() for layer in other.layers]:
            self.append_layer(next_layer)

    def tensor(self, other: GenericMonoidalMorphism[B, L]) -> None:
        """
        Replace self with self ⊗ other.

        The shallower operand is padded with identity layers on its
        final wires so both sides have the same depth.
        """
        other_layers = [layer.copy() for layer in other.layers]
        self_depth = len(self.layers)
        last_self_type: List[L] = []
        last_other_type: List[L] = other.domain()
        for n, layer in enumerate(self.layers):
            last_self_type = list(layer.right_type)
            if n < len(other_layers):
                last_other_type = list(other_layers[n].right_type)
                layer.tensor(other_layers[n])
            else:
                layer.tensor(GenericMonoidalMorphismLayer.identity(last_other_type, other.identity_box))
        for n in range(self_depth, len(other_layers)):
            new_layer = GenericMonoidalMorphismLayer.identity(last_self_type, self.identity_box)
            new_layer.tensor(other_layers[n])
            self.append_layer(new_layer)


def interpret(morphism: GenericMonoidalMorphism[B, L],
              black_box_interpreter: Callable[[B], T],
              identity_factory: Callable[[List[L]], T]) -> T:
    """
    Evaluate a layered morphism in a concrete monoidal category.

    Args:
        morphism: The layered black-box morphism
        black_box_interpreter: Returns a fresh concrete morphism for a box
            (the result is tensored in place, so it must not be shared)
        identity_factory: Concrete identity on a list of wire labels

    Returns:
        identity(domain) followed by every layer, each layer being the
        tensor product of its interpreted boxes

    Raises:
        CompositionArityMismatch: On an empty layer or mismatched interfaces
    """
    answer = identity_factory(morphism.domain())
    for depth, layer in enumerate(morphism.layers):
        if not layer.blocks:
            raise CompositionArityMismatch(f"Layer {depth} of the morphism has no boxes")
        current = black_box_interpreter(layer.blocks[0])
        for block in layer.blocks[1:]:
            current.tensor(black_box_interpreter(block))
        answer = answer.compose(current)
    logger.debug("interpreted %d layers", morphism.depth())
    return answer
