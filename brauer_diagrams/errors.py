"""
Diagram Algebra Errors

Every failure in the package is raised immediately as one of these.
They subclass ValueError: an invalid diagram is an invalid value.
"""


class DiagramAlgebraError(ValueError):
    """Base class for all diagram algebra failures."""


class MalformedMatchingError(DiagramAlgebraError):
    """A candidate matching does not cover 0..2n-1 exactly once."""


class InjectivityViolation(DiagramAlgebraError):
    """
    Two distinct keys collided under a map that had to be injective.

    Never expected on well-formed input; seeing one means an internal defect.
    """


class CompositionArityMismatch(DiagramAlgebraError):
    """Boundary sizes or labels of two operands disagree."""
