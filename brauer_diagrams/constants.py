# brauer_diagrams/constants.py
"""
Brauer Diagram Constants

This module defines constants used throughout the diagram algebra:

RING DEFAULTS (Coefficient Layer)
- DEFAULT_ONE: Coefficient given to a freshly created term
- DEFAULT_ZERO: Coefficient treated as "absent" by simplify()

RENDERING (Display Layer)
- DELTA_SYMBOL: Name of the formal loop value in printed morphisms
- MAX_REPR_TERMS: Terms shown before a repr is truncated
"""


# =============================================================================
# RING DEFAULTS
# =============================================================================

# Multiplicative identity used by singleton(), identity() and the generators.
# Any exact ring element works (int, Fraction, complex, numpy integer, ...).
DEFAULT_ONE = 1

# Additive identity; coefficients comparing equal to it are removed by simplify()
DEFAULT_ZERO = 0


# =============================================================================
# RENDERING
# =============================================================================

DELTA_SYMBOL = "δ"

# Long linear combinations are cut after this many terms in repr()
MAX_REPR_TERMS = 8

assert MAX_REPR_TERMS > 0, "MAX_REPR_TERMS must be positive"
