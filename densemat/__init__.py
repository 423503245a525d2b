"""
densemat: generic dense matrix and vector arithmetic.

Row-major containers parameterized over a scalar element type. Any type
with an additive and a multiplicative identity and the four arithmetic
operators works: Python int/float, fractions.Fraction, fixed-width numpy
scalars, or user types registered with densemat.traits.

Submodules:
    core: exceptions, validation, identity protocols, tolerance tiers
    traits: zero/one registry
    vector: Vector
    matrix: Matrix and the matrix(...) literal builder
"""

__version__ = "0.1.0"

from densemat.core.exceptions import (
    DensematError,
    ValidationError,
    DimensionError,
    UnsupportedScalarError,
    IndexOutOfBoundsError,
    VectorConsumedError,
)
from densemat.traits import zero, one, register_scalar
from densemat.vector import Vector
from densemat.matrix import Matrix, matrix

__all__ = [
    "__version__",
    "Matrix",
    "Vector",
    "matrix",
    "zero",
    "one",
    "register_scalar",
    "DensematError",
    "ValidationError",
    "DimensionError",
    "UnsupportedScalarError",
    "IndexOutOfBoundsError",
    "VectorConsumedError",
]
