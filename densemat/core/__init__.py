"""
Core infrastructure for densemat.

This module provides shared abstractions and utilities used by the
container sub-packages (traits, vector, matrix).

Key components:
    protocols: Zero, One, Scalar capability protocols
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Comparison tolerance tiers
"""

from densemat.core.protocols import Zero, One, Scalar
from densemat.core.tolerances import ToleranceTier, EXACT, FP32, FP64, tier_for
from densemat.core.exceptions import (
    DensematError,
    ValidationError,
    DimensionError,
    UnsupportedScalarError,
    IndexOutOfBoundsError,
    VectorConsumedError,
)

__all__ = [
    # Protocols
    "Zero",
    "One",
    "Scalar",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP32",
    "FP64",
    "tier_for",
    # Exceptions
    "DensematError",
    "ValidationError",
    "DimensionError",
    "UnsupportedScalarError",
    "IndexOutOfBoundsError",
    "VectorConsumedError",
]
