"""
Tolerance tiers for approximate comparison.

Defines precision expectations per scalar type:
- EXACT: integers and exact rationals, equality only
- FP64: double precision
- FP32: relaxed for single-precision arithmetic

Used by Matrix.allclose / Vector.allclose and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer and rational scalars, exact equality',
)

FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='fp64',
    description='Double precision, a few ulps of accumulated rounding',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision',
)


def tier_for(dtype: type) -> ToleranceTier:
    """
    Pick the default tier for a scalar type.

    Args:
        dtype: Scalar type of a container

    Returns:
        FP32 for numpy float32, FP64 for any other floating type,
        EXACT otherwise.
    """
    if dtype is np.float32:
        return FP32
    if dtype is float or (isinstance(dtype, type) and issubclass(dtype, np.floating)):
        return FP64
    return EXACT


__all__ = [
    'ToleranceTier',
    'EXACT',
    'FP64',
    'FP32',
    'tier_for',
]
