"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the compute paths of the kernel:
- FP64: direct results in double precision (products, factors)
- FP32: the same in single precision
- FP64/FP32 inverse: relaxed, because unpivoted inversion accumulates
  rounding error through two triangular inverses and a product

Used by Matrix.allclose() defaults and by the test suite.
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


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision - direct results',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision - direct results',
)

FP64_INVERSE = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='fp64_inverse',
    description='Double precision, unpivoted inverse',
)

FP32_INVERSE = ToleranceTier(
    rtol=1e-3,
    atol=1e-4,
    name='fp32_inverse',
    description='Single precision, unpivoted inverse',
)

# Smallest pivot relative to the largest entry before an LU result
# carries an ill-conditioning warning (sqrt of float64 epsilon).
PIVOT_WARNING_RATIO = 1.5e-8


def select_tolerance(
    dtype: np.dtype | type,
    inverse: bool = False,
) -> ToleranceTier:
    """
    Select the tolerance tier for a given element dtype.
    
    Integer dtypes use the FP64 tier; any floating dtype narrower
    than 64 bits uses the FP32 tier.
    """
    dtype = np.dtype(dtype)
    single = np.issubdtype(dtype, np.floating) and dtype.itemsize < 8
    if single:
        return FP32_INVERSE if inverse else FP32
    return FP64_INVERSE if inverse else FP64
