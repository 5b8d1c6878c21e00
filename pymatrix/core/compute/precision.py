"""
Numerical precision constants and utilities.

Provides machine epsilon, the default pivot tolerance and closeness
checks used by the container and the decomposition kernel.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = np.finfo(np.float32).eps  # ~1.19e-7


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.
    
    Args:
        dtype: NumPy floating dtype or type
        
    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def default_pivot_tol(A: NDArray[np.floating[Any]]) -> float:
    """
    Default threshold below which an LU pivot counts as zero.
    
    Scales machine epsilon by the matrix order and its largest entry,
    the same rule used to read numerical rank off a triangular diagonal.
    An all-zero matrix gives 0.0, so only exact zeros are caught.
    
    Args:
        A: Square floating-point matrix about to be factored
        
    Returns:
        max(A.shape) * eps(A.dtype) * max|A|
    """
    scale = float(np.max(np.abs(A))) if A.size else 0.0
    return max(A.shape) * machine_epsilon(A.dtype) * scale


def is_close(
    a: float | NDArray[Any], 
    b: float | NDArray[Any], 
    rtol: float, 
    atol: float
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.
    
    Uses the formula: |a - b| <= atol + rtol * |b|
    
    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance
        
    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)
