"""
Element dtype policy.

The container holds any real integer or floating NumPy dtype. The
decomposition kernel always works in floating point, so integer
matrices are widened before factoring.
"""

from typing import Any
import numpy as np

from pymatrix.core.exceptions import ValidationError

__all__ = ['resolve_dtype', 'decomposition_dtype', 'check_castable', 'check_representable']


def resolve_dtype(dtype: Any) -> np.dtype:
    """
    Normalize a dtype specifier and reject unsupported element types.
    
    Args:
        dtype: Anything np.dtype() accepts ('float32', np.int64, ...)
        
    Returns:
        The resolved np.dtype
    
    Raises:
        ValidationError: If the dtype is unknown, boolean, complex or
            otherwise not a real integer or floating type
    
    Example:
        >>> resolve_dtype('float32')
        dtype('float32')
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: not understood: {dtype!r}") from e
    if not (np.issubdtype(resolved, np.integer) or np.issubdtype(resolved, np.floating)):
        raise ValidationError(
            f"dtype: unsupported element type {resolved}, expected integer or floating"
        )
    return resolved


def decomposition_dtype(dtype: np.dtype) -> np.dtype:
    """
    Floating dtype used to decompose a matrix of the given element type.
    
    Integers widen to float64, half precision widens to float32, and
    other floating dtypes are kept.
    """
    if np.issubdtype(dtype, np.integer):
        return np.dtype(np.float64)
    if dtype.itemsize < 4:
        return np.dtype(np.float32)
    return np.dtype(dtype)


def check_castable(source: np.dtype, target: np.dtype, name: str) -> None:
    """
    Verify values of dtype source can be stored in a target matrix.
    
    Uses 'same_kind' casting: float64 into float32 is allowed, float into
    an integer matrix is not (it would silently truncate).
    
    Raises:
        ValidationError: If the cast would change kind
    """
    if not np.can_cast(source, target, casting='same_kind'):
        raise ValidationError(
            f"{name}: cannot store {source} values in a {target} matrix"
        )


def check_representable(values: np.ndarray, target: np.dtype, name: str) -> None:
    """
    Verify every value fits the range of the target dtype.
    
    same_kind casting admits int64 -> int8 and float64 -> float32, which
    wrap or overflow to inf on out-of-range values.
    
    Raises:
        ValidationError: If a value is outside the range of target
    """
    if values.size == 0:
        return
    if np.issubdtype(target, np.integer):
        info = np.iinfo(target)
        lo, hi = int(values.min()), int(values.max())
        if lo < info.min or hi > info.max:
            raise ValidationError(
                f"{name}: values in [{lo}, {hi}] out of range for {target} "
                f"[{info.min}, {info.max}]"
            )
    elif np.issubdtype(target, np.floating):
        with np.errstate(over='ignore'):
            cast = values.astype(target)
        overflow = np.isinf(cast) & np.isfinite(values)
        if np.any(overflow):
            raise ValidationError(
                f"{name}: {int(np.sum(overflow))} value(s) overflow {target}"
            )
