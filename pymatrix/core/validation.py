"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from collections.abc import Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged rows),
    and any dtype that is not a real integer or floating type.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with integer or floating dtype
        
    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.integer) or np.issubdtype(result.dtype, np.floating)):
        raise ValidationError(
            f"{name}: unsupported dtype {result.dtype}, expected integer or floating data"
        )

    return result


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            actual_shape=array.shape,
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a matrix dimension (row or column count).
    
    Args:
        value: Candidate dimension
        name: Parameter name for error messages
        
    Returns:
        The dimension as a Python int
        
    Raises:
        ValidationError: If value is not an integer
        DimensionError: If value is smaller than 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer dimension, got {type(value).__name__}"
        )
    if value < 1:
        raise DimensionError(f"{name}: must be at least 1, got {value}")
    return int(value)


def check_rows(values: Any, rows: int, cols: int, name: str) -> None:
    """
    Verify a sequence of rows has exactly rows x cols entries.
    
    Checks every row, not just the first, so a ragged input is
    reported as a size mismatch rather than a conversion failure.
    
    Args:
        values: Sequence of equal-length rows (or a 2D array)
        rows: Required number of rows
        cols: Required length of every row
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If the input is empty or any length differs
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 2 or values.shape != (rows, cols):
            raise DimensionError(
                f"{name}: expected shape {(rows, cols)}, got {values.shape}",
                expected_shape=(rows, cols),
                actual_shape=values.shape,
            )
        return

    if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(values).__name__}"
        )
    if len(values) == 0:
        raise DimensionError(
            f"{name}: input is empty, expected {rows} rows",
            expected_shape=(rows, cols),
        )
    if len(values) != rows:
        raise DimensionError(
            f"{name}: expected {rows} rows, got {len(values)}",
            expected_shape=(rows, cols),
        )
    for i, row in enumerate(values):
        if isinstance(row, (str, bytes)):
            raise ValidationError(f"{name}: row {i} is a string, expected numbers")
        if not hasattr(row, '__len__'):
            raise DimensionError(
                f"{name}: row {i} is a scalar ({type(row).__name__}), expected a 2D sequence of rows",
                expected_shape=(rows, cols),
            )
        if len(row) != cols:
            raise DimensionError(
                f"{name}: row {i} has length {len(row)}, expected {cols}",
                expected_shape=(rows, cols),
            )


def check_index(i: Any, j: Any, shape: tuple[int, int]) -> None:
    """
    Verify (i, j) addresses an element of a matrix with the given shape.
    
    Negative indices are rejected; there is no wrap-around.
    
    Args:
        i: Row index
        j: Column index
        shape: (rows, cols) of the matrix
        
    Raises:
        ValidationError: If an index is not an integer
        IndexOutOfBoundsError: If an index is outside [0, rows) or [0, cols)
    """
    for label, value in (('row', i), ('column', j)):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise ValidationError(
                f"{label} index must be an integer, got {type(value).__name__}"
            )
    rows, cols = shape
    if not (0 <= i < rows and 0 <= j < cols):
        raise IndexOutOfBoundsError(
            f"index ({i}, {j}) out of bounds for {rows}x{cols} matrix",
            index=(int(i), int(j)),
            shape=shape,
        )


def check_same_shape(
    a_shape: tuple[int, int],
    b_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical dimensions.
    
    Raises:
        DimensionError: If the shapes differ
    """
    if a_shape != b_shape:
        raise DimensionError(
            f"{operation}: operand shapes differ, "
            f"{a_shape[0]}x{a_shape[1]} vs {b_shape[0]}x{b_shape[1]}",
            expected_shape=a_shape,
            actual_shape=b_shape,
        )


def check_conformable(a_shape: tuple[int, int], b_shape: tuple[int, int]) -> None:
    """
    Verify a (n x m) can be multiplied by b (m x k).
    
    Raises:
        DimensionError: If a.cols != b.rows
    """
    if a_shape[1] != b_shape[0]:
        raise DimensionError(
            f"mult: {a_shape[0]}x{a_shape[1]} and {b_shape[0]}x{b_shape[1]} "
            f"are not conformable (left cols {a_shape[1]} != right rows {b_shape[0]})",
            expected_shape=(a_shape[1], b_shape[1]),
            actual_shape=b_shape,
        )


def check_square(shape: tuple[int, ...], name: str) -> None:
    """
    Verify a matrix is square.
    
    Raises:
        DimensionError: If rows != cols
    """
    if len(shape) != 2 or shape[0] != shape[1]:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {shape}",
            actual_shape=shape,
        )


def check_scalar(value: Any, name: str) -> Any:
    """
    Validate a real numeric scalar.
    
    Args:
        value: Candidate scalar (Python or NumPy number)
        name: Parameter name for error messages
        
    Returns:
        The value as a 0-d NumPy scalar
        
    Raises:
        ValidationError: If value is not a real integer or floating scalar
    """
    arr = check_array(value, name)
    if arr.ndim != 0:
        raise ValidationError(
            f"{name}: expected a scalar, got array with shape {arr.shape}"
        )
    return arr[()]


def check_tolerance(value: Any, name: str) -> float:
    """
    Validate a tolerance: a finite, non-negative real number.
    
    Raises:
        ValidationError: If value is negative, non-finite or non-numeric
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ValidationError(
            f"{name}: expected a number, got {type(value).__name__}"
        )
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"{name}: must be finite and non-negative, got {value}")
    return value
