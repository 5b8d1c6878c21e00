"""
Elementwise and product operators.

Every operator validates its operands, then returns a new, independently
owned Matrix; operands are never modified. Result dtypes follow NumPy
promotion (int64 + float64 -> float64).
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pymatrix.core.validation import (
    check_conformable,
    check_dimension,
    check_same_shape,
    check_scalar,
)
from pymatrix.matrix._matrix import Matrix, _operand
from pymatrix.matrix._dtypes import resolve_dtype


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum a + b.

    Raises
    ------
    DimensionError
        If a and b differ in rows or cols.
    """
    x, y = _operand(a, 'a'), _operand(b, 'b')
    check_same_shape(a.shape, b.shape, 'add')
    return Matrix._adopt(x + y)


def sub(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise difference a - b.

    Raises
    ------
    DimensionError
        If a and b differ in rows or cols.
    """
    x, y = _operand(a, 'a'), _operand(b, 'b')
    check_same_shape(a.shape, b.shape, 'sub')
    return Matrix._adopt(x - y)


def scalar_mult(a: Matrix, k: int | float) -> Matrix:
    """Every element of a multiplied by k."""
    x = _operand(a, 'a')
    check_scalar(k, 'k')
    return Matrix._adopt(x * k)


def mult(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product: result[i][j] = sum_k a[i][k] * b[k][j].

    The result is a.rows x b.cols.

    Raises
    ------
    DimensionError
        If a.cols != b.rows.
    """
    x, y = _operand(a, 'a'), _operand(b, 'b')
    check_conformable(a.shape, b.shape)
    return Matrix._adopt(x @ y)


def identity(n: int, dtype: Any = np.float64) -> Matrix:
    """New n x n matrix with ones on the diagonal and zeros elsewhere."""
    n = check_dimension(n, 'n')
    matrix = Matrix.init(n, n, resolve_dtype(dtype))
    for i in range(n):
        matrix.set(i, i, 1)
    return matrix
