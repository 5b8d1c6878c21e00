"""
Crout LU factorization without pivoting.

Factors A = L U with L lower triangular and U unit upper triangular,
computing column k of L and then row k of U for k = 0..n-1.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import SingularMatrixError


def crout_factor(
    A: NDArray[np.floating[Any]],
    pivot_tol: float,
    name: str = 'A',
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Crout decomposition of a square floating-point matrix.

    For each k:
        U[k][k] = 1
        L[j][k] = A[j][k] - sum_{i<k} L[j][i] U[i][k]             j = k..n-1
        U[k][j] = (A[k][j] - sum_{i<k} L[k][i] U[i][j]) / L[k][k]  j = k+1..n-1

    Args:
        A: Square floating-point matrix (n x n)
        pivot_tol: Pivots with |L[k][k]| <= pivot_tol count as zero
        name: Matrix name for error messages

    Returns:
        (L, U) as new arrays of A's dtype

    Raises:
        SingularMatrixError: On the first zero pivot, including the last
            one (which is never used as a divisor). is_singular is set
            when the whole column L[k:, k] is zero, proving det(A) == 0.
    """
    n = A.shape[0]
    L = np.zeros_like(A)
    U = np.zeros_like(A)

    for k in range(n):
        U[k, k] = 1

        # Column k of L
        L[k:, k] = A[k:, k] - L[k:, :k] @ U[:k, k]

        pivot = L[k, k]
        if abs(pivot) <= pivot_tol:
            is_singular = bool(np.all(np.abs(L[k:, k]) <= pivot_tol))
            raise SingularMatrixError(
                f"{name}: zero pivot L[{k}][{k}] = {float(pivot):g} "
                f"(|pivot| <= {pivot_tol:g}); "
                + ("matrix is singular" if is_singular
                   else "cannot factor without pivoting"),
                matrix_name=name,
                pivot_index=k,
                pivot_value=float(pivot),
                is_singular=is_singular,
            )

        # Row k of U
        U[k, k + 1:] = (A[k, k + 1:] - L[k, :k] @ U[:k, k + 1:]) / pivot

    return L, U
