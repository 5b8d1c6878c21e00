"""
Closed-form inverses of the Crout triangular factors.

Both routines assume nonzero diagonals, which crout_factor guarantees.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def invert_unit_upper(U: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Inverse of a unit upper-triangular matrix.

    Resolves rows from the last pivot backward:
        Uinv[r][r] = 1
        Uinv[r][j] = -sum_{k=r+1..j} U[r][k] Uinv[k][j]    j > r
    """
    n = U.shape[0]
    U_inv = np.eye(n, dtype=U.dtype)
    for r in range(n - 2, -1, -1):
        U_inv[r, r + 1:] = -(U[r, r + 1:] @ U_inv[r + 1:, r + 1:])
    return U_inv


def invert_lower(L: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Inverse of a lower-triangular matrix with nonzero diagonal.

    Resolves each column i forward from the diagonal:
        Linv[i][i] = 1 / L[i][i]
        Linv[j][i] = -(sum_{k=i..j-1} L[j][k] Linv[k][i]) / L[j][j]    j > i
    """
    n = L.shape[0]
    L_inv = np.zeros_like(L)
    for i in range(n):
        L_inv[i, i] = 1 / L[i, i]
        for j in range(i + 1, n):
            L_inv[j, i] = -(L[j, i:j] @ L_inv[i:j, i]) / L[j, j]
    return L_inv
