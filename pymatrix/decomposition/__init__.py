"""
Decomposition kernel.

Direct (non-iterative) linear algebra built on Crout LU factorization
without pivoting. Always computes in floating point; integer matrices
are widened to float64.

Public API:
    lu(A)        - Crout factors L (lower), U (unit upper)
    det(A)       - determinant
    inv(A)       - inverse (numerically fragile; prefer solve)
    solve(A, b)  - solution of A x = b
"""

from pymatrix.decomposition.design import SquareDesign
from pymatrix.decomposition.solution import (
    InverseParams,
    LUParams,
    LUSolution,
    SolveParams,
)
from pymatrix.decomposition.solvers import det, inv, lu, solve

__all__ = [
    "lu",
    "det",
    "inv",
    "solve",
    "SquareDesign",
    "LUParams",
    "LUSolution",
    "InverseParams",
    "SolveParams",
]
