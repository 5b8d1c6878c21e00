"""
Solver dispatch for the decomposition kernel.

Provides lu() as the primary entry point, plus det(), inv() and solve(),
all built on Crout factorization without pivoting.
"""

from __future__ import annotations

import warnings
from typing import Literal
import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import DimensionError, SingularMatrixError, ValidationError
from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
from pymatrix.core.validation import check_array, check_finite, check_tolerance
from pymatrix.matrix import Matrix
from pymatrix.decomposition.design import SquareDesign
from pymatrix.decomposition.solution import LUSolution
from pymatrix.decomposition.backends.cpu import CPUCroutBackend


BackendChoice = Literal['auto', 'cpu']


def _ensure_design(matrix: Matrix | ArrayLike | SquareDesign) -> SquareDesign:
    """Convert a Matrix or raw array to SquareDesign if needed."""
    if isinstance(matrix, SquareDesign):
        return matrix
    return SquareDesign.from_matrix(matrix)


def _get_backend(backend: BackendChoice) -> Backend[SquareDesign]:
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUCroutBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Must be 'auto' or 'cpu'.")


def _check_pivot_tol(pivot_tol: float | None) -> float | None:
    if pivot_tol is None:
        return None
    return check_tolerance(pivot_tol, 'pivot_tol')


def _emit_warnings(result: Result, stacklevel: int = 3) -> None:
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)


def lu(
    matrix: Matrix | ArrayLike | SquareDesign,
    *,
    pivot_tol: float | None = None,
    backend: BackendChoice = 'auto',
) -> LUSolution:
    """
    LU decomposition by Crout's method (no pivoting).

    Computes A = L U with L lower triangular and U unit upper triangular.
    Integer input is widened to float64 first.

    Parameters
    ----------
    matrix : Matrix, array-like or SquareDesign
        Square matrix A.
    pivot_tol : float, optional
        Pivots with |L[k][k]| <= pivot_tol count as zero. Default
        n * eps * max|A|.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    LUSolution owning fresh L and U matrices; unpacks as ``L, U``.

    Raises
    ------
    DimensionError
        If A is not square.
    SingularMatrixError
        If any pivot is zero within pivot_tol, including structurally
        forced zeros such as [[0, 1], [1, 0]].
    """
    tol = _check_pivot_tol(pivot_tol)
    design = _ensure_design(matrix)
    be = _get_backend(backend)

    result = be.factor(design, pivot_tol=tol)
    _emit_warnings(result)

    return LUSolution(_result=result, _design=design)


def det(
    matrix: Matrix | ArrayLike | SquareDesign,
    *,
    pivot_tol: float | None = None,
    backend: BackendChoice = 'auto',
) -> float:
    """
    Determinant as prod(diag L) * prod(diag U) of the Crout factors.

    Returns 0.0 when a zero pivot proves the matrix singular (the whole
    remaining column of L is zero). A zero pivot that only reflects the
    missing row exchanges, as in [[0, 1], [1, 0]], is not resolvable
    without pivoting and raises SingularMatrixError instead of returning
    a wrong value.

    Raises
    ------
    DimensionError
        If A is not square.
    SingularMatrixError
        If a zero pivot does not prove singularity.
    """
    tol = _check_pivot_tol(pivot_tol)
    design = _ensure_design(matrix)
    be = _get_backend(backend)

    try:
        result = be.factor(design, pivot_tol=tol)
    except SingularMatrixError as e:
        if e.is_singular:
            return 0.0
        raise
    _emit_warnings(result)

    with LUSolution(_result=result, _design=design) as factors:
        return factors.determinant()


def inv(
    matrix: Matrix | ArrayLike | SquareDesign,
    *,
    pivot_tol: float | None = None,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Matrix inverse as U^-1 L^-1 from the Crout factors.

    The triangular inverses are built by closed-form back-substitution.
    Without pivoting this path is numerically fragile; to apply A^-1 to
    vectors, call solve() instead of materializing the inverse.

    Returns
    -------
    Matrix of the floating dtype the kernel computed in.

    Raises
    ------
    DimensionError
        If A is not square.
    SingularMatrixError
        If any pivot is zero within pivot_tol.
    """
    tol = _check_pivot_tol(pivot_tol)
    design = _ensure_design(matrix)
    be = _get_backend(backend)

    result = be.invert(design, pivot_tol=tol)
    _emit_warnings(result)

    return Matrix._adopt(result.params.inverse)


def solve(
    matrix: Matrix | ArrayLike | SquareDesign,
    b: Matrix | ArrayLike,
    *,
    pivot_tol: float | None = None,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Solve A x = b using the Crout factors of A.

    Parameters
    ----------
    matrix : Matrix, array-like or SquareDesign
        Square matrix A (n x n).
    b : Matrix or array-like
        Right-hand side: length-n vector or n x k matrix.

    Returns
    -------
    Matrix x of shape n x k (n x 1 for a vector b).

    Raises
    ------
    DimensionError
        If A is not square or b does not have n rows.
    SingularMatrixError
        If any pivot is zero within pivot_tol.
    """
    tol = _check_pivot_tol(pivot_tol)
    design = _ensure_design(matrix)

    if isinstance(b, Matrix):
        rhs = b.to_array()
    else:
        rhs = check_array(b, 'b')
    if rhs.ndim == 1:
        rhs = rhs.reshape(-1, 1)
    if rhs.ndim != 2 or rhs.shape[0] != design.n:
        raise DimensionError(
            f"b: expected {design.n} rows to match A ({design.n}x{design.n}), "
            f"got shape {rhs.shape}",
            expected_shape=(design.n, rhs.shape[-1] if rhs.ndim else 1),
            actual_shape=rhs.shape,
        )
    check_finite(rhs, 'b')

    be = _get_backend(backend)
    result = be.solve(design, rhs.astype(design.dtype), pivot_tol=tol)
    _emit_warnings(result)

    return Matrix._adopt(np.ascontiguousarray(result.params.x))
