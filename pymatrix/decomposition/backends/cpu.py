"""
CPU reference backend for LU-based computations.

Implements Crout factorization without pivoting, closed-form triangular
inversion, and triangular solves (SciPy) on NumPy arrays.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pymatrix.core.result import Result
from pymatrix.core.compute.precision import default_pivot_tol
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import PIVOT_WARNING_RATIO, ToleranceTier, select_tolerance
from pymatrix.decomposition.design import SquareDesign
from pymatrix.decomposition.solution import InverseParams, LUParams, SolveParams
from pymatrix.decomposition._crout import crout_factor
from pymatrix.decomposition._triangular import invert_lower, invert_unit_upper


class CPUCroutBackend:
    """
    CPU backend using Crout's method.

    Implements the Backend protocol for SquareDesign. Stateless; the
    pivot tolerance is passed per call.
    """

    @property
    def name(self) -> str:
        return 'cpu_crout'

    def factor(
        self,
        design: SquareDesign,
        *,
        pivot_tol: float | None = None,
    ) -> Result[LUParams]:
        """
        Crout LU factorization.

        Args:
            design: Validated square design
            pivot_tol: Zero-pivot threshold; None uses default_pivot_tol

        Returns:
            Result containing LUParams

        Raises:
            SingularMatrixError: If a pivot is within pivot_tol of zero
        """
        timer = Timer()
        timer.start()

        tol = self._pivot_tol(design, pivot_tol)

        with timer.section('crout'):
            L, U = crout_factor(design.data, tol)

        timer.stop()

        return Result(
            params=LUParams(lower=L, upper=U),
            info=self._info(design, L, tol),
            timing=timer.result(),
            backend_name=self.name,
            warnings=self._pivot_warnings(design, L),
        )

    def invert(
        self,
        design: SquareDesign,
        *,
        pivot_tol: float | None = None,
    ) -> Result[InverseParams]:
        """
        Inverse from Crout factors.

        Algorithm:
            1. A = L U (Crout)
            2. U^-1 and L^-1 by closed-form back-substitution
            3. A^-1 = U^-1 L^-1
            4. Residual max|A^-1 A - I| checked against the inverse
               tolerance tier of the working dtype

        Unpivoted and numerically fragile: rounding error accumulates
        through both triangular inverses and the product. Prefer solve()
        when the inverse is only needed to apply it to a right-hand side.

        Raises:
            SingularMatrixError: If a pivot is within pivot_tol of zero
        """
        timer = Timer()
        timer.start()

        tol = self._pivot_tol(design, pivot_tol)

        with timer.section('crout'):
            L, U = crout_factor(design.data, tol)

        with timer.section('triangular_inverse'):
            U_inv = invert_unit_upper(U)
            L_inv = invert_lower(L)

        with timer.section('product'):
            inverse = U_inv @ L_inv

        with timer.section('residual'):
            residual = inverse_residual(design.data, inverse)

        timer.stop()

        tier = select_tolerance(design.dtype, inverse=True)
        info = self._info(design, L, tol)
        info['residual'] = residual

        return Result(
            params=InverseParams(inverse=inverse),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=self._pivot_warnings(design, L) + _residual_warnings(residual, tier),
        )

    def solve(
        self,
        design: SquareDesign,
        rhs: NDArray[np.floating[Any]],
        *,
        pivot_tol: float | None = None,
    ) -> Result[SolveParams]:
        """
        Solve A x = rhs from Crout factors.

        Forward substitution with L (L y = rhs), then back substitution
        with unit U (U x = y).

        Args:
            design: Validated square design (n x n)
            rhs: Right-hand sides (n x k), already in design.dtype

        Raises:
            SingularMatrixError: If a pivot is within pivot_tol of zero
        """
        timer = Timer()
        timer.start()

        tol = self._pivot_tol(design, pivot_tol)

        with timer.section('crout'):
            L, U = crout_factor(design.data, tol)

        with timer.section('substitution'):
            y = solve_triangular(L, rhs, lower=True)
            x = solve_triangular(U, y, lower=False, unit_diagonal=True)

        timer.stop()

        return Result(
            params=SolveParams(x=x),
            info=self._info(design, L, tol),
            timing=timer.result(),
            backend_name=self.name,
            warnings=self._pivot_warnings(design, L),
        )

    # --- Helpers ---

    @staticmethod
    def _pivot_tol(design: SquareDesign, pivot_tol: float | None) -> float:
        if pivot_tol is None:
            return default_pivot_tol(design.data)
        return pivot_tol

    @staticmethod
    def _info(design: SquareDesign, L: NDArray[np.floating[Any]], tol: float) -> dict[str, Any]:
        abs_pivots = np.abs(np.diag(L))
        return {
            'method': 'crout',
            'n': design.n,
            'dtype': str(design.dtype),
            'pivot_tol': tol,
            'min_abs_pivot': float(abs_pivots.min()),
            'pivot_ratio': _pivot_ratio(design, L),
        }

    @staticmethod
    def _pivot_warnings(design: SquareDesign, L: NDArray[np.floating[Any]]) -> tuple[str, ...]:
        ratio = _pivot_ratio(design, L)
        if ratio < PIVOT_WARNING_RATIO:
            return (
                f"small pivot: min |L[k][k]| / max |A| = {ratio:.3g}; "
                f"results may be inaccurate without pivoting",
            )
        return ()


def _pivot_ratio(design: SquareDesign, L: NDArray[np.floating[Any]]) -> float:
    """Smallest pivot magnitude relative to the largest entry of A."""
    scale = float(np.max(np.abs(design.data)))
    return float(np.min(np.abs(np.diag(L)))) / scale


def inverse_residual(A: NDArray[np.floating[Any]], inverse: NDArray[np.floating[Any]]) -> float:
    """max |A^-1 A - I| over all entries."""
    n = A.shape[0]
    return float(np.max(np.abs(inverse @ A - np.eye(n, dtype=A.dtype))))


def _residual_warnings(residual: float, tier: ToleranceTier) -> tuple[str, ...]:
    if residual > tier.rtol:
        return (
            f"inverse residual max|A^-1 A - I| = {residual:.3g} exceeds "
            f"{tier.name} tolerance {tier.rtol:g}; prefer solve()",
        )
    return ()
