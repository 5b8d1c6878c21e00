"""
Decomposition solution types.

Contains the parameter payloads produced by backends and the user-facing
LUSolution wrapper that owns the L and U factors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.matrix import Matrix

if TYPE_CHECKING:
    from pymatrix.decomposition.design import SquareDesign


@dataclass(frozen=True)
class LUParams:
    """
    Parameter payload for Crout LU factorization.

    Attributes:
        lower: L, lower triangular (n x n)
        upper: U, unit upper triangular (n x n)
    """
    lower: NDArray[np.floating[Any]]
    upper: NDArray[np.floating[Any]]

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        """Diagonal of L."""
        return np.diag(self.lower).copy()


@dataclass(frozen=True)
class InverseParams:
    """Parameter payload for inversion: A^-1 = U^-1 L^-1."""
    inverse: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class SolveParams:
    """Parameter payload for solving A x = b."""
    x: NDArray[np.floating[Any]]


@dataclass
class LUSolution:
    """
    User-facing LU factorization.

    Owns two fresh matrices, L and U. Unpacks as a pair, and releases
    whatever factors are still live when used as a context manager:

        with lu(A) as factors:
            d = factors.determinant()

        L, U = lu(A)        # caller now releases L and U
    """
    _result: Result[LUParams]
    _design: 'SquareDesign'
    _lower: Matrix = field(init=False, repr=False)
    _upper: Matrix = field(init=False, repr=False)

    def __post_init__(self):
        params = self._result.params
        self._lower = Matrix._adopt(params.lower.copy())
        self._upper = Matrix._adopt(params.upper.copy())

    # --- Factors ---

    @property
    def L(self) -> Matrix:
        """Lower-triangular factor."""
        return self._lower

    @property
    def U(self) -> Matrix:
        """Unit upper-triangular factor (diagonal is 1)."""
        return self._upper

    def __iter__(self) -> Iterator[Matrix]:
        yield self._lower
        yield self._upper

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        """Diagonal of L, shape (n,)."""
        return self._result.params.pivots

    @property
    def n(self) -> int:
        return self._design.n

    def determinant(self) -> float:
        """
        prod(diag L) * prod(diag U).

        U's diagonal is 1 by construction; it is still multiplied in so
        the result does not depend on that convention.
        """
        ans = 1.0
        for i in range(self.n):
            ans *= self._lower.get(i, i)
        for i in range(self.n):
            ans *= self._upper.get(i, i)
        return float(ans)

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Lifetime ---

    def release(self) -> None:
        """Release every factor that is still live."""
        for factor in (self._lower, self._upper):
            if not factor.released:
                factor.release()

    def __enter__(self) -> LUSolution:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def summary(self) -> str:
        """Short diagnostic report."""
        lines = [
            f"Crout LU factorization (n={self.n}, dtype={self._design.dtype}, "
            f"backend={self.backend_name})",
            f"  pivot tolerance: {self.info.get('pivot_tol', float('nan')):g}",
            f"  min |pivot|:     {self.info.get('min_abs_pivot', float('nan')):g}",
        ]
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"LUSolution(n={self.n}, backend_name={self.backend_name!r})"
