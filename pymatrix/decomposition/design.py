"""
SquareDesign: validated, floating-point input to the decomposition kernel.

Wraps a square matrix after widening it to a floating dtype. Follows the
pymatrix Design pattern: validate once at construction, trust afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.validation import check_2d, check_array, check_finite, check_square
from pymatrix.matrix import Matrix, decomposition_dtype


@dataclass(frozen=True)
class SquareDesign:
    """
    Design for LU-based computations.

    Holds a private floating-point copy of an n x n matrix. Integer input
    is widened to float64; the caller's matrix is never modified.

    Construction:
        SquareDesign.from_matrix(A)          # Matrix
        SquareDesign.from_matrix([[4, 3],    # any 2D array-like
                                  [6, 3]])
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _source_dtype: np.dtype

    @classmethod
    def from_matrix(cls, matrix: Matrix | ArrayLike, name: str = 'A') -> SquareDesign:
        """
        Build a SquareDesign from a Matrix or 2D array-like.

        Raises
        ------
        DimensionError
            If the input is not 2D or not square.
        ValidationError
            If the input is non-numeric or contains NaN/Inf.
        """
        if isinstance(matrix, Matrix):
            data = matrix.to_array()
        else:
            data = check_array(matrix, name)
            check_2d(data, name)

        check_square(data.shape, name)
        check_finite(data, name)

        source_dtype = data.dtype
        data = data.astype(decomposition_dtype(source_dtype))
        return cls(_data=data, _n=int(data.shape[0]), _source_dtype=source_dtype)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Floating-point matrix (n x n)."""
        return self._data

    @property
    def n(self) -> int:
        """Matrix order."""
        return self._n

    @property
    def dtype(self) -> np.dtype:
        """Floating dtype the kernel computes in."""
        return self._data.dtype

    @property
    def source_dtype(self) -> np.dtype:
        """Element dtype of the input before widening."""
        return self._source_dtype

    def __repr__(self) -> str:
        return f"SquareDesign(n={self._n}, dtype={self.dtype}, source_dtype={self._source_dtype})"
