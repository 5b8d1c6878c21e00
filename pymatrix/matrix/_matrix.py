"""
Matrix: an explicitly owned, bounds-checked 2-D array.

Each Matrix exclusively owns a NumPy backing store of rows x cols
elements. Kernel operations never mutate their operands; they return new,
independently owned matrices. Ownership ends with release(), either called
directly or by leaving a ``with`` block.
"""

from __future__ import annotations

import sys
from typing import Any, IO, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    AllocationError,
    ReleasedMatrixError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_rows,
    check_same_shape,
    check_scalar,
    check_tolerance,
)
from pymatrix.core.compute.precision import is_close
from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.matrix._dtypes import check_castable, check_representable, resolve_dtype

if TYPE_CHECKING:
    from pymatrix.decomposition.solution import LUSolution


def _allocate(shape: tuple[int, int], dtype: np.dtype) -> NDArray[Any]:
    """Zero-filled backing store; allocation failures become AllocationError."""
    try:
        return np.zeros(shape, dtype=dtype)
    except MemoryError as e:
        raise AllocationError(
            f"cannot allocate {shape[0]}x{shape[1]} {dtype} matrix",
            shape=shape,
            dtype=str(dtype),
        ) from e
    except ValueError as e:
        # NumPy reports sizes beyond the address space as ValueError
        raise AllocationError(
            f"cannot allocate {shape[0]}x{shape[1]} {dtype} matrix: {e}",
            shape=shape,
            dtype=str(dtype),
        ) from e


class Matrix:
    """
    Dense rows x cols matrix of a real integer or floating dtype.

    Construction:
        Matrix.init(rows, cols, dtype=np.float64)   # zero-filled
        Matrix.from_array([[4, 3], [6, 3]])         # dtype inferred
        identity(n)                                 # pymatrix.arithmetic

    Lifetime:
        with Matrix.init(2, 2) as A:
            A.set(0, 0, 4.0)
        # A is released here; further access raises ReleasedMatrixError
    """

    __slots__ = ('_data', '_rows', '_cols', '_dtype')

    def __init__(self, rows: int, cols: int, dtype: Any = np.float64):
        self._rows = check_dimension(rows, 'rows')
        self._cols = check_dimension(cols, 'cols')
        self._dtype = resolve_dtype(dtype)
        self._data: NDArray[Any] | None = _allocate((self._rows, self._cols), self._dtype)

    # --- Construction ---

    @classmethod
    def init(cls, rows: int, cols: int, dtype: Any = np.float64) -> Matrix:
        """Allocate a zero-filled rows x cols matrix."""
        return cls(rows, cols, dtype)

    @classmethod
    def from_array(cls, values: ArrayLike | Matrix, dtype: Any = None) -> Matrix:
        """
        Build a new matrix from a sequence of equal-length rows.

        Parameters
        ----------
        values : sequence of sequences, 2D array, or Matrix
            Row-major element values. The result never shares storage
            with the input.
        dtype : dtype, optional
            Element dtype. Defaults to the dtype NumPy infers from values.

        Raises
        ------
        DimensionError
            If values is empty, not 2D, or ragged.
        ValidationError
            If values are non-numeric or cannot be stored as dtype.
        """
        if isinstance(values, Matrix):
            values = values.to_array()

        if isinstance(values, np.ndarray):
            check_2d(values, 'values')
            rows, cols = values.shape
        else:
            rows = len(values) if hasattr(values, '__len__') else 0
            first = values[0] if rows else None
            cols = len(first) if hasattr(first, '__len__') else 0
            check_rows(values, rows, cols, 'values')

        arr = check_array(values, 'values')
        matrix = cls(rows, cols, arr.dtype if dtype is None else dtype)
        matrix.from_rows(arr)
        return matrix

    @classmethod
    def _adopt(cls, array: NDArray[Any]) -> Matrix:
        """
        Wrap a freshly computed 2D array without copying.

        The caller hands over ownership: the array must not be referenced
        anywhere else afterwards.
        """
        matrix = cls.__new__(cls)
        matrix._rows, matrix._cols = (int(d) for d in array.shape)
        matrix._dtype = resolve_dtype(array.dtype)
        matrix._data = array
        return matrix

    # --- Introspection ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        """Element dtype."""
        return self._dtype

    @property
    def released(self) -> bool:
        """Whether release() has been called."""
        return self._data is None

    def _values(self) -> NDArray[Any]:
        """Backing store for in-package kernels; never handed to callers."""
        if self._data is None:
            raise ReleasedMatrixError(
                f"{self._rows}x{self._cols} matrix used after release"
            )
        return self._data

    # --- Element access ---

    def get(self, i: int, j: int) -> int | float:
        """Element (i, j) as a Python scalar."""
        data = self._values()
        check_index(i, j, self.shape)
        return data[i, j].item()

    def set(self, i: int, j: int, value: int | float) -> None:
        """Store value at (i, j)."""
        data = self._values()
        check_index(i, j, self.shape)
        scalar = check_scalar(value, 'value')
        check_castable(scalar.dtype, self._dtype, 'value')
        check_representable(np.asarray(scalar), self._dtype, 'value')
        data[i, j] = scalar

    def __getitem__(self, key: tuple[int, int]) -> int | float:
        i, j = self._split_key(key)
        return self.get(i, j)

    def __setitem__(self, key: tuple[int, int], value: int | float) -> None:
        i, j = self._split_key(key)
        self.set(i, j, value)

    @staticmethod
    def _split_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(f"matrix index must be an (i, j) pair, got {key!r}")
        return key

    def from_rows(self, values: ArrayLike) -> None:
        """
        Overwrite every element from a sequence of rows.

        Raises
        ------
        DimensionError
            If values is empty, or its outer length != rows, or any row
            length != cols.
        ValidationError
            If values are non-numeric, or of a kind or range this matrix
            cannot hold.
        """
        data = self._values()
        check_rows(values, self._rows, self._cols, 'values')
        arr = check_array(values, 'values')
        check_castable(arr.dtype, self._dtype, 'values')
        check_representable(arr, self._dtype, 'values')
        data[...] = arr

    def fill(self, value: int | float) -> None:
        """Set every element to value."""
        data = self._values()
        scalar = check_scalar(value, 'value')
        check_castable(scalar.dtype, self._dtype, 'value')
        check_representable(np.asarray(scalar), self._dtype, 'value')
        data.fill(scalar)

    # --- Comparison ---

    def equals(self, other: Matrix) -> bool:
        """
        Exact elementwise equality.

        No tolerance is applied, so floating-point results of a
        decomposition rarely compare equal to hand-written values;
        use allclose() for those.

        Raises
        ------
        DimensionError
            If the shapes differ.
        """
        a, b = self._values(), _operand(other, 'other')
        check_same_shape(self.shape, other.shape, 'equals')
        return bool(np.array_equal(a, b))

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Elementwise |self - other| <= atol + rtol * |other|.

        Tolerances default to the tier of the wider of the two dtypes.

        Raises
        ------
        DimensionError
            If the shapes differ.
        """
        a, b = self._values(), _operand(other, 'other')
        check_same_shape(self.shape, other.shape, 'allclose')
        tier = select_tolerance(np.result_type(self._dtype, other.dtype))
        rtol = tier.rtol if rtol is None else check_tolerance(rtol, 'rtol')
        atol = tier.atol if atol is None else check_tolerance(atol, 'atol')
        return bool(np.all(is_close(a, b, rtol=rtol, atol=atol)))

    # --- Derived matrices ---

    def transpose(self) -> Matrix:
        """New cols x rows matrix with result[i][j] = self[j][i]."""
        return Matrix._adopt(self._values().T.copy())

    def to_array(self) -> NDArray[Any]:
        """Independent copy of the elements as a 2D ndarray."""
        return self._values().copy()

    def to_list(self) -> list[list[int | float]]:
        """Elements as nested Python lists."""
        return self._values().tolist()

    def copy(self) -> Matrix:
        """Independently owned copy."""
        return Matrix._adopt(self.to_array())

    # --- Arithmetic (see pymatrix.arithmetic) ---

    def add(self, other: Matrix) -> Matrix:
        from pymatrix.arithmetic import add
        return add(self, other)

    def sub(self, other: Matrix) -> Matrix:
        from pymatrix.arithmetic import sub
        return sub(self, other)

    def scalar_mult(self, k: int | float) -> Matrix:
        from pymatrix.arithmetic import scalar_mult
        return scalar_mult(self, k)

    def mult(self, other: Matrix) -> Matrix:
        from pymatrix.arithmetic import mult
        return mult(self, other)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, k: Any) -> Matrix:
        if isinstance(k, Matrix):
            return NotImplemented
        return self.scalar_mult(k)

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mult(other)

    # --- Decomposition (see pymatrix.decomposition) ---

    def lu(self, *, pivot_tol: float | None = None) -> LUSolution:
        """Crout factors L, U of this square matrix."""
        from pymatrix.decomposition import lu
        return lu(self, pivot_tol=pivot_tol)

    def det(self, *, pivot_tol: float | None = None) -> float:
        """Determinant via Crout factors."""
        from pymatrix.decomposition import det
        return det(self, pivot_tol=pivot_tol)

    def inv(self, *, pivot_tol: float | None = None) -> Matrix:
        """Inverse via Crout factors; see pymatrix.decomposition.inv."""
        from pymatrix.decomposition import inv
        return inv(self, pivot_tol=pivot_tol)

    def solve(self, b: ArrayLike | Matrix, *, pivot_tol: float | None = None) -> Matrix:
        """Solve self @ x = b via Crout factors."""
        from pymatrix.decomposition import solve
        return solve(self, b, pivot_tol=pivot_tol)

    # --- Lifetime ---

    def release(self) -> None:
        """
        Free the backing store.

        Must be called exactly once; a second call, like any other access
        after release, raises ReleasedMatrixError.
        """
        self._values()
        self._data = None

    def __enter__(self) -> Matrix:
        self._values()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._data is not None:
            self.release()

    # --- Output ---

    def to_string(self) -> str:
        """Row-major dump: space-separated values, one row per line."""
        return "\n".join(
            " ".join(str(v) for v in row) for row in self._values().tolist()
        )

    def dump(self, file: IO[str] | None = None) -> None:
        """Print to_string() to file (default stdout). Diagnostic only."""
        print(self.to_string(), file=sys.stdout if file is None else file)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        state = ", released" if self.released else ""
        return f"Matrix(rows={self._rows}, cols={self._cols}, dtype={self._dtype}{state})"


def _operand(other: Any, name: str) -> NDArray[Any]:
    """Backing store of a Matrix operand, rejecting anything else."""
    if not isinstance(other, Matrix):
        raise ValidationError(f"{name}: expected Matrix, got {type(other).__name__}")
    return other._values()
