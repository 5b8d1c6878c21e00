"""
PyMatrix: dense matrices with a direct linear-algebra kernel.

A generic 2-D container over real integer or floating element types,
arithmetic operators that preserve dimensional invariants, and LU
decomposition (Crout, no pivoting), determinant and inverse.

Submodules:
    matrix: Matrix container
    arithmetic: add, sub, scalar_mult, mult, identity
    decomposition: lu, det, inv, solve
    symbols: Levi-Civita symbol
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    ReleasedMatrixError,
    AllocationError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.matrix import Matrix
from pymatrix.arithmetic import add, sub, scalar_mult, mult, identity
from pymatrix.decomposition import lu, det, inv, solve, LUSolution
from pymatrix.symbols import levi_civita

__all__ = [
    "__version__",
    # Container
    "Matrix",
    # Arithmetic
    "add",
    "sub",
    "scalar_mult",
    "mult",
    "identity",
    # Decomposition
    "lu",
    "det",
    "inv",
    "solve",
    "LUSolution",
    # Symbols
    "levi_civita",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "ReleasedMatrixError",
    "AllocationError",
    "NumericalError",
    "SingularMatrixError",
]
