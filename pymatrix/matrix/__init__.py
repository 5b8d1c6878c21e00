"""
Matrix container.

Provides the explicitly owned, bounds-checked dense Matrix and the
element dtype policy shared with the kernel.

Public API:
    Matrix              - rows x cols container
    resolve_dtype       - validate an element dtype
    decomposition_dtype - floating dtype used to decompose a matrix
"""

from pymatrix.matrix._matrix import Matrix
from pymatrix.matrix._dtypes import resolve_dtype, decomposition_dtype

__all__ = [
    "Matrix",
    "resolve_dtype",
    "decomposition_dtype",
]
