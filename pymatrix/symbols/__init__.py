"""
Index symbols.

Public API:
    levi_civita(indices) - permutation sign, 0 on repeated indices
"""

from pymatrix.symbols._levi_civita import levi_civita

__all__ = [
    "levi_civita",
]
