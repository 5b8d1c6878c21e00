"""
Arithmetic operators on Matrix.

Public API:
    add(a, b)          - elementwise sum
    sub(a, b)          - elementwise difference
    scalar_mult(a, k)  - multiply every element by k
    mult(a, b)         - matrix product
    identity(n)        - n x n identity
"""

from pymatrix.arithmetic.operators import (
    add,
    sub,
    scalar_mult,
    mult,
    identity,
)

__all__ = [
    "add",
    "sub",
    "scalar_mult",
    "mult",
    "identity",
]
