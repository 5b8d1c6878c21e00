"""
Decomposition backends.

Available backends:
    CPUCroutBackend: CPU reference implementation using Crout's method
"""

from pymatrix.decomposition.backends.cpu import CPUCroutBackend

__all__ = [
    "CPUCroutBackend",
]
