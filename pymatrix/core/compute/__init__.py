"""
Shared compute infrastructure for PyMatrix.

Submodules:
    precision: Machine epsilon, default pivot tolerance, closeness checks
    tolerances: Named tolerance tiers
    timing: Execution timing utilities
"""

from pymatrix.core.compute.precision import (
    EPSILON_32,
    EPSILON_64,
    default_pivot_tol,
    is_close,
    machine_epsilon,
)
from pymatrix.core.compute.tolerances import ToleranceTier, select_tolerance
from pymatrix.core.compute.timing import Timer

__all__ = [
    # Precision
    "EPSILON_32",
    "EPSILON_64",
    "default_pivot_tol",
    "is_close",
    "machine_epsilon",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
    # Timing
    "Timer",
]
