"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
container, the arithmetic operators and the decomposition kernel.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision, tolerances and timing
"""

from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
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

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
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
