"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.
    
    Raised when operand shapes violate an operation's precondition:
    mismatched add/sub/equals operands, non-conformable multiply,
    non-square input to a decomposition, or malformed bulk input.
    
    Attributes:
        expected_shape: Shape the operation required, if known
        actual_shape: Shape that was received, if known
    """
    
    def __init__(
        self,
        message: str,
        expected_shape: tuple[int, ...] | None = None,
        actual_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected_shape = expected_shape
        self.actual_shape = actual_shape


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element access outside the matrix.
    
    Attributes:
        index: The (i, j) pair that was requested
        shape: The (rows, cols) of the matrix
    """
    
    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class ReleasedMatrixError(PyMatrixError):
    """
    Matrix used after its backing store was released.
    
    Raised on any access to a released matrix, including a second release.
    """
    pass


class AllocationError(PyMatrixError, MemoryError):
    """
    Backing store could not be allocated.
    
    Attributes:
        shape: Requested (rows, cols)
        dtype: Requested element dtype name
    """
    
    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        dtype: str | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.dtype = dtype


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or has a zero pivot.
    
    Raised when LU decomposition meets a pivot whose magnitude is within
    the pivot tolerance. Without pivoting a zero pivot does not always
    mean the matrix is singular; is_singular records whether it does.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Column k at which the zero pivot L[k][k] appeared
        pivot_value: The offending pivot value
        is_singular: True when the whole remaining column L[k:, k] is
            zero, which proves det(A) == 0
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        is_singular: bool = False
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.is_singular = is_singular
