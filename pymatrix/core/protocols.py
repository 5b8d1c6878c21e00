"""
Core protocols for PyMatrix.

Backends are described structurally (Protocol) rather than nominally (ABC)
so alternative implementations only need the right shape, not a base class.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

from pymatrix.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D]):
    """
    Protocol for decomposition backends.
    
    A backend takes a validated square design and produces Result envelopes.
    Backends are stateless; all configuration is passed per call.
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}', e.g. 'cpu_crout'.
        """
        ...
    
    def factor(self, design: D, *, pivot_tol: float | None = None) -> Result[Any]:
        """
        Compute the LU factors of the design matrix.
        
        Raises:
            SingularMatrixError: If a pivot falls within the pivot tolerance
        """
        ...
    
    def invert(self, design: D, *, pivot_tol: float | None = None) -> Result[Any]:
        """
        Compute the inverse of the design matrix from its LU factors.
        
        Raises:
            SingularMatrixError: If a pivot falls within the pivot tolerance
        """
        ...
    
    def solve(self, design: D, rhs: Any, *, pivot_tol: float | None = None) -> Result[Any]:
        """
        Solve design @ x = rhs from the LU factors.
        
        Raises:
            SingularMatrixError: If a pivot falls within the pivot tolerance
        """
        ...
