"""
Tests for solve(): A x = b from Crout factors.
"""

import numpy as np
import pytest

from pymatrix import Matrix, mult, solve
from pymatrix.core.exceptions import DimensionError, SingularMatrixError, ValidationError


class TestSolve:

    def test_vector_rhs(self, diag_dominant, rng):
        b = rng.standard_normal(5)
        with solve(diag_dominant, b) as x:
            assert x.shape == (5, 1)
            np.testing.assert_allclose(
                x.to_array().ravel(), np.linalg.solve(diag_dominant, b), rtol=1e-10
            )

    def test_matrix_rhs(self, diag_dominant, rng):
        A = Matrix.from_array(diag_dominant)
        B = Matrix.from_array(rng.standard_normal((5, 3)))
        with solve(A, B) as X, mult(A, X) as AX:
            assert X.shape == (5, 3)
            assert AX.allclose(B)

    def test_integer_system(self):
        x = solve(Matrix.from_array([[4, 3], [6, 3]]), [10, 12])
        np.testing.assert_allclose(x.to_array().ravel(), [1.0, 2.0], rtol=1e-12)

    def test_matrix_method(self):
        A = Matrix.from_array([[2.0, 0.0], [0.0, 4.0]])
        assert A.solve([2.0, 2.0]).to_list() == [[1.0], [0.5]]


class TestSolveErrors:

    def test_rhs_length_mismatch(self):
        with pytest.raises(DimensionError, match="expected 2 rows"):
            solve([[1.0, 0.0], [0.0, 1.0]], [1.0, 2.0, 3.0])

    def test_non_square(self):
        with pytest.raises(DimensionError):
            solve(Matrix.init(2, 3), [1.0, 2.0])

    def test_forced_zero_pivot(self):
        with pytest.raises(SingularMatrixError):
            solve([[0.0, 1.0], [1.0, 0.0]], [1.0, 1.0])

    def test_non_finite_rhs(self):
        with pytest.raises(ValidationError, match="non-finite"):
            solve([[1.0, 0.0], [0.0, 1.0]], [np.inf, 1.0])
