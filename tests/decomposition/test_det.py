"""
Tests for det(): determinant from Crout factors.
"""

import numpy as np
import pytest

from pymatrix import Matrix, det, identity
from pymatrix.core.exceptions import DimensionError, SingularMatrixError


class TestDetKnownValues:

    def test_2x2(self, crout_2x2):
        A, _, _, expected = crout_2x2
        assert det(Matrix.from_array(A)) == pytest.approx(expected)

    def test_4x4(self):
        A = Matrix.from_array([
            [5, -7, 2, 2],
            [0, 3, 0, -4],
            [-5, -8, 0, 3],
            [0, 5, 0, -6],
        ], dtype=np.float32)
        assert det(A) == pytest.approx(20.0, abs=1e-4)

    def test_4x4_integer_input(self):
        A = Matrix.from_array([
            [5, -7, 2, 2],
            [0, 3, 0, -4],
            [-5, -8, 0, 3],
            [0, 5, 0, -6],
        ])
        assert det(A) == pytest.approx(20.0, rel=1e-12)

    @pytest.mark.parametrize("n", [1, 2, 5, 10])
    def test_identity(self, n):
        assert det(identity(n)) == 1.0

    def test_returns_python_float(self):
        assert type(det([[2.0]])) is float

    def test_matches_numpy(self, diag_dominant):
        assert det(diag_dominant) == pytest.approx(np.linalg.det(diag_dominant), rel=1e-10)

    def test_matrix_method(self, crout_2x2):
        assert Matrix.from_array(crout_2x2[0]).det() == pytest.approx(-6.0)


class TestDetSingular:
    """Zero pivots: 0.0 when singularity is proven, error otherwise."""

    def test_proven_singular_returns_zero(self):
        assert det([[1.0, 2.0], [2.0, 4.0]]) == 0.0

    def test_zero_matrix(self):
        assert det(Matrix.init(3, 3)) == 0.0

    def test_dependent_rows_3x3(self):
        A = [[1.0, 2.0, 3.0], [1.0, 0.0, 1.0], [2.0, 4.0, 6.0]]
        assert det(A) == 0.0

    def test_forced_zero_pivot_raises(self):
        """det([[0, 1], [1, 0]]) is -1; returning 0.0 would be wrong."""
        with pytest.raises(SingularMatrixError) as exc_info:
            det(Matrix.from_array([[0.0, 1.0], [1.0, 0.0]]))
        assert exc_info.value.is_singular is False


class TestDetErrors:

    def test_non_square(self):
        with pytest.raises(DimensionError):
            det(Matrix.init(3, 2))
