"""
Tests for lu(): Crout factorization without pivoting.
"""

import warnings

import numpy as np
import pytest

from pymatrix import Matrix, identity, lu, mult
from pymatrix.core.exceptions import DimensionError, SingularMatrixError, ValidationError
from pymatrix.decomposition import LUSolution, SquareDesign


class TestLUKnownFactors:
    """Hand-computed Crout factors."""

    def test_2x2_exact(self, crout_2x2):
        A, L_expected, U_expected, _ = crout_2x2
        L, U = lu(Matrix.from_array(A))
        assert L.equals(Matrix.from_array(L_expected))
        assert U.equals(Matrix.from_array(U_expected))
        L.release()
        U.release()

    def test_identity_factors(self):
        with lu(identity(3)) as factors:
            assert factors.L.equals(identity(3))
            assert factors.U.equals(identity(3))


class TestLUProperties:
    """L U = A, U unit upper triangular, L lower triangular."""

    def test_reconstructs(self, diag_dominant):
        A = Matrix.from_array(diag_dominant)
        with lu(A) as factors:
            assert mult(factors.L, factors.U).allclose(A)

    def test_unit_diagonal_upper(self, diag_dominant):
        with lu(diag_dominant) as factors:
            U = factors.U.to_array()
        np.testing.assert_array_equal(np.diag(U), np.ones(5))
        np.testing.assert_array_equal(np.tril(U, -1), np.zeros((5, 5)))

    def test_lower_triangular(self, diag_dominant):
        with lu(diag_dominant) as factors:
            L = factors.L.to_array()
        np.testing.assert_array_equal(np.triu(L, 1), np.zeros((5, 5)))

    def test_pivots_are_diagonal_of_l(self, crout_2x2):
        A, L_expected, _, _ = crout_2x2
        with lu(A) as factors:
            np.testing.assert_array_equal(factors.pivots, np.diag(L_expected))

    def test_input_not_mutated(self, crout_2x2):
        A = Matrix.from_array(crout_2x2[0])
        with lu(A):
            pass
        assert A.to_list() == crout_2x2[0]


class TestLUWidening:
    """Decomposition always runs in floating point."""

    def test_integer_matrix_widened_to_float64(self):
        A = Matrix.from_array([[4, 3], [6, 3]], dtype=np.int32)
        with lu(A) as factors:
            assert factors.L.dtype == np.float64
            assert factors.U.get(0, 1) == 0.75

    def test_float32_kept(self):
        A = Matrix.from_array([[4, 3], [6, 3]], dtype=np.float32)
        with lu(A) as factors:
            assert factors.L.dtype == np.float32

    def test_design_records_source_dtype(self):
        design = SquareDesign.from_matrix(Matrix.from_array([[1, 2], [3, 4]], dtype=np.int16))
        assert design.source_dtype == np.int16
        assert design.dtype == np.float64

    def test_array_like_input(self):
        with lu([[4, 3], [6, 3]]) as factors:
            assert factors.L.get(1, 1) == -1.5


class TestLUErrors:

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            lu(Matrix.init(2, 3))

    def test_forced_zero_pivot(self):
        """[[0, 1], [1, 0]] is invertible but needs a row exchange."""
        with pytest.raises(SingularMatrixError) as exc_info:
            lu(Matrix.from_array([[0.0, 1.0], [1.0, 0.0]]))
        err = exc_info.value
        assert err.pivot_index == 0
        assert err.pivot_value == 0.0
        assert err.is_singular is False

    def test_singular_last_pivot(self):
        """The last pivot is never a divisor but is still checked."""
        with pytest.raises(SingularMatrixError) as exc_info:
            lu([[1.0, 2.0], [2.0, 4.0]])
        assert exc_info.value.pivot_index == 1
        assert exc_info.value.is_singular is True

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError):
            lu(Matrix.init(3, 3))

    def test_custom_pivot_tol(self):
        A = [[1e-6, 1.0], [1.0, 1.0]]
        with lu(A) as factors:
            assert factors.info['pivot_tol'] < 1e-6
        with pytest.raises(SingularMatrixError):
            lu(A, pivot_tol=1e-3)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            lu([[np.nan, 1.0], [1.0, 1.0]])

    def test_negative_pivot_tol(self):
        with pytest.raises(ValidationError):
            lu(identity(2), pivot_tol=-1.0)

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            lu(identity(2), backend='gpu')


class TestLUSolution:
    """Ownership, metadata and diagnostics of LUSolution."""

    def test_returns_solution(self, crout_2x2):
        factors = lu(crout_2x2[0])
        assert isinstance(factors, LUSolution)
        assert factors.n == 2
        factors.release()

    def test_context_releases_factors(self, crout_2x2):
        with lu(crout_2x2[0]) as factors:
            L, U = factors
        assert L.released and U.released

    def test_release_skips_already_released(self, crout_2x2):
        factors = lu(crout_2x2[0])
        factors.L.release()
        factors.release()
        assert factors.U.released

    def test_factors_are_independent(self, crout_2x2):
        with lu(crout_2x2[0]) as first, lu(crout_2x2[0]) as second:
            first.L.set(0, 0, 100.0)
            assert second.L.get(0, 0) == 4.0

    def test_determinant(self, crout_2x2):
        A, _, _, expected = crout_2x2
        with lu(A) as factors:
            assert factors.determinant() == pytest.approx(expected)

    def test_metadata(self, crout_2x2):
        with lu(crout_2x2[0]) as factors:
            assert factors.backend_name == 'cpu_crout'
            assert factors.info['method'] == 'crout'
            assert factors.info['min_abs_pivot'] == 1.5
            assert 'crout' in factors.timing
            assert factors.warnings == ()
            assert "Crout LU" in factors.summary()

    def test_small_pivot_warning(self):
        A = [[1e-10, 1.0], [1.0, 1.0]]
        with pytest.warns(RuntimeWarning, match="small pivot"):
            factors = lu(A)
        assert len(factors.warnings) == 1
        factors.release()

    def test_no_warning_when_well_conditioned(self, diag_dominant):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            lu(diag_dominant).release()

    def test_matrix_method(self, crout_2x2):
        with Matrix.from_array(crout_2x2[0]).lu() as factors:
            assert factors.L.get(1, 0) == 6.0
