"""
Tests for the CPU Crout backend and its Result envelopes.
"""

import numpy as np
import pytest

from pymatrix.core.compute.tolerances import FP32_INVERSE, FP64_INVERSE
from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
from pymatrix.decomposition import InverseParams, LUParams, SolveParams, SquareDesign
from pymatrix.decomposition.backends import CPUCroutBackend
from pymatrix.decomposition.backends.cpu import _residual_warnings, inverse_residual
from pymatrix.decomposition.solvers import _get_backend


class TestCPUCroutBackend:

    def test_satisfies_protocol(self):
        assert isinstance(CPUCroutBackend(), Backend)

    def test_name(self):
        assert CPUCroutBackend().name == 'cpu_crout'

    def test_factor_result(self):
        design = SquareDesign.from_matrix([[4.0, 3.0], [6.0, 3.0]])
        result = CPUCroutBackend().factor(design)
        assert isinstance(result, Result)
        assert isinstance(result.params, LUParams)
        np.testing.assert_array_equal(result.params.pivots, [4.0, -1.5])
        assert result.info['n'] == 2
        assert result.info['pivot_ratio'] == pytest.approx(1.5 / 6.0)
        assert set(result.timing) == {'total_seconds', 'crout'}

    def test_explicit_pivot_tol_recorded(self):
        design = SquareDesign.from_matrix([[4.0, 3.0], [6.0, 3.0]])
        result = CPUCroutBackend().factor(design, pivot_tol=1e-6)
        assert result.info['pivot_tol'] == 1e-6

    def test_invert_result(self):
        design = SquareDesign.from_matrix([[2.0, 0.0], [0.0, 4.0]])
        result = CPUCroutBackend().invert(design)
        assert isinstance(result.params, InverseParams)
        np.testing.assert_allclose(result.params.inverse, [[0.5, 0.0], [0.0, 0.25]])
        assert {'crout', 'triangular_inverse', 'product', 'residual'} <= set(result.timing)
        assert result.info['residual'] < FP64_INVERSE.rtol
        assert result.warnings == ()

    def test_solve_result(self):
        design = SquareDesign.from_matrix([[2.0, 0.0], [0.0, 4.0]])
        result = CPUCroutBackend().solve(design, np.array([[2.0], [2.0]]))
        assert isinstance(result.params, SolveParams)
        np.testing.assert_allclose(result.params.x, [[1.0], [0.5]])
        assert 'substitution' in result.timing

    def test_selected_backend_satisfies_protocol(self):
        assert isinstance(_get_backend('auto'), Backend)


class TestInverseResidual:
    """Inverse results are checked against the inverse tolerance tier."""

    def test_exact_inverse(self):
        A = np.array([[2.0, 0.0], [0.0, 4.0]])
        assert inverse_residual(A, np.array([[0.5, 0.0], [0.0, 0.25]])) == 0.0

    def test_wrong_inverse(self):
        A = np.array([[2.0, 0.0], [0.0, 4.0]])
        assert inverse_residual(A, np.eye(2)) == pytest.approx(3.0)

    def test_float32_uses_float32_tier(self):
        design = SquareDesign.from_matrix(np.array([[2.0, 1.0], [1.0, 3.0]], dtype=np.float32))
        result = CPUCroutBackend().invert(design)
        assert result.info['residual'] < FP32_INVERSE.rtol

    def test_large_residual_warns(self):
        warnings = _residual_warnings(0.5, FP64_INVERSE)
        assert len(warnings) == 1
        assert "exceeds fp64_inverse tolerance" in warnings[0]

    def test_small_residual_silent(self):
        assert _residual_warnings(FP64_INVERSE.rtol / 10, FP64_INVERSE) == ()
