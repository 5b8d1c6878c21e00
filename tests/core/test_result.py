"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings factory
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymatrix.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "crout"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_crout",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "crout"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_crout"

    def test_timing_none(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.timing is None


class TestImmutability:

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


class TestWarnings:
    """Default warnings and has_warning()."""

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning_substring(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("small pivot: ratio 1e-12",),
        )
        assert result.has_warning("small pivot")
        assert not result.has_warning("diverging")
