"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default status, code and warnings
    - has_warning() and ok
    - raise_for_status() maps every Status onto its exception
    - report() emits a NumericalWarning and returns the message
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinalg.core.exceptions import (
    ConvergenceError,
    IllegalArgumentError,
    NotPositiveDefiniteError,
    NumericalWarning,
    SingularMatrixError,
)
from pylinalg.core.result import Result, Status, report


# ═══════════════════════════════════════════════════════════════════════
# Test payload types
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    fields = dict(params=FakeParams(value=1.0), info={}, timing=None, backend_name="test")
    fields.update(kwargs)
    return Result(**fields)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"routine": "dgetrf"},
            timing={"total_seconds": 0.01},
            backend_name="lapack_dgetrf",
        )
        assert result.params.value == 42.0
        assert result.info["routine"] == "dgetrf"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "lapack_dgetrf"

    def test_timing_none(self):
        assert _result().timing is None

    def test_defaults(self):
        result = _result()
        assert result.status is Status.SUCCESS
        assert result.code == 0
        assert result.warnings == ()
        assert result.ok


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_status(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.status = Status.SINGULAR


# ═══════════════════════════════════════════════════════════════════════
# Warnings
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_substring_match(self):
        result = _result(warnings=("gauss_jordan: singular matrix, no nonzero pivot at step 1",))
        assert result.has_warning("singular")
        assert result.has_warning("step 1")

    def test_no_match(self):
        result = _result(warnings=("dsyev: 2 off-diagonal elements did not converge",))
        assert not result.has_warning("singular")

    def test_empty(self):
        assert not _result().has_warning("anything")


class TestReport:

    def test_emits_numerical_warning(self):
        with pytest.warns(NumericalWarning, match="zero pivot"):
            message = report("tridiagonal: zero pivot in row 2")
        assert message == "tridiagonal: zero pivot in row 2"


# ═══════════════════════════════════════════════════════════════════════
# raise_for_status
# ═══════════════════════════════════════════════════════════════════════


class TestRaiseForStatus:

    def test_success_returns_self(self):
        result = _result()
        assert result.raise_for_status() is result

    def test_illegal_argument(self):
        result = _result(
            status=Status.ILLEGAL_ARGUMENT, code=-7,
            info={"routine": "dgeqrf"}, warnings=("dgeqrf: illegal value in argument 7",),
        )
        assert not result.ok
        with pytest.raises(IllegalArgumentError, match="argument 7") as exc_info:
            result.raise_for_status()
        assert exc_info.value.routine == "dgeqrf"
        assert exc_info.value.argument == 7

    def test_singular(self):
        result = _result(
            status=Status.SINGULAR, code=2,
            info={"routine": "gauss_jordan", "matrix_name": "A", "step": 1},
        )
        with pytest.raises(SingularMatrixError) as exc_info:
            result.raise_for_status()
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.step == 1

    def test_not_positive_definite(self):
        result = _result(
            status=Status.NOT_POSITIVE_DEFINITE, code=3,
            info={"routine": "dpotrf", "matrix_name": "A"},
        )
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            result.raise_for_status()
        assert exc_info.value.order == 3

    def test_not_converged(self):
        result = _result(status=Status.NOT_CONVERGED, code=4, info={"routine": "dgesvd"})
        with pytest.raises(ConvergenceError) as exc_info:
            result.raise_for_status()
        assert exc_info.value.routine == "dgesvd"
        assert exc_info.value.unconverged == 4

    def test_message_falls_back_to_status(self):
        result = _result(status=Status.SINGULAR, code=1)
        with pytest.raises(SingularMatrixError, match="singular"):
            result.raise_for_status()
