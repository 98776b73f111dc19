"""
Tests for scalar helpers, text formatting and the compute utilities.
"""

import math

import numpy as np
import pytest

from pylinalg.core import scalar
from pylinalg.core.compute.precision import EPSILON_64, is_close
from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.compute.tolerances import EXACT, FACTOR_FP64, ILL_CONDITIONED_FP64, select_tolerance
from pylinalg.core.formatting import format_matrix, format_row, format_scalar
from pylinalg.types import MatrixN, Vector3


# ═══════════════════════════════════════════════════════════════════════
# Scalar helpers
# ═══════════════════════════════════════════════════════════════════════


class TestScalar:

    def test_constants(self):
        assert scalar.PI == pytest.approx(math.pi)
        assert scalar.PI2 == pytest.approx(2 * math.pi)
        assert scalar.PI_2 == pytest.approx(math.pi / 2)
        assert scalar.DEG_TO_RAD * 180.0 == pytest.approx(math.pi)
        assert scalar.RAD_TO_DEG * math.pi == pytest.approx(180.0)
        assert scalar.EPSILON == 1e-6
        assert scalar.EPSILON2 == 1e-12

    def test_abs(self):
        assert scalar.abs_(-2.5) == 2.5

    def test_cbrt_negative(self):
        assert scalar.cbrt(-27.0) == pytest.approx(-3.0)
        assert scalar.cbrt(8.0) == pytest.approx(2.0)

    def test_is_zero(self):
        assert scalar.is_zero(1e-7)
        assert not scalar.is_zero(1e-5)
        assert scalar.is_zero(1e-5, eps=1e-4)

    def test_sgn(self):
        assert scalar.sgn(-3.5) == -1
        assert scalar.sgn(0.0) == 0
        assert scalar.sgn(2) == 1

    @pytest.mark.parametrize("value, expected", [
        (2.5, 3.0), (-2.5, -3.0), (2.4, 2.0), (-0.4, -0.0),
    ])
    def test_round_half_away_from_zero(self, value, expected):
        assert scalar.round_(value) == expected

    def test_floor_ceiling(self):
        assert scalar.floor(-1.5) == -2.0
        assert scalar.ceiling(-1.5) == -1.0

    def test_clip_min_max(self):
        assert scalar.clip(5.0, 0.0, 1.0) == 1.0
        assert scalar.clip(-5.0, 0.0, 1.0) == 0.0
        assert scalar.clip(0.5, 0.0, 1.0) == 0.5
        assert scalar.max_(1.0, 2.0) == 2.0
        assert scalar.min_(1.0, 2.0) == 1.0

    def test_swap(self):
        a, b = scalar.swap(1, 2)
        assert (a, b) == (2, 1)

    def test_random_point3(self, rng):
        p = scalar.random_point3(rng)
        assert isinstance(p, Vector3)
        assert all(0.0 <= c < 1.0 for c in p)


# ═══════════════════════════════════════════════════════════════════════
# Formatting
# ═══════════════════════════════════════════════════════════════════════


class TestFormatting:

    def test_scalar_field(self):
        assert format_scalar(1.5) == "    1.500000"
        assert len(format_scalar(-123.25)) == 12

    def test_negative_zero_renders_as_zero(self):
        assert format_scalar(-0.0) == format_scalar(0.0)

    def test_row(self):
        assert format_row([1, 2]) == "    1.000000    2.000000"

    def test_matrix_one_line_per_row(self):
        text = format_matrix(np.eye(2))
        assert text.split("\n") == ["    1.000000    0.000000", "    0.000000    1.000000"]

    def test_value_types_use_formatting(self):
        assert str(Vector3(1, 2, 3)) == "    1.000000    2.000000    3.000000"
        assert str(MatrixN([[1, 2], [3, 4]])).count("\n") == 1


# ═══════════════════════════════════════════════════════════════════════
# Precision, tolerances, timing
# ═══════════════════════════════════════════════════════════════════════


class TestPrecision:

    def test_is_close_values(self):
        assert is_close(Vector3(1, 2, 3), Vector3(1, 2, 3 + 1e-15))
        assert not is_close(Vector3(1, 2, 3), Vector3(1, 2, 3.1))

    def test_is_close_shape_mismatch(self):
        assert not is_close(np.zeros(2), np.zeros(3))

    def test_default_tolerance_scales_with_magnitude(self):
        assert is_close(1e6, 1e6 * (1 + 1e-13))
        assert not is_close(1.0, 1.0 + 100 * EPSILON_64, rtol=0.0, atol=0.0)


class TestTolerances:

    def test_select(self):
        assert select_tolerance('transpose') is EXACT
        assert select_tolerance('lapack_dgetrf') is FACTOR_FP64
        assert select_tolerance('gauss_jordan', is_ill_conditioned=True) is ILL_CONDITIONED_FP64


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('factorize'):
            pass
        with timer.section('factorize'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'factorize'}
        assert result['total_seconds'] >= result['factorize'] >= 0.0

    def test_result_before_stop_raises(self):
        with pytest.raises(RuntimeError):
            Timer().result()

    def test_timed(self):
        with timed() as timer:
            pass
        assert timer.result()['total_seconds'] >= 0.0
