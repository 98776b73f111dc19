"""
Tests for the Quaternion rotation type.
"""

import math

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError
from pylinalg.types import (
    Matrix3,
    Matrix4,
    MatrixN,
    Quaternion,
    Vector3,
    VectorN,
    distance,
    quaternion_euler_angles,
    quaternion_inverse,
    rotate,
    rotate_in_place,
    slerp,
)
from pylinalg.types.quaternion import euler_angles, inverse


def _close(a, b, atol=1e-12):
    np.testing.assert_allclose(np.asarray(list(a)), np.asarray(list(b)), atol=atol)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_default_is_identity(self):
        assert Quaternion() == Quaternion(0, 0, 0, 1)
        assert Quaternion().angle() == 0.0

    def test_from_values(self):
        q = Quaternion([1, 2, 3, 4])
        assert list(q) == [1.0, 2.0, 3.0, 4.0]
        with pytest.raises(DimensionError):
            Quaternion([1, 2, 3])

    def test_axis_angle(self):
        q = Quaternion(Vector3(0, 0, 2), math.pi / 2)
        _close(q, [0, 0, math.sin(math.pi / 4), math.cos(math.pi / 4)])
        _close(q.axis(), [0, 0, 1])
        assert q.angle() == pytest.approx(math.pi / 2)

    def test_axis_of_identity_is_x(self):
        assert Quaternion().axis() == Vector3(1, 0, 0)

    def test_zero_axis_is_identity(self):
        assert Quaternion(Vector3(), 1.0) == Quaternion()

    def test_between_vectors(self):
        u, v = Vector3(1, 0, 0), Vector3(0, 1, 0)
        q = Quaternion.from_vectors(u, v)
        _close(q.rotate(u), v)
        assert q.norm() == pytest.approx(1.0)

    def test_between_parallel_is_identity(self):
        assert Quaternion(Vector3(1, 2, 3), Vector3(2, 4, 6)) == Quaternion()

    def test_between_opposite_is_half_turn(self):
        u = Vector3(0, 0, 1)
        q = Quaternion(u, -u)
        assert q.angle() == pytest.approx(math.pi)
        _close(q.rotate(u), -u)

    def test_from_matrix_round_trip(self):
        q = Quaternion.from_axis_angle(Vector3(1, 2, 3), 0.7)
        r = Quaternion.from_matrix(q.to_matrix3())
        assert distance(q, r) < 1e-12

    @pytest.mark.parametrize("axis", [(1, 0, 0), (0, 1, 0), (0, 0, 1)])
    def test_from_half_turn_matrix(self, axis):
        q = Quaternion(Vector3(*axis), math.pi)
        r = Quaternion(q.to_matrix4())
        assert distance(q, r) < 1e-12

    def test_from_small_matrix_raises(self):
        with pytest.raises(DimensionError):
            Quaternion(MatrixN(2, 2))


# ═══════════════════════════════════════════════════════════════════════
# Algebra
# ═══════════════════════════════════════════════════════════════════════


class TestAlgebra:

    def test_basis_products(self):
        i, j, k = Quaternion(1, 0, 0, 0), Quaternion(0, 1, 0, 0), Quaternion(0, 0, 1, 0)
        assert i * j == k
        assert j * i == -k
        assert j * k == i
        assert k * i == j
        assert i * i == Quaternion(0, 0, 0, -1)

    def test_product_composes_rotations(self):
        a = Quaternion(Vector3(0, 0, 1), 0.3)
        b = Quaternion(Vector3(0, 0, 1), 0.4)
        assert distance(a * b, Quaternion(Vector3(0, 0, 1), 0.7)) < 1e-12

    def test_in_place_product(self):
        q = Quaternion(1, 0, 0, 0)
        q *= Quaternion(0, 1, 0, 0)
        assert q == Quaternion(0, 0, 1, 0)

    def test_scalar_product(self):
        assert Quaternion(1, 2, 3, 4) * 2 == Quaternion(2, 4, 6, 8)

    def test_conjugate(self):
        assert Quaternion(1, 2, 3, 4).conjugate() == Quaternion(-1, -2, -3, 4)

    def test_inverse(self):
        q = Quaternion(1, 2, 3, 4)
        _close(q * inverse(q), [0, 0, 0, 1])

    def test_normalize(self):
        q = Quaternion(0, 0, 3, 4).normalize()
        assert q == Quaternion(0, 0, 0.6, 0.8)
        z = Quaternion(0, 0, 0, 0).normalize()
        assert z.norm() == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Rotation
# ═══════════════════════════════════════════════════════════════════════


class TestRotation:

    def test_rotate_quarter_turn(self):
        q = Quaternion(Vector3(0, 0, 1), math.pi / 2)
        _close(rotate(Vector3(1, 0, 0), q), [0, 1, 0])

    def test_rotate_in_place(self):
        u = Vector3(0, 1, 0)
        assert rotate_in_place(u, Quaternion(Vector3(1, 0, 0), math.pi / 2)) is u
        _close(u, [0, 0, 1])

    def test_rotate_wrong_size(self):
        with pytest.raises(DimensionError):
            rotate(VectorN(1, 2), Quaternion())

    def test_matrix_agrees_with_rotate(self, rng):
        q = Quaternion(Vector3(rng.standard_normal(3)), 1.3)
        u = Vector3(rng.standard_normal(3))
        _close(q.to_matrix3() * u, q.rotate(u))

    def test_matrix_is_orthogonal(self):
        R = Quaternion(Vector3(1, 1, 0), 0.5).to_matrix3()
        assert isinstance(R, Matrix3)
        _close((R * R.transpose()).array.ravel(), np.eye(3).ravel())
        assert R.det() == pytest.approx(1.0)

    def test_matrix4_corner(self):
        M = Quaternion(2, 0, 0, 0).to_matrix4()
        assert isinstance(M, Matrix4)
        assert M[3, 3] == 1.0
        assert M[0, 3] == 0.0
        assert M[3, 0] == 0.0

    def test_euler_angles(self):
        q = Quaternion(Vector3(0, 0, 1), 0.25)
        _close(euler_angles(q), [0.0, 0.0, 0.25])

    def test_package_level_names(self):
        assert quaternion_inverse is inverse
        assert quaternion_euler_angles is euler_angles
        q = Quaternion(1, 2, 3, 4)
        _close(q * quaternion_inverse(q), [0, 0, 0, 1])


class TestInterpolation:

    def test_endpoints(self):
        q = Quaternion(Vector3(0, 0, 1), 0.2)
        r = Quaternion(Vector3(0, 1, 0), 1.0)
        assert distance(slerp(q, r, 0.0), q) < 1e-12
        assert distance(slerp(q, r, 1.0), r) < 1e-12

    def test_midpoint_angle(self):
        q = Quaternion()
        r = Quaternion(Vector3(0, 0, 1), 1.0)
        assert slerp(q, r, 0.5).angle() == pytest.approx(0.5)

    def test_shorter_arc(self):
        q = Quaternion(Vector3(0, 0, 1), 0.2)
        r = Quaternion(Vector3(0, 0, 1), 0.4) * -1.0
        assert slerp(q, r, 0.5).norm() == pytest.approx(1.0)
        assert distance(slerp(q, r, 0.5), Quaternion(Vector3(0, 0, 1), 0.3)) < 1e-12

    def test_nearly_identical(self):
        q = Quaternion()
        assert distance(slerp(q, q, 0.3), q) < 1e-12

    def test_distance_sign_invariant(self):
        q = Quaternion(Vector3(1, 0, 0), 0.5)
        assert distance(q, q * -1.0) == pytest.approx(0.0, abs=1e-15)


class TestText:

    def test_repr(self):
        assert repr(Quaternion()) == "Quaternion(0.0, 0.0, 0.0, 1.0)"

    def test_str(self):
        assert str(Quaternion()) == "    0.000000    0.000000    0.000000    1.000000"
