"""
Tests for the vector value types.

Validates:
    - Constructors (default, copy, values, components) for every variant
    - size() == rows(), cols() == 1
    - Element access with always-checked bounds
    - Arithmetic, norms, normalize, dot, cross (3D and 4D)
    - Explicit conversions: widening zero-pads, narrowing truncates or
      raises under strict=True
    - VectorN buffer: capacity, reserve, resize
    - Exact equality and unhashability
"""

import math

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError
from pylinalg.types import (
    MatrixN,
    Point3,
    Vector2,
    Vector3,
    Vector4,
    VectorN,
    cross,
    dot,
    normalize,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    @pytest.mark.parametrize("cls, n", [(Vector2, 2), (Vector3, 3), (Vector4, 4)])
    def test_default_is_zero(self, cls, n):
        v = cls()
        assert v.size() == n
        assert list(v) == [0.0] * n

    def test_components(self):
        v = Vector3(1, 2, 3)
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
        w = Vector4(1, 2, 3, 4)
        assert w.w == 4.0

    def test_copy_constructor_is_independent(self):
        u = Vector3(1, 2, 3)
        v = Vector3(u)
        v[0] = 9.0
        assert u[0] == 1.0

    def test_from_sequence(self):
        assert Vector2([5, 6]) == Vector2(5, 6)

    def test_wrong_count_raises(self):
        with pytest.raises(DimensionError):
            Vector3([1, 2])
        with pytest.raises(TypeError):
            Vector3(1, 2)

    def test_vector_n_constructors(self):
        assert VectorN().size() == 0
        assert list(VectorN(3)) == [0.0, 0.0, 0.0]
        assert list(VectorN([1, 2, 3, 4], 2)) == [1.0, 2.0]
        assert list(VectorN(1, 2, 3)) == [1.0, 2.0, 3.0]
        assert list(VectorN(np.arange(5.0))) == [0.0, 1.0, 2.0, 3.0, 4.0]

    def test_vector_n_too_few_values(self):
        with pytest.raises(DimensionError):
            VectorN([1, 2], 3)

    def test_point_alias(self):
        assert Point3 is Vector3


# ═══════════════════════════════════════════════════════════════════════
# Shape and element access
# ═══════════════════════════════════════════════════════════════════════


class TestShapeAndAccess:

    @pytest.mark.parametrize("v", [Vector2(), Vector3(), Vector4(), VectorN(7)])
    def test_column_shape(self, v):
        assert v.rows() == v.size()
        assert v.cols() == 1
        assert len(v) == v.size()

    def test_linear_and_pair_index(self):
        v = Vector3(1, 2, 3)
        assert v[2] == 3.0
        assert v[2, 0] == 3.0
        v[1, 0] = 7.0
        assert v.y == 7.0

    def test_out_of_range_raises(self):
        v = VectorN(3)
        with pytest.raises(IndexError):
            v[3]
        with pytest.raises(IndexError):
            v[-1]
        with pytest.raises(IndexError):
            v[0, 1] = 1.0

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector3())


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_sub_neg(self):
        u, v = Vector3(1, 2, 3), Vector3(4, 5, 6)
        assert u + v == Vector3(5, 7, 9)
        assert v - u == Vector3(3, 3, 3)
        assert -u == Vector3(-1, -2, -3)

    def test_scalar_scaling(self):
        u = Vector2(1, -2)
        assert u * 2 == Vector2(2, -4)
        assert 2 * u == Vector2(2, -4)
        assert u / 2 == Vector2(0.5, -1)

    def test_in_place(self):
        u = VectorN(1, 2, 3)
        u += VectorN(1, 1, 1)
        u *= 2
        assert u == VectorN(4, 6, 8)

    def test_size_mismatch_raises(self):
        with pytest.raises(DimensionError):
            VectorN(1, 2) + VectorN(1, 2, 3)

    def test_norm(self):
        u = Vector3(1, 2, 2)
        assert u.norm2() == 9.0
        assert u.norm() == 3.0

    def test_normalize_in_place(self):
        u = Vector2(3, 4)
        assert u.normalize() is u
        assert u == Vector2(0.6, 0.8)

    def test_normalize_zero_vector_unchanged(self):
        u = Vector3()
        u.normalize()
        assert u == Vector3()

    def test_normalize_function_returns_copy(self):
        u = Vector3(0, 0, 5)
        n = normalize(u)
        assert n == Vector3(0, 0, 1)
        assert u.z == 5.0

    def test_clear(self):
        u = Vector3(1, 2, 3)
        u.clear()
        assert u == Vector3()

    def test_dot(self):
        assert dot(Vector3(1, 2, 3), Vector3(4, 5, 6)) == 32.0
        assert VectorN(1, 0).dot(VectorN(0, 1)) == 0.0
        with pytest.raises(DimensionError):
            dot(VectorN(1, 2), VectorN(1, 2, 3))


class TestCross:

    def test_cross3(self):
        assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)

    def test_cross3_orthogonal(self, rng):
        u, v = Vector3(rng.standard_normal(3)), Vector3(rng.standard_normal(3))
        w = cross(u, v)
        assert abs(dot(w, u)) < 1e-12
        assert abs(dot(w, v)) < 1e-12

    def test_cross4_basis(self):
        e = [Vector4(*row) for row in np.eye(4)]
        assert cross(e[0], e[1], e[2]) == Vector4(0, 0, 0, 1)

    def test_cross4_orthogonal(self, rng):
        u, v, w = (Vector4(rng.standard_normal(4)) for _ in range(3))
        r = cross(u, v, w)
        for x in (u, v, w):
            assert abs(dot(r, x)) < 1e-12

    def test_cross4_matches_determinant(self, rng):
        u, v, w, x = (rng.standard_normal(4) for _ in range(4))
        r = cross(Vector4(u), Vector4(v), Vector4(w))
        expected = np.linalg.det(np.vstack([u, v, w, x]))
        assert dot(r, Vector4(x)) == pytest.approx(expected)

    def test_vector_n_cross(self):
        r = VectorN(1, 0, 0).cross(VectorN(0, 1, 0))
        assert isinstance(r, VectorN)
        assert r == VectorN(0, 0, 1)

    def test_wrong_size_raises(self):
        with pytest.raises(DimensionError):
            cross(VectorN(1, 2), VectorN(3, 4))
        with pytest.raises(DimensionError):
            cross(Vector3(), Vector3(), Vector3())


# ═══════════════════════════════════════════════════════════════════════
# Conversions
# ═══════════════════════════════════════════════════════════════════════


class TestConversions:

    def test_widening_zero_pads(self):
        assert Vector2(1, 2).to_vector4() == Vector4(1, 2, 0, 0)
        assert Vector3(1, 2, 3).to_vector4() == Vector4(1, 2, 3, 0)

    def test_narrowing_truncates(self):
        assert Vector4(1, 2, 3, 4).to_vector3() == Vector3(1, 2, 3)
        assert VectorN(1, 2, 3, 4).to_vector2() == Vector2(1, 2)

    def test_strict_narrowing_raises(self):
        with pytest.raises(DimensionError):
            Vector4(1, 2, 3, 4).to_vector3(strict=True)
        assert Vector2(1, 2).to_vector3(strict=True) == Vector3(1, 2, 0)

    def test_to_vector_n(self):
        v = Vector3(1, 2, 3).to_vector_n()
        assert isinstance(v, VectorN)
        assert list(v) == [1.0, 2.0, 3.0]

    def test_to_matrix_n_is_column(self):
        m = Vector3(1, 2, 3).to_matrix_n()
        assert isinstance(m, MatrixN)
        assert (m.rows(), m.cols()) == (3, 1)
        assert m[2, 0] == 3.0

    def test_transpose_is_row(self):
        m = Vector3(1, 2, 3).transpose()
        assert (m.rows(), m.cols()) == (1, 3)
        assert m[0, 1] == 2.0

    def test_conversions_copy(self):
        u = Vector3(1, 2, 3)
        v = u.to_vector_n()
        v[0] = 9.0
        assert u.x == 1.0


# ═══════════════════════════════════════════════════════════════════════
# VectorN buffer
# ═══════════════════════════════════════════════════════════════════════


class TestVectorNBuffer:

    def test_reserve_grows_capacity_keeps_size(self):
        v = VectorN(1, 2, 3)
        v.reserve(10)
        assert v.capacity() >= 10
        assert v.size() == 3

    def test_reserve_never_shrinks(self):
        v = VectorN(5)
        v.reserve(2)
        assert v.capacity() == 5

    def test_resize_zero_fills(self):
        v = VectorN(1, 2, 3)
        v.resize(5)
        assert v.size() == 5
        assert list(v) == [0.0] * 5

    def test_resize_smaller_keeps_capacity(self):
        v = VectorN(6)
        v.resize(2)
        assert v.size() == 2
        assert v.capacity() == 6
        with pytest.raises(IndexError):
            v[2]

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            VectorN(-1)
        with pytest.raises(ValueError):
            VectorN(2).resize(-3)


# ═══════════════════════════════════════════════════════════════════════
# Equality and text
# ═══════════════════════════════════════════════════════════════════════


class TestEqualityAndText:

    def test_exact_equality(self):
        assert Vector3(0.1, 0.2, 0.3) == Vector3(0.1, 0.2, 0.3)
        assert Vector3(0.1, 0.2, 0.3) != Vector3(0.1, 0.2, 0.3 + 1e-15)

    def test_types_must_match(self):
        assert Vector3(1, 2, 3) != VectorN(1, 2, 3)

    def test_repr(self):
        assert repr(Vector2(1, 2)) == "Vector2(1.0, 2.0)"

    def test_str_fixed_width(self):
        assert str(Vector2(math.pi, -1)) == "    3.141593   -1.000000"
