"""
Quaternion rotation type.

A quaternion q = ix + jy + kz + w stores its imaginary part (x, y, z)
first and the real part w last. For a rotation of angle a about the unit
axis n, (x, y, z) = n sin(a/2) and w = cos(a/2). Use axis() and angle()
rather than reading the components directly; both normalize first.

    i^2 = j^2 = k^2 = -1,  ij = -ji = k,  jk = -kj = i,  ki = -ik = j
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.formatting import format_row
from pylinalg.core.scalar import EPSILON, clip
from pylinalg.types._dense import DenseValue, as_values, is_scalar
from pylinalg.types.matrix import Matrix3, Matrix4, MatrixBase, MatrixN, euler_angles as _matrix_euler_angles
from pylinalg.types.vector import Vector3, VectorBase


class Quaternion(DenseValue):
    """
    Rotation quaternion.

    Constructors:
        Quaternion()                  identity (0, 0, 0, 1)
        Quaternion(x, y, z, w)        components
        Quaternion(values)            copy of a quaternion or 4 values
        Quaternion(axis, angle)       rotation of angle radians about axis
        Quaternion(u, v)              shortest rotation taking u onto v
        Quaternion(matrix)            from a 3x3 or 4x4 rotation matrix
    """

    __slots__ = ('_data',)

    def __init__(self, *args: Any):
        if len(args) == 0:
            self._data = np.array([0.0, 0.0, 0.0, 1.0])
        elif len(args) == 4:
            self._data = np.array(args, dtype=np.float64)
        elif len(args) == 1 and isinstance(args[0], MatrixBase):
            self._data = _matrix_to_quaternion(args[0].array)
        elif len(args) == 1:
            values = as_values(args[0], 'Quaternion')
            if values.size != 4:
                raise DimensionError(f"Quaternion needs 4 values, got {values.size}")
            self._data = values
        elif len(args) == 2 and is_scalar(args[1]):
            self._data = _axis_angle(as_values(args[0], 'axis'), float(args[1]))
        elif len(args) == 2:
            self._data = _between(as_values(args[0], 'u'), as_values(args[1], 'v'))
        else:
            raise TypeError(f"Quaternion() takes 0, 1, 2 or 4 arguments ({len(args)} given)")

    @classmethod
    def _from_array(cls, arr: NDArray[np.float64]) -> Quaternion:
        obj = cls.__new__(cls)
        obj._data = np.ascontiguousarray(arr, dtype=np.float64).reshape(4)
        return obj

    @classmethod
    def from_axis_angle(cls, axis: VectorBase, angle: float) -> Quaternion:
        return cls(axis, float(angle))

    @classmethod
    def from_vectors(cls, u: VectorBase, v: VectorBase) -> Quaternion:
        return cls(u, v)

    @classmethod
    def from_matrix(cls, A: MatrixBase) -> Quaternion:
        return cls(A)

    @property
    def array(self) -> NDArray[np.float64]:
        return self._data

    def size(self) -> int:
        return 4

    # === Rotation accessors ===

    def normalize(self) -> Quaternion:
        """Scale to unit norm in place. A zero quaternion is left unchanged."""
        n = self.norm()
        if n > 0.0:
            self._data /= n
        return self

    def conjugate(self) -> Quaternion:
        """(-x, -y, -z, w) as a new quaternion."""
        return Quaternion._from_array(self._data * np.array([-1.0, -1.0, -1.0, 1.0]))

    def axis(self) -> Vector3:
        """Unit rotation axis; the x axis when the rotation angle is zero."""
        q = self.copy().normalize()._data
        s = math.sqrt(max(0.0, 1.0 - q[3] * q[3]))
        if s < EPSILON:
            return Vector3(1.0, 0.0, 0.0)
        return Vector3._from_array(q[:3] / s)

    def angle(self) -> float:
        """Rotation angle in radians, in [0, 2 pi]."""
        q = self.copy().normalize()._data
        return 2.0 * math.acos(clip(q[3], -1.0, 1.0))

    def identity(self) -> Quaternion:
        self._data[...] = (0.0, 0.0, 0.0, 1.0)
        return self

    def rotate(self, u: VectorBase) -> Vector3:
        """u rotated by this quaternion, as a new Vector3."""
        return rotate(u, self)

    # === Hamilton product ===

    def __mul__(self, other: Any):
        if isinstance(other, Quaternion):
            return Quaternion._from_array(_hamilton(self._data, other._data))
        return super().__mul__(other)

    def __imul__(self, other: Any):
        if isinstance(other, Quaternion):
            self._data[...] = _hamilton(self._data, other._data)
            return self
        return super().__imul__(other)

    # === Conversions ===

    def to_matrix3(self) -> Matrix3:
        """3x3 rotation matrix of the normalized quaternion."""
        return Matrix3._from_array(_quaternion_to_matrix(self._data, 3))

    def to_matrix4(self) -> Matrix4:
        """4x4 homogeneous rotation matrix of the normalized quaternion."""
        return Matrix4._from_array(_quaternion_to_matrix(self._data, 4))

    def to_matrix_n(self) -> MatrixN:
        """4x4 MatrixN rotation."""
        return MatrixN._from_array(_quaternion_to_matrix(self._data, 4))

    def __str__(self) -> str:
        return format_row(self._data)

    def __repr__(self) -> str:
        x, y, z, w = (float(v) for v in self._data)
        return f"Quaternion({x!r}, {y!r}, {z!r}, {w!r})"


# =============================================================================
# Construction helpers
# =============================================================================


def _hamilton(q: NDArray[np.float64], r: NDArray[np.float64]) -> NDArray[np.float64]:
    v1, w1 = q[:3], q[3]
    v2, w2 = r[:3], r[3]
    out = np.empty(4)
    out[:3] = w1 * v2 + w2 * v1 + np.cross(v1, v2)
    out[3] = w1 * w2 - v1 @ v2
    return out


def _axis_angle(axis: NDArray[np.float64], angle: float) -> NDArray[np.float64]:
    if axis.size != 3:
        raise DimensionError(f"rotation axis needs 3 components, got {axis.size}")
    n = math.sqrt(float(axis @ axis))
    if n == 0.0:
        return np.array([0.0, 0.0, 0.0, 1.0])
    s = math.sin(angle / 2.0)
    out = np.empty(4)
    out[:3] = axis / n * s
    out[3] = math.cos(angle / 2.0)
    return out


def _between(u: NDArray[np.float64], v: NDArray[np.float64]) -> NDArray[np.float64]:
    if u.size != 3 or v.size != 3:
        raise DimensionError(f"rotation between vectors needs 3-vectors, got {u.size} and {v.size}")
    nu, nv = math.sqrt(float(u @ u)), math.sqrt(float(v @ v))
    if nu == 0.0 or nv == 0.0:
        return np.array([0.0, 0.0, 0.0, 1.0])
    a, b = u / nu, v / nv
    d = float(a @ b)
    if d >= 1.0 - EPSILON:
        return np.array([0.0, 0.0, 0.0, 1.0])
    if d <= -1.0 + EPSILON:
        # opposite vectors: half turn about any axis orthogonal to u
        helper = np.array([1.0, 0.0, 0.0]) if abs(a[0]) < 0.9 else np.array([0.0, 1.0, 0.0])
        return _axis_angle(np.cross(a, helper), math.pi)
    out = np.empty(4)
    out[:3] = np.cross(a, b)
    out[3] = 1.0 + d
    return out / math.sqrt(float(out @ out))


def _matrix_to_quaternion(a: NDArray[np.float64]) -> NDArray[np.float64]:
    if a.shape[0] < 3 or a.shape[1] < 3:
        raise DimensionError(f"rotation matrix must be at least 3x3, got {a.shape[0]}x{a.shape[1]}")
    d0, d1, d2 = a[0, 0], a[1, 1], a[2, 2]
    xx = 1.0 + d0 - d1 - d2
    yy = 1.0 - d0 + d1 - d2
    zz = 1.0 - d0 - d1 + d2
    rr = 1.0 + d0 + d1 + d2
    largest = max(rr, xx, yy, zz)

    q = np.empty(4)
    if rr == largest:
        r4 = math.sqrt(rr * 4.0)
        q[:] = ((a[2, 1] - a[1, 2]) / r4, (a[0, 2] - a[2, 0]) / r4,
                (a[1, 0] - a[0, 1]) / r4, r4 / 4.0)
    elif xx == largest:
        x4 = math.sqrt(xx * 4.0)
        q[:] = (x4 / 4.0, (a[0, 1] + a[1, 0]) / x4,
                (a[0, 2] + a[2, 0]) / x4, (a[2, 1] - a[1, 2]) / x4)
    elif yy == largest:
        y4 = math.sqrt(yy * 4.0)
        q[:] = ((a[0, 1] + a[1, 0]) / y4, y4 / 4.0,
                (a[1, 2] + a[2, 1]) / y4, (a[0, 2] - a[2, 0]) / y4)
    else:
        z4 = math.sqrt(zz * 4.0)
        q[:] = ((a[0, 2] + a[2, 0]) / z4, (a[1, 2] + a[2, 1]) / z4,
                z4 / 4.0, (a[1, 0] - a[0, 1]) / z4)
    return q


def _quaternion_to_matrix(q: NDArray[np.float64], n: int) -> NDArray[np.float64]:
    norm = math.sqrt(float(q @ q))
    x, y, z, w = q / norm if norm > 0.0 else q

    r = np.zeros((n, n))
    r[0, 0] = w * w + x * x - y * y - z * z
    r[1, 0] = 2 * x * y + 2 * w * z
    r[2, 0] = 2 * x * z - 2 * w * y

    r[0, 1] = 2 * x * y - 2 * w * z
    r[1, 1] = w * w - x * x + y * y - z * z
    r[2, 1] = 2 * y * z + 2 * w * x

    r[0, 2] = 2 * x * z + 2 * w * y
    r[1, 2] = 2 * y * z - 2 * w * x
    r[2, 2] = w * w - x * x - y * y + z * z

    if n > 3:
        r[3, 3] = w * w + x * x + y * y + z * z
    return r


# =============================================================================
# Free functions
# =============================================================================


def inverse(q: Quaternion) -> Quaternion:
    """Multiplicative inverse: conjugate(q) / |q|^2."""
    return q.conjugate() / q.norm2()


def distance(q: Quaternion, r: Quaternion) -> float:
    """
    Distance between the rotations q and r.

    q and -q encode the same rotation, so this is the smaller of
    |q - r| and |q + r| on the normalized quaternions.
    """
    a = q.copy().normalize().array
    b = r.copy().normalize().array
    return float(min(np.linalg.norm(a - b), np.linalg.norm(a + b)))


def slerp(q: Quaternion, r: Quaternion, t: float) -> Quaternion:
    """
    Spherical linear interpolation from q (t = 0) to r (t = 1).

    Takes the shorter arc; falls back to normalized linear interpolation
    when the two rotations are nearly identical.
    """
    a = q.copy().normalize().array
    b = r.copy().normalize().array
    cos_omega = float(a @ b)
    if cos_omega < 0.0:
        b = -b
        cos_omega = -cos_omega

    if cos_omega > 1.0 - EPSILON:
        out = (1.0 - t) * a + t * b
        return Quaternion._from_array(out).normalize()

    omega = math.acos(clip(cos_omega, -1.0, 1.0))
    sin_omega = math.sin(omega)
    out = (math.sin((1.0 - t) * omega) * a + math.sin(t * omega) * b) / sin_omega
    return Quaternion._from_array(out)


def rotate(u: VectorBase, q: Quaternion) -> Vector3:
    """u rotated by q (q v q*, with q normalized), as a new Vector3."""
    if u.size() != 3:
        raise DimensionError(f"rotate needs a 3-vector, got size {u.size()}")
    unit = q.copy().normalize().array
    p = np.append(u.array, 0.0)
    conj = unit * np.array([-1.0, -1.0, -1.0, 1.0])
    out = _hamilton(_hamilton(unit, p), conj)
    return Vector3._from_array(out[:3])


def rotate_in_place(u: VectorBase, q: Quaternion) -> VectorBase:
    """Rotate u by q, overwriting u. Returns u."""
    u.array[...] = rotate(u, q).array
    return u


def euler_angles(q: Quaternion) -> tuple[float, float, float]:
    """(phi, theta, psi) of the rotation, same convention as the matrix version."""
    return _matrix_euler_angles(q.to_matrix3())
