"""
Matrix value types.

Matrix3 and Matrix4 are fixed-size square matrices; MatrixN is an M x N
matrix backed by a growable buffer. All store elements row-major and are
addressable by linear index ``A[k]`` or by pair ``A[i, j]``.

Products use ``*`` (and ``@``):
    - matrix * matrix, with the fixed type kept when both sides agree
    - matrix * vector and vector * matrix (row vector on the left)
    - Matrix3 with Vector2 and Matrix4 with Vector3 act on homogeneous
      coordinates (w = 1) and divide by the resulting w when it is nonzero
    - ``A *= B`` replaces A with A * B

Conversions are explicit methods. Narrowing keeps the top-left block;
widening copies into the top-left block of an identity matrix.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.linalg.determinant import det3, det4, minor_det
from pylinalg.core.compute.linalg.matmul import multiply
from pylinalg.core.exceptions import DimensionError
from pylinalg.core.formatting import format_matrix
from pylinalg.core.scalar import EPSILON, clip
from pylinalg.core.validation import check_index
from pylinalg.types._dense import DenseValue, as_values, is_scalar
from pylinalg.types.vector import Vector2, Vector3, Vector4, VectorBase, VectorN


class MatrixBase(DenseValue):
    """Behaviour shared by every matrix variant."""

    __slots__ = ()

    def rows(self) -> int:
        return int(self.array.shape[0])

    def cols(self) -> int:
        return int(self.array.shape[1])

    def identity(self):
        """Set to the identity (ones on the main diagonal) in place."""
        self.array[...] = np.eye(self.rows(), self.cols())
        return self

    def transpose(self):
        """Transposed copy; the receiver is not modified."""
        return self._from_array(self.array.T.copy())

    def det(self) -> float:
        """Determinant (square matrices only)."""
        return det(self)

    def minor_det(self, r1: int, r2: int, r3: int, c1: int, c2: int, c3: int) -> float:
        """Determinant of the 3x3 sub-matrix on rows r1..r3 and columns c1..c3."""
        for r in (r1, r2, r3):
            check_index(r, self.rows(), 'row')
        for c in (c1, c2, c3):
            check_index(c, self.cols(), 'col')
        return minor_det(self.array, (r1, r2, r3), (c1, c2, c3))

    def inverse(self):
        """
        Inverse by Gauss-Jordan elimination.

        Raises:
            SingularMatrixError: If the matrix is singular
        """
        return inverse(self)

    # === Products ===

    def __mul__(self, other: Any):
        if is_scalar(other):
            return super().__mul__(other)
        if isinstance(other, DenseValue):
            return _product(self, other)
        return NotImplemented

    def __rmul__(self, other: Any):
        if is_scalar(other):
            return super().__rmul__(other)
        if isinstance(other, VectorBase):
            return _product(other, self)
        return NotImplemented

    def __matmul__(self, other: Any):
        if isinstance(other, DenseValue):
            return _product(self, other)
        return NotImplemented

    def __rmatmul__(self, other: Any):
        if isinstance(other, VectorBase):
            return _product(other, self)
        return NotImplemented

    def __imul__(self, other: Any):
        if is_scalar(other):
            return super().__imul__(other)
        if isinstance(other, MatrixBase):
            self._assign(multiply(self, other))
            return self
        if isinstance(other, DenseValue):
            raise TypeError(f"{type(self).__name__} *= {type(other).__name__} is not supported")
        return NotImplemented

    def _assign(self, values: NDArray[np.float64]) -> None:
        if values.shape != self.array.shape:
            raise DimensionError(
                f"{type(self).__name__} cannot hold a {values.shape[0]}x{values.shape[1]} result"
            )
        self.array[...] = values

    # === Conversions ===

    def _block(self, cls: type, n: int, strict: bool):
        a = self.array
        if strict and (a.shape[0] > n or a.shape[1] > n):
            raise DimensionError(
                f"{a.shape[0]}x{a.shape[1]} {type(self).__name__} does not fit in {cls.__name__}"
            )
        out = np.eye(n, dtype=np.float64)
        r, c = min(n, a.shape[0]), min(n, a.shape[1])
        out[:r, :c] = a[:r, :c]
        return cls._from_array(out)

    def to_matrix3(self, strict: bool = False) -> Matrix3:
        """Top-left 3x3 block, identity-padded."""
        return self._block(Matrix3, 3, strict)

    def to_matrix4(self, strict: bool = False) -> Matrix4:
        """Top-left 4x4 block, identity-padded."""
        return self._block(Matrix4, 4, strict)

    def to_matrix_n(self) -> MatrixN:
        """MatrixN copy with the same shape."""
        return MatrixN._from_array(self.array.copy())

    def __str__(self) -> str:
        return format_matrix(self.array)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.array.tolist()!r})"


class _FixedMatrix(MatrixBase):
    """Square matrix with a dimension fixed by the class."""

    __slots__ = ('_data',)
    _dim: int = 0

    def __init__(self, *args: Any):
        n = self._dim
        if len(args) == 0:
            self._data = np.zeros((n, n), dtype=np.float64)
        elif len(args) == 1:
            values = as_values(args[0], type(self).__name__)
            if values.size != n * n:
                raise DimensionError(
                    f"{type(self).__name__} needs {n * n} values, got {values.size}"
                )
            self._data = values.reshape(n, n)
        elif len(args) == n * n:
            self._data = np.array(args, dtype=np.float64).reshape(n, n)
        else:
            raise TypeError(
                f"{type(self).__name__}() takes 0, 1 or {n * n} arguments ({len(args)} given)"
            )

    @classmethod
    def _from_array(cls, arr: NDArray[np.float64]):
        obj = cls.__new__(cls)
        obj._data = np.ascontiguousarray(arr, dtype=np.float64).reshape(cls._dim, cls._dim)
        return obj

    @classmethod
    def eye(cls):
        """New identity matrix."""
        return cls().identity()

    @property
    def array(self) -> NDArray[np.float64]:
        return self._data

    def size(self) -> int:
        return self._dim * self._dim

    def rows(self) -> int:
        return self._dim

    def cols(self) -> int:
        return self._dim


class Matrix3(_FixedMatrix):
    """3x3 matrix."""

    __slots__ = ()
    _dim = 3


class Matrix4(_FixedMatrix):
    """4x4 (homogeneous transform) matrix."""

    __slots__ = ()
    _dim = 4

    def euler_angles(self) -> tuple[float, float, float]:
        """(phi, theta, psi) of the upper-left rotation block; see euler_angles()."""
        return euler_angles(self)


class MatrixN(MatrixBase):
    """
    M x N matrix with a resizable buffer.

    reserve() grows the capacity; resize() changes the logical shape and
    zero-fills. Prior contents are discarded whenever the buffer is
    reallocated.

    Constructors:
        MatrixN()                     0 x 0 matrix
        MatrixN(rows, cols)           zeros
        MatrixN(values, rows, cols)   first rows*cols values, row-major
        MatrixN(other)                copy of a matrix, vector (as a column),
                                      2D ndarray or nested sequence
        MatrixN(a00, ..., a22)        3x3 from 9 components
        MatrixN(a00, ..., a33)        4x4 from 16 components
    """

    __slots__ = ('_buffer', '_rows', '_cols')

    def __init__(self, *args: Any):
        if len(args) == 0:
            self._set_buffer(np.zeros(0, dtype=np.float64), 0, 0)
        elif len(args) == 2 and all(_is_count(a) for a in args):
            r, c = _shape(args[0], args[1])
            self._set_buffer(np.zeros(r * c, dtype=np.float64), r, c)
        elif len(args) == 3 and _is_count(args[1]) and _is_count(args[2]):
            r, c = _shape(args[1], args[2])
            values = as_values(args[0], 'MatrixN')
            if values.size < r * c:
                raise DimensionError(f"MatrixN: {r}x{c} needs {r * c} values, got {values.size}")
            self._set_buffer(values[:r * c].copy(), r, c)
        elif len(args) == 1:
            self._init_from(args[0])
        elif len(args) in (9, 16):
            n = 3 if len(args) == 9 else 4
            self._set_buffer(np.array(args, dtype=np.float64), n, n)
        else:
            raise TypeError(f"MatrixN() cannot be built from {len(args)} arguments")

    def _init_from(self, obj: Any) -> None:
        if isinstance(obj, DenseValue):
            a = obj._view2d()
        else:
            try:
                a = np.array(obj, dtype=np.float64)
            except (ValueError, TypeError) as e:
                raise TypeError(f"MatrixN: cannot interpret {type(obj).__name__}: {e}") from e
            if a.ndim == 1:
                a = a.reshape(-1, 1)
            elif a.ndim != 2:
                raise DimensionError(f"MatrixN: expected 1D or 2D data, got {a.ndim}D")
        self._set_buffer(a.astype(np.float64, copy=True).reshape(-1), a.shape[0], a.shape[1])

    def _set_buffer(self, buffer: NDArray[np.float64], rows: int, cols: int) -> None:
        self._buffer = buffer
        self._rows = rows
        self._cols = cols

    @classmethod
    def _from_array(cls, arr: NDArray[np.float64]) -> MatrixN:
        obj = cls.__new__(cls)
        a = np.ascontiguousarray(arr, dtype=np.float64)
        if a.ndim != 2:
            raise DimensionError(f"MatrixN: expected 2D data, got {a.ndim}D")
        obj._set_buffer(a.reshape(-1), a.shape[0], a.shape[1])
        return obj

    @property
    def array(self) -> NDArray[np.float64]:
        return self._buffer[:self._rows * self._cols].reshape(self._rows, self._cols)

    def size(self) -> int:
        return self._rows * self._cols

    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    def capacity(self) -> int:
        """Number of elements the buffer can hold without reallocating."""
        return int(self._buffer.size)

    def reserve(self, rows: int, cols: int) -> None:
        """
        Make room for rows x cols elements.

        The logical shape is unchanged. When the buffer has to grow, the
        prior contents are discarded (zeroed).
        """
        r, c = _shape(rows, cols)
        if r * c > self._buffer.size:
            self._buffer = np.zeros(r * c, dtype=np.float64)

    def resize(self, rows: int, cols: int) -> None:
        """Set the logical shape; every element becomes zero."""
        r, c = _shape(rows, cols)
        self.reserve(r, c)
        self._rows, self._cols = r, c
        self._buffer[:r * c] = 0.0

    def _assign(self, values: NDArray[np.float64]) -> None:
        if values.shape != (self._rows, self._cols):
            self.resize(values.shape[0], values.shape[1])
        self.array[...] = values

    def normalize_rows(self) -> MatrixN:
        """Scale every nonzero row to unit length in place."""
        a = self.array
        norms = np.sqrt(np.einsum('ij,ij->i', a, a))
        nonzero = norms > 0.0
        a[nonzero] /= norms[nonzero, np.newaxis]
        return self

    def _vector(self, cls: type, n: int, strict: bool):
        flat = self._flat()
        if strict and flat.size > n:
            raise DimensionError(f"{self._rows}x{self._cols} MatrixN does not fit in {cls.__name__}")
        out = np.zeros(n, dtype=np.float64)
        m = min(n, flat.size)
        out[:m] = flat[:m]
        return cls._from_array(out)

    def to_vector2(self, strict: bool = False) -> Vector2:
        """Vector2 from the first two elements in row-major order."""
        return self._vector(Vector2, 2, strict)

    def to_vector3(self, strict: bool = False) -> Vector3:
        """Vector3 from the first three elements in row-major order."""
        return self._vector(Vector3, 3, strict)

    def to_vector4(self, strict: bool = False) -> Vector4:
        """Vector4 from the first four elements in row-major order."""
        return self._vector(Vector4, 4, strict)

    def to_vector_n(self) -> VectorN:
        """VectorN of every element in row-major order."""
        return VectorN._from_array(self._flat().copy())


def _is_count(x: Any) -> bool:
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def _shape(rows: int, cols: int) -> tuple[int, int]:
    r, c = int(rows), int(cols)
    if r < 0 or c < 0:
        raise ValueError(f"matrix shape must be non-negative, got {r}x{c}")
    return r, c


# =============================================================================
# Products
# =============================================================================


def _homogeneous(a: NDArray[np.float64], v: NDArray[np.float64], row: bool) -> NDArray[np.float64]:
    h = np.append(v, 1.0)
    r = h @ a if row else a @ h
    w = r[-1]
    return r[:-1] / w if w != 0.0 else r[:-1]


def _product(left: DenseValue, right: DenseValue) -> DenseValue:
    if isinstance(left, MatrixBase) and isinstance(right, MatrixBase):
        values = multiply(left, right)
        if type(left) is type(right) and isinstance(left, _FixedMatrix):
            return type(left)._from_array(values)
        return MatrixN._from_array(values)

    if isinstance(left, MatrixBase) and isinstance(right, VectorBase):
        a, v = left.array, right.array
        if isinstance(left, _FixedMatrix) and type(right) is not VectorN:
            if right.size() == left._dim:
                return type(right)._from_array(a @ v)
            if right.size() == left._dim - 1:
                return type(right)._from_array(_homogeneous(a, v, row=False))
        if left.cols() != right.size():
            raise DimensionError(
                f"{left.rows()}x{left.cols()} matrix times vector of size {right.size()}"
            )
        return VectorN._from_array(multiply(left, right).reshape(-1))

    if isinstance(left, VectorBase) and isinstance(right, MatrixBase):
        v, a = left.array, right.array
        if isinstance(right, _FixedMatrix) and type(left) is not VectorN:
            if left.size() == right._dim:
                return type(left)._from_array(v @ a)
            if left.size() == right._dim - 1:
                return type(left)._from_array(_homogeneous(a, v, row=True))
        if left.size() != right.rows():
            raise DimensionError(
                f"vector of size {left.size()} times {right.rows()}x{right.cols()} matrix"
            )
        return VectorN._from_array(v @ a)

    raise TypeError(f"unsupported product {type(left).__name__} * {type(right).__name__}")


# =============================================================================
# Free functions
# =============================================================================


def det(A: MatrixBase) -> float:
    """
    Determinant of a square matrix.

    Cofactor expansion up to 4x4; LU factorization beyond.

    Raises:
        DimensionError: If A is not square
    """
    n = A.rows()
    if A.cols() != n:
        raise DimensionError(f"determinant needs a square matrix, got {n}x{A.cols()}")
    a = A.array
    if n == 0:
        return 1.0
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])
    if n == 3:
        return det3(a)
    if n == 4:
        return det4(a)
    from pylinalg.decomposition.solvers import determinant
    return determinant(A)


def inverse(A: MatrixBase):
    """
    Inverse of a square matrix, same type as A.

    Raises:
        SingularMatrixError: If A is singular
    """
    from pylinalg.elimination import inverse as gj_inverse
    return gj_inverse(A)


def outer_product(u: VectorBase, v: VectorBase) -> MatrixBase:
    """u v^T; Matrix3 for two Vector3, Matrix4 for two Vector4, else MatrixN."""
    values = np.outer(u.array, v.array)
    if type(u) is Vector3 and type(v) is Vector3:
        return Matrix3._from_array(values)
    if type(u) is Vector4 and type(v) is Vector4:
        return Matrix4._from_array(values)
    return MatrixN._from_array(values)


def copy_block(
    A: MatrixBase, x1: int, y1: int, w: int, h: int,
    B: MatrixBase, x2: int, y2: int,
) -> None:
    """
    Copy the w x h block of A at column x1, row y1 into B at column x2, row y2.

    Raises:
        IndexError: If either block falls outside its matrix
    """
    if w < 0 or h < 0:
        raise ValueError(f"block size must be non-negative, got {w}x{h}")
    for name, M, x, y in (('A', A, x1, y1), ('B', B, x2, y2)):
        if x < 0 or y < 0 or x + w > M.cols() or y + h > M.rows():
            raise IndexError(
                f"{name}: block {w}x{h} at ({x}, {y}) exceeds {M.rows()}x{M.cols()}"
            )
    B.array[y2:y2 + h, x2:x2 + w] = A.array[y1:y1 + h, x1:x1 + w]


def euler_angles(A: MatrixBase) -> tuple[float, float, float]:
    """
    Euler angles (phi, theta, psi) of the upper-left 3x3 rotation block.

    The rotation is taken as R = Rz(psi) Ry(theta) Rx(phi). At gimbal lock
    (|cos theta| < EPSILON) psi is set to zero and phi absorbs the rotation.
    """
    if A.rows() < 3 or A.cols() < 3:
        raise DimensionError(f"euler_angles needs at least 3x3, got {A.rows()}x{A.cols()}")
    r = A.array
    theta = math.asin(clip(-r[2, 0], -1.0, 1.0))
    if abs(math.cos(theta)) > EPSILON:
        phi = math.atan2(r[2, 1], r[2, 2])
        psi = math.atan2(r[1, 0], r[0, 0])
    else:
        phi = math.atan2(-r[1, 2], r[1, 1])
        psi = 0.0
    return phi, theta, psi
