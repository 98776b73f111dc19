"""
Vector value types.

Vector2, Vector3 and Vector4 hold a fixed number of components;
VectorN owns a growable buffer whose logical size can change at run
time. All are column vectors: size() == rows() and cols() == 1.

Conversions between variants are explicit methods (to_vector2(),
to_vector3(), to_vector4(), to_vector_n(), to_matrix_n()):
    - widening zero-pads the trailing components
    - narrowing silently drops trailing components, unless strict=True,
      in which case a DimensionError is raised

Example:
    >>> u = Vector3(1, 2, 2)
    >>> u.norm()
    3.0
    >>> u.to_vector4()
    Vector4(1.0, 2.0, 2.0, 0.0)
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.linalg.determinant import minor_det
from pylinalg.core.exceptions import DimensionError
from pylinalg.core.formatting import format_row
from pylinalg.types._dense import DenseValue, as_values, is_scalar


class VectorBase(DenseValue):
    """Behaviour shared by every vector variant."""

    __slots__ = ()

    def rows(self) -> int:
        """Number of rows (== size())."""
        return self.size()

    def cols(self) -> int:
        """Number of columns (always 1)."""
        return 1

    def __len__(self) -> int:
        return self.size()

    def normalize(self):
        """Scale to unit length in place. A zero vector is left unchanged."""
        n = self.norm()
        if n > 0.0:
            self.array[...] /= n
        return self

    def transpose(self):
        """1 x n row matrix holding the components."""
        from pylinalg.types.matrix import MatrixN
        return MatrixN._from_array(self.array.copy().reshape(1, -1))

    def dot(self, other: VectorBase) -> float:
        return dot(self, other)

    # === Explicit conversions ===

    def _resized(self, cls: type, n: int, strict: bool):
        src = self.array
        if strict and src.size > n:
            raise DimensionError(
                f"{type(self).__name__} of size {src.size} does not fit in {cls.__name__}"
            )
        out = np.zeros(n, dtype=np.float64)
        m = min(n, src.size)
        out[:m] = src[:m]
        return cls._from_array(out)

    def to_vector2(self, strict: bool = False) -> Vector2:
        """Vector2 from the first two components (zero-padded)."""
        return self._resized(Vector2, 2, strict)

    def to_vector3(self, strict: bool = False) -> Vector3:
        """Vector3 from the first three components (zero-padded)."""
        return self._resized(Vector3, 3, strict)

    def to_vector4(self, strict: bool = False) -> Vector4:
        """Vector4 from the first four components (zero-padded)."""
        return self._resized(Vector4, 4, strict)

    def to_vector_n(self) -> VectorN:
        """VectorN of the same size."""
        return VectorN._from_array(self.array.copy())

    def to_matrix_n(self):
        """n x 1 column MatrixN."""
        from pylinalg.types.matrix import MatrixN
        return MatrixN._from_array(self.array.copy().reshape(-1, 1))

    # vector * matrix falls through to the matrix's __rmul__

    def __str__(self) -> str:
        return format_row(self.array)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(float(v)) for v in self.array)})"


class _FixedVector(VectorBase):
    """Vector with a dimension fixed by the class."""

    __slots__ = ('_data',)
    _dim: int = 0

    def __init__(self, *args: Any):
        if len(args) == 0:
            self._data = np.zeros(self._dim, dtype=np.float64)
        elif len(args) == 1:
            values = as_values(args[0], type(self).__name__)
            if values.size != self._dim:
                raise DimensionError(
                    f"{type(self).__name__} needs {self._dim} values, got {values.size}"
                )
            self._data = values
        elif len(args) == self._dim:
            self._data = np.array(args, dtype=np.float64)
        else:
            raise TypeError(
                f"{type(self).__name__}() takes 0, 1 or {self._dim} arguments ({len(args)} given)"
            )

    @classmethod
    def _from_array(cls, arr: NDArray[np.float64]):
        obj = cls.__new__(cls)
        obj._data = np.ascontiguousarray(arr, dtype=np.float64).reshape(cls._dim)
        return obj

    @property
    def array(self) -> NDArray[np.float64]:
        return self._data

    def size(self) -> int:
        return self._dim

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._data[0] = value

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._data[1] = value


class Vector2(_FixedVector):
    """2D vector."""

    __slots__ = ()
    _dim = 2


class Vector3(_FixedVector):
    """3D vector."""

    __slots__ = ()
    _dim = 3

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._data[2] = value

    def cross(self, other: VectorBase) -> Vector3:
        return cross(self, other)


class Vector4(_FixedVector):
    """4D (homogeneous) vector."""

    __slots__ = ()
    _dim = 4

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._data[2] = value

    @property
    def w(self) -> float:
        return float(self._data[3])

    @w.setter
    def w(self, value: float) -> None:
        self._data[3] = value


class VectorN(VectorBase):
    """
    Variable-size vector.

    Storage is an owned buffer with a capacity that may exceed the logical
    size. reserve() grows the capacity; resize() changes the logical size.
    Both discard prior contents when they reallocate, and resize() always
    zero-fills.

    Constructors:
        VectorN()                 empty vector
        VectorN(n)                n zeros
        VectorN(values)           copy of a sequence, ndarray or vector
        VectorN(values, n)        first n of values
        VectorN(a, b[, c[, d]])   2-, 3- or 4-component vector
    """

    __slots__ = ('_buffer', '_size')

    def __init__(self, *args: Any):
        if len(args) == 0:
            self._set_buffer(np.zeros(0, dtype=np.float64))
        elif len(args) == 1 and isinstance(args[0], numbers.Integral) and not isinstance(args[0], bool):
            n = int(args[0])
            if n < 0:
                raise ValueError(f"VectorN size must be non-negative, got {n}")
            self._set_buffer(np.zeros(n, dtype=np.float64))
        elif len(args) == 1:
            self._set_buffer(as_values(args[0], 'VectorN'))
        elif len(args) == 2 and not is_scalar(args[0]):
            values = as_values(args[0], 'VectorN')
            n = int(args[1])
            if n > values.size:
                raise DimensionError(f"VectorN: asked for {n} values, only {values.size} given")
            self._set_buffer(values[:n].copy())
        elif 2 <= len(args) <= 4:
            self._set_buffer(np.array(args, dtype=np.float64))
        else:
            raise TypeError(f"VectorN() takes 0 to 4 arguments ({len(args)} given)")

    def _set_buffer(self, buffer: NDArray[np.float64]) -> None:
        self._buffer = buffer
        self._size = buffer.size

    @classmethod
    def _from_array(cls, arr: NDArray[np.float64]) -> VectorN:
        obj = cls.__new__(cls)
        obj._set_buffer(np.ascontiguousarray(arr, dtype=np.float64).reshape(-1))
        return obj

    @property
    def array(self) -> NDArray[np.float64]:
        return self._buffer[:self._size]

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        """Number of elements the buffer can hold without reallocating."""
        return int(self._buffer.size)

    def reserve(self, n: int) -> None:
        """
        Make room for at least n elements.

        The logical size is unchanged. When the buffer has to grow, the
        prior contents are discarded (zeroed).
        """
        if n < 0:
            raise ValueError(f"capacity must be non-negative, got {n}")
        if n > self._buffer.size:
            self._buffer = np.zeros(n, dtype=np.float64)

    def resize(self, n: int) -> None:
        """Set the logical size to n; every element becomes zero."""
        if n < 0:
            raise ValueError(f"VectorN size must be non-negative, got {n}")
        self.reserve(n)
        self._size = n
        self._buffer[:n] = 0.0

    def cross(self, *others: VectorBase) -> VectorN:
        """3D cross product with one vector, or 4D cross product with two."""
        return cross(self, *others)


# Point types share the vector implementation
Point2 = Vector2
Point3 = Vector3
Point4 = Vector4
PointN = VectorN


def _check_same_size(*vectors: VectorBase) -> int:
    sizes = {v.size() for v in vectors}
    if len(sizes) != 1:
        raise DimensionError(f"vector sizes differ: {[v.size() for v in vectors]}")
    return sizes.pop()


def dot(u: VectorBase, v: VectorBase) -> float:
    """Dot product of two vectors of equal size."""
    _check_same_size(u, v)
    return float(u.array @ v.array)


def normalize(u: VectorBase) -> VectorBase:
    """Unit vector in the direction of u, as a new value."""
    return u.copy().normalize()


def _minor3(rows: NDArray[np.float64], skip: int) -> float:
    cols = [c for c in range(4) if c != skip]
    return minor_det(rows, (0, 1, 2), cols)


def cross(u: VectorBase, *others: VectorBase) -> VectorBase:
    """
    Cross product.

    cross(u, v) for 3-vectors; cross(u, v, w) for 4-vectors, returning the
    vector orthogonal to all three (r . x == det[u; v; w; x]). The result
    has the type of u.

    Raises:
        DimensionError: If the sizes do not match the arity
    """
    if len(others) == 1:
        v = others[0]
        if _check_same_size(u, v) != 3:
            raise DimensionError(f"cross(u, v) needs 3-vectors, got size {u.size()}")
        a, b = u.array, v.array
        out = np.array([
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ])
        return type(u)._from_array(out)

    if len(others) == 2:
        v, w = others
        if _check_same_size(u, v, w) != 4:
            raise DimensionError(f"cross(u, v, w) needs 4-vectors, got size {u.size()}")
        rows = np.vstack([u.array, v.array, w.array])
        out = np.array([(-1.0) ** (i + 1) * _minor3(rows, i) for i in range(4)])
        return type(u)._from_array(out)

    raise TypeError(f"cross() takes 2 or 3 vectors ({len(others) + 1} given)")
