"""
Shared behaviour of the dense value types.

Every vector, matrix and quaternion stores float64 elements in a
row-major NumPy buffer exposed through `array`. This base class supplies
what is identical across them: element access with always-checked
bounds, norms, in-place and binary element-wise arithmetic, exact
equality and text rendering.

Values are mutable and therefore unhashable. Every operation that
produces a new value copies; no value references another's storage.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.validation import check_index


def is_scalar(k: Any) -> bool:
    """True for real numbers (Python or NumPy), False for bools."""
    return isinstance(k, numbers.Real) and not isinstance(k, (bool, np.bool_))


def as_values(obj: Any, name: str) -> NDArray[np.float64]:
    """Flatten a dense value, ndarray or sequence into a new float64 array."""
    if isinstance(obj, DenseValue):
        return obj.array.astype(np.float64, copy=True).reshape(-1)
    try:
        arr = np.array(obj, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise TypeError(f"{name}: cannot interpret {type(obj).__name__} as numeric values: {e}") from e
    return arr.reshape(-1)


class DenseValue:
    """Base class for value types backed by a float64 NumPy buffer."""

    __slots__ = ()

    # Make NumPy defer to our reflected operators (k * A, ndarray + A)
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    @property
    def array(self) -> NDArray[np.float64]:
        """Live row-major view of the elements."""
        raise NotImplementedError

    @classmethod
    def _from_array(cls, arr: NDArray[np.float64]) -> DenseValue:
        """Wrap an already-owned array without copying."""
        raise NotImplementedError

    # === Shape ===

    def size(self) -> int:
        """Number of elements."""
        return int(self.array.size)

    def _flat(self) -> NDArray[np.float64]:
        return self.array.reshape(-1)

    def _view2d(self) -> NDArray[np.float64]:
        arr = self.array
        return arr if arr.ndim == 2 else arr.reshape(-1, 1)

    # === Norms ===

    def norm2(self) -> float:
        """Squared Euclidean (Frobenius for matrices) norm."""
        flat = self._flat()
        return float(flat @ flat)

    def norm(self) -> float:
        """Euclidean (Frobenius for matrices) norm."""
        return math.sqrt(self.norm2())

    # === Lifecycle ===

    def clear(self):
        """Zero every element in place."""
        self.array.fill(0.0)
        return self

    def copy(self):
        """Independent copy of the same type."""
        return self._from_array(self.array.copy())

    def tolist(self) -> list:
        return self.array.tolist()

    # === Element access ===

    def _locate(self, index: Any) -> tuple[NDArray[np.float64], Any]:
        if isinstance(index, tuple):
            if len(index) != 2:
                raise IndexError(f"expected (row, col) pair, got {len(index)} indices")
            view = self._view2d()
            i = check_index(index[0], view.shape[0], 'row')
            j = check_index(index[1], view.shape[1], 'col')
            return view, (i, j)
        if isinstance(index, numbers.Integral):
            flat = self._flat()
            return flat, check_index(index, flat.size, 'index')
        raise TypeError(
            f"{type(self).__name__} indices must be integers or (row, col) pairs, "
            f"not {type(index).__name__}"
        )

    def __getitem__(self, index: Any) -> float:
        buf, key = self._locate(index)
        return float(buf[key])

    def __setitem__(self, index: Any, value: float) -> None:
        buf, key = self._locate(index)
        buf[key] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._flat().tolist())

    # === Arithmetic ===

    def _check_operand(self, other: Any, op: str) -> bool:
        if not isinstance(other, DenseValue):
            return False
        if other.array.shape != self.array.shape:
            raise DimensionError(
                f"{type(self).__name__} {op} {type(other).__name__}: "
                f"shape {self.array.shape} does not match {other.array.shape}"
            )
        return True

    def __iadd__(self, other: Any):
        if not self._check_operand(other, '+='):
            return NotImplemented
        self.array[...] += other.array
        return self

    def __isub__(self, other: Any):
        if not self._check_operand(other, '-='):
            return NotImplemented
        self.array[...] -= other.array
        return self

    def __imul__(self, k: Any):
        if not is_scalar(k):
            return NotImplemented
        self.array[...] *= k
        return self

    def __itruediv__(self, k: Any):
        if not is_scalar(k):
            return NotImplemented
        self.array[...] /= k
        return self

    def __add__(self, other: Any):
        if not self._check_operand(other, '+'):
            return NotImplemented
        return self._from_array(self.array + other.array)

    def __sub__(self, other: Any):
        if not self._check_operand(other, '-'):
            return NotImplemented
        return self._from_array(self.array - other.array)

    def __neg__(self):
        return self._from_array(-self.array)

    def __mul__(self, k: Any):
        if not is_scalar(k):
            return NotImplemented
        return self._from_array(self.array * k)

    def __rmul__(self, k: Any):
        if not is_scalar(k):
            return NotImplemented
        return self._from_array(k * self.array)

    def __truediv__(self, k: Any):
        if not is_scalar(k):
            return NotImplemented
        return self._from_array(self.array / k)

    # === Comparison ===

    def __eq__(self, other: Any) -> bool:
        """Exact element-wise equality; types and shapes must match."""
        if not isinstance(other, DenseValue):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return bool(np.array_equal(self.array, other.array))

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result
