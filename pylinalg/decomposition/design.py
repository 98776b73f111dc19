"""
Factorization input.

MatrixDesign validates a matrix once at the public boundary and holds a
private column-major copy for the native routines. The caller's value is
never touched by a factorization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.validation import check_2d, check_array, check_finite, check_square


@dataclass(frozen=True)
class MatrixDesign:
    """
    Validated factorization input.

    Construction:
        MatrixDesign.build(A)                  # any M x N matrix
        MatrixDesign.build(A, square=True)     # LU, Cholesky, eigen
    """
    _a: NDArray[np.float64]
    _name: str

    @classmethod
    def build(cls, A: Any, name: str = 'A', *, square: bool = False) -> MatrixDesign:
        """
        Validate A and take a column-major copy.

        Args:
            A: Matrix3, Matrix4, MatrixN, 2D ndarray or nested sequence
            name: Parameter name for error messages
            square: Require a square matrix

        Raises:
            ValidationError: If A is non-numeric or holds NaN/Inf
            DimensionError: If A is not 2D, is empty, or is not square
                when required
        """
        values = A.array if hasattr(A, 'array') else A
        a = check_array(values, name)
        if a.ndim == 1:
            raise DimensionError(f"{name}: expected a matrix, got a vector of size {a.size}")
        check_2d(a, name)
        if a.size == 0:
            raise DimensionError(f"{name}: cannot factorize an empty {a.shape[0]}x{a.shape[1]} matrix")
        check_finite(a, name)
        if square:
            check_square(a, name)
        return cls(_a=np.array(a, dtype=np.float64, order='F'), _name=name)

    @property
    def a(self) -> NDArray[np.float64]:
        """Column-major copy of the matrix; backends may overwrite it."""
        return self._a

    @property
    def name(self) -> str:
        return self._name

    @property
    def m(self) -> int:
        """Number of rows."""
        return int(self._a.shape[0])

    @property
    def n(self) -> int:
        """Number of columns."""
        return int(self._a.shape[1])

    @property
    def k(self) -> int:
        """min(m, n)."""
        return min(self.m, self.n)
