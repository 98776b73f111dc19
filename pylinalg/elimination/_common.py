"""
Operand handling shared by the elimination solvers.

The solvers work on live 2D views of the caller's containers so that
in-place results land in the caller's values. Vectors take part as
n x 1 columns.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.linalg.matmul import as_matrix_view
from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import check_finite, check_shape


def live_view(obj: Any, name: str) -> NDArray[np.float64]:
    """2D float64 view of obj that writes through to obj."""
    view = as_matrix_view(obj, name)
    if view.dtype != np.float64:
        raise ValidationError(
            f"{name}: solved in place, so it must hold float64 values (got {view.dtype})"
        )
    check_finite(view, name)
    return view


def square_view(obj: Any, name: str) -> NDArray[np.float64]:
    view = live_view(obj, name)
    if view.shape[0] != view.shape[1]:
        raise DimensionError(
            f"{name}: expected square matrix, got {view.shape[0]}x{view.shape[1]}"
        )
    return view


def rhs_view(obj: Any, n: int, name: str) -> NDArray[np.float64]:
    view = live_view(obj, name)
    if view.shape[0] != n:
        raise DimensionError(f"{name}: expected {n} rows, got {view.shape[0]}")
    return view


def solution_container(B: Any, X: Any, shape: tuple[int, int]) -> tuple[Any, NDArray[np.float64]]:
    """
    Return (X, live view of X), allocating X like B when it is None.

    Raises:
        DimensionError: If a supplied X does not have the right shape
    """
    if X is None:
        X = B.copy()
    x = as_matrix_view(X, 'X')
    check_shape(x, shape, 'X')
    if x.dtype != np.float64:
        raise ValidationError(f"X: must hold float64 values (got {x.dtype})")
    return X, x
