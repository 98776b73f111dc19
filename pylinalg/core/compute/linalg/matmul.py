"""
Matrix-multiply kernel.

The single hot path behind every product operator, the normal equations
and decomposition post-processing. All three operands are row-major;
vectors take part as n x 1 columns.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import DimensionError


def as_matrix_view(x: Any, name: str) -> NDArray[np.float64]:
    """
    Live 2D view of a vector, matrix or ndarray operand.

    Vectors (1D storage) are viewed as n x 1 columns. The view shares
    memory with the operand so writes land in the caller's value.
    """
    arr = x.array if hasattr(x, 'array') else x
    if not isinstance(arr, np.ndarray):
        raise TypeError(f"{name}: expected a vector, matrix or ndarray, got {type(x).__name__}")
    if arr.ndim == 1:
        return arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise DimensionError(f"{name}: expected 1D or 2D storage, got {arr.ndim}D")
    return arr


def matrix_multiply(A: Any, B: Any, C: Any) -> None:
    """
    Compute C = A B into C's storage.

    Args:
        A: L x M operand
        B: M x N operand
        C: L x N destination, overwritten

    Raises:
        DimensionError: If the shapes are not compatible
        ValueError: If C shares memory with A or B
    """
    a = as_matrix_view(A, 'A')
    b = as_matrix_view(B, 'B')
    c = as_matrix_view(C, 'C')

    if a.shape[1] != b.shape[0]:
        raise DimensionError(
            f"matrix_multiply: A is {a.shape[0]}x{a.shape[1]} but B is "
            f"{b.shape[0]}x{b.shape[1]}"
        )
    if c.shape != (a.shape[0], b.shape[1]):
        raise DimensionError(
            f"matrix_multiply: C must be {a.shape[0]}x{b.shape[1]}, "
            f"got {c.shape[0]}x{c.shape[1]}"
        )
    if np.shares_memory(c, a) or np.shares_memory(c, b):
        raise ValueError("matrix_multiply: C must not alias A or B")

    np.matmul(a, b, out=c)


def multiply(A: Any, B: Any) -> NDArray[np.float64]:
    """Return A B as a new row-major array."""
    a = as_matrix_view(A, 'A')
    b = as_matrix_view(B, 'B')
    c = np.empty((a.shape[0], b.shape[1]), dtype=np.float64)
    matrix_multiply(a, b, c)
    return c
