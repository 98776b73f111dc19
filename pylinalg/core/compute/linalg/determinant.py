"""
Closed-form determinants for small matrices.

Cofactor expansion for 3x3 and 4x4 operands. Larger matrices go
through the LU factorization (pylinalg.decomposition.determinant).
"""

from typing import Sequence

import numpy as np
from numpy.typing import NDArray


def minor_det(
    a: NDArray[np.float64],
    rows: Sequence[int],
    cols: Sequence[int],
) -> float:
    """
    Determinant of the 3x3 sub-matrix picked out by three rows and columns.

    Args:
        a: 2D array
        rows: Three row indices (r1, r2, r3)
        cols: Three column indices (c1, c2, c3)
    """
    r1, r2, r3 = rows
    c1, c2, c3 = cols
    return float(
        a[r1, c1] * (a[r2, c2] * a[r3, c3] - a[r2, c3] * a[r3, c2])
        - a[r1, c2] * (a[r2, c1] * a[r3, c3] - a[r2, c3] * a[r3, c1])
        + a[r1, c3] * (a[r2, c1] * a[r3, c2] - a[r2, c2] * a[r3, c1])
    )


def det3(a: NDArray[np.float64]) -> float:
    """Determinant of a 3x3 array."""
    return minor_det(a, (0, 1, 2), (0, 1, 2))


def det4(a: NDArray[np.float64]) -> float:
    """Determinant of a 4x4 array, expanded along row 0."""
    total = 0.0
    for j in range(4):
        cols = [c for c in range(4) if c != j]
        sign = 1.0 if j % 2 == 0 else -1.0
        total += sign * a[0, j] * minor_det(a, (1, 2, 3), cols)
    return float(total)
