"""
Tridiagonal solve (Thomas algorithm).
"""

from typing import Any

import numpy as np

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.result import Result, Status, report
from pylinalg.elimination._common import live_view, rhs_view
from pylinalg.elimination.solution import TridiagonalParams


def tridiagonal(A: Any, B: Any) -> Result[TridiagonalParams]:
    """
    Solve a tridiagonal system in linear time.

    The bands are packed one row per equation: ``A[i, 0]`` is the
    sub-diagonal, ``A[i, 1]`` the main diagonal and ``A[i, 2]`` the
    super-diagonal entry of row i (``A[0, 0]`` and ``A[n-1, 2]`` are
    ignored).

    Forward elimination stores the scaled super-diagonal coefficients in
    ``A[:, 2]``; back substitution then overwrites B with the solution.

    Args:
        A: n x 3 band matrix, partly overwritten
        B: Right-hand side of size n (or n x m), overwritten with X

    Returns:
        Result with TridiagonalParams(solution=B). A zero leading diagonal
        entry or a zero pivot during elimination gives status SINGULAR.

    Example:
        >>> A = MatrixN([[-1, 2, -1]] * 4)
        >>> tridiagonal(A, VectorN([1, 0, 0, 1])).params.solution
        VectorN(1.0, 1.0, 1.0, 1.0)
    """
    a = live_view(A, 'A')
    if a.shape[1] != 3:
        raise DimensionError(f"A: expected n x 3 band matrix, got {a.shape[0]}x{a.shape[1]}")
    n = a.shape[0]
    r = rhs_view(B, n, 'B')

    params = TridiagonalParams(solution=B)
    info: dict[str, Any] = {'routine': 'tridiagonal', 'matrix_name': 'A'}

    def _singular(step: int, message: str) -> Result[TridiagonalParams]:
        info['step'] = step
        return Result(
            params=params, info=info, timing=None, backend_name='tridiagonal',
            status=Status.SINGULAR, code=step + 1, warnings=(report(message, stacklevel=4),),
        )

    if n == 0:
        return Result(params=params, info=info, timing=None, backend_name='tridiagonal')

    bet = a[0, 1]
    if bet == 0.0:
        return _singular(0, "tridiagonal: zero leading diagonal entry")
    r[0] /= bet

    for j in range(1, n):
        # gam_j lives in the super-diagonal slot of the previous row
        a[j - 1, 2] /= bet
        bet = a[j, 1] - a[j, 0] * a[j - 1, 2]
        if bet == 0.0:
            return _singular(j, f"tridiagonal: zero pivot in row {j}")
        r[j] = (r[j] - a[j, 0] * r[j - 1]) / bet

    for j in range(n - 2, -1, -1):
        r[j] -= a[j, 2] * r[j + 1]

    return Result(params=params, info=info, timing=None, backend_name='tridiagonal')
