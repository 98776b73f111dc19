"""
Gauss-Jordan elimination with full pivoting and Gaussian elimination
with partial pivoting.

Both are implemented directly on the caller's buffers; no LAPACK call is
involved. A zero pivot is reported (Status.SINGULAR plus a
NumericalWarning) and the computation stops there, leaving the outputs
partially reduced.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.result import Result, Status, report
from pylinalg.elimination._common import rhs_view, solution_container, square_view
from pylinalg.elimination.solution import EliminationParams, GaussJordanParams


def _gauss_jordan_inplace(a: NDArray[np.float64], x: NDArray[np.float64]) -> int | None:
    """
    Invert a in place while reducing x to the solution of a x = b.

    Returns:
        None on success, else the 0-based step at which no nonzero pivot
        remained
    """
    n = a.shape[0]
    used = np.zeros(n, dtype=bool)
    row_of = np.zeros(n, dtype=np.intp)
    col_of = np.zeros(n, dtype=np.intp)

    for step in range(n):
        # Full pivoting: largest |a| over rows and columns not yet used.
        # argmax returns the first maximum in row-major order.
        free = np.flatnonzero(~used)
        block = np.abs(a[np.ix_(free, free)])
        k = int(np.argmax(block))
        irow, icol = free[k // free.size], free[k % free.size]
        if block.flat[k] == 0.0:
            return step

        used[icol] = True
        if irow != icol:
            a[[irow, icol]] = a[[icol, irow]]
            x[[irow, icol]] = x[[icol, irow]]
        row_of[step] = irow
        col_of[step] = icol

        pivinv = 1.0 / a[icol, icol]
        a[icol, icol] = 1.0
        a[icol] *= pivinv
        x[icol] *= pivinv

        others = np.arange(n) != icol
        factors = a[others, icol].copy()
        a[others, icol] = 0.0
        a[others] -= np.outer(factors, a[icol])
        x[others] -= np.outer(factors, x[icol])

    # Undo the column interchanges in reverse order
    for step in range(n - 1, -1, -1):
        r, c = row_of[step], col_of[step]
        if r != c:
            a[:, [r, c]] = a[:, [c, r]]
    return None


def gauss_jordan(A: Any, B: Any, X: Any = None) -> Result[GaussJordanParams]:
    """
    Solve A X = B by Gauss-Jordan elimination with full pivoting.

    A is destroyed: it is replaced by its inverse. B is left untouched.

    Args:
        A: Square n x n matrix (Matrix3, Matrix4, MatrixN or float64 ndarray),
           overwritten with A^-1
        B: Right-hand side, a vector of size n or an n x m matrix
        X: Container for the solution, same shape as B; a copy of B is
           allocated when None

    Returns:
        Result with GaussJordanParams(inverse=A, solution=X). On a
        singular A the status is SINGULAR and both are partial.

    Example:
        >>> A = MatrixN([[2, 1], [1, 3]])
        >>> gauss_jordan(A, VectorN(3, 5)).params.solution
        VectorN(0.8, 1.4)
    """
    return _gauss_jordan(A, B, X)


def _gauss_jordan(A: Any, B: Any, X: Any) -> Result[GaussJordanParams]:
    """Gauss-Jordan solve for a public entry point one frame above."""
    a = square_view(A, 'A')
    b = rhs_view(B, a.shape[0], 'B')
    X, x = solution_container(B, X, b.shape)
    if x is not b:
        x[...] = b

    step = _gauss_jordan_inplace(a, x)
    params = GaussJordanParams(inverse=A, solution=X)
    info: dict[str, Any] = {'routine': 'gauss_jordan', 'pivoting': 'full'}

    if step is not None:
        info.update(step=step, matrix_name='A')
        message = report(f"gauss_jordan: singular matrix, no nonzero pivot at step {step}", stacklevel=4)
        return Result(
            params=params, info=info, timing=None, backend_name='gauss_jordan',
            status=Status.SINGULAR, code=step + 1, warnings=(message,),
        )
    return Result(params=params, info=info, timing=None, backend_name='gauss_jordan')


def gaussian_elimination(A: Any, B: Any, X: Any = None) -> Result[EliminationParams]:
    """
    Solve A X = B by Gaussian elimination with partial pivoting and back
    substitution.

    A is reduced in place to upper-triangular form; the rows of B are
    interchanged and eliminated alongside it.

    Args:
        A: Square n x n float64 matrix, overwritten
        B: Right-hand side (vector of size n or n x m matrix), overwritten
        X: Container for the solution; allocated like B when None

    Returns:
        Result with EliminationParams(reduced=A, solution=X). A zero
        diagonal element after the row interchange gives status SINGULAR.
    """
    a = square_view(A, 'A')
    n = a.shape[0]
    b = rhs_view(B, n, 'B')
    X, x = solution_container(B, X, b.shape)

    params = EliminationParams(reduced=A, solution=X)
    info: dict[str, Any] = {'routine': 'gaussian_elimination', 'pivoting': 'partial'}

    for i in range(n):
        # First row holding the strictly largest |a| in column i
        p = i + int(np.argmax(np.abs(a[i:, i])))
        if p != i:
            a[[i, p]] = a[[p, i]]
            b[[i, p]] = b[[p, i]]
        if a[i, i] == 0.0:
            info.update(step=i, matrix_name='A')
            message = report(f"gaussian_elimination: singular matrix, zero pivot in column {i}")
            return Result(
                params=params, info=info, timing=None, backend_name='gaussian_elimination',
                status=Status.SINGULAR, code=i + 1, warnings=(message,),
            )
        factors = a[i + 1:, i] / a[i, i]
        a[i + 1:, i:] -= np.outer(factors, a[i, i:])
        b[i + 1:] -= np.outer(factors, b[i])

    for i in range(n - 1, -1, -1):
        x[i] = (b[i] - a[i, i + 1:] @ x[i + 1:]) / a[i, i]

    return Result(params=params, info=info, timing=None, backend_name='gaussian_elimination')


def inverse(A: Any) -> Any:
    """
    Inverse of a square matrix, as a new value of the same type.

    Raises:
        SingularMatrixError: If A is singular
    """
    inv = A.copy()
    a = square_view(inv, 'A')
    x = np.zeros((a.shape[0], 0))
    step = _gauss_jordan_inplace(a, x)
    if step is not None:
        raise SingularMatrixError(
            f"matrix is singular: no nonzero pivot at step {step}",
            matrix_name='A',
            step=step,
        )
    return inv
