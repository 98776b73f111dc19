"""
Linear least squares via the normal equations.

Solves the overdetermined system D x ~ b by forming (D^T D) x = D^T b
with the multiply kernel and handing the square system to Gauss-Jordan.
Squaring the condition number is accepted here; a rank-deficient D
shows up as a SINGULAR status from the elimination step.
"""

from typing import Any

import numpy as np

from pylinalg.core.compute.linalg.matmul import as_matrix_view, multiply
from pylinalg.core.result import Result
from pylinalg.core.validation import check_consistent_rows, check_finite
from pylinalg.elimination._gauss import _gauss_jordan
from pylinalg.elimination.solution import LeastSquaresParams
from pylinalg.types.matrix import MatrixBase, MatrixN
from pylinalg.types.vector import VectorN


def least_squares(D: Any, b: Any, X: Any = None) -> Result[LeastSquaresParams]:
    """
    Least-squares solution of D x ~ b.

    D and b are not modified.

    Args:
        D: m x n design matrix, m >= n for a unique solution
        b: Observations, a vector of size m (or an m x k matrix)
        X: Container for the solution (size n, or n x k); a new
           VectorN/MatrixN or ndarray matching b's kind when None

    Returns:
        Result with LeastSquaresParams(solution, normal_inverse). The
        status is that of the underlying Gauss-Jordan solve.
    """
    d = as_matrix_view(D, 'D')
    rhs = as_matrix_view(b, 'b')
    check_finite(d, 'D')
    check_finite(rhs, 'b')
    check_consistent_rows(d, rhs, names=('D', 'b'))

    dt = np.ascontiguousarray(d.T)
    normal = multiply(dt, d)
    projected = multiply(dt, rhs)

    if X is None:
        X = _like(b, projected)
    solved = _gauss_jordan(normal, projected, X)

    params = LeastSquaresParams(
        solution=solved.params.solution,
        normal_inverse=MatrixN._from_array(normal),
    )
    info = dict(solved.info, routine='least_squares', rows=d.shape[0], cols=d.shape[1])
    return Result(
        params=params,
        info=info,
        timing=None,
        backend_name='normal_equations',
        status=solved.status,
        code=solved.code,
        warnings=solved.warnings,
    )


def _like(b: Any, values: np.ndarray) -> Any:
    """Zeroed container for the solution, of the same kind as b."""
    if isinstance(b, np.ndarray):
        return np.zeros(values.shape if b.ndim == 2 else values.shape[0])
    if isinstance(b, MatrixBase):
        return MatrixN(values.shape[0], values.shape[1])
    return VectorN(values.shape[0])
