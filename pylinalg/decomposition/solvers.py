"""
Public entry points for the factorization layer.

Each function validates its input into a MatrixDesign, hands it to the
matching LAPACK backend and reports any non-success status as a
NumericalWarning. Nothing here raises on a numerical failure; call
``result.raise_for_status()`` to turn one into an exception.
"""

from dataclasses import replace
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.result import Result, Status, report
from pylinalg.core.validation import check_1d, check_array, check_finite
from pylinalg.decomposition.backends.lapack import (
    CholeskyBackend,
    LUBackend,
    QRBackend,
    RQBackend,
    SVDBackend,
    SymmetricEigenBackend,
    cholesky_substitute,
    lu_substitute,
    translate_info,
)
from pylinalg.decomposition.design import MatrixDesign
from pylinalg.decomposition.solution import (
    CholeskyParams,
    EigenParams,
    LUParams,
    QRParams,
    RQParams,
    SolveParams,
    SVDParams,
)
from pylinalg.types._dense import DenseValue
from pylinalg.types.matrix import MatrixN


def _emit(result: Result[Any]) -> Result[Any]:
    """Report the diagnostics of a non-success result to the caller."""
    for message in result.warnings:
        report(message, stacklevel=4)
    return result


def _rhs(B: Any, n: int) -> NDArray[np.float64]:
    b = check_array(B.array if isinstance(B, DenseValue) else B, 'B')
    if b.ndim == 1:
        b = b.reshape(-1, 1)
    if b.ndim != 2 or b.shape[0] != n:
        raise DimensionError(f"B: expected {n} rows, got shape {b.shape}")
    check_finite(b, 'B')
    return b


def _like(B: Any, x: NDArray[np.float64]) -> Any:
    """Solution of the same kind and shape as B."""
    if isinstance(B, DenseValue):
        return type(B)._from_array(x.reshape(B.array.shape))
    return x.reshape(np.shape(B))


def _failed_solve(factors: Result[Any], routine: str) -> Result[SolveParams]:
    return Result(
        params=SolveParams(solution=None),
        info=dict(factors.info, routine=routine),
        timing=None,
        backend_name=factors.backend_name,
        status=factors.status,
        code=factors.code,
        warnings=factors.warnings,
    )


# =============================================================================
# LU
# =============================================================================


def lu(A: Any) -> Result[LUParams]:
    """
    LU factorization with partial pivoting, P A = L U.

    Args:
        A: Square matrix (not modified)

    Returns:
        Result with LUParams(lu, pivots, parity). A singular A still
        factorizes; the status is SINGULAR and U has a zero on its
        diagonal at info['step'].

    Example:
        >>> result = lu(Matrix3(0, 1, 0, 1, 0, 0, 0, 0, 1))
        >>> result.params.parity
        -1
    """
    design = MatrixDesign.build(A, square=True)
    return _emit(LUBackend().solve(design))


def lu_solve(factors: Result[LUParams] | LUParams, B: Any) -> Result[SolveParams]:
    """
    Solve A X = B from the output of lu(A).

    Args:
        factors: Result of lu(), or its LUParams
        B: Right-hand side (vector of size n or n x m matrix), not modified

    Returns:
        Result with SolveParams(solution) of the same kind as B. Factors
        from a failed factorization give that failure's status back.
    """
    if isinstance(factors, Result):
        if not factors.ok:
            return _emit(_failed_solve(factors, 'dgetrs'))
        factors = factors.params

    a = factors.lu.array
    n = a.shape[0]
    b = _rhs(B, n)
    x, code = lu_substitute(a, factors.pivots, b)

    status, message = translate_info(code, 'dgetrs')
    result = Result(
        params=SolveParams(solution=_like(B, x)),
        info={'routine': 'dgetrs', 'shape': (n, b.shape[1])},
        timing=None,
        backend_name='lapack_dgetrs',
        status=status,
        code=code,
        warnings=() if message is None else (message,),
    )
    return _emit(result)


def determinant(A: Any) -> float:
    """
    Determinant via LU: parity times the product of U's diagonal.

    Returns 0.0 for a singular matrix without reporting it.
    """
    design = MatrixDesign.build(A, square=True)
    result = LUBackend().solve(design)
    if result.status is Status.SINGULAR:
        return 0.0
    result.raise_for_status()
    params = result.params
    return float(params.parity * np.prod(np.diag(params.lu.array)))


# =============================================================================
# QR / RQ
# =============================================================================


def qr(A: Any, economy: bool = False, *, lwork: int | None = None) -> Result[QRParams]:
    """
    QR factorization A = Q R.

    Args:
        A: M x N matrix (not modified)
        economy: Keep only the first min(M, N) columns of Q (and rows of R)
        lwork: Workspace size; queried from LAPACK when None

    Returns:
        Result with QRParams(Q, R)
    """
    design = MatrixDesign.build(A)
    return _emit(QRBackend(economy=economy, lwork=lwork).solve(design))


def rq(A: Any, economy: bool = False, *, lwork: int | None = None) -> Result[RQParams]:
    """
    RQ factorization A = R Q.

    Args:
        A: M x N matrix (not modified)
        economy: Keep only the last min(M, N) rows of Q (and columns of R)
        lwork: Workspace size; queried from LAPACK when None

    Returns:
        Result with RQParams(R, Q)
    """
    design = MatrixDesign.build(A)
    return _emit(RQBackend(economy=economy, lwork=lwork).solve(design))


# =============================================================================
# Cholesky
# =============================================================================


def cholesky(A: Any) -> Result[CholeskyParams]:
    """
    Cholesky factorization A = U^T U of a symmetric positive definite matrix.

    Only the upper triangle of A is read. A matrix that is not positive
    definite gives status NOT_POSITIVE_DEFINITE with ``code`` set to the
    order of the failing leading minor.
    """
    design = MatrixDesign.build(A, square=True)
    return _emit(CholeskyBackend().solve(design))


def cholesky_solve(A: Any, B: Any) -> Result[SolveParams]:
    """
    Solve A X = B for symmetric positive definite A via Cholesky.

    Args:
        A: n x n symmetric positive definite matrix (not modified)
        B: Right-hand side (vector of size n or n x m matrix), not modified

    Returns:
        Result with SolveParams(solution) of the same kind as B
    """
    design = MatrixDesign.build(A, square=True)
    factors = CholeskyBackend().solve(design)
    if not factors.ok:
        return _emit(_failed_solve(factors, 'dpotrs'))

    n = design.n
    b = _rhs(B, n)
    x, code = cholesky_substitute(factors.params.U.array, b)

    status, message = translate_info(code, 'dpotrs', design.name)
    result = Result(
        params=SolveParams(solution=_like(B, x)),
        info={'routine': 'dpotrs', 'matrix_name': design.name, 'shape': (n, b.shape[1])},
        timing=factors.timing,
        backend_name='lapack_dpotrs',
        status=status,
        code=code,
        warnings=() if message is None else (message,),
    )
    return _emit(result)


# =============================================================================
# SVD
# =============================================================================


def svd(
    A: Any,
    economy: bool = False,
    S: Any = None,
    *,
    lwork: int | None = None,
) -> Result[SVDParams]:
    """
    Singular value decomposition A = U diag(S) V^T.

    Args:
        A: M x N matrix (not modified)
        economy: Compute only the first K = min(M, N) singular vectors
        S: Optional container (VectorN or 1D float64 ndarray) of size K
           that receives the singular values
        lwork: Workspace size; queried from LAPACK when None

    Returns:
        Result with SVDParams(U, S, V). A supplied S of the wrong size is
        reported as ILLEGAL_ARGUMENT and nothing is computed.

    Example:
        >>> result = svd(MatrixN([[3, 0], [0, -2]]))
        >>> result.params.S
        VectorN(3.0, 2.0)
    """
    design = MatrixDesign.build(A)
    backend = SVDBackend(economy=economy, lwork=lwork)

    s_view = None
    if S is not None:
        s_view = S.array if isinstance(S, DenseValue) else S
        if not isinstance(s_view, np.ndarray) or s_view.dtype != np.float64:
            raise ValidationError(f"S: expected a VectorN or float64 ndarray, got {type(S).__name__}")
        check_1d(s_view, 'S')
        if s_view.size != design.k:
            message = (
                f"dgesvd: S holds {s_view.size} values, expected min(M, N) = {design.k}"
            )
            return _emit(Result(
                params=SVDParams(U=MatrixN(), S=S, V=MatrixN()),
                info={'routine': 'dgesvd', 'matrix_name': design.name, 'argument': 'S'},
                timing=None,
                backend_name=backend.name,
                status=Status.ILLEGAL_ARGUMENT,
                code=-7,
                warnings=(message,),
            ))

    result = backend.solve(design)
    if s_view is not None and result.params.S.size() == s_view.size:
        s_view[...] = result.params.S.array
        result = replace(result, params=replace(result.params, S=S))
    return _emit(result)


# =============================================================================
# Symmetric eigendecomposition
# =============================================================================


def symmetric_eigen(A: Any, *, lwork: int | None = None) -> Result[EigenParams]:
    """
    Eigendecomposition of a symmetric matrix.

    Only the upper triangle of A is read.

    Returns:
        Result with EigenParams(values, vectors): values ascending,
        vectors[:, i] the unit eigenvector for values[i]
    """
    design = MatrixDesign.build(A, square=True)
    return _emit(SymmetricEigenBackend(lwork=lwork).solve(design))
