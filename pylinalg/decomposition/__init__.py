"""
Dense matrix factorizations backed by LAPACK.

Public API:
    lu(A) -> Result[LUParams]
    lu_solve(factors, B) -> Result[SolveParams]
    determinant(A) -> float
    qr(A, economy=False) -> Result[QRParams]
    rq(A, economy=False) -> Result[RQParams]
    cholesky(A) -> Result[CholeskyParams]
    cholesky_solve(A, B) -> Result[SolveParams]
    svd(A, economy=False, S=None) -> Result[SVDParams]
    symmetric_eigen(A) -> Result[EigenParams]

Inputs are never modified. Outputs are row-major MatrixN / VectorN
values.

Example:
    >>> from pylinalg.decomposition import qr
    >>> result = qr(A, economy=True)
    >>> Q, R = result.params.Q, result.params.R
"""

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
from pylinalg.decomposition.solvers import (
    cholesky,
    cholesky_solve,
    determinant,
    lu,
    lu_solve,
    qr,
    rq,
    svd,
    symmetric_eigen,
)

__all__ = [
    "lu",
    "lu_solve",
    "determinant",
    "qr",
    "rq",
    "cholesky",
    "cholesky_solve",
    "svd",
    "symmetric_eigen",
    "MatrixDesign",
    "LUParams",
    "QRParams",
    "RQParams",
    "CholeskyParams",
    "SVDParams",
    "EigenParams",
    "SolveParams",
]
