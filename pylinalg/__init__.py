"""
pylinalg: dense linear algebra for Python.

Fixed- and variable-size vectors and matrices, quaternions, elimination
solvers and LAPACK-backed factorizations, all reporting numerical
failure through a Result status.

Submodules:
    types: Vector2/3/4/N, Matrix3/4/N, Quaternion, row/column accessors
    elimination: Gauss-Jordan, Gaussian elimination, tridiagonal,
        least squares, polynomial roots
    decomposition: LU, QR, RQ, Cholesky, SVD, symmetric eigen
    core: Result, exceptions, validation, scalar helpers, kernel
"""

__version__ = "0.1.0"

from pylinalg.core import (
    Result,
    Status,
    PyLinalgError,
    ValidationError,
    DimensionError,
    NumericalError,
    IllegalArgumentError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceError,
    NumericalWarning,
)
from pylinalg.core.compute.linalg import matrix_multiply
from pylinalg.types import (
    Vector2,
    Vector3,
    Vector4,
    VectorN,
    Point2,
    Point3,
    Point4,
    PointN,
    Matrix3,
    Matrix4,
    MatrixN,
    Quaternion,
    get_row,
    set_row,
    get_col,
    set_col,
    get_diag,
    set_diag,
    swap_rows,
    swap_cols,
)
from pylinalg.elimination import (
    gauss_jordan,
    gaussian_elimination,
    tridiagonal,
    least_squares,
    solve_quadratic,
    solve_cubic,
)
from pylinalg.decomposition import (
    lu,
    lu_solve,
    determinant,
    qr,
    rq,
    cholesky,
    cholesky_solve,
    svd,
    symmetric_eigen,
)
from pylinalg import core, types, elimination, decomposition

__all__ = [
    "__version__",
    # Result and errors
    "Result",
    "Status",
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "IllegalArgumentError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
    "NumericalWarning",
    # Kernel
    "matrix_multiply",
    # Value types
    "Vector2",
    "Vector3",
    "Vector4",
    "VectorN",
    "Point2",
    "Point3",
    "Point4",
    "PointN",
    "Matrix3",
    "Matrix4",
    "MatrixN",
    "Quaternion",
    # Accessors
    "get_row",
    "set_row",
    "get_col",
    "set_col",
    "get_diag",
    "set_diag",
    "swap_rows",
    "swap_cols",
    # Elimination
    "gauss_jordan",
    "gaussian_elimination",
    "tridiagonal",
    "least_squares",
    "solve_quadratic",
    "solve_cubic",
    # Decomposition
    "lu",
    "lu_solve",
    "determinant",
    "qr",
    "rq",
    "cholesky",
    "cholesky_solve",
    "svd",
    "symmetric_eigen",
    # Submodules
    "core",
    "types",
    "elimination",
    "decomposition",
]
