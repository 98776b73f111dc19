"""
Core infrastructure for pylinalg.

This module provides the shared abstractions and utilities used by the
value types, the elimination solvers and the factorization layer.

Key components:
    protocols: VectorLike, MatrixLike, Backend protocols
    result: Generic Result[P] envelope and Status
    exceptions: Exception and warning hierarchy
    validation: Input validators
    scalar: Scalar helpers and constants
    formatting: Fixed-width text rendering
    compute: Precision, tolerances, timing, matrix-multiply kernel
"""

from pylinalg.core.protocols import Backend, MatrixLike, VectorLike
from pylinalg.core.result import Result, Status
from pylinalg.core.exceptions import (
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

__all__ = [
    # Protocols
    "Backend",
    "MatrixLike",
    "VectorLike",
    # Result
    "Result",
    "Status",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "IllegalArgumentError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
    "NumericalWarning",
]
