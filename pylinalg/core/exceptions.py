"""
Exception and warning hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error.

Numerical failures (singular matrix, non-positive-definite matrix,
non-convergence, illegal LAPACK argument) are NOT raised by the solvers
themselves. They are reported through a non-success Result status and a
NumericalWarning. Calling Result.raise_for_status() converts the status
into the matching exception below.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when operand shapes don't match expected dimensions or
    when multiple operands have inconsistent shapes.
    """
    pass


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class IllegalArgumentError(NumericalError):
    """
    LAPACK rejected one of its arguments.

    A negative status from a native routine means the call was packed
    incorrectly (dimension or leading-dimension mismatch, too-small
    workspace). Never retried.

    Attributes:
        routine: Name of the LAPACK routine
        argument: 1-based index of the offending argument
    """

    def __init__(
        self,
        message: str,
        routine: str | None = None,
        argument: int | None = None
    ):
        super().__init__(message)
        self.routine = routine
        self.argument = argument


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility but a zero
    pivot was met during elimination or factorization.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        step: Elimination step (0-based) at which the zero pivot appeared
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        step: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.step = step


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when an operation requires a positive definite matrix
    (e.g., Cholesky decomposition) but the matrix fails this requirement.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        order: Order of the leading minor that is not positive definite
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        order: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.order = order


class ConvergenceError(NumericalError):
    """
    Iterative algorithm failed to converge.

    Raised when the QR iteration inside SVD or the symmetric eigensolver
    fails to converge.

    Attributes:
        routine: Name of the LAPACK routine
        unconverged: Number of off-diagonal elements that did not converge
    """

    def __init__(
        self,
        message: str,
        routine: str | None = None,
        unconverged: int | None = None
    ):
        super().__init__(message)
        self.routine = routine
        self.unconverged = unconverged


class NumericalWarning(UserWarning):
    """Diagnostic emitted when a routine reports a non-success status."""
    pass
