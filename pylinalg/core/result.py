"""
Generic result container for all pylinalg computations.

The Result class provides a standardized envelope that every solver and
decomposition returns. Numerical failures are carried as a Status rather
than raised, so callers branch on `result.ok` / `result.status` instead of
parsing diagnostics.

Design decisions:
    - Generic over parameter payload P for type safety
    - status + code carry the outcome; params may hold partial output
      when status is not SUCCESS and must not be trusted
    - info dict for flexible metadata (routine, step, workspace size)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True); the payload arrays themselves may be
      caller-owned buffers that were mutated in place
"""

import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar, Generic, Any

from pylinalg.core.exceptions import (
    ConvergenceError,
    IllegalArgumentError,
    NotPositiveDefiniteError,
    NumericalWarning,
    SingularMatrixError,
)

P = TypeVar('P')  # Parameter payload type


class Status(Enum):
    """Outcome of a solver or decomposition."""
    SUCCESS = 'success'
    ILLEGAL_ARGUMENT = 'illegal_argument'
    SINGULAR = 'singular'
    NOT_POSITIVE_DEFINITE = 'not_positive_definite'
    NOT_CONVERGED = 'not_converged'


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numeric computations.

    Type Parameters:
        P: The routine-specific parameter payload type

    Attributes:
        params: Routine-specific outputs (factors, solution, inverse, ...)
        info: Structured metadata (routine, workspace, failing step)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        status: Outcome of the computation
        code: Raw signed status (LAPACK ``info`` convention: 0 success,
            negative illegal argument index, positive routine-specific)
        warnings: Diagnostics emitted during computation

    Examples:
        >>> result = gauss_jordan(A, B)
        >>> if not result.ok:
        ...     print(result.status, result.warnings)
        >>> X = result.params.solution

        >>> lu(A).raise_for_status().params.parity
        -1
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    status: Status = Status.SUCCESS
    code: int = 0
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """True when the computation succeeded."""
        return self.status is Status.SUCCESS

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    def raise_for_status(self) -> 'Result[P]':
        """
        Raise the exception matching a non-success status.

        Returns:
            self, when status is SUCCESS (allows chaining)

        Raises:
            IllegalArgumentError: status ILLEGAL_ARGUMENT
            SingularMatrixError: status SINGULAR
            NotPositiveDefiniteError: status NOT_POSITIVE_DEFINITE
            ConvergenceError: status NOT_CONVERGED
        """
        if self.ok:
            return self

        message = self.warnings[-1] if self.warnings else self.status.value
        routine = self.info.get('routine')

        if self.status is Status.ILLEGAL_ARGUMENT:
            raise IllegalArgumentError(
                message, routine=routine, argument=-self.code if self.code < 0 else None
            )
        if self.status is Status.SINGULAR:
            raise SingularMatrixError(
                message, matrix_name=self.info.get('matrix_name'), step=self.info.get('step')
            )
        if self.status is Status.NOT_POSITIVE_DEFINITE:
            raise NotPositiveDefiniteError(
                message, matrix_name=self.info.get('matrix_name'), order=self.code
            )
        raise ConvergenceError(message, routine=routine, unconverged=self.code)


def report(message: str, stacklevel: int = 3) -> str:
    """
    Emit a diagnostic on the warnings stream and return it.

    The returned string is meant to be stored in Result.warnings.
    """
    warnings.warn(message, NumericalWarning, stacklevel=stacklevel)
    return message
