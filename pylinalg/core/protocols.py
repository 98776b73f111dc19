"""
Core protocols for pylinalg.

These define the structural interfaces that the generic accessors and
the factorization backends are written against. We use Protocol
(structural typing) rather than ABC (nominal typing) so any type exposing
the minimal capability set can take part, not only the built-in vector
and matrix classes.

Design Principles:
    - Minimal contracts: size(), rows(), cols() and element access
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class VectorLike(Protocol):
    """
    Minimal protocol for a column vector.

    Invariant: size() == rows() and cols() == 1.
    """

    def size(self) -> int:
        """Number of elements."""
        ...

    def rows(self) -> int:
        """Number of rows (== size())."""
        ...

    def cols(self) -> int:
        """Number of columns (== 1)."""
        ...

    def __getitem__(self, i: int) -> float:
        ...

    def __setitem__(self, i: int, value: float) -> None:
        ...


@runtime_checkable
class MatrixLike(Protocol):
    """
    Minimal protocol for a dense row-major matrix.

    Elements are reachable by linear index ``A[k]`` with
    ``0 <= k < rows()*cols()`` and by pair ``A[i, j]``.
    """

    def size(self) -> int:
        """Number of elements (rows() * cols())."""
        ...

    def rows(self) -> int:
        ...

    def cols(self) -> int:
        ...

    def __getitem__(self, index: Any) -> float:
        ...

    def __setitem__(self, index: Any, value: float) -> None:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for factorization backends.

    Each backend takes a validated design (a column-major copy of the
    input matrix) and produces a routine-specific parameter payload.

    Backends are stateless apart from construction-time options such as
    an explicit workspace size.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: 'lapack_{routine}'
        Examples: 'lapack_dgetrf', 'lapack_dgeqrf', 'lapack_dgesvd'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the factorization.

        Args:
            design: Validated matrix design

        Returns:
            Result envelope with payload, status and timing
        """
        ...
