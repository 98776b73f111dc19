"""
Factorization parameter payloads.

Factors are returned as row-major MatrixN / VectorN values that own
their storage. When the Result status is not SUCCESS the factors are
whatever the native routine left behind and must not be used.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.types.matrix import MatrixN
from pylinalg.types.vector import VectorN


@dataclass(frozen=True)
class LUParams:
    """
    Packed LU factorization P A = L U.

    Attributes:
        lu: L strictly below the diagonal (unit diagonal implied) and U on
            and above it, in one n x n matrix
        pivots: 0-based pivot indices; row i was interchanged with row
            pivots[i] at step i
        parity: +1 for an even number of interchanges, -1 for odd
    """
    lu: MatrixN
    pivots: NDArray[np.intp]
    parity: int

    def lower(self) -> MatrixN:
        """Unit lower-triangular factor L."""
        a = self.lu.array
        return MatrixN._from_array(np.tril(a, -1) + np.eye(a.shape[0]))

    def upper(self) -> MatrixN:
        """Upper-triangular factor U."""
        return MatrixN._from_array(np.triu(self.lu.array))

    def permutation(self) -> MatrixN:
        """Row permutation P with P A = L U."""
        n = self.pivots.size
        order = np.arange(n)
        for i, p in enumerate(self.pivots):
            order[[i, p]] = order[[p, i]]
        return MatrixN._from_array(np.eye(n)[order])


@dataclass(frozen=True)
class QRParams:
    """
    A = Q R.

    Attributes:
        Q: Orthonormal columns (M x M, or M x min(M, N) in economy mode)
        R: Upper-triangular (M x N, or min(M, N) x N in economy mode)
    """
    Q: MatrixN
    R: MatrixN


@dataclass(frozen=True)
class RQParams:
    """
    A = R Q.

    Attributes:
        R: Upper-triangular (M x N, or M x min(M, N) in economy mode)
        Q: Orthonormal rows (N x N, or min(M, N) x N in economy mode)
    """
    R: MatrixN
    Q: MatrixN


@dataclass(frozen=True)
class CholeskyParams:
    """
    A = U^T U.

    Attributes:
        U: Upper-triangular factor, strictly-lower part zero
    """
    U: MatrixN


@dataclass(frozen=True)
class SVDParams:
    """
    A = U diag(S) V^T.

    Attributes:
        U: Left singular vectors as columns (M x M, or M x K in economy mode)
        S: Singular values, non-negative and non-increasing (size K)
        V: Right singular vectors as columns (N x N, or N x K in economy mode)

    K = min(M, N).
    """
    U: MatrixN
    S: Any
    V: MatrixN


@dataclass(frozen=True)
class EigenParams:
    """
    A V = V diag(values) for symmetric A.

    Attributes:
        values: Eigenvalues in ascending order
        vectors: Orthonormal eigenvectors as columns, in the same order
    """
    values: VectorN
    vectors: MatrixN


@dataclass(frozen=True)
class SolveParams:
    """
    Solution of A X = B from an existing factorization.

    Attributes:
        solution: X, of the same kind as B
    """
    solution: Any
