"""
Parameter payloads for the elimination solvers.

The payloads hold the caller's own containers where the solver works in
place, so ``result.params.inverse is A`` after gauss_jordan(A, B).
When the Result status is not SUCCESS their contents are partial and
must not be used.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GaussJordanParams:
    """
    Output of gauss_jordan().

    Attributes:
        inverse: The input matrix, overwritten with its inverse
        solution: X with A X = B
    """
    inverse: Any
    solution: Any


@dataclass(frozen=True)
class EliminationParams:
    """
    Output of gaussian_elimination().

    Attributes:
        reduced: The input matrix, overwritten with its upper-triangular form
        solution: X with A X = B
    """
    reduced: Any
    solution: Any


@dataclass(frozen=True)
class TridiagonalParams:
    """
    Output of tridiagonal().

    Attributes:
        solution: The right-hand side, overwritten with the solution
    """
    solution: Any


@dataclass(frozen=True)
class LeastSquaresParams:
    """
    Output of least_squares().

    Attributes:
        solution: x minimizing |D x - b|
        normal_inverse: (D^T D)^-1, a by-product of the Gauss-Jordan solve
    """
    solution: Any
    normal_inverse: Any
