"""
Elimination-based solvers.

Public API:
    gauss_jordan(A, B, X=None) -> Result[GaussJordanParams]
    gaussian_elimination(A, B, X=None) -> Result[EliminationParams]
    tridiagonal(A, B) -> Result[TridiagonalParams]
    least_squares(D, b, X=None) -> Result[LeastSquaresParams]
    inverse(A) -> same type as A
    solve_quadratic(coeffs), solve_cubic(coeffs) -> VectorN

The solvers work in place on the caller's containers and report
numerical failure through Result.status instead of raising.
"""

from pylinalg.elimination.solution import (
    EliminationParams,
    GaussJordanParams,
    LeastSquaresParams,
    TridiagonalParams,
)
from pylinalg.elimination._gauss import gauss_jordan, gaussian_elimination, inverse
from pylinalg.elimination._tridiagonal import tridiagonal
from pylinalg.elimination._least_squares import least_squares
from pylinalg.elimination.polynomial import solve_cubic, solve_quadratic

__all__ = [
    "gauss_jordan",
    "gaussian_elimination",
    "tridiagonal",
    "least_squares",
    "inverse",
    "solve_quadratic",
    "solve_cubic",
    "GaussJordanParams",
    "EliminationParams",
    "TridiagonalParams",
    "LeastSquaresParams",
]
