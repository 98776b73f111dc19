"""
Tests for Cholesky factorization and solve.
"""

import numpy as np
import pytest

from pylinalg.core.compute.tolerances import FACTOR_FP64, SOLVER_FP64
from pylinalg.core.exceptions import DimensionError, NotPositiveDefiniteError, NumericalWarning
from pylinalg.core.result import Status
from pylinalg.decomposition import cholesky, cholesky_solve
from pylinalg.types import MatrixN, VectorN


def _spd(rng, n):
    m = rng.standard_normal((n, n))
    return m @ m.T + n * np.eye(n)


class TestCholesky:

    @pytest.mark.parametrize("n", [1, 3, 10])
    def test_reconstruction(self, rng, n):
        a = _spd(rng, n)
        result = cholesky(MatrixN(a))
        assert result.ok
        U = result.params.U.array
        np.testing.assert_allclose(U.T @ U, a, rtol=FACTOR_FP64.rtol, atol=FACTOR_FP64.atol)

    def test_u_upper_with_positive_diagonal(self, rng):
        U = cholesky(_spd(rng, 5)).params.U.array
        np.testing.assert_array_equal(np.tril(U, -1), np.zeros((5, 5)))
        assert np.all(np.diag(U) > 0.0)

    def test_only_upper_triangle_read(self, rng):
        a = _spd(rng, 4)
        garbage = np.triu(a) + np.tril(np.full((4, 4), 1e3), -1)
        np.testing.assert_array_equal(cholesky(garbage).params.U.array, cholesky(a).params.U.array)

    def test_known_factor(self):
        U = cholesky(np.array([[4.0, 2.0], [2.0, 5.0]])).params.U.array
        np.testing.assert_allclose(U, [[2.0, 1.0], [0.0, 2.0]])

    def test_not_positive_definite(self):
        with pytest.warns(NumericalWarning, match="not positive definite"):
            result = cholesky(np.array([[1.0, 2.0], [2.0, 1.0]]))
        assert result.status is Status.NOT_POSITIVE_DEFINITE
        assert result.code == 2
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            result.raise_for_status()
        assert exc_info.value.order == 2

    def test_non_square(self):
        with pytest.raises(DimensionError):
            cholesky(np.ones((2, 3)))


class TestCholeskySolve:

    def test_vector_rhs(self, rng):
        a = _spd(rng, 6)
        b = rng.standard_normal(6)
        result = cholesky_solve(a, VectorN(b))
        assert result.ok
        assert result.backend_name == 'lapack_dpotrs'
        assert isinstance(result.params.solution, VectorN)
        np.testing.assert_allclose(
            result.params.solution.array, np.linalg.solve(a, b),
            rtol=SOLVER_FP64.rtol, atol=SOLVER_FP64.atol,
        )

    def test_matrix_rhs(self, rng):
        a = _spd(rng, 4)
        b = rng.standard_normal((4, 2))
        result = cholesky_solve(MatrixN(a), MatrixN(b))
        assert isinstance(result.params.solution, MatrixN)
        np.testing.assert_allclose(
            result.params.solution.array, np.linalg.solve(a, b),
            rtol=SOLVER_FP64.rtol, atol=SOLVER_FP64.atol,
        )

    def test_inputs_not_modified(self, rng):
        a = _spd(rng, 3)
        b = rng.standard_normal(3)
        a0, b0 = a.copy(), b.copy()
        cholesky_solve(a, b)
        np.testing.assert_array_equal(a, a0)
        np.testing.assert_array_equal(b, b0)

    def test_not_positive_definite_propagates(self):
        with pytest.warns(NumericalWarning):
            result = cholesky_solve(-np.eye(3), np.ones(3))
        assert result.status is Status.NOT_POSITIVE_DEFINITE
        assert result.code == 1
        assert result.params.solution is None

    def test_rhs_rows(self, rng):
        with pytest.raises(DimensionError):
            cholesky_solve(_spd(rng, 3), np.ones(2))
