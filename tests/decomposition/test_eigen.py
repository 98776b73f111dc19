"""
Tests for the symmetric eigendecomposition.
"""

import numpy as np
import pytest

from pylinalg.core.compute.tolerances import FACTOR_FP64
from pylinalg.core.exceptions import DimensionError, NumericalWarning
from pylinalg.core.result import Status
from pylinalg.decomposition import symmetric_eigen
from pylinalg.types import Matrix3, MatrixN, VectorN


TOL = FACTOR_FP64


def _symmetric(rng, n):
    m = rng.standard_normal((n, n))
    return (m + m.T) / 2.0


class TestSymmetricEigen:

    @pytest.mark.parametrize("n", [1, 4, 9])
    def test_eigen_equation(self, rng, n):
        a = _symmetric(rng, n)
        result = symmetric_eigen(MatrixN(a))
        assert result.ok
        w, V = result.params.values.array, result.params.vectors.array
        np.testing.assert_allclose(a @ V, V @ np.diag(w), rtol=TOL.rtol, atol=TOL.atol)

    def test_values_ascending(self, rng):
        w = symmetric_eigen(_symmetric(rng, 6)).params.values.array
        assert np.all(np.diff(w) >= 0.0)

    def test_matches_numpy(self, rng):
        a = _symmetric(rng, 5)
        np.testing.assert_allclose(
            symmetric_eigen(a).params.values.array, np.linalg.eigvalsh(a),
            rtol=TOL.rtol, atol=TOL.atol,
        )

    def test_vectors_orthonormal(self, rng):
        V = symmetric_eigen(_symmetric(rng, 5)).params.vectors.array
        np.testing.assert_allclose(V.T @ V, np.eye(5), rtol=TOL.rtol, atol=TOL.atol)

    def test_only_upper_triangle_read(self, rng):
        a = _symmetric(rng, 4)
        garbage = np.triu(a) + np.tril(np.full((4, 4), 7.0), -1)
        np.testing.assert_array_equal(
            symmetric_eigen(garbage).params.values.array,
            symmetric_eigen(a).params.values.array,
        )

    def test_known_values(self):
        values = symmetric_eigen(Matrix3(2, 1, 0, 1, 2, 0, 0, 0, 5)).params.values
        assert isinstance(values, VectorN)
        np.testing.assert_allclose(values.array, [1.0, 3.0, 5.0], rtol=TOL.rtol, atol=TOL.atol)

    def test_metadata(self, rng):
        result = symmetric_eigen(_symmetric(rng, 3))
        assert result.backend_name == 'lapack_dsyev'
        assert result.info['lwork'] >= 8

    def test_explicit_lwork(self, rng):
        a = _symmetric(rng, 4)
        result = symmetric_eigen(a, lwork=11)
        assert result.ok
        assert result.info['lwork'] == 11

    def test_too_small_workspace(self, rng):
        with pytest.warns(NumericalWarning, match="dsyev: illegal value in argument 8"):
            result = symmetric_eigen(_symmetric(rng, 4), lwork=10)
        assert result.status is Status.ILLEGAL_ARGUMENT
        assert result.code == -8
        assert result.params.values.size() == 0

    def test_non_square(self):
        with pytest.raises(DimensionError):
            symmetric_eigen(np.ones((3, 2)))
