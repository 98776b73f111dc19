"""
LAPACK backends for the factorization layer.

Every backend follows the same pipeline:
    1. take the column-major copy held by the MatrixDesign
    2. size the workspace: the caller's ``lwork`` when given, otherwise a
       workspace query (``lwork=-1`` or the ``*_lwork`` helper)
    3. call the routine through scipy.linalg.lapack
    4. translate the signed ``info`` into a Status
    5. convert the outputs back to row-major MatrixN / VectorN values

Backends never warn or raise on a numerical failure; the public
functions in pylinalg.decomposition.solvers decide what to report.

An explicit ``lwork`` below the routine's documented minimum is reported
the way LAPACK reports it: ILLEGAL_ARGUMENT with the negated position of
the LWORK argument.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import lapack

from pylinalg.core.compute.timing import Timer
from pylinalg.core.exceptions import ValidationError
from pylinalg.core.result import Result, Status
from pylinalg.decomposition.design import MatrixDesign
from pylinalg.decomposition.solution import (
    CholeskyParams,
    EigenParams,
    LUParams,
    QRParams,
    RQParams,
    SVDParams,
)
from pylinalg.types.matrix import MatrixN
from pylinalg.types.vector import VectorN


# Status for a positive info, per routine
_POSITIVE_INFO = {
    'dgetrf': Status.SINGULAR,
    'dgetrs': Status.SINGULAR,
    'dpotrf': Status.NOT_POSITIVE_DEFINITE,
    'dgesvd': Status.NOT_CONVERGED,
    'dsyev': Status.NOT_CONVERGED,
}

# 1-based position of LWORK in each routine's argument list
_LWORK_POSITION = {
    'dgeqrf': 7,
    'dgerqf': 7,
    'dorgqr': 8,
    'dorgrq': 8,
    'dgesvd': 13,
    'dsyev': 8,
}


def translate_info(info: int, routine: str, matrix_name: str = 'A') -> tuple[Status, str | None]:
    """
    Map a LAPACK info code onto a Status and a diagnostic message.

    Returns:
        (Status.SUCCESS, None) for info == 0
    """
    if info == 0:
        return Status.SUCCESS, None
    if info < 0:
        return Status.ILLEGAL_ARGUMENT, f"{routine}: illegal value in argument {-info}"

    status = _POSITIVE_INFO.get(routine, Status.NOT_CONVERGED)
    if status is Status.SINGULAR:
        message = (
            f"{routine}: {matrix_name} is singular, "
            f"U[{info - 1}, {info - 1}] is exactly zero"
        )
    elif status is Status.NOT_POSITIVE_DEFINITE:
        message = (
            f"{routine}: {matrix_name} is not positive definite, "
            f"leading minor of order {info} is not positive"
        )
    else:
        message = f"{routine}: {info} off-diagonal elements did not converge"
    return status, message


def _workspace_size(work: NDArray[Any]) -> int:
    return int(np.asarray(work).ravel()[0].real)


class _LapackBackend:
    """Shared plumbing: naming and Result construction."""

    routine: str = ''

    @property
    def name(self) -> str:
        return f'lapack_{self.routine}'

    def _result(
        self,
        params: Any,
        design: MatrixDesign,
        timer: Timer,
        code: int,
        routine: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> Result[Any]:
        routine = routine or self.routine
        code = int(code)
        status, message = translate_info(code, routine, design.name)
        timer.stop()

        info: dict[str, Any] = {
            'routine': routine,
            'matrix_name': design.name,
            'shape': (design.m, design.n),
        }
        if status is Status.SINGULAR:
            info['step'] = code - 1
        if extra:
            info.update(extra)

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            status=status,
            code=code,
            warnings=() if message is None else (message,),
        )


class _WorkspaceBackend(_LapackBackend):
    """Backend whose routines take a WORK / LWORK pair."""

    def __init__(self, lwork: int | None = None):
        if lwork is not None and (
            isinstance(lwork, bool) or not isinstance(lwork, numbers.Integral) or lwork < 1
        ):
            raise ValidationError(f"lwork: expected a positive integer or None, got {lwork!r}")
        self._lwork = None if lwork is None else int(lwork)

    @property
    def lwork(self) -> int | None:
        """Explicit workspace size, or None to query LAPACK on every call."""
        return self._lwork

    def _workspace(self, routine: str, query: Callable[[], Any], minimum: int) -> tuple[int, int]:
        """
        Workspace size for one routine call.

        Returns:
            (lwork, code) where code is 0, or the negated LWORK position
            when an explicit lwork is below the minimum
        """
        if self._lwork is None:
            return max(_workspace_size(query()), minimum), 0
        if self._lwork < minimum:
            return self._lwork, -_LWORK_POSITION[routine]
        return self._lwork, 0


# =============================================================================
# LU
# =============================================================================


class LUBackend(_LapackBackend):
    """Partial-pivoting LU via dgetrf."""

    routine = 'dgetrf'

    def solve(self, design: MatrixDesign) -> Result[LUParams]:
        timer = Timer()
        timer.start()

        with timer.section('factorize'):
            lu, piv, code = lapack.dgetrf(design.a, overwrite_a=1)

        with timer.section('to_row_major'):
            pivots = np.asarray(piv, dtype=np.intp)
            swaps = int(np.count_nonzero(pivots != np.arange(pivots.size)))
            params = LUParams(
                lu=MatrixN._from_array(np.ascontiguousarray(lu)),
                pivots=pivots,
                parity=-1 if swaps % 2 else 1,
            )

        return self._result(params, design, timer, code, extra={'interchanges': swaps})


def lu_substitute(
    lu: NDArray[np.float64], pivots: NDArray[np.intp], b: NDArray[np.float64]
) -> tuple[NDArray[np.float64], int]:
    """Forward and back substitution with packed LU factors (dgetrs)."""
    x, code = lapack.dgetrs(np.asfortranarray(lu), pivots.astype(np.int32), np.asfortranarray(b))
    return np.ascontiguousarray(x), int(code)


# =============================================================================
# QR / RQ
# =============================================================================


class QRBackend(_WorkspaceBackend):
    """Householder QR via dgeqrf, Q generated with dorgqr."""

    routine = 'dgeqrf'

    def __init__(self, economy: bool = False, lwork: int | None = None):
        super().__init__(lwork)
        self.economy = economy

    def solve(self, design: MatrixDesign) -> Result[QRParams]:
        m, n = design.m, design.n
        a = design.a
        empty = QRParams(Q=MatrixN(), R=MatrixN())
        timer = Timer()
        timer.start()

        with timer.section('workspace_query'):
            lwork, code = self._workspace('dgeqrf', lambda: lapack.dgeqrf(a, lwork=-1)[2], max(1, n))
        if code:
            return self._result(empty, design, timer, code)

        with timer.section('factorize'):
            qr, tau, _, code = lapack.dgeqrf(a, lwork=lwork, overwrite_a=1)
        if code:
            return self._result(empty, design, timer, code)

        # R is read out before dorgqr overwrites the reflectors in place
        r = np.triu(qr[:n] if (self.economy and m > n) else qr)

        with timer.section('generate_q'):
            if m < n:
                q_in = np.array(qr[:, :m], order='F')
            elif self.economy:
                q_in = np.array(qr, order='F')
            else:
                # Full Q for a tall matrix: extra columns come from the reflectors
                q_in = np.zeros((m, m), dtype=np.float64, order='F')
                q_in[:, :n] = qr
            glwork, code = self._workspace(
                'dorgqr', lambda: lapack.dorgqr(q_in, tau, lwork=-1)[1], max(1, q_in.shape[1])
            )
            if not code:
                q, _, code = lapack.dorgqr(q_in, tau, lwork=glwork, overwrite_a=1)
        if code:
            return self._result(empty, design, timer, code, routine='dorgqr')

        with timer.section('to_row_major'):
            params = QRParams(
                Q=MatrixN._from_array(np.ascontiguousarray(q)),
                R=MatrixN._from_array(np.ascontiguousarray(r)),
            )

        return self._result(
            params, design, timer, 0,
            extra={'economy': self.economy, 'lwork': {'dgeqrf': lwork, 'dorgqr': glwork}},
        )


class RQBackend(_WorkspaceBackend):
    """RQ via dgerqf, Q generated with dorgrq."""

    routine = 'dgerqf'

    def __init__(self, economy: bool = False, lwork: int | None = None):
        super().__init__(lwork)
        self.economy = economy

    def solve(self, design: MatrixDesign) -> Result[RQParams]:
        m, n = design.m, design.n
        a = design.a
        empty = RQParams(R=MatrixN(), Q=MatrixN())
        timer = Timer()
        timer.start()

        with timer.section('workspace_query'):
            lwork, code = self._workspace('dgerqf', lambda: lapack.dgerqf(a, lwork=-1)[2], max(1, m))
        if code:
            return self._result(empty, design, timer, code)

        with timer.section('factorize'):
            rq, tau, _, code = lapack.dgerqf(a, lwork=lwork, overwrite_a=1)
        if code:
            return self._result(empty, design, timer, code)

        if self.economy and m < n:
            r = np.triu(rq[:, n - m:])
        else:
            r = np.triu(rq, n - m)

        with timer.section('generate_q'):
            if m >= n:
                # The reflectors live in the last n rows
                q_in = np.array(rq[m - n:], order='F')
            elif self.economy:
                q_in = np.array(rq, order='F')
            else:
                q_in = np.zeros((n, n), dtype=np.float64, order='F')
                q_in[n - m:] = rq
            glwork, code = self._workspace(
                'dorgrq', lambda: lapack.dorgrq(q_in, tau, lwork=-1)[1], max(1, q_in.shape[0])
            )
            if not code:
                q, _, code = lapack.dorgrq(q_in, tau, lwork=glwork, overwrite_a=1)
        if code:
            return self._result(empty, design, timer, code, routine='dorgrq')

        with timer.section('to_row_major'):
            params = RQParams(
                R=MatrixN._from_array(np.ascontiguousarray(r)),
                Q=MatrixN._from_array(np.ascontiguousarray(q)),
            )

        return self._result(
            params, design, timer, 0,
            extra={'economy': self.economy, 'lwork': {'dgerqf': lwork, 'dorgrq': glwork}},
        )


# =============================================================================
# Cholesky
# =============================================================================


class CholeskyBackend(_LapackBackend):
    """Cholesky A = U^T U via dpotrf (upper triangle referenced)."""

    routine = 'dpotrf'

    def solve(self, design: MatrixDesign) -> Result[CholeskyParams]:
        timer = Timer()
        timer.start()

        with timer.section('factorize'):
            c, code = lapack.dpotrf(design.a, lower=0, clean=1, overwrite_a=1)

        with timer.section('to_row_major'):
            params = CholeskyParams(U=MatrixN._from_array(np.ascontiguousarray(np.triu(c))))

        return self._result(params, design, timer, code)


def cholesky_substitute(
    u: NDArray[np.float64], b: NDArray[np.float64]
) -> tuple[NDArray[np.float64], int]:
    """Solve U^T U x = b with an upper Cholesky factor (dpotrs)."""
    x, code = lapack.dpotrs(np.asfortranarray(u), np.asfortranarray(b), lower=0)
    return np.ascontiguousarray(x), int(code)


# =============================================================================
# SVD
# =============================================================================


class SVDBackend(_WorkspaceBackend):
    """Singular value decomposition via dgesvd."""

    routine = 'dgesvd'

    def __init__(self, economy: bool = False, lwork: int | None = None):
        super().__init__(lwork)
        self.economy = economy

    def solve(self, design: MatrixDesign) -> Result[SVDParams]:
        m, n, k = design.m, design.n, design.k
        full = 0 if self.economy else 1
        timer = Timer()
        timer.start()

        with timer.section('workspace_query'):
            lwork, code = self._workspace(
                'dgesvd',
                lambda: lapack.dgesvd_lwork(m, n, compute_uv=1, full_matrices=full)[0],
                max(1, 3 * k + max(m, n), 5 * k),
            )
        if code:
            return self._result(SVDParams(U=MatrixN(), S=VectorN(), V=MatrixN()), design, timer, code)

        with timer.section('factorize'):
            u, s, vt, code = lapack.dgesvd(
                design.a, compute_uv=1, full_matrices=full, lwork=lwork, overwrite_a=1
            )

        with timer.section('to_row_major'):
            params = SVDParams(
                U=MatrixN._from_array(np.ascontiguousarray(u)),
                S=VectorN._from_array(np.array(s, dtype=np.float64)),
                V=MatrixN._from_array(np.ascontiguousarray(vt.T)),
            )

        return self._result(params, design, timer, code, extra={'economy': self.economy, 'lwork': lwork})


# =============================================================================
# Symmetric eigendecomposition
# =============================================================================


class SymmetricEigenBackend(_WorkspaceBackend):
    """Eigenvalues and eigenvectors of a symmetric matrix via dsyev."""

    routine = 'dsyev'

    def solve(self, design: MatrixDesign) -> Result[EigenParams]:
        n = design.n
        timer = Timer()
        timer.start()

        with timer.section('workspace_query'):
            lwork, code = self._workspace(
                'dsyev', lambda: lapack.dsyev_lwork(n, lower=0)[0], max(1, 3 * n - 1)
            )
        if code:
            return self._result(EigenParams(values=VectorN(), vectors=MatrixN()), design, timer, code)

        with timer.section('factorize'):
            w, v, code = lapack.dsyev(design.a, compute_v=1, lower=0, lwork=lwork, overwrite_a=1)

        with timer.section('to_row_major'):
            params = EigenParams(
                values=VectorN._from_array(np.array(w, dtype=np.float64)),
                vectors=MatrixN._from_array(np.ascontiguousarray(v)),
            )

        return self._result(params, design, timer, code, extra={'lwork': lwork})
