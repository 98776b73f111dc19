"""
Phase timing for the factorization backends.

A backend opens one section per phase (workspace query, LAPACK call,
repacking to row-major) and the breakdown lands in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('workspace_query'):
            lwork = query()
        with timer.section('factorize'):
            lu, piv, info = lapack.dgetrf(a, lwork=lwork)
        timer.stop()
        timer.result()
        # {'total_seconds': 4e-4, 'workspace_query': 1e-5, 'factorize': 3e-4}
    """

    def __init__(self) -> None:
        self._sections: dict[str, float] = {}
        self._t0: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section ``name``."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + time.perf_counter() - t0

    def result(self) -> dict[str, float]:
        """
        Seconds per section plus 'total_seconds'.

        Raises:
            RuntimeError: If the timer was never stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block of caller code.

    Usage:
        with timed() as timer:
            svd(A)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
