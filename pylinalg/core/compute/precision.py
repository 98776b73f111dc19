"""
Numerical precision constants and utilities.

Provides the float64 epsilon constants and epsilon-aware comparison of
vector/matrix values. Value-type equality (==) is exact; use is_close()
when a tolerance is wanted.
"""

import numpy as np
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14


def _values(x: Any) -> Any:
    return x.array if hasattr(x, 'array') else x


def is_close(
    a: Any,
    b: Any,
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL
) -> bool:
    """
    Check if two scalars, arrays, vectors or matrices are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|, element-wise, and
    requires matching shapes.

    Args:
        a: First value
        b: Second value
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        True when every element pair is close
    """
    va = np.asarray(_values(a), dtype=np.float64)
    vb = np.asarray(_values(b), dtype=np.float64)
    if va.shape != vb.shape:
        return False
    return bool(np.all(np.abs(va - vb) <= atol + rtol * np.abs(vb)))
