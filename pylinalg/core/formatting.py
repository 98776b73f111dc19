"""
Deterministic text rendering for vectors, matrices and quaternions.

Every value renders each element right-aligned in a field of
DISPLAY_WIDTH characters with PRECISION decimals, so output is stable
enough for golden-output comparisons.

Vectors and quaternions render on one line; matrices render one row
per line.
"""

from typing import Iterable

import numpy as np
from numpy.typing import NDArray

# Field width for every element
DISPLAY_WIDTH: int = 12

# Digits after the decimal point
PRECISION: int = 6


def format_scalar(
    value: float,
    width: int = DISPLAY_WIDTH,
    precision: int = PRECISION,
) -> str:
    """Render one element."""
    # -0.0 renders as 0.0 so golden output does not depend on signed zeros
    v = float(value) + 0.0
    return f"{v:{width}.{precision}f}"


def format_row(
    values: Iterable[float],
    width: int = DISPLAY_WIDTH,
    precision: int = PRECISION,
) -> str:
    """Render a sequence of elements on one line."""
    return "".join(format_scalar(v, width, precision) for v in values)


def format_matrix(
    array: NDArray[np.float64],
    width: int = DISPLAY_WIDTH,
    precision: int = PRECISION,
) -> str:
    """Render a 2D array, one row per line."""
    return "\n".join(format_row(row, width, precision) for row in array)
