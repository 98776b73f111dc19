"""
Closed-form real roots of quadratic and cubic polynomials.

Coefficients are given highest degree first. Leading zero coefficients
lower the degree, so solve_cubic([0, 1, -3, 2]) solves x^2 - 3x + 2.
Roots are returned as a VectorN of distinct real values in ascending
order; complex roots are dropped.
"""

import math
from typing import Any

import numpy as np

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.scalar import EPSILON2, PI2, cbrt, clip
from pylinalg.core.validation import check_finite
from pylinalg.types._dense import as_values
from pylinalg.types.vector import VectorN


def _coefficients(coeffs: Any, degree: int) -> np.ndarray:
    values = as_values(coeffs, 'coeffs')
    if values.size != degree + 1:
        raise DimensionError(
            f"coeffs: degree {degree} polynomial needs {degree + 1} coefficients, "
            f"got {values.size}"
        )
    check_finite(values, 'coeffs')
    return values


def _roots(values: list[float]) -> VectorN:
    return VectorN._from_array(np.array(sorted(set(values)), dtype=np.float64))


def _quadratic(a: float, b: float, c: float) -> list[float]:
    if a == 0.0:
        if b == 0.0:
            return []
        return [-c / b]

    disc = b * b - 4.0 * a * c
    if disc < 0.0:
        return []
    if disc == 0.0:
        return [-b / (2.0 * a)]

    # q keeps the sign of b so neither root suffers cancellation
    q = -0.5 * (b + math.copysign(math.sqrt(disc), b))
    return [q / a, c / q]


def _cubic(a: float, b: float, c: float, d: float) -> list[float]:
    if a == 0.0:
        return _quadratic(b, c, d)

    A, B, C = b / a, c / a, d / a
    shift = A / 3.0

    # Depressed cubic t^3 + p t + q = 0 with x = t - A/3
    p = B - A * A / 3.0
    q = 2.0 * A ** 3 / 27.0 - A * B / 3.0 + C
    h2, g3 = (q / 2.0) ** 2, (p / 3.0) ** 3
    D = h2 + g3

    # Repeated roots: D vanishes relative to its own terms
    if abs(D) <= EPSILON2 * max(h2, abs(g3)):
        if abs(p) <= EPSILON2 * max(A * A, abs(B)):
            return [-shift]
        u = cbrt(-q / 2.0)
        return [2.0 * u - shift, -u - shift]

    if D > 0.0:
        s = math.sqrt(D)
        return [cbrt(-q / 2.0 + s) + cbrt(-q / 2.0 - s) - shift]

    # Three distinct real roots (p < 0 here)
    r = 2.0 * math.sqrt(-p / 3.0)
    phi = math.acos(clip(3.0 * q / (p * r), -1.0, 1.0)) / 3.0
    return [r * math.cos(phi - k * PI2 / 3.0) - shift for k in range(3)]


def solve_quadratic(coeffs: Any) -> VectorN:
    """
    Real roots of a x^2 + b x + c.

    Args:
        coeffs: (a, b, c) as a sequence, ndarray or vector

    Returns:
        VectorN of 0, 1 or 2 roots, ascending

    Example:
        >>> solve_quadratic([1, -3, 2])
        VectorN(1.0, 2.0)
    """
    a, b, c = _coefficients(coeffs, 2)
    return _roots(_quadratic(float(a), float(b), float(c)))


def solve_cubic(coeffs: Any) -> VectorN:
    """
    Real roots of a x^3 + b x^2 + c x + d.

    Uses Cardano's formula when there is a single real root and the
    trigonometric form when there are three. Repeated roots are reported
    once.

    Args:
        coeffs: (a, b, c, d) as a sequence, ndarray or vector

    Returns:
        VectorN of 0 to 3 roots, ascending
    """
    a, b, c, d = _coefficients(coeffs, 3)
    return _roots(_cubic(float(a), float(b), float(c), float(d)))
