"""
Scalar utilities and mathematical constants.

Small pure functions used throughout the vector, matrix and quaternion
types. Names with a trailing underscore avoid shadowing builtins.
"""

import math

import numpy as np

PI: float = 3.1415926535897931160
PI2: float = 6.2831853071795862320
PI_2: float = 1.5707963267948965580
DEG_TO_RAD: float = PI / 180.0
RAD_TO_DEG: float = 180.0 / PI

# Tolerances for is_zero() and geometric degeneracy checks
EPSILON: float = 1.0e-6
EPSILON2: float = 1.0e-12


def abs_(a: float) -> float:
    """Absolute value."""
    return a if a >= 0 else -a


def cbrt(a: float) -> float:
    """Real cube root (defined for negative input)."""
    if a < 0:
        return -((-a) ** (1.0 / 3.0))
    return a ** (1.0 / 3.0)


def is_zero(a: float, eps: float = EPSILON) -> bool:
    """True when |a| < eps."""
    return abs_(a) < eps


def sgn(a: float) -> int:
    """Sign of a: +1, -1 or 0."""
    if a > 0:
        return 1
    if a < 0:
        return -1
    return 0


def round_(a: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if a >= 0:
        return float(math.floor(a + 0.5))
    return -float(math.floor(-a + 0.5))


def floor(a: float) -> float:
    """Round toward -infinity."""
    return float(math.floor(a))


def ceiling(a: float) -> float:
    """Round toward +infinity."""
    return float(math.ceil(a))


def clip(a: float, low: float, high: float) -> float:
    """Clip a to lie within [low, high]."""
    if a < low:
        return low
    if a > high:
        return high
    return a


def max_(a: float, b: float) -> float:
    return a if a > b else b


def min_(a: float, b: float) -> float:
    return a if a < b else b


def swap(a, b):
    """Return the pair exchanged: ``a, b = swap(a, b)``."""
    return b, a


def random_point3(rng: np.random.Generator | None = None):
    """
    Point3 with components drawn uniformly from [0, 1).

    Args:
        rng: Generator to draw from; a fresh default_rng() when None
    """
    from pylinalg.types.vector import Vector3

    if rng is None:
        rng = np.random.default_rng()
    return Vector3(*rng.random(3))
