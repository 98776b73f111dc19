"""
Shared numeric infrastructure for pylinalg.

Submodules:
    timing: Execution timing utilities
    precision: Numerical precision constants and utilities
    tolerances: Tolerance tiers for comparing results
    linalg: Matrix-multiply kernel and small determinants
"""

from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.compute.linalg.matmul import matrix_multiply

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Kernel
    "matrix_multiply",
]
