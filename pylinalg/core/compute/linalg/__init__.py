"""
Linear algebra kernels.

Public API:
    matrix_multiply(A, B, C): C = A B into caller-owned storage
    multiply(A, B): A B as a new array
"""

from pylinalg.core.compute.linalg.matmul import matrix_multiply, multiply

__all__ = [
    "matrix_multiply",
    "multiply",
]
