"""
Factorization backends.

Available backends:
    LUBackend: dgetrf
    QRBackend: dgeqrf + dorgqr
    RQBackend: dgerqf + dorgrq
    CholeskyBackend: dpotrf
    SVDBackend: dgesvd
    SymmetricEigenBackend: dsyev
"""

from pylinalg.decomposition.backends.lapack import (
    CholeskyBackend,
    LUBackend,
    QRBackend,
    RQBackend,
    SVDBackend,
    SymmetricEigenBackend,
)

__all__ = [
    "LUBackend",
    "QRBackend",
    "RQBackend",
    "CholeskyBackend",
    "SVDBackend",
    "SymmetricEigenBackend",
]
