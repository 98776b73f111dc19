"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different kinds of routine:
- Exact-arithmetic paths (transpose, conversions, accessors): bit-for-bit
- Direct solvers on well-conditioned input: near machine precision
- Factorizations reconstructed from their factors: a few ulps per element
- Ill-conditioned problems (cond > 1e4): relaxed

Used by the test suite to pick comparison tolerances per routine.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Permutation-only operations: no rounding at all
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Element permutations and copies, bit-for-bit',
)

# Direct solvers (Gauss-Jordan, Gaussian elimination, Thomas)
SOLVER_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='solver_fp64',
    description='Direct solve on well-conditioned input',
)

# Reconstruction from LAPACK factors (LU, QR, RQ, Cholesky, SVD, eigen)
FACTOR_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-10,
    name='factor_fp64',
    description='Product of factors reproduces the input',
)

# Ill-conditioned problems, including normal equations
ILL_CONDITIONED_FP64 = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='ill_conditioned_fp64',
    description='Double precision, ill-conditioned (cond > 1e4)',
)


def select_tolerance(
    routine: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given routine name."""
    if is_ill_conditioned:
        return ILL_CONDITIONED_FP64
    if routine in ('transpose', 'convert', 'accessor'):
        return EXACT
    if routine.startswith('lapack'):
        return FACTOR_FP64
    return SOLVER_FP64
