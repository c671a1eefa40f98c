"""
Numerical policy constants and tolerance tiers.

Single place for every threshold the engine applies:
- RREF pivot tolerance and result rounding
- size at which cofactor expansion starts to warn
- default editable dimension range for callers that clamp grids
- comparison tiers used by the test suite

Import from here, never hard-code the numbers.
"""

from dataclasses import dataclass


# A candidate pivot with |value| below this is treated as zero and its
# column is skipped without consuming a pivot row.
RREF_PIVOT_TOLERANCE = 1e-10

# RREF results are rounded half-up to this many decimal places.
RREF_DECIMALS = 3

# Cofactor expansion is O(n!); above this size determinant() warns.
COFACTOR_WARNING_SIZE = 9

# Range used by Dimensions.clamped() when the caller gives none.
DIMENSION_MIN = 1
DIMENSION_MAX = 6


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Elementwise arithmetic, transpose and RREF output: bit-exact
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bit-for-bit equality',
)

# Same algorithm, different accumulation order
CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, reordered summation',
)

# Cofactor expansion vs an LU-based determinant (up to 6x6, entries ~N(0,1))
COFACTOR_VS_LU = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='cofactor_vs_lu',
    description='Recursive cofactor determinant against LAPACK LU',
)
