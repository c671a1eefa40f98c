"""
Reduced Row Echelon Form by Gauss-Jordan elimination with partial pivoting.

Columns are scanned left to right. In each column the remaining row with
the largest |value| becomes the pivot; a column whose best candidate is
below RREF_PIVOT_TOLERANCE has no pivot and does not consume a row, so
rank-deficient input simply yields fewer pivots. The pivot row is scaled
to a leading 1 and the column is cleared in every other row.

The reduced grid is rounded half-up to RREF_DECIMALS places. The rounding
is part of the result: it makes the output a fixed point of the reduction
and removes floating-point residue such as 1e-17 in cleared cells.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import RREF_PIVOT_TOLERANCE, RREF_DECIMALS
from pymatrix.matrix.design import Matrix


def gauss_jordan(a: Matrix) -> tuple[Matrix, tuple[int, ...]]:
    """
    Reduce a to RREF.

    Returns
    -------
    (Matrix, tuple of int)
        The rounded RREF matrix and the pivot column indices. The empty
        matrix reduces to itself with no pivots.
    """
    if a.is_empty:
        return a, ()

    work = a.to_array()
    n_rows, n_cols = work.shape
    pivot_columns: list[int] = []

    pivot_row = 0
    for col in range(n_cols):
        if pivot_row >= n_rows:
            break

        # argmax returns the first maximum, so ties keep the higher row
        best = pivot_row + int(np.argmax(np.abs(work[pivot_row:, col])))
        if abs(work[best, col]) < RREF_PIVOT_TOLERANCE:
            continue

        if best != pivot_row:
            work[[pivot_row, best]] = work[[best, pivot_row]]

        work[pivot_row] = work[pivot_row] / work[pivot_row, col]

        for row in range(n_rows):
            if row != pivot_row:
                work[row] = work[row] - work[row, col] * work[pivot_row]

        pivot_columns.append(col)
        pivot_row += 1

    return Matrix._build(_round_half_up(work, RREF_DECIMALS), "result"), tuple(pivot_columns)


def _round_half_up(values: NDArray, decimals: int) -> NDArray:
    """floor(v * 10^d + 0.5) / 10^d, with -0.0 normalised to 0.0."""
    scale = 10.0 ** decimals
    rounded = np.floor(values * scale + 0.5) / scale
    return rounded + 0.0
