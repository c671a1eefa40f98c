"""
Determinant by recursive cofactor expansion along the first row.

    det(A) = Σ_i (-1)^i · a[0, i] · det(M_0i)

where M_0i drops row 0 and column i. Base cases are n = 1 and the closed
2x2 formula. Cost is O(n!). This is the reference algorithm: any faster
replacement must reproduce its output, including on exact-zero rows.
"""

from __future__ import annotations

import warnings

from pymatrix.core.compute.tolerances import COFACTOR_WARNING_SIZE
from pymatrix.core.exceptions import EmptyMatrixError, NotSquareError
from pymatrix.matrix.design import Matrix


def check_square(a: Matrix) -> None:
    """Raise unless a is a non-empty square matrix."""
    if a.is_empty:
        raise EmptyMatrixError(
            "Invalid matrix for determinant calculation: matrix is empty",
            operation="determinant",
        )
    if a.n_rows != a.n_cols:
        raise NotSquareError(
            "Matrix must be square to calculate determinant: "
            f"got {a.n_rows}x{a.n_cols}",
            shape=a.shape,
        )


def warn_if_expensive(a: Matrix, stacklevel: int = 2) -> str | None:
    """
    Emit a RuntimeWarning when a is larger than COFACTOR_WARNING_SIZE.

    Returns the warning message, or None if no warning was issued.
    """
    if a.n_rows <= COFACTOR_WARNING_SIZE:
        return None
    msg = (
        f"determinant of a {a.n_rows}x{a.n_cols} matrix by cofactor "
        f"expansion is O(n!) and may be very slow"
    )
    warnings.warn(msg, RuntimeWarning, stacklevel=stacklevel + 1)
    return msg


def cofactor_determinant(a: Matrix) -> float:
    """Determinant of a non-empty square matrix."""
    check_square(a)
    return float(_expand(a.data.tolist()))


def _expand(rows: list[list[float]]) -> float:
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]

    det = 0.0
    for i in range(n):
        minor = [row[:i] + row[i + 1:] for row in rows[1:]]
        sign = 1.0 if i % 2 == 0 else -1.0
        det += sign * rows[0][i] * _expand(minor)
    return det
