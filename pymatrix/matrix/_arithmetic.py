"""
Elementwise arithmetic, matrix product and transpose.

Shape checks happen here, before any computation, so a failing call never
produces a partial result.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.exceptions import (
    DimensionMismatchError, EmptyMatrixError, IncompatibleShapeError,
)
from pymatrix.matrix.design import Matrix
from pymatrix.matrix._common import Operation


_NOUNS = {Operation.ADD: "addition", Operation.SUBTRACT: "subtraction"}


def _check_same_shape(a: Matrix, b: Matrix, operation: Operation) -> None:
    if a.is_empty or b.is_empty or a.shape != b.shape:
        raise DimensionMismatchError(
            f"Matrices must have the same dimensions for {_NOUNS[operation]}: "
            f"got {a.n_rows}x{a.n_cols} and {b.n_rows}x{b.n_cols}",
            operation=operation.value,
            left_shape=a.shape,
            right_shape=b.shape,
        )


def add_matrices(a: Matrix, b: Matrix) -> Matrix:
    """Elementwise a + b."""
    _check_same_shape(a, b, Operation.ADD)
    return Matrix._build(a.data + b.data, "result")


def subtract_matrices(a: Matrix, b: Matrix) -> Matrix:
    """Elementwise a - b."""
    _check_same_shape(a, b, Operation.SUBTRACT)
    return Matrix._build(a.data - b.data, "result")


def multiply_matrices(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product by the textbook triple loop.

    Each cell accumulates a[i, k] * b[k, j] for k = 0, 1, ... starting
    from 0.0, so results are reproducible bit-for-bit across platforms
    (BLAS is free to reorder the sum).
    """
    for operand, label in ((a, "first"), (b, "second")):
        if operand.is_empty:
            raise EmptyMatrixError(
                f"Multiplication requires non-empty matrices; the {label} matrix is empty",
                operation="multiply",
            )
    if a.n_cols != b.n_rows:
        raise IncompatibleShapeError(
            "Number of columns in first matrix must equal number of rows in second matrix: "
            f"got {a.n_rows}x{a.n_cols} and {b.n_rows}x{b.n_cols}",
            left_shape=a.shape,
            right_shape=b.shape,
        )

    left = a.data.tolist()
    right = b.data.tolist()
    inner = b.n_rows
    out = np.zeros((a.n_rows, b.n_cols), dtype=np.float64)
    for i in range(a.n_rows):
        for j in range(b.n_cols):
            total = 0.0
            for k in range(inner):
                total += left[i][k] * right[k][j]
            out[i, j] = total
    return Matrix._build(out, "result")


def transpose_matrix(a: Matrix) -> Matrix:
    """Swap rows and columns; the empty matrix transposes to itself."""
    if a.is_empty:
        return a
    return Matrix._build(a.data.T.copy(), "result")
