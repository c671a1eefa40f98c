"""
Matrix engine solution type.

Wraps the Result[MatrixParams] envelope with convenient accessors and a
uniform grid view of the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymatrix.core.result import Result
from pymatrix.matrix.design import Matrix
from pymatrix.matrix._common import MatrixParams, Operation


_TITLES = {
    Operation.ADD: "Addition (A + B)",
    Operation.SUBTRACT: "Subtraction (A - B)",
    Operation.MULTIPLY: "Multiplication (A x B)",
    Operation.TRANSPOSE: "Transpose (A^T)",
    Operation.DETERMINANT: "Determinant (det A)",
    Operation.RREF: "RREF (A)",
}


@dataclass
class MatrixSolution:
    """
    User-facing result of compute().

    Wraps Result[MatrixParams] and provides convenient accessors.
    """
    _result: Result[MatrixParams]

    @property
    def operation(self) -> Operation:
        return self._result.params.operation

    @property
    def matrix(self) -> Matrix | None:
        """Result grid; None for determinant."""
        return self._result.params.matrix

    @property
    def value(self) -> float | None:
        """Scalar result; set only for determinant."""
        return self._result.params.value

    def as_matrix(self) -> Matrix:
        """Result as a grid; a determinant is wrapped as a 1x1 matrix."""
        params = self._result.params
        if params.matrix is not None:
            return params.matrix
        return Matrix.from_array([[params.value]])

    @property
    def shape(self) -> tuple[int, int]:
        return self.as_matrix().shape

    @property
    def rank(self) -> int | None:
        """Number of pivots found by RREF, None for other operations."""
        return self._result.info.get('rank')

    @property
    def pivot_columns(self) -> tuple[int, ...] | None:
        return self._result.params.pivot_columns

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self, decimals: int = 2) -> str:
        """Plain-text rendering of the operation and its result."""
        lines = [_TITLES[self.operation]]
        if self.value is not None:
            lines.append(f"det = {self.value:.{decimals}f}")
        else:
            grid = self.as_matrix()
            lines.append(f"Result ({grid.n_rows}x{grid.n_cols}):")
            lines.append(grid.format(decimals))
        if self.rank is not None:
            lines.append(f"rank = {self.rank}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        rows, cols = self.shape
        return (
            f"MatrixSolution(operation={self.operation.value!r}, "
            f"shape=({rows}, {cols}), backend={self.backend_name!r})"
        )
