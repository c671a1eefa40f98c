"""
Common types for the matrix engine.

Defines the Operation selector and the MatrixParams payload carried in
Result envelopes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pymatrix.core.exceptions import ValidationError
from pymatrix.matrix.design import Matrix


class Operation(Enum):
    """Closed set of operations the engine dispatches."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    TRANSPOSE = "transpose"
    DETERMINANT = "determinant"
    RREF = "rref"

    @property
    def is_binary(self) -> bool:
        return self in _BINARY

    @classmethod
    def parse(cls, value: Operation | str) -> Operation:
        """Accept a member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError(
            f"Unknown operation: {value!r}. "
            f"Supported: {[op.value for op in cls]}"
        )


_BINARY = frozenset({Operation.ADD, Operation.SUBTRACT, Operation.MULTIPLY})


@dataclass(frozen=True)
class MatrixParams:
    """
    Parameter payload for a dispatched operation.

    Attributes
    ----------
    operation : Operation
        The operation that produced this payload.
    matrix : Matrix or None
        Result grid; None for determinant.
    value : float or None
        Scalar result; set only for determinant.
    pivot_columns : tuple of int or None
        Pivot column indices found by RREF, None for other operations.
    """
    operation: Operation
    matrix: Matrix | None = None
    value: float | None = None
    pivot_columns: tuple[int, ...] | None = None
