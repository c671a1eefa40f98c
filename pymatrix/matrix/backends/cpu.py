"""
CPU reference backend for the matrix engine.

Dispatches an Operation to its kernel, times it, and packages the outcome
in a Result envelope.
"""

from __future__ import annotations

from typing import Any

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import ValidationError
from pymatrix.matrix.design import Matrix
from pymatrix.matrix._common import MatrixParams, Operation
from pymatrix.matrix._arithmetic import (
    add_matrices, subtract_matrices, multiply_matrices, transpose_matrix,
)
from pymatrix.matrix._determinant import (
    check_square, cofactor_determinant, warn_if_expensive,
)
from pymatrix.matrix._rref import gauss_jordan


_BINARY_KERNELS = {
    Operation.ADD: add_matrices,
    Operation.SUBTRACT: subtract_matrices,
    Operation.MULTIPLY: multiply_matrices,
}


class CPUMatrixBackend:
    """CPU reference backend for matrix operations."""

    @property
    def name(self) -> str:
        return 'cpu_reference'

    def solve(
        self,
        operation: Operation,
        a: Matrix,
        b: Matrix | None = None,
    ) -> Result[MatrixParams]:
        """
        Run one operation.

        Parameters
        ----------
        operation : Operation
        a : Matrix
            First (or only) operand.
        b : Matrix or None
            Second operand; required for binary operations, ignored otherwise.
        """
        warnings_list: list[str] = []
        info: dict[str, Any] = {'operation': operation.value}

        if operation.is_binary:
            if b is None:
                raise ValidationError(
                    f"Operation '{operation.value}' requires two operands (b is missing)"
                )
            info['input_shapes'] = (a.shape, b.shape)
        else:
            info['input_shapes'] = (a.shape,)

        matrix: Matrix | None = None
        value: float | None = None
        pivot_columns: tuple[int, ...] | None = None

        with Timer() as timer, timer.section(operation.value):
            if operation.is_binary:
                matrix = _BINARY_KERNELS[operation](a, b)
            elif operation is Operation.TRANSPOSE:
                matrix = transpose_matrix(a)
            elif operation is Operation.DETERMINANT:
                check_square(a)
                # caller -> compute() -> solve()
                msg = warn_if_expensive(a, stacklevel=3)
                if msg is not None:
                    warnings_list.append(msg)
                value = cofactor_determinant(a)
                info['method'] = 'cofactor_expansion'
            elif operation is Operation.RREF:
                matrix, pivot_columns = gauss_jordan(a)
                info['rank'] = len(pivot_columns)
                info['pivot_columns'] = pivot_columns
            else:
                raise ValidationError(f"Operation '{operation.value}' not implemented")

        info['output_shape'] = matrix.shape if matrix is not None else (1, 1)

        return Result(
            params=MatrixParams(
                operation=operation,
                matrix=matrix,
                value=value,
                pivot_columns=pivot_columns,
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
