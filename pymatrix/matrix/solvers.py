"""
Public entry points for the matrix engine.

Provides one function per operation, each returning a new Matrix (or a
float for determinant), plus compute() which dispatches on an Operation
and returns a MatrixSolution with timing and diagnostics.

Every function accepts array-likes or Matrix values and never mutates
its inputs.
"""

from __future__ import annotations

from typing import Literal

from numpy.typing import ArrayLike

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import Backend
from pymatrix.matrix.design import Matrix
from pymatrix.matrix.solution import MatrixSolution
from pymatrix.matrix.backends.cpu import CPUMatrixBackend
from pymatrix.matrix._common import MatrixParams, Operation
from pymatrix.matrix._arithmetic import (
    add_matrices, subtract_matrices, multiply_matrices, transpose_matrix,
)
from pymatrix.matrix._determinant import (
    check_square, cofactor_determinant, warn_if_expensive,
)
from pymatrix.matrix._rref import gauss_jordan


MatrixLike = ArrayLike | Matrix
BackendChoice = Literal['cpu']


def _ensure_matrix(data: MatrixLike, name: str) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix.from_array(data, name=name)


def _get_backend(backend: BackendChoice) -> Backend[MatrixParams]:
    """Select backend by name. Only the CPU reference backend exists."""
    if backend == 'cpu':
        return CPUMatrixBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def add(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Elementwise sum a + b.

    Raises
    ------
    DimensionMismatchError
        If the shapes differ or either matrix is empty.
    """
    return add_matrices(_ensure_matrix(a, "a"), _ensure_matrix(b, "b"))


def subtract(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Elementwise difference a - b.

    Raises
    ------
    DimensionMismatchError
        If the shapes differ or either matrix is empty.
    """
    return subtract_matrices(_ensure_matrix(a, "a"), _ensure_matrix(b, "b"))


def multiply(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Matrix product a @ b, shape rows(a) x cols(b).

    Raises
    ------
    EmptyMatrixError
        If either matrix is empty.
    IncompatibleShapeError
        If cols(a) != rows(b).
    """
    return multiply_matrices(_ensure_matrix(a, "a"), _ensure_matrix(b, "b"))


def transpose(a: MatrixLike) -> Matrix:
    """Transpose; the empty matrix transposes to itself."""
    return transpose_matrix(_ensure_matrix(a, "a"))


def determinant(a: MatrixLike) -> float:
    """
    Determinant by recursive cofactor expansion along the first row.

    Cost grows as n!; matrices larger than COFACTOR_WARNING_SIZE emit a
    RuntimeWarning first.

    Returns
    -------
    float
        A plain scalar. compute('determinant', a).as_matrix() gives the
        1x1 matrix form.

    Raises
    ------
    EmptyMatrixError
        If a has no rows.
    NotSquareError
        If a is not square.
    """
    matrix = _ensure_matrix(a, "a")
    check_square(matrix)
    warn_if_expensive(matrix, stacklevel=2)
    return cofactor_determinant(matrix)


def rref(a: MatrixLike) -> Matrix:
    """
    Reduced Row Echelon Form via Gauss-Jordan with partial pivoting.

    Cells of the result are rounded half-up to 3 decimal places. Singular
    and rank-deficient input is not an error; it yields zero rows at the
    bottom. The empty matrix reduces to itself.
    """
    reduced, _ = gauss_jordan(_ensure_matrix(a, "a"))
    return reduced


def compute(
    operation: Operation | str,
    a: MatrixLike,
    b: MatrixLike | None = None,
    *,
    backend: BackendChoice = 'cpu',
) -> MatrixSolution:
    """
    Run a named operation and return a MatrixSolution.

    Parameters
    ----------
    operation : Operation or str
        One of 'add', 'subtract', 'multiply', 'transpose', 'determinant',
        'rref' (case-insensitive), or an Operation member.
    a : array-like or Matrix
        First (or only) operand.
    b : array-like or Matrix, optional
        Second operand; required for add, subtract and multiply and
        ignored by the unary operations.
    backend : {'cpu'}
        Backend that runs the operation.

    Returns
    -------
    MatrixSolution
        as_matrix() gives the result grid, with determinant wrapped as 1x1.

    Raises
    ------
    ValidationError
        Unknown operation or backend, missing second operand, or invalid
        matrix input.
    DimensionMismatchError, IncompatibleShapeError, NotSquareError, EmptyMatrixError
        Propagated from the operation.
    """
    op = Operation.parse(operation)
    matrix_a = _ensure_matrix(a, "a")
    matrix_b = None
    if op.is_binary:
        if b is None:
            raise ValidationError(
                f"Operation '{op.value}' requires two operands (b is missing)"
            )
        matrix_b = _ensure_matrix(b, "b")

    be = _get_backend(backend)
    result = be.solve(op, matrix_a, matrix_b)
    return MatrixSolution(_result=result)
