"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape errors raised by the matrix operations are
DimensionError subclasses so callers can catch every shape problem at once.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected shapes
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    cells, unknown operation, missing operand, invalid dimensions).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input is not a rectangular 2D grid (ragged rows,
    rows without columns, wrong number of axes).
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operands of an elementwise operation have different shapes.

    Raised by add/subtract when the row or column counts differ, including
    the case where either operand is empty.

    Attributes:
        operation: Operation value that was attempted ('add' or 'subtract')
        left_shape: Shape of the first operand
        right_shape: Shape of the second operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IncompatibleShapeError(DimensionError):
    """
    Operands of a matrix product do not conform.

    Raised by multiply when columns(a) != rows(b).

    Attributes:
        left_shape: Shape of the left factor
        right_shape: Shape of the right factor
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Matrix is not square.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class EmptyMatrixError(ValidationError):
    """
    Operation requires at least one row but received the empty matrix.

    Attributes:
        operation: Name of the operation that was attempted
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
