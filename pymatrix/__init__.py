"""
PyMatrix: a small dense matrix engine for Python.

Arithmetic, transpose, determinant and Reduced Row Echelon Form over
immutable float64 matrices, with strict shape validation and typed errors.

Submodules:
    core: Exceptions, Result envelope, validation, timing, tolerances
    matrix: Matrix value type and the engine operations
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleShapeError,
    NotSquareError,
    EmptyMatrixError,
)
from pymatrix.matrix import (
    Matrix,
    Dimensions,
    Operation,
    MatrixSolution,
    add,
    subtract,
    multiply,
    transpose,
    determinant,
    rref,
    compute,
    zeros,
)

__all__ = [
    "__version__",
    # Engine
    "Matrix",
    "Dimensions",
    "Operation",
    "MatrixSolution",
    "add",
    "subtract",
    "multiply",
    "transpose",
    "determinant",
    "rref",
    "compute",
    "zeros",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleShapeError",
    "NotSquareError",
    "EmptyMatrixError",
]
