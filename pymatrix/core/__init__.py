"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
matrix engine.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical policy constants
"""

from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleShapeError,
    NotSquareError,
    EmptyMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleShapeError",
    "NotSquareError",
    "EmptyMatrixError",
]
