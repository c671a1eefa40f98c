"""
Dense matrix engine.

Pure operations over small immutable matrices of float64 values.

Public API:
    add(a, b)            - Elementwise sum
    subtract(a, b)       - Elementwise difference
    multiply(a, b)       - Matrix product
    transpose(a)         - Transpose
    determinant(a)       - Determinant (cofactor expansion)
    rref(a)              - Reduced Row Echelon Form
    compute(op, a, b)    - Dispatch by Operation, returns MatrixSolution
    zeros(rows, cols)    - Zero-filled matrix
"""

from pymatrix.matrix.design import Matrix, Dimensions, zeros
from pymatrix.matrix._common import Operation, MatrixParams
from pymatrix.matrix.solution import MatrixSolution
from pymatrix.matrix.solvers import (
    add, subtract, multiply, transpose, determinant, rref, compute,
)

__all__ = [
    "add",
    "subtract",
    "multiply",
    "transpose",
    "determinant",
    "rref",
    "compute",
    "zeros",
    "Matrix",
    "Dimensions",
    "Operation",
    "MatrixParams",
    "MatrixSolution",
]
