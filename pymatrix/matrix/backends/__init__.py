"""Matrix engine backends."""

from pymatrix.matrix.backends.cpu import CPUMatrixBackend

__all__ = ["CPUMatrixBackend"]
