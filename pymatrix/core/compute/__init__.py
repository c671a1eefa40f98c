"""
Shared compute infrastructure for PyMatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical policy constants and comparison tiers
"""

from pymatrix.core.compute.timing import Timer

__all__ = [
    "Timer",
]
