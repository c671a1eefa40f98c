"""
Generic result container for PyMatrix computations.

The Result class provides a standardized envelope for every dispatched
operation. This enables shared tooling for timing, diagnostics and
rendering while each domain defines its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (operation, shapes, rank)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (result matrix, scalar value, ...)
        info: Structured metadata (operation, input/output shapes, rank)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=MatrixParams(operation=Operation.RREF, matrix=m),
        ...     info={'operation': 'rref', 'rank': 2},
        ...     timing={'total_seconds': 0.0001, 'rref': 0.00008},
        ...     backend_name='cpu_reference'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
