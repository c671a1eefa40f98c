"""
Core protocols for PyMatrix.

We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look like one to be used by the dispatcher.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve the payload type through dispatch
"""

from typing import Protocol, TypeVar, Any, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.core.result import Result

P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[P]):
    """
    Protocol for computational backends.

    A backend takes an operation and its validated operands and produces a
    Result envelope. Backends are stateless: every call is independent, so
    one instance may serve any number of callers.

    Type Parameters:
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Example: 'cpu_reference'
        """
        ...

    def solve(self, operation: Any, a: Any, b: Any = None) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            operation: The operation selector
            a: First (or only) operand
            b: Second operand for binary operations

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If the operands are invalid for the operation
        """
        ...
