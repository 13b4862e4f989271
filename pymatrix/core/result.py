"""
Generic result container for PyMatrix computations.

The Result class provides a standardized envelope for calculation results.
This enables shared tooling for timing and diagnostics while allowing each
module to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (operation, size)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The module-specific parameter payload type

    Attributes:
        params: Module-specific payload (result matrix, operands)
        info: Structured metadata (operation, symbol, size)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=CalculationParams(matrix=c, left=a, right=b),
        ...     info={'operation': 'mul', 'symbol': '×', 'size': 4},
        ...     timing={'total_seconds': 1e-5, 'matmul': 8e-6},
        ...     backend_name='cpu_float32'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
