"""
Calculation solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pymatrix.core.result import Result
from pymatrix.matrix.formatting import format_expression

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix
    from pymatrix.matrix.operations import Operation


@dataclass(frozen=True)
class CalculationParams:
    """
    Parameter payload for a binary matrix calculation.

    The operands are snapshots taken when the calculation ran, so later
    writes to the caller's matrices do not alter the record.
    """
    matrix: 'Matrix'
    left: 'Matrix'
    right: 'Matrix'


@dataclass
class CalculationSolution:
    """
    User-facing calculation result.

    Wraps Result[CalculationParams] and provides convenient accessors.
    """
    _result: Result[CalculationParams]

    @property
    def matrix(self) -> 'Matrix':
        """The computed matrix."""
        return self._result.params.matrix

    @property
    def left(self) -> 'Matrix':
        return self._result.params.left

    @property
    def right(self) -> 'Matrix':
        return self._result.params.right

    @property
    def operation(self) -> 'Operation':
        return self._result.info['operation']

    @property
    def size(self) -> int:
        return self._result.info['size']

    @property
    def has_non_finite(self) -> bool:
        """True if the result holds any NaN or Inf."""
        return self._result.info['n_nan'] + self._result.info['n_inf'] > 0

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self, precision: int | None = None) -> str:
        """Expression header followed by the side-by-side layout."""
        n = self.size
        lines = [
            f"Matrix calculation ({n}x{n}, {self.operation.name.lower()})",
            format_expression(
                self.left, self.operation, self.right, self.matrix,
                precision=precision,
            ),
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        n = self.size
        return (
            f"CalculationSolution(size={n}, operation={self.operation.name}, "
            f"backend={self.backend_name!r})"
        )
