"""
MatrixCalculator: headless state for an interactive matrix calculator.

Holds two operands, the selected operation and the current result. Every
mutation recomputes the result, so ``calc.result`` is always
``calc.operation.apply(calc.left, calc.right)``. A presentation layer
only has to forward edits and render ``result``.
"""

from __future__ import annotations

from typing import Literal

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.precision import REFERENCE_SIZE
from pymatrix.core.validation import check_size
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.operations import Operation, calculate
from pymatrix.matrix.solution import CalculationSolution


Side = Literal['left', 'right']


class MatrixCalculator:
    """
    Two-operand calculator over ``Matrix[size]``.

    Starts as identity x identity. The calculator owns its operands:
    setters store copies and getters return copies.
    """

    def __init__(
        self,
        size: int = REFERENCE_SIZE,
        operation: Operation | str = Operation.MUL,
    ):
        self._cls = Matrix[check_size(size)]
        self._operands: dict[str, Matrix] = {
            'left': self._cls.identity(),
            'right': self._cls.identity(),
        }
        self._operation = Operation.from_symbol(operation)
        self._solution: CalculationSolution | None = None
        self.recalc()

    @property
    def size(self) -> int:
        return self._cls.size

    @property
    def left(self) -> Matrix:
        return self._operands['left'].copy()

    @property
    def right(self) -> Matrix:
        return self._operands['right'].copy()

    @property
    def operation(self) -> Operation:
        return self._operation

    @property
    def result(self) -> Matrix:
        return self._solution.matrix.copy()

    @property
    def last_solution(self) -> CalculationSolution:
        return self._solution

    @staticmethod
    def operations() -> list[Operation]:
        """Selectable operations in display order."""
        return list(Operation)

    def recalc(self) -> Matrix:
        """Recompute the result from the current state."""
        self._solution = calculate(
            self._operands['left'], self._operands['right'], self._operation
        )
        return self.result

    # --- Mutators ---

    def _side(self, side: str) -> str:
        if side not in self._operands:
            raise ValidationError(f"side: expected 'left' or 'right', got {side!r}")
        return side

    def set_matrix(self, side: Side, matrix: Matrix) -> Matrix:
        """Replace one operand with a copy of ``matrix``."""
        side = self._side(side)
        if not isinstance(matrix, Matrix):
            raise ValidationError(
                f"{side}: expected a Matrix, got {type(matrix).__name__}"
            )
        if type(matrix) is not self._cls:
            raise DimensionError(
                f"{side}: expected a {self.size}x{self.size} matrix, "
                f"got {matrix.size}x{matrix.size}",
                expected=self.size,
                actual=matrix.size,
            )
        self._operands[side] = matrix.copy()
        return self.recalc()

    def set_left(self, matrix: Matrix) -> Matrix:
        return self.set_matrix('left', matrix)

    def set_right(self, matrix: Matrix) -> Matrix:
        return self.set_matrix('right', matrix)

    def set_element(self, side: Side, row: int, col: int, value: float) -> Matrix:
        """Write one element of an operand."""
        self._operands[self._side(side)][row, col] = value
        return self.recalc()

    def set_operation(self, operation: Operation | str) -> Matrix:
        self._operation = Operation.from_symbol(operation)
        return self.recalc()

    def reset_zero(self, side: Side) -> Matrix:
        """Reset one operand to the zero matrix."""
        self._operands[self._side(side)] = self._cls.zeros()
        return self.recalc()

    def reset_identity(self, side: Side) -> Matrix:
        """Reset one operand to the identity matrix."""
        self._operands[self._side(side)] = self._cls.identity()
        return self.recalc()

    def render(self, precision: int | None = None) -> str:
        """Text layout of the current expression."""
        return self._solution.summary(precision=precision)

    def __repr__(self) -> str:
        return f"MatrixCalculator(size={self.size}, operation={self._operation.name})"
