"""
Operation dispatch for matrix arithmetic.

Provides the Operation enum used to select among the three binary
operations, free-function forms of construction and arithmetic, and
calculate() as the timed entry point returning a CalculationSolution.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.precision import count_non_finite
from pymatrix.core.result import Result
from pymatrix.core.timing import timed
from pymatrix.core.validation import check_size
from pymatrix.matrix.backends.cpu import CPUMatrixBackend
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.solution import CalculationParams, CalculationSolution


class Operation(Enum):
    """
    Binary matrix operation, valued by its display symbol.

    Members iterate in display order: multiply, add, subtract.
    """
    MUL = '×'
    ADD = '+'
    SUB = '−'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def kernel(self) -> str:
        """Name of the backend kernel implementing this operation."""
        return _KERNELS[self]

    @classmethod
    def from_symbol(cls, text: str) -> Operation:
        """
        Look up an operation by symbol or name.

        Accepts the display symbols, the ASCII forms ``* x + -`` and the
        member names in any case.
        """
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            raise ValidationError(
                f"operation: expected a str or Operation, got {type(text).__name__}"
            )
        key = text.strip()
        op = _ALIASES.get(key) or _ALIASES.get(key.lower())
        if op is None:
            valid = ", ".join(repr(s) for s in _ALIASES)
            raise ValidationError(f"operation: unknown {text!r}, expected one of {valid}")
        return op

    def apply(self, left: Matrix, right: Matrix) -> Matrix:
        """Evaluate ``left <op> right``."""
        if self is Operation.MUL:
            return multiply(left, right)
        if self is Operation.ADD:
            return add(left, right)
        return sub(left, right)


_KERNELS = {
    Operation.MUL: 'matmul',
    Operation.ADD: 'add',
    Operation.SUB: 'sub',
}

_ALIASES = {
    '×': Operation.MUL,
    '*': Operation.MUL,
    'x': Operation.MUL,
    'mul': Operation.MUL,
    '+': Operation.ADD,
    'add': Operation.ADD,
    '−': Operation.SUB,
    '-': Operation.SUB,
    'sub': Operation.SUB,
}


# --- Construction ---

def zeros(n: int) -> Matrix:
    """n x n matrix of zeros."""
    return Matrix[check_size(n)].zeros()


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    return Matrix[check_size(n)].identity()


def from_rows(rows: ArrayLike, size: int | None = None) -> Matrix:
    """
    Matrix from a row-major literal.

    Parameters
    ----------
    rows : array-like
        Square 2D grid of numbers.
    size : int, optional
        Required size. If None, taken from the literal.
    """
    if size is None:
        return Matrix.from_rows(rows)
    return Matrix[check_size(size)].from_rows(rows)


# --- Arithmetic ---

def _check_left(left: Any, op: str) -> None:
    if not isinstance(left, Matrix):
        raise ValidationError(
            f"{op}: expected a Matrix operand, got {type(left).__name__}"
        )


def add(left: Matrix, right: Matrix) -> Matrix:
    """Element-wise sum."""
    _check_left(left, "add")
    return left.add(right)


def sub(left: Matrix, right: Matrix) -> Matrix:
    """Element-wise difference."""
    _check_left(left, "sub")
    return left.sub(right)


def multiply(left: Matrix, right: Matrix) -> Matrix:
    """Matrix product."""
    _check_left(left, "multiply")
    return left.multiply(right)


def calculate(
    left: Matrix,
    right: Matrix,
    operation: Operation | str = Operation.MUL,
) -> CalculationSolution:
    """
    Evaluate ``left <operation> right`` and record how it went.

    Parameters
    ----------
    left, right : Matrix
        Operands of the same size.
    operation : Operation or str
        Operation member, or a symbol accepted by Operation.from_symbol.

    Returns
    -------
    CalculationSolution holding the result matrix, operand snapshots,
    timing, and a warning if the result contains NaN or Inf.

    Raises
    ------
    ValidationError
        If an operand is not a Matrix or the operation is unknown.
    DimensionError
        If the operands differ in size.
    """
    op = Operation.from_symbol(operation)

    with timed() as timer:
        with timer.section(op.kernel):
            matrix = op.apply(left, right)

    n_nan, n_inf = count_non_finite(matrix.to_array())
    warnings_list: list[str] = []
    if n_nan or n_inf:
        warnings_list.append(f"result contains {n_nan} NaN, {n_inf} Inf")

    result = Result(
        params=CalculationParams(
            matrix=matrix,
            left=left.copy(),
            right=right.copy(),
        ),
        info={
            'operation': op,
            'symbol': op.symbol,
            'size': matrix.size,
            'n_nan': n_nan,
            'n_inf': n_inf,
        },
        timing=timer.result(),
        backend_name=CPUMatrixBackend().name,
        warnings=tuple(warnings_list),
    )
    return CalculationSolution(_result=result)
