"""
Square matrix module.

Fixed-size float32 square matrices with construction helpers, element
access, addition, subtraction and multiplication.

Public API:
    Matrix[n]             - Sized matrix type (zeros(), identity(), from_rows())
    zeros(n), identity(n) - Construction helpers
    from_rows(rows)       - Matrix from a row-major literal
    add, sub, multiply    - Binary operations (also +, -, @)
    calculate(a, b, op)   - Timed evaluation returning a CalculationSolution
    Operation             - MUL / ADD / SUB selector
    MatrixCalculator      - Headless two-operand calculator state
    format_matrix         - Text rendering
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.solution import CalculationParams, CalculationSolution
from pymatrix.matrix.operations import (
    Operation,
    zeros,
    identity,
    from_rows,
    add,
    sub,
    multiply,
    calculate,
)
from pymatrix.matrix.calculator import MatrixCalculator
from pymatrix.matrix.formatting import format_matrix, format_expression

__all__ = [
    "Matrix",
    "Operation",
    "zeros",
    "identity",
    "from_rows",
    "add",
    "sub",
    "multiply",
    "calculate",
    "MatrixCalculator",
    "CalculationParams",
    "CalculationSolution",
    "format_matrix",
    "format_expression",
]
