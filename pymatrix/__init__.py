"""
PyMatrix: fixed-size square matrix arithmetic for Python.

Small N x N float32 matrices with exact, predictable semantics:
construction (zero, identity, literal), element access, and the
operations addition, subtraction and multiplication.

Submodules:
    matrix: Matrix value type, operations and calculator state
    core: Exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from pymatrix import matrix
from pymatrix.matrix import (
    Matrix,
    Operation,
    MatrixCalculator,
    zeros,
    identity,
    from_rows,
    add,
    sub,
    multiply,
    calculate,
)

__all__ = [
    "__version__",
    "matrix",
    "Matrix",
    "Operation",
    "MatrixCalculator",
    "zeros",
    "identity",
    "from_rows",
    "add",
    "sub",
    "multiply",
    "calculate",
]
