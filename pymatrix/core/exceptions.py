"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: non-numeric
    literals, invalid matrix sizes, malformed index keys, unknown operators.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a literal is not square, when its size differs from the
    bound size of the target matrix type, or when the two operands of a
    binary operation have different sizes.

    Attributes:
        expected: Expected size or shape, if known
        actual: Actual size or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class MatrixIndexError(PyMatrixError, IndexError):
    """
    Element access outside the matrix bounds.

    Out-of-range access is a contract violation on the caller's side.
    Indices are never clamped or wrapped; negative indices are rejected.

    Attributes:
        row: Requested row index
        col: Requested column index
        size: Matrix size N (valid indices are 0..N-1)
    """

    def __init__(self, message: str, row: int, col: int, size: int):
        super().__init__(message)
        self.row = row
        self.col = col
        self.size = size
