"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
matrix module.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Storage dtype, reference size, non-finite counting
    timing: Execution timing
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    MatrixIndexError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "MatrixIndexError",
]
