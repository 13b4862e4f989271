"""
Matrix: fixed-size square matrix value type.

The size N is bound to the class, not the instance. ``Matrix[n]`` returns
a cached subclass whose every instance is n x n, so two matrices are
compatible operands exactly when they are instances of the same class.
Storage is a row-major float32 array owned by the instance.

Construction:
    Matrix[4]()                      # zeros
    Matrix[4].identity()
    Matrix[2].from_rows([[1, 2], [3, 4]])
    Matrix.from_rows([[1, 2], [3, 4]])   # size inferred -> Matrix[2]

Arithmetic (each returns a new matrix, operands untouched):
    a + b, a - b, a @ b
    a.add(b), a.sub(b), a.multiply(b)
"""

from __future__ import annotations

import threading
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.precision import DTYPE
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_index,
    check_scalar,
    check_size,
    check_square,
)
from pymatrix.matrix.backends.cpu import CPUMatrixBackend
from pymatrix.matrix.formatting import format_scalar


_BACKEND = CPUMatrixBackend()


_SIZED_CLASSES: dict[int, type[Matrix]] = {}
_SIZED_CLASSES_LOCK = threading.Lock()


def _sized_class(size: int) -> type[Matrix]:
    """Return the Matrix subclass bound to ``size``, creating it once."""
    cls = _SIZED_CLASSES.get(size)
    if cls is not None:
        return cls
    with _SIZED_CLASSES_LOCK:
        # Another thread may have created it while we waited
        cls = _SIZED_CLASSES.get(size)
        if cls is None:
            cls = type(
                f"Matrix{size}",
                (Matrix,),
                {'size': size, '__slots__': (), '__module__': __name__},
            )
            _SIZED_CLASSES[size] = cls
        return cls


class Matrix:
    """
    Square N x N matrix of float32 values.

    Do not instantiate the base class directly; bind a size first with
    ``Matrix[n]``. Instances are mutable only through indexed write
    (``m[row, col] = value``) and are therefore unhashable.

    Attributes:
        size: N, bound on the sized subclass (None on the base class)
    """
    __slots__ = ('_data',)
    __hash__ = None
    # Make numpy defer mixed operators (ndarray @ Matrix) so they raise TypeError
    __array_ufunc__ = None

    size: int | None = None

    def __class_getitem__(cls, size: int) -> type[Matrix]:
        if cls.size is not None:
            raise ValidationError(
                f"Matrix[{cls.size}] is already sized; use Matrix[{size!r}]"
            )
        return _sized_class(check_size(size))

    def __init__(self) -> None:
        n = type(self)._bound_size()
        self._data = np.zeros((n, n), dtype=DTYPE)

    # --- Construction ---

    @classmethod
    def _bound_size(cls) -> int:
        if cls.size is None:
            raise ValidationError(
                "Matrix size is not bound; use Matrix[n] to select a size"
            )
        return cls.size

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Matrix:
        """Build an instance that takes ownership of ``data``."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def zeros(cls) -> Matrix:
        """N x N matrix with every element 0.0."""
        return cls()

    @classmethod
    def identity(cls) -> Matrix:
        """N x N matrix with 1.0 on the main diagonal and 0.0 elsewhere."""
        return cls._wrap(np.eye(cls._bound_size(), dtype=DTYPE))

    @classmethod
    def from_rows(cls, rows: ArrayLike | Matrix) -> Matrix:
        """
        Build a matrix from a row-major N x N literal.

        Parameters
        ----------
        rows : array-like or Matrix
            Nested sequence or 2D array. Values are copied and stored as
            float32. On the unsized base class the size is taken from the
            literal.

        Raises
        ------
        ValidationError
            If the literal is non-numeric or ragged.
        DimensionError
            If the literal is not a square 2D grid, or its size differs
            from the bound size.
        """
        if isinstance(rows, Matrix):
            rows = rows._data

        data = check_array(rows, "rows")
        check_2d(data, "rows")
        check_square(data, "rows")

        n = data.shape[0]
        if cls.size is None:
            cls = _sized_class(n)
        elif n != cls.size:
            raise DimensionError(
                f"rows: expected a {cls.size}x{cls.size} literal, got shape {data.shape}",
                expected=(cls.size, cls.size),
                actual=data.shape,
            )

        with np.errstate(over='ignore'):
            return cls._wrap(np.array(data, dtype=DTYPE))

    # --- Element access ---

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = check_index(key, self._data.shape[0])
        return float(self._data[row, col])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = check_index(key, self._data.shape[0])
        scalar = check_scalar(value, "value")
        with np.errstate(over='ignore'):
            self._data[row, col] = scalar

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        """Iterate over rows as tuples of floats."""
        for row in self._data.tolist():
            yield tuple(row)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if type(other) is not type(self):
            return False
        # Exact IEEE comparison: NaN never equals NaN
        return bool(np.array_equal(self._data, other._data))

    # --- Arithmetic ---

    def _operand(self, other: Any, op: str) -> NDArray[np.floating[Any]]:
        """Return the other operand's storage after checking it matches."""
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"{op}: expected a Matrix operand, got {type(other).__name__}"
            )
        if type(other) is not type(self):
            raise DimensionError(
                f"{op}: operand sizes differ ({self.size}x{self.size} vs "
                f"{other.size}x{other.size})",
                expected=self.size,
                actual=other.size,
            )
        return other._data

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum ``self + other``."""
        rhs = self._operand(other, "add")
        return self._wrap(_BACKEND.add(self._data, rhs))

    def sub(self, other: Matrix) -> Matrix:
        """Element-wise difference ``self - other``."""
        rhs = self._operand(other, "sub")
        return self._wrap(_BACKEND.sub(self._data, rhs))

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product ``self @ other``."""
        rhs = self._operand(other, "multiply")
        return self._wrap(_BACKEND.matmul(self._data, rhs))

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # --- Conversion ---

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    def copy(self) -> Matrix:
        """Independent copy of this matrix."""
        return self._wrap(self._data.copy())

    def to_array(self) -> NDArray[np.floating[Any]]:
        """float32 array copy, shape (N, N)."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        """Rows as nested lists of Python floats."""
        return self._data.tolist()

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(format_scalar(v, trim='0') for v in row) + "]"
            for row in self._data
        )
        return f"Matrix[{self._data.shape[0]}]([{rows}])"
