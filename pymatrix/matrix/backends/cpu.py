"""
CPU reference backend for square matrix arithmetic.

All kernels take two float32 arrays of identical shape (n, n) and return
a freshly allocated float32 array. Inputs are never written to. Overflow
and invalid operations propagate inf/NaN under IEEE-754 rules without
emitting RuntimeWarnings.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.precision import DTYPE


class CPUMatrixBackend:
    """CPU reference backend for float32 square matrices."""

    @property
    def name(self) -> str:
        return 'cpu_float32'

    def add(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """Element-wise sum: out[i, j] = a[i, j] + b[i, j]."""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.add(a, b, dtype=DTYPE)

    def sub(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """Element-wise difference: out[i, j] = a[i, j] - b[i, j]."""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.subtract(a, b, dtype=DTYPE)

    def matmul(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """
        Matrix product: out[row, col] = sum_k a[row, k] * b[k, col].

        Plain float32 product; n is small so no blocking is attempted.
        """
        with np.errstate(over='ignore', invalid='ignore'):
            return np.matmul(a, b, dtype=DTYPE)
