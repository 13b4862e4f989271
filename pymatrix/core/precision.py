"""
Numerical precision constants and utilities.

Single source of truth for the storage dtype and the reference matrix
size. All matrices hold IEEE-754 single-precision values; non-finite
values are never rejected, only counted for diagnostics.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Storage and arithmetic dtype for every matrix
DTYPE = np.float32

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

# Default matrix size used by the calculator (4x4 transform matrices)
REFERENCE_SIZE: int = 4


def count_non_finite(array: NDArray[np.floating[Any]]) -> tuple[int, int]:
    """
    Count NaN and Inf entries.

    Args:
        array: Array to inspect

    Returns:
        (n_nan, n_inf)
    """
    n_nan = int(np.sum(np.isnan(array)))
    n_inf = int(np.sum(np.isinf(array)))
    return n_nan, n_inf
