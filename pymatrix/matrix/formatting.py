"""
Text rendering for matrices.

Values are shown with the shortest representation that round-trips the
stored float32 value, unless a fixed number of decimals is requested.
"""

from __future__ import annotations

from typing import Any, Literal, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix
    from pymatrix.matrix.operations import Operation


Trim = Literal['k', '.', '0', '-']


def format_scalar(value: Any, precision: int | None = None, trim: Trim = '-') -> str:
    """
    Format a single float32 value.

    Parameters
    ----------
    value : float or np.float32
        Value to format.
    precision : int or None
        Fixed number of decimals. None uses the shortest round-trip form.
    trim : str
        Trailing-zero handling for the shortest form, as in
        ``numpy.format_float_positional``: '-' renders 1.0 as "1",
        '0' renders it as "1.0".
    """
    if precision is not None:
        return f"{float(value):.{precision}f}"
    return np.format_float_positional(np.float32(value), unique=True, trim=trim)


def _grid(m: Matrix, precision: int | None) -> list[str]:
    """Render rows with columns right-aligned to a common width."""
    cells = [[format_scalar(v, precision) for v in row] for row in m]
    width = max((len(c) for row in cells for c in row), default=0)
    return ["  ".join(c.rjust(width) for c in row) for row in cells]


def format_matrix(m: Matrix, precision: int | None = None) -> str:
    """
    Render a matrix as text, one row per line.

    Examples
    --------
    >>> print(format_matrix(Matrix.from_rows([[1, 0.5], [-3, 4]])))
      1  0.5
     -3    4
    """
    return "\n".join(_grid(m, precision))


def format_expression(
    left: Matrix,
    operation: Operation | str,
    right: Matrix,
    result: Matrix,
    precision: int | None = None,
) -> str:
    """
    Lay out ``left <op> right = result`` as side-by-side grids.

    The operator and the equals sign are placed on the middle row.
    """
    blocks = [_grid(m, precision) for m in (left, right, result)]
    n = len(blocks[0])
    if n == 0:
        return f"[] {operation} [] = []"

    widths = [max(len(line) for line in block) for block in blocks]
    symbol = str(operation)
    middle = (n - 1) // 2

    lines = []
    for i in range(n):
        op_col = symbol if i == middle else " " * len(symbol)
        eq_col = "=" if i == middle else " "
        l, r, res = (block[i].ljust(w) for block, w in zip(blocks, widths))
        lines.append(f"{l}  {op_col}  {r}  {eq_col}  {res}".rstrip())
    return "\n".join(lines)
