"""
Text rendering for chains and DP tables.
"""

import numpy as np
from typing import Sequence


def format_dimensions(dims: Sequence[int]) -> str:
    """
    Describe each matrix of the chain, one per line.

    For dims (d0, d1, d2) this gives:

        A-1 rows: d0, columns: d1.
        A-2 rows: d1, columns: d2.
    """
    lines = []
    for a in range(len(dims) - 1):
        lines.append(f"A-{a + 1} rows: {dims[a]}, columns: {dims[a + 1]}.")
    return "\n".join(lines)


def format_cost_table(table: np.ndarray, sentinel: str = "-") -> str:
    """
    Render an (n, n) DP table as aligned text.

    Parameters
    ----------
    table : ndarray (n, n)
        Cost (or split) table
    sentinel : str
        Shown for cells below the diagonal (j < i), which carry no value

    Returns
    -------
    text : str
        One row per line, cells right-aligned to a common width
    """
    n = table.shape[0]
    cells = [
        [sentinel if j < i else str(table[i, j]) for j in range(n)]
        for i in range(n)
    ]

    width = max((len(c) for row in cells for c in row), default=0)
    return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)


__all__ = ['format_dimensions', 'format_cost_table']
