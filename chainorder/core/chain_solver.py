"""
Matrix Chain Solver.

Finds the multiplication order of a matrix chain that minimizes the number
of scalar multiplications. Bottom-up dynamic programming over subchains of
increasing length, O(n^3) time and O(n^2) space.
"""

import numbers
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from chainorder.core.errors import (
    InvalidInputShape,
    NonPositiveDimension,
    NonIntegerDimension,
)


# Marks cost-table cells with j < i. Never read by the fill.
LOWER_SENTINEL = -1

_INT64_MAX = np.iinfo(np.int64).max


@dataclass
class ChainResult:
    """Outcome of a single solve."""
    min_cost: int                   # Minimum scalar multiplications
    order: Optional[str]            # e.g. "((A1 * A2) * A3)"
    dims: List[int]                 # Validated dimension sequence
    cost_table: np.ndarray          # M[i, j], sentinel below the diagonal
    split_table: np.ndarray         # K[i, j], meaningful for i < j

    @property
    def n_matrices(self) -> int:
        return len(self.dims) - 1


class ChainSolver:
    """
    Dynamic-programming solver for the matrix chain ordering problem.

    Algorithm:
        1. Validate the dimension sequence
        2. Fill cost and split tables by increasing chain length
        3. Rebuild the optimal parenthesization from the split table
    """

    def __init__(self, verbose: bool = False):
        """
        Parameters
        ----------
        verbose : bool
            Print progress
        """
        self.verbose = verbose

    def _print(self, msg: str):
        """Print if verbose."""
        if self.verbose:
            print(f"[CHAINORDER] {msg}")

    @staticmethod
    def validate(dims: Sequence) -> List[int]:
        """
        Check a dimension sequence and return it as a list of Python ints.

        Parameters
        ----------
        dims : sequence of int
            Dimensions (d0, d1, ..., dn); matrix i is dims[i] x dims[i+1]

        Returns
        -------
        dims : list of int

        Raises
        ------
        InvalidInputShape
            Fewer than 2 dimensions
        NonIntegerDimension
            A value that is not an integer (bools included)
        NonPositiveDimension
            A value <= 0
        """
        dims = list(dims)

        if len(dims) < 2:
            raise InvalidInputShape(
                f"Need at least 2 dimensions to describe one matrix, got {len(dims)}"
            )

        checked = []
        for idx, d in enumerate(dims):
            if isinstance(d, (bool, np.bool_)) or not isinstance(d, numbers.Integral):
                raise NonIntegerDimension(
                    f"Dimension {idx} is not an integer: {d!r}"
                )
            if d <= 0:
                raise NonPositiveDimension(
                    f"Dimension {idx} must be positive, got {d}"
                )
            checked.append(int(d))

        return checked

    def fill_tables(self, dims: Sequence[int]) -> Tuple[np.ndarray, np.ndarray]:
        """
        Build the cost and split tables for a validated dimension sequence.

        Parameters
        ----------
        dims : sequence of int
            Validated dimensions, length n + 1

        Returns
        -------
        m : ndarray (n, n)
            m[i, j] = minimum cost of the product A_i..A_j
        s : ndarray (n, n)
            s[i, j] = split k giving that minimum
        """
        n = len(dims) - 1
        dtype = _table_dtype(dims)

        m = np.full((n, n), LOWER_SENTINEL, dtype=dtype)
        s = np.zeros((n, n), dtype=np.int64)
        r = np.array(dims, dtype=dtype)

        # Upper triangle including the diagonal; the diagonal stays 0
        m[np.triu_indices(n)] = 0

        # L is the number of merges in the subchain, i.e. it spans L + 1 matrices
        for L in range(1, n):
            for i in range(n - L):
                j = i + L

                # All splits k in [i, j) at once:
                # m[i, k] + m[k + 1, j] + r[i] * r[k + 1] * r[j + 1]
                costs = m[i, i:j] + m[i + 1:j + 1, j] + r[i] * r[i + 1:j + 1] * r[j + 1]

                # argmin returns the first minimum, so ties keep the lowest k
                best = int(np.argmin(costs))
                m[i, j] = costs[best]
                s[i, j] = i + best

        return m, s

    def parenthesize(self, s: np.ndarray, i: int, j: int) -> str:
        """
        Rebuild the parenthesization of A_{i+1}..A_{j+1} from the split table.

        Labels are 1-indexed: matrix 0 prints as "A1". Walks the split tree
        with an explicit stack, so left- or right-deep trees of any depth
        are fine.
        """
        parts = []
        stack = [(i, j)]

        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue

            lo, hi = item
            if lo == hi:
                parts.append(f"A{lo + 1}")
                continue

            k = int(s[lo, hi])
            # Pushed in reverse of emission order
            stack.extend([")", (k + 1, hi), " * ", (lo, k), "("])

        return "".join(parts)

    def solve(self, dims: Sequence, parenthesize: bool = True) -> ChainResult:
        """
        Solve the ordering problem for one chain.

        Parameters
        ----------
        dims : sequence of int
            Dimensions (d0, d1, ..., dn)
        parenthesize : bool
            Build the optimal order string

        Returns
        -------
        result : ChainResult
        """
        dims = self.validate(dims)
        n = len(dims) - 1

        self._print(f"Chain: {n} matrices, dims={dims}")

        if n == 1:
            m = np.zeros((1, 1), dtype=np.int64)
            s = np.zeros((1, 1), dtype=np.int64)
            order = "A1" if parenthesize else None
            return ChainResult(0, order, dims, m, s)

        m, s = self.fill_tables(dims)
        min_cost = int(m[0, n - 1])

        order = self.parenthesize(s, 0, n - 1) if parenthesize else None

        self._print(f"Minimum cost: {min_cost}")
        if order is not None:
            self._print(f"Optimal order: {order}")

        return ChainResult(min_cost, order, dims, m, s)


def _table_dtype(dims: Sequence[int]):
    """
    int64 when every cost fits, object (Python ints) otherwise.

    Any subchain cost is bounded by (n - 1) * max(dims) ** 3.
    """
    n = len(dims) - 1
    bound = max(n - 1, 1) * max(dims) ** 3
    if bound > _INT64_MAX:
        return object
    return np.int64


__all__ = ['ChainSolver', 'ChainResult', 'LOWER_SENTINEL']
