"""
Main chainorder entry point.

Solve a matrix chain: minimum multiplication cost plus the optimal order.
"""

from typing import Optional, Sequence, Tuple

from chainorder.core.chain_solver import ChainSolver


def solve_chain(
    dims: Sequence[int],
    parenthesize: bool = True,
    verbose: bool = False,
) -> Tuple[int, Optional[str]]:
    """
    Minimum scalar-multiplication cost of a matrix chain.

    Parameters
    ----------
    dims : sequence of int
        Dimensions (d0, d1, ..., dn); matrix i is dims[i] x dims[i+1]
    parenthesize : bool
        Also return the optimal parenthesization
    verbose : bool
        Print progress

    Returns
    -------
    min_cost : int
        Minimum number of scalar multiplications
    order : str or None
        Fully parenthesized product, e.g. "((A1 * (A2 * A3)) * A4)",
        or None if parenthesize is False

    Raises
    ------
    ChainInputError
        If dims is not a valid dimension sequence
    """
    result = ChainSolver(verbose=verbose).solve(dims, parenthesize=parenthesize)
    return result.min_cost, result.order


__all__ = ['solve_chain']
