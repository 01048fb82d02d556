"""
chainorder - Matrix Chain Order Solver

Minimum scalar-multiplication cost of a matrix chain product, and the
parenthesization that achieves it.

Core idea:
- Cost of a subchain depends only on its best split point
- Fill a cost table bottom-up by increasing subchain length, O(n^3)
- Keep the winning split per cell to rebuild the optimal order

Only multiplication counts are computed; no matrices are stored.
"""

__version__ = "0.1.0"
__algorithm__ = "Bottom-up dynamic programming over matrix subchains"

from .core.solver import solve_chain
from .core.chain_solver import ChainSolver, ChainResult
from .core.errors import (
    ChainInputError,
    InvalidInputShape,
    NonPositiveDimension,
    NonIntegerDimension,
)

__all__ = [
    'solve_chain',
    'ChainSolver',
    'ChainResult',
    'ChainInputError',
    'InvalidInputShape',
    'NonPositiveDimension',
    'NonIntegerDimension',
]
