"""
Core Solver Components.

1. Dimension validation
2. Cost/split table fill (bottom-up DP)
3. Parenthesization from the split table
"""

from chainorder.core.solver import solve_chain
from chainorder.core.chain_solver import ChainSolver, ChainResult, LOWER_SENTINEL
from chainorder.core.errors import (
    ChainInputError,
    InvalidInputShape,
    NonPositiveDimension,
    NonIntegerDimension,
)

__all__ = [
    "solve_chain",
    "ChainSolver",
    "ChainResult",
    "LOWER_SENTINEL",
    "ChainInputError",
    "InvalidInputShape",
    "NonPositiveDimension",
    "NonIntegerDimension",
]
