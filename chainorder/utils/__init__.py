"""
Utility functions for chainorder.
"""

from chainorder.utils.formatting import format_dimensions, format_cost_table
from chainorder.utils.verify import order_cost, recursive_min_cost

__all__ = [
    "format_dimensions",
    "format_cost_table",
    # Checks
    "order_cost",
    "recursive_min_cost",
]
