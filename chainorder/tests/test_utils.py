"""
Tests for formatting and solution checks.
"""

import numpy as np
import pytest

from chainorder.core.chain_solver import ChainSolver
from chainorder.core.errors import NonPositiveDimension
from chainorder.utils.formatting import format_dimensions, format_cost_table
from chainorder.utils.verify import order_cost, recursive_min_cost


class TestFormatDimensions:
    """Per-matrix dimension summary."""

    def test_lines(self):
        text = format_dimensions([2, 5, 4])
        assert text == "A-1 rows: 2, columns: 5.\nA-2 rows: 5, columns: 4."

    def test_one_line_per_matrix(self):
        assert len(format_dimensions([2, 5, 4, 1, 10]).splitlines()) == 4


class TestFormatCostTable:
    """Cost table rendering."""

    def test_four_matrix_table(self):
        table = ChainSolver().solve([2, 5, 4, 1, 10]).cost_table
        assert format_cost_table(table) == "\n".join([
            " 0 40 30 50",
            " -  0 20 70",
            " -  -  0 40",
            " -  -  -  0",
        ])

    def test_custom_sentinel(self):
        table = ChainSolver().solve([10, 20, 30]).cost_table
        assert format_cost_table(table, sentinel="x") == "   0 6000\n   x    0"

    def test_single_cell(self):
        assert format_cost_table(np.zeros((1, 1), dtype=np.int64)) == "0"


class TestOrderCost:
    """Recounting the cost of a given order."""

    dims = [10, 20, 30, 40]

    def test_left_to_right(self):
        assert order_cost("((A1 * A2) * A3)", self.dims) == 18000

    def test_right_to_left(self):
        assert order_cost("(A1 * (A2 * A3))", self.dims) == 32000

    def test_unbracketed_is_left_associative(self):
        assert order_cost("A1 * A2 * A3", self.dims) == 18000

    def test_single_label(self):
        assert order_cost("A1", [3, 4]) == 0

    def test_whitespace_is_ignored(self):
        assert order_cost(" ( (A1*A2) *A3 ) ", self.dims) == 18000

    @pytest.mark.parametrize("order", [
        "(A1 * A3)",            # out of chain order
        "(A1 * A2",             # unbalanced
        "A1 * A2) * A3",        # trailing input
        "(A1 * A5) * A2",       # unknown label
        "A0 * A1 * A2",         # labels start at A1
        "(A1 * A2)",            # does not cover A3
        "A1 + A2 + A3",         # not a product
        "A1 * * A2",            # missing operand
        "",
    ])
    def test_malformed(self, order):
        with pytest.raises(ValueError):
            order_cost(order, self.dims)

    def test_validates_dims(self):
        with pytest.raises(NonPositiveDimension):
            order_cost("(A1 * A2)", [3, 0, 2])


class TestRecursiveMinCost:
    """Exhaustive reference solver."""

    def test_known(self):
        assert recursive_min_cost([2, 5, 4, 1, 10]) == 50
        assert recursive_min_cost([30, 35, 15, 5, 10, 20, 25]) == 15125

    def test_single_matrix(self):
        assert recursive_min_cost([4, 9]) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
