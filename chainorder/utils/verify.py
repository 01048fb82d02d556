"""
Solution checks.

Recount the cost of a given multiplication order, and an exhaustive
recursive solver used as an oracle for short chains.
"""

import re
from typing import List, Optional, Sequence, Tuple

from chainorder.core.chain_solver import ChainSolver


_TOKEN = re.compile(r"\s*(?:(\()|(\))|(\*)|A(\d+))")

# (first matrix, last matrix, cost so far) of an evaluated sub-product
_Node = Tuple[int, int, int]


def order_cost(order: str, dims: Sequence[int]) -> int:
    """
    Count scalar multiplications along exactly the order written in `order`.

    Parameters
    ----------
    order : str
        Product of labels A1..An, e.g. "((A1 * A2) * A3)". Unbracketed
        runs such as "A1 * A2 * A3" are evaluated left to right.
    dims : sequence of int
        Dimensions (d0, ..., dn)

    Returns
    -------
    cost : int

    Raises
    ------
    ValueError
        Malformed expression, unknown label, labels out of chain order,
        or an expression that does not cover A1..An exactly once
    """
    dims = ChainSolver.validate(dims)
    n = len(dims) - 1

    first, last, cost = _evaluate(_tokenize(order), dims)
    if first != 0 or last != n - 1:
        raise ValueError(
            f"Order covers A{first + 1}..A{last + 1}, expected A1..A{n}"
        )
    return cost


def _tokenize(order: str) -> List[str]:
    tokens = []
    pos = 0
    order = order.rstrip()
    while pos < len(order):
        match = _TOKEN.match(order, pos)
        if match is None:
            raise ValueError(f"Unexpected character at {pos} in order: {order!r}")
        lparen, rparen, star, label = match.groups()
        tokens.append(lparen or rparen or star or f"A{label}")
        pos = match.end()
    return tokens


def _evaluate(tokens: List[str], dims: List[int]) -> _Node:
    """
    Evaluate a product expression with an explicit stack of open groups.

    Each stack entry holds the product accumulated so far inside one
    pair of parentheses (None until its first operand arrives).
    """
    n = len(dims) - 1
    stack: List[Optional[_Node]] = [None]
    expect_operand = True

    def push_operand(node: _Node):
        left = stack[-1]
        stack[-1] = node if left is None else _multiply(left, node, dims)

    for tok in tokens:
        if tok == "(":
            if not expect_operand:
                raise ValueError("Missing '*' before '(' in order")
            stack.append(None)
        elif tok == ")":
            if expect_operand:
                raise ValueError("Order has ')' where a matrix was expected")
            if len(stack) == 1:
                raise ValueError("Unbalanced parentheses in order")
            push_operand(stack.pop())
            expect_operand = False
        elif tok == "*":
            if expect_operand:
                raise ValueError("Order has '*' where a matrix was expected")
            expect_operand = True
        else:
            if not expect_operand:
                raise ValueError(f"Missing '*' before {tok} in order")
            idx = int(tok[1:]) - 1
            if not 0 <= idx < n:
                raise ValueError(f"Unknown matrix label {tok} for {n} matrices")
            push_operand((idx, idx, 0))
            expect_operand = False

    if expect_operand:
        raise ValueError("Order ends where a matrix or '(' was expected")
    if len(stack) != 1:
        raise ValueError("Unbalanced parentheses in order")
    return stack[0]


def _multiply(left: _Node, right: _Node, dims: List[int]) -> _Node:
    a, b, cost_left = left
    c, d, cost_right = right
    if c != b + 1:
        raise ValueError(
            f"A{b + 1} cannot be multiplied by A{c + 1}: labels out of chain order"
        )
    # (dims[a] x dims[b+1]) @ (dims[c] x dims[d+1]), with dims[b+1] == dims[c]
    return a, d, cost_left + cost_right + dims[a] * dims[c] * dims[d + 1]


def recursive_min_cost(dims: Sequence[int]) -> int:
    """
    Minimum chain cost by plain recursion over every split.

    Exponential in the chain length; only meant for short chains.
    """
    dims = ChainSolver.validate(dims)

    def best(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            best(i, k) + best(k + 1, j) + dims[i] * dims[k + 1] * dims[j + 1]
            for k in range(i, j)
        )

    return best(0, len(dims) - 2)


__all__ = ['order_cost', 'recursive_min_cost']
