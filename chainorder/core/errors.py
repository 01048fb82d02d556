"""
Input errors for the chain-order solver.

All errors are raised before any table is allocated.
"""


class ChainInputError(ValueError):
    """Base class for invalid dimension sequences."""


class InvalidInputShape(ChainInputError):
    """Dimension sequence too short to describe a single matrix."""


class NonPositiveDimension(ChainInputError):
    """A dimension is zero or negative."""


class NonIntegerDimension(ChainInputError):
    """A dimension is not an integer."""


__all__ = [
    'ChainInputError',
    'InvalidInputShape',
    'NonPositiveDimension',
    'NonIntegerDimension',
]
