# growth_models/core/errors.py
"""
Exception types raised by the growth-model solvers.

Non-convergence within the iteration cap is not an exception: it
is reported through the ``converged`` flag of a solution, not raised.
"""


class ConfigurationError(ValueError):
    """Invalid parameters, grid layout or numerical controls."""


class NumericDegeneracy(ArithmeticError):
    """A capital state admits no feasible next-period capital choice."""
