# growth_models/econ/utility.py
"""
Period utility functions.

Implements CRRA utility with a consumption floor so that infeasible,
non-positive consumption never reaches a logarithm or negative power.
"""

import tensorflow as tf

from growth_models.core.types import TENSORFLOW_DTYPE, Tensor


class UtilityFunctions:
    """Static methods for period utility."""

    @staticmethod
    def crra(
        consumption: Tensor,
        risk_aversion: float,
        consumption_floor: float,
    ) -> Tensor:
        """
        Constant relative risk aversion utility.

        Formula: u(c) = (c^(1 - sigma) - 1) / (1 - sigma), log(c) at sigma = 1,
        evaluated at max(c, c_floor).

        The ``- 1`` keeps the family continuous in sigma around 1.

        Args:
            consumption: Consumption tensor (any shape).
            risk_aversion: CRRA coefficient sigma >= 0.
            consumption_floor: Positive lower bound substituted for c.

        Returns:
            Utility tensor with the shape of *consumption*.
        """
        c = tf.maximum(
            tf.cast(consumption, TENSORFLOW_DTYPE),
            tf.cast(consumption_floor, TENSORFLOW_DTYPE),
        )
        if risk_aversion == 1.0:
            return tf.math.log(c)
        return (c ** (1.0 - risk_aversion) - 1.0) / (1.0 - risk_aversion)
