# growth_models/econ/production.py
"""
Production function calculations.

This module implements production technology and the resources available
for consumption and investment in the one-good growth model.
"""

import tensorflow as tf

from growth_models.config.economic_params import EconomicParams
from growth_models.core.types import TENSORFLOW_DTYPE, Tensor


class ProductionFunctions:
    """Static methods for production-related calculations."""

    @staticmethod
    def cobb_douglas(
        capital: Tensor,
        params: EconomicParams
    ) -> Tensor:
        """
        Compute output using Cobb-Douglas production technology.

        Formula: Y = A * K^alpha

        Args:
            capital: Capital stock tensor (K).
            params: Economic parameters containing technology and capital share.

        Returns:
            Gross production output tensor.
        """
        capital = tf.cast(capital, TENSORFLOW_DTYPE)
        return params.technology_level * (capital ** params.capital_share)

    @staticmethod
    def total_resources(
        output: Tensor,
        capital: Tensor,
        params: EconomicParams
    ) -> Tensor:
        """
        Resources available after production and depreciation.

        Formula: R = Y + (1 - delta) * K

        Args:
            output: Production output (Y).
            capital: Current capital stock (K).
            params: Economic parameters containing depreciation rate.

        Returns:
            Tensor of resources to split between consumption and K'.
        """
        return (
            tf.cast(output, TENSORFLOW_DTYPE)
            + (1.0 - params.depreciation_rate) * tf.cast(capital, TENSORFLOW_DTYPE)
        )
