# growth_models/econ/budget.py
"""
Budget constraint calculations.

The resource constraint ``C + K' = Y + (1 - delta) K`` solved for either
next-period capital or consumption.
"""

import tensorflow as tf

from growth_models.config.economic_params import EconomicParams
from growth_models.core.types import TENSORFLOW_DTYPE, Tensor
from growth_models.econ.production import ProductionFunctions


class BudgetConstraint:
    """Static methods for the one-good resource constraint."""

    @staticmethod
    def next_capital(
        consumption: Tensor,
        output: Tensor,
        capital: Tensor,
        params: EconomicParams
    ) -> Tensor:
        """
        Next-period capital implied by a consumption choice.

        Formula: K' = Y + (1 - delta) * K - C

        Args:
            consumption: Consumption (C).
            output: Production output (Y).
            capital: Current capital stock (K).
            params: Economic parameters containing depreciation rate.

        Returns:
            Implied next-period capital tensor.
        """
        resources = ProductionFunctions.total_resources(output, capital, params)
        return resources - tf.cast(consumption, TENSORFLOW_DTYPE)

    @staticmethod
    def consumption(
        capital_next: Tensor,
        output: Tensor,
        capital: Tensor,
        params: EconomicParams
    ) -> Tensor:
        """
        Consumption implied by a next-period capital choice.

        Formula: C = Y + (1 - delta) * K - K'

        Args:
            capital_next: Next-period capital (K').
            output: Production output (Y).
            capital: Current capital stock (K).
            params: Economic parameters containing depreciation rate.

        Returns:
            Implied consumption tensor.
        """
        resources = ProductionFunctions.total_resources(output, capital, params)
        return resources - tf.cast(capital_next, TENSORFLOW_DTYPE)
