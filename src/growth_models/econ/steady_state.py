# growth_models/econ/steady_state.py
"""
Steady state calculations for the growth model.

This module computes analytical steady state values used to choose
simulation starting points and to check simulated capital paths.
"""

from growth_models.config.economic_params import EconomicParams


class SteadyStateCalculator:
    """Static methods for steady state calculations."""

    @staticmethod
    def calculate_capital(params: EconomicParams) -> float:
        """
        Calculate steady-state capital stock for the deterministic model.

        Derived from the Euler equation in steady state, A alpha K^(alpha-1)
        = 1 / beta - 1 + delta:
            k_ss = (A * alpha / (1 / beta - 1 + delta))^(1 / (1 - alpha))

        Args:
            params: Economic parameters containing discount factor,
                    depreciation, technology level and capital share.

        Returns:
            The steady-state capital stock.
        """
        r_implied = (1.0 / params.discount_factor) - 1.0
        denom = r_implied + params.depreciation_rate

        k_ss = (
            (params.technology_level * params.capital_share) / denom
        ) ** (1.0 / (1.0 - params.capital_share))

        return k_ss

    @staticmethod
    def calculate_consumption(params: EconomicParams) -> float:
        """Steady-state consumption, C = A k_ss^alpha - delta k_ss."""
        k_ss = SteadyStateCalculator.calculate_capital(params)
        return (
            params.technology_level * k_ss ** params.capital_share
            - params.depreciation_rate * k_ss
        )
