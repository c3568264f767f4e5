# growth_models/econ/primitives.py
"""
Default economic primitives for the neoclassical growth model.

:class:`NeoclassicalPrimitives` satisfies
:class:`~growth_models.vfi.protocols.EconomicPrimitives` with
Cobb-Douglas production, CRRA utility and the one-good resource
constraint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from growth_models.core.types import Tensor
from growth_models.econ.budget import BudgetConstraint
from growth_models.econ.production import ProductionFunctions
from growth_models.econ.utility import UtilityFunctions

if TYPE_CHECKING:
    from growth_models.config.model import GrowthModel


class NeoclassicalPrimitives:
    """Cobb-Douglas / CRRA primitives with the standard budget constraint."""

    def production(self, model: GrowthModel, k: Tensor) -> Tensor:
        return ProductionFunctions.cobb_douglas(k, model.params)

    def consumption(
        self, model: GrowthModel, k: Tensor, k_prime: Tensor
    ) -> Tensor:
        y = self.production(model, k)
        return BudgetConstraint.consumption(k_prime, y, k, model.params)

    def utility(self, model: GrowthModel, c: Tensor) -> Tensor:
        return UtilityFunctions.crra(
            c, model.params.risk_aversion, model.grid.consumption_floor
        )

    def budget_next_capital(
        self, model: GrowthModel, c: Tensor, y: Tensor, k: Tensor
    ) -> Tensor:
        return BudgetConstraint.next_capital(c, y, k, model.params)

    def budget_consumption(
        self, model: GrowthModel, k_prime: Tensor, y: Tensor, k: Tensor
    ) -> Tensor:
        return BudgetConstraint.consumption(k_prime, y, k, model.params)
