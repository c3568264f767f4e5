# growth_models/econ/__init__.py
"""
Core economic logic module.

This package provides the production, utility, budget and steady-state
formulas of the growth model, and the default primitives bundle handed
to the VFI solver.
"""

from growth_models.econ.production import ProductionFunctions
from growth_models.econ.utility import UtilityFunctions
from growth_models.econ.budget import BudgetConstraint
from growth_models.econ.steady_state import SteadyStateCalculator
from growth_models.econ.primitives import NeoclassicalPrimitives


__all__ = [
    'ProductionFunctions',
    'UtilityFunctions',
    'BudgetConstraint',
    'SteadyStateCalculator',
    'NeoclassicalPrimitives',
]
