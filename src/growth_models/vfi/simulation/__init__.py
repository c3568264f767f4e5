"""Simulators for post-solve analysis.

Modules
-------
path_simulator
    Deterministic capital-path simulator for the growth model.
"""

from growth_models.vfi.simulation.path_simulator import (
    CapitalPathSimulator,
    simulate_capital_path,
)

__all__ = [
    "CapitalPathSimulator",
    "simulate_capital_path",
]
