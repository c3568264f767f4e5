#!/usr/bin/env python3
"""Solve the neoclassical growth model for several risk-aversion levels.

For each value of σ in ``RISK_AVERSION_LIST`` this script:

1. Solves the model by value function iteration on the default grid.
2. Saves the solution as an ``.npz`` archive.
3. Simulates the capital path from the lowest grid point.

It then writes a figure overlaying the value functions, one with value
and policy panels per solution, and one capital-path figure per σ.

Usage::

    python growth_simulation.py
"""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any, Dict, List

from growth_models.config.economic_params import EconomicParams
from growth_models.config.model import GrowthModel
from growth_models.config.vfi_config import GridConfig
from growth_models.econ import NeoclassicalPrimitives, SteadyStateCalculator
from growth_models.io.artifacts import save_vfi_results
from growth_models.plotting import plot_capital_path, plot_value_functions
from growth_models.vfi import GrowthModelVFI
from growth_models.vfi.simulation import CapitalPathSimulator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
#  Constants
# ---------------------------------------------------------------------------

RESULTS_DIR: str = "./results/growth"

RISK_AVERSION_LIST: List[float] = [0.5, 1.0, 2.0, 5.0]
"""CRRA coefficients to solve for."""

N_PERIODS: int = 100
"""Length of each simulated capital path."""


def solve_for(sigma: float) -> Dict[str, Any]:
    """Solve the baseline model with risk aversion *sigma* and save it."""
    params = dataclasses.replace(EconomicParams(), risk_aversion=sigma)
    model = GrowthModel(params, GridConfig(), NeoclassicalPrimitives())
    solution = GrowthModelVFI(model).solve()
    save_vfi_results(solution, os.path.join(RESULTS_DIR, f"vfi_sigma_{sigma}.npz"))
    return solution


def main() -> None:
    os.makedirs(RESULTS_DIR, exist_ok=True)
    k_ss = SteadyStateCalculator.calculate_capital(EconomicParams())
    logger.info(f"Analytical steady-state capital: {k_ss:.4f}")

    simulator = CapitalPathSimulator(n_periods=N_PERIODS)
    solutions = []
    for sigma in RISK_AVERSION_LIST:
        solution = solve_for(sigma)
        if not solution["converged"]:
            logger.warning(f"sigma={sigma}: solution did not converge")
        solutions.append(solution)

        history, stats = simulator.run(solution)
        logger.info(
            f"sigma={sigma}: k_T={stats['k_final']:.4f}, "
            f"|k_T - k_(T-1)|={stats['last_step']:.2e}, "
            f"at k_max {stats['max_hit_pct']:.1f}% of periods"
        )
        fig = plot_capital_path(history["K"])
        fig.savefig(
            os.path.join(RESULTS_DIR, f"capital_path_sigma_{sigma}.png"),
            dpi=150,
            bbox_inches="tight",
        )

    plot_value_functions(solutions, "risk_aversion").savefig(
        os.path.join(RESULTS_DIR, "value_functions.png"), dpi=150, bbox_inches="tight"
    )
    plot_value_functions(
        solutions, "risk_aversion", include_policy=True, ncols=2
    ).savefig(
        os.path.join(RESULTS_DIR, "value_and_policy.png"), dpi=150, bbox_inches="tight"
    )
    logger.info(f"Figures written to {RESULTS_DIR}")


if __name__ == "__main__":
    main()
