"""Value Function Iteration for the deterministic neoclassical growth model.

Solves the planner's problem

    V(K) = max_{K'} u(C(K, K')) + β V(K')

on a discretised capital grid that serves as both state and action
space.  Production, utility and the budget constraint come from the
model's pluggable :class:`~growth_models.vfi.protocols.EconomicPrimitives`.

Outputs both discrete grid indices and next-capital / consumption
policy values.

Architecture note
-----------------
This module is a thin orchestrator.  Payoff masking lives in
``vfi.feasibility``, the Bellman fixed-point loop in ``vfi.engine``
(backed by ``vfi.kernels.bellman_kernels``), and policy extraction in
``vfi.policies``.  The solver holds no process-wide state: every
``solve()`` is a function of the model alone.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import tensorflow as tf

from growth_models.config.model import GrowthModel
from growth_models.vfi.engine import VFIEngine, VFIState
from growth_models.vfi.feasibility import build_payoff_grid
from growth_models.vfi.grids.grid_builder import GridBuilder
from growth_models.vfi.policies import (
    extract_capital_policy,
    extract_consumption_policy,
)

logger = logging.getLogger(__name__)


class GrowthModelVFI:
    """VFI solver for the deterministic one-sector growth model.

    State space : Capital K
    Choice      : Next-period capital K' (on the same grid)

    Parameters
    ----------
    model : GrowthModel
        Parameters, grid controls, primitives and initial value function.
    """

    def __init__(self, model: GrowthModel) -> None:
        self.model: GrowthModel = model
        self._initialize_grids()

    # ------------------------------------------------------------------
    # Grid initialisation
    # ------------------------------------------------------------------

    def _initialize_grids(self) -> None:
        """Build the discretised capital grid."""
        self.k_grid: tf.Tensor = GridBuilder.build_from_config(self.model.grid)
        self.n_capital: int = int(self.k_grid.shape[0])

    # ------------------------------------------------------------------
    # Result packaging
    # ------------------------------------------------------------------

    def _build_result_dict(
        self,
        state: VFIState,
        policy_k_values: tf.Tensor,
        policy_c_values: tf.Tensor,
    ) -> Dict[str, Any]:
        """Package solver outputs into a serialisable dictionary.

        All tensors are converted to NumPy arrays so that the result can
        be saved to disk without TensorFlow dependencies.

        Returns
        -------
        dict
            Keys documented in :meth:`solve`.
        """
        params = self.model.params
        return {
            # Value function and grid
            "V": state.value.numpy(),
            "K": self.k_grid.numpy(),
            # Policy (both discrete and continuous forms)
            "policy_k_idx": state.policy_idx.numpy(),
            "policy_k_values": policy_k_values.numpy(),
            "policy_c_values": policy_c_values.numpy(),
            # Iteration status
            "n_iterations": state.n_iterations,
            "converged": state.converged,
            "final_diff": state.final_diff,
            "max_iter": self.model.grid.max_iter_vfi,
            "n_capital": self.n_capital,
            # Parameter metadata consumed by plots and simulators
            "discount_factor": float(params.discount_factor),
            "depreciation_rate": float(params.depreciation_rate),
            "risk_aversion": float(params.risk_aversion),
            "technology_level": float(params.technology_level),
            "capital_share": float(params.capital_share),
        }

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def solve(self) -> Dict[str, Any]:
        """Solve the growth model via value function iteration.

        Returns
        -------
        dict
            ``V``
                Final value function, shape ``(n_k,)``.
            ``K``
                Capital grid, ``(n_k,)``.
            ``policy_k_idx``
                Optimal K' grid index, ``(n_k,)``.
            ``policy_k_values``
                Optimal K' values, ``(n_k,)``.
            ``policy_c_values``
                Consumption implied by the K' policy, ``(n_k,)``.
            ``n_iterations``, ``converged``, ``final_diff``
                Iteration count, convergence flag and last sup-norm change.
            ``max_iter``, ``n_capital``
                Iteration cap and grid size.
            ``discount_factor``, ``depreciation_rate``, ``risk_aversion``,
            ``technology_level``, ``capital_share``
                Structural parameters the solution was computed for.

        Raises
        ------
        NumericDegeneracy
            If some grid state has no feasible next-capital choice.
        """
        params = self.model.params
        grid_cfg = self.model.grid
        logger.info(
            "Starting GrowthModelVFI.solve() — "
            "β=%.4f, δ=%.4f, σ=%.4f, n_k=%d",
            params.discount_factor,
            params.depreciation_rate,
            params.risk_aversion,
            self.n_capital,
        )

        # Payoffs are invariant across Bellman iterations
        payoff_grid = build_payoff_grid(self.k_grid, self.model)

        engine = VFIEngine(
            beta=params.discount_factor,
            tol=grid_cfg.tol_vfi,
            max_iter=grid_cfg.max_iter_vfi,
        )
        state = engine.run_vfi(
            self.model.initial_value_function(), payoff_grid.payoff, self.k_grid
        )

        policy_k_values = extract_capital_policy(self.k_grid, state.policy_idx)
        policy_c_values = extract_consumption_policy(
            self.model, self.k_grid, policy_k_values
        )

        logger.info(
            "Policy K' range: [%.4f, %.4f], C range: [%.4f, %.4f]",
            float(tf.reduce_min(policy_k_values)),
            float(tf.reduce_max(policy_k_values)),
            float(tf.reduce_min(policy_c_values)),
            float(tf.reduce_max(policy_c_values)),
        )

        return self._build_result_dict(state, policy_k_values, policy_c_values)
