"""Deterministic capital-path simulator for solved growth models.

Iterates the law of motion ``K_{t+1} = g(K_t)``, where ``g`` is the
piecewise-linear interpolant of the next-capital policy over the grid.
Like the policy itself, ``g`` is extended linearly beyond the grid ends.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import tensorflow as tf

from growth_models.core.errors import ConfigurationError
from growth_models.core.types import NUMPY_DTYPE, TENSORFLOW_DTYPE
from growth_models.vfi.grids.grid_utils import interp_1d_batch


def simulate_capital_path(
    k0: float,
    policy_k_values: np.ndarray,
    k_grid: np.ndarray,
    n_periods: int,
) -> np.ndarray:
    """Generate the capital path implied by a next-capital policy.

    Parameters
    ----------
    k0 : float
        Initial capital, ``path[0]``.
    policy_k_values : np.ndarray
        Next capital chosen at each grid point, shape ``(n_k,)``.
    k_grid : np.ndarray
        Capital grid, shape ``(n_k,)``.
    n_periods : int
        Length of the returned path (including ``k0``).

    Returns
    -------
    np.ndarray
        ``(n_periods,)`` capital path.

    Raises
    ------
    ConfigurationError
        If *n_periods* is smaller than 1 or the arrays disagree in shape.
    """
    if n_periods < 1:
        raise ConfigurationError(f"n_periods must be >= 1, got {n_periods}.")
    if np.shape(policy_k_values) != np.shape(k_grid):
        raise ConfigurationError(
            f"Policy shape {np.shape(policy_k_values)} does not match grid "
            f"shape {np.shape(k_grid)}."
        )

    k_grid_t = tf.constant(k_grid, dtype=TENSORFLOW_DTYPE)
    policy_t = tf.constant(policy_k_values, dtype=TENSORFLOW_DTYPE)

    path = np.full(n_periods, k0, dtype=NUMPY_DTYPE)
    for t in range(1, n_periods):
        k_query = tf.constant([path[t - 1]], dtype=TENSORFLOW_DTYPE)
        path[t] = float(
            interp_1d_batch(k_grid_t, policy_t, k_query, extrapolate=True)[0]
        )
    return path


class CapitalPathSimulator:
    """Simulate a solved growth model forward from an initial capital stock.

    Parameters
    ----------
    n_periods : int
        Number of periods in the simulated path.
    """

    def __init__(self, n_periods: int = 100) -> None:
        if n_periods < 1:
            raise ConfigurationError(f"n_periods must be >= 1, got {n_periods}.")
        self.n_periods = n_periods

    def run(
        self, solution: Dict[str, Any], k0: Optional[float] = None
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, float]]:
        """Simulate the capital path and return history + summary stats.

        Parameters
        ----------
        solution : dict
            Output of ``GrowthModelVFI.solve()``.
        k0 : float, optional
            Initial capital.  Defaults to the lowest grid point.

        Returns
        -------
        history : dict
            ``K`` → capital path ``(n_periods,)``.
        stats : dict
            ``k_final`` — last capital level;
            ``last_step`` — ``|K_T - K_{T-1}|`` (0 for a one-period path);
            ``min_hit_pct``, ``max_hit_pct`` — share of periods at or beyond
            the grid bounds (%).
        """
        k_grid = np.asarray(solution["K"])
        if k0 is None:
            k0 = float(k_grid[0])

        k_path = simulate_capital_path(
            k0, np.asarray(solution["policy_k_values"]), k_grid, self.n_periods
        )

        stats = {
            "k_final": float(k_path[-1]),
            "last_step": (
                float(abs(k_path[-1] - k_path[-2])) if k_path.size > 1 else 0.0
            ),
            "min_hit_pct": float(np.mean(k_path <= k_grid[0]) * 100),
            "max_hit_pct": float(np.mean(k_path >= k_grid[-1]) * 100),
        }
        return {"K": k_path}, stats
