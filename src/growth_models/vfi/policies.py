"""Policy extraction and formatting for VFI solvers.

Contains pure functions that map discrete policy indices to next-capital
values on the grid, and next-capital values to the consumption they
imply through the budget constraint.
"""

from __future__ import annotations

import tensorflow as tf

from growth_models.config.model import GrowthModel
from growth_models.core.types import TENSORFLOW_DTYPE


def extract_capital_policy(
    k_grid: tf.Tensor,
    policy_k_idx: tf.Tensor,
) -> tf.Tensor:
    """Map discrete policy indices to next-period capital values.

    Parameters
    ----------
    k_grid : tf.Tensor
        Capital grid, shape ``(n_k,)``.
    policy_k_idx : tf.Tensor
        Grid indices of optimal K', any shape.

    Returns
    -------
    tf.Tensor
        K' values with the shape of *policy_k_idx*.
    """
    return tf.gather(k_grid, policy_k_idx)


def extract_consumption_policy(
    model: GrowthModel,
    k_grid: tf.Tensor,
    policy_k_values: tf.Tensor,
) -> tf.Tensor:
    """Consumption implied by the capital policy, in one vectorised call.

    Parameters
    ----------
    model : GrowthModel
        Model whose primitives define output and the budget constraint.
    k_grid : tf.Tensor
        Capital grid, shape ``(n_k,)``.
    policy_k_values : tf.Tensor
        Optimal K' for each grid point, shape ``(n_k,)``.

    Returns
    -------
    tf.Tensor
        ``(n_k,)`` consumption policy.
    """
    primitives = model.primitives
    k_grid = tf.cast(k_grid, TENSORFLOW_DTYPE)
    output = primitives.production(model, k=k_grid)
    return primitives.budget_consumption(
        model, k_prime=policy_k_values, y=output, k=k_grid
    )
