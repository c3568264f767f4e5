"""Feasibility masking and payoff-grid construction.

Builds the ``(n_k, n_k)`` matrix of period payoffs for every pair
(current capital ``K = k_grid[i]``, next capital ``K' = k_grid[j]``).
Pairs that violate the investment floor, or that would require
consumption below the consumption floor, receive the payoff sentinel
``GridConfig.payoff_floor`` so they never win the Bellman maximisation.

The payoff grid does not depend on the value function, so the solver
builds it once and reuses it on every iteration.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import tensorflow as tf

from growth_models.config.model import GrowthModel
from growth_models.core.errors import NumericDegeneracy
from growth_models.core.types import TENSORFLOW_DTYPE

logger = logging.getLogger(__name__)


class PayoffGrid(NamedTuple):
    """Period payoffs and feasibility bounds on the capital grid.

    Attributes
    ----------
    payoff : tf.Tensor
        ``(n_k, n_k)`` utility of moving from ``k_grid[i]`` to
        ``k_grid[j]``, sentinel-filled where infeasible.
    feasible : tf.Tensor
        ``(n_k, n_k)`` boolean feasibility mask.
    k_prime_upper : tf.Tensor
        ``(n_k,)`` largest next capital reachable from each state, i.e.
        the budget-implied K' with consumption pinned at its floor.
    """

    payoff: tf.Tensor
    feasible: tf.Tensor
    k_prime_upper: tf.Tensor


def build_payoff_grid(k_grid: tf.Tensor, model: GrowthModel) -> PayoffGrid:
    """Evaluate utility on the full grid and mask infeasible choices.

    Parameters
    ----------
    k_grid : tf.Tensor
        Capital grid, shape ``(n_k,)``.
    model : GrowthModel
        Model whose primitives and floors define payoffs and feasibility.

    Returns
    -------
    PayoffGrid
        Payoff matrix, feasibility mask and per-state upper bound on K'.

    Raises
    ------
    NumericDegeneracy
        If some state has no feasible next-capital choice at all.
    """
    primitives = model.primitives
    cfg = model.grid

    k_grid = tf.cast(k_grid, TENSORFLOW_DTYPE)
    n_k = int(k_grid.shape[0])

    k_curr = tf.reshape(k_grid, (n_k, 1))
    k_next = tf.reshape(k_grid, (1, n_k))

    consumption = primitives.consumption(model, k=k_curr, k_prime=k_next)

    output = primitives.production(model, k=k_grid)
    k_prime_upper = tf.cast(
        primitives.budget_next_capital(
            model, c=cfg.consumption_floor, y=output, k=k_grid
        ),
        TENSORFLOW_DTYPE,
    )

    # Investment floor is global; the upper bound depends on the state.
    feasible = tf.logical_and(
        k_next >= cfg.k_prime_min,
        k_next <= tf.reshape(k_prime_upper, (n_k, 1)),
    )

    utility = tf.broadcast_to(
        tf.cast(primitives.utility(model, c=consumption), TENSORFLOW_DTYPE),
        (n_k, n_k),
    )
    sentinel = tf.fill((n_k, n_k), tf.cast(cfg.payoff_floor, TENSORFLOW_DTYPE))
    payoff = tf.where(feasible, utility, sentinel)

    _check_every_state_has_choice(feasible, k_grid)

    logger.info(
        "Payoff grid built: n_k=%d, feasible share=%.2f%%",
        n_k,
        float(tf.reduce_mean(tf.cast(feasible, TENSORFLOW_DTYPE))) * 100,
    )
    return PayoffGrid(payoff=payoff, feasible=feasible, k_prime_upper=k_prime_upper)


def _check_every_state_has_choice(feasible: tf.Tensor, k_grid: tf.Tensor) -> None:
    """Raise ``NumericDegeneracy`` for rows of *feasible* that are all False."""
    has_choice = tf.reduce_any(feasible, axis=1)
    if bool(tf.reduce_all(has_choice)):
        return

    stuck = tf.boolean_mask(k_grid, tf.logical_not(has_choice)).numpy()
    logger.error(
        "%d capital states have no feasible K' (first: k=%.4g).",
        stuck.size,
        float(stuck[0]),
    )
    raise NumericDegeneracy(
        f"{stuck.size} of {int(k_grid.shape[0])} capital states admit no "
        f"feasible next-period capital (k = {stuck.tolist()[:5]}"
        f"{', ...' if stuck.size > 5 else ''}). Lower k_prime_min or "
        f"consumption_floor, or raise k_min."
    )
