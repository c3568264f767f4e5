"""Numerical engine for Value Function Iteration (VFI).

This module provides the fixed-point iterator for the deterministic
Bellman equation, handling the repeated maximisation step and the
convergence check.  It knows nothing about production or preferences:
it only sees a payoff matrix, a grid and a discount factor.

Example::

    >>> engine = VFIEngine(beta=0.96, tol=1e-6, max_iter=1000)
    >>> state = engine.run_vfi(v_init, payoff, k_grid)
    >>> state.converged, state.n_iterations
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import tensorflow as tf

from growth_models.core.errors import ConfigurationError
from growth_models.core.types import TENSORFLOW_DTYPE, Tensor
from growth_models.vfi.kernels.bellman_kernels import bellman_step, sup_norm_diff

logger = logging.getLogger(__name__)


class VFIState(NamedTuple):
    """Terminal state of a Bellman iteration.

    Attributes
    ----------
    value : Tensor
        Last value function, ``(n_k,)``.
    policy_idx : Tensor
        ``(n_k,)`` int32 grid index of the optimal K' in the last step.
    n_iterations : int
        Number of Bellman updates performed, ``0 <= N <= max_iter``.
    converged : bool
        Whether the last update moved V by at most ``tol``.
    final_diff : float
        Sup-norm change of the last update.
    """

    value: Tensor
    policy_idx: Tensor
    n_iterations: int
    converged: bool
    final_diff: float


class VFIEngine:
    """Fixed-point iterator for the Bellman equation.

    Iterates :math:`V_{t+1} = T(V_t)` until
    :math:`\\|V_{t+1} - V_t\\|_\\infty \\le \\text{tol}` or ``max_iter``
    updates have been made.  Running out of iterations is not an error:
    the last value function and policy are returned with
    ``converged=False``.

    Parameters
    ----------
    beta : float
        Discount factor in (0, 1).
    tol : float
        Convergence tolerance (sup-norm).
    max_iter : int
        Maximum number of Bellman iterations.

    Raises
    ------
    ConfigurationError
        If *beta* is not in the open interval (0, 1).
    ConfigurationError
        If *tol* is non-positive.
    ConfigurationError
        If *max_iter* is non-positive.
    """

    def __init__(
        self,
        beta: float,
        tol: float,
        max_iter: int,
    ) -> None:
        if not 0.0 < beta < 1.0:
            raise ConfigurationError(
                f"Discount factor must be in (0, 1), got {beta}."
            )
        if tol <= 0.0:
            raise ConfigurationError(f"Tolerance must be positive, got {tol}.")
        if max_iter <= 0:
            raise ConfigurationError(
                f"max_iter must be positive, got {max_iter}."
            )

        self.beta: tf.Tensor = tf.constant(beta, dtype=TENSORFLOW_DTYPE)
        self.tol: float = float(tol)
        self.max_iter: int = int(max_iter)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run_vfi(self, v_init: Tensor, payoff: Tensor, k_grid: Tensor) -> VFIState:
        """Execute value function iteration until convergence.

        Parameters
        ----------
        v_init : Tensor
            Initial guess for the value function, ``(n_k,)``.
        payoff : Tensor
            Pre-computed, sentinel-masked payoff matrix, ``(n_k, n_k)``.
        k_grid : Tensor
            Capital grid, ``(n_k,)``.

        Returns
        -------
        VFIState
            Final value function, policy indices and iteration status.

        Raises
        ------
        ConfigurationError
            If the shapes of *v_init*, *payoff* and *k_grid* disagree.
        """
        k_grid = tf.cast(k_grid, TENSORFLOW_DTYPE)
        payoff = tf.cast(payoff, TENSORFLOW_DTYPE)
        v_curr = tf.cast(v_init, TENSORFLOW_DTYPE)
        self._check_shapes(v_curr, payoff, k_grid)

        policy_idx = tf.zeros(tf.shape(v_curr), dtype=tf.int32)
        diff = float("inf")
        n_iterations = 0
        converged = False

        for iteration in range(self.max_iter):
            v_next, policy_idx = bellman_step(payoff, v_curr, k_grid, self.beta)
            diff = float(sup_norm_diff(v_next, v_curr))
            v_curr = v_next
            n_iterations = iteration + 1

            if diff <= self.tol:
                converged = True
                logger.info(
                    "VFIEngine converged in %d iterations (diff=%.2e).",
                    n_iterations,
                    diff,
                )
                break
        else:
            logger.warning(
                "VFIEngine did not converge after %d iterations "
                "(final diff=%.2e).",
                self.max_iter,
                diff,
            )

        return VFIState(
            value=v_curr,
            policy_idx=policy_idx,
            n_iterations=n_iterations,
            converged=converged,
            final_diff=diff,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_shapes(v_curr: Tensor, payoff: Tensor, k_grid: Tensor) -> None:
        if k_grid.shape.rank != 1 or int(k_grid.shape[0]) < 2:
            raise ConfigurationError(
                f"k_grid must be 1-D with at least 2 points, got {k_grid.shape}."
            )
        n_k = int(k_grid.shape[0])
        if tuple(v_curr.shape) != (n_k,):
            raise ConfigurationError(
                f"Value function must have shape ({n_k},), got {tuple(v_curr.shape)}."
            )
        if tuple(payoff.shape) != (n_k, n_k):
            raise ConfigurationError(
                f"Payoff grid must have shape ({n_k}, {n_k}), "
                f"got {tuple(payoff.shape)}."
            )
