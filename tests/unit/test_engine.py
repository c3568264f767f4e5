"""Unit tests for VFIEngine: validation, convergence and the iteration cap."""

from __future__ import annotations

import logging

import numpy as np
import tensorflow as tf

tf.config.set_visible_devices([], 'GPU')

import pytest

from growth_models.core.errors import ConfigurationError
from growth_models.vfi.engine import VFIEngine, VFIState


def _f64(values):
    return tf.constant(values, dtype=tf.float64)


class TestVFIEngineInit:
    """Constructor validation."""

    @pytest.mark.parametrize("beta", [0.0, 1.0, -0.5, 1.2])
    def test_bad_beta(self, beta):
        with pytest.raises(ConfigurationError, match="Discount factor"):
            VFIEngine(beta=beta, tol=1e-6, max_iter=10)

    @pytest.mark.parametrize("tol", [0.0, -1e-6])
    def test_bad_tol(self, tol):
        with pytest.raises(ConfigurationError, match="Tolerance"):
            VFIEngine(beta=0.9, tol=tol, max_iter=10)

    @pytest.mark.parametrize("max_iter", [0, -3])
    def test_bad_max_iter(self, max_iter):
        with pytest.raises(ConfigurationError, match="max_iter"):
            VFIEngine(beta=0.9, tol=1e-6, max_iter=max_iter)


class TestRunVFI:
    """Iteration behaviour on hand-built payoff matrices."""

    def test_shape_mismatch(self):
        engine = VFIEngine(beta=0.9, tol=1e-6, max_iter=10)
        k_grid = _f64([1.0, 2.0, 3.0])
        with pytest.raises(ConfigurationError, match="Payoff grid"):
            engine.run_vfi(tf.zeros(3, tf.float64), tf.zeros((3, 2), tf.float64), k_grid)
        with pytest.raises(ConfigurationError, match="Value function"):
            engine.run_vfi(tf.zeros(4, tf.float64), tf.zeros((3, 3), tf.float64), k_grid)

    def test_fixed_point_start_converges_in_one_step(self):
        """Zero payoff and a zero guess stop after exactly one update."""
        engine = VFIEngine(beta=0.9, tol=1e-6, max_iter=10)
        state = engine.run_vfi(
            tf.zeros(3, tf.float64), tf.zeros((3, 3), tf.float64), _f64([1.0, 2.0, 3.0])
        )
        assert isinstance(state, VFIState)
        assert state.converged
        assert state.n_iterations == 1
        assert state.final_diff == 0.0

    def test_constant_payoff_limit(self):
        """A constant payoff c converges to c / (1 - beta) everywhere."""
        beta, c = 0.8, 2.0
        engine = VFIEngine(beta=beta, tol=1e-10, max_iter=500)
        payoff = tf.fill((4, 4), tf.constant(c, tf.float64))
        state = engine.run_vfi(
            tf.zeros(4, tf.float64), payoff, _f64([0.5, 1.0, 1.5, 2.0])
        )
        assert state.converged
        assert state.n_iterations < 500
        assert state.final_diff <= 1e-10
        np.testing.assert_allclose(state.value.numpy(), c / (1 - beta), atol=1e-8)
        # Every column ties, so the lowest index wins.
        np.testing.assert_array_equal(state.policy_idx.numpy(), [0, 0, 0, 0])

    def test_iteration_cap(self, caplog):
        """Running out of iterations flags non-convergence and warns."""
        engine = VFIEngine(beta=0.99, tol=1e-12, max_iter=3)
        payoff = tf.ones((3, 3), tf.float64)
        with caplog.at_level(logging.WARNING, logger="growth_models.vfi.engine"):
            state = engine.run_vfi(
                tf.zeros(3, tf.float64), payoff, _f64([1.0, 2.0, 3.0])
            )
        assert not state.converged
        assert state.n_iterations == 3
        assert state.final_diff > 1e-12
        assert "did not converge" in caplog.text

    def test_sentinel_columns_avoided(self):
        """The policy never lands on a sentinel-masked choice."""
        sentinel = -1e10
        payoff = _f64([
            [0.0, sentinel, sentinel],
            [0.5, 0.7, sentinel],
            [0.1, 0.9, 1.0],
        ])
        engine = VFIEngine(beta=0.5, tol=1e-10, max_iter=200)
        state = engine.run_vfi(tf.zeros(3, tf.float64), payoff, _f64([1.0, 2.0, 3.0]))
        idx = state.policy_idx.numpy()
        assert state.converged
        assert np.all(payoff.numpy()[np.arange(3), idx] > sentinel)
