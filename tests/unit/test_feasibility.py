"""Unit tests for feasibility: build_payoff_grid and degeneracy detection."""

from __future__ import annotations

import numpy as np
import tensorflow as tf

tf.config.set_visible_devices([], 'GPU')

import pytest

from growth_models.core.errors import NumericDegeneracy
from growth_models.vfi.feasibility import build_payoff_grid
from growth_models.vfi.grids.grid_builder import GridBuilder
from growth_models.vfi.protocols import EconomicPrimitives


class LinearStubPrimitives:
    """Stub primitives: y = 2k, c = y - k', u(c) = c, floor ignored."""

    def production(self, model, k):
        return 2.0 * tf.cast(k, tf.float64)

    def consumption(self, model, k, k_prime):
        return 2.0 * tf.cast(k, tf.float64) - tf.cast(k_prime, tf.float64)

    def utility(self, model, c):
        return tf.cast(c, tf.float64)

    def budget_next_capital(self, model, c, y, k):
        return tf.cast(y, tf.float64) - c

    def budget_consumption(self, model, k_prime, y, k):
        return tf.cast(y, tf.float64) - k_prime


def _grid(model):
    return GridBuilder.build_from_config(model.grid)


class TestBuildPayoffGrid:
    """Tests for the sentinel-masked payoff grid."""

    def test_shape(self, small_model):
        """Payoff and mask are exactly (n, n); upper bound is (n,)."""
        n = small_model.grid.n_capital
        result = build_payoff_grid(_grid(small_model), small_model)
        assert result.payoff.shape == (n, n)
        assert result.feasible.shape == (n, n)
        assert result.k_prime_upper.shape == (n,)

    def test_upper_bound_pins_consumption_floor(self, small_model):
        """K' upper bound is resources minus the consumption floor."""
        p = small_model.params
        k = _grid(small_model).numpy()
        result = build_payoff_grid(_grid(small_model), small_model)
        expected = (
            p.technology_level * k ** p.capital_share
            + (1.0 - p.depreciation_rate) * k
            - small_model.grid.consumption_floor
        )
        np.testing.assert_allclose(result.k_prime_upper.numpy(), expected, rtol=1e-12)

    def test_sentinel_exactly_at_infeasible_entries(self, model_factory):
        """Entries below the floor or above the state's bound equal the sentinel."""
        model = model_factory(
            params=dict(depreciation_rate=1.0), grid=dict(k_prime_min=0.3)
        )
        k_grid = _grid(model)
        result = build_payoff_grid(k_grid, model)

        k = k_grid.numpy()
        upper = result.k_prime_upper.numpy()
        expected_mask = (k[None, :] >= 0.3) & (k[None, :] <= upper[:, None])
        payoff = result.payoff.numpy()

        np.testing.assert_array_equal(result.feasible.numpy(), expected_mask)
        assert np.all(payoff[~expected_mask] == model.grid.payoff_floor)
        assert np.all(payoff[expected_mask] > model.grid.payoff_floor)
        # Both bounds are active somewhere on this grid.
        assert (~expected_mask).any(axis=1).all()

    def test_feasible_entries_hold_utility(self, small_model):
        """Feasible entries equal log utility of budget-implied consumption."""
        p = small_model.params
        k = _grid(small_model).numpy()
        result = build_payoff_grid(_grid(small_model), small_model)

        resources = p.technology_level * k ** p.capital_share + (1 - p.depreciation_rate) * k
        consumption = resources[:, None] - k[None, :]
        mask = result.feasible.numpy()
        expected = np.log(consumption[mask])
        np.testing.assert_allclose(
            result.payoff.numpy()[mask], expected, rtol=1e-12, atol=1e-10
        )

    def test_consumption_never_below_floor_when_feasible(self, small_model):
        """Every feasible pair leaves consumption at or above the floor."""
        p = small_model.params
        k = _grid(small_model).numpy()
        result = build_payoff_grid(_grid(small_model), small_model)
        resources = p.technology_level * k ** p.capital_share + (1 - p.depreciation_rate) * k
        consumption = resources[:, None] - k[None, :]
        mask = result.feasible.numpy()
        assert np.all(consumption[mask] >= small_model.grid.consumption_floor * (1 - 1e-6))

    def test_stub_primitives(self, model_factory):
        """Any object satisfying the protocol can drive payoff construction."""
        stub = LinearStubPrimitives()
        assert isinstance(stub, EconomicPrimitives)

        model = model_factory(
            grid=dict(n_capital=4, k_min=1.0, k_max=4.0, k_prime_min=1.0,
                      consumption_floor=0.5, payoff_floor=-99.0),
            primitives=stub,
        )
        result = build_payoff_grid(_grid(model), model)
        # k = [1, 2, 3, 4]; upper = 2k - 0.5 = [1.5, 3.5, 5.5, 7.5]
        expected = np.array([
            [1.0, -99.0, -99.0, -99.0],
            [3.0, 2.0, 1.0, -99.0],
            [5.0, 4.0, 3.0, 2.0],
            [7.0, 6.0, 5.0, 4.0],
        ])
        np.testing.assert_allclose(result.payoff.numpy(), expected, atol=1e-12)
        np.testing.assert_allclose(
            result.k_prime_upper.numpy(), [1.5, 3.5, 5.5, 7.5], atol=1e-12
        )

    def test_degenerate_everywhere(self, model_factory):
        """Investment floor above every upper bound raises NumericDegeneracy."""
        model = model_factory(grid=dict(k_prime_min=10.0))
        with pytest.raises(NumericDegeneracy, match="20 of 20"):
            build_payoff_grid(_grid(model), model)

    def test_degenerate_low_capital_rows(self, model_factory):
        """A partially degenerate grid is still rejected."""
        model = model_factory(
            params=dict(depreciation_rate=1.0), grid=dict(k_prime_min=1.0)
        )
        with pytest.raises(NumericDegeneracy):
            build_payoff_grid(_grid(model), model)
