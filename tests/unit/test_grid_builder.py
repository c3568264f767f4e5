"""Unit tests for grid_builder: GridBuilder."""

from __future__ import annotations

import numpy as np
import tensorflow as tf

tf.config.set_visible_devices([], 'GPU')

import pytest

from growth_models.config.vfi_config import GridConfig
from growth_models.core.errors import ConfigurationError
from growth_models.core.types import TENSORFLOW_DTYPE
from growth_models.vfi.grids.grid_builder import GridBuilder


class TestGridBuilderCapital:
    """Tests for capital grid construction."""

    @pytest.mark.parametrize("n_points", [2, 3, 20, 100])
    def test_shape(self, n_points):
        """Capital grid has the requested number of points."""
        k_grid = GridBuilder.build_capital_grid(0.05, 5.0, n_points)
        assert k_grid.shape == (n_points,)

    def test_bounds(self):
        """First and last points equal the bounds."""
        k = GridBuilder.build_capital_grid(0.5, 3.0, 50).numpy()
        assert k[0] == pytest.approx(0.5, abs=1e-12)
        assert k[-1] == pytest.approx(3.0, abs=1e-12)

    def test_strictly_increasing(self):
        """Capital grid is sorted strictly ascending."""
        k_grid = GridBuilder.build_capital_grid(0.1, 5.0, 30)
        assert np.all(np.diff(k_grid.numpy()) > 0)

    def test_even_spacing(self):
        """Consecutive points are equally spaced."""
        k = GridBuilder.build_capital_grid(0.05, 5.0, 100).numpy()
        np.testing.assert_allclose(np.diff(k), (5.0 - 0.05) / 99, rtol=1e-10)

    def test_dtype(self):
        """Grid uses the project-wide precision."""
        k_grid = GridBuilder.build_capital_grid(0.1, 1.0, 5)
        assert k_grid.dtype == TENSORFLOW_DTYPE

    def test_deterministic(self):
        """Two builds with the same inputs are identical."""
        a = GridBuilder.build_capital_grid(0.05, 5.0, 37).numpy()
        b = GridBuilder.build_capital_grid(0.05, 5.0, 37).numpy()
        np.testing.assert_array_equal(a, b)

    def test_too_few_points(self):
        """Fewer than two points is a configuration error."""
        with pytest.raises(ConfigurationError, match="at least 2"):
            GridBuilder.build_capital_grid(0.05, 5.0, 1)

    @pytest.mark.parametrize("bounds", [(1.0, 1.0), (2.0, 1.0)])
    def test_inverted_bounds(self, bounds):
        """Lower bound must be strictly below the upper bound."""
        with pytest.raises(ConfigurationError):
            GridBuilder.build_capital_grid(bounds[0], bounds[1], 10)

    def test_from_config(self):
        """build_from_config follows the GridConfig fields."""
        config = GridConfig(n_capital=11, k_min=0.2, k_max=2.2)
        k = GridBuilder.build_from_config(config).numpy()
        assert k.shape == (11,)
        np.testing.assert_allclose(k, np.linspace(0.2, 2.2, 11), atol=1e-12)
