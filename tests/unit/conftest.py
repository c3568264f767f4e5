"""Shared test fixtures and helper utilities for VFI unit tests."""

from __future__ import annotations

import pytest
import tensorflow as tf

# Force CPU for CI; must run before any TF ops
tf.config.set_visible_devices([], 'GPU')

from growth_models.config.economic_params import EconomicParams
from growth_models.config.model import GrowthModel
from growth_models.config.vfi_config import GridConfig
from growth_models.econ import NeoclassicalPrimitives


def make_test_params(**overrides) -> EconomicParams:
    """Return EconomicParams with sensible defaults for testing."""
    defaults = dict(
        discount_factor=0.96,
        depreciation_rate=0.1,
        risk_aversion=1.0,
        technology_level=1.0,
        capital_share=0.33,
    )
    defaults.update(overrides)
    return EconomicParams(**defaults)


def make_test_grid(**overrides) -> GridConfig:
    """Return a small GridConfig for fast tests."""
    defaults = dict(
        n_capital=20,
        k_min=0.05,
        k_max=5.0,
        k_prime_min=0.05,
        consumption_floor=1e-10,
        payoff_floor=-1e10,
        tol_vfi=1e-6,
        max_iter_vfi=1000,
    )
    defaults.update(overrides)
    return GridConfig(**defaults)


@pytest.fixture
def test_params() -> EconomicParams:
    return make_test_params()


@pytest.fixture
def small_model() -> GrowthModel:
    """Neoclassical model on a 20-point grid."""
    return GrowthModel(
        params=make_test_params(),
        grid=make_test_grid(),
        primitives=NeoclassicalPrimitives(),
    )


@pytest.fixture
def model_factory():
    """Build a GrowthModel from parameter and grid overrides."""

    def _make(params=None, grid=None, primitives=None, v_init=None) -> GrowthModel:
        return GrowthModel(
            params=make_test_params(**(params or {})),
            grid=make_test_grid(**(grid or {})),
            primitives=primitives or NeoclassicalPrimitives(),
            v_init=v_init,
        )

    return _make
