# growth_models/vfi/grids/grid_builder.py
"""
Grid construction utilities for VFI state spaces.

This module builds the discretised capital grid over which both the
state (current capital) and the action (next-period capital) range.
"""

import tensorflow as tf

from growth_models.config.vfi_config import GridConfig
from growth_models.core.errors import ConfigurationError
from growth_models.core.types import TENSORFLOW_DTYPE, Tensor


class GridBuilder:
    """
    Utility class for constructing VFI state space grids.

    This class provides static methods for building the evenly spaced
    capital grid, either from explicit bounds or from a ``GridConfig``.
    """

    @staticmethod
    def build_capital_grid(
        k_min: float,
        k_max: float,
        n_points: int,
    ) -> Tensor:
        """
        Build an evenly spaced capital grid, both bounds inclusive.

        Args:
            k_min: Lower bound of the grid.
            k_max: Upper bound of the grid.
            n_points: Number of grid points.

        Returns:
            Capital grid tensor of shape ``(n_points,)``, strictly increasing.

        Raises:
            ConfigurationError: If ``n_points < 2`` or ``k_min >= k_max``.
        """
        if n_points < 2:
            raise ConfigurationError(
                f"Capital grid needs at least 2 points, got {n_points}."
            )
        if k_min >= k_max:
            raise ConfigurationError(
                f"Grid lower bound ({k_min}) must be less than upper ({k_max})."
            )
        return GridBuilder._build_linear_grid(k_min, k_max, n_points)

    @staticmethod
    def build_from_config(config: GridConfig) -> Tensor:
        """
        Build the capital grid described by a grid configuration.

        Args:
            config: Grid configuration.

        Returns:
            Capital grid tensor of shape ``(config.n_capital,)``.
        """
        return GridBuilder.build_capital_grid(
            config.k_min, config.k_max, config.n_capital
        )

    @staticmethod
    def _build_linear_grid(
        min_val: float,
        max_val: float,
        n_points: int
    ) -> Tensor:
        """Build a linearly-spaced grid."""
        return tf.linspace(
            tf.constant(min_val, dtype=TENSORFLOW_DTYPE),
            tf.constant(max_val, dtype=TENSORFLOW_DTYPE),
            n_points,
        )
