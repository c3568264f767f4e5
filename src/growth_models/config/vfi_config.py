# growth_models/config/vfi_config.py
"""
Configuration for Value Function Iteration (VFI) solvers.

This module provides the grid layout and numerical controls for
discrete-grid VFI: grid size and bounds, the investment floor, the
consumption and payoff floors, and the convergence criteria.

Example:
    >>> from growth_models.config.vfi_config import load_grid_config
    >>> config = load_grid_config("config/vfi.json", "growth")
    >>> print(f"Capital grid points: {config.n_capital}")
"""

from dataclasses import dataclass, fields
import os
import logging

from growth_models.core.errors import ConfigurationError
from growth_models.io.file_utils import load_json_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridConfig:
    """
    Configuration for VFI computational grids and numerical tolerances.

    Attributes:
        n_capital: Number of points in the capital grid (>= 2).
        k_min: Lower bound of the capital grid.
        k_max: Upper bound of the capital grid.
        k_prime_min: Investment floor; smallest admissible next-period capital.
        consumption_floor: Consumption substituted for non-positive values
            before utility is evaluated; also pins the largest feasible K'.
        payoff_floor: Payoff assigned to infeasible (K, K') pairs.  Must lie
            below every feasible payoff.
        tol_vfi: Sup-norm convergence tolerance for the Bellman iteration.
        max_iter_vfi: Maximum number of Bellman iterations.

    Raises:
        ConfigurationError: On invalid grid bounds, size or tolerances.
    """

    n_capital: int = 100
    k_min: float = 0.05
    k_max: float = 5.0
    k_prime_min: float = 0.05

    consumption_floor: float = 1e-10
    payoff_floor: float = -1e10

    tol_vfi: float = 1e-6
    max_iter_vfi: int = 1000

    def __post_init__(self) -> None:
        if self.n_capital < 2:
            raise ConfigurationError(
                f"n_capital must be >= 2, got {self.n_capital}."
            )
        if self.k_min >= self.k_max:
            raise ConfigurationError(
                f"k_min ({self.k_min}) must be less than k_max ({self.k_max})."
            )
        if self.tol_vfi <= 0.0:
            raise ConfigurationError(
                f"Tolerance must be positive, got {self.tol_vfi}."
            )
        if self.max_iter_vfi <= 0:
            raise ConfigurationError(
                f"max_iter_vfi must be positive, got {self.max_iter_vfi}."
            )
        if self.consumption_floor <= 0.0:
            raise ConfigurationError(
                f"consumption_floor must be positive, got {self.consumption_floor}."
            )


def load_grid_config(filename: str, model_type: str) -> GridConfig:
    """
    Load grid configuration from a JSON file for a specific model type.

    Args:
        filename: Path to the JSON configuration file.
        model_type: Top-level key in the JSON file (e.g. 'growth').

    Returns:
        Populated GridConfig instance; defaults if the file or key is absent.

    Raises:
        ConfigurationError: If the file is unreadable or values are invalid.
    """
    if not os.path.exists(filename):
        logger.warning(
            f"Grid config file '{filename}' not found. Using defaults."
        )
        return GridConfig()

    full_data = load_json_file(filename)

    if model_type not in full_data:
        logger.warning(
            f"Key '{model_type}' not in {filename}. Using defaults."
        )
        return GridConfig()

    model_data = full_data[model_type]
    valid_keys = {f.name for f in fields(GridConfig)}
    filtered_data = {k: v for k, v in model_data.items() if k in valid_keys}

    return GridConfig(**filtered_data)
