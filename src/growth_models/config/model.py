# growth_models/config/model.py
"""
Complete model description handed to the growth-model solver.

A :class:`GrowthModel` bundles everything a solve depends on: structural
parameters, grid and numerical controls, the pluggable economic
primitives and the initial value-function guess.  It is created once by
the caller and only read afterwards.

Example:
    >>> from growth_models.config.model import GrowthModel
    >>> from growth_models.econ import NeoclassicalPrimitives
    >>> model = GrowthModel(EconomicParams(), GridConfig(), NeoclassicalPrimitives())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from growth_models.config.economic_params import EconomicParams
from growth_models.config.vfi_config import GridConfig
from growth_models.core.errors import ConfigurationError
from growth_models.core.types import NUMPY_DTYPE, Array

if TYPE_CHECKING:
    from growth_models.vfi.protocols import EconomicPrimitives


@dataclass(frozen=True)
class GrowthModel:
    """
    Immutable bundle of parameters, grid controls and primitives.

    Attributes:
        params: Structural economic parameters.
        grid: Grid layout and numerical controls.
        primitives: Production, consumption, utility and budget functions.
        v_init: Initial value function on the capital grid, length
            ``grid.n_capital``.  ``None`` starts from zeros.

    Raises:
        ConfigurationError: If *v_init* does not match the grid size.
    """

    params: EconomicParams
    grid: GridConfig
    primitives: "EconomicPrimitives"
    v_init: Optional[Sequence[float]] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.v_init is not None:
            v = np.asarray(self.v_init)
            if v.shape != (self.grid.n_capital,):
                raise ConfigurationError(
                    f"v_init must have shape ({self.grid.n_capital},), "
                    f"got {v.shape}."
                )
            if not np.all(np.isfinite(v)):
                raise ConfigurationError("v_init must be finite.")

    def initial_value_function(self) -> Array:
        """Return a fresh float64 copy of the initial value function."""
        if self.v_init is None:
            return np.zeros(self.grid.n_capital, dtype=NUMPY_DTYPE)
        return np.array(self.v_init, dtype=NUMPY_DTYPE)
