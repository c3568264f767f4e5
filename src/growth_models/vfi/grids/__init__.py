# growth_models/vfi/grids/__init__.py
"""
Grid management for VFI models.

This package provides utilities for constructing the discretised capital
grid, and the interpolation helper used by the Bellman kernels and the
path simulator.
"""

from growth_models.vfi.grids.grid_builder import GridBuilder
from growth_models.vfi.grids.grid_utils import (
    # 1-D linear interpolation (XLA)
    _interp_1d_batch_core,
    interp_1d_batch,
)

__all__ = [
    'GridBuilder',
    # 1-D linear interpolation (XLA)
    '_interp_1d_batch_core',
    'interp_1d_batch',
]
