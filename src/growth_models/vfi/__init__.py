"""Value Function Iteration (VFI) solvers for the growth model.

This package provides:

* :class:`GrowthModelVFI` — VFI solver for the deterministic
  neoclassical growth model (1-D state space: capital).
* :class:`VFIEngine` — Bellman fixed-point iterator with convergence
  control.
* :func:`build_payoff_grid` — sentinel-masked payoff matrix over
  (K, K') pairs.

Sub-packages
------------
kernels
    XLA-compiled numerical kernels (Bellman step, argmax, sup-norm).
simulation
    Post-solve capital-path simulation.
grids
    Grid construction and interpolation utilities.

Modules
-------
protocols
    Protocol definition for the pluggable economic primitives.
feasibility
    Feasibility masking and payoff-grid construction.
policies
    Policy extraction and formatting.
engine
    Bellman fixed-point iterator.
"""

from growth_models.vfi.engine import VFIEngine, VFIState
from growth_models.vfi.feasibility import PayoffGrid, build_payoff_grid
from growth_models.vfi.growth import GrowthModelVFI
from growth_models.vfi.protocols import EconomicPrimitives

__all__ = [
    "EconomicPrimitives",
    "GrowthModelVFI",
    "PayoffGrid",
    "VFIEngine",
    "VFIState",
    "build_payoff_grid",
]
