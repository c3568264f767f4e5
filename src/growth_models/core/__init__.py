"""Core utilities shared by the growth-model solvers.

Provide precision settings, shared type aliases and the exception
hierarchy used across configuration, solvers and simulators.
"""

from growth_models.core.types import TENSORFLOW_DTYPE, NUMPY_DTYPE, Tensor, Array
from growth_models.core.errors import ConfigurationError, NumericDegeneracy
