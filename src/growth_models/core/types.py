# growth_models/core/types.py
"""
Global type definitions for TensorFlow and NumPy precision.

This module establishes a single source of truth for numerical precision
across the entire codebase, ensuring consistency between TensorFlow
operations and NumPy array manipulations.

Example:
    >>> from growth_models.core.types import TENSORFLOW_DTYPE, NUMPY_DTYPE
    >>> import tensorflow as tf
    >>> tensor = tf.constant([1.0, 2.0], dtype=TENSORFLOW_DTYPE)
"""

import tensorflow as tf
import numpy as np
from typing import Union

# -----------------------------------------------------------------------------
# Global Precision Settings
# -----------------------------------------------------------------------------
# float64 throughout: sup-norm tolerances of 1e-6 on value functions of
# order 10-100 sit below float32 resolution.

TENSORFLOW_DTYPE = tf.float64
NUMPY_DTYPE = np.float64

# -----------------------------------------------------------------------------
# Type Aliases
# -----------------------------------------------------------------------------

Tensor = tf.Tensor
Array = np.ndarray
Numeric = Union[float, np.float64, tf.Tensor]
