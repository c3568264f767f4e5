"""XLA-compiled numerical kernels for VFI solvers.

Each module contains pure numerical functions decorated with
``@tf.function(jit_compile=True)``.  Corresponding ``_core`` variants
(undecorated) are provided for nesting inside other XLA scopes.

Modules
-------
bellman_kernels
    Bellman step, first-occurrence argmax, and sup-norm.
"""

from growth_models.vfi.kernels.bellman_kernels import (
    bellman_step,
    bellman_step_core,
    first_argmax,
    first_argmax_core,
    sup_norm_diff,
    sup_norm_diff_core,
)

__all__ = [
    "bellman_step",
    "bellman_step_core",
    "first_argmax",
    "first_argmax_core",
    "sup_norm_diff",
    "sup_norm_diff_core",
]
