"""Protocol definitions for the pluggable parts of the growth-model solver.

Defines ``typing.Protocol`` classes that formalise the interface between
the solver and the economic primitives it is given.  Contains no
implementation — only type signatures.

The solver depends only on :class:`EconomicPrimitives`; any object that
provides the five operations can be swapped in without touching it.  In
tests, a lightweight stub returning pre-canned tensors satisfies it.

Every operation receives the complete :class:`GrowthModel` plus named
tensor arguments and must work element-wise under broadcasting: the
solver calls them with ``(n, 1)`` state columns against ``(1, n)``
choice rows, and with flat ``(n,)`` vectors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import tensorflow as tf

if TYPE_CHECKING:
    from growth_models.config.model import GrowthModel


@runtime_checkable
class EconomicPrimitives(Protocol):
    """Interface for production, preferences and the budget constraint."""

    def production(self, model: GrowthModel, k: tf.Tensor) -> tf.Tensor:
        """Output produced from capital *k*."""
        ...

    def consumption(
        self, model: GrowthModel, k: tf.Tensor, k_prime: tf.Tensor
    ) -> tf.Tensor:
        """Consumption when moving from *k* to *k_prime*."""
        ...

    def utility(self, model: GrowthModel, c: tf.Tensor) -> tf.Tensor:
        """Period utility; non-positive *c* is replaced by the floor."""
        ...

    def budget_next_capital(
        self,
        model: GrowthModel,
        c: tf.Tensor,
        y: tf.Tensor,
        k: tf.Tensor,
    ) -> tf.Tensor:
        """Next-period capital implied by consuming *c*."""
        ...

    def budget_consumption(
        self,
        model: GrowthModel,
        k_prime: tf.Tensor,
        y: tf.Tensor,
        k: tf.Tensor,
    ) -> tf.Tensor:
        """Consumption implied by choosing *k_prime*."""
        ...
