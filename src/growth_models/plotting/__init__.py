"""Presentation helpers for solved growth models."""

from growth_models.plotting.plots import plot_capital_path, plot_value_functions

__all__ = [
    "plot_capital_path",
    "plot_value_functions",
]
