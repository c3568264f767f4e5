"""Figures for solved growth models.

Every function builds its own :class:`matplotlib.figure.Figure` (or
draws on a caller-supplied axes) and returns the figure; nothing here
touches the ``pyplot`` current-figure state, so figures can be built in
any order and saved or closed by the caller.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional, Sequence

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

_MARKERS = ("o", "s", "^", "D", "v", "P", "X", "*", "<", ">")


def _style_axes(ax: Axes) -> None:
    ax.grid(True, alpha=0.2, linestyle="--")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


def plot_value_functions(
    solutions: Sequence[Dict[str, Any]],
    var: str,
    *,
    include_policy: bool = False,
    ncols: int = 1,
) -> Figure:
    """Plot value functions of several solutions, labelled by *var*.

    Parameters
    ----------
    solutions:
        Outputs of ``GrowthModelVFI.solve()``.
    var:
        Result key used to label each solution, e.g. ``"risk_aversion"``.
    include_policy:
        If True, draw one panel per solution showing ``v(k)`` and
        ``k'(k)``; otherwise overlay all value functions on one axes.
    ncols:
        Number of panel columns when *include_policy* is set.

    Returns
    -------
    Figure
        The assembled figure.
    """
    if not solutions:
        raise ValueError("At least one solution is required.")

    if include_policy:
        nrows = math.ceil(len(solutions) / ncols)
        fig = Figure(figsize=(5 * ncols, 4 * nrows))
        axes = fig.subplots(nrows, ncols, squeeze=False).ravel()
        for ax, sol in zip(axes, solutions):
            k = np.asarray(sol["K"])
            ax.scatter(k, sol["V"], s=6, alpha=0.6, label="v(k)")
            ax.scatter(k, sol["policy_k_values"], s=6, alpha=0.6, label="k'(k)")
            ax.set_title(f"{var} = {sol[var]}", fontsize=12, fontweight="semibold")
            ax.set_xlabel("k", fontsize=10)
            _style_axes(ax)
        for ax in axes[len(solutions):]:
            ax.set_visible(False)
        axes[len(solutions) - 1].legend(loc="lower right", fontsize=9)
        fig.tight_layout()
        return fig

    fig = Figure(figsize=(10, 5))
    ax = fig.add_subplot(1, 1, 1)
    for idx, sol in enumerate(solutions):
        ax.scatter(
            sol["K"],
            sol["V"],
            s=20,
            alpha=0.4,
            marker=_MARKERS[idx % len(_MARKERS)],
            label=f"{var} = {sol[var]}",
        )
    ax.set_xlabel("k", fontsize=10)
    ax.set_ylabel("v(k)", fontsize=10)
    ax.legend(
        loc="upper center",
        bbox_to_anchor=(0.5, -0.12),
        ncol=len(solutions),
        fontsize=9,
        framealpha=0.9,
        edgecolor="#cccccc",
    )
    _style_axes(ax)
    fig.tight_layout()
    return fig


def plot_capital_path(
    k_path: np.ndarray,
    ax: Optional[Axes] = None,
) -> Figure:
    """Plot a simulated capital path over time and annotate ``k_T``.

    Parameters
    ----------
    k_path:
        Capital path, e.g. from ``simulate_capital_path``.
    ax:
        Axes to draw on.  A new figure is created when omitted.

    Returns
    -------
    Figure
        The figure holding *ax*.
    """
    if ax is None:
        fig = Figure(figsize=(8, 4))
        ax = fig.add_subplot(1, 1, 1)
    else:
        fig = ax.figure

    k_path = np.asarray(k_path)
    t = np.arange(k_path.size)
    ax.plot(t, k_path, linewidth=1.8, color="#4C72B0")
    ax.annotate(
        f"k_T = {k_path[-1]:.2f}",
        xy=(t[-1], k_path[-1]),
        ha="right",
        va="bottom",
        fontsize=8,
        color="red",
    )
    ax.set_xlabel("Time (t)", fontsize=10)
    ax.set_ylabel("Capital (k_t)", fontsize=10)
    ax.set_title("Capital Path over Time", fontsize=12, fontweight="semibold")
    _style_axes(ax)
    return fig
