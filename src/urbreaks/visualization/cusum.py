"""Plots of empirical fluctuation processes and the CUSUM-SQ path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from urbreaks.visualization.style import COLORS, use_style

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from urbreaks.tests.cusum import CUSUMSQResults, FluctuationResults


def plot_efp(
    results: FluctuationResults,
    ax: Axes | None = None,
    title: str | None = None,
    xlabel: str = "Time",
    ylabel: str = "Empirical fluctuation process",
    process_color: str | None = None,
    bound_color: str | None = None,
    shade_rejection: bool = True,
    rejection_alpha: float = 0.10,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot a fluctuation process with its critical boundaries.

    Parameters
    ----------
    results : FluctuationResults
        Results from :class:`urbreaks.tests.FluctuationTest`.
    ax : Axes | None
        Axes to plot on. If None, creates a new figure.
    title : str | None
        Plot title. Defaults to the process type.
    xlabel, ylabel : str
        Axis labels.
    process_color : str | None
        Color of the process path.
    bound_color : str | None
        Color of the boundaries.
    shade_rejection : bool
        Whether to shade the region outside the boundaries.
    rejection_alpha : float
        Alpha of the rejection shading.
    figsize : tuple[float, float]
        Figure size. Default is (10, 5).

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and axes.
    """
    import matplotlib.pyplot as plt

    process_color = process_color or COLORS["blue"]
    bound_color = bound_color or COLORS["red"]

    if results.index is not None:
        positions = np.clip(results.positions, 0, len(results.index) - 1)
        x = results.index[positions].to_timestamp()
    else:
        x = results.fractions

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[union-attr]

        ax.plot(
            x,
            results.process,
            color=process_color,
            linewidth=1.8,
            label=results.efp_type,
        )
        level = int(round((1 - results.significance) * 100))
        for bound, label in (
            (results.upper_bound, f"{level}% boundary"),
            (results.lower_bound, None),
        ):
            ax.plot(
                x, bound, color=bound_color, linewidth=1.0, linestyle="--", label=label
            )
        ax.axhline(y=0, color=COLORS["near_black"], linewidth=0.5, alpha=0.3)

        if shade_rejection:
            top = max(ax.get_ylim()[1], float(np.max(results.upper_bound)) * 1.05)
            ax.fill_between(
                x, results.upper_bound, top, color=bound_color, alpha=rejection_alpha
            )
            ax.fill_between(
                x, -top, results.lower_bound, color=bound_color, alpha=rejection_alpha
            )
            ax.set_ylim(-top, top)

        ax.set_title(title or f"{results.efp_type} test")
        ax.set_xlabel(xlabel if results.index is not None else "Sample fraction")
        ax.set_ylabel(ylabel)
        ax.legend(loc="best")

    return fig, ax  # type: ignore[return-value]


def plot_cusum_sq(
    results: CUSUMSQResults,
    ax: Axes | None = None,
    title: str | None = None,
    xlabel: str = "Time",
    ylabel: str = "CUSUM-SQ statistic",
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot the CUSUM-of-squares path, the diagonal and the KS band.

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and axes.
    """
    import matplotlib.pyplot as plt

    n = len(results.statistic_path)
    offset = results.nobs - n
    if results.index is not None:
        x = results.index[offset:].to_timestamp()
    else:
        x = np.arange(offset, results.nobs)

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[union-attr]

        ax.plot(
            x,
            results.expected_path,
            color=COLORS["grey"],
            linewidth=1.0,
            linestyle="--",
            alpha=0.6,
            label="Expected",
        )
        ax.plot(
            x,
            results.statistic_path,
            color=COLORS["blue"],
            linewidth=1.8,
            label="CUSUM-SQ",
        )
        level = int(round((1 - results.significance) * 100))
        for bound, label in (
            (results.upper_bound, f"{level}% bounds"),
            (results.lower_bound, None),
        ):
            ax.plot(
                x, bound, color=COLORS["red"], linewidth=1.0, linestyle="--", label=label
            )

        ax.set_title(title or "CUSUM-SQ test")
        ax.set_xlabel(xlabel if results.index is not None else "Observation")
        ax.set_ylabel(ylabel)
        ax.legend(loc="best")

    return fig, ax  # type: ignore[return-value]
