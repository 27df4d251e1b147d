"""Plot of the F-statistic sequence over candidate break dates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from urbreaks.visualization.style import COLORS, add_break_dates, use_style

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from urbreaks.tests.fstats import FStatsResults


def plot_fstats(
    results: FStatsResults,
    ax: Axes | None = None,
    title: str | None = None,
    xlabel: str = "Time",
    ylabel: str = "F statistic",
    color: str | None = None,
    boundary_color: str | None = None,
    mark_peak: bool = True,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot the Chow F-statistics with the supF critical boundary.

    Parameters
    ----------
    results : FStatsResults
        Results from :class:`urbreaks.tests.FStatsTest`.
    ax : Axes | None
        Axes to plot on. If None, creates a new figure.
    title : str | None
        Plot title.
    xlabel, ylabel : str
        Axis labels.
    color : str | None
        Color of the F path.
    boundary_color : str | None
        Color of the boundary line.
    mark_peak : bool
        Whether to mark the candidate with the largest F when supF
        rejects.
    figsize : tuple[float, float]
        Figure size. Default is (10, 5).

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and axes.
    """
    import matplotlib.pyplot as plt

    if results.index is not None:
        x = results.index[results.candidates].to_timestamp()
    else:
        x = results.candidates

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[union-attr]

        ax.plot(
            x,
            results.f_stats,
            color=color or COLORS["blue"],
            linewidth=1.8,
            label="F statistics",
        )
        level = int(round((1 - results.significance) * 100))
        ax.axhline(
            y=results.boundary,
            color=boundary_color or COLORS["red"],
            linestyle="--",
            linewidth=1.0,
            label=f"{level}% supF boundary",
        )
        ax.axhline(y=0, color=COLORS["near_black"], linewidth=0.5, alpha=0.3)
        if mark_peak and results.reject:
            peak = list(results.candidates).index(results.break_index)
            add_break_dates(ax, [x[peak]], label="Largest F")

        ax.set_title(title or "F statistics")
        ax.set_xlabel(xlabel if results.index is not None else "Observation")
        ax.set_ylabel(ylabel)
        ax.legend(loc="best")

    return fig, ax  # type: ignore[return-value]
