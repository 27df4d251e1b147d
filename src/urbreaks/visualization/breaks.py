"""Plots of a series, its estimated breakpoints and the break-count choice."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from urbreaks.visualization.style import (
    COLORS,
    add_break_dates,
    add_confidence_band,
    time_axis,
    use_style,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from urbreaks.data import RegularSeries
    from urbreaks.tests.bai_perron import BaiPerronResults


def plot_series(
    series: RegularSeries,
    ax: Axes | None = None,
    title: str | None = None,
    xlabel: str = "Time",
    ylabel: str | None = None,
    color: str | None = None,
    linewidth: float = 1.6,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot a regularly sampled series against its calendar periods.

    Parameters
    ----------
    series : RegularSeries
        The loaded series.
    ax : Axes | None
        Axes to plot on. If None, creates a new figure.
    title : str | None
        Plot title. Defaults to the series name.
    xlabel : str
        X-axis label.
    ylabel : str | None
        Y-axis label. Defaults to the series name.
    color : str | None
        Line color.
    linewidth : float
        Line width.
    figsize : tuple[float, float]
        Figure size. Default is (10, 5).

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and axes.

    Examples
    --------
    >>> from urbreaks import load_series
    >>> from urbreaks.visualization import plot_series
    >>> series = load_series("illiquidity.csv", start="1996-01")
    >>> fig, ax = plot_series(series)
    >>> fig.savefig("series.png")
    """
    import matplotlib.pyplot as plt

    x = time_axis(series.index, series.nobs)

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[union-attr]

        ax.plot(
            x,
            series.values,
            color=color or COLORS["blue"],
            linewidth=linewidth,
            label=series.name,
        )
        ax.set_title(title or series.name)
        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel or series.name)
        ax.set_xlim(x[0], x[-1])

    return fig, ax  # type: ignore[return-value]


def plot_breakpoints(
    results: BaiPerronResults,
    ax: Axes | None = None,
    breaks: int | None = None,
    title: str | None = None,
    xlabel: str = "Time",
    ylabel: str = "Value",
    series_color: str | None = None,
    fitted_color: str | None = None,
    break_color: str | None = None,
    ci_color: str | None = None,
    ci_alpha: float = 0.15,
    show_ci: bool = True,
    shade_regimes: bool = False,
    regime_colors: Sequence[str] | None = None,
    regime_alpha: float = 0.15,
    show_legend: bool = True,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot the data with the fitted regime model and break intervals.

    Parameters
    ----------
    results : BaiPerronResults
        Results from :class:`urbreaks.tests.BaiPerronTest`.
    ax : Axes | None
        Axes to plot on. If None, creates a new figure.
    breaks : int | None
        Number of breaks to draw. Defaults to the selected number.
    title : str | None
        Plot title. If None, uses default.
    xlabel, ylabel : str
        Axis labels.
    series_color : str | None
        Color of the data.
    fitted_color : str | None
        Color of the fitted values.
    break_color : str | None
        Color of the break lines.
    ci_color : str | None
        Color of the break confidence bands.
    ci_alpha : float
        Alpha of the confidence bands.
    show_ci : bool
        Whether to shade the 95% confidence interval of each break.
    shade_regimes : bool
        Whether to tint alternating regimes.
    regime_colors : Sequence[str] | None
        Tints of the regimes.
    regime_alpha : float
        Alpha of the regime tints.
    show_legend : bool
        Whether to show the legend.
    figsize : tuple[float, float]
        Figure size. Default is (10, 5).

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and axes.
    """
    import matplotlib.pyplot as plt

    test = results._require_test()
    locations = results.breaks(breaks)
    y = test.endog
    n = len(y)
    x = time_axis(results.index, n)
    fitted = results.fitted(breaks)

    if regime_colors is None:
        regime_colors = (COLORS["regime_tint_a"], COLORS["regime_tint_b"])

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[union-attr]

        if shade_regimes and locations:
            bounds = [0, *locations, n]
            for i, (start, end) in enumerate(zip(bounds[:-1], bounds[1:])):
                ax.axvspan(
                    x[start],
                    x[end - 1],
                    color=regime_colors[i % len(regime_colors)],
                    alpha=regime_alpha,
                )

        ax.plot(x, y, color=series_color or COLORS["blue"], linewidth=1.4, label="Data")
        ax.plot(
            x,
            fitted.to_numpy(),
            color=fitted_color or COLORS["near_black"],
            linewidth=1.8,
            label="Fitted",
        )

        if show_ci and locations:
            frame = results.confint(breaks)
            for i, row in enumerate(frame.itertuples(index=False)):
                add_confidence_band(
                    ax,
                    x[int(row.lower)],
                    x[int(row.upper)],
                    color=ci_color or COLORS["red"],
                    alpha=ci_alpha,
                    label="95% CI" if i == 0 else None,
                )
        add_break_dates(ax, [x[b] for b in locations], color=break_color)

        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)
        if title is None:
            m = len(locations)
            title = f"Bai-Perron fit with {m} break{'s' if m != 1 else ''}"
        ax.set_title(title)
        if show_legend:
            ax.legend(loc="best")
        ax.set_xlim(x[0], x[-1])

    return fig, ax  # type: ignore[return-value]


def plot_break_selection(
    results: BaiPerronResults,
    ax: Axes | None = None,
    title: str | None = None,
    bic_color: str | None = None,
    rss_color: str | None = None,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot the BIC and the residual sum of squares against m.

    The BIC is drawn on the left axis and the RSS on a twin right axis.
    Exact fits give an infinite BIC and are left out of the BIC line.

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and the left (BIC) axes.
    """
    import matplotlib.pyplot as plt

    ms = np.array(sorted(results.ssr))
    bic = np.array([results.bic[m] for m in ms])
    rss = np.array([results.ssr[m] for m in ms])
    finite = np.isfinite(bic)
    bic_color = bic_color or COLORS["blue"]
    rss_color = rss_color or COLORS["red"]

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[union-attr]

        ax.plot(
            ms[finite],
            bic[finite],
            color=bic_color,
            marker="o",
            linewidth=1.6,
            label="BIC",
        )
        ax.axvline(
            x=results.n_breaks_bic,
            color=bic_color,
            linestyle=":",
            linewidth=0.9,
            alpha=0.8,
        )
        ax.set_xlabel("Number of breaks")
        ax.set_ylabel("BIC", color=bic_color)
        ax.set_xticks(ms)

        ax_rss: Any = ax.twinx()
        ax_rss.plot(
            ms,
            rss,
            color=rss_color,
            marker="s",
            linestyle="--",
            linewidth=1.2,
            label="RSS",
        )
        ax_rss.set_ylabel("RSS", color=rss_color)
        ax_rss.grid(False)

        handles = ax.get_legend_handles_labels()
        rss_handles = ax_rss.get_legend_handles_labels()
        ax.legend(handles[0] + rss_handles[0], handles[1] + rss_handles[1], loc="best")
        ax.set_title(title or "Break count selection")

    return fig, ax  # type: ignore[return-value]
