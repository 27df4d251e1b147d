"""Plot of the Zivot-Andrews t-statistic path."""

from __future__ import annotations

from typing import TYPE_CHECKING

from urbreaks.visualization.style import COLOR_CYCLE, COLORS, add_break_dates, use_style

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from urbreaks.tests.zivot_andrews import ZivotAndrewsResults


def plot_zivot_andrews(
    results: ZivotAndrewsResults,
    ax: Axes | None = None,
    title: str | None = None,
    xlabel: str = "Time",
    ylabel: str = "t statistic",
    color: str | None = None,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot the t-statistic at every candidate break with critical values.

    The candidate attaining the minimum is marked as the potential break.

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and axes.
    """
    import matplotlib.pyplot as plt

    if results.index is not None:
        x = results.index[results.candidates].to_timestamp()
        at_break = results.index[results.break_index].to_timestamp()
    else:
        x = results.candidates
        at_break = results.break_index

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[union-attr]

        ax.plot(
            x,
            results.statistic_path,
            color=color or COLORS["blue"],
            linewidth=1.8,
            label="t statistic",
        )
        for i, (key, value) in enumerate(results.critical_values.items()):
            ax.axhline(
                y=value,
                color=COLOR_CYCLE[(i + 1) % len(COLOR_CYCLE)],
                linestyle="--",
                linewidth=1.0,
                label=f"{key} critical value",
            )
        add_break_dates(ax, [at_break], label="Potential break")

        ax.set_title(title or f"Zivot-Andrews test ({results.model})")
        ax.set_xlabel(xlabel if results.index is not None else "Observation")
        ax.set_ylabel(ylabel)
        ax.legend(loc="best")

    return fig, ax  # type: ignore[return-value]
