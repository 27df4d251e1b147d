"""Visualization utilities for unit-root and structural break analysis."""

from urbreaks.visualization.breaks import (
    plot_break_selection,
    plot_breakpoints,
    plot_series,
)
from urbreaks.visualization.cusum import plot_cusum_sq, plot_efp
from urbreaks.visualization.fstats import plot_fstats
from urbreaks.visualization.style import (
    COLOR_CYCLE,
    COLORS,
    add_break_dates,
    add_confidence_band,
    get_style,
    use_style,
)
from urbreaks.visualization.zivot_andrews import plot_zivot_andrews

__all__ = [
    "COLORS",
    "COLOR_CYCLE",
    "add_break_dates",
    "add_confidence_band",
    "get_style",
    "plot_break_selection",
    "plot_breakpoints",
    "plot_cusum_sq",
    "plot_efp",
    "plot_fstats",
    "plot_series",
    "plot_zivot_andrews",
    "use_style",
]
