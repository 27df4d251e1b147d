"""Plot style for urbreaks figures.

A muted palette, light horizontal grid, no top/right spines and frameless
legends. ``use_style`` applies it temporarily, so importing urbreaks never
changes global matplotlib state.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    import pandas as pd
    from matplotlib.axes import Axes

COLORS: dict[str, str] = {
    "blue": "#1F5A8C",
    "red": "#C0392B",
    "teal": "#2A9D8F",
    "green": "#5B8C2A",
    "gold": "#D4A017",
    "grey": "#7F8C8D",
    "mauve": "#8E6C8A",
    "light_grey": "#D5D8DC",
    "near_black": "#1C2833",
    "regime_tint_a": "#EAF1F8",
    "regime_tint_b": "#FBEDEA",
}

COLOR_CYCLE: list[str] = [
    COLORS[name] for name in ("blue", "red", "teal", "green", "gold", "grey", "mauve")
]


def get_style() -> dict[str, Any]:
    """Return the rcParams of the urbreaks style."""
    from cycler import cycler

    return {
        "figure.figsize": (10, 5),
        "figure.dpi": 150,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.spines.left": True,
        "axes.spines.bottom": True,
        "axes.grid": True,
        "axes.grid.axis": "y",
        "axes.titlesize": 12,
        "axes.titleweight": "bold",
        "axes.labelsize": 10,
        "axes.prop_cycle": cycler(color=COLOR_CYCLE),
        "grid.color": COLORS["light_grey"],
        "grid.linewidth": 0.6,
        "font.family": "sans-serif",
        "font.size": 10,
        "xtick.major.size": 0,
        "ytick.major.size": 0,
        "legend.frameon": False,
        "savefig.dpi": 300,
        "savefig.bbox": "tight",
    }


@contextmanager
def use_style() -> Iterator[None]:
    """Apply the urbreaks style within a ``with`` block."""
    import matplotlib as mpl

    with mpl.rc_context(get_style()):
        yield


def time_axis(index: pd.PeriodIndex | None, n: int) -> Any:
    """x-values for n observations: timestamps when periods are known."""
    if index is None:
        return np.arange(n)
    return index[:n].to_timestamp()


def add_break_dates(
    ax: Axes,
    positions: Sequence[Any],
    color: str | None = None,
    label: str | None = "Breaks",
) -> None:
    """Draw dashed vertical lines at break positions."""
    for i, x in enumerate(positions):
        ax.axvline(
            x=x,
            color=color or COLORS["grey"],
            linestyle="--",
            linewidth=0.9,
            alpha=0.8,
            label=label if i == 0 else None,
        )


def add_confidence_band(
    ax: Axes,
    lower: Any,
    upper: Any,
    color: str | None = None,
    alpha: float = 0.15,
    label: str | None = None,
) -> None:
    """Shade a vertical band between two x positions."""
    ax.axvspan(lower, upper, color=color or COLORS["red"], alpha=alpha, label=label)
