"""Reporters: where test summaries and figures go.

The pipeline hands every result to a reporter. :class:`TextReporter`
writes the summaries to a stream; :class:`MatplotlibReporter` also renders
the figures and saves them to a directory or shows them on screen.
Statistical modules never import matplotlib; only the reporter and the
plotting functions it calls do.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, TextIO

if TYPE_CHECKING:
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


class Summarizable(Protocol):
    """Anything with a text summary."""

    def summary(self) -> str: ...


# Plot kind -> (module, function) under urbreaks.visualization
PLOT_KINDS: dict[str, tuple[str, str]] = {
    "series": ("breaks", "plot_series"),
    "efp": ("cusum", "plot_efp"),
    "cusum_sq": ("cusum", "plot_cusum_sq"),
    "fstats": ("fstats", "plot_fstats"),
    "breakpoints": ("breaks", "plot_breakpoints"),
    "break_selection": ("breaks", "plot_break_selection"),
    "zivot_andrews": ("zivot_andrews", "plot_zivot_andrews"),
}


class Reporter(ABC):
    """Destination for analysis output."""

    @abstractmethod
    def section(self, title: str) -> None:
        """Start a new titled section."""

    @abstractmethod
    def report(self, results: Summarizable) -> None:
        """Emit the summary of a results object."""

    @abstractmethod
    def plot(self, kind: str, obj: Any, name: str | None = None, **kwargs: Any) -> None:
        """Render a figure of the given kind for ``obj``."""


class TextReporter(Reporter):
    """Write summaries to a text stream and ignore figures.

    Parameters
    ----------
    stream : TextIO | None
        Output stream. Defaults to ``sys.stdout``.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def section(self, title: str) -> None:
        self.stream.write(f"\n{title}\n{'-' * len(title)}\n")

    def report(self, results: Summarizable) -> None:
        self.stream.write(results.summary() + "\n")

    def plot(self, kind: str, obj: Any, name: str | None = None, **kwargs: Any) -> None:
        if kind not in PLOT_KINDS:
            raise ValueError(f"Unknown plot kind: {kind!r}")
        logger.debug("Skipping %s plot in text-only reporter", kind)


class MatplotlibReporter(TextReporter):
    """Write summaries and render figures with matplotlib.

    Parameters
    ----------
    output_dir : str | Path | None
        Directory for PNG files. If None, figures are not saved.
    show : bool
        Whether to display each figure with ``plt.show``.
    stream : TextIO | None
        Output stream for the summaries.

    Attributes
    ----------
    saved : list[Path]
        Files written so far, in order.
    """

    def __init__(
        self,
        output_dir: str | Path | None = None,
        show: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(stream)
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.show = show
        self.saved: list[Path] = []
        self._counter = 0
        if self.output_dir is not None:
            self.output_dir.mkdir(parents=True, exist_ok=True)

    def plot(self, kind: str, obj: Any, name: str | None = None, **kwargs: Any) -> None:
        """Render ``obj`` with the plotting function registered for ``kind``.

        Parameters
        ----------
        kind : str
            One of :data:`PLOT_KINDS`.
        obj : Any
            Series or results object passed to the plotting function.
        name : str | None
            File stem. Defaults to ``kind``; files are numbered in
            creation order.
        **kwargs
            Passed to the plotting function.
        """
        import importlib

        import matplotlib.pyplot as plt

        if kind not in PLOT_KINDS:
            raise ValueError(f"Unknown plot kind: {kind!r}")
        module_name, func_name = PLOT_KINDS[kind]
        module = importlib.import_module(f"urbreaks.visualization.{module_name}")
        fig, _ax = getattr(module, func_name)(obj, **kwargs)

        self._counter += 1
        if self.output_dir is not None:
            self._save(fig, self.output_dir / f"{self._counter:02d}_{name or kind}.png")
        if self.show:
            plt.show()
        plt.close(fig)

    def _save(self, fig: Figure, path: Path) -> None:
        from urbreaks.visualization.style import use_style

        with use_style():
            fig.savefig(path)
        self.saved.append(path)
        logger.info("Saved figure %s", path)
