"""Command line entry point: ``urbreaks PATH``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from urbreaks._version import __version__
from urbreaks.config import AnalysisConfig
from urbreaks.pipeline import run_analysis
from urbreaks.reporting import MatplotlibReporter, TextReporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from urbreaks.reporting import Reporter

log = logging.getLogger("urbreaks")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="urbreaks",
        description=(
            "Unit-root, stationarity and structural break tests "
            "on a regularly sampled series"
        ),
    )
    parser.add_argument(
        "path",
        help="Whitespace-delimited table with a header row",
    )
    parser.add_argument(
        "--start",
        default=None,
        help="Period of the first observation, e.g. 1996-01 (default: 1996-01)",
    )
    parser.add_argument(
        "--frequency",
        type=int,
        choices=[1, 4, 12],
        default=None,
        help="Observations per year (default: 12)",
    )
    parser.add_argument(
        "--column",
        default=None,
        help="Column to analyse when the table has several",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="TOML file overriding the analysis settings",
    )
    parser.add_argument(
        "--plots-dir",
        default=None,
        help="Directory where figures are saved as PNG",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display figures on screen",
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Print summaries only",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AnalysisConfig:
    """Defaults, then the TOML file, then explicit command line options."""
    config = (
        AnalysisConfig.from_toml(args.config) if args.config else AnalysisConfig()
    )
    overrides = {
        key: value
        for key, value in (
            ("start", args.start),
            ("frequency", args.frequency),
            ("column", args.column),
        )
        if value is not None
    }
    return config.updated(**overrides) if overrides else config


def build_reporter(args: argparse.Namespace) -> Reporter:
    if args.no_plots or (args.plots_dir is None and not args.show):
        return TextReporter()
    return MatplotlibReporter(output_dir=args.plots_dir, show=args.show)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = build_config(args)
        log.info("Input:      %s", args.path)
        log.info("Start:      %s (frequency %d)", config.start, config.frequency)
        if args.plots_dir:
            log.info("Plots dir:  %s", args.plots_dir)
        run_analysis(args.path, config=config, reporter=build_reporter(args))
    except ValueError as exc:
        log.error("Analysis failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
