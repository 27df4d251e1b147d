"""The analysis pipeline: unit-root, stationarity and structural-break tests.

:func:`run_analysis` loads one series and runs the whole battery in a fixed
order, handing every summary and figure to a reporter:

1. plot of the series
2. ADF against the stationary alternative (trend, cube-root lag)
3. ADF for each deterministic specification, with BIC lag selection
4. Phillips-Perron with constant and with trend
5. KPSS for trend stationarity
6. AR(1) design and the empirical fluctuation process test
7. F statistics for a single break
8. Bai-Perron breakpoints, with coefficients, fitted values and break
   confidence intervals for a chosen number of breaks
9. Zivot-Andrews unit-root test with one break

The first error stops the run and propagates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from urbreaks.config import AnalysisConfig
from urbreaks.data import RegularSeries, build_ar1_design, load_series
from urbreaks.reporting import TextReporter
from urbreaks.tests import (
    BaiPerronTest,
    FluctuationTest,
    FStatsTest,
    ZivotAndrewsTest,
)
from urbreaks.unitroot import adf_test, kpss_test, phillips_perron_test

if TYPE_CHECKING:
    import pandas as pd

    from urbreaks.data import ARDesign
    from urbreaks.reporting import Reporter
    from urbreaks.tests import (
        BaiPerronResults,
        FluctuationResults,
        FStatsResults,
        ZivotAndrewsResults,
    )
    from urbreaks.unitroot import UnitRootResults

logger = logging.getLogger(__name__)


@dataclass
class BreakDetail:
    """Regime coefficients, fitted values and break intervals for one m."""

    n_breaks: int
    coef: pd.DataFrame
    fitted: pd.Series
    confint: pd.DataFrame

    def summary(self) -> str:
        """Generate a text summary of the regime detail.

        Returns
        -------
        str
            Formatted summary string.
        """
        lines = []
        lines.append("=" * 78)
        lines.append(f"{f'Regime Detail for {self.n_breaks} Break(s)':^78}")
        lines.append("=" * 78)
        lines.append("Coefficients by regime:")
        lines.append(self.coef.to_string(float_format=lambda v: f"{v:.6f}"))
        if len(self.confint):
            lines.append("-" * 78)
            lines.append("Break date confidence intervals (95%):")
            lines.append(self.confint.to_string(index=False))
        lines.append("=" * 78)
        return "\n".join(lines)


@dataclass
class AnalysisResults:
    """Everything produced by one analysis run.

    Attributes
    ----------
    series : RegularSeries
        The analysed series.
    config : AnalysisConfig
        Settings of the run.
    adf_stationary : UnitRootResults
        ADF with trend and the cube-root lag rule.
    adf : dict[str, UnitRootResults]
        ADF results keyed by deterministic specification.
    phillips_perron : dict[str, UnitRootResults]
        Phillips-Perron results keyed by model.
    kpss : UnitRootResults
        KPSS result.
    design : ARDesign
        AR(1) regression design used by the break tests.
    fluctuation : FluctuationResults
        Empirical fluctuation process test.
    fstats : FStatsResults
        F-statistic tests.
    breakpoints : BaiPerronResults
        Multiple breakpoint search.
    detail : BreakDetail
        Regime detail for the chosen number of breaks.
    zivot_andrews : ZivotAndrewsResults
        Zivot-Andrews test.
    """

    series: RegularSeries
    config: AnalysisConfig
    adf_stationary: UnitRootResults
    adf: dict[str, UnitRootResults] = field(default_factory=dict)
    phillips_perron: dict[str, UnitRootResults] = field(default_factory=dict)
    kpss: UnitRootResults | None = None
    design: ARDesign | None = None
    fluctuation: FluctuationResults | None = None
    fstats: FStatsResults | None = None
    breakpoints: BaiPerronResults | None = None
    detail: BreakDetail | None = None
    zivot_andrews: ZivotAndrewsResults | None = None


def _load(source: str | Path | RegularSeries, config: AnalysisConfig) -> RegularSeries:
    if isinstance(source, RegularSeries):
        return source
    return load_series(
        source,
        start=config.start,
        frequency=config.frequency,
        column=config.column,
    )


def run_analysis(
    source: str | Path | RegularSeries,
    config: AnalysisConfig | None = None,
    reporter: Reporter | None = None,
) -> AnalysisResults:
    """Run the full unit-root and structural-break analysis.

    Parameters
    ----------
    source : str | Path | RegularSeries
        Path of the input table, or an already loaded series.
    config : AnalysisConfig | None
        Settings. Defaults to ``AnalysisConfig()``.
    reporter : Reporter | None
        Destination of summaries and figures. Defaults to a
        :class:`~urbreaks.reporting.TextReporter` on stdout.

    Returns
    -------
    AnalysisResults
        Every test result of the run.

    Raises
    ------
    AnalysisError
        If loading fails or any test cannot be computed.
    """
    config = config if config is not None else AnalysisConfig()
    reporter = reporter if reporter is not None else TextReporter()
    alpha = config.significance

    series = _load(source, config)
    logger.info(
        "Analysing %s: %d observations, %s to %s",
        series.name,
        series.nobs,
        series.index[0],
        series.end,
    )
    reporter.section(f"{series.name}: {series.index[0]} to {series.end}")
    reporter.plot("series", series, name="series")

    logger.info("Unit-root tests")
    reporter.section("Unit-root tests")
    adf_stationary = adf_test(series, trend="trend", max_lags=None, significance=alpha)
    reporter.report(adf_stationary)
    results = AnalysisResults(series=series, config=config, adf_stationary=adf_stationary)

    for trend in config.adf_trends:
        logger.debug("ADF with trend=%s", trend)
        res = adf_test(
            series,
            trend=trend,  # type: ignore[arg-type]
            max_lags=config.adf_max_lags,
            select_lags=config.adf_select_lags,  # type: ignore[arg-type]
            significance=alpha,
        )
        results.adf[trend] = res
        reporter.report(res)

    for model in config.pp_models:
        logger.debug("Phillips-Perron with model=%s", model)
        res = phillips_perron_test(
            series,
            model=model,  # type: ignore[arg-type]
            lags=config.pp_lags,  # type: ignore[arg-type]
            significance=alpha,
        )
        results.phillips_perron[model] = res
        reporter.report(res)

    logger.info("Stationarity test")
    reporter.section("Stationarity test")
    results.kpss = kpss_test(
        series,
        trend=config.kpss_trend,  # type: ignore[arg-type]
        lags=config.kpss_lags,  # type: ignore[arg-type]
        significance=alpha,
    )
    reporter.report(results.kpss)

    logger.info("Structural break tests on the AR(1) regression")
    reporter.section("Structural break tests")
    design = build_ar1_design(series)
    results.design = design

    results.fluctuation = FluctuationTest.from_design(design).fit(
        efp_type=config.efp_type,
        significance=alpha,
        bandwidth=config.mosum_bandwidth,
    )
    reporter.report(results.fluctuation)
    reporter.plot("efp", results.fluctuation, name="fluctuation")

    results.fstats = FStatsTest.from_design(design).fit(
        trimming=config.trimming, significance=alpha
    )
    reporter.report(results.fstats)
    reporter.plot("fstats", results.fstats, name="fstats")

    breakpoints = BaiPerronTest.from_design(design).fit(
        max_breaks=config.max_breaks, trimming=config.trimming, selection="bic"
    )
    results.breakpoints = breakpoints
    logger.info(
        "Breakpoints: BIC prefers %d, RSS prefers %d",
        breakpoints.n_breaks_bic,
        breakpoints.n_breaks_rss,
    )
    reporter.report(breakpoints)
    reporter.plot("break_selection", breakpoints, name="break_selection")

    m = config.detail_breaks
    if m is None:
        m = breakpoints.n_breaks_bic
    results.detail = BreakDetail(
        n_breaks=m,
        coef=breakpoints.coef(breaks=m),
        fitted=breakpoints.fitted(breaks=m),
        confint=breakpoints.confint(breaks=m),
    )
    reporter.report(results.detail)
    reporter.plot("breakpoints", breakpoints, name="breakpoints", breaks=m)

    logger.info("Zivot-Andrews test")
    reporter.section("Unit-root test with a structural break")
    results.zivot_andrews = ZivotAndrewsTest.from_series(series).fit(
        model=config.za_model,  # type: ignore[arg-type]
        lags=config.za_lags,
        trim=config.za_trim,
        significance=alpha,
    )
    reporter.report(results.zivot_andrews)
    reporter.plot("zivot_andrews", results.zivot_andrews, name="zivot_andrews")

    logger.info("Analysis complete")
    return results
