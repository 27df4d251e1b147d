"""urbreaks: Unit-root and structural break analysis of a monthly series.

Loads one regularly sampled series and runs the classic battery of
exploratory time-series econometrics on it: augmented Dickey-Fuller,
Phillips-Perron and KPSS tests, then fluctuation, F-statistic,
Bai-Perron and Zivot-Andrews tests on its AR(1) regression.

Example
-------
>>> import urbreaks as ub
>>>
>>> series = ub.load_series("Belgium", start="1996-01", frequency=12)
>>>
>>> # Unit-root test with BIC lag selection
>>> print(ub.adf_test(series, trend="none", max_lags=10).summary())
>>>
>>> # Breakpoints in the AR(1) regression
>>> design = ub.build_ar1_design(series)
>>> bp = ub.BaiPerronTest.from_design(design).fit()
>>> print(bp.n_breaks_bic, bp.break_dates)
>>>
>>> # Or everything at once
>>> results = ub.run_analysis("Belgium")
"""

from urbreaks._version import __version__
from urbreaks.api import (
    AnalysisConfig,
    AnalysisError,
    AnalysisResults,
    ARDesign,
    BaiPerronResults,
    BaiPerronTest,
    BreakDetail,
    ChowTest,
    ChowTestResults,
    CUSUMSQResults,
    CUSUMSQTest,
    CUSUMTest,
    DataFormatError,
    FluctuationResults,
    FluctuationTest,
    FStatsResults,
    FStatsTest,
    InsufficientDataError,
    MatplotlibReporter,
    NumericalDegeneracyError,
    RegularSeries,
    Reporter,
    TextReporter,
    UnitRootResults,
    ZivotAndrewsResults,
    ZivotAndrewsTest,
    adf_test,
    build_ar1_design,
    kpss_test,
    load_series,
    phillips_perron_test,
    plot_break_selection,
    plot_breakpoints,
    plot_cusum_sq,
    plot_efp,
    plot_fstats,
    plot_series,
    plot_zivot_andrews,
    run_analysis,
)

__all__ = [
    "ARDesign",
    "AnalysisConfig",
    "AnalysisError",
    "AnalysisResults",
    "BaiPerronResults",
    "BaiPerronTest",
    "BreakDetail",
    "CUSUMSQResults",
    "CUSUMSQTest",
    "CUSUMTest",
    "ChowTest",
    "ChowTestResults",
    "DataFormatError",
    "FStatsResults",
    "FStatsTest",
    "FluctuationResults",
    "FluctuationTest",
    "InsufficientDataError",
    "MatplotlibReporter",
    "NumericalDegeneracyError",
    "RegularSeries",
    "Reporter",
    "TextReporter",
    "UnitRootResults",
    "ZivotAndrewsResults",
    "ZivotAndrewsTest",
    "__version__",
    "adf_test",
    "build_ar1_design",
    "kpss_test",
    "load_series",
    "phillips_perron_test",
    "plot_break_selection",
    "plot_breakpoints",
    "plot_cusum_sq",
    "plot_efp",
    "plot_fstats",
    "plot_series",
    "plot_zivot_andrews",
    "run_analysis",
]
