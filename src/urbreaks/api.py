"""Public API for the urbreaks package.

This module provides a clean namespace for the most commonly used
classes and functions in the urbreaks package.
"""

# Configuration and pipeline
from urbreaks.config import AnalysisConfig

# Data
from urbreaks.data import (
    ARDesign,
    RegularSeries,
    build_ar1_design,
    load_series,
)

# Errors
from urbreaks.exceptions import (
    AnalysisError,
    DataFormatError,
    InsufficientDataError,
    NumericalDegeneracyError,
)
from urbreaks.pipeline import AnalysisResults, BreakDetail, run_analysis

# Reporting
from urbreaks.reporting import MatplotlibReporter, Reporter, TextReporter

# Structural break tests
from urbreaks.tests import (
    BaiPerronResults,
    BaiPerronTest,
    ChowTest,
    ChowTestResults,
    CUSUMSQResults,
    CUSUMSQTest,
    CUSUMTest,
    FluctuationResults,
    FluctuationTest,
    FStatsResults,
    FStatsTest,
    ZivotAndrewsResults,
    ZivotAndrewsTest,
)

# Unit-root and stationarity tests
from urbreaks.unitroot import (
    UnitRootResults,
    adf_test,
    kpss_test,
    phillips_perron_test,
)

# Visualization
from urbreaks.visualization import (
    plot_break_selection,
    plot_breakpoints,
    plot_cusum_sq,
    plot_efp,
    plot_fstats,
    plot_series,
    plot_zivot_andrews,
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
