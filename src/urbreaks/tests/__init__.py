"""Structural break tests."""

from urbreaks.tests.bai_perron import BaiPerronResults, BaiPerronTest
from urbreaks.tests.base import BreakTestBase, BreakTestResultsBase
from urbreaks.tests.chow import ChowTest, ChowTestResults
from urbreaks.tests.cusum import (
    EFP_TYPES,
    CUSUMSQResults,
    CUSUMSQTest,
    CUSUMTest,
    FluctuationResults,
    FluctuationTest,
)
from urbreaks.tests.fstats import FStatsResults, FStatsTest
from urbreaks.tests.zivot_andrews import ZivotAndrewsResults, ZivotAndrewsTest

__all__ = [
    "EFP_TYPES",
    "BaiPerronResults",
    "BaiPerronTest",
    "BreakTestBase",
    "BreakTestResultsBase",
    "CUSUMSQResults",
    "CUSUMSQTest",
    "CUSUMTest",
    "ChowTest",
    "ChowTestResults",
    "FStatsResults",
    "FStatsTest",
    "FluctuationResults",
    "FluctuationTest",
    "ZivotAndrewsResults",
    "ZivotAndrewsTest",
]
