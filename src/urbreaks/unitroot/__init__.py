"""Unit-root and stationarity tests."""

from urbreaks.unitroot.adf import adf_test
from urbreaks.unitroot.base import UnitRootResults, bandwidth
from urbreaks.unitroot.kpss import kpss_test
from urbreaks.unitroot.phillips_perron import phillips_perron_test

__all__ = [
    "UnitRootResults",
    "adf_test",
    "bandwidth",
    "kpss_test",
    "phillips_perron_test",
]
