"""KPSS stationarity test.

LM test of the null of (trend-)stationarity against a unit root, computed
with :func:`statsmodels.tsa.stattools.kpss`.

References
----------
Kwiatkowski, D., Phillips, P. C. B., Schmidt, P., & Shin, Y. (1992).
    Testing the null hypothesis of stationarity against the alternative of
    a unit root. Journal of Econometrics, 54(1-3), 159-178.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Literal

from statsmodels.tools.sm_exceptions import InterpolationWarning
from statsmodels.tsa.stattools import kpss

from urbreaks.unitroot.base import (
    UnitRootResults,
    bandwidth,
    check_lags,
    degenerate_result,
)

if TYPE_CHECKING:
    from urbreaks.data import RegularSeries

_REGRESSION: dict[str, str] = {
    "mu": "c",
    "tau": "ct",
}


def kpss_test(
    series: RegularSeries,
    trend: Literal["mu", "tau"] = "tau",
    lags: Literal["long", "short", "auto"] | int = "long",
    significance: float = 0.05,
) -> UnitRootResults:
    """Run the KPSS stationarity test.

    Parameters
    ----------
    series : RegularSeries
        Series to test.
    trend : {"mu", "tau"}
        "mu" tests level stationarity, "tau" trend stationarity.
    lags : {"long", "short", "auto"} | int
        Bartlett-kernel bandwidth. "auto" uses the data-dependent
        Hobijn et al. (1998) rule.
    significance : float
        Level for the rejection decision. Default is 0.05.

    Returns
    -------
    UnitRootResults
        Statistic, interpolated p-value and critical values. When the
        statistic lies outside the tabulated range, ``pvalue_is_bound``
        is set.
    """
    if trend not in _REGRESSION:
        raise ValueError(f"trend must be 'mu' or 'tau', got {trend!r}")

    nobs = series.nobs
    nlags: str | int
    if lags == "auto":
        nlags = "auto"
        lag_label = 0
    else:
        nlags = bandwidth(nobs, lags)
        lag_label = nlags
        check_lags(nobs, nlags, "KPSS")

    name = f"KPSS Test ({trend})"
    if series.is_constant:
        return degenerate_result(
            series,
            name,
            trend,
            lag_label,
            unit_root_null=False,
            significance=significance,
        )

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", InterpolationWarning)
        stat, pvalue, used_lags, crit = kpss(
            series.values, regression=_REGRESSION[trend], nlags=nlags
        )
    bounded = False
    for w in caught:
        if issubclass(w.category, InterpolationWarning):
            bounded = True
        else:
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)

    return UnitRootResults(
        test_name=name,
        statistic=float(stat),
        pvalue=float(pvalue),
        critical_values={k: float(v) for k, v in crit.items()},
        nobs=nobs,
        lags=int(used_lags),
        trend=trend,
        unit_root_null=False,
        significance=significance,
        pvalue_is_bound=bounded,
        lag_selection=str(lags) if isinstance(lags, str) else "fixed",
    )
