"""Augmented Dickey-Fuller test.

Wraps :class:`arch.unitroot.ADF` with the three
deterministic specifications of Dickey and Fuller (1979):

- ``"none"``:  Δy_t = γ y_{t-1} + Σ δ_i Δy_{t-i} + e_t
- ``"drift"``: adds a constant
- ``"trend"``: adds a constant and a linear trend

References
----------
Dickey, D. A., & Fuller, W. A. (1979). Distribution of the estimators for
    autoregressive time series with a unit root. JASA, 74(366), 427-431.

Said, S. E., & Dickey, D. A. (1984). Testing for unit roots in
    autoregressive-moving average models of unknown order. Biometrika,
    71(3), 599-607.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from arch.unitroot import ADF
from arch.utility.exceptions import InfeasibleTestException

from urbreaks.exceptions import InsufficientDataError
from urbreaks.unitroot.base import UnitRootResults, check_lags, degenerate_result

if TYPE_CHECKING:
    from urbreaks.data import RegularSeries

_REGRESSION: dict[str, str] = {
    "none": "n",
    "drift": "c",
    "trend": "ct",
}

_AUTOLAG: dict[str, str | None] = {
    "BIC": "bic",
    "AIC": "aic",
    "fixed": None,
}


def adf_test(
    series: RegularSeries,
    trend: Literal["none", "drift", "trend"] = "none",
    max_lags: int | None = 10,
    select_lags: Literal["BIC", "AIC", "fixed"] = "BIC",
    significance: float = 0.05,
) -> UnitRootResults:
    """Run the augmented Dickey-Fuller unit-root test.

    Parameters
    ----------
    series : RegularSeries
        Series to test.
    trend : {"none", "drift", "trend"}
        Deterministic terms in the test regression.
    max_lags : int | None
        Maximum number of lagged differences. If None, the fixed rule
        ``trunc((T - 1)^(1/3))`` is used and no selection is performed.
    select_lags : {"BIC", "AIC", "fixed"}
        Lag selection. "fixed" uses exactly ``max_lags`` lags.
    significance : float
        Level for the rejection decision. Default is 0.05.

    Returns
    -------
    UnitRootResults
        Statistic, MacKinnon p-value, critical values and the fitted
        test regression.

    Raises
    ------
    InsufficientDataError
        If ``max_lags`` exceeds a third of the sample.
    """
    if trend not in _REGRESSION:
        raise ValueError(f"trend must be 'none', 'drift' or 'trend', got {trend!r}")
    if select_lags not in _AUTOLAG:
        raise ValueError(
            f"select_lags must be 'BIC', 'AIC' or 'fixed', got {select_lags!r}"
        )

    nobs = series.nobs
    if max_lags is None:
        max_lags = int((nobs - 1) ** (1 / 3)) if nobs > 1 else 0
        select_lags = "fixed"
    if max_lags < 0:
        raise ValueError(f"max_lags must be non-negative, got {max_lags}")

    name = f"Augmented Dickey-Fuller Test ({trend})"
    check_lags(nobs, max_lags, name)

    if series.is_constant:
        return degenerate_result(
            series,
            name,
            trend,
            max_lags,
            unit_root_null=True,
            significance=significance,
        )

    method = _AUTOLAG[select_lags]
    adf = ADF(
        series.values,
        lags=max_lags if method is None else None,
        trend=_REGRESSION[trend],
        max_lags=max_lags,
        method=method or "aic",
    )
    try:
        stat = adf.stat
    except (InfeasibleTestException, ValueError) as exc:
        raise InsufficientDataError(f"{name}: {exc}") from exc

    return UnitRootResults(
        test_name=name,
        statistic=float(stat),
        pvalue=float(adf.pvalue),
        critical_values={k: float(v) for k, v in adf.critical_values.items()},
        nobs=int(adf.nobs),
        lags=int(adf.lags),
        trend=trend,
        unit_root_null=True,
        significance=significance,
        lag_selection=select_lags,
        regression=adf.regression,
    )
