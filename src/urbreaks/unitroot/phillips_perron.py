"""Phillips-Perron unit-root test.

The test regression contains a single lag of the level plus deterministic
terms; serial correlation is handled by a non-parametric (Newey-West)
correction of the statistic. Computation is delegated to
:class:`arch.unitroot.PhillipsPerron`.

References
----------
Phillips, P. C. B., & Perron, P. (1988). Testing for a unit root in time
    series regression. Biometrika, 75(2), 335-346.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from arch.unitroot import PhillipsPerron
from arch.utility.exceptions import InfeasibleTestException

from urbreaks.exceptions import InsufficientDataError, NumericalDegeneracyError
from urbreaks.unitroot.base import (
    UnitRootResults,
    bandwidth,
    check_lags,
    degenerate_result,
)

if TYPE_CHECKING:
    from urbreaks.data import RegularSeries

_TREND: dict[str, str] = {
    "constant": "c",
    "trend": "ct",
}


def phillips_perron_test(
    series: RegularSeries,
    model: Literal["constant", "trend"] = "constant",
    lags: Literal["long", "short"] | int = "long",
    test_type: Literal["tau", "rho"] = "tau",
    significance: float = 0.05,
) -> UnitRootResults:
    """Run the Phillips-Perron unit-root test.

    Parameters
    ----------
    series : RegularSeries
        Series to test.
    model : {"constant", "trend"}
        Deterministic terms in the test regression.
    lags : {"long", "short"} | int
        Newey-West bandwidth. "long" is ``trunc(12 (T/100)^(1/4))`` and
        "short" is ``trunc(4 (T/100)^(1/4))``.
    test_type : {"tau", "rho"}
        Z-tau (t-statistic based) or Z-rho (bias based) statistic.
    significance : float
        Level for the rejection decision. Default is 0.05.

    Returns
    -------
    UnitRootResults
        Statistic, p-value and critical values.

    Raises
    ------
    InsufficientDataError
        If the bandwidth exceeds a third of the sample.
    """
    if model not in _TREND:
        raise ValueError(f"model must be 'constant' or 'trend', got {model!r}")
    if test_type not in ("tau", "rho"):
        raise ValueError(f"test_type must be 'tau' or 'rho', got {test_type!r}")

    nobs = series.nobs
    n_lags = bandwidth(nobs, lags)
    name = f"Phillips-Perron Test (Z-{test_type}, {model})"
    check_lags(nobs, n_lags, name)

    if series.is_constant:
        return degenerate_result(
            series,
            name,
            model,
            n_lags,
            unit_root_null=True,
            significance=significance,
        )

    pp = PhillipsPerron(
        series.values,
        lags=n_lags,
        trend=_TREND[model],
        test_type=test_type,
    )
    try:
        stat = pp.stat
    except InfeasibleTestException as exc:
        if "variance" in str(exc):
            raise NumericalDegeneracyError(f"{name}: {exc}") from exc
        raise InsufficientDataError(f"{name}: {exc}") from exc

    return UnitRootResults(
        test_name=name,
        statistic=float(stat),
        pvalue=float(pp.pvalue),
        critical_values={k: float(v) for k, v in pp.critical_values.items()},
        nobs=int(pp.nobs),
        lags=int(pp.lags),
        trend=model,
        unit_root_null=True,
        significance=significance,
        lag_selection=str(lags) if isinstance(lags, str) else "fixed",
        regression=pp.regression,
    )
