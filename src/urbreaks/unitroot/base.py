"""Shared results container and lag rules for unit-root tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from urbreaks.exceptions import InsufficientDataError

if TYPE_CHECKING:
    from urbreaks.data import RegularSeries


def bandwidth(nobs: int, rule: str | int) -> int:
    """Resolve a lag / bandwidth rule to an integer lag.

    Parameters
    ----------
    nobs : int
        Number of observations.
    rule : str | int
        ``"long"`` for ``trunc(12 (T/100)^(1/4))``, ``"short"`` for
        ``trunc(4 (T/100)^(1/4))``, or a non-negative integer.

    Returns
    -------
    int
        Number of lags.
    """
    if isinstance(rule, (int, np.integer)) and not isinstance(rule, bool):
        if rule < 0:
            raise ValueError(f"lags must be non-negative, got {rule}")
        return int(rule)
    if rule == "long":
        return int(12 * (nobs / 100) ** 0.25)
    if rule == "short":
        return int(4 * (nobs / 100) ** 0.25)
    raise ValueError(f"lags must be 'long', 'short' or an integer, got {rule!r}")


def check_lags(nobs: int, lags: int, test_name: str) -> None:
    """Raise InsufficientDataError unless ``lags <= nobs / 3``."""
    if lags > nobs / 3:
        raise InsufficientDataError(
            f"{test_name}: {lags} lags need at least {3 * lags} observations, "
            f"have {nobs}"
        )


@dataclass
class UnitRootResults:
    """Results from a unit-root or stationarity test.

    Attributes
    ----------
    test_name : str
        Name of the test, including its deterministic specification.
    statistic : float
        Test statistic. NaN for degenerate (constant) input.
    pvalue : float
        Asymptotic p-value. NaN for degenerate input.
    critical_values : dict[str, float]
        Critical values keyed by level ("1%", "5%", "10%", ...).
    nobs : int
        Observations used in the test regression.
    lags : int
        Lags (or bandwidth) used.
    trend : str
        Deterministic specification as given by the caller.
    unit_root_null : bool
        True when the null is a unit root (ADF, PP), False when the null
        is stationarity (KPSS).
    significance : float
        Level used for ``reject``.
    degenerate : bool
        True when the series is constant and the test was not run.
    pvalue_is_bound : bool
        True when the p-value lies outside the tabulated range and is
        only a bound.
    lag_selection : str | None
        Lag selection rule ("BIC", "AIC", "fixed", "long", ...).
    regression : Any
        Underlying regression results, where the test exposes them.
    """

    test_name: str
    statistic: float
    pvalue: float
    critical_values: dict[str, float]
    nobs: int
    lags: int
    trend: str
    unit_root_null: bool = True
    significance: float = 0.05
    degenerate: bool = False
    pvalue_is_bound: bool = False
    lag_selection: str | None = None
    regression: Any = field(default=None, repr=False)

    @property
    def null_hypothesis(self) -> str:
        """Statement of the null hypothesis."""
        if self.unit_root_null:
            return "The process contains a unit root."
        if self.trend in ("tau", "ct"):
            return "The process is trend stationary."
        return "The process is level stationary."

    @property
    def reject(self) -> bool:
        """Whether the null is rejected at ``significance``."""
        if self.degenerate:
            return self.unit_root_null
        if not np.isnan(self.pvalue):
            return bool(self.pvalue < self.significance)
        cv = self.critical_values.get(f"{self.significance * 100:g}%")
        if cv is None:
            return False
        if self.unit_root_null:
            return bool(self.statistic < cv)
        return bool(self.statistic > cv)

    @property
    def stationary(self) -> bool:
        """Whether the test's decision points to a stationary series."""
        return self.reject if self.unit_root_null else not self.reject

    def summary(self) -> str:
        """Generate a text summary of the test.

        Returns
        -------
        str
            Formatted summary string.
        """
        lines = []
        lines.append("=" * 78)
        lines.append(f"{self.test_name:^78}")
        lines.append("=" * 78)
        lines.append(f"Number of observations:   {self.nobs:>10}")
        lines.append(f"Deterministic terms:      {self.trend:>10}")
        lag_rule = f" ({self.lag_selection})" if self.lag_selection else ""
        lines.append(f"Lags used:                {self.lags:>10}{lag_rule}")
        lines.append("-" * 78)

        if self.degenerate:
            lines.append("Series is constant: test statistic is undefined.")
        else:
            lines.append(f"Test statistic:           {self.statistic:>10.4f}")
            bound = " (bound)" if self.pvalue_is_bound else ""
            lines.append(f"P-value:                  {self.pvalue:>10.4f}{bound}")

        if self.critical_values:
            lines.append("\nCritical values:")
            for level, value in self.critical_values.items():
                lines.append(f"  {level:>6}  {value:>10.4f}")

        lines.append(f"\nH0: {self.null_hypothesis}")
        decision = "REJECT" if self.reject else "Do not reject"
        lines.append(
            f"Decision:  {decision} H0 at the {self.significance:.0%} level"
        )
        lines.append("=" * 78)
        return "\n".join(lines)


def degenerate_result(
    series: RegularSeries,
    test_name: str,
    trend: str,
    lags: int,
    unit_root_null: bool,
    significance: float,
) -> UnitRootResults:
    """Result for a constant series, on which the test regression is singular."""
    return UnitRootResults(
        test_name=test_name,
        statistic=np.nan,
        pvalue=np.nan,
        critical_values={},
        nobs=series.nobs,
        lags=lags,
        trend=trend,
        unit_root_null=unit_root_null,
        significance=significance,
        degenerate=True,
    )
