"""Series container, file loader and AR(1) design builder.

A loaded series is an immutable array of observations tagged with a regular
calendar index (monthly by default). Every test in the package consumes
either the series itself or the lagged pair built from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from urbreaks.exceptions import DataFormatError, InsufficientDataError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)

# Observations per year -> pandas period frequency
_PERIOD_FREQ: dict[int, str] = {
    12: "M",
    4: "Q",
    1: "Y",
}


def _frozen(values: ArrayLike) -> NDArray[np.floating[Any]]:
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


def parse_start(start: str | tuple[int, int] | pd.Period, frequency: int) -> pd.Period:
    """Convert a start specification into a pandas Period.

    Parameters
    ----------
    start : str | tuple[int, int] | pd.Period
        Either an ISO-like string (``"1996-01"``), a ``(year, cycle)`` pair
        in the style of ``ts(start = c(1996, 1))`` where cycle is the month
        or quarter, or a Period.
    frequency : int
        Observations per year (12, 4 or 1).

    Returns
    -------
    pd.Period
        First period of the series.
    """
    if frequency not in _PERIOD_FREQ:
        raise ValueError(
            f"frequency must be one of {sorted(_PERIOD_FREQ)}, got {frequency}"
        )
    freq = _PERIOD_FREQ[frequency]

    if isinstance(start, pd.Period):
        return start.asfreq(freq)
    if isinstance(start, tuple):
        year, cycle = start
        if frequency == 12:
            return pd.Period(year=year, month=cycle, freq=freq)
        if frequency == 4:
            return pd.Period(year=year, quarter=cycle, freq=freq)
        return pd.Period(year=year, freq=freq)
    return pd.Period(str(start), freq=freq)


@dataclass(frozen=True, eq=False)
class RegularSeries:
    """An immutable, regularly spaced univariate time series.

    Parameters
    ----------
    values : ArrayLike
        Observations in time order. Must be finite and 1-dimensional.
    start : str | tuple[int, int] | pd.Period
        First period. Defaults to January 1996.
    frequency : int
        Observations per year. Default is 12 (monthly).
    name : str
        Series name used in summaries and plot labels.

    Examples
    --------
    >>> s = RegularSeries([1.0, 2.0, 3.0], start="1996-01")
    >>> str(s.end)
    '1996-03'
    """

    values: NDArray[np.floating[Any]]
    start: pd.Period = field(default="1996-01")  # type: ignore[assignment]
    frequency: int = 12
    name: str = "y"

    def __post_init__(self) -> None:
        arr = _frozen(self.values)
        if arr.ndim != 1:
            raise ValueError("values must be 1-dimensional")
        if not np.all(np.isfinite(arr)):
            raise DataFormatError("series contains missing or non-finite values")
        object.__setattr__(self, "values", arr)
        object.__setattr__(self, "start", parse_start(self.start, self.frequency))

    def __len__(self) -> int:
        return len(self.values)

    @property
    def nobs(self) -> int:
        """Number of observations."""
        return len(self.values)

    @property
    def index(self) -> pd.PeriodIndex:
        """Period index of every observation."""
        return pd.period_range(start=self.start, periods=self.nobs)

    @property
    def end(self) -> pd.Period:
        """Period of the last observation."""
        return self.start + (self.nobs - 1)

    def period_at(self, position: int) -> pd.Period:
        """Period of the observation at a 0-based position."""
        if not -self.nobs <= position < self.nobs:
            raise IndexError(f"position {position} out of range for {self.nobs} obs")
        return self.start + (position % self.nobs)

    @property
    def is_constant(self) -> bool:
        """Whether all observations are equal up to rounding noise."""
        if self.nobs == 0:
            return True
        scale = max(1.0, float(np.max(np.abs(self.values))))
        return float(np.ptp(self.values)) <= 1e-12 * scale

    def to_pandas(self) -> pd.Series:
        """Return a pandas Series indexed by period."""
        return pd.Series(np.array(self.values), index=self.index, name=self.name)


def load_series(
    path: str | Path,
    start: str | tuple[int, int] | pd.Period = "1996-01",
    frequency: int = 12,
    column: str | None = None,
    name: str | None = None,
) -> RegularSeries:
    """Load a whitespace-delimited table with a header into a series.

    Parameters
    ----------
    path : str | Path
        Table with one header line and one numeric column. Files written by
        R's ``write.table`` (row names in the first field) are accepted.
    start : str | tuple[int, int] | pd.Period
        Period of the first row. Default is ``"1996-01"``.
    frequency : int
        Observations per year. Default is 12.
    column : str | None
        Column to read when the table has several. If None, the table must
        have exactly one column.
    name : str | None
        Series name. Defaults to the column header.

    Returns
    -------
    RegularSeries
        The loaded series.

    Raises
    ------
    DataFormatError
        If the file is missing, unreadable, empty, or does not contain a
        single fully numeric column.
    """
    path = Path(path)
    if not path.is_file():
        raise DataFormatError(f"input file not found: {path}")

    try:
        frame = pd.read_csv(path, sep=r"\s+", header=0)
    except pd.errors.EmptyDataError as exc:
        raise DataFormatError(f"input file is empty: {path}") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise DataFormatError(f"cannot parse {path}: {exc}") from exc

    if frame.shape[0] == 0:
        raise DataFormatError(f"input file has a header but no observations: {path}")

    if column is not None:
        if column not in frame.columns:
            raise DataFormatError(
                f"column {column!r} not found in {path}; "
                f"available: {list(map(str, frame.columns))}"
            )
    elif frame.shape[1] != 1:
        raise DataFormatError(
            f"expected exactly one data column in {path}, found {frame.shape[1]}"
        )
    else:
        column = frame.columns[0]

    raw = frame[column]
    numeric = pd.to_numeric(raw, errors="coerce")
    bad = np.flatnonzero(numeric.isna().to_numpy() | ~np.isfinite(numeric.to_numpy()))
    if len(bad) > 0:
        row = int(bad[0])
        raise DataFormatError(
            f"non-numeric or missing value {raw.iloc[row]!r} in column "
            f"{column!r} at data row {row + 1} of {path}"
        )

    series = RegularSeries(
        numeric.to_numpy(dtype=np.float64),
        start=start,
        frequency=frequency,
        name=name or str(column),
    )
    logger.info(
        "Loaded %d observations of %r (%s to %s)",
        series.nobs,
        series.name,
        series.start,
        series.end,
    )
    return series


@dataclass(frozen=True, eq=False)
class ARDesign:
    """Lagged pair of a series: the regression ``value ~ lag``.

    Row ``i`` pairs observation ``i + 1`` of the source series with
    observation ``i``; the first observation, which has no lag, is dropped.

    Attributes
    ----------
    value : NDArray
        Dependent variable y_t, shape (N - 1,).
    lag : NDArray
        Lagged variable y_{t-1}, shape (N - 1,).
    index : pd.PeriodIndex
        Period of each row (the period of ``value``).
    name : str
        Name of the source series.
    """

    value: NDArray[np.floating[Any]]
    lag: NDArray[np.floating[Any]]
    index: pd.PeriodIndex
    name: str = "y"

    @property
    def nobs(self) -> int:
        """Number of rows (N - 1)."""
        return len(self.value)

    @property
    def endog(self) -> NDArray[np.floating[Any]]:
        """Dependent variable."""
        return self.value

    @property
    def exog(self) -> NDArray[np.floating[Any]]:
        """Regressor matrix ``[1, y_{t-1}]``."""
        return np.column_stack([np.ones(self.nobs), self.lag])

    @property
    def param_names(self) -> list[str]:
        """Names of the regressors in ``exog``."""
        return ["const", f"{self.name}.L1"]

    def to_frame(self) -> pd.DataFrame:
        """Return the design as a DataFrame with columns value and lag."""
        return pd.DataFrame(
            {self.name: np.array(self.value), f"{self.name}.L1": np.array(self.lag)},
            index=self.index,
        )


def build_ar1_design(series: RegularSeries) -> ARDesign:
    """Build the AR(1) design (series regressed on its first lag).

    Parameters
    ----------
    series : RegularSeries
        Source series with N observations.

    Returns
    -------
    ARDesign
        Design with N - 1 rows.

    Raises
    ------
    InsufficientDataError
        If the series has fewer than two observations.
    """
    if series.nobs <= 1:
        raise InsufficientDataError(
            f"need at least 2 observations to build an AR(1) design, got {series.nobs}"
        )
    return ARDesign(
        value=_frozen(series.values[1:]),
        lag=_frozen(series.values[:-1]),
        index=series.index[1:],
        name=series.name,
    )
