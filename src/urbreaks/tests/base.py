"""Base classes for structural break tests.

This module provides the foundational classes for the break tests in
urbreaks: input validation, the regression split into breaking and
non-breaking regressors, and the mapping from break indices to calendar
periods when a test is built from an AR(1) design.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    import pandas as pd
    from numpy.typing import ArrayLike

    from urbreaks.data import ARDesign


@dataclass
class BreakTestResultsBase(ABC):
    """Base class for structural break test results.

    This abstract base class defines the common interface for all break
    test result containers.

    Parameters
    ----------
    test_name : str
        Name of the test.
    nobs : int
        Number of observations.
    n_breaks : int
        Number of breaks detected/tested.
    break_indices : Sequence[int]
        Estimated break point indices. A break at index ``b`` means the
        new regime starts with observation ``b``.
    index : pd.PeriodIndex | None
        Periods of the observations, when known.
    """

    test_name: str
    nobs: int
    n_breaks: int
    break_indices: Sequence[int]
    index: pd.PeriodIndex | None = field(default=None, repr=False)

    @property
    def break_dates(self) -> list[Any]:
        """Periods at which each new regime starts.

        Falls back to the break indices when no period index is attached.
        """
        if self.index is None:
            return list(self.break_indices)
        return [self.index[b] for b in self.break_indices]

    @property
    def n_regimes(self) -> int:
        """Number of regimes (n_breaks + 1)."""
        return self.n_breaks + 1

    def _label(self, position: int) -> str:
        """Index label, with its period when available."""
        if self.index is None or not 0 <= position < len(self.index):
            return str(position)
        return f"{position} ({self.index[position]})"

    @abstractmethod
    def summary(self) -> str:
        """Generate a text summary of test results.

        Returns
        -------
        str
            Formatted summary string.
        """
        ...


class BreakTestBase(ABC):
    """Abstract base class for structural break tests.

    Parameters
    ----------
    endog : ArrayLike
        Dependent variable (n_obs,).
    exog : ArrayLike | None
        Exogenous regressors that are NOT subject to breaks.
    exog_break : ArrayLike | None
        Regressors whose coefficients may break.
    """

    def __init__(
        self,
        endog: ArrayLike,
        exog: ArrayLike | None = None,
        exog_break: ArrayLike | None = None,
    ) -> None:
        """Initialize the test."""
        self.endog = np.asarray(endog, dtype=np.float64)
        self.exog = np.asarray(exog, dtype=np.float64) if exog is not None else None
        self.exog_break = (
            np.asarray(exog_break, dtype=np.float64) if exog_break is not None else None
        )
        self.index: pd.PeriodIndex | None = None
        self.param_names: list[str] | None = None

        # Ensure 2D
        if self.exog is not None and self.exog.ndim == 1:
            self.exog = self.exog.reshape(-1, 1)
        if self.exog_break is not None and self.exog_break.ndim == 1:
            self.exog_break = self.exog_break.reshape(-1, 1)

        self._validate()

    def _validate(self) -> None:
        """Validate input data."""
        if self.endog.ndim != 1:
            raise ValueError("endog must be 1-dimensional")

        n = len(self.endog)
        if self.exog is not None and len(self.exog) != n:
            raise ValueError("exog must have same length as endog")
        if self.exog_break is not None and len(self.exog_break) != n:
            raise ValueError("exog_break must have same length as endog")

    @classmethod
    def from_design(cls, design: ARDesign, **kwargs: Any) -> Any:
        """Create the test for the AR(1) regression ``value ~ lag``.

        Both the intercept and the AR coefficient may break.

        Parameters
        ----------
        design : ARDesign
            Lagged pair built by :func:`urbreaks.data.build_ar1_design`.
        **kwargs
            Passed to the constructor.

        Returns
        -------
        BreakTestBase
            Test instance ready for ``.fit()``, carrying the design's
            period index.
        """
        test = cls(design.endog, exog_break=design.exog, **kwargs)
        test.index = design.index
        test.param_names = design.param_names
        return test

    @property
    def nobs(self) -> int:
        """Number of observations."""
        return len(self.endog)

    @abstractmethod
    def fit(self, **kwargs: Any) -> BreakTestResultsBase:
        """Perform the structural break test.

        Returns
        -------
        BreakTestResultsBase
            Results object containing test statistics and break estimates.
        """
        ...
