"""Analysis configuration.

All knobs of the analysis pipeline live in one frozen dataclass. Defaults
reproduce the reference analysis of the Belgian illiquidity series.
Overrides can be read from a TOML file whose top-level keys match the
field names, optionally nested under an ``[analysis]`` table.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from urbreaks.exceptions import DataFormatError


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for :func:`urbreaks.pipeline.run_analysis`.

    Attributes
    ----------
    start : str
        Period of the first observation.
    frequency : int
        Observations per year.
    column : str | None
        Column to read when the input table has several.
    significance : float
        Level used for the reject / do-not-reject decisions.
    adf_max_lags : int
        Maximum lag for every ADF test in ``adf_trends``.
    adf_select_lags : str
        Lag selection rule for the ADF tests ("BIC", "AIC" or "fixed").
    adf_trends : tuple[str, ...]
        ADF deterministic specifications, run in this order.
    pp_models : tuple[str, ...]
        Phillips-Perron deterministic specifications.
    pp_lags : str | int
        Phillips-Perron bandwidth rule ("long", "short") or a fixed lag.
    kpss_trend : str
        KPSS null ("mu" level or "tau" trend stationarity).
    kpss_lags : str | int
        KPSS bandwidth rule ("long", "short", "auto") or a fixed lag.
    efp_type : str
        Empirical fluctuation process type.
    mosum_bandwidth : float
        Window of the MOSUM processes as a fraction of the sample.
    trimming : float
        Interior trimming for the F-statistics and minimum segment length
        for the breakpoint search.
    max_breaks : int | None
        Maximum number of breaks searched. None uses every feasible count.
    detail_breaks : int | None
        Number of breaks for the coefficient / confidence interval detail.
        None uses the BIC choice.
    za_model : str
        Zivot-Andrews break specification.
    za_lags : int
        Augmentation lags of the Zivot-Andrews regression.
    za_trim : float
        Zivot-Andrews trimming fraction.
    """

    start: str = "1996-01"
    frequency: int = 12
    column: str | None = None
    significance: float = 0.05
    adf_max_lags: int = 10
    adf_select_lags: str = "BIC"
    adf_trends: tuple[str, ...] = ("none", "trend", "drift")
    pp_models: tuple[str, ...] = ("constant", "trend")
    pp_lags: str | int = "long"
    kpss_trend: str = "tau"
    kpss_lags: str | int = "long"
    efp_type: str = "OLS-CUSUM"
    mosum_bandwidth: float = 0.15
    trimming: float = 0.15
    max_breaks: int | None = None
    detail_breaks: int | None = 1
    za_model: str = "both"
    za_lags: int = 5
    za_trim: float = 0.15

    def __post_init__(self) -> None:
        if not 0 < self.significance < 1:
            raise ValueError(
                f"significance must be in (0, 1), got {self.significance}"
            )
        if not 0 < self.trimming < 0.5:
            raise ValueError(f"trimming must be in (0, 0.5), got {self.trimming}")
        if not 0 < self.za_trim <= 1 / 3:
            raise ValueError(f"za_trim must be in (0, 1/3], got {self.za_trim}")
        if self.za_lags < 1:
            raise ValueError(f"za_lags must be at least 1, got {self.za_lags}")
        # TOML arrays arrive as lists
        object.__setattr__(self, "adf_trends", tuple(self.adf_trends))
        object.__setattr__(self, "pp_models", tuple(self.pp_models))

    def updated(self, **overrides: Any) -> AnalysisConfig:
        """Return a copy with the given fields replaced."""
        unknown = set(overrides) - {f.name for f in fields(self)}
        if unknown:
            raise ValueError(f"unknown configuration keys: {sorted(unknown)}")
        return replace(self, **overrides)

    @classmethod
    def from_toml(cls, path: str | Path) -> AnalysisConfig:
        """Read a configuration from a TOML file.

        Parameters
        ----------
        path : str | Path
            TOML file. Keys may sit at the top level or in an
            ``[analysis]`` table.

        Returns
        -------
        AnalysisConfig
            Defaults updated with the file's values.
        """
        path = Path(path)
        try:
            with path.open("rb") as fh:
                data = tomllib.load(fh)
        except FileNotFoundError as exc:
            raise DataFormatError(f"configuration file not found: {path}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise DataFormatError(f"invalid TOML in {path}: {exc}") from exc

        section = data.get("analysis", data)
        return cls().updated(**section)
