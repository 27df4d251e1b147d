"""Limiting distributions of fluctuation processes and F-statistic sequences.

Closed forms are used where they exist (Kolmogorov distribution for the
supremum of a Brownian bridge, Brownian motion against a linear boundary).
MOSUM processes and the sup/ave/exp functionals of the F-statistic
sequence are simulated on a fine grid with a fixed seed, so p-values are
reproducible. Simulations are cached per parameter set.

References
----------
Andrews, D. W. K. (1993). Tests for parameter instability and structural
    change with unknown change point. Econometrica, 61(4), 821-856.

Andrews, D. W. K., & Ploberger, W. (1994). Optimal tests when a nuisance
    parameter is present only under the alternative. Econometrica, 62(6),
    1383-1414.

Zeileis, A., Leisch, F., Hornik, K., & Kleiber, C. (2002). strucchange:
    An R package for testing for structural change in linear regression
    models. Journal of Statistical Software, 7(2), 1-38.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray
from scipy import optimize, special, stats

_GRID = 1000
_REPS = 5000
_CHUNK = 500
_SEED = 19930701


def pvalue_brownian_bridge_sup(x: float) -> float:
    """P(sup |B(t)| > x) for a standard Brownian bridge B."""
    return float(stats.kstwobign.sf(x))


def critical_brownian_bridge_sup(significance: float) -> float:
    """Critical value of sup |B(t)| at the given level."""
    return float(stats.kstwobign.isf(significance))


def pvalue_brownian_motion_linear(x: float) -> float:
    """P(sup |W(t)| / (1 + 2t) > x) for a standard Brownian motion W.

    Closed form for the crossing probability of the linear boundary used by
    the recursive CUSUM test (Brown, Durbin & Evans, 1975).
    """
    if x <= 0:
        return 1.0
    p = 2.0 * (
        1.0
        - stats.norm.cdf(3.0 * x)
        + np.exp(-4.0 * x**2) * (stats.norm.cdf(x) + stats.norm.cdf(3.0 * x) - 1.0)
    )
    return float(min(1.0, max(0.0, p)))


def critical_brownian_motion_linear(significance: float) -> float:
    """Critical value ``a`` of the linear boundary ``a (1 + 2t)``."""
    return float(
        optimize.brentq(
            lambda x: pvalue_brownian_motion_linear(x) - significance, 1e-6, 10.0
        )
    )


def _wiener_paths(
    rng: np.random.Generator, n_paths: int, dim: int = 1
) -> NDArray[np.floating[Any]]:
    """Brownian motion on the grid t = 0, 1/G, ..., 1; shape (n, dim, G + 1)."""
    steps = rng.standard_normal((n_paths, dim, _GRID)) / np.sqrt(_GRID)
    paths = np.zeros((n_paths, dim, _GRID + 1))
    np.cumsum(steps, axis=2, out=paths[:, :, 1:])
    return paths


@lru_cache(maxsize=32)
def _simulate_mosum(
    process: Literal["motion", "bridge"], bandwidth: float
) -> NDArray[np.floating[Any]]:
    """Sorted draws of sup_t |Z(t + h) - Z(t)|."""
    rng = np.random.default_rng(_SEED)
    h = max(1, int(round(bandwidth * _GRID)))
    t = np.linspace(0.0, 1.0, _GRID + 1)
    draws = []
    for _ in range(_REPS // _CHUNK):
        paths = _wiener_paths(rng, _CHUNK)[:, 0, :]
        if process == "bridge":
            paths = paths - t * paths[:, -1:]
        moving = paths[:, h:] - paths[:, :-h]
        draws.append(np.max(np.abs(moving), axis=1))
    return np.sort(np.concatenate(draws))


@lru_cache(maxsize=32)
def _simulate_f_functionals(
    k: int, trimming: float
) -> dict[str, NDArray[np.floating[Any]]]:
    """Sorted draws of the sup, ave and exp functionals of the Wald sequence.

    Under the null the Wald statistic at sample fraction π converges to
    ||B(π)||² / (π (1 - π)) with B a k-dimensional Brownian bridge.
    """
    rng = np.random.default_rng(_SEED + k)
    t = np.linspace(0.0, 1.0, _GRID + 1)
    inside = (t >= trimming) & (t <= 1.0 - trimming)
    t_in = t[inside]
    sup, ave, exp = [], [], []
    for _ in range(_REPS // _CHUNK):
        paths = _wiener_paths(rng, _CHUNK, dim=k)
        bridge = paths - t * paths[:, :, -1:]
        wald = np.sum(bridge[:, :, inside] ** 2, axis=1) / (t_in * (1.0 - t_in))
        sup.append(np.max(wald, axis=1))
        ave.append(np.mean(wald, axis=1))
        exp.append(special.logsumexp(wald / 2.0, axis=1) - np.log(wald.shape[1]))
    return {
        "supF": np.sort(np.concatenate(sup)),
        "aveF": np.sort(np.concatenate(ave)),
        "expF": np.sort(np.concatenate(exp)),
    }


def _upper_tail(draws: NDArray[np.floating[Any]], x: float) -> float:
    """Share of sorted draws at or above x."""
    n_above = len(draws) - np.searchsorted(draws, x, side="left")
    return float(n_above / len(draws))


def pvalue_mosum(
    x: float, process: Literal["motion", "bridge"], bandwidth: float
) -> float:
    """Simulated p-value of a MOSUM supremum statistic."""
    return _upper_tail(_simulate_mosum(process, round(bandwidth, 6)), x)


def critical_mosum(
    significance: float, process: Literal["motion", "bridge"], bandwidth: float
) -> float:
    """Simulated critical value of a MOSUM supremum statistic."""
    draws = _simulate_mosum(process, round(bandwidth, 6))
    return float(np.quantile(draws, 1.0 - significance))


def pvalue_f_functional(
    x: float, functional: Literal["supF", "aveF", "expF"], k: int, trimming: float
) -> float:
    """Simulated p-value of a functional of the Wald-scaled F sequence."""
    return _upper_tail(_simulate_f_functionals(k, round(trimming, 6))[functional], x)


def critical_f_functional(
    significance: float,
    functional: Literal["supF", "aveF", "expF"],
    k: int,
    trimming: float,
) -> float:
    """Simulated critical value of a functional of the Wald-scaled F sequence."""
    draws = _simulate_f_functionals(k, round(trimming, 6))[functional]
    return float(np.quantile(draws, 1.0 - significance))


def argmax_cdf(x: float) -> float:
    """CDF of argmax_s {W(s) - |s| / 2} for a two-sided Brownian motion W.

    This is the limiting distribution of a break date estimate, scaled by
    the shift magnitude, in the case of equal regressor moments and error
    variances on both sides of the break (Bai, 1997).
    """
    if x == 0:
        return 0.5
    a = abs(x)
    upper = (
        1.0
        + np.sqrt(a / (2.0 * np.pi)) * np.exp(-a / 8.0)
        - 0.5 * (a + 5.0) * stats.norm.cdf(-np.sqrt(a) / 2.0)
        + 1.5 * np.exp(a) * stats.norm.cdf(-1.5 * np.sqrt(a))
    )
    return float(upper if x > 0 else 1.0 - upper)


def argmax_quantile(prob: float) -> float:
    """Quantile of the break-date argmax distribution for prob > 0.5."""
    if not 0.5 < prob < 1.0:
        raise ValueError(f"prob must be in (0.5, 1), got {prob}")
    return float(optimize.brentq(lambda x: argmax_cdf(x) - prob, 1e-8, 200.0))
