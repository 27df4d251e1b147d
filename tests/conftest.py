"""Pytest configuration and fixtures for urbreaks tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import numpy as np
import pytest
from numpy.typing import NDArray

from urbreaks.data import RegularSeries


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_data(rng: np.random.Generator) -> NDArray[np.floating[Any]]:
    """Simple random data without breaks."""
    return rng.standard_normal(100)


@pytest.fixture
def data_with_mean_shift(
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating[Any]], int]:
    """Data with a single mean shift at t=100.

    Returns
    -------
    tuple[NDArray[np.floating], int]
        Data array and break location.
    """
    y1 = rng.standard_normal(100)  # mean = 0
    y2 = rng.standard_normal(100) + 2  # mean = 2
    return np.concatenate([y1, y2]), 100


@pytest.fixture
def data_with_two_breaks(
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating[Any]], list[int]]:
    """Data with two mean shifts.

    Returns
    -------
    tuple[NDArray[np.floating], list[int]]
        Data array and break locations.
    """
    y1 = rng.standard_normal(80)  # mean = 0
    y2 = rng.standard_normal(80) + 3  # mean = 3
    y3 = rng.standard_normal(80) - 2  # mean = -2
    return np.concatenate([y1, y2, y3]), [80, 160]


@pytest.fixture
def random_walk(rng: np.random.Generator) -> NDArray[np.floating[Any]]:
    """Driftless Gaussian random walk of length 250."""
    return np.cumsum(rng.standard_normal(250))


@pytest.fixture
def stationary_ar1(rng: np.random.Generator) -> NDArray[np.floating[Any]]:
    """AR(1) process with phi=0.5 around mean 1."""
    n = 250
    y = np.zeros(n)
    for t in range(1, n):
        y[t] = 0.5 * y[t - 1] + rng.standard_normal()
    return y + 1.0


@pytest.fixture
def constant_series() -> RegularSeries:
    """Sixty identical monthly observations."""
    return RegularSeries(np.full(60, 2.5), start="1996-01", name="flat")


@pytest.fixture
def jump_series() -> tuple[RegularSeries, int]:
    """Two constant segments with a large jump at observation 50.

    Returns
    -------
    tuple[RegularSeries, int]
        Series of length 100 and the first index of the high segment.
    """
    values = np.concatenate([np.zeros(50), np.full(50, 10.0)])
    return RegularSeries(values, start="1996-01", name="jump"), 50


def simulate_illiquidity(
    rng: np.random.Generator, nobs: int = 276, drop: int = 202
) -> NDArray[np.floating[Any]]:
    """Persistent high-illiquidity regime followed by a lasting drop.

    A persistent AR(1) whose intercept falls at ``drop``, so the mean
    decays from 3 to 1 over the following months.
    """
    intercept = np.where(np.arange(nobs) < drop, 0.3, 0.1)
    y = np.empty(nobs)
    y[0] = 3.0
    for t in range(1, nobs):
        y[t] = intercept[t] + 0.9 * y[t - 1] + 0.15 * rng.standard_normal()
    return y


@pytest.fixture
def illiquidity_simulator() -> Callable[..., NDArray[np.floating[Any]]]:
    """The illiquidity simulator, for tests that need many draws."""
    return simulate_illiquidity


@pytest.fixture
def illiquidity_values() -> NDArray[np.floating[Any]]:
    """276 monthly observations (1996-01 to 2018-12) with a drop at 202."""
    return simulate_illiquidity(np.random.default_rng(2019))


@pytest.fixture
def illiquidity_series(illiquidity_values: NDArray[np.floating[Any]]) -> RegularSeries:
    """The simulated illiquidity values as a monthly series from 1996-01."""
    return RegularSeries(illiquidity_values, start="1996-01", name="Belgium")


@pytest.fixture
def illiquidity_file(
    tmp_path: Path, illiquidity_values: NDArray[np.floating[Any]]
) -> Path:
    """The simulated illiquidity values written as a one-column table."""
    path = tmp_path / "Belgium"
    lines = ["Belgium", *(f"{v:.8f}" for v in illiquidity_values)]
    path.write_text("\n".join(lines) + "\n")
    return path
