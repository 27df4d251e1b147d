"""Exceptions raised by urbreaks.

Every error is fatal to an analysis run. The hierarchy derives from
``ValueError`` so that callers catching the package's ordinary argument
validation errors also catch these.
"""

from __future__ import annotations


class AnalysisError(ValueError):
    """Base class for errors that stop an analysis run."""


class DataFormatError(AnalysisError):
    """The input file is missing, empty, or not a single numeric column."""


class InsufficientDataError(AnalysisError):
    """The sample is too short for the requested lags or trimming."""


class NumericalDegeneracyError(AnalysisError):
    """A regression design is singular (e.g. a segment with no variation)."""
