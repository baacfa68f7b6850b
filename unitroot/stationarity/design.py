"""
Regression inputs for the (augmented) Dickey-Fuller test.

This file contains code based on statsmodels.
https://github.com/statsmodels/statsmodels

Copyright (c) 2009-2018 statsmodels Developers.
All rights reserved.
Licensed under 3-clause BSD license.

For a series y of length n and lag p the regression is

    Δy_t = δ y_{t-1} + γ_1 Δy_{t-1} + ... + γ_p Δy_{t-p} [+ μ] [+ β t] + ε_t

over the n - p - 1 rows with a full set of lagged differences. Design matrix
columns are, in order::

    y_{t-1}, Δy_{t-1}, ..., Δy_{t-p}, constant, trend

The lagged level is always column 0; the constant and trend columns are only
present when the regression asks for them.
"""

import numbers
from typing import Tuple, Union, Sequence

import numpy as np
import pandas as pd

from unitroot.backends.numba.matrix import lagmat
from unitroot.backends.numba.time_series import add_trend
from unitroot.exceptions import (
    InsufficientObservationsError,
    InvalidLagError,
    InvalidSeriesError,
)
from unitroot.types import Regression

SeriesLike = Union[np.ndarray, pd.Series, Sequence[float]]


def as_series(x: SeriesLike) -> np.ndarray:
    """
    Convert input to a 1-d float64 array of finite observations.

    Raises
    ------
    InvalidSeriesError
        If x is not 1-dimensional or holds NaN/inf values.
    """
    if isinstance(x, pd.Series):
        x = x.to_numpy()

    try:
        x = np.asarray(x, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidSeriesError(f"series could not be converted to floats: {e}") from e

    if x.ndim != 1:
        raise InvalidSeriesError(f"x must be a 1-dimensional array, got shape {x.shape}")
    if not np.all(np.isfinite(x)):
        raise InvalidSeriesError("This function does not handle missing values")
    return x


def check_lag(lag) -> int:
    """Return lag as an int, or raise InvalidLagError."""
    if isinstance(lag, bool) or not isinstance(lag, numbers.Integral):
        raise InvalidLagError(f"lag must be a non-negative integer, got {lag!r}")
    if lag < 0:
        raise InvalidLagError(f"lag must be non-negative, got {lag}")
    return int(lag)


def build_regression(
    x: SeriesLike,
    lag: int,
    regression: Union[Regression, str] = Regression.CONSTANT,
) -> Tuple[np.ndarray, np.ndarray, int]:
    """
    Build the response and design matrix of a Dickey-Fuller regression.

    Parameters
    ----------
    x : array_like, 1d
        The data series, in time order.
    lag : int
        Number of lagged differences p. 0 gives the plain Dickey-Fuller test.
    regression : Regression or {"n", "c", "ct"}
        Deterministic terms to append.

    Returns
    -------
    xdshort : ndarray of shape (n - p - 1,)
        First differences Δy_t.
    rhs : ndarray of shape (n - p - 1, 1 + p + n_deterministic)
        Design matrix, lagged level in column 0.
    nobs : int
        Number of usable rows.

    Raises
    ------
    InvalidLagError
        If lag is negative, not an integer, or leaves more regressors than rows.
    InsufficientObservationsError
        If the series is too short to form an over-determined regression.
    """
    return regression_arrays(as_series(x), check_lag(lag), Regression.parse(regression))


def regression_arrays(
    x: np.ndarray,
    lag: int,
    regression: Regression,
) -> Tuple[np.ndarray, np.ndarray, int]:
    """
    :func:`build_regression` for a series, lag and regression that have
    already been through as_series, check_lag and Regression.parse.
    """
    n = x.shape[0]
    if n < lag + 2:
        raise InsufficientObservationsError(
            f"{n} observations cannot support lag {lag}; at least {lag + 2} are required"
        )

    nobs = n - lag - 1
    ncols = 1 + lag + regression.n_deterministic
    if nobs <= ncols:
        if n - 1 <= 1 + regression.n_deterministic:
            raise InsufficientObservationsError(
                f"{n} observations are too few for regression '{regression.value}'"
            )
        raise InvalidLagError(
            f"lag {lag} leaves {nobs} rows for {ncols} regressors; "
            f"use a smaller lag or a longer series"
        )

    # First difference of the series
    xdiff = np.diff(x)

    # Columns are Δy_t, Δy_{t-1}, ..., Δy_{t-p}
    xdall = lagmat(xdiff[:, None], lag, original="in")

    # Replace first column with levels
    xdall[:, 0] = x[-nobs - 1 : -1]
    xdshort = xdiff[-nobs:]

    rhs = add_trend(xdall, regression.value, prepend=False)

    return xdshort, rhs, nobs
