import logging
from typing import Union

import numpy as np

from unitroot.config import DEFAULT_BACKEND
from unitroot.exceptions import SingularDesignMatrixError
from unitroot.regression.least_squares import ols
from unitroot.stationarity.design import SeriesLike, as_series, check_lag, regression_arrays
from unitroot.types import OLSResult, Regression, Report

logger = logging.getLogger(__name__)

_EPS = np.finfo(np.float64).eps


def _exact_fit(result: OLSResult, x: np.ndarray, rhs: np.ndarray) -> bool:
    """
    True when the residuals are rounding error, i.e. the residual variance
    is zero and the t-ratio is 0/0.

    Rounding in the differences is of order eps * max|x| per row, and in the
    fitted values of order eps * |rhs| * |beta|.
    """
    bound = np.abs(x).max() * np.sqrt(rhs.shape[0]) + np.linalg.norm(rhs) * np.linalg.norm(result.coefficients)
    return np.linalg.norm(result.residuals) <= 100 * _EPS * bound


def _adf(x: np.ndarray, lag: int, regression: Regression, backend: str) -> Report:
    xdshort, rhs, nobs = regression_arrays(x, lag, regression)

    if x.max() == x.min():
        raise SingularDesignMatrixError("Invalid input, x is constant")

    logger.debug(
        "ADF regression: regression=%s lag=%d rows=%d columns=%d",
        regression.value, lag, nobs, rhs.shape[1],
    )

    result = ols(xdshort, rhs, backend=backend)

    if _exact_fit(result, x, rhs):
        logger.warning(
            "ADF regression fits exactly (residual variance %.3g); no statistic reported",
            result.sigma_squared,
        )
        return Report(size=nobs, test_statistic=None, lag=lag, regression=regression)

    # ADF test statistic is the t-statistic on the lagged level
    adfstat = result.t_values[0]

    if not np.isfinite(adfstat):
        logger.warning("ADF statistic is not finite; no statistic reported")
        return Report(size=nobs, test_statistic=None, lag=lag, regression=regression)

    return Report(size=nobs, test_statistic=float(adfstat), lag=lag, regression=regression)


def adf_test(
    x: SeriesLike,
    lag: int,
    regression: Union[Regression, str] = Regression.CONSTANT,
    backend: str = DEFAULT_BACKEND,
) -> Report:
    """
    Augmented Dickey-Fuller test statistic for a fixed lag.

    The null hypothesis is that x has a unit root. Compare
    ``report.test_statistic`` with
    ``get_critical_value(regression, report.size, alpha)``: a statistic below
    the critical value rejects the null at level alpha.

    Parameters
    ----------
    x : array_like, 1d
        The data series to test.
    lag : int
        Number of lagged differences included in the regression.
    regression : Regression or {"n", "c", "ct"}
        Constant and trend order to include in regression.
    backend : str
        Computational backend ("numba" or "jax").

    Returns
    -------
    Report
        ``size`` is ``len(x) - lag - 1``. ``test_statistic`` is None if the
        regression fits exactly (zero residual variance).

    Raises
    ------
    InvalidLagError
    InsufficientObservationsError
    SingularDesignMatrixError
        If x is constant or the regressors are collinear.
    """
    return _adf(as_series(x), check_lag(lag), Regression.parse(regression), backend)


def plain_test(x: SeriesLike, backend: str = DEFAULT_BACKEND) -> Report:
    """
    Dickey-Fuller test with a constant and no lagged differences.

    Regresses Δy_t on a constant and y_{t-1}. Unlike :func:`adf_test`,
    degenerate data (a constant series, collinear regressors) produces a
    report without a statistic instead of an error.

    Parameters
    ----------
    x : array_like, 1d
        The data series to test.
    backend : str
        Computational backend ("numba" or "jax").

    Returns
    -------
    Report
        ``size`` is ``len(x) - 1``.

    Raises
    ------
    InsufficientObservationsError
        If x has fewer than 4 observations.
    InvalidSeriesError
        If x is not 1-d or has missing values.
    """
    x = as_series(x)
    try:
        return _adf(x, 0, Regression.CONSTANT, backend)
    except SingularDesignMatrixError as e:
        logger.warning("Dickey-Fuller regression is degenerate: %s", e)
        return Report(size=x.shape[0] - 1, test_statistic=None, lag=0, regression=Regression.CONSTANT)
