import logging
from typing import Union

import numpy as np
import pandas as pd

from unitroot.backend import StatisticalBackend
from unitroot.config import DEFAULT_BACKEND
from unitroot.exceptions import SingularDesignMatrixError
from unitroot.types import OLSResult

logger = logging.getLogger(__name__)


def ols(
    y: Union[np.ndarray, pd.Series],
    X: Union[np.ndarray, pd.DataFrame],
    backend: str = DEFAULT_BACKEND,
) -> OLSResult:
    """
    Ordinary least squares fit of ``y`` on the columns of ``X``.

    No intercept is added; include a column of ones in ``X`` if needed.

    Parameters
    ----------
    y : array-like of shape (n_samples,)
        Response values.
    X : array-like of shape (n_samples, n_features)
        Design matrix. Must have more rows than columns and full column rank.
    backend : str
        Computational backend ("numba" or "jax").

    Returns
    -------
    OLSResult
        Coefficients, standard errors, residuals and residual variance.

    Raises
    ------
    SingularDesignMatrixError
        If the system is not over-determined or the columns of ``X`` are
        collinear. After scaling every column to unit norm, a condition
        number above 1 / sqrt(eps) (about 6.7e7) counts as collinear.
    ValueError
        If the shapes of ``y`` and ``X`` do not match.
    """
    if isinstance(X, pd.DataFrame):
        X = X.to_numpy()
    if isinstance(y, pd.Series):
        y = y.to_numpy()

    X_array = np.ascontiguousarray(X, dtype=np.float64)
    y_array = np.ascontiguousarray(y, dtype=np.float64)

    if X_array.ndim != 2 or X_array.shape[1] == 0:
        raise ValueError(f"X must be a 2-dimensional array with at least one column, got shape {X_array.shape}")
    n, k = X_array.shape
    if y_array.shape != (n,):
        raise ValueError(f"y has shape {y_array.shape}, expected ({n},) to match X")

    if n <= k:
        raise SingularDesignMatrixError(
            f"design matrix with {n} rows and {k} columns is not over-determined"
        )

    _backend = StatisticalBackend(backend=backend)

    try:
        beta, R = _backend.ols_fit_core(X_array, y_array)
        if bool(_backend.rank_deficient_core(R)):
            raise SingularDesignMatrixError(
                "design matrix is rank deficient or ill-conditioned; X'X cannot be inverted"
            )
        residuals, std_errors, sigma_squared = _backend.stats_core(X_array, y_array, beta, R)
    except np.linalg.LinAlgError as e:
        raise SingularDesignMatrixError(f"least squares solve failed: {e}") from e

    logger.debug("OLS fit on %d x %d design, backend=%s", n, k, backend)

    return OLSResult(
        coefficients=np.asarray(beta, dtype=np.float64),
        std_errors=np.asarray(std_errors, dtype=np.float64),
        residuals=np.asarray(residuals, dtype=np.float64),
        sigma_squared=float(sigma_squared),
        df_resid=n - k,
    )
