"""
This file contains code based on statsmodels.
https://github.com/statsmodels/statsmodels

Copyright (c) 2009-2018 statsmodels Developers.
All rights reserved.
Licensed under 3-clause BSD license.
"""

import numpy as np


def create_lag_matrix(x, maxlag, nobs, nvar):
    """
    Create a 2D array of lagged values efficiently using NumPy vectorization.

    Parameters
    ----------
    x : ndarray
        Input array with shape (nobs, nvar).
    maxlag : int
        Maximum lag to include.
    nobs : int
        Number of observations.
    nvar : int
        Number of variables.

    Returns
    -------
    lm : ndarray
        Lag matrix with shape (nobs + maxlag, nvar * (maxlag + 1)).
    """
    lm = np.zeros((nobs + maxlag, nvar * (maxlag + 1)), dtype=x.dtype)

    # Block j holds x shifted down by j rows, i.e. lag j
    for k in range(maxlag + 1):
        lm[maxlag - k : maxlag - k + nobs, (maxlag - k) * nvar : (maxlag - k + 1) * nvar] = x

    return lm

def lagmat(x, maxlag: int, original: str = "in"):
    """
    Create 2d array of lags, keeping only rows where every lag is observed.

    Parameters
    ----------
    x : array_like
        Data; if 2d, observation in rows and variables in columns.
    maxlag : int
        All lags from zero to maxlag are included.
    original : {'in', 'ex'}
        'in' keeps the unlagged data as the first nvar columns,
        'ex' drops them.

    Returns
    -------
    lagmat : ndarray
        Array with shape (nobs - maxlag, nvar * (maxlag + 1)) for 'in'.
    """
    x = np.asarray(x)
    if x.ndim == 1:
        x = x[:, None]

    nobs, nvar = x.shape
    if maxlag >= nobs:
        raise ValueError("maxlag should be < nobs")
    if original not in ("in", "ex"):
        raise ValueError("original option not valid")
    dropidx = nvar if original == "ex" else 0

    lm = create_lag_matrix(x, maxlag, nobs, nvar)

    # Trim the rows padded with zeros at both ends
    return lm[maxlag:nobs, dropidx:]
