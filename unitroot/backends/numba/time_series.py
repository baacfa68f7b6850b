import numpy as np
from numba import njit


@njit
def _ar_1_recursion(shocks, mu, delta, sigma):
    """
    y_t = mu + delta * y_{t-1} + sigma * e_t, starting from y_{-1} = 0.
    """
    y = np.empty(shocks.shape[0])
    previous = 0.0
    for i in range(shocks.shape[0]):
        previous = mu + delta * previous + sigma * shocks[i]
        y[i] = previous
    return y

def add_trend(x, trend="c", prepend=False):
    """
    Add a constant and/or linear time trend to a NumPy array.

    Parameters
    ----------
    x : array_like
        Original array of data.
    trend : str {'n', 'c', 'ct'}
        The trend to add: 'n' (none), 'c' (constant),
        'ct' (constant and linear trend 1..nobs).
    prepend : bool
        If True, prepend trend columns; otherwise, append them.

    Returns
    -------
    ndarray
        The original data with added trend columns, always 2d.
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim == 1:
        x = x.reshape(-1, 1)
    nobs = x.shape[0]

    if trend not in ("n", "c", "ct"):
        raise ValueError(f"trend '{trend}' not understood")

    if trend == "n":
        return x.copy()

    trend_cols = [np.ones((nobs, 1))]
    if trend == "ct":
        trend_cols.append(np.arange(1, nobs + 1, dtype=np.float64).reshape(-1, 1))

    trendarr = np.hstack(trend_cols)

    if prepend:
        return np.hstack([trendarr, x])
    return np.hstack([x, trendarr])
