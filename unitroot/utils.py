from typing import Tuple, Union

import numpy as np

from unitroot.backends.numba.time_series import _ar_1_recursion

RandomState = Union[int, np.random.Generator, None]


def gen_ar_1(
    rng: RandomState,
    size: int,
    mu: float,
    delta: float,
    sigma: float,
) -> np.ndarray:
    """
    Generate AR(1) data.

    y_t = mu + delta * y_{t-1} + sigma * e_t, with e_t standard normal and
    y_{-1} = 0. delta = 1 gives a random walk (unit root).

    Parameters
    ----------
    rng : int, numpy.random.Generator or None
        Seed or generator.
    size : int
        Number of observations.
    mu, delta, sigma : float
        Drift, autoregressive coefficient and shock scale.

    Returns
    -------
    ndarray of shape (size,)
    """
    rng = np.random.default_rng(rng)
    shocks = rng.standard_normal(size)
    return _ar_1_recursion(shocks, float(mu), float(delta), float(sigma))


def _gen_x(size: int) -> np.ndarray:
    return np.arange(size, dtype=np.float64).reshape(-1, 1)


def gen_affine_data(size: int, mu: float, beta: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate y = beta * x + mu for x = 0, 1, ..., size - 1.

    Returns
    -------
    x : ndarray of shape (size, 1)
    y : ndarray of shape (size,)
    """
    x = _gen_x(size)
    y = beta * x[:, 0] + mu
    return x, y


def gen_affine_data_with_whitenoise(
    rng: RandomState,
    size: int,
    mu: float,
    beta: float,
    sigma: float = 1.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate y = beta * x + mu + noise, noise drawn from N(0, sigma**2).

    Returns
    -------
    x : ndarray of shape (size, 1)
    y : ndarray of shape (size,)
    """
    rng = np.random.default_rng(rng)
    x, y = gen_affine_data(size, mu, beta)
    return x, y + sigma * rng.standard_normal(size)
