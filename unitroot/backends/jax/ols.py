from typing import Tuple

import jax
import jax.numpy as jnp
import jax.scipy.linalg as jsp_linalg
import lineax as lx

# Critical values are tabulated to five digits; float32 is not enough.
jax.config.update("jax_enable_x64", True)

@jax.jit
def _rank_deficient_core(R: jnp.ndarray) -> jnp.ndarray:
    """
    Check whether the columns of X = QR are numerically linearly dependent.

    Same rule as the numba kernel: a zero column, or a column-scaled
    condition number above 1 / sqrt(eps).

    Parameters
    ----------
    R : jnp.ndarray
        Upper triangular factor with shape (n_features, n_features)

    Returns
    -------
    jnp.ndarray
        Boolean scalar
    """
    norms = jnp.sqrt(jnp.sum(R**2, axis=0))
    zero_column = norms.min() == 0.0

    s = jnp.linalg.svd(R / jnp.where(zero_column, 1.0, norms), compute_uv=False)
    tol = jnp.sqrt(jnp.finfo(R.dtype).eps)
    return zero_column | (s.min() <= s.max() * tol)

@jax.jit
def _ols_fit_core(X: jnp.ndarray, y: jnp.ndarray) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Least squares through lineax's QR solver.

    Parameters
    ----------
    X : jnp.ndarray
        Design matrix with shape (n_samples, n_features)
    y : jnp.ndarray
        Target vector with shape (n_samples,)

    Returns
    -------
    beta : jnp.ndarray
        Coefficient vector with shape (n_features,)
    R : jnp.ndarray
        Triangular factor of X for the rank check and standard errors
    """
    operator = lx.MatrixLinearOperator(X)
    solution = lx.linear_solve(operator, y, lx.QR(), throw=False)

    R = jnp.linalg.qr(X, mode="r")

    return solution.value, R

@jax.jit
def _stats_core(X: jnp.ndarray, y: jnp.ndarray, beta: jnp.ndarray, R: jnp.ndarray) -> Tuple[jnp.ndarray, jnp.ndarray, float]:
    """
    Residuals, coefficient standard errors and residual variance.
    """
    n, k = X.shape

    residuals = y - X @ beta
    SSR = jnp.sum(residuals**2)
    sigma_squared = SSR / (n - k)

    # R is a Cholesky factor of X'X: inv(X'X) = inv(R) @ inv(R).T
    R_inv = jsp_linalg.solve_triangular(R, jnp.eye(k, dtype=X.dtype), lower=False)
    std_errors = jnp.sqrt(jnp.sum(R_inv**2, axis=1) * sigma_squared)

    return residuals, std_errors, sigma_squared
