import numpy as np
from numba import njit
from typing import Tuple

# Reject designs whose column-scaled condition number exceeds 1 / sqrt(eps),
# about 6.7e7: beyond that the coefficients keep fewer than half their digits.
_COND_TOL = np.sqrt(np.finfo(np.float64).eps)

@njit
def _rank_deficient_core(R: np.ndarray) -> bool:
    """
    Check whether the columns of X = QR are numerically linearly dependent.

    Columns are scaled to unit norm first, so the check measures collinearity
    rather than differences in units. The column norms of R equal those of X.

    Parameters
    ----------
    R : ndarray
        Upper triangular factor with shape (n_features, n_features)

    Returns
    -------
    bool
        True if a column is zero or the scaled design is ill-conditioned
    """
    norms = np.sqrt(np.sum(R**2, axis=0))
    if norms.min() == 0.0:
        return True

    s = np.linalg.svd(R / norms, full_matrices=False)[1]
    return s.min() <= s.max() * _COND_TOL

@njit
def _ols_fit_core(X: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Core OLS fitting routine optimized with numba.

    Solves R @ beta = Q.T @ y from a single QR decomposition of X.

    Parameters
    ----------
    X : ndarray
        Design matrix with shape (n_samples, n_features)
    y : ndarray
        Target vector with shape (n_samples,)

    Returns
    -------
    beta : ndarray
        Coefficient vector with shape (n_features,)
    R : ndarray
        Triangular factor, reused by the rank check and the standard errors
    """
    Q, R = np.linalg.qr(X)

    QT = np.ascontiguousarray(Q.T)
    QTy = QT @ y

    beta = np.linalg.solve(R, QTy[:R.shape[1]])

    return beta, R

@njit
def _stats_core(X: np.ndarray, y: np.ndarray, beta: np.ndarray, R: np.ndarray) -> Tuple[np.ndarray, np.ndarray, float]:
    """
    Residuals and coefficient standard errors.

    R is a Cholesky factor of X'X, so inv(X'X) = inv(R) @ inv(R).T and X'X is
    never inverted directly.

    Returns
    -------
    residuals : ndarray
    std_errors : ndarray
    sigma_squared : float
        Residual variance r'r / (n - k)
    """
    n, k = X.shape

    residuals = y - X @ beta
    SSR = np.sum(residuals**2)
    sigma_squared = SSR / (n - k)

    R_inv = np.linalg.solve(R, np.eye(k))

    # diag(inv(X'X))_j is the squared norm of row j of inv(R)
    std_errors = np.sqrt(np.sum(R_inv**2, axis=1) * sigma_squared)

    return residuals, std_errors, sigma_squared
