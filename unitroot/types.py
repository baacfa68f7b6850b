from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

import numpy as np

from unitroot.exceptions import InvalidAlphaLevelError, UnsupportedRegressionError


class Regression(str, Enum):
    """
    Deterministic terms included in the Dickey-Fuller regression.

    Values follow the statsmodels codes:

    * ``"n"``  : no constant, no trend   Δy_t = δ y_{t-1} + ε_t
    * ``"c"``  : constant                Δy_t = μ + δ y_{t-1} + ε_t
    * ``"ct"`` : constant and trend      Δy_t = μ + β t + δ y_{t-1} + ε_t
    """

    NO_CONSTANT = "n"
    CONSTANT = "c"
    CONSTANT_AND_TREND = "ct"

    @property
    def n_deterministic(self) -> int:
        """Number of deterministic columns appended to the design matrix."""
        return _DETERMINISTIC_COLUMNS[self.value]

    @classmethod
    def parse(cls, value: Union["Regression", str]) -> "Regression":
        """
        Convert a member, a short code or a member name to a Regression.

        Raises
        ------
        UnsupportedRegressionError
            If the value does not name a supported specification.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value or key == member.name.lower():
                    return member
        raise UnsupportedRegressionError(
            f"regression {value!r} not understood; expected one of "
            f"{[m.value for m in cls]}"
        )


# Constant and trend columns added by each regression
_DETERMINISTIC_COLUMNS = {"n": 0, "c": 1, "ct": 2}


class AlphaLevel(Enum):
    """Significance levels with tabulated critical values."""

    ONE_PERCENT = 0.01
    FIVE_PERCENT = 0.05
    TEN_PERCENT = 0.10

    @property
    def label(self) -> str:
        return f"{round(self.value * 100)}%"

    @classmethod
    def parse(cls, value: Union["AlphaLevel", float, str]) -> "AlphaLevel":
        """
        Convert a member, a probability (0.05) or a label ("5%") to an AlphaLevel.

        Raises
        ------
        InvalidAlphaLevelError
            If the value is not one of the tabulated levels.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value.strip() == member.label:
                    return member
        elif isinstance(value, (float, int, np.floating)) and not isinstance(value, bool):
            for member in cls:
                if np.isclose(float(value), member.value, rtol=0.0, atol=1e-12):
                    return member
        raise InvalidAlphaLevelError(
            f"alpha {value!r} not supported; expected one of "
            f"{[m.label for m in cls]}"
        )


@dataclass(frozen=True)
class OLSResult:
    """
    Least-squares estimates for ``y = X beta + e``.

    Attributes
    ----------
    coefficients : ndarray of shape (n_features,)
    std_errors : ndarray of shape (n_features,)
    residuals : ndarray of shape (n_samples,)
    sigma_squared : float
        Residual variance ``r'r / df_resid``.
    df_resid : int
        ``n_samples - n_features``.
    """

    coefficients: np.ndarray
    std_errors: np.ndarray
    residuals: np.ndarray
    sigma_squared: float
    df_resid: int

    @property
    def t_values(self) -> np.ndarray:
        with np.errstate(divide="ignore", invalid="ignore"):
            return self.coefficients / self.std_errors


@dataclass(frozen=True)
class Report:
    """
    Outcome of a Dickey-Fuller test.

    Attributes
    ----------
    size : int
        Number of observations actually regressed (``len(series) - lag - 1``).
    test_statistic : float or None
        t-ratio on the lagged level. None when it could not be computed.
    lag : int
        Number of lagged differences in the regression.
    regression : Regression
        Deterministic terms in the regression.
    """

    size: int
    test_statistic: Optional[float]
    lag: int = 0
    regression: Regression = Regression.CONSTANT

    def critical_values(self) -> Dict[str, float]:
        """Critical values at 1%, 5% and 10% for this report's regression and size."""
        from unitroot.stationarity.critical_values import critical_values

        return critical_values(self.regression, self.size)
