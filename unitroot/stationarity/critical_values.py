"""
Critical values for the Dickey-Fuller t-statistic.

Finite-sample critical values follow MacKinnon's response surface

    cv(T) = tau_inf + tau_1 / T + tau_2 / T**2 + tau_3 / T**3

where T is the number of observations used in the regression. The
coefficients for "c" and "ct" are from MacKinnon (2010); the "n" case was
not updated in 2010 and comes from MacKinnon (1996), as in statsmodels.

References
----------
MacKinnon, J.G. 2010. "Critical Values for Cointegration Tests."
    Queen's University, Dept of Economics Working Papers 1227.
MacKinnon, J.G. 1996. "Numerical distribution functions for unit root and
    cointegration tests." Journal of Applied Econometrics 11, 601-618.
"""

import numbers
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

import numpy as np

from unitroot.exceptions import SampleSizeOutOfRangeError
from unitroot.types import AlphaLevel, Regression

Coefficients = Tuple[float, float, float, float]

MIN_SIZE = 2


@dataclass(frozen=True)
class CriticalValueTable:
    """Response-surface coefficients (tau_inf, tau_1, tau_2, tau_3) per alpha level."""

    regression: Regression
    coefficients: Mapping[AlphaLevel, Coefficients]

    def value(self, size: int, alpha: AlphaLevel) -> float:
        tau = np.asarray(self.coefficients[alpha])
        # polyval wants the highest power first
        return float(np.polyval(tau[::-1], 1.0 / size))

    def asymptotic(self, alpha: AlphaLevel) -> float:
        return self.coefficients[alpha][0]


def _table(regression: Regression, one: Coefficients, five: Coefficients, ten: Coefficients) -> CriticalValueTable:
    return CriticalValueTable(
        regression=regression,
        coefficients=MappingProxyType({
            AlphaLevel.ONE_PERCENT: one,
            AlphaLevel.FIVE_PERCENT: five,
            AlphaLevel.TEN_PERCENT: ten,
        }),
    )


CRITICAL_VALUE_TABLES: Mapping[Regression, CriticalValueTable] = MappingProxyType({
    Regression.NO_CONSTANT: _table(
        Regression.NO_CONSTANT,
        (-2.56574, -2.2358, -3.627, 0.0),
        (-1.94100, -0.2686, -3.365, 31.223),
        (-1.61682, 0.2656, -2.714, 25.364),
    ),
    Regression.CONSTANT: _table(
        Regression.CONSTANT,
        (-3.43035, -6.5393, -16.786, -79.433),
        (-2.86154, -2.8903, -4.234, -40.040),
        (-2.56677, -1.5384, -2.809, 0.0),
    ),
    Regression.CONSTANT_AND_TREND: _table(
        Regression.CONSTANT_AND_TREND,
        (-3.95877, -9.0531, -28.428, -134.155),
        (-3.41049, -4.3904, -9.036, -45.374),
        (-3.12705, -2.5856, -3.925, -22.380),
    ),
})


def _check_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise SampleSizeOutOfRangeError(f"sample size must be an integer, got {size!r}")
    # The smallest regression that can be fitted has 2 rows
    if size < MIN_SIZE:
        raise SampleSizeOutOfRangeError(f"sample size must be at least {MIN_SIZE}, got {size}")
    return int(size)


def get_critical_value(
    regression: Union[Regression, str],
    size: int,
    alpha: Union[AlphaLevel, float, str],
) -> float:
    """
    Critical value of the Dickey-Fuller statistic.

    Reject the unit-root null at level alpha when the test statistic is
    below the returned value.

    Parameters
    ----------
    regression : Regression or {"n", "c", "ct"}
        Deterministic terms used in the test regression.
    size : int
        Number of observations used in the regression (``Report.size``).
    alpha : AlphaLevel, float or str
        Significance level: 1%, 5% or 10%.

    Returns
    -------
    float

    Raises
    ------
    UnsupportedRegressionError
        If no table exists for the regression.
    SampleSizeOutOfRangeError
        If size is not an integer of at least MIN_SIZE (2).
    InvalidAlphaLevelError
        If alpha is not 1%, 5% or 10%.
    """
    table = CRITICAL_VALUE_TABLES[Regression.parse(regression)]
    size = _check_size(size)
    alpha = AlphaLevel.parse(alpha)
    return table.value(size, alpha)


critical_value = get_critical_value


def plain_critical_value(size: int, alpha: Union[AlphaLevel, float, str]) -> float:
    """Critical value for the constant, no trend regression of the plain test."""
    return get_critical_value(Regression.CONSTANT, size, alpha)


def asymptotic_critical_value(
    regression: Union[Regression, str],
    alpha: Union[AlphaLevel, float, str],
) -> float:
    """Large-sample limit of the critical value (tau_inf)."""
    table = CRITICAL_VALUE_TABLES[Regression.parse(regression)]
    return table.asymptotic(AlphaLevel.parse(alpha))


def critical_values(regression: Union[Regression, str], size: int) -> Dict[str, float]:
    """
    Critical values at every tabulated level.

    Returns
    -------
    dict
        Keys "1%", "5%" and "10%".
    """
    return {
        alpha.label: get_critical_value(regression, size, alpha)
        for alpha in AlphaLevel
    }
