"""
Unit root tests for time series.

Example::

    from unitroot import adf_test, get_critical_value, AlphaLevel, Regression

    report = adf_test(y, lag=2, regression=Regression.CONSTANT)
    cv = get_critical_value(Regression.CONSTANT, report.size, AlphaLevel.ONE_PERCENT)
    rejects_unit_root = report.test_statistic < cv
"""

import logging

from unitroot.exceptions import (
    InsufficientObservationsError,
    InvalidAlphaLevelError,
    InvalidLagError,
    InvalidSeriesError,
    SampleSizeOutOfRangeError,
    SingularDesignMatrixError,
    UnitRootError,
    UnsupportedRegressionError,
)
from unitroot.logging_config import configure_logging
from unitroot.stationarity import (
    adf_test,
    asymptotic_critical_value,
    critical_value,
    critical_values,
    get_critical_value,
    plain_critical_value,
    plain_test,
)
from unitroot.types import AlphaLevel, OLSResult, Regression, Report

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AlphaLevel",
    "InsufficientObservationsError",
    "InvalidAlphaLevelError",
    "InvalidLagError",
    "InvalidSeriesError",
    "OLSResult",
    "Regression",
    "Report",
    "SampleSizeOutOfRangeError",
    "SingularDesignMatrixError",
    "UnitRootError",
    "UnsupportedRegressionError",
    "adf_test",
    "asymptotic_critical_value",
    "configure_logging",
    "critical_value",
    "critical_values",
    "get_critical_value",
    "plain_critical_value",
    "plain_test",
]
