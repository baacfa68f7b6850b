from unitroot.stationarity.critical_values import (
    CRITICAL_VALUE_TABLES,
    CriticalValueTable,
    asymptotic_critical_value,
    critical_value,
    critical_values,
    get_critical_value,
    plain_critical_value,
)
from unitroot.stationarity.design import build_regression
from unitroot.stationarity.dickey_fuller import adf_test, plain_test

__all__ = [
    "CRITICAL_VALUE_TABLES",
    "CriticalValueTable",
    "adf_test",
    "asymptotic_critical_value",
    "build_regression",
    "critical_value",
    "critical_values",
    "get_critical_value",
    "plain_critical_value",
    "plain_test",
]
