"""
Shared fixtures for unitroot tests.

Reference series and statistics were produced with
statsmodels.tsa.stattools.adfuller(x, maxlag=lag, regression=..., autolag=None).
"""

import numpy as np
import pytest

from unitroot.logging_config import reset_logging

# Plain Dickey-Fuller reference: size 10, statistic -1.472691
DF_SERIES = [
    -0.89642362, 0.3222552, -1.96581989, -1.10012936, -1.3682928,
    1.17239875, 2.19561259, 2.54295031, 2.05530587, 1.13212955,
    -0.42968979,
]

# ADF references for "n" (lag 1), "c" (lag 2) and "ct" (lag 0)
ADF_SERIES = [
    -1.06714348, -1.14700339, 0.79204106, -0.05845247, -0.67476754,
    -0.10396661, 1.82059282, -0.51169443, 2.07712365, 1.85668086,
    2.56363688,
]

# Triangular numbers: Δy_t = t + 1, easy to check by hand
TRIANGULAR = [1.0, 3.0, 6.0, 10.0, 15.0, 21.0, 28.0, 36.0, 45.0, 55.0]


@pytest.fixture
def df_series():
    return np.array(DF_SERIES)


@pytest.fixture
def adf_series():
    return np.array(ADF_SERIES)


@pytest.fixture
def triangular():
    return np.array(TRIANGULAR)


@pytest.fixture
def random_walk():
    rng = np.random.default_rng(1234)
    return np.cumsum(rng.standard_normal(250))


@pytest.fixture(autouse=True)
def _isolate_logging():
    yield
    reset_logging()
