"""
Tests for the Dickey-Fuller regression builder and its lag/trend helpers.
"""

import numpy as np
import pandas as pd
import pytest

from unitroot.backends.numba.matrix import lagmat
from unitroot.backends.numba.time_series import add_trend
from unitroot.exceptions import (
    InsufficientObservationsError,
    InvalidLagError,
    InvalidSeriesError,
    UnsupportedRegressionError,
)
from unitroot.stationarity.design import build_regression
from unitroot.types import Regression

# y[t-1], Δy[t-1], Δy[t-2] for the triangular numbers with lag 2
LEVEL_AND_LAGS = np.array([
    [6.0, 3.0, 2.0],
    [10.0, 4.0, 3.0],
    [15.0, 5.0, 4.0],
    [21.0, 6.0, 5.0],
    [28.0, 7.0, 6.0],
    [36.0, 8.0, 7.0],
    [45.0, 9.0, 8.0],
])


class TestLayout:

    def test_constant(self, triangular):
        delta_y, x, size = build_regression(triangular, 2, Regression.CONSTANT)

        assert size == 7
        np.testing.assert_array_equal(delta_y, [4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0])
        expected = np.column_stack([LEVEL_AND_LAGS, np.ones(7)])
        np.testing.assert_array_equal(x, expected)

    def test_constant_and_trend(self, triangular):
        delta_y, x, size = build_regression(triangular, 2, Regression.CONSTANT_AND_TREND)

        assert size == 7
        expected = np.column_stack([LEVEL_AND_LAGS, np.ones(7), np.arange(1.0, 8.0)])
        np.testing.assert_array_equal(x, expected)

    def test_no_constant(self, triangular):
        delta_y, x, size = build_regression(triangular, 2, Regression.NO_CONSTANT)

        assert x.shape == (7, 3)
        np.testing.assert_array_equal(x, LEVEL_AND_LAGS)

    def test_lag_zero_is_level_only(self, triangular):
        delta_y, x, size = build_regression(triangular, 0, "n")

        assert size == 9
        np.testing.assert_array_equal(x[:, 0], triangular[:-1])
        np.testing.assert_array_equal(delta_y, np.diff(triangular))

    def test_accepts_lists_and_pandas(self, triangular):
        from_list = build_regression(list(triangular), 1, "c")
        from_pandas = build_regression(pd.Series(triangular), 1, "c")

        np.testing.assert_array_equal(from_list[1], from_pandas[1])
        assert from_list[2] == from_pandas[2] == 8


class TestMinimumSize:

    @pytest.mark.parametrize("y, lag", [
        ([], 0),
        ([1.0], 0),
        ([1.0], 1),
        ([1.0, 3.0], 1),
        ([1.0, 3.0], 2),
    ])
    def test_too_short_for_lag(self, y, lag):
        with pytest.raises(InsufficientObservationsError):
            build_regression(y, lag, Regression.CONSTANT)

    def test_length_lag_plus_one(self, triangular):
        with pytest.raises(InsufficientObservationsError):
            build_regression(triangular[:4], 3, Regression.NO_CONSTANT)

    def test_not_over_determined_even_without_lags(self):
        # 2 rows for y[t-1] and the constant
        with pytest.raises(InsufficientObservationsError):
            build_regression([1.0, 2.0, 4.0], 0, Regression.CONSTANT)

    def test_smallest_usable_series(self):
        _, x, size = build_regression([1.0, 2.0, 4.0, 7.0], 0, Regression.CONSTANT)
        assert size == 3
        assert x.shape == (3, 2)


class TestInvalidArguments:

    @pytest.mark.parametrize("lag", [-1, 1.5, "2", None, True])
    def test_invalid_lag(self, triangular, lag):
        with pytest.raises(InvalidLagError):
            build_regression(triangular, lag, Regression.CONSTANT)

    def test_numpy_integer_lag(self, triangular):
        _, _, size = build_regression(triangular, np.int64(2), Regression.CONSTANT)
        assert size == 7

    def test_disproportionate_lag(self, triangular):
        # lag 4 leaves 5 rows for 6 regressors
        with pytest.raises(InvalidLagError):
            build_regression(triangular, 4, Regression.CONSTANT)

    def test_unsupported_regression(self, triangular):
        with pytest.raises(UnsupportedRegressionError):
            build_regression(triangular, 1, "ctt")

    @pytest.mark.parametrize("y", [
        [1.0, np.nan, 3.0, 4.0, 5.0],
        [1.0, 2.0, np.inf, 4.0, 5.0],
        np.ones((5, 2)),
        ["a", "b", "c", "d"],
    ])
    def test_invalid_series(self, y):
        with pytest.raises(InvalidSeriesError):
            build_regression(y, 0, Regression.CONSTANT)


class TestHelpers:

    def test_lagmat_columns(self):
        x = np.arange(1.0, 6.0)
        lags = lagmat(x, 2, original="in")

        np.testing.assert_array_equal(lags, [[3.0, 2.0, 1.0], [4.0, 3.0, 2.0], [5.0, 4.0, 3.0]])

    def test_lagmat_exclude_original(self):
        lags = lagmat(np.arange(1.0, 6.0), 2, original="ex")
        np.testing.assert_array_equal(lags, [[2.0, 1.0], [3.0, 2.0], [4.0, 3.0]])

    def test_lagmat_rejects_long_lag(self):
        with pytest.raises(ValueError):
            lagmat(np.arange(3.0), 3)

    def test_add_trend_append_and_prepend(self):
        x = np.array([5.0, 6.0, 7.0])

        appended = add_trend(x, "ct")
        prepended = add_trend(x, "c", prepend=True)

        np.testing.assert_array_equal(appended, [[5.0, 1.0, 1.0], [6.0, 1.0, 2.0], [7.0, 1.0, 3.0]])
        np.testing.assert_array_equal(prepended, [[1.0, 5.0], [1.0, 6.0], [1.0, 7.0]])
        assert add_trend(x, "n").shape == (3, 1)

    def test_add_trend_unknown(self):
        with pytest.raises(ValueError):
            add_trend(np.ones(3), "ctt")
