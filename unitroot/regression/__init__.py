from unitroot.regression.least_squares import ols

__all__ = ["ols"]
