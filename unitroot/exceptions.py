class UnitRootError(ValueError):
    """Base class for every error raised by unitroot."""


class InvalidSeriesError(UnitRootError):
    """The series is not 1-dimensional or contains non-finite values."""


class InsufficientObservationsError(UnitRootError):
    """The series is too short for the requested lag and regression."""


class InvalidLagError(UnitRootError):
    """The lag is negative, not an integer, or too large for the series."""


class SingularDesignMatrixError(UnitRootError):
    """
    The regressors are collinear or the system is not over-determined.

    This is a property of the data (e.g. a constant series), not of the
    arguments.
    """


class UnsupportedRegressionError(UnitRootError):
    """No critical value table exists for the regression specification."""


class InvalidAlphaLevelError(UnitRootError):
    """The significance level is not one of 1%, 5% or 10%."""


class SampleSizeOutOfRangeError(UnitRootError):
    """The sample size is not an integer of at least 2, the fewest rows a regression can have."""
