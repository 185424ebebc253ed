from ._statistics_error import StatisticsError


class InsufficientDataError(StatisticsError):
    """Raised when an input has too few elements for the requested statistic."""

    pass
