from ._statistics_error import StatisticsError


class EmptyInputError(StatisticsError):
    """Raised when a statistic is requested for an input with no elements."""

    pass
