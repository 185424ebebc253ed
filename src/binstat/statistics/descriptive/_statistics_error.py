class StatisticsError(ValueError):
    """Base exception for descriptive statistics."""

    pass
