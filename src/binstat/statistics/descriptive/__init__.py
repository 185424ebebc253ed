"""Descriptive statistics functions.

This module provides the arithmetic mean and the mean together with the
unbiased sample standard deviation.
"""

from ._empty_input_error import EmptyInputError
from ._insufficient_data_error import InsufficientDataError
from ._mean import mean
from ._mean_and_std import mean_and_std
from ._statistics_error import StatisticsError

__all__ = [
    "EmptyInputError",
    "InsufficientDataError",
    "StatisticsError",
    "mean",
    "mean_and_std",
]
