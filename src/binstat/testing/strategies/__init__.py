"""Hypothesis strategies for binstat tests."""

from ._increasing_stations import increasing_stations
from ._real_numbers import real_numbers
from ._samples import samples

__all__ = [
    "increasing_stations",
    "real_numbers",
    "samples",
]
