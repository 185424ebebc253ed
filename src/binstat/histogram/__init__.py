"""Histogram bin lookup.

Stations are the ordered boundaries of a histogram; bin ``i`` is the
half-open interval ``[stations[i], stations[i + 1])``.

Data Types
----------
StationFinder
    Bin lookup against a fixed set of stations.

Functions
---------
find_station
    Index of the bin containing a single value.
find_stations
    Vectorized bin lookup for a tensor of values.
"""

from ._find_station import find_station
from ._find_stations import find_stations
from ._station_finder import StationFinder

__all__ = [
    "StationFinder",
    "find_station",
    "find_stations",
]
