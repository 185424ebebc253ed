"""Histogram station finder."""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from torch import Tensor

from ._find_station import find_station
from ._find_stations import find_stations


@dataclass(frozen=True, eq=False)
class StationFinder:
    """Locates the histogram bin a value falls into.

    The finder keeps a reference to ``stations`` instead of a copy, so the
    caller must not mutate or resize the sequence while the finder is in
    use.

    Attributes
    ----------
    stations : sequence of float or Tensor
        Bin boundaries in ascending order. Bin ``i`` is the half-open
        interval ``[stations[i], stations[i + 1])``. The order is not
        validated.

    Examples
    --------
    >>> finder = StationFinder([0.0, 10.0, 20.0, 50.0])
    >>> finder.find_station(12.5)
    1
    >>> finder.find_station(50.0) is None
    True
    """

    stations: Union[Sequence[float], Tensor]

    def find_station(self, value: Union[float, Tensor]) -> Optional[int]:
        """Index of the bin containing ``value``, or ``None`` if out of range."""
        return find_station(self.stations, value)

    def find_stations(
        self,
        values: Union[Sequence[float], Tensor],
        *,
        fill_value: int = -1,
    ) -> Tensor:
        """Batched :meth:`find_station`; misses are set to ``fill_value``."""
        return find_stations(self.stations, values, fill_value=fill_value)
