"""Binary-search lookup of the histogram bin containing a value."""

from typing import Optional, Sequence, Union

from torch import Tensor


def find_station(
    stations: Union[Sequence[float], Tensor],
    value: Union[float, Tensor],
) -> Optional[int]:
    r"""Find the bin of ``stations`` that contains ``value``.

    The stations :math:`s_0 < s_1 < \ldots < s_{n-1}` delimit the half-open
    bins

    .. math::
        [s_i, s_{i+1}), \quad i = 0, \ldots, n - 2

    and the returned index :math:`i` satisfies
    :math:`s_i \le v < s_{i+1}`.

    Parameters
    ----------
    stations : sequence of float or Tensor
        Bin boundaries in ascending order. The order is assumed, not
        checked; unsorted stations give a deterministic but meaningless
        result.
    value : float or Tensor
        Query value. A tensor must hold a single element.

    Returns
    -------
    int or None
        Index of the left boundary of the bin holding ``value``, or ``None``
        when there are fewer than two stations, when ``value < stations[0]``
        or when ``value >= stations[-1]``.

    Notes
    -----
    Tensor stations and values are compared as exact Python scalars, so a
    ``float32`` or integer station is never rounded to meet the query.
    A ``nan`` query is not special-cased: every comparison with it is
    false and the search settles on bin ``0``.

    Examples
    --------
    >>> find_station([0, 1, 2, 3], 1.5)
    1
    >>> find_station([0, 1, 2, 3], 3) is None
    True
    """
    if isinstance(value, Tensor):
        value = value.item()

    if isinstance(stations, Tensor):

        def station(i: int) -> float:
            return stations[i].item()

    else:
        station = stations.__getitem__

    n = len(stations)
    if n < 2:
        return None
    if value < station(0):
        return None
    # The last station closes the last bin
    if value >= station(n - 1):
        return None

    lower = 0
    upper = n
    while upper - lower > 1:
        mid = (upper + lower) // 2
        if value >= station(mid):
            lower = mid
        else:
            upper = mid

    return lower
