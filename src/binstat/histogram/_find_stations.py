"""Vectorized histogram bin lookup."""

import logging
from typing import Sequence, Union

import torch
from torch import Tensor

logger = logging.getLogger(__name__)


def find_stations(
    stations: Union[Sequence[float], Tensor],
    values: Union[Sequence[float], Tensor],
    *,
    fill_value: int = -1,
) -> Tensor:
    r"""Find the bin of ``stations`` containing each element of ``values``.

    Elementwise counterpart of :func:`find_station`. For every query
    :math:`v` the result holds the index :math:`i` with
    :math:`s_i \le v < s_{i+1}`, or ``fill_value`` where no such bin exists.

    Parameters
    ----------
    stations : sequence of float or Tensor
        Bin boundaries in ascending order, one-dimensional. Unlike the
        scalar lookup, the search relies on the order, so unsorted stations
        may disagree with :func:`find_station`.
    values : sequence of float or Tensor
        Query values of any shape.
    fill_value : int, optional
        Index written for queries outside ``[stations[0], stations[-1])``,
        for ``nan`` queries, and for every query when there are fewer than
        two stations. Default: ``-1``.

    Returns
    -------
    Tensor
        ``int64`` tensor with the shape of ``values``.

    Raises
    ------
    ValueError
        If ``stations`` is not one-dimensional.

    Notes
    -----
    Stations and values are widened to ``float64`` before the search, so
    results match :func:`find_station` for sorted stations. The one
    exception is ``nan``: the scalar lookup does not special-case it and
    returns bin ``0``, while this function returns ``fill_value``.

    Examples
    --------
    >>> find_stations([0.0, 1.0, 2.0], torch.tensor([-1.0, 0.0, 1.5, 2.0]))
    tensor([-1,  0,  1, -1])
    """
    # Lists go straight to float64; the default dtype would round them
    if isinstance(values, Tensor):
        query = values.to(torch.float64)
    else:
        query = torch.as_tensor(values, dtype=torch.float64)
    if isinstance(stations, Tensor):
        edges = stations.to(device=query.device, dtype=torch.float64)
    else:
        edges = torch.as_tensor(
            stations, dtype=torch.float64, device=query.device
        )
    if edges.dim() != 1:
        raise ValueError(
            f"find_stations: stations must be one-dimensional, got {edges.dim()} dimensions"
        )

    if edges.numel() < 2:
        return torch.full_like(query, fill_value, dtype=torch.int64)

    # Number of stations <= v, minus one, is the left boundary of the bin
    index = (
        torch.searchsorted(edges, query.reshape(-1), right=True) - 1
    ).reshape(query.shape)

    outside = (
        (query < edges[0]) | (query >= edges[-1]) | torch.isnan(query)
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "find_stations: %d of %d queries outside [%s, %s)",
            int(outside.sum()),
            query.numel(),
            edges[0].item(),
            edges[-1].item(),
        )

    return torch.where(outside, torch.full_like(index, fill_value), index)
