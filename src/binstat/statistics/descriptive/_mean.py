"""Arithmetic mean."""

from typing import Sequence, Union

from torch import Tensor

from ._as_float64 import as_float64
from ._empty_input_error import EmptyInputError


def mean(values: Union[Sequence[float], Tensor]) -> float:
    r"""Compute the arithmetic mean.

    .. math::
        \bar{x} = \frac{1}{n} \sum_{i=1}^{n} x_i

    Parameters
    ----------
    values : sequence of float or Tensor
        Sample values. Every element is widened to ``float64``; a tensor of
        any shape is flattened.

    Returns
    -------
    float
        The mean of ``values``.

    Raises
    ------
    EmptyInputError
        If ``values`` has no elements.

    Examples
    --------
    >>> mean([2, 4, 4, 4, 5, 5, 7, 9])
    5.0
    """
    x = as_float64(values)
    n = x.numel()
    if n == 0:
        raise EmptyInputError(
            "mean: cannot compute the mean of an empty input"
        )

    return (x.sum() / n).item()
