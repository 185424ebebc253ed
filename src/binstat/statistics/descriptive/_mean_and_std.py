"""Mean and unbiased sample standard deviation."""

import logging
import math
from typing import Sequence, Tuple, Union

from torch import Tensor

from ._as_float64 import as_float64
from ._insufficient_data_error import InsufficientDataError

logger = logging.getLogger(__name__)


def mean_and_std(
    values: Union[Sequence[float], Tensor],
) -> Tuple[float, float]:
    r"""Compute the mean and the unbiased sample standard deviation.

    Mathematical Definition
    -----------------------
    With the mean :math:`\bar{x}` and deviations :math:`d_i = x_i - \bar{x}`,
    the variance is computed with the corrected two-pass algorithm

    .. math::
        s^2 = \frac{1}{n - 1} \left[ \sum_{i=1}^{n} d_i^2
              - \frac{1}{n} \left( \sum_{i=1}^{n} d_i \right)^2 \right]

    The corrector :math:`\sum d_i` is zero in exact arithmetic; in floating
    point it cancels most of the round-off left in :math:`\bar{x}`, which
    keeps the result accurate for data whose mean is large compared to its
    spread.

    Parameters
    ----------
    values : sequence of float or Tensor
        Sample values, at least two. Every element is widened to
        ``float64``; a tensor of any shape is flattened.

    Returns
    -------
    mean : float
        The arithmetic mean.
    std : float
        The standard deviation with Bessel's correction (:math:`n - 1`
        divisor).

    Raises
    ------
    InsufficientDataError
        If ``values`` has fewer than two elements.

    Notes
    -----
    When every deviation is the same tiny round-off residue, as for a
    constant input whose mean is not exactly representable, the two sums
    cancel and the difference can come out a few ulps below zero. Such a
    variance is clamped to zero, so the standard deviation is never
    ``nan`` for finite input.

    Examples
    --------
    >>> mean, std = mean_and_std([2, 4, 4, 4, 5, 5, 7, 9])
    >>> mean
    5.0
    >>> round(7 * std**2, 10)
    32.0

    References
    ----------
    .. [1] T.F. Chan, G.H. Golub and R.J. LeVeque, "Algorithms for Computing
           the Sample Variance: Analysis and Recommendations," The American
           Statistician, vol. 37, no. 3, pp. 242-247, 1983.
    """
    x = as_float64(values)
    n = x.numel()
    if n < 2:
        raise InsufficientDataError(
            f"mean_and_std: at least two values are needed, got {n}"
        )

    mean = x.sum() / n

    d = x - mean
    corrector = d.sum()
    variance = ((d * d).sum() - corrector * corrector / n) / (n - 1)

    variance = variance.item()
    if variance < 0.0:
        logger.debug(
            "mean_and_std: clamping round-off variance %r to zero", variance
        )
        variance = 0.0

    return mean.item(), math.sqrt(variance)
