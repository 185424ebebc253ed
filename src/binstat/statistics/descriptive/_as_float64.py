from typing import Sequence, Union

import torch
from torch import Tensor


def as_float64(values: Union[Sequence[float], Tensor]) -> Tensor:
    """Widen ``values`` to a flat ``float64`` tensor."""
    if isinstance(values, Tensor):
        return values.to(torch.float64).flatten()

    # float() accepts Fraction, Decimal and numpy scalars alike
    return torch.tensor([float(v) for v in values], dtype=torch.float64)
