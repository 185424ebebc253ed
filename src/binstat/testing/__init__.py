"""Testing helpers for binstat.

This subpackage imports ``hypothesis``, which is not a runtime dependency
of binstat. Install the ``test`` extra (``pip install binstat[test]``) before
importing it; ``import binstat`` alone never loads it.

Example usage:

    import hypothesis

    from binstat.testing import increasing_stations, real_numbers

    @hypothesis.given(increasing_stations(), real_numbers())
    def test_lookup(stations, value):
        ...
"""

from .strategies import (
    increasing_stations,
    real_numbers,
    samples,
)

__all__ = [
    "increasing_stations",
    "real_numbers",
    "samples",
]
