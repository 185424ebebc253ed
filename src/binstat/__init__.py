"""binstat: histogram bin lookup and descriptive statistics for PyTorch."""

from . import (
    histogram,
    statistics,
)

__all__ = [
    "histogram",
    "statistics",
]

__version__ = "0.1.0"
