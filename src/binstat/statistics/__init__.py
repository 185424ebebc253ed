"""Statistics."""

from . import descriptive

__all__ = [
    "descriptive",
]
