"""Two-dimensional vector value type."""

from .iterator import VectorIterator
from .vector import Vector2

__all__ = [
    "Vector2",
    "VectorIterator",
]
