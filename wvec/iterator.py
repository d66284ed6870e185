"""Cursor over the coordinates of a vector."""

from __future__ import annotations

from . import config


class VectorIterator:
    """Yield ``x`` then ``y`` from a private copy of a vector's coordinates."""

    __slots__ = ("_coords", "_pos")

    def __init__(self, x: float, y: float) -> None:
        self._coords = (x, y)
        self._pos = 0

    def __iter__(self) -> "VectorIterator":
        return self

    def __next__(self) -> float:
        if self._pos >= config.VECTOR_LENGTH:
            raise StopIteration
        value = self._coords[self._pos]
        self._pos += 1
        return value
