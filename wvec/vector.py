"""Immutable 2D Cartesian vector with finite double-precision coordinates."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from math import atan2, cos, hypot, isfinite, sin, sqrt
from numbers import Real

import numpy as np

from . import config
from .iterator import VectorIterator

logger = logging.getLogger(__name__)


def _as_double(value: object) -> float | None:
    """Coerce ``value`` to a float the way host numbers convert, or return None."""
    if not (hasattr(type(value), "__float__") or hasattr(type(value), "__index__")):
        return None
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _sequence_coordinates(other: object) -> list[float] | None:
    """Return the items of a numeric sequence as floats, or None if ``other`` is not one."""
    if isinstance(other, (str, bytes, bytearray)):
        return None
    if isinstance(other, np.ndarray):
        if other.ndim != 1:
            return None
    elif not isinstance(other, Sequence):
        return None
    values = [_as_double(value) for value in other]
    if any(value is None for value in values):
        return None
    return values


@dataclass(frozen=True, eq=False, repr=False)
class Vector2:
    """2D vector whose coordinates are finite floats.

    Instances are immutable; arithmetic returns new vectors. A Vector2 also
    behaves as a two-item sequence: ``len(v) == 2`` and ``x, y = v``.
    """

    x: float
    y: float

    # Keep numpy from broadcasting over a vector so its operators defer to ours.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if not isinstance(value, Real):
                raise TypeError(f"{name} must be a real number, not {type(value).__name__}")
            object.__setattr__(self, name, float(value))
        if not (isfinite(self.x) and isfinite(self.y)):
            logger.debug("Rejected non-finite coordinates x=%r y=%r", self.x, self.y)
            raise ValueError(config.NON_FINITE_MESSAGE)

    @classmethod
    def _unchecked(cls, x: float, y: float) -> "Vector2":
        # Results of arithmetic and polar conversion skip the finiteness gate.
        vec = object.__new__(cls)
        object.__setattr__(vec, "x", float(x))
        object.__setattr__(vec, "y", float(y))
        return vec

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Vector2":
        """Construct a new cartesian vector from r (length) and theta (angle).

        Non-finite input gives a non-finite vector rather than an error.
        """
        return cls._unchecked(r * cos(theta), r * sin(theta))

    def is_zero(self) -> bool:
        """Return True if this vector is the zero vector.

        Note that ``bool(vec)`` is always True, because a Vector2 is a
        sequence of length 2.
        """
        return self.x == 0.0 and self.y == 0.0

    def length_squared(self) -> float:
        """Return the length of the vector, squared.

        Sufficient for comparing lengths without taking a square root.
        """
        return self.dot(self)

    def length(self) -> float:
        return sqrt(self.length_squared())

    def angle(self) -> float:
        """Return the angle in radians this vector makes to the positive x axis."""
        return atan2(self.y, self.x)

    def to_polar(self) -> tuple[float, float]:
        """Return a tuple (r, theta) giving a polar representation of this vector."""
        return (self.length(), self.angle())

    def normalized(self) -> "Vector2":
        """Return a unit-length copy of this vector.

        The zero vector has no direction; it normalizes to ``Vector2(1.0, 0.0)``.
        Use :meth:`is_zero` to detect that case.
        """
        if self.is_zero():
            return Vector2(*config.ZERO_DIRECTION)
        mag = hypot(self.x, self.y)
        return Vector2._unchecked(self.x / mag, self.y / mag)

    def dot(self, other: "Vector2") -> float:
        if not isinstance(other, Vector2):
            raise TypeError(f"other must be a Vector2, not {type(other).__name__}")
        return self.x * other.x + self.y * other.y

    def __add__(self, other: object) -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2._unchecked(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: object) -> "Vector2":
        factor = _as_double(scalar)
        if factor is None:
            return NotImplemented
        return Vector2._unchecked(self.x * factor, self.y * factor)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector2):
            return self.x == other.x and self.y == other.y
        values = _sequence_coordinates(other)
        if values is None:
            return NotImplemented
        return bool(
            len(values) == config.VECTOR_LENGTH
            and values[0] == self.x
            and values[1] == self.y
        )

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __len__(self) -> int:
        return config.VECTOR_LENGTH

    def __iter__(self) -> VectorIterator:
        return VectorIterator(self.x, self.y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return self.__repr__()
