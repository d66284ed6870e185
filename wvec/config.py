"""Fixed values shared by the vector type."""

from __future__ import annotations

NON_FINITE_MESSAGE = "x/y values may not be NaN/inf"

# Direction handed out when normalizing the zero vector.
ZERO_DIRECTION = (1.0, 0.0)

VECTOR_LENGTH = 2
