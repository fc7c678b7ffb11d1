"""Two-dimensional vector used for positions and velocities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normal(self) -> Vector2:
        """Return the unit vector in the same direction, or the zero vector."""
        if self.x == 0.0 and self.y == 0.0:
            return Vector2(0.0, 0.0)
        return (1.0 / self.magnitude()) * self

    def dot(self, other: Vector2) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, num: object) -> Vector2:
        if not isinstance(num, Real):
            return NotImplemented
        return Vector2(self.x * num, self.y * num)

    def __rmul__(self, num: object) -> Vector2:
        if not isinstance(num, Real):
            return NotImplemented
        return Vector2(num * self.x, num * self.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y