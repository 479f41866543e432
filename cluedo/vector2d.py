"""Two-dimensional vectors in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x / scalar, self.y / scalar)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2D:
        """Return the unit vector in this direction; raises ZeroDivisionError for zero."""
        return self / self.length()

    def projected_onto(self, unit_vector: Vector2D) -> Vector2D:
        return unit_vector * self.dot(unit_vector)

    def rejected_from(self, unit_vector: Vector2D) -> Vector2D:
        return self - self.projected_onto(unit_vector)

    def rotated_by(self, rotation_angle: float) -> Vector2D:
        radius, angle = self.decompose()
        return Vector2D.from_polar(radius, angle + rotation_angle)

    def rotated_ccw90(self) -> Vector2D:
        return Vector2D(-self.y, self.x)

    def decompose(self) -> tuple[float, float]:
        """Return the polar form (radius, angle) of this vector."""
        return self.length(), math.atan2(self.y, self.x)

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> Vector2D:
        return cls(radius * math.cos(angle), radius * math.sin(angle))