"""Axis-aligned boxes in the plane."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from cluedo.vector2d import Vector2D


@dataclass
class Box2D:
    """An axis-aligned box given by its minimum and maximum corners."""

    min_corner: Vector2D
    max_corner: Vector2D

    @classmethod
    def empty(cls) -> Box2D:
        """Return an inverted box that any point expansion will replace."""
        big = sys.float_info.max
        return cls(Vector2D(big, big), Vector2D(-big, -big))

    def width(self) -> float:
        return self.max_corner.x - self.min_corner.x

    def height(self) -> float:
        return self.max_corner.y - self.min_corner.y

    def aspect_ratio(self) -> float:
        return self.width() / self.height()

    def area(self) -> float:
        return self.width() * self.height()

    def minimally_expand_to_match_aspect_ratio(self, aspect_ratio: float) -> None:
        current = self.aspect_ratio()
        if current < aspect_ratio:
            delta = (self.height() * aspect_ratio - self.width()) / 2.0
            self._grow(delta, 0.0)
        elif current > aspect_ratio:
            delta = (self.width() / aspect_ratio - self.height()) / 2.0
            self._grow(0.0, delta)

    def minimally_contract_to_match_aspect_ratio(self, aspect_ratio: float) -> None:
        current = self.aspect_ratio()
        if current < aspect_ratio:
            delta = (self.height() - self.width() / aspect_ratio) / 2.0
            self._grow(0.0, -delta)
        elif current > aspect_ratio:
            delta = (self.width() - self.height() * aspect_ratio) / 2.0
            self._grow(-delta, 0.0)

    def contains_point(self, point: Vector2D) -> bool:
        return (
            self.min_corner.x <= point.x <= self.max_corner.x
            and self.min_corner.y <= point.y <= self.max_corner.y
        )

    def expand_to_include_point(self, point: Vector2D) -> None:
        self.min_corner = Vector2D(min(self.min_corner.x, point.x), min(self.min_corner.y, point.y))
        self.max_corner = Vector2D(max(self.max_corner.x, point.x), max(self.max_corner.y, point.y))

    def add_margin(self, margin: float) -> None:
        self._grow(margin, margin)

    def point_to_uvs(self, point: Vector2D) -> Vector2D:
        """Map a point to coordinates relative to the box, (0, 0) at the minimum corner."""
        return Vector2D(
            (point.x - self.min_corner.x) / self.width(),
            (point.y - self.min_corner.y) / self.height(),
        )

    def point_from_uvs(self, uv: Vector2D) -> Vector2D:
        """Map box-relative coordinates back to a point in the plane."""
        return Vector2D(
            self.min_corner.x + uv.x * self.width(),
            self.min_corner.y + uv.y * self.height(),
        )

    def _grow(self, dx: float, dy: float) -> None:
        offset = Vector2D(dx, dy)
        self.min_corner = self.min_corner - offset
        self.max_corner = self.max_corner + offset