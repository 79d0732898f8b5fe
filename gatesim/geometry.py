"""Plane geometry: points, rectangles and distances."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """A point or vector in screen coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def contains_point(self, point: Vec2) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return self.x <= point.x < self.right and self.y <= point.y < self.bottom

    def collides_with(self, other: Rect) -> bool:
        """True if the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    def expanded(self, margin: float) -> Rect:
        """A copy grown by ``margin`` on every side."""
        return Rect(
            self.x - margin,
            self.y - margin,
            self.width + 2 * margin,
            self.height + 2 * margin,
        )


def distance(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between two points."""
    return (b - a).length()


def distance_to_segment(point: Vec2, start: Vec2, end: Vec2) -> float:
    """Shortest distance from ``point`` to the segment from ``start`` to ``end``."""
    line = end - start
    length = line.length()
    if length == 0:
        return distance(point, start)
    t = (point - start).dot(line) / (length * length)
    t = min(max(t, 0.0), 1.0)
    return distance(point, start + line * t)