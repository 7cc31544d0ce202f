"""Geometric primitives used throughout the grid engine.

All coordinates are in feet on the elevation plane: X runs along the
opening width from the left jamb, Y runs up from the sill.
"""

from __future__ import annotations
import math
from pydantic import BaseModel


EPSILON = 1e-9


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))


def span_length(start: float, end: float) -> float:
    return abs(end - start)


def divide_extent(extent: float, count: int) -> list[float]:
    """
    Evenly spaced boundaries 0, extent/count, ..., extent.

    The last boundary is pinned to ``extent`` so adjacent spans always
    tile the full extent without floating-point drift.
    """
    boundaries = [i * extent / count for i in range(count)]
    boundaries.append(extent)
    return boundaries


class Point2D(BaseModel):
    """Point on the elevation plane."""
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class Segment(BaseModel):
    """Interval along a single axis."""
    start: float
    end: float

    @property
    def length(self) -> float:
        return span_length(self.start, self.end)

    def covers(self, value: float) -> bool:
        lo, hi = sorted((self.start, self.end))
        return lo - EPSILON <= value <= hi + EPSILON


class Rect(BaseModel):
    """Axis-aligned rectangle anchored at its lower-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    def contains(self, point: Point2D) -> bool:
        return (
            self.x - EPSILON <= point.x <= self.right + EPSILON
            and self.y - EPSILON <= point.y <= self.top + EPSILON
        )

    def overlaps(self, other: Rect) -> bool:
        """True if the interiors intersect; shared edges do not count."""
        return (
            self.x < other.right - EPSILON
            and other.x < self.right - EPSILON
            and self.y < other.top - EPSILON
            and other.y < self.top - EPSILON
        )
