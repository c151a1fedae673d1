"""Geometric primitives used throughout the engine."""

from __future__ import annotations
import math
from pydantic import BaseModel

from wallnet.errors import InvalidGeometry


MIN_DIRECTION_LENGTH = 0.001  # Segments shorter than 1mm fall back to +X


class Point2D(BaseModel):
    """Point on the plan (floor) plane."""
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def offset(self, direction: Vector2D, distance: float) -> Point2D:
        """Move along a direction by a signed distance."""
        return Point2D(x=self.x + direction.x * distance, y=self.y + direction.y * distance)

    def __sub__(self, other: Point2D) -> Vector2D:
        return Vector2D(x=self.x - other.x, y=self.y - other.y)


class Vector2D(BaseModel):
    """2D vector for direction calculations on the plan plane."""
    x: float
    y: float

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2D:
        ln = self.length()
        if ln < 1e-10:
            return Vector2D(x=0.0, y=0.0)
        return Vector2D(x=self.x / ln, y=self.y / ln)

    def perpendicular(self) -> Vector2D:
        """90-degree counterclockwise rotation (the left-hand normal)."""
        return Vector2D(x=-self.y, y=self.x)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def __neg__(self) -> Vector2D:
        return Vector2D(x=-self.x, y=-self.y)


class Segment2D(BaseModel):
    """A straight line segment, e.g. a wall reference line."""
    start: Point2D
    end: Point2D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def midpoint(self) -> Point2D:
        return self.start.lerp(self.end, 0.5)

    def direction(self) -> Vector2D:
        """Unit direction from start to end, (1, 0) for degenerate segments."""
        return direction_from_points(self.start, self.end)

    def point_at(self, t: float) -> Point2D:
        return self.start.lerp(self.end, t)


class Polygon2D(BaseModel):
    """Closed outline; the last point connects back to the first."""
    points: list[Point2D]

    def model_post_init(self, __context: object) -> None:
        if len(self.points) < 3:
            raise InvalidGeometry(
                "Polygon needs at least 3 points",
                {"points": str(len(self.points))},
            )

    def area(self) -> float:
        """Signed shoelace area, positive for counterclockwise winding."""
        total = 0.0
        n = len(self.points)
        for i in range(n):
            a = self.points[i]
            b = self.points[(i + 1) % n]
            total += a.x * b.y - b.x * a.y
        return total / 2

    def is_simple(self) -> bool:
        """True if no two non-adjacent edges cross each other."""
        n = len(self.points)
        edges = [(self.points[i], self.points[(i + 1) % n]) for i in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                # Adjacent edges share a vertex
                if j == i + 1 or (i == 0 and j == n - 1):
                    continue
                if _segments_cross(*edges[i], *edges[j]):
                    return False
        return True


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Normalized direction from start to end, (1, 0) when the points coincide."""
    v = end - start
    if v.length() < MIN_DIRECTION_LENGTH:
        return Vector2D(x=1.0, y=0.0)
    return v.normalized()


def _orientation(a: Point2D, b: Point2D, c: Point2D) -> float:
    return (b - a).cross(c - a)


def _segments_cross(p1: Point2D, p2: Point2D, q1: Point2D, q2: Point2D) -> bool:
    d1 = _orientation(q1, q2, p1)
    d2 = _orientation(q1, q2, p2)
    d3 = _orientation(p1, p2, q1)
    d4 = _orientation(p1, p2, q2)
    return d1 * d2 < 0 and d3 * d4 < 0
