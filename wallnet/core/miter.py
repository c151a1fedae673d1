"""True miter solver: clean joints between two walls at any angle.

Every long side of a wall is treated as a parametric line
``P = point + t * direction`` running through the meeting point, offset
sideways by the alignment of the wall. The outer edges of both walls are
intersected with each other, and so are the inner edges. The signed
distance from each wall's unmodified edge end to its intersection is the
extension for that edge: positive lengthens the wall, negative shortens it.
"""

from __future__ import annotations
import logging
import math

from wallnet.models import (
    AlignmentSide, CornerSolution, Point2D, TurnDirection, Vector2D,
    WallEnd, WallEndExtensions,
)


logger = logging.getLogger(__name__)

MAX_EXTENSION_FACTOR = 3.0   # Extensions are capped at 3x the thicker wall
MIN_MITER_ANGLE = 0.26       # ~15 degrees; narrower corners are not mitered
PARALLEL_EPSILON = 1e-4      # |cross| below this means the edge lines never meet
TURN_EPSILON = 1e-3


def edge_offsets(alignment: AlignmentSide, thickness: float) -> tuple[float, float]:
    """
    Offsets of the (left, right) edges from the reference line.

    Offsets are measured along the left-hand normal, looking from wall
    start to wall end.
    """
    if alignment == AlignmentSide.LEFT:
        return 0.0, -thickness
    if alignment == AlignmentSide.RIGHT:
        return thickness, 0.0
    return thickness / 2, -thickness / 2


def _travel_directions(
    dir_a: Vector2D, dir_b: Vector2D, end_a: WallEnd, end_b: WallEnd,
) -> tuple[Vector2D, Vector2D]:
    """Direction walking into the corner along A, then out of it along B."""
    into_a = dir_a if end_a == WallEnd.END else -dir_a
    out_b = dir_b if end_b == WallEnd.START else -dir_b
    return into_a, out_b


def turn_direction(
    dir_a: Vector2D, dir_b: Vector2D, end_a: WallEnd, end_b: WallEnd,
) -> TurnDirection:
    """Classify the bend from wall A into wall B (y axis pointing up)."""
    into_a, out_b = _travel_directions(dir_a, dir_b, end_a, end_b)
    cross = into_a.cross(out_b)
    if abs(cross) < TURN_EPSILON:
        return TurnDirection.STRAIGHT if into_a.dot(out_b) > 0 else TurnDirection.BACK
    return TurnDirection.LEFT if cross > 0 else TurnDirection.RIGHT


def corner_angle(
    dir_a: Vector2D, dir_b: Vector2D, end_a: WallEnd, end_b: WallEnd,
) -> float:
    """Interior angle between the walls, 0..pi (pi for a straight run)."""
    into_a, out_b = _travel_directions(dir_a, dir_b, end_a, end_b)
    into_b = -out_b
    d = max(-1.0, min(1.0, into_a.dot(into_b)))
    return math.acos(d)


def line_intersection(
    p1: Point2D, d1: Vector2D, p2: Point2D, d2: Vector2D,
) -> Point2D | None:
    """Intersection of two parametric lines, None when (nearly) parallel."""
    cross = d1.cross(d2)
    if abs(cross) < PARALLEL_EPSILON:
        return None
    diff = p2 - p1
    t1 = diff.cross(d2) / cross
    return p1.offset(d1, t1)


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


class MiterSolver:
    """Computes the edge extensions that miter two walls at a shared point."""

    def solve(
        self,
        meeting_point: Point2D,
        dir_a: Vector2D,
        dir_b: Vector2D,
        end_a: WallEnd,
        end_b: WallEnd,
        align_a: AlignmentSide,
        align_b: AlignmentSide,
        thickness_a: float,
        thickness_b: float,
        turn: TurnDirection,
    ) -> CornerSolution:
        """
        Solve one corner. Never raises.

        ``dir_a``/``dir_b`` are the unit start-to-end directions of the walls;
        ``end_a``/``end_b`` say which end of each wall sits at the corner.
        Colinear walls, near-parallel walls and parallel edge lines all
        degrade to zero extensions.
        """
        if turn in (TurnDirection.STRAIGHT, TurnDirection.BACK):
            return CornerSolution()

        angle = math.acos(max(-1.0, min(1.0, dir_a.dot(dir_b))))
        if angle < MIN_MITER_ANGLE or angle > math.pi - MIN_MITER_ANGLE:
            logger.debug("Skipping miter at (%.3f, %.3f): angle %.3f rad",
                         meeting_point.x, meeting_point.y, angle)
            return CornerSolution()

        max_extension = MAX_EXTENSION_FACTOR * max(thickness_a, thickness_b)

        left_a, right_a = self._edge_points(meeting_point, dir_a, align_a, thickness_a)
        left_b, right_b = self._edge_points(meeting_point, dir_b, align_b, thickness_b)

        # The inner side lies on the turning side of the walk from A into B.
        # A wall meeting the corner with its start is walked backwards,
        # which swaps its left and right edges.
        turns_left = turn == TurnDirection.LEFT
        a_inner_is_left = turns_left != (end_a == WallEnd.START)
        b_inner_is_left = turns_left != (end_b == WallEnd.END)

        a_inner, a_outer = (left_a, right_a) if a_inner_is_left else (right_a, left_a)
        b_inner, b_outer = (left_b, right_b) if b_inner_is_left else (right_b, left_b)

        inner = line_intersection(a_inner, dir_a, b_inner, dir_b)
        outer = line_intersection(a_outer, dir_a, b_outer, dir_b)

        outward_a = dir_a if end_a == WallEnd.END else -dir_a
        outward_b = dir_b if end_b == WallEnd.END else -dir_b

        def extension(hit: Point2D | None, edge_point: Point2D, outward: Vector2D) -> float:
            if hit is None:
                return 0.0
            return _clamp((hit - edge_point).dot(outward), max_extension)

        ext_a_inner = extension(inner, a_inner, outward_a)
        ext_a_outer = extension(outer, a_outer, outward_a)
        ext_b_inner = extension(inner, b_inner, outward_b)
        ext_b_outer = extension(outer, b_outer, outward_b)

        return CornerSolution(
            wall_a=(WallEndExtensions(left_edge=ext_a_inner, right_edge=ext_a_outer)
                    if a_inner_is_left
                    else WallEndExtensions(left_edge=ext_a_outer, right_edge=ext_a_inner)),
            wall_b=(WallEndExtensions(left_edge=ext_b_inner, right_edge=ext_b_outer)
                    if b_inner_is_left
                    else WallEndExtensions(left_edge=ext_b_outer, right_edge=ext_b_inner)),
        )

    def _edge_points(
        self,
        meeting_point: Point2D,
        direction: Vector2D,
        alignment: AlignmentSide,
        thickness: float,
    ) -> tuple[Point2D, Point2D]:
        """Where the left and right edge lines cross the wall end."""
        normal = direction.perpendicular()
        left, right = edge_offsets(alignment, thickness)
        return meeting_point.offset(normal, left), meeting_point.offset(normal, right)
