"""Pointer snapping: resolve a raw cursor point to a precise target."""

from __future__ import annotations
import logging
import math
from enum import Enum

from pydantic import BaseModel

from wallnet.models import SNAP_TOLERANCE, Point2D, Segment2D, SnapSettings


logger = logging.getLogger(__name__)

SEGMENT_INTERIOR_MIN = 0.01  # Feet closer to a segment end count as that endpoint
SEGMENT_INTERIOR_MAX = 0.99


class SnapType(str, Enum):
    ENDPOINT = "endpoint"
    MIDPOINT = "midpoint"
    PERPENDICULAR = "perpendicular"
    NEAREST = "nearest"
    GRID = "grid"
    NONE = "none"


class Axis(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class SnapResult(BaseModel):
    point: Point2D
    type: SnapType
    source_segment: Segment2D | None = None


class SnapCandidate(BaseModel):
    point: Point2D
    type: SnapType
    distance: float
    source_segment: Segment2D | None = None


class SegmentProjection(BaseModel):
    point: Point2D
    t: float
    distance: float


def snap_to_grid(value: float, grid_size: float) -> float:
    """Round to the nearest grid line, halves rounding up."""
    if grid_size <= 0:
        return value
    return math.floor(value / grid_size + 0.5) * grid_size


def snap_point_to_grid(point: Point2D, grid_size: float) -> Point2D:
    return Point2D(x=snap_to_grid(point.x, grid_size), y=snap_to_grid(point.y, grid_size))


def nearest_point_on_segment(point: Point2D, segment: Segment2D) -> SegmentProjection:
    """Closest point on the segment, with its clamped parameter t."""
    d = segment.end - segment.start
    length_sq = d.dot(d)
    if length_sq == 0:
        return SegmentProjection(
            point=segment.start, t=0.0, distance=point.distance_to(segment.start),
        )
    t = max(0.0, min(1.0, (point - segment.start).dot(d) / length_sq))
    foot = segment.point_at(t)
    return SegmentProjection(point=foot, t=t, distance=point.distance_to(foot))


def perpendicular_foot(point: Point2D, segment: Segment2D) -> Point2D | None:
    """Foot of the perpendicular from ``point``, only inside the segment."""
    d = segment.end - segment.start
    length_sq = d.dot(d)
    if length_sq == 0:
        return None
    t = (point - segment.start).dot(d) / length_sq
    if t <= SEGMENT_INTERIOR_MIN or t >= SEGMENT_INTERIOR_MAX:
        return None
    return segment.point_at(t)


def orthogonal_constraint(point: Point2D, reference: Point2D) -> tuple[Point2D, Axis]:
    """Lock the point horizontally or vertically, whichever delta is larger."""
    dx = abs(point.x - reference.x)
    dy = abs(point.y - reference.y)
    if dx >= dy:
        return Point2D(x=point.x, y=reference.y), Axis.HORIZONTAL
    return Point2D(x=reference.x, y=point.y), Axis.VERTICAL


class SnapEngine:
    """
    Stateless snapper. Call it on every pointer sample with endpoints and
    segments freshly derived from the live network.
    """

    def snap(
        self,
        point: Point2D,
        endpoints: list[Point2D],
        segments: list[Segment2D],
        tolerance: float = SNAP_TOLERANCE,
        grid_size: float = 0.5,
        settings: SnapSettings | None = None,
        reference_point: Point2D | None = None,
    ) -> SnapResult:
        if settings is None:
            settings = SnapSettings()
        if not settings.enabled:
            return SnapResult(point=point, type=SnapType.NONE)

        if settings.orthogonal and reference_point is not None:
            return self._snap_orthogonal(
                point, reference_point, endpoints, segments, tolerance, grid_size, settings,
            )

        # Strict priority: the first category with a hit wins, closest inside it.
        for category in self._categories(settings, reference_point):
            best = self._best(self._collect(
                category, point, endpoints, segments, tolerance, reference_point,
            ))
            if best is not None:
                logger.debug("Snapped to %s at (%.3f, %.3f)", best.type.value,
                             best.point.x, best.point.y)
                return SnapResult(
                    point=best.point, type=best.type, source_segment=best.source_segment,
                )

        if settings.grid:
            return SnapResult(point=snap_point_to_grid(point, grid_size), type=SnapType.GRID)
        return SnapResult(point=point, type=SnapType.NONE)

    def candidates(
        self,
        point: Point2D,
        endpoints: list[Point2D],
        segments: list[Segment2D],
        tolerance: float = SNAP_TOLERANCE,
        settings: SnapSettings | None = None,
        reference_point: Point2D | None = None,
    ) -> list[SnapCandidate]:
        """All candidates within tolerance, closest first (for indicators)."""
        if settings is None:
            settings = SnapSettings()
        if not settings.enabled:
            return []
        found: list[SnapCandidate] = []
        for category in self._categories(settings, reference_point):
            found.extend(self._collect(
                category, point, endpoints, segments, tolerance, reference_point,
            ))
        return sorted(found, key=lambda c: c.distance)

    def _categories(
        self, settings: SnapSettings, reference_point: Point2D | None,
    ) -> list[SnapType]:
        order = []
        if settings.endpoint:
            order.append(SnapType.ENDPOINT)
        if settings.midpoint:
            order.append(SnapType.MIDPOINT)
        if settings.perpendicular and reference_point is not None:
            order.append(SnapType.PERPENDICULAR)
        if settings.nearest:
            order.append(SnapType.NEAREST)
        return order

    def _collect(
        self,
        category: SnapType,
        point: Point2D,
        endpoints: list[Point2D],
        segments: list[Segment2D],
        tolerance: float,
        reference_point: Point2D | None,
    ) -> list[SnapCandidate]:
        found: list[SnapCandidate] = []
        if category == SnapType.ENDPOINT:
            for ep in endpoints:
                dist = point.distance_to(ep)
                if dist < tolerance:
                    found.append(SnapCandidate(point=ep, type=category, distance=dist))
        elif category == SnapType.MIDPOINT:
            for seg in segments:
                mid = seg.midpoint
                dist = point.distance_to(mid)
                if dist < tolerance:
                    found.append(SnapCandidate(
                        point=mid, type=category, distance=dist, source_segment=seg,
                    ))
        elif category == SnapType.PERPENDICULAR and reference_point is not None:
            for seg in segments:
                foot = perpendicular_foot(reference_point, seg)
                if foot is None:
                    continue
                dist = point.distance_to(foot)
                if dist < tolerance:
                    found.append(SnapCandidate(
                        point=foot, type=category, distance=dist, source_segment=seg,
                    ))
        elif category == SnapType.NEAREST:
            for seg in segments:
                proj = nearest_point_on_segment(point, seg)
                if (SEGMENT_INTERIOR_MIN < proj.t < SEGMENT_INTERIOR_MAX
                        and proj.distance < tolerance):
                    found.append(SnapCandidate(
                        point=proj.point, type=category, distance=proj.distance,
                        source_segment=seg,
                    ))
        return found

    def _best(self, found: list[SnapCandidate]) -> SnapCandidate | None:
        best = None
        for c in found:
            if best is None or c.distance < best.distance:
                best = c
        return best

    def _snap_orthogonal(
        self,
        point: Point2D,
        reference: Point2D,
        endpoints: list[Point2D],
        segments: list[Segment2D],
        tolerance: float,
        grid_size: float,
        settings: SnapSettings,
    ) -> SnapResult:
        constrained, axis = orthogonal_constraint(point, reference)

        if settings.endpoint:
            hit = self._axis_snap(constrained, reference, axis, endpoints, tolerance)
            if hit is not None:
                return SnapResult(point=hit, type=SnapType.ENDPOINT)

        if settings.midpoint:
            midpoints = [s.midpoint for s in segments]
            hit = self._axis_snap(constrained, reference, axis, midpoints, tolerance)
            if hit is not None:
                return SnapResult(point=hit, type=SnapType.MIDPOINT)

        if settings.grid:
            if axis == Axis.HORIZONTAL:
                snapped = Point2D(x=snap_to_grid(constrained.x, grid_size), y=reference.y)
            else:
                snapped = Point2D(x=reference.x, y=snap_to_grid(constrained.y, grid_size))
            return SnapResult(point=snapped, type=SnapType.GRID)

        return SnapResult(point=constrained, type=SnapType.NONE)

    def _axis_snap(
        self,
        constrained: Point2D,
        reference: Point2D,
        axis: Axis,
        targets: list[Point2D],
        tolerance: float,
    ) -> Point2D | None:
        """Align the free coordinate with the closest target coordinate."""
        best: Point2D | None = None
        min_distance = tolerance
        for target in targets:
            if axis == Axis.HORIZONTAL:
                dist = abs(constrained.x - target.x)
                if dist < min_distance:
                    min_distance = dist
                    best = Point2D(x=target.x, y=reference.y)
            else:
                dist = abs(constrained.y - target.y)
                if dist < min_distance:
                    min_distance = dist
                    best = Point2D(x=reference.x, y=target.y)
        return best
