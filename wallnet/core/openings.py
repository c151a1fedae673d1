"""Opening placement: door/window spans along a host wall."""

from __future__ import annotations
import logging
import math

from pydantic import BaseModel

from wallnet.models import OPENING_LOCATE_TOLERANCE, Point2D, WallSegment


logger = logging.getLogger(__name__)

MIN_EDGE_DISTANCE_RATIO = 0.02   # Normalized margin at each wall end
MIN_EDGE_DISTANCE_METERS = 0.05  # Absolute margin at each wall end
OVERLAP_BUFFER = 0.02            # Gap kept between neighbouring openings


class OpeningDistances(BaseModel):
    distance_from_left: float
    distance_from_right: float


class OpeningSpan(BaseModel):
    """Normalized extent of an opening along its wall."""
    start: float
    end: float

    def overlaps(self, other: OpeningSpan, buffer: float = 0.0) -> bool:
        return self.start < other.end + buffer and self.end > other.start - buffer


class WallLocation(BaseModel):
    """A wall hit by a pointer and the normalized position along it."""
    wall_id: str
    position: float


class OpeningPose(BaseModel):
    """Plan position of an opening center and the wall angle there."""
    point: Point2D
    angle: float


class OpeningPlacer:
    """Advisory checks and conversions for openings. Never mutates walls."""

    def distances_for(
        self, position: float, width: float, wall_length: float,
    ) -> OpeningDistances:
        center = position * wall_length
        half = width / 2
        return OpeningDistances(
            distance_from_left=center - half,
            distance_from_right=wall_length - center - half,
        )

    def position_from_left_distance(
        self, distance: float, width: float, wall_length: float,
    ) -> float:
        return (distance + width / 2) / wall_length

    def position_from_right_distance(
        self, distance: float, width: float, wall_length: float,
    ) -> float:
        return (wall_length - distance - width / 2) / wall_length

    def span(self, position: float, width: float, wall_length: float) -> OpeningSpan:
        half = width / 2 / wall_length
        return OpeningSpan(start=position - half, end=position + half)

    def can_place(
        self,
        wall: WallSegment,
        position: float,
        width: float,
        ignore_opening_id: str | None = None,
    ) -> bool:
        """
        True if an opening of ``width`` centered at ``position`` fits.

        Both end margins apply: 2% of the wall length and 5cm, whichever is
        stricter. Existing openings must stay 2cm clear.
        """
        wall_length = wall.length
        if wall_length <= 0 or width <= 0:
            return False

        candidate = self.span(position, width, wall_length)
        dist = self.distances_for(position, width, wall_length)

        if (
            candidate.start < MIN_EDGE_DISTANCE_RATIO
            or candidate.end > 1 - MIN_EDGE_DISTANCE_RATIO
            or dist.distance_from_left < MIN_EDGE_DISTANCE_METERS
            or dist.distance_from_right < MIN_EDGE_DISTANCE_METERS
        ):
            logger.debug("Opening at %.3f on wall %s is too close to a wall end",
                         position, wall.id)
            return False

        buffer = OVERLAP_BUFFER / wall_length
        for opening in wall.openings:
            if opening.id == ignore_opening_id:
                continue
            existing = self.span(opening.position, opening.width, wall_length)
            if candidate.overlaps(existing, buffer):
                logger.debug("Opening at %.3f on wall %s overlaps opening %s",
                             position, wall.id, opening.id)
                return False

        return True

    def position_on_wall(
        self,
        wall: WallSegment,
        point: Point2D,
        tolerance: float = OPENING_LOCATE_TOLERANCE,
    ) -> float | None:
        """Normalized projection of ``point`` onto the wall, if close enough."""
        length = wall.length
        if length < 0.01:
            return None
        d = wall.end - wall.start
        t = (point - wall.start).dot(d) / (length * length)
        if t < 0 or t > 1:
            return None
        if point.distance_to(wall.start.lerp(wall.end, t)) > tolerance:
            return None
        return t

    def locate(
        self,
        point: Point2D,
        walls: list[WallSegment],
        tolerance: float = OPENING_LOCATE_TOLERANCE,
    ) -> WallLocation | None:
        """First wall whose centre line passes within ``tolerance`` of the point."""
        for wall in walls:
            position = self.position_on_wall(wall, point, tolerance)
            if position is not None:
                return WallLocation(wall_id=wall.id, position=position)
        return None

    def world_position(self, wall: WallSegment, position: float) -> OpeningPose:
        d = wall.end - wall.start
        return OpeningPose(
            point=wall.start.lerp(wall.end, position),
            angle=math.atan2(d.y, d.x),
        )
