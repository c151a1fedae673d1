"""Wall network: the caller-owned collection of walls and their openings."""

from __future__ import annotations
from pydantic import BaseModel

from wallnet.errors import UnknownElement
from .building import Opening, WallSegment
from .geometry import Point2D, Segment2D


class WallNetwork(BaseModel):
    """
    Holds the walls of one storey.

    The engine only reads from it. Corner extensions are derived on demand
    from the current geometry and are never stored here.
    """
    walls: list[WallSegment] = []

    def get_wall(self, wall_id: str) -> WallSegment | None:
        for w in self.walls:
            if w.id == wall_id:
                return w
        return None

    def require_wall(self, wall_id: str) -> WallSegment:
        wall = self.get_wall(wall_id)
        if wall is None:
            raise UnknownElement(f"Unknown wall '{wall_id}'", {"wall_id": wall_id})
        return wall

    def find_opening(self, opening_id: str) -> tuple[WallSegment, Opening]:
        for w in self.walls:
            opening = w.get_opening(opening_id)
            if opening is not None:
                return w, opening
        raise UnknownElement(f"Unknown opening '{opening_id}'", {"opening_id": opening_id})

    def add_wall(self, wall: WallSegment) -> None:
        self.walls.append(wall)

    def replace_wall(self, wall: WallSegment) -> None:
        for i, w in enumerate(self.walls):
            if w.id == wall.id:
                self.walls[i] = wall
                return
        raise UnknownElement(f"Unknown wall '{wall.id}'", {"wall_id": wall.id})

    def remove_wall(self, wall_id: str) -> WallSegment:
        wall = self.require_wall(wall_id)
        self.walls = [w for w in self.walls if w.id != wall_id]
        return wall

    def snap_endpoints(self) -> list[Point2D]:
        """Wall endpoints plus opening centers, fresh from the live walls."""
        points: list[Point2D] = []
        for w in self.walls:
            points.append(w.start)
            points.append(w.end)
            for o in w.openings:
                points.append(w.start.lerp(w.end, o.position))
        return points

    def snap_segments(self) -> list[Segment2D]:
        return [w.segment for w in self.walls]
