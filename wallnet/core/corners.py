"""Corner analysis: which walls meet at a wall's ends, and how they turn."""

from __future__ import annotations
import logging

from wallnet.models import (
    CONNECTION_TOLERANCE, Corner, Point2D, WallConnection, WallCornerAnalysis,
    WallEnd, WallEndExtensions, WallSegment,
)
from wallnet.core.miter import MiterSolver, corner_angle, turn_direction


logger = logging.getLogger(__name__)


class CornerAnalyzer:
    """Finds wall connections and accumulates their miter extensions."""

    def __init__(self, solver: MiterSolver | None = None) -> None:
        self.solver = solver or MiterSolver()

    def analyze(
        self,
        wall: WallSegment,
        all_walls: list[WallSegment],
        tolerance: float = CONNECTION_TOLERANCE,
    ) -> WallCornerAnalysis:
        """
        Compute the extensions for both ends of ``wall``.

        When three or more walls meet at one end, each edge keeps the
        extension of larger magnitude. This is not a full N-way miter.
        """
        connections = self.connections(wall, all_walls, tolerance)
        start = WallEndExtensions()
        end = WallEndExtensions()
        for conn in connections:
            if conn.wall_end == WallEnd.START:
                start = start.merged(conn.solution.wall_a)
            else:
                end = end.merged(conn.solution.wall_a)

        return WallCornerAnalysis(
            wall_id=wall.id,
            start_extensions=start,
            end_extensions=end,
            connections=connections,
        )

    def connections(
        self,
        wall: WallSegment,
        all_walls: list[WallSegment],
        tolerance: float = CONNECTION_TOLERANCE,
    ) -> list[WallConnection]:
        """Every (wall end, other wall end) pair closer than ``tolerance``."""
        found: list[WallConnection] = []
        for other in all_walls:
            if other.id == wall.id:
                continue
            for wall_end, point in ((WallEnd.START, wall.start), (WallEnd.END, wall.end)):
                other_end = self._touching_end(point, other, tolerance)
                if other_end is None:
                    continue
                found.append(self._connect(wall, wall_end, other, other_end))
        return found

    def find_corners(
        self,
        walls: list[WallSegment],
        tolerance: float = CONNECTION_TOLERANCE,
    ) -> list[Corner]:
        """Group wall endpoints that lie within ``tolerance`` into junctions."""
        clusters: list[list[tuple[str, Point2D, WallEnd]]] = []
        for wall in walls:
            for wall_end, pt in ((WallEnd.START, wall.start), (WallEnd.END, wall.end)):
                for cluster in clusters:
                    if any(pt.distance_to(p) < tolerance for _, p, _ in cluster):
                        cluster.append((wall.id, pt, wall_end))
                        break
                else:
                    clusters.append([(wall.id, pt, wall_end)])

        corners: list[Corner] = []
        by_id = {w.id: w for w in walls}
        for cluster in clusters:
            wall_ids = list(dict.fromkeys(wid for wid, _, _ in cluster))
            if len(wall_ids) < 2:
                continue
            avg_pt = Point2D(
                x=sum(p.x for _, p, _ in cluster) / len(cluster),
                y=sum(p.y for _, p, _ in cluster) / len(cluster),
            )
            first = cluster[0]
            second = next(c for c in cluster if c[0] != first[0])
            angle = corner_angle(
                by_id[first[0]].direction, by_id[second[0]].direction,
                first[2], second[2],
            )
            corners.append(Corner(point=avg_pt, wall_ids=wall_ids, angle=angle))
        return corners

    def _touching_end(
        self, point: Point2D, other: WallSegment, tolerance: float,
    ) -> WallEnd | None:
        if point.distance_to(other.start) < tolerance:
            return WallEnd.START
        if point.distance_to(other.end) < tolerance:
            return WallEnd.END
        return None

    def _connect(
        self,
        wall: WallSegment,
        wall_end: WallEnd,
        other: WallSegment,
        other_end: WallEnd,
    ) -> WallConnection:
        meeting_point = other.start if other_end == WallEnd.START else other.end
        dir_a = wall.direction
        dir_b = other.direction
        turn = turn_direction(dir_a, dir_b, wall_end, other_end)
        solution = self.solver.solve(
            meeting_point, dir_a, dir_b, wall_end, other_end,
            wall.alignment, other.alignment,
            wall.thickness, other.thickness,
            turn,
        )
        return WallConnection(
            wall_id=wall.id,
            other_wall_id=other.id,
            wall_end=wall_end,
            other_end=other_end,
            meeting_point=meeting_point,
            turn=turn,
            angle=corner_angle(dir_a, dir_b, wall_end, other_end),
            solution=solution,
        )
