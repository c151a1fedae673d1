"""Profile generator: orchestrates corner analysis and profile building."""

from __future__ import annotations
import logging

from wallnet.models import (
    CONNECTION_TOLERANCE, OpeningCutter, Point2D, Polygon2D, WallEndExtensions,
    WallNetwork, WallProfile, WallSegment, WallVertices,
)
from wallnet.core.corners import CornerAnalyzer
from wallnet.core.miter import edge_offsets


logger = logging.getLogger(__name__)

CUTTER_CLEARANCE = 0.01  # Cutters poke out this far on each wall face


class ProfileGenerator:
    """
    Stateless profile generator.

    Takes a wall plus its neighbours, runs corner analysis, and returns the
    mitered footprint with its opening cutters.
    """

    def __init__(
        self,
        analyzer: CornerAnalyzer | None = None,
        tolerance: float = CONNECTION_TOLERANCE,
    ) -> None:
        self.analyzer = analyzer or CornerAnalyzer()
        self.tolerance = tolerance

    def generate(self, network: WallNetwork) -> list[WallProfile]:
        return [self.profile(w, network.walls) for w in network.walls]

    def profile(self, wall: WallSegment, all_walls: list[WallSegment]) -> WallProfile:
        analysis = self.analyzer.analyze(wall, all_walls, self.tolerance)
        start, end = analysis.start_extensions, analysis.end_extensions
        length = wall.length
        left, right = edge_offsets(wall.alignment, wall.thickness)

        mitered = True
        if not self._edges_keep_length(length, start, end):
            logger.warning(
                "Dropping miter on wall %s: extensions would invert its profile", wall.id,
            )
            start, end = WallEndExtensions(), WallEndExtensions()
            mitered = False

        # Counterclockwise: right edge forward, left edge back.
        polygon = Polygon2D(points=[
            Point2D(x=-start.right_edge, y=right),
            Point2D(x=length + end.right_edge, y=right),
            Point2D(x=length + end.left_edge, y=left),
            Point2D(x=-start.left_edge, y=left),
        ])

        return WallProfile(
            wall_id=wall.id,
            length=length,
            height=wall.height,
            polygon=polygon,
            vertices=self.vertices(wall, start, end),
            start_extensions=start,
            end_extensions=end,
            cutters=self._cutters(wall, length, right),
            mitered=mitered,
        )

    def vertices(
        self,
        wall: WallSegment,
        start: WallEndExtensions,
        end: WallEndExtensions,
    ) -> WallVertices:
        """Footprint corners in plan coordinates."""
        direction = wall.direction
        normal = direction.perpendicular()
        left, right = edge_offsets(wall.alignment, wall.thickness)
        return WallVertices(
            start_left=wall.start.offset(normal, left).offset(direction, -start.left_edge),
            start_right=wall.start.offset(normal, right).offset(direction, -start.right_edge),
            end_left=wall.end.offset(normal, left).offset(direction, end.left_edge),
            end_right=wall.end.offset(normal, right).offset(direction, end.right_edge),
        )

    def _edges_keep_length(
        self, length: float, start: WallEndExtensions, end: WallEndExtensions,
    ) -> bool:
        left_length = length + start.left_edge + end.left_edge
        right_length = length + start.right_edge + end.right_edge
        return left_length > 0 and right_length > 0

    def _cutters(self, wall: WallSegment, length: float, right: float) -> list[OpeningCutter]:
        return [
            OpeningCutter(
                opening_id=o.id,
                kind=o.kind,
                x=o.position * length - o.width / 2,
                y_min=right - CUTTER_CLEARANCE,
                width=o.width,
                depth=wall.thickness + 2 * CUTTER_CLEARANCE,
                height=o.height,
                sill_height=o.sill_height,
            )
            for o in wall.openings
        ]
