"""Shared fixtures for wall-network tests."""

from __future__ import annotations

import pytest

from wallnet.models import AlignmentSide, Point2D, WallSegment
from wallnet.core.corners import CornerAnalyzer
from wallnet.core.miter import MiterSolver
from wallnet.core.openings import OpeningPlacer
from wallnet.core.snap import SnapEngine


def make_wall(
    wall_id: str,
    start: tuple[float, float],
    end: tuple[float, float],
    thickness: float = 0.2,
    alignment: AlignmentSide = AlignmentSide.CENTER,
) -> WallSegment:
    return WallSegment(
        id=wall_id,
        start=Point2D(x=start[0], y=start[1]),
        end=Point2D(x=end[0], y=end[1]),
        thickness=thickness,
        alignment=alignment,
    )


@pytest.fixture
def solver() -> MiterSolver:
    return MiterSolver()


@pytest.fixture
def analyzer() -> CornerAnalyzer:
    return CornerAnalyzer()


@pytest.fixture
def placer() -> OpeningPlacer:
    return OpeningPlacer()


@pytest.fixture
def snapper() -> SnapEngine:
    return SnapEngine()


@pytest.fixture
def l_walls() -> list[WallSegment]:
    """Two 0.2m centered walls meeting at (5, 0) with a 90 degree bend."""
    return [
        make_wall("a", (0, 0), (5, 0)),
        make_wall("b", (5, 0), (5, 3)),
    ]


@pytest.fixture
def rectangle_walls() -> list[WallSegment]:
    """A closed 4m x 3m room drawn counterclockwise."""
    return [
        make_wall("south", (0, 0), (4, 0)),
        make_wall("east", (4, 0), (4, 3)),
        make_wall("north", (4, 3), (0, 3)),
        make_wall("west", (0, 3), (0, 0)),
    ]
