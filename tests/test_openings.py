"""Tests for opening distances, placement checks and wall lookup."""

from __future__ import annotations

import math

import pytest

from wallnet.models import Opening, OpeningKind, Point2D, WallSegment
from wallnet.core.openings import OpeningPlacer

from conftest import make_wall


def _with_opening(wall: WallSegment, position: float, width: float, opening_id: str = "o1") -> WallSegment:
    opening = Opening(
        id=opening_id, kind=OpeningKind.DOOR, position=position, width=width, height=2.1,
    )
    return wall.model_copy(update={"openings": [*wall.openings, opening]})


# =============================================================================
# Distances
# =============================================================================


@pytest.mark.parametrize("position", [0.0, 0.1, 0.37, 0.5, 0.99, 1.0])
@pytest.mark.parametrize("width, wall_length", [(0.9, 5.0), (1.2, 3.3), (0.05, 0.1)])
def test_left_distance_round_trip(
    placer: OpeningPlacer, position: float, width: float, wall_length: float,
) -> None:
    dist = placer.distances_for(position, width, wall_length)
    back = placer.position_from_left_distance(dist.distance_from_left, width, wall_length)
    assert back == pytest.approx(position, abs=1e-9)


@pytest.mark.parametrize("position", [0.0, 0.25, 0.8, 1.0])
def test_right_distance_round_trip(placer: OpeningPlacer, position: float) -> None:
    dist = placer.distances_for(position, 0.9, 5.0)
    back = placer.position_from_right_distance(dist.distance_from_right, 0.9, 5.0)
    assert back == pytest.approx(position, abs=1e-9)


def test_distances_add_up_to_wall_length(placer: OpeningPlacer) -> None:
    dist = placer.distances_for(0.3, 0.9, 5.0)
    assert dist.distance_from_left == pytest.approx(1.05)
    assert dist.distance_from_right == pytest.approx(3.05)
    assert dist.distance_from_left + 0.9 + dist.distance_from_right == pytest.approx(5.0)


# =============================================================================
# Placement checks
# =============================================================================


def test_free_wall_accepts_centered_opening(placer: OpeningPlacer) -> None:
    assert placer.can_place(make_wall("w", (0, 0), (5, 0)), 0.5, 0.9)


def test_overlapping_opening_is_rejected(placer: OpeningPlacer) -> None:
    wall = _with_opening(make_wall("w", (0, 0), (5, 0)), 0.30, 0.9)
    assert not placer.can_place(wall, 0.32, 0.9)


def test_overlap_buffer_is_two_centimetres(placer: OpeningPlacer) -> None:
    # Existing span on a 5m wall: 0.21 .. 0.39
    wall = _with_opening(make_wall("w", (0, 0), (5, 0)), 0.30, 0.9)
    assert placer.can_place(wall, 0.49, 0.9)       # 5cm gap
    assert not placer.can_place(wall, 0.482, 0.9)  # 1cm gap


def test_edge_margin_is_rejected(placer: OpeningPlacer) -> None:
    assert not placer.can_place(make_wall("w", (0, 0), (4, 0)), 0.02, 0.9)


def test_absolute_margin_governs_short_walls(placer: OpeningPlacer) -> None:
    wall = make_wall("w", (0, 0), (1, 0))
    assert placer.can_place(wall, 0.5, 0.85)      # 7.5cm each side
    assert not placer.can_place(wall, 0.5, 0.92)  # 4cm each side, still 4% of length


def test_ratio_margin_governs_long_walls(placer: OpeningPlacer) -> None:
    wall = make_wall("w", (0, 0), (10, 0))
    # 15cm from the start is plenty in meters but only 1.5% of the wall.
    assert not placer.can_place(wall, 0.065, 1.0)
    assert placer.can_place(wall, 0.08, 1.0)


def test_opening_wider_than_wall_is_rejected(placer: OpeningPlacer) -> None:
    assert not placer.can_place(make_wall("w", (0, 0), (0.8, 0)), 0.5, 0.9)


def test_moving_an_opening_ignores_itself(placer: OpeningPlacer) -> None:
    wall = _with_opening(make_wall("w", (0, 0), (5, 0)), 0.30, 0.9)
    assert not placer.can_place(wall, 0.31, 0.9)
    assert placer.can_place(wall, 0.31, 0.9, ignore_opening_id="o1")


# =============================================================================
# Locating walls
# =============================================================================


def test_locate_returns_position_along_wall(placer: OpeningPlacer) -> None:
    walls = [make_wall("a", (0, 0), (5, 0)), make_wall("b", (5, 0), (5, 3))]
    hit = placer.locate(Point2D(x=2.5, y=0.3), walls)

    assert hit is not None
    assert hit.wall_id == "a"
    assert hit.position == pytest.approx(0.5)


def test_locate_misses_far_or_beyond_ends(placer: OpeningPlacer) -> None:
    walls = [make_wall("a", (0, 0), (5, 0))]
    assert placer.locate(Point2D(x=2.5, y=0.6), walls) is None
    assert placer.locate(Point2D(x=-0.2, y=0.0), walls) is None


def test_world_position_and_angle(placer: OpeningPlacer) -> None:
    pose = placer.world_position(make_wall("b", (5, 0), (5, 3)), 0.5)
    assert (pose.point.x, pose.point.y) == pytest.approx((5.0, 1.5))
    assert pose.angle == pytest.approx(math.pi / 2)
