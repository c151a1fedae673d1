"""Tests for corner analysis over a wall collection."""

from __future__ import annotations

import math

import pytest

from wallnet.models import TurnDirection, WallEnd, WallSegment
from wallnet.core.corners import CornerAnalyzer
from wallnet.core.miter import MiterSolver, turn_direction

from conftest import make_wall


def test_l_corner_extends_outer_and_retracts_inner(
    analyzer: CornerAnalyzer, l_walls: list[WallSegment],
) -> None:
    a, b = l_walls
    result_a = analyzer.analyze(a, l_walls)
    result_b = analyzer.analyze(b, l_walls)

    assert result_a.start_extensions.is_zero()
    assert result_a.end_extensions.right_edge == pytest.approx(0.1)
    assert result_a.end_extensions.left_edge == pytest.approx(-0.1)

    assert result_b.end_extensions.is_zero()
    assert result_b.start_extensions.right_edge == pytest.approx(0.1)
    assert result_b.start_extensions.left_edge == pytest.approx(-0.1)


def test_analysis_agrees_with_solver_for_both_walls(
    analyzer: CornerAnalyzer, solver: MiterSolver, l_walls: list[WallSegment],
) -> None:
    a, b = l_walls
    turn = turn_direction(a.direction, b.direction, WallEnd.END, WallEnd.START)
    solution = solver.solve(
        b.start, a.direction, b.direction, WallEnd.END, WallEnd.START,
        a.alignment, b.alignment, a.thickness, b.thickness, turn,
    )

    end_a = analyzer.analyze(a, l_walls).end_extensions
    start_b = analyzer.analyze(b, l_walls).start_extensions

    assert end_a == solution.wall_a
    assert start_b.left_edge == pytest.approx(solution.wall_b.left_edge)
    assert start_b.right_edge == pytest.approx(solution.wall_b.right_edge)


def test_solver_is_symmetric_when_walls_swap_roles(
    solver: MiterSolver, l_walls: list[WallSegment],
) -> None:
    a, b = l_walls
    forward = solver.solve(
        b.start, a.direction, b.direction, WallEnd.END, WallEnd.START,
        a.alignment, b.alignment, a.thickness, b.thickness,
        turn_direction(a.direction, b.direction, WallEnd.END, WallEnd.START),
    )
    backward = solver.solve(
        a.end, b.direction, a.direction, WallEnd.START, WallEnd.END,
        b.alignment, a.alignment, b.thickness, a.thickness,
        turn_direction(b.direction, a.direction, WallEnd.START, WallEnd.END),
    )
    assert backward.wall_a.left_edge == pytest.approx(forward.wall_b.left_edge)
    assert backward.wall_a.right_edge == pytest.approx(forward.wall_b.right_edge)
    assert backward.wall_b.left_edge == pytest.approx(forward.wall_a.left_edge)
    assert backward.wall_b.right_edge == pytest.approx(forward.wall_a.right_edge)


def test_closed_room_mitres_every_end(
    analyzer: CornerAnalyzer, rectangle_walls: list[WallSegment],
) -> None:
    for wall in rectangle_walls:
        result = analyzer.analyze(wall, rectangle_walls)
        for ext in (result.start_extensions, result.end_extensions):
            # The room interior is on the left of every counterclockwise wall.
            assert ext.left_edge == pytest.approx(-0.1)
            assert ext.right_edge == pytest.approx(0.1)


def test_connection_tolerance(analyzer: CornerAnalyzer) -> None:
    a = make_wall("a", (0, 0), (5, 0))
    near = make_wall("near", (5.03, 0), (5.03, 3))
    far = make_wall("far", (5.06, 0), (5.06, 3))

    assert len(analyzer.connections(a, [a, near])) == 1
    assert analyzer.connections(a, [a, far]) == []
    assert analyzer.analyze(a, [a, far]).end_extensions.is_zero()


def test_connection_details(analyzer: CornerAnalyzer, l_walls: list[WallSegment]) -> None:
    a, _ = l_walls
    [conn] = analyzer.connections(a, l_walls)

    assert conn.other_wall_id == "b"
    assert conn.wall_end == WallEnd.END
    assert conn.other_end == WallEnd.START
    assert conn.turn == TurnDirection.LEFT
    assert conn.angle == pytest.approx(math.pi / 2)


def test_straight_continuation_has_no_miter(analyzer: CornerAnalyzer) -> None:
    walls = [make_wall("a", (0, 0), (5, 0)), make_wall("b", (5, 0), (10, 0))]
    result = analyzer.analyze(walls[0], walls)

    assert result.connections[0].turn == TurnDirection.STRAIGHT
    assert result.connections[0].angle == pytest.approx(math.pi)
    assert result.end_extensions.is_zero()


def test_junction_keeps_larger_magnitude_per_edge(analyzer: CornerAnalyzer) -> None:
    a = make_wall("a", (0, 0), (5, 0))
    north = make_wall("north", (5, 0), (5, 3))
    south = make_wall("south", (5, 0), (5, -3), thickness=0.4)
    result = analyzer.analyze(a, [a, north, south])

    # North alone gives (-0.1, +0.1), south alone (+0.2, -0.2); no summing.
    assert result.end_extensions.left_edge == pytest.approx(0.2)
    assert result.end_extensions.right_edge == pytest.approx(-0.2)
    assert len(result.connections) == 2


def test_zero_length_neighbour_does_not_break_analysis(analyzer: CornerAnalyzer) -> None:
    a = make_wall("a", (0, 0), (5, 0))
    dot = make_wall("dot", (5, 0), (5, 0))
    result = analyzer.analyze(a, [a, dot])

    # The degenerate wall falls back to +X, i.e. a straight run.
    assert result.end_extensions.is_zero()


def test_find_corners_in_closed_room(
    analyzer: CornerAnalyzer, rectangle_walls: list[WallSegment],
) -> None:
    corners = analyzer.find_corners(rectangle_walls)

    assert len(corners) == 4
    for corner in corners:
        assert len(corner.wall_ids) == 2
        assert corner.angle == pytest.approx(math.pi / 2)
    points = sorted((round(c.point.x, 6), round(c.point.y, 6)) for c in corners)
    assert points == [(0, 0), (0, 3), (4, 0), (4, 3)]


def test_find_corners_skips_free_ends(
    analyzer: CornerAnalyzer, l_walls: list[WallSegment],
) -> None:
    [corner] = analyzer.find_corners(l_walls)
    assert sorted(corner.wall_ids) == ["a", "b"]
    assert (corner.point.x, corner.point.y) == pytest.approx((5, 0))
