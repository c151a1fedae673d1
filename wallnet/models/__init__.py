from .geometry import Point2D, Vector2D, Segment2D, Polygon2D, direction_from_points
from .building import (
    AlignmentSide, OpeningKind, Opening, WallSegment, Corner,
    WallPayload, OpeningPayload, WallElement, DoorElement, WindowElement, Element,
    DEFAULT_WALL_THICKNESS, DEFAULT_WALL_HEIGHT,
    DoorType, WindowType, SwingDirection, opening_defaults,
    DEFAULT_DOOR_WIDTH, DEFAULT_DOUBLE_DOOR_WIDTH, DEFAULT_SLIDING_DOOR_WIDTH,
    DEFAULT_DOOR_HEIGHT, DEFAULT_WINDOW_WIDTH, DEFAULT_DOUBLE_WINDOW_WIDTH,
    DEFAULT_FIXED_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_SILL_HEIGHT,
)
from .corners import (
    WallEnd, TurnDirection, WallEndExtensions, CornerSolution,
    WallConnection, WallCornerAnalysis,
)
from .profile import OpeningCutter, WallVertices, WallProfile, ProfileStats
from .parameters import (
    SnapSettings, EngineTolerances,
    CONNECTION_TOLERANCE, SNAP_TOLERANCE, MIN_WALL_LENGTH, OPENING_LOCATE_TOLERANCE,
)
from .network import WallNetwork

__all__ = [
    "Point2D", "Vector2D", "Segment2D", "Polygon2D", "direction_from_points",
    "AlignmentSide", "OpeningKind", "Opening", "WallSegment", "Corner",
    "WallPayload", "OpeningPayload", "WallElement", "DoorElement", "WindowElement", "Element",
    "DEFAULT_WALL_THICKNESS", "DEFAULT_WALL_HEIGHT",
    "DoorType", "WindowType", "SwingDirection", "opening_defaults",
    "DEFAULT_DOOR_WIDTH", "DEFAULT_DOUBLE_DOOR_WIDTH", "DEFAULT_SLIDING_DOOR_WIDTH",
    "DEFAULT_DOOR_HEIGHT", "DEFAULT_WINDOW_WIDTH", "DEFAULT_DOUBLE_WINDOW_WIDTH",
    "DEFAULT_FIXED_WINDOW_WIDTH", "DEFAULT_WINDOW_HEIGHT", "DEFAULT_WINDOW_SILL_HEIGHT",
    "WallEnd", "TurnDirection", "WallEndExtensions", "CornerSolution",
    "WallConnection", "WallCornerAnalysis",
    "OpeningCutter", "WallVertices", "WallProfile", "ProfileStats",
    "SnapSettings", "EngineTolerances",
    "CONNECTION_TOLERANCE", "SNAP_TOLERANCE", "MIN_WALL_LENGTH", "OPENING_LOCATE_TOLERANCE",
    "WallNetwork",
]
