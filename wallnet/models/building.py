"""Building element models: walls, openings and the element union."""

from __future__ import annotations
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .geometry import Point2D, Segment2D, Vector2D, direction_from_points


DEFAULT_WALL_THICKNESS = 0.2  # meters
DEFAULT_WALL_HEIGHT = 3.0     # meters

DEFAULT_DOOR_WIDTH = 0.9
DEFAULT_DOUBLE_DOOR_WIDTH = 1.8
DEFAULT_SLIDING_DOOR_WIDTH = 1.2
DEFAULT_DOOR_HEIGHT = 2.1

DEFAULT_WINDOW_WIDTH = 1.2
DEFAULT_DOUBLE_WINDOW_WIDTH = 2.0
DEFAULT_FIXED_WINDOW_WIDTH = 1.5
DEFAULT_WINDOW_HEIGHT = 1.2
DEFAULT_WINDOW_SILL_HEIGHT = 0.9


class AlignmentSide(str, Enum):
    """Which physical edge the stored start/end points represent."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class OpeningKind(str, Enum):
    DOOR = "door"
    WINDOW = "window"


class DoorType(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    SLIDING = "sliding"


class WindowType(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    FIXED = "fixed"


class SwingDirection(str, Enum):
    """Hinge side, looking from wall start to wall end."""
    LEFT = "left"
    RIGHT = "right"


DOOR_WIDTHS = {
    DoorType.SINGLE: DEFAULT_DOOR_WIDTH,
    DoorType.DOUBLE: DEFAULT_DOUBLE_DOOR_WIDTH,
    DoorType.SLIDING: DEFAULT_SLIDING_DOOR_WIDTH,
}

WINDOW_WIDTHS = {
    WindowType.SINGLE: DEFAULT_WINDOW_WIDTH,
    WindowType.DOUBLE: DEFAULT_DOUBLE_WINDOW_WIDTH,
    WindowType.FIXED: DEFAULT_FIXED_WINDOW_WIDTH,
}


def opening_defaults(
    kind: OpeningKind,
    door_type: DoorType = DoorType.SINGLE,
    window_type: WindowType = WindowType.SINGLE,
) -> tuple[float, float, float]:
    """Default (width, height, sill height) for a new door or window."""
    if kind == OpeningKind.DOOR:
        return DOOR_WIDTHS[door_type], DEFAULT_DOOR_HEIGHT, 0.0
    return WINDOW_WIDTHS[window_type], DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_SILL_HEIGHT


class Opening(BaseModel):
    """An opening (door/window) positioned along its host wall."""
    id: str
    kind: OpeningKind
    position: float                           # Normalized center, 0 = wall start
    width: float = Field(gt=0.0)              # Meters
    height: float = Field(gt=0.0)             # Meters
    sill_height: float = Field(default=0.0, ge=0.0)  # Floor to bottom of opening
    door_type: DoorType | None = None
    window_type: WindowType | None = None
    swing_direction: SwingDirection | None = None


class WallSegment(BaseModel):
    """A wall segment defined by two plan endpoints."""
    id: str
    start: Point2D
    end: Point2D
    thickness: float = Field(default=DEFAULT_WALL_THICKNESS, gt=0.0)
    height: float = Field(default=DEFAULT_WALL_HEIGHT, gt=0.0)
    alignment: AlignmentSide = AlignmentSide.CENTER
    openings: list[Opening] = []

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def direction(self) -> Vector2D:
        return direction_from_points(self.start, self.end)

    @property
    def segment(self) -> Segment2D:
        return Segment2D(start=self.start, end=self.end)

    def get_opening(self, opening_id: str) -> Opening | None:
        for o in self.openings:
            if o.id == opening_id:
                return o
        return None


class WallPayload(BaseModel):
    start: Point2D
    end: Point2D
    thickness: float = Field(default=DEFAULT_WALL_THICKNESS, gt=0.0)
    height: float = Field(default=DEFAULT_WALL_HEIGHT, gt=0.0)
    alignment: AlignmentSide = AlignmentSide.CENTER


class OpeningPayload(BaseModel):
    """Door or window fields; unset sizes fall back to the type defaults."""
    host_wall_id: str
    position: float
    width: float | None = Field(default=None, gt=0.0)
    height: float | None = Field(default=None, gt=0.0)
    sill_height: float | None = Field(default=None, ge=0.0)
    door_type: DoorType = DoorType.SINGLE
    window_type: WindowType = WindowType.SINGLE
    swing_direction: SwingDirection = SwingDirection.LEFT


class WallElement(BaseModel):
    kind: Literal["wall"] = "wall"
    id: str
    name: str = ""
    wall: WallPayload


class DoorElement(BaseModel):
    kind: Literal["door"] = "door"
    id: str
    name: str = ""
    door: OpeningPayload


class WindowElement(BaseModel):
    kind: Literal["window"] = "window"
    id: str
    name: str = ""
    window: OpeningPayload


# Each variant carries only its own payload; the `kind` tag selects it.
Element = Annotated[
    Union[WallElement, DoorElement, WindowElement],
    Field(discriminator="kind"),
]


class Corner(BaseModel):
    """A detected junction where two or more wall endpoints meet."""
    point: Point2D
    wall_ids: list[str]
    angle: float  # Interior angle between the first two walls, radians
