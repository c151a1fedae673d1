"""Derived corner models: recomputed on every query, never stored on walls."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

from .geometry import Point2D


class WallEnd(str, Enum):
    START = "start"
    END = "end"


class TurnDirection(str, Enum):
    """How the path bends when walking from one wall into the next."""
    LEFT = "left"
    RIGHT = "right"
    STRAIGHT = "straight"
    BACK = "back"


class WallEndExtensions(BaseModel):
    """
    Signed edge extensions for one wall end.

    Positive values lengthen the edge past the wall end, negative values
    pull it back. Left/right are seen looking from wall start to wall end.
    """
    left_edge: float = 0.0
    right_edge: float = 0.0

    def is_zero(self) -> bool:
        return self.left_edge == 0.0 and self.right_edge == 0.0

    def merged(self, other: WallEndExtensions) -> WallEndExtensions:
        """Keep, per edge, whichever extension has the larger magnitude."""
        return WallEndExtensions(
            left_edge=(other.left_edge
                       if abs(other.left_edge) > abs(self.left_edge)
                       else self.left_edge),
            right_edge=(other.right_edge
                        if abs(other.right_edge) > abs(self.right_edge)
                        else self.right_edge),
        )


class CornerSolution(BaseModel):
    """Extensions for both walls meeting at one corner."""
    wall_a: WallEndExtensions = Field(default_factory=WallEndExtensions)
    wall_b: WallEndExtensions = Field(default_factory=WallEndExtensions)


class WallConnection(BaseModel):
    """One wall end touching one end of another wall."""
    wall_id: str
    other_wall_id: str
    wall_end: WallEnd
    other_end: WallEnd
    meeting_point: Point2D
    turn: TurnDirection
    angle: float  # Interior corner angle in radians
    solution: CornerSolution


class WallCornerAnalysis(BaseModel):
    """Accumulated extensions for both ends of a single wall."""
    wall_id: str
    start_extensions: WallEndExtensions = Field(default_factory=WallEndExtensions)
    end_extensions: WallEndExtensions = Field(default_factory=WallEndExtensions)
    connections: list[WallConnection] = []
