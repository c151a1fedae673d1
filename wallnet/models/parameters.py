"""Engine tolerances and snap settings."""

from __future__ import annotations
from pydantic import BaseModel, Field


CONNECTION_TOLERANCE = 0.05   # Wall ends closer than 5cm are joined
SNAP_TOLERANCE = 0.3          # Pointer snap radius in meters
MIN_WALL_LENGTH = 0.1         # Shorter walls are rejected
OPENING_LOCATE_TOLERANCE = 0.5


class SnapSettings(BaseModel):
    """Per-category snap switches, passed explicitly on every query."""
    enabled: bool = True
    endpoint: bool = True
    midpoint: bool = True
    perpendicular: bool = True
    nearest: bool = True
    grid: bool = True
    orthogonal: bool = False


class EngineTolerances(BaseModel):
    """Caller-adjustable tolerances (meters)."""
    connection: float = Field(default=CONNECTION_TOLERANCE, gt=0.0)
    snap: float = Field(default=SNAP_TOLERANCE, gt=0.0)
    grid_size: float = Field(default=0.5, gt=0.0)
    opening_locate: float = Field(default=OPENING_LOCATE_TOLERANCE, gt=0.0)
