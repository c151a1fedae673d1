"""Profile output models handed to the extrusion/mesh collaborator."""

from __future__ import annotations
from pydantic import BaseModel

from .building import OpeningKind
from .corners import WallEndExtensions
from .geometry import Point2D, Polygon2D


class OpeningCutter(BaseModel):
    """Box that the mesh kernel subtracts from the extruded wall."""
    opening_id: str
    kind: OpeningKind
    x: float            # Along the wall from its start (wall-local)
    y_min: float        # Across the wall, slightly outside the right face
    width: float
    depth: float        # Wall thickness plus clearance on both faces
    height: float
    sill_height: float


class WallVertices(BaseModel):
    """The four footprint corners of a wall in plan coordinates."""
    start_left: Point2D
    start_right: Point2D
    end_left: Point2D
    end_right: Point2D


class WallProfile(BaseModel):
    """Everything the extrusion step needs for one wall."""
    wall_id: str
    length: float
    height: float
    polygon: Polygon2D  # Wall-local: x along the wall, y along the left normal
    vertices: WallVertices
    start_extensions: WallEndExtensions
    end_extensions: WallEndExtensions
    cutters: list[OpeningCutter] = []
    mitered: bool = True  # False when extensions were dropped to keep the profile simple


class ProfileStats(BaseModel):
    """Summary statistics for a batch of generated profiles."""
    total_walls: int = 0
    mitered_ends: int = 0
    openings: int = 0
    unmitered_walls: int = 0

    @classmethod
    def from_profiles(cls, profiles: list[WallProfile]) -> ProfileStats:
        mitered_ends = sum(
            (0 if p.start_extensions.is_zero() else 1)
            + (0 if p.end_extensions.is_zero() else 1)
            for p in profiles
        )
        return cls(
            total_walls=len(profiles),
            mitered_ends=mitered_ends,
            openings=sum(len(p.cutters) for p in profiles),
            unmitered_walls=sum(1 for p in profiles if not p.mitered),
        )
