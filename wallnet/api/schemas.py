"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from wallnet.models import (
    Corner, Element, EngineTolerances, Point2D, ProfileStats, SnapSettings,
    WallCornerAnalysis, WallProfile, WallSegment,
)
from wallnet.core.openings import OpeningDistances
from wallnet.core.snap import SnapResult


class NetworkRequest(BaseModel):
    """Walls as sent from the editor, either plain or as tagged elements."""
    walls: list[WallSegment] = []
    elements: list[Element] = []
    tolerances: EngineTolerances = EngineTolerances()


class SnapRequest(NetworkRequest):
    point: Point2D
    reference_point: Point2D | None = None
    settings: SnapSettings = SnapSettings()


class CornersResponse(BaseModel):
    analyses: list[WallCornerAnalysis]
    corners: list[Corner]


class ProfilesResponse(BaseModel):
    profiles: list[WallProfile]
    stats: ProfileStats


class OpeningCheckRequest(NetworkRequest):
    wall_id: str
    position: float
    width: float = Field(gt=0.0)
    ignore_opening_id: str | None = None


class OpeningCheckResponse(BaseModel):
    can_place: bool
    distances: OpeningDistances


class DistancesRequest(BaseModel):
    position: float
    width: float = Field(gt=0.0)
    wall_length: float = Field(gt=0.0)


__all__ = [
    "NetworkRequest", "SnapRequest", "SnapResult", "CornersResponse",
    "ProfilesResponse", "OpeningCheckRequest", "OpeningCheckResponse",
    "DistancesRequest", "OpeningDistances",
]
