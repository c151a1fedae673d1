"""FastAPI route definitions.

The server keeps no network state: every request carries its walls.
"""

from __future__ import annotations

from fastapi import APIRouter

from wallnet.models import ProfileStats
from wallnet.core.openings import OpeningPlacer
from wallnet.services.network_service import NetworkService
from wallnet.api.schemas import (
    CornersResponse, DistancesRequest, NetworkRequest, OpeningCheckRequest,
    OpeningCheckResponse, OpeningDistances, ProfilesResponse, SnapRequest,
    SnapResult,
)

router = APIRouter()


def _load(request: NetworkRequest) -> NetworkService:
    service = NetworkService.from_elements(request.elements, request.tolerances)
    for wall in request.walls:
        service.load_wall(wall)
    return service


@router.post("/snap", response_model=SnapResult)
async def snap_point(request: SnapRequest) -> SnapResult:
    """Resolve one pointer sample against the given walls."""
    service = _load(request)
    return service.snap(request.point, request.settings, request.reference_point)


@router.post("/corners", response_model=CornersResponse)
async def analyze_corners(request: NetworkRequest) -> CornersResponse:
    """Miter extensions for every wall, plus the detected junctions."""
    service = _load(request)
    walls = service.network.walls
    tolerance = service.tolerances.connection
    return CornersResponse(
        analyses=[service.analyzer.analyze(w, walls, tolerance) for w in walls],
        corners=service.analyzer.find_corners(walls, tolerance),
    )


@router.post("/profiles", response_model=ProfilesResponse)
async def generate_profiles(request: NetworkRequest) -> ProfilesResponse:
    """Mitered wall profiles and opening cutters for the mesh kernel."""
    profiles = _load(request).profiles()
    return ProfilesResponse(profiles=profiles, stats=ProfileStats.from_profiles(profiles))


@router.post("/openings/validate", response_model=OpeningCheckResponse)
async def validate_opening(request: OpeningCheckRequest) -> OpeningCheckResponse:
    service = _load(request)
    wall = service.network.require_wall(request.wall_id)
    return OpeningCheckResponse(
        can_place=service.placer.can_place(
            wall, request.position, request.width, request.ignore_opening_id,
        ),
        distances=service.placer.distances_for(request.position, request.width, wall.length),
    )


@router.post("/openings/distances", response_model=OpeningDistances)
async def opening_distances(request: DistancesRequest) -> OpeningDistances:
    return OpeningPlacer().distances_for(request.position, request.width, request.wall_length)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
