"""High-level network service: the editing facade used by callers and the API.

Every operation validates its input before touching the network, so a
rejected edit leaves the network exactly as it was.
"""

from __future__ import annotations
import logging
import uuid

from wallnet.errors import InvalidGeometry
from wallnet.models import (
    AlignmentSide, DEFAULT_WALL_HEIGHT, DEFAULT_WALL_THICKNESS, DoorElement,
    DoorType, Element, EngineTolerances, MIN_WALL_LENGTH, Opening, OpeningKind,
    Point2D, SnapSettings, SwingDirection, WallElement, WallEnd, WallNetwork,
    WallProfile, WallSegment, WindowElement, WindowType, opening_defaults,
)
from wallnet.core.corners import CornerAnalyzer
from wallnet.core.generator import ProfileGenerator
from wallnet.core.openings import OpeningPlacer
from wallnet.core.snap import SnapEngine, SnapResult


logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


def validate_wall(wall: WallSegment) -> None:
    """Raise InvalidGeometry for walls the engine cannot miter or extrude."""
    if wall.length < MIN_WALL_LENGTH:
        raise InvalidGeometry(
            f"Wall is too short (minimum {MIN_WALL_LENGTH}m)",
            {"wall_id": wall.id, "length": f"{wall.length:.4f}"},
        )
    if wall.thickness <= 0:
        raise InvalidGeometry("Wall thickness must be positive", {"wall_id": wall.id})


class NetworkService:
    """Validates edits, applies them to a WallNetwork and re-derives geometry."""

    def __init__(
        self,
        network: WallNetwork | None = None,
        tolerances: EngineTolerances | None = None,
    ) -> None:
        self.network = network if network is not None else WallNetwork()
        self.tolerances = tolerances or EngineTolerances()
        self.analyzer = CornerAnalyzer()
        self.generator = ProfileGenerator(self.analyzer, self.tolerances.connection)
        self.placer = OpeningPlacer()
        self.snapper = SnapEngine()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_elements(
        cls,
        elements: list[Element],
        tolerances: EngineTolerances | None = None,
    ) -> NetworkService:
        """Build a network from tagged elements, attaching openings to hosts."""
        service = cls(tolerances=tolerances)
        hosted: list[DoorElement | WindowElement] = []
        for el in elements:
            if isinstance(el, WallElement):
                service._insert_wall(WallSegment(
                    id=el.id,
                    start=el.wall.start,
                    end=el.wall.end,
                    thickness=el.wall.thickness,
                    height=el.wall.height,
                    alignment=el.wall.alignment,
                ))
            else:
                hosted.append(el)

        for el in hosted:
            if isinstance(el, DoorElement):
                kind, payload = OpeningKind.DOOR, el.door
            else:
                kind, payload = OpeningKind.WINDOW, el.window
            if service.network.get_wall(payload.host_wall_id) is None:
                raise InvalidGeometry(
                    f"{kind.value.capitalize()} '{el.id}' references unknown wall "
                    f"'{payload.host_wall_id}'",
                    {"element_id": el.id, "host_wall_id": payload.host_wall_id},
                )
            service.add_opening(
                payload.host_wall_id, kind, payload.position, payload.width,
                payload.height, payload.sill_height, opening_id=el.id,
                door_type=payload.door_type,
                window_type=payload.window_type,
                swing_direction=payload.swing_direction,
            )
        return service

    def load_wall(self, wall: WallSegment) -> WallSegment:
        """Insert a fully specified wall once it and all of its openings validate."""
        staged = wall.model_copy(update={"openings": []})
        self._check_new_wall(staged)
        for o in wall.openings:
            self._check_opening(staged, o.position, o.width, o.height, o.sill_height)
            staged = staged.model_copy(update={"openings": [*staged.openings, o]})
        self.network.add_wall(staged)
        logger.info("Loaded wall %s (%.3fm, %d openings)",
                    staged.id, staged.length, len(staged.openings))
        return staged

    # ------------------------------------------------------------------
    # Walls
    # ------------------------------------------------------------------

    def place_wall(
        self,
        start: Point2D,
        end: Point2D,
        thickness: float = DEFAULT_WALL_THICKNESS,
        height: float = DEFAULT_WALL_HEIGHT,
        alignment: AlignmentSide = AlignmentSide.CENTER,
        wall_id: str | None = None,
    ) -> WallSegment:
        if thickness <= 0 or height <= 0:
            raise InvalidGeometry(
                "Wall thickness and height must be positive",
                {"thickness": str(thickness), "height": str(height)},
            )
        wall = WallSegment(
            id=wall_id or _new_id(),
            start=start,
            end=end,
            thickness=thickness,
            height=height,
            alignment=alignment,
        )
        self._insert_wall(wall)
        return wall

    def move_endpoint(self, wall_id: str, which: WallEnd, point: Point2D) -> WallSegment:
        """Move one end of a wall; openings are re-fitted to the new length."""
        wall = self.network.require_wall(wall_id)
        if which == WallEnd.START:
            moved = wall.model_copy(update={"start": point})
        else:
            moved = wall.model_copy(update={"end": point})
        validate_wall(moved)
        moved = moved.model_copy(update={
            "openings": self._refit_openings(moved, wall.length),
        })
        self.network.replace_wall(moved)
        logger.info("Moved %s of wall %s to (%.3f, %.3f)",
                    which.value, wall_id, point.x, point.y)
        return moved

    def update_wall(
        self,
        wall_id: str,
        thickness: float | None = None,
        height: float | None = None,
        alignment: AlignmentSide | None = None,
    ) -> WallSegment:
        wall = self.network.require_wall(wall_id)
        updates: dict[str, object] = {}
        if thickness is not None:
            if thickness <= 0:
                raise InvalidGeometry("Wall thickness must be positive",
                                      {"wall_id": wall_id, "thickness": str(thickness)})
            updates["thickness"] = thickness
        if height is not None:
            if height <= 0:
                raise InvalidGeometry("Wall height must be positive",
                                      {"wall_id": wall_id, "height": str(height)})
            updates["height"] = height
        if alignment is not None:
            updates["alignment"] = alignment
        updated = wall.model_copy(update=updates)
        self.network.replace_wall(updated)
        logger.info("Updated wall %s: %s", wall_id, sorted(updates))
        return updated

    def remove_wall(self, wall_id: str) -> WallSegment:
        """Remove a wall together with all of its openings."""
        wall = self.network.remove_wall(wall_id)
        logger.info("Removed wall %s (%d openings)", wall_id, len(wall.openings))
        return wall

    def affected_walls(self, wall_id: str) -> list[str]:
        """The wall itself plus every wall connected to either of its ends."""
        wall = self.network.require_wall(wall_id)
        connected = [
            c.other_wall_id
            for c in self.analyzer.connections(
                wall, self.network.walls, self.tolerances.connection,
            )
        ]
        return list(dict.fromkeys([wall_id, *connected]))

    # ------------------------------------------------------------------
    # Openings
    # ------------------------------------------------------------------

    def add_opening(
        self,
        wall_id: str,
        kind: OpeningKind,
        position: float,
        width: float | None = None,
        height: float | None = None,
        sill_height: float | None = None,
        opening_id: str | None = None,
        door_type: DoorType = DoorType.SINGLE,
        window_type: WindowType = WindowType.SINGLE,
        swing_direction: SwingDirection = SwingDirection.LEFT,
    ) -> Opening:
        """Add a door or window; sizes left unset come from its type defaults."""
        wall = self.network.require_wall(wall_id)
        default_width, default_height, default_sill = opening_defaults(
            kind, door_type, window_type,
        )
        width = default_width if width is None else width
        height = default_height if height is None else height
        sill_height = default_sill if sill_height is None else sill_height
        self._check_opening(wall, position, width, height, sill_height)

        is_door = kind == OpeningKind.DOOR
        opening = Opening(
            id=opening_id or _new_id(),
            kind=kind,
            position=position,
            width=width,
            height=height,
            sill_height=sill_height,
            door_type=door_type if is_door else None,
            window_type=None if is_door else window_type,
            swing_direction=swing_direction if is_door else None,
        )
        self.network.replace_wall(
            wall.model_copy(update={"openings": [*wall.openings, opening]}),
        )
        logger.info("Added %s %s to wall %s at %.3f",
                    kind.value, opening.id, wall_id, position)
        return opening

    def move_opening(self, opening_id: str, position: float) -> Opening:
        wall, opening = self.network.find_opening(opening_id)
        self._check_opening(wall, position, opening.width, opening.height,
                            opening.sill_height, ignore_opening_id=opening_id)
        moved = opening.model_copy(update={"position": position})
        self._replace_opening(wall, moved)
        return moved

    def move_opening_by_left_distance(self, opening_id: str, distance: float) -> Opening:
        wall, opening = self.network.find_opening(opening_id)
        position = self.placer.position_from_left_distance(distance, opening.width, wall.length)
        return self.move_opening(opening_id, position)

    def move_opening_by_right_distance(self, opening_id: str, distance: float) -> Opening:
        wall, opening = self.network.find_opening(opening_id)
        position = self.placer.position_from_right_distance(distance, opening.width, wall.length)
        return self.move_opening(opening_id, position)

    def remove_opening(self, opening_id: str) -> Opening:
        wall, opening = self.network.find_opening(opening_id)
        self.network.replace_wall(wall.model_copy(update={
            "openings": [o for o in wall.openings if o.id != opening_id],
        }))
        return opening

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def snap(
        self,
        point: Point2D,
        settings: SnapSettings | None = None,
        reference_point: Point2D | None = None,
    ) -> SnapResult:
        return self.snapper.snap(
            point,
            self.network.snap_endpoints(),
            self.network.snap_segments(),
            self.tolerances.snap,
            self.tolerances.grid_size,
            settings,
            reference_point,
        )

    def profiles(self) -> list[WallProfile]:
        return self.generator.generate(self.network)

    def profile(self, wall_id: str) -> WallProfile:
        wall = self.network.require_wall(wall_id)
        return self.generator.profile(wall, self.network.walls)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_new_wall(self, wall: WallSegment) -> None:
        validate_wall(wall)
        if self.network.get_wall(wall.id) is not None:
            raise InvalidGeometry(f"Wall '{wall.id}' already exists", {"wall_id": wall.id})

    def _insert_wall(self, wall: WallSegment) -> None:
        self._check_new_wall(wall)
        self.network.add_wall(wall)
        logger.info("Placed wall %s (%.3fm)", wall.id, wall.length)

    def _check_opening(
        self,
        wall: WallSegment,
        position: float,
        width: float,
        height: float,
        sill_height: float,
        ignore_opening_id: str | None = None,
    ) -> None:
        if not 0.0 <= position <= 1.0:
            raise InvalidGeometry(
                "Opening position must lie within [0, 1]",
                {"wall_id": wall.id, "position": str(position)},
            )
        if width <= 0 or height <= 0 or sill_height < 0:
            raise InvalidGeometry(
                "Opening needs positive width and height and a non-negative sill",
                {"wall_id": wall.id},
            )
        if not self.placer.can_place(wall, position, width, ignore_opening_id):
            raise InvalidGeometry(
                "Opening does not fit: too close to a wall end or overlapping",
                {"wall_id": wall.id, "position": f"{position:.4f}"},
            )

    def _replace_opening(self, wall: WallSegment, opening: Opening) -> None:
        self.network.replace_wall(wall.model_copy(update={
            "openings": [opening if o.id == opening.id else o for o in wall.openings],
        }))

    def _refit_openings(self, wall: WallSegment, old_length: float) -> list[Opening]:
        """
        Keep each opening's distance from the wall start after a resize.

        Openings that no longer fit are re-centered; if even the center is
        taken or too small, the opening is dropped.
        """
        kept: list[Opening] = []
        for opening in wall.openings:
            left = self.placer.distances_for(
                opening.position, opening.width, old_length,
            ).distance_from_left
            position = self.placer.position_from_left_distance(
                left, opening.width, wall.length,
            )
            probe = wall.model_copy(update={"openings": kept})
            if 0.0 <= position <= 1.0 and self.placer.can_place(probe, position, opening.width):
                kept.append(opening.model_copy(update={"position": position}))
            elif self.placer.can_place(probe, 0.5, opening.width):
                logger.warning("Re-centered opening %s on resized wall %s",
                               opening.id, wall.id)
                kept.append(opening.model_copy(update={"position": 0.5}))
            else:
                logger.warning("Removed opening %s: no room left on wall %s",
                               opening.id, wall.id)
        return kept
