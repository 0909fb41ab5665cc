"""Grid container — which entity occupies which cell.

Cells live in a flat list addressed by ``y * width + x``. The container never
owns an entity: it positions occupants, and when one has to go it asks the
injected destroyer to release it.

Two placement modes are supported:

- ``STRICT`` refuses to overwrite an occupied cell and moves a handle from the
  cell it was last placed in.
- ``LEGACY`` keeps the historical behaviour: ``set_at``
  overwrites silently (the previous occupant is neither destroyed nor tracked
  any more) and ``move_by_handle`` finds the source cell by converting the
  handle's live world position back to grid space, destroying whatever other
  entity sits there.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Iterator

from gridspawner.core.enums import EventCategory, PlacementMode
from gridspawner.core.errors import AlreadyOccupied, NotOnGrid, OutOfRange
from gridspawner.core.models import Entity, Vector2, WorldPoint

if TYPE_CHECKING:
    from gridspawner.config import GridConfig
    from gridspawner.core.registry import EntityDestroyer
    from gridspawner.systems.factory import EntityFactory
    from gridspawner.utils.event_log import EventLog

logger = logging.getLogger(__name__)

# Minimum tolerance added before flooring, in cell units.
_SNAP = 1e-9


class GridContainer:
    """Fixed-size occupancy grid with grid <-> world coordinate conversion."""

    __slots__ = (
        "width", "height", "origin", "cell_size", "cell_spacing", "mode",
        "_destroyer", "_event_log", "_slots", "_cells_by_handle",
    )

    def __init__(
        self,
        width: int,
        height: int,
        destroyer: EntityDestroyer,
        origin: WorldPoint = WorldPoint(),
        cell_size: float = 1.0,
        cell_spacing: float = 0.0,
        mode: PlacementMode = PlacementMode.STRICT,
        event_log: EventLog | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        if cell_spacing < 0:
            raise ValueError(f"cell_spacing must be non-negative, got {cell_spacing}")

        self.width = width
        self.height = height
        self.origin = origin
        self.cell_size = float(cell_size)
        self.cell_spacing = float(cell_spacing)
        self.mode = PlacementMode(mode)
        self._destroyer = destroyer
        self._event_log = event_log
        self._slots: list[Entity | None] = [None] * (width * height)
        self._cells_by_handle: dict[Entity, Vector2] = {}

    @classmethod
    def from_config(
        cls,
        config: GridConfig,
        destroyer: EntityDestroyer,
        event_log: EventLog | None = None,
    ) -> GridContainer:
        return cls(
            width=config.width,
            height=config.height,
            destroyer=destroyer,
            origin=WorldPoint(config.origin_x, config.origin_y),
            cell_size=config.cell_size,
            cell_spacing=config.cell_spacing,
            mode=config.mode,
            event_log=event_log,
        )

    def __repr__(self) -> str:
        return (
            f"GridContainer({self.width}x{self.height}, mode={self.mode.value}, "
            f"occupied={self.occupied_count})"
        )

    # -- coordinates --

    @property
    def step(self) -> float:
        """Distance between the origins of two adjacent cells."""
        return self.cell_size + self.cell_spacing

    def grid_to_world(self, cell: Vector2) -> WorldPoint:
        """World position of *cell*. No bounds check, any integer cell works."""
        step = self.step
        return self.origin + WorldPoint(cell.x * step, cell.y * step)

    def world_to_grid(self, point: WorldPoint) -> Vector2:
        """Cell containing *point*, flooring each axis independently."""
        offset = point - self.origin
        return Vector2(
            self._floor_cells(offset.x, self.origin.x, point.x),
            self._floor_cells(offset.y, self.origin.y, point.y),
        )

    def _floor_cells(self, offset: float, origin: float, coord: float) -> int:
        step = self.step
        # Scales with the rounding error of origin + x*step.
        snap = max(_SNAP, 4 * math.ulp(abs(origin) + abs(coord)) / step)
        return math.floor(offset / step + snap)

    # -- access --

    def _idx(self, cell: Vector2) -> int:
        return cell.y * self.width + cell.x

    def _checked_idx(self, cell: Vector2) -> int:
        if not self.in_bounds(cell):
            raise OutOfRange(cell, self.width, self.height)
        return cell.y * self.width + cell.x

    def in_bounds(self, cell: Vector2) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def get_at(self, cell: Vector2) -> Entity | None:
        return self._slots[self._checked_idx(cell)]

    def is_occupied(self, cell: Vector2) -> bool:
        return self._slots[self._checked_idx(cell)] is not None

    def has_empty_cell(self) -> bool:
        return any(slot is None for slot in self._slots)

    def empty_cells(self) -> list[Vector2]:
        """All free cells in row-major order."""
        w = self.width
        return [Vector2(i % w, i // w) for i, slot in enumerate(self._slots) if slot is None]

    def occupied(self) -> Iterator[tuple[Vector2, Entity]]:
        """Yield ``(cell, occupant)`` pairs in row-major order."""
        w = self.width
        for i, slot in enumerate(self._slots):
            if slot is not None:
                yield Vector2(i % w, i // w), slot

    @property
    def occupied_count(self) -> int:
        return sum(1 for slot in self._slots if slot is not None)

    def cell_of(self, handle: Entity) -> Vector2 | None:
        """Cell *handle* was last placed in, or None if it is not on the grid."""
        return self._cells_by_handle.get(handle)

    # -- mutation --

    def set_at(self, handle: Entity, cell: Vector2) -> None:
        """Store *handle* in *cell* and move it to the cell's world position."""
        self._set_at(handle, cell, EventCategory.PLACE)

    def replace_at(self, handle: Entity, cell: Vector2) -> Entity | None:
        """Put *handle* in *cell* regardless of mode.

        Returns the previous occupant, which is not destroyed: disposing of
        it is up to the caller.
        """
        idx = self._checked_idx(cell)
        previous = self._slots[idx]
        if previous is handle:
            previous = None
        elif previous is not None:
            self._forget(previous, cell)
        self._place(idx, cell, handle)
        self._record(EventCategory.REPLACE, f"{handle!r} replaced {previous!r}", cell, handle, previous)
        return previous

    def remove_at(self, cell: Vector2) -> None:
        """Destroy the occupant of *cell* (if any) and clear the slot."""
        idx = self._checked_idx(cell)
        occupant = self._slots[idx]
        if occupant is None:
            return
        self._destroyer.destroy(occupant)
        self._slots[idx] = None
        self._forget(occupant, cell)
        self._record(EventCategory.REMOVE, f"Removed {occupant!r}", cell, occupant)

    def move_by_handle(self, handle: Entity, to_cell: Vector2) -> None:
        to_idx = self._checked_idx(to_cell)
        if self.mode is PlacementMode.STRICT:
            from_cell = self._cells_by_handle.get(handle)
            if from_cell is None:
                raise NotOnGrid(f"{handle!r} is not placed on this grid")
            current = self._slots[to_idx]
            if current is not None and current is not handle:
                raise AlreadyOccupied(to_cell, current)
            self._slots[self._idx(from_cell)] = None
        else:
            from_cell = self.world_to_grid(handle.position)
            self._clear_legacy_source(handle, from_cell)
            current = self._slots[to_idx]
            if current is not None and current is not handle:
                self._forget(current, to_cell)
        self._place(to_idx, to_cell, handle)
        self._record(EventCategory.MOVE, f"Moved {handle!r} from {from_cell}", to_cell, handle)

    def move_by_position(self, from_cell: Vector2, to_cell: Vector2) -> None:
        """Move whatever occupies *from_cell* to *to_cell*."""
        occupant = self.get_at(from_cell)
        self._checked_idx(to_cell)
        if occupant is None:
            raise NotOnGrid(f"No entity at {from_cell} to move")
        self.move_by_handle(occupant, to_cell)

    def spawn_at(self, factory: EntityFactory, cell: Vector2) -> Entity:
        """Create a new entity with *factory* and place it in *cell*."""
        idx = self._checked_idx(cell)
        if self.mode is PlacementMode.STRICT and self._slots[idx] is not None:
            raise AlreadyOccupied(cell, self._slots[idx])
        entity = factory.create()
        self._set_at(entity, cell, EventCategory.SPAWN)
        return entity

    def clear(self) -> None:
        """Destroy every occupant and empty the grid."""
        for cell, _ in list(self.occupied()):
            self.remove_at(cell)

    # -- internals --

    def _set_at(self, handle: Entity, cell: Vector2, category: EventCategory) -> None:
        idx = self._checked_idx(cell)
        current = self._slots[idx]
        if current is not None and current is not handle:
            if self.mode is PlacementMode.STRICT:
                raise AlreadyOccupied(cell, current)
            logger.debug("Overwriting %r at %s without destroying it", current, cell)
            self._forget(current, cell)
        self._place(idx, cell, handle)
        self._record(category, f"Placed {handle!r}", cell, handle)

    def _place(self, idx: int, cell: Vector2, handle: Entity) -> None:
        previous_cell = self._cells_by_handle.get(handle)
        if (
            self.mode is PlacementMode.STRICT
            and previous_cell is not None
            and previous_cell != cell
        ):
            # A handle occupies at most one cell.
            self._slots[self._idx(previous_cell)] = None
        self._slots[idx] = handle
        self._cells_by_handle[handle] = cell
        handle.position = self.grid_to_world(cell)

    def _forget(self, handle: Entity, cell: Vector2) -> None:
        if self._cells_by_handle.get(handle) == cell:
            del self._cells_by_handle[handle]

    def _clear_legacy_source(self, handle: Entity, from_cell: Vector2) -> None:
        if not self.in_bounds(from_cell):
            logger.debug("%r resolves to %s, off the grid; nothing to clear", handle, from_cell)
            return
        from_idx = self._idx(from_cell)
        occupant = self._slots[from_idx]
        if occupant is None:
            return
        if occupant is not handle:
            logger.debug("Moving %r clears unrelated %r at %s", handle, occupant, from_cell)
            self._destroyer.destroy(occupant)
        self._slots[from_idx] = None
        self._forget(occupant, from_cell)

    def _record(self, category: EventCategory, message: str, cell: Vector2, *entities: Entity | None) -> None:
        logger.debug("%s %s: %s", category.value, cell, message)
        if self._event_log is not None:
            ids = tuple(e.id for e in entities if e is not None)
            self._event_log.record(category, message, (cell.x, cell.y), ids)
