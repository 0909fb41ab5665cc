"""Exception hierarchy for grid bookkeeping."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridspawner.core.models import Entity, Vector2


class GridError(Exception):
    """Base class for every error raised by the grid spawner."""


class OutOfRange(GridError, IndexError):
    """A grid coordinate fell outside ``[0, width) x [0, height)``."""

    def __init__(self, cell: Vector2, width: int, height: int) -> None:
        self.cell = cell
        self.width = width
        self.height = height
        super().__init__(f"Cell {cell} is outside the {width}x{height} grid")


class AlreadyOccupied(GridError):
    """Placing into a cell that already holds a different entity."""

    def __init__(self, cell: Vector2, occupant: Entity) -> None:
        self.cell = cell
        self.occupant = occupant
        super().__init__(f"Cell {cell} is already occupied by {occupant!r}")


class NotOnGrid(GridError, LookupError):
    """A move referenced an entity (or a cell) with nothing placed."""


class GridFull(GridError):
    """No empty cell is left to spawn into."""


class UnknownEntity(GridError, KeyError):
    """The registry was asked to destroy an entity it does not hold."""
