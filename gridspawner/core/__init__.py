"""Core data models and grid bookkeeping."""

from gridspawner.core.enums import Domain, EventCategory, PlacementMode
from gridspawner.core.errors import (
    AlreadyOccupied,
    GridError,
    GridFull,
    NotOnGrid,
    OutOfRange,
    UnknownEntity,
)
from gridspawner.core.models import Entity, Vector2, WorldPoint
from gridspawner.core.grid import GridContainer
from gridspawner.core.overlay import CellOverlay, debug_overlay
from gridspawner.core.registry import EntityDestroyer, EntityRegistry

__all__ = [
    "AlreadyOccupied",
    "CellOverlay",
    "Domain",
    "Entity",
    "EntityDestroyer",
    "EntityRegistry",
    "EventCategory",
    "GridContainer",
    "GridError",
    "GridFull",
    "NotOnGrid",
    "OutOfRange",
    "PlacementMode",
    "UnknownEntity",
    "Vector2",
    "WorldPoint",
    "debug_overlay",
]
