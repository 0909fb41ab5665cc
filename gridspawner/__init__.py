"""Grid placement bookkeeping for tile-based games."""

from gridspawner.config import GridConfig
from gridspawner.core import (
    AlreadyOccupied,
    Entity,
    EntityRegistry,
    GridContainer,
    GridError,
    GridFull,
    NotOnGrid,
    OutOfRange,
    PlacementMode,
    Vector2,
    WorldPoint,
)
from gridspawner.systems import DeterministicRNG, PrototypeFactory, RandomPlacer

__version__ = "0.1.0"

__all__ = [
    "AlreadyOccupied",
    "DeterministicRNG",
    "Entity",
    "EntityRegistry",
    "GridConfig",
    "GridContainer",
    "GridError",
    "GridFull",
    "NotOnGrid",
    "OutOfRange",
    "PlacementMode",
    "PrototypeFactory",
    "RandomPlacer",
    "Vector2",
    "WorldPoint",
]
