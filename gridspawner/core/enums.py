"""Enumerations used throughout the grid spawner."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class PlacementMode(str, Enum):
    """How the container treats occupied cells and handle moves."""

    STRICT = "strict"   # Refuse to overwrite; moves use the tracked cell
    LEGACY = "legacy"   # Silent overwrite; moves recompute the cell from world position


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    PLACEMENT = 0
    ENTITY = 1


@unique
class EventCategory(str, Enum):
    """Kinds of mutation recorded in the placement event log."""

    PLACE = "place"
    REPLACE = "replace"
    REMOVE = "remove"
    MOVE = "move"
    SPAWN = "spawn"
