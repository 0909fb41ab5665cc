"""Core data models: Vector2, WorldPoint, Entity."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer grid coordinate."""

    x: int = 0
    y: int = 0

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class WorldPoint:
    """Immutable continuous world-space position."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: WorldPoint) -> WorldPoint:
        return WorldPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: WorldPoint) -> WorldPoint:
        return WorldPoint(self.x - other.x, self.y - other.y)

    def __repr__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass(eq=False, slots=True)
class Entity:
    """Handle to a spawned object.

    Handles compare and hash by identity: two spawns of the same kind are
    different occupants even when every field matches. The registry owns the
    entity's lifetime; the grid only keeps a reference for bookkeeping.
    """

    id: int
    kind: str
    position: WorldPoint = field(default_factory=WorldPoint)
    alive: bool = True

    def __repr__(self) -> str:
        state = "" if self.alive else ", destroyed"
        return f"Entity(#{self.id} {self.kind} at {self.position}{state})"
