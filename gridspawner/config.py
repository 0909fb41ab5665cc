"""Grid configuration with sensible defaults."""

from __future__ import annotations

from pydantic import NonNegativeFloat, PositiveFloat, PositiveInt
from pydantic.dataclasses import dataclass as pydantic_dataclass

from gridspawner.core.enums import PlacementMode


@pydantic_dataclass(frozen=True)
class GridConfig:
    """Immutable, validated configuration for a grid and its spawner."""

    # Geometry
    width: PositiveInt = 10
    height: PositiveInt = 10
    cell_size: PositiveFloat = 1.0
    cell_spacing: NonNegativeFloat = 0.1
    origin_x: float = 0.0
    origin_y: float = 0.0

    # Placement
    mode: PlacementMode = PlacementMode.STRICT
    seed: int = 42
    max_spawn_attempts: PositiveInt | None = None   # None = pure rejection sampling
    entity_kind: str = "card"

    # Logging
    log_level: str = "INFO"

    @property
    def cell_count(self) -> int:
        return self.width * self.height
