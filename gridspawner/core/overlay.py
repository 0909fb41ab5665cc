"""Debug overlay geometry: one wire square per cell, drawn by the host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gridspawner.core.models import Vector2, WorldPoint

if TYPE_CHECKING:
    from gridspawner.core.grid import GridContainer


@dataclass(frozen=True, slots=True)
class CellOverlay:
    cell: Vector2
    center: WorldPoint
    size: float


def debug_overlay(grid: GridContainer) -> list[CellOverlay]:
    """Return overlay squares for every cell, column by column.

    Each square is centred on ``grid_to_world(cell)`` with edge ``cell_size``,
    so the gap between neighbours is ``cell_spacing``.
    """
    return [
        CellOverlay(cell=Vector2(x, y), center=grid.grid_to_world(Vector2(x, y)), size=grid.cell_size)
        for x in range(grid.width)
        for y in range(grid.height)
    ]
