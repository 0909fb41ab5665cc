"""Pydantic models for exporting grid state as JSON."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from gridspawner.core.enums import PlacementMode
from gridspawner.core.overlay import debug_overlay

if TYPE_CHECKING:
    from gridspawner.core.grid import GridContainer


class OccupantSchema(BaseModel):
    x: int
    y: int
    entity_id: int
    kind: str
    world_x: float
    world_y: float


class GridSnapshot(BaseModel):
    width: int
    height: int
    origin_x: float
    origin_y: float
    cell_size: float
    cell_spacing: float
    mode: PlacementMode
    occupied_count: int = 0
    has_empty_cell: bool = True
    occupants: list[OccupantSchema] = Field(default_factory=list)


class OverlayCellSchema(BaseModel):
    x: int
    y: int
    center_x: float
    center_y: float
    size: float


class OverlaySnapshot(BaseModel):
    width: int
    height: int
    cells: list[OverlayCellSchema] = Field(default_factory=list)


def snapshot_grid(grid: GridContainer) -> GridSnapshot:
    occupants = [
        OccupantSchema(
            x=cell.x, y=cell.y, entity_id=e.id, kind=e.kind,
            world_x=e.position.x, world_y=e.position.y,
        )
        for cell, e in grid.occupied()
    ]
    return GridSnapshot(
        width=grid.width,
        height=grid.height,
        origin_x=grid.origin.x,
        origin_y=grid.origin.y,
        cell_size=grid.cell_size,
        cell_spacing=grid.cell_spacing,
        mode=grid.mode,
        occupied_count=len(occupants),
        has_empty_cell=grid.has_empty_cell(),
        occupants=occupants,
    )


def snapshot_overlay(grid: GridContainer) -> OverlaySnapshot:
    return OverlaySnapshot(
        width=grid.width,
        height=grid.height,
        cells=[
            OverlayCellSchema(
                x=o.cell.x, y=o.cell.y,
                center_x=o.center.x, center_y=o.center.y, size=o.size,
            )
            for o in debug_overlay(grid)
        ],
    )
