"""Random placer — spawns an entity into a uniformly chosen free cell."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridspawner.core.errors import GridFull
from gridspawner.core.models import Entity, Vector2

if TYPE_CHECKING:
    from gridspawner.core.grid import GridContainer
    from gridspawner.systems.factory import EntityFactory
    from gridspawner.systems.rng import RNGStream

logger = logging.getLogger(__name__)


class RandomPlacer:
    """Rejection-samples a free cell and asks the grid to spawn there.

    *rng* is any object with ``uniform(low, high) -> int`` (high exclusive).
    With ``max_attempts`` set, a run of that many occupied draws falls back
    to a uniform pick among the remaining free cells.
    """

    __slots__ = ("_rng", "_max_attempts")

    def __init__(self, rng: RNGStream, max_attempts: int | None = None) -> None:
        if max_attempts is not None and max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self._rng = rng
        self._max_attempts = max_attempts

    def spawn_random(self, grid: GridContainer, factory: EntityFactory) -> Entity:
        if not grid.has_empty_cell():
            raise GridFull(f"No empty cell left on the {grid.width}x{grid.height} grid")

        cell = self._pick_free_cell(grid)
        entity = grid.spawn_at(factory, cell)
        logger.debug("Spawned %r at %s", entity, cell)
        return entity

    def _pick_free_cell(self, grid: GridContainer) -> Vector2:
        attempts = 0
        while self._max_attempts is None or attempts < self._max_attempts:
            x = self._rng.uniform(0, grid.width)
            y = self._rng.uniform(0, grid.height)
            attempts += 1
            cell = Vector2(x, y)
            if not grid.is_occupied(cell):
                logger.debug("Found free cell %s after %d draw(s)", cell, attempts)
                return cell

        free = grid.empty_cells()
        cell = free[self._rng.uniform(0, len(free))]
        logger.debug("No free cell in %d draws; picked %s from %d free cells", attempts, cell, len(free))
        return cell
