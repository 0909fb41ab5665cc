"""Entity registry — owns the lifetime of every spawned entity.

The grid holds non-owning references. When it wants an occupant gone it asks
an ``EntityDestroyer``; the registry is the stock implementation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Mapping

from gridspawner.core.errors import UnknownEntity
from gridspawner.core.models import Entity

logger = logging.getLogger(__name__)


class EntityDestroyer(ABC):
    """Releases a spawned entity from the running application."""

    @abstractmethod
    def destroy(self, handle: Entity) -> None:
        """Remove *handle*; must be complete on return."""


class EntityRegistry(EntityDestroyer):
    """The single source of truth for which entities are alive."""

    __slots__ = ("_entities", "_next_entity_id", "_destroyed_count")

    def __init__(self) -> None:
        self._entities: dict[int, Entity] = {}
        self._next_entity_id: int = 1
        self._destroyed_count: int = 0

    def allocate_entity_id(self) -> int:
        eid = self._next_entity_id
        self._next_entity_id += 1
        return eid

    def add(self, entity: Entity) -> None:
        self._entities[entity.id] = entity

    def get(self, entity_id: int) -> Entity | None:
        return self._entities.get(entity_id)

    def __contains__(self, entity: Entity) -> bool:
        return self._entities.get(entity.id) is entity

    def __len__(self) -> int:
        return len(self._entities)

    @property
    def live(self) -> Mapping[int, Entity]:
        """Read-only view of alive entities keyed by id."""
        return MappingProxyType(self._entities)

    @property
    def destroyed_count(self) -> int:
        return self._destroyed_count

    def destroy(self, handle: Entity) -> None:
        if handle not in self:
            raise UnknownEntity(handle.id)
        del self._entities[handle.id]
        handle.alive = False
        self._destroyed_count += 1
        logger.debug("Destroyed %r", handle)
