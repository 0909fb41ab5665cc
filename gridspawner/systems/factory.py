"""Entity factories — create the handles the grid places."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gridspawner.core.models import Entity, WorldPoint

if TYPE_CHECKING:
    from gridspawner.core.registry import EntityRegistry

logger = logging.getLogger(__name__)


class EntityFactory(ABC):
    """Produces a new entity on demand. Failures propagate to the caller."""

    @abstractmethod
    def create(self) -> Entity:
        """Return a freshly spawned entity."""


@dataclass(frozen=True, slots=True)
class EntityPrototype:
    """Template every entity from a ``PrototypeFactory`` is stamped from."""

    kind: str = "card"


class PrototypeFactory(EntityFactory):
    """Stamps entities from a prototype and registers them as alive."""

    __slots__ = ("_registry", "_prototype")

    def __init__(self, registry: EntityRegistry, prototype: EntityPrototype | None = None) -> None:
        self._registry = registry
        self._prototype = prototype or EntityPrototype()

    @property
    def prototype(self) -> EntityPrototype:
        return self._prototype

    def create(self) -> Entity:
        entity = Entity(
            id=self._registry.allocate_entity_id(),
            kind=self._prototype.kind,
            position=WorldPoint(),
        )
        self._registry.add(entity)
        logger.debug("Created %r", entity)
        return entity
