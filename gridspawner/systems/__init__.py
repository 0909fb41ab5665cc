"""Spawning systems: RNG, entity factories, random placement."""

from gridspawner.systems.rng import DeterministicRNG, RNGStream
from gridspawner.systems.factory import EntityFactory, EntityPrototype, PrototypeFactory
from gridspawner.systems.spawner import RandomPlacer

__all__ = [
    "DeterministicRNG",
    "EntityFactory",
    "EntityPrototype",
    "PrototypeFactory",
    "RNGStream",
    "RandomPlacer",
]
