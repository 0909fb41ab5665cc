"""Domain-separated deterministic RNG using xxhash.

Formula: RNG_Value = Hash(Seed, Domain, Key, Counter)

The same seed always yields the same placements, independent of what else
drew random numbers in between, because every consumer reads its own domain.
"""

from __future__ import annotations

import struct

import xxhash

from gridspawner.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, key, counter).
    """

    __slots__ = ("_seed",)

    _FLOAT_SCALE = 1 << 53

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, counter: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, counter)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, counter: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        # Top 53 bits only: a full 64-bit hash can round up to 1.0.
        return (self._hash(domain, key, counter) >> 11) / self._FLOAT_SCALE

    def next_int(self, domain: Domain, key: int, counter: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, counter)
        return min(low + int(f * (high - low + 1)), high)

    def next_bool(self, domain: Domain, key: int, counter: int, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, key, counter) < probability

    def stream(self, domain: Domain, key: int = 0) -> RNGStream:
        """Sequenced view over one (domain, key) pair."""
        return RNGStream(self, domain, key)


class RNGStream:
    """Counter-driven random source with a ``uniform(low, high)`` draw.

    The only state is the draw counter, so two streams built from the same
    seed, domain and key produce the same sequence.
    """

    __slots__ = ("_rng", "_domain", "_key", "_counter")

    def __init__(self, rng: DeterministicRNG, domain: Domain, key: int = 0) -> None:
        self._rng = rng
        self._domain = domain
        self._key = key
        self._counter = 0

    @property
    def draws(self) -> int:
        return self._counter

    def uniform(self, low: int, high: int) -> int:
        """Return an integer in [low, high), high exclusive."""
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        value = self._rng.next_int(self._domain, self._key, self._counter, low, high - 1)
        self._counter += 1
        return value
