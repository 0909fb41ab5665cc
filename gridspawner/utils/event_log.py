"""Append-only record of grid mutations, bounded to the most recent events."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from gridspawner.core.enums import EventCategory


@dataclass(frozen=True, slots=True)
class PlacementEvent:
    """A single grid mutation."""

    seq: int
    category: EventCategory
    message: str
    cell: tuple[int, int] | None = None
    entity_ids: tuple[int, ...] = ()  # IDs of entities involved in this event


class EventLog:
    """Ring buffer of placement events. Writers append; readers copy a slice.

    Sequence numbers keep increasing across ``clear()`` so a reader can poll
    with ``since()`` without seeing an event twice.
    """

    __slots__ = ("_buffer", "_next_seq")

    def __init__(self, maxlen: int | None = 1000) -> None:
        self._buffer: deque[PlacementEvent] = deque(maxlen=maxlen)
        self._next_seq: int = 0

    def record(
        self,
        category: EventCategory,
        message: str,
        cell: tuple[int, int] | None = None,
        entity_ids: tuple[int, ...] = (),
    ) -> PlacementEvent:
        event = PlacementEvent(self._next_seq, category, message, cell, entity_ids)
        self._next_seq += 1
        self._buffer.append(event)
        return event

    def since(self, seq: int) -> list[PlacementEvent]:
        """Return all retained events with ``seq >= seq``."""
        return [e for e in self._buffer if e.seq >= seq]

    def latest(self, count: int = 50) -> list[PlacementEvent]:
        """Return the *count* most recent events."""
        if count <= 0:
            return []
        return list(self._buffer)[-count:]

    def __len__(self) -> int:
        return len(self._buffer)

    def clear(self) -> None:
        self._buffer.clear()
