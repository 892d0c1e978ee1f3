"""Entity handles made of an index and a generation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entity:
    """A lightweight, hashable handle to an entity.

    The generation tells apart entities that were given the same index at
    different times, so stale handles can be detected after an index is reused.
    """

    index: int
    generation: int