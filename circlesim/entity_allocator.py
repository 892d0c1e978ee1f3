"""Allocation of entity handles with index reuse."""

from __future__ import annotations

from circlesim.entity import Entity


class EntityAllocator:
    """Hands out entities, reusing freed indices under a new generation."""

    def __init__(self) -> None:
        self._generations: list[int] = []
        self._free_indices: list[int] = []

    def allocate(self) -> Entity:
        """Return a new live entity, reusing the most recently freed index."""
        if self._free_indices:
            index = self._free_indices.pop()
            return Entity(index, self._generations[index])
        index = len(self._generations)
        self._generations.append(0)
        return Entity(index, 0)

    def deallocate(self, entity: Entity) -> bool:
        """Free a live entity; return False if it was already dead or unknown."""
        if not self.is_alive(entity):
            return False
        self._generations[entity.index] += 1
        self._free_indices.append(entity.index)
        return True

    def is_alive(self, entity: Entity) -> bool:
        """Whether the handle still refers to a live entity."""
        return (
            0 <= entity.index < len(self._generations)
            and self._generations[entity.index] == entity.generation
        )