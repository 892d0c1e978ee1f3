"""Per-entity storage for one kind of component."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, Tuple, TypeVar

from circlesim.entity import Entity

T = TypeVar("T")


class ComponentStorage(Generic[T]):
    """Maps entities to components of a single type."""

    def __init__(self) -> None:
        self._components: dict[Entity, T] = {}

    def insert(self, entity: Entity, component: T) -> Optional[T]:
        """Store a component, returning the one it replaced, if any."""
        previous = self._components.get(entity)
        self._components[entity] = component
        return previous

    def get(self, entity: Entity) -> Optional[T]:
        """Return the entity's component, or None."""
        return self._components.get(entity)

    def remove(self, entity: Entity) -> Optional[T]:
        """Remove and return the entity's component, or None."""
        return self._components.pop(entity, None)

    def items(self) -> Iterator[Tuple[Entity, T]]:
        """Iterate over (entity, component) pairs."""
        return iter(self._components.items())

    def __contains__(self, entity: object) -> bool:
        return entity in self._components

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._components)