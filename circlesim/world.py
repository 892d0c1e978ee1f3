"""A world of entities with position, velocity and circle components."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple, TypeVar

from circlesim.component_storage import ComponentStorage
from circlesim.components import Circle, Position, Velocity
from circlesim.entity import Entity
from circlesim.entity_allocator import EntityAllocator

T = TypeVar("T")


class World2D:
    """Owns entities and their components; dead entities have no components."""

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._positions: ComponentStorage[Position] = ComponentStorage()
        self._velocities: ComponentStorage[Velocity] = ComponentStorage()
        self._circles: ComponentStorage[Circle] = ComponentStorage()

    def spawn(self) -> Entity:
        """Create a new live entity without components."""
        return self._allocator.allocate()

    def despawn(self, entity: Entity) -> bool:
        """Kill an entity and drop its components; False if it was not alive."""
        if not self._allocator.deallocate(entity):
            return False
        self._positions.remove(entity)
        self._velocities.remove(entity)
        self._circles.remove(entity)
        return True

    def is_alive(self, entity: Entity) -> bool:
        """Whether the entity handle is still live."""
        return self._allocator.is_alive(entity)

    def _add(self, storage: ComponentStorage[T], entity: Entity, component: T) -> Optional[T]:
        if not self.is_alive(entity):
            return None
        return storage.insert(entity, component)

    def _get(self, storage: ComponentStorage[T], entity: Entity) -> Optional[T]:
        if not self.is_alive(entity):
            return None
        return storage.get(entity)

    def add_position(self, entity: Entity, position: Position) -> Optional[Position]:
        """Attach a position; return the replaced one. Ignored for dead entities."""
        return self._add(self._positions, entity, position)

    def add_velocity(self, entity: Entity, velocity: Velocity) -> Optional[Velocity]:
        """Attach a velocity; return the replaced one. Ignored for dead entities."""
        return self._add(self._velocities, entity, velocity)

    def add_circle(self, entity: Entity, circle: Circle) -> Optional[Circle]:
        """Attach a circle; return the replaced one. Ignored for dead entities."""
        return self._add(self._circles, entity, circle)

    def get_position(self, entity: Entity) -> Optional[Position]:
        """The entity's position, or None if absent or the entity is dead."""
        return self._get(self._positions, entity)

    def get_velocity(self, entity: Entity) -> Optional[Velocity]:
        """The entity's velocity, or None if absent or the entity is dead."""
        return self._get(self._velocities, entity)

    def get_circle(self, entity: Entity) -> Optional[Circle]:
        """The entity's circle, or None if absent or the entity is dead."""
        return self._get(self._circles, entity)

    def positions(self) -> Iterator[Tuple[Entity, Position]]:
        """Iterate over (entity, position) pairs."""
        return self._positions.items()

    def velocities(self) -> Iterator[Tuple[Entity, Velocity]]:
        """Iterate over (entity, velocity) pairs."""
        return self._velocities.items()

    def circles(self) -> Iterator[Tuple[Entity, Circle]]:
        """Iterate over (entity, circle) pairs."""
        return self._circles.items()