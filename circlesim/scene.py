"""Helpers for placing and picking circles in a world."""

from __future__ import annotations

from typing import Optional

from circlesim.components import Circle, Position, Velocity
from circlesim.entity import Entity
from circlesim.world import World2D


def spawn_circle(world: World2D, x: float, y: float, radius: float) -> Entity:
    """Create a resting circle at (x, y) and return its entity."""
    entity = world.spawn()
    world.add_position(entity, Position(x, y))
    world.add_velocity(entity, Velocity(0.0, 0.0))
    world.add_circle(entity, Circle(radius))
    return entity


def find_circle_at_position(world: World2D, point: Position) -> Optional[Entity]:
    """Return the circle containing ``point``; the last one found wins."""
    found: Optional[Entity] = None
    for entity, position in world.positions():
        circle = world.get_circle(entity)
        if circle is None:
            continue
        dx = point.x - position.x
        dy = point.y - position.y
        if dx * dx + dy * dy <= circle.radius * circle.radius:
            found = entity
    return found