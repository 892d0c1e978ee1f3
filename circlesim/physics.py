"""Integration of motion, boundary bounces and circle-circle collisions."""

from __future__ import annotations

import math
from itertools import combinations
from typing import List, NamedTuple, Tuple

from circlesim.components import Position, Velocity
from circlesim.entity import Entity
from circlesim.world import World2D

_MIN_NORMAL_DISTANCE = 0.0001


class _Body(NamedTuple):
    entity: Entity
    x: float
    y: float
    dx: float
    dy: float
    radius: float


def step(
    world: World2D,
    dt: float,
    gravity: float,
    viewport_width: float,
    viewport_height: float,
    ground_y: float,
    bouncing_factor: float,
) -> None:
    """Advance the world by ``dt`` seconds.

    Gravity is applied to every entity with a position and a velocity.
    Circles are kept inside the viewport and above the ground, bouncing
    off its edges, and overlapping circles are pushed apart.
    """
    updates: List[Tuple[Entity, Position, Velocity]] = []

    for entity, velocity in world.velocities():
        position = world.get_position(entity)
        if position is None:
            continue

        dx = velocity.dx
        dy = velocity.dy + gravity * dt
        x = position.x + dx * dt
        y = position.y + dy * dt

        circle = world.get_circle(entity)
        if circle is not None:
            radius = circle.radius

            if x - radius < 0.0:
                x = radius
                if dx < 0.0:
                    dx = -dx * bouncing_factor

            if x + radius > viewport_width:
                x = viewport_width - radius
                if dx > 0.0:
                    dx = -dx * bouncing_factor

            if y - radius < 0.0:
                y = radius
                if dy < 0.0:
                    dy = -dy * bouncing_factor

            floor_y = min(ground_y, viewport_height)
            if y + radius > floor_y:
                y = floor_y - radius
                if dy > 0.0:
                    dy = -dy * bouncing_factor

        updates.append((entity, Position(x, y), Velocity(dx, dy)))

    for entity, new_position, new_velocity in updates:
        position = world.get_position(entity)
        if position is not None:
            position.x, position.y = new_position.x, new_position.y
        velocity = world.get_velocity(entity)
        if velocity is not None:
            velocity.dx, velocity.dy = new_velocity.dx, new_velocity.dy

    _resolve_circle_collisions(world, bouncing_factor)


def _collect_bodies(world: World2D) -> List[_Body]:
    bodies = []
    for entity, position in world.positions():
        circle = world.get_circle(entity)
        velocity = world.get_velocity(entity)
        if circle is None or velocity is None:
            continue
        bodies.append(
            _Body(entity, position.x, position.y, velocity.dx, velocity.dy, circle.radius)
        )
    return bodies


def _resolve_circle_collisions(world: World2D, bouncing_factor: float) -> None:
    position_updates: List[Tuple[Entity, float, float]] = []
    velocity_updates: List[Tuple[Entity, float, float]] = []

    for a, b in combinations(_collect_bodies(world), 2):
        dx = b.x - a.x
        dy = b.y - a.y
        distance_sq = dx * dx + dy * dy
        min_distance = a.radius + b.radius

        if distance_sq >= min_distance * min_distance:
            continue

        distance = math.sqrt(distance_sq)
        if distance > _MIN_NORMAL_DISTANCE:
            normal_x, normal_y = dx / distance, dy / distance
        else:
            normal_x, normal_y = 1.0, 0.0

        overlap = min_distance - distance
        correction_x = normal_x * overlap * 0.5
        correction_y = normal_y * overlap * 0.5
        position_updates.append((a.entity, -correction_x, -correction_y))
        position_updates.append((b.entity, correction_x, correction_y))

        relative_dx = b.dx - a.dx
        relative_dy = b.dy - a.dy
        normal_velocity = relative_dx * normal_x + relative_dy * normal_y

        if normal_velocity < 0.0:
            impulse = -(1.0 + bouncing_factor) * normal_velocity * 0.5
            impulse_x = impulse * normal_x
            impulse_y = impulse * normal_y
            velocity_updates.append((a.entity, -impulse_x, -impulse_y))
            velocity_updates.append((b.entity, impulse_x, impulse_y))

    for entity, correction_x, correction_y in position_updates:
        position = world.get_position(entity)
        if position is not None:
            position.x += correction_x
            position.y += correction_y

    for entity, delta_dx, delta_dy in velocity_updates:
        velocity = world.get_velocity(entity)
        if velocity is not None:
            velocity.dx += delta_dx
            velocity.dy += delta_dy