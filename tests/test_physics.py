import math

import pytest

from circlesim.components import Circle, Position, Velocity
from circlesim.physics import step
from circlesim.world import World2D


def _close(value):
    return pytest.approx(value, abs=0.001)


def assert_position(world, entity, x, y):
    pos = world.get_position(entity)
    assert pos.x == _close(x)
    assert pos.y == _close(y)


def assert_velocity(world, entity, dx, dy):
    vel = world.get_velocity(entity)
    assert vel.dx == _close(dx)
    assert vel.dy == _close(dy)


def _body(world, x, y, dx, dy, radius=None):
    entity = world.spawn()
    world.add_position(entity, Position(x, y))
    world.add_velocity(entity, Velocity(dx, dy))
    if radius is not None:
        world.add_circle(entity, Circle(radius))
    return entity


def test_gravity_increases_downward_velocity():
    world = World2D()
    entity = _body(world, 100.0, 100.0, 0.0, 0.0)
    step(world, 1.0, 100.0, 1000.0, 1000.0, 900.0, 1.0)
    assert_velocity(world, entity, 0.0, 100.0)


def test_gravity_moves_object_downward():
    world = World2D()
    entity = _body(world, 100.0, 100.0, 0.0, 0.0)
    step(world, 1.0, 100.0, 1000.0, 1000.0, 900.0, 1.0)
    assert_position(world, entity, 100.0, 200.0)


def test_circle_bounces_on_ground():
    world = World2D()
    entity = _body(world, 50.0, 90.0, 0.0, 50.0, 10.0)
    step(world, 1.0, 0.0, 500.0, 500.0, 100.0, 1.0)
    assert_position(world, entity, 50.0, 90.0)
    assert_velocity(world, entity, 0.0, -50.0)


def test_object_falls_again_if_ground_moves_down():
    world = World2D()
    entity = _body(world, 50.0, 90.0, 0.0, 0.0, 10.0)

    step(world, 1.0, 0.0, 500.0, 500.0, 100.0, 1.0)
    assert_position(world, entity, 50.0, 90.0)

    step(world, 1.0, 100.0, 500.0, 500.0, 200.0, 1.0)
    assert_velocity(world, entity, 0.0, 100.0)
    assert_position(world, entity, 50.0, 190.0)


def test_circle_bounces_off_left_wall():
    world = World2D()
    entity = _body(world, 10.0, 100.0, -50.0, 0.0, 10.0)
    step(world, 1.0, 0.0, 500.0, 500.0, 400.0, 1.0)
    assert_position(world, entity, 10.0, 100.0)
    assert_velocity(world, entity, 50.0, 0.0)


def test_circle_bounces_off_right_wall():
    world = World2D()
    entity = _body(world, 490.0, 100.0, 50.0, 0.0, 10.0)
    step(world, 1.0, 0.0, 500.0, 500.0, 400.0, 1.0)
    assert_position(world, entity, 490.0, 100.0)
    assert_velocity(world, entity, -50.0, 0.0)


def test_circle_bounces_off_top_wall():
    world = World2D()
    entity = _body(world, 100.0, 10.0, 0.0, -50.0, 10.0)
    step(world, 1.0, 0.0, 500.0, 500.0, 400.0, 1.0)
    assert_position(world, entity, 100.0, 10.0)
    assert_velocity(world, entity, 0.0, 50.0)


def test_bouncing_factor_scales_wall_bounce():
    world = World2D()
    entity = _body(world, 10.0, 100.0, -40.0, 0.0, 10.0)
    step(world, 1.0, 0.0, 500.0, 500.0, 400.0, 0.5)
    assert_position(world, entity, 10.0, 100.0)
    assert_velocity(world, entity, 20.0, 0.0)


def test_bouncing_factor_scales_ground_bounce():
    world = World2D()
    entity = _body(world, 100.0, 390.0, 0.0, 40.0, 10.0)
    step(world, 1.0, 0.0, 500.0, 500.0, 400.0, 0.5)
    assert_position(world, entity, 100.0, 390.0)
    assert_velocity(world, entity, 0.0, -20.0)


def test_ground_uses_min_of_ground_y_and_viewport_height():
    world = World2D()
    entity = _body(world, 100.0, 285.0, 0.0, 30.0, 10.0)
    step(world, 1.0, 0.0, 500.0, 300.0, 400.0, 1.0)
    assert_position(world, entity, 100.0, 290.0)
    assert_velocity(world, entity, 0.0, -30.0)


def test_overlapping_circles_are_separated():
    world = World2D()
    a = _body(world, 100.0, 100.0, 0.0, 0.0, 20.0)
    b = _body(world, 110.0, 100.0, 0.0, 0.0, 20.0)

    step(world, 0.0, 0.0, 1000.0, 1000.0, 900.0, 1.0)

    pos_a = world.get_position(a)
    pos_b = world.get_position(b)
    distance = math.hypot(pos_b.x - pos_a.x, pos_b.y - pos_a.y)
    assert distance >= 40.0 - 0.001


def test_non_overlapping_circles_are_unchanged():
    world = World2D()
    a = _body(world, 100.0, 100.0, 0.0, 0.0, 20.0)
    b = _body(world, 200.0, 100.0, 0.0, 0.0, 20.0)

    step(world, 0.0, 0.0, 1000.0, 1000.0, 900.0, 1.0)

    assert_position(world, a, 100.0, 100.0)
    assert_position(world, b, 200.0, 100.0)


def test_circles_bounce_head_on():
    world = World2D()
    a = _body(world, 100.0, 100.0, 10.0, 0.0, 20.0)
    b = _body(world, 130.0, 100.0, -10.0, 0.0, 20.0)

    step(world, 0.0, 0.0, 1000.0, 1000.0, 900.0, 1.0)

    assert world.get_velocity(a).dx == _close(-10.0)
    assert world.get_velocity(b).dx == _close(10.0)


def test_circle_collision_uses_bouncing_factor():
    world = World2D()
    a = _body(world, 100.0, 100.0, 10.0, 0.0, 20.0)
    b = _body(world, 130.0, 100.0, -10.0, 0.0, 20.0)

    step(world, 0.0, 0.0, 1000.0, 1000.0, 900.0, 0.5)

    assert world.get_velocity(a).dx == _close(-5.0)
    assert world.get_velocity(b).dx == _close(5.0)


def test_coincident_circles_are_pushed_apart_along_x():
    world = World2D()
    a = _body(world, 100.0, 100.0, 0.0, 0.0, 20.0)
    b = _body(world, 100.0, 100.0, 0.0, 0.0, 20.0)

    step(world, 0.0, 0.0, 1000.0, 1000.0, 900.0, 1.0)

    pos_a = world.get_position(a)
    pos_b = world.get_position(b)
    assert pos_b.x - pos_a.x == _close(40.0)
    assert pos_a.y == _close(100.0)
    assert pos_b.y == _close(100.0)


def test_entity_without_position_is_left_alone():
    world = World2D()
    entity = world.spawn()
    world.add_velocity(entity, Velocity(1.0, 2.0))

    step(world, 1.0, 100.0, 1000.0, 1000.0, 900.0, 1.0)

    assert world.get_position(entity) is None
    assert_velocity(world, entity, 1.0, 2.0)