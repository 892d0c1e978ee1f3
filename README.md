# circlesim

A small 2D sandbox in which circles fall under gravity, bounce off the walls
and a movable ground line, and collide with one another. The simulation is
built on a tiny entity-component store that uses generational entity handles,
so a stale handle never reaches an entity that has since reused its slot.

## Installing

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## The editor

```
circlesim
circlesim --width 1600 --height 900
```

This opens a pygame window (1200 by 800 unless `--width` and `--height` say
otherwise) with a tools panel on the left and the scene on the right.

- Left-click in the scene to place a circle at the pointer, using the
  "Place Circle" tool.
- Right-click a circle to delete it. Where circles overlap, the one found
  last is deleted.
- Drag the sliders in the panel to set the radius of the next circle
  (5 to 80), the height of the ground line (100 to 700), the gravity
  (0 to 2000) and the bounciness (0 to 1). The defaults are 20, 500, 500
  and 0.45.

The scene advances by 1/60 of a second every frame, at up to 60 frames a
second. Close the window to quit.

The editor keeps nothing between runs: there is no saving or loading of
scenes.

### Driving the editor without a window

`circlesim.app.EditorState` holds the world and the panel settings, and can
be used on its own:

```python
from circlesim.app import EditorState

state = EditorState()
entity = state.handle_left_click(100.0, 100.0)  # places a circle, returns its entity
state.update(940.0, 800.0)                       # one frame on a 940 x 800 canvas
state.handle_right_click(100.0, 100.0)           # True if a circle was deleted
```

## Using the library

```python
from circlesim.world import World2D
from circlesim.components import Position
from circlesim.scene import spawn_circle, find_circle_at_position
from circlesim.physics import step

world = World2D()
spawn_circle(world, 100.0, 100.0, 20.0)

# dt, gravity, viewport width and height, ground y, bouncing factor
step(world, 1.0 / 60.0, 500.0, 800.0, 600.0, 500.0, 0.45)

entity = find_circle_at_position(world, Position(100.0, 100.0))
if entity is not None:
    world.despawn(entity)
```

`step` applies gravity to every entity that has both a position and a
velocity. Entities that also have a circle are kept inside the viewport and
above the ground (the lower of the ground line and the viewport height); when
they hit an edge moving outward, their velocity along that axis is reversed
and scaled by the bouncing factor. Overlapping circles are then pushed apart
equally along the line between their centres, and those moving towards each
other exchange an impulse scaled by the bouncing factor.

### Building blocks

- `circlesim.entity.Entity`: an immutable, hashable handle with an `index`
  and a `generation`.
- `circlesim.entity_allocator.EntityAllocator`: `allocate()` hands out
  entities, reusing the most recently freed index under a raised generation;
  `deallocate()` returns `False` for an entity that is not alive;
  `is_alive()` tells whether a handle is still current.
- `circlesim.component_storage.ComponentStorage`: a mapping from entities to
  components of one kind, with `insert()` (returns the replaced component),
  `get()`, `remove()`, `items()`, `in`, `len()` and iteration over entities.
- `circlesim.components`: the mutable `Position`, `Velocity` and `Circle`
  dataclasses.
- `circlesim.world.World2D`: ties the allocator and one storage per component
  kind together, with `spawn()`, `despawn()`, `is_alive()`, `add_*()`,
  `get_*()` and the iterators `positions()`, `velocities()` and `circles()`.
  Components cannot be added to or read from dead entities (`None` comes
  back), and despawning an entity removes all of its components. The
  components returned by `get_*()` are the stored objects, so changing their
  fields changes the world.
- `circlesim.scene`: `spawn_circle()` creates a resting circle and returns its
  entity; `find_circle_at_position()` returns the circle containing a point,
  or `None`.