# blastgrid

Building blocks for a grid-based arcade game in which the player lays bombs.
The package does no drawing and plays no sound. It holds the rules and the
state: the tile grid, collision tests, moving entities with simple physics,
bombs with fuses, enemies that idle, patrol, chase and get confused, a
following camera, and the mapping of keys and mouse motion to actions.

It has no runtime dependencies. The `test` extra adds pytest.

## Modules

| Module               | What it provides                                                        |
|----------------------|-------------------------------------------------------------------------|
| `blastgrid.geometry` | `Vec2`, `circle_circle_collision`, `circle_box_collision`, `circle_box_resolution` |
| `blastgrid.grid`     | `SquareType`, `CollisionInfo`: the tile map; anything off it reads as a wall |
| `blastgrid.mapgen`   | `MapGenerator`: random walled maps with a pillar lattice and bricks     |
| `blastgrid.core`     | `TickRegistry` for per-frame ticking, `GameClock` with a speed of time  |
| `blastgrid.entity`   | `Entity`, `MovingEntity`, `AnimationState`, `AnimationType`, `angle_between` |
| `blastgrid.bomb`     | `Bomb`, `BombPhase`                                                     |
| `blastgrid.ai`       | `AIController`, `Enemy`, the four states and grid helpers such as `march` and `check_visibility` |
| `blastgrid.camera`   | `Camera`, `CameraDirection`, `Vec3`, `look_at`                          |
| `blastgrid.input`    | `Action`, `Modifier`, `MouseButton`, `KeyboardState`, `InputManager`    |

## The grid

```python
from blastgrid.geometry import Vec2
from blastgrid.grid import CollisionInfo, SquareType
from blastgrid.mapgen import MapGenerator

W, B, E = SquareType.WALL, SquareType.BRICK, SquareType.EMPTY
grid = CollisionInfo(squares=[W, W, W, W, E, W, W, B, W], width=3)

grid[Vec2(1.5, 1.5)]     # SquareType.EMPTY: the square holding this point
grid[Vec2(-3.0, 0.0)]    # SquareType.WALL: off the grid
grid[(1, 2)] = SquareType.EMPTY
grid.height              # 3
grid.coords_of(7)        # (1, 2)

squares = MapGenerator(21, 21).generate()   # row-major, 21 * 21 squares
```

`MapGenerator` takes an optional `random.Random` for repeatable maps. The
border and every square with even row and column are walls, the top-left
corner is kept clear, and one in five of the remaining squares is a brick.

## Collisions

```python
from blastgrid.geometry import Vec2, circle_circle_collision, circle_box_collision

circle_circle_collision(Vec2(0, 0), 0.24, Vec2(0.3, 0), 0.24)        # True
circle_box_collision(Vec2(1.1, 0.5), 0.24, Vec2(1, 0), Vec2(2, 1))   # True
```

`circle_box_resolution` returns the offset that pushes the circle out of the
box, or `None` when they do not overlap.

## Entities and bombs

`MovingEntity` takes a `clock` callable and an optional `sound` callable that
is called with a sound name. `tick(delta_time)` applies the accumulated
acceleration with friction and clamps it to the speed limits. It also turns
the entity toward its velocity and picks the idle, running or dying
animation.

A `Bomb` centres itself on the square it is placed in and marks that square
as `SquareType.BOMB`. It grows in for `SPAWN_TIME` seconds. Its fuse then
runs out at `FUSE_TIME` seconds after it was placed. At that point it calls
`on_explode(position, strength)` and dies. `release()` empties its square and
calls `on_release` once.

```python
from blastgrid.bomb import Bomb

bomb = Bomb((1.2, 1.7), 2, grid, clock=lambda: now, on_explode=handler)
bomb.position   # Vec2(1.5, 1.5)
```

## Enemies

```python
from blastgrid.ai import Enemy

enemy = Enemy((1.5, 1.5), grid, hero_position=lambda: hero_pos, clock=clock)
enemy.controller.tick(enemy, dt)   # choose a push for this frame
enemy.tick(dt)                     # apply the physics
```

The controller starts in `IdleState`. It then patrols a random distance in a
random open direction. It chases when the hero is in view along a clear row
or column in front of it. When it loses the hero it looks around in
`ConfusedState` for π seconds.

## Camera and input

`Camera.follow_entity(target, distance, delta_time, now)` glides toward a spot
above and behind any object with `position3d()`. `add_shake` makes the view
wobble, and the wobble dies away over time. `view_matrix()` returns a
row-major 4×4 tuple.

`InputManager.process_key_down("escape")` gives `Action.PAUSE` and `"space"`
gives `Action.EXPLOSION`. `"delete"` with both `Modifier.LCTRL` and
`Modifier.LALT` held, or both right-hand ones, gives `Action.KILL_ALL`.
Dragging with the right mouse button gives `Action.CAMERA_ROTATE`, and
`mouse_offset()` then returns the drag offset.

## What the package does not do

Nothing in the package ties these parts into a playable game. It has no
player character with power-ups and no bomb placement by the player. There
is no explosion spread or chain reaction; `on_explode` is left to you. It
does not keep score, lives or stage progression, and has no menu logic. It
does not read stage maps from text files and does not save settings. It has
no rendering, audio, window or command to run. A frontend has to provide all
of these on top of the modules above.