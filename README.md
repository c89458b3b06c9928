# gridsims

Small game-AI simulations that run headless, using only the Python
standard library:

- **Catch the cat** (`gridsims.catchthecat`): a cat tries to escape a hex
  board while a catcher blocks one cell per turn.
- **Maze** (`gridsims.maze`): a square grid of cells with shared walls and
  cell colours, advanced step by step by a maze generator.
- **Perlin noise** (`gridsims.perlin`): Perlin noise in one, two and three
  dimensions, with octave, clamped and normalised variants, and a bundled
  32-bit Mersenne Twister (`MT19937`) so a seed always gives the same
  permutation.
- **Flocking** (`gridsims.rules`, `gridsims.flock`): boids steered by
  weighted rules inside a window that wraps around at its edges.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
gridsims-catchthecat [--size N] [--seed S]
gridsims-flock [--boids N] [--steps N] [--dt SECONDS] [--width W] [--height H] [--seed S]
```

`gridsims-catchthecat` plays one game in the terminal on a board of odd side
`--size` (default 21), printing the board after every turn along with who
moved and how long the move took, and finally which side won. An even size
is rejected.

`gridsims-flock` creates `--boids` boids (default 300) in a window of
`--width` by `--height` (default 1280 by 720), runs `--steps` frames
(default 100) of `--dt` seconds each (default 1/60), and prints the number of
boids, their centre and their mean speed.

## Catch the cat

The board is a hex grid of odd side length centred on `(0, 0)`; cells are
`Point(x, y)`. Rows are offset by parity, and the cells around a point come
from `ne`, `nw`, `e`, `w`, `se` and `sw`, or all at once from `neighbors`;
`is_neighbor` tests adjacency.

`World(side_size, rng)` builds a random board (about 5% of cells blocked,
the centre kept free, the cat at the centre); `World.from_state` builds one
from an explicit list of booleans, `True` meaning blocked.

On each `step` the `Cat` or the `Catcher` picks a cell through
`World.path_detection`, which searches from the cat toward the border: on the
cat's turn it returns the first step of the path, on the catcher's turn the
last cell before the border. The cat wins by reaching the border; the
catcher wins when all six cells around the cat are blocked. An agent whose
move is not allowed (`cat_can_move_to_position`,
`catcher_can_move_to_position`) loses at once. After a win, the next `step`
starts a fresh board.

```python
from gridsims.catchthecat import Point, World

side = 5
world = World.from_state(side, True, Point(0, 0), [False] * (side * side))

print(world.path_detection())   # the cell the cat would move to
world.step()                    # play one turn
print(world.render())           # C is the cat, # blocked, . free
```

`World.update(delta_time)` counts down the turn timer while
`is_simulating` is set and plays a turn each time it runs out.

## Maze

`MazeWorld(side_size, generators)` holds the walls of a square grid of cells
centred on `(0, 0)`; neighbouring cells share the wall between them. Walls
are read and written one at a time (`get_north`, `set_east`, ...) or as a
whole `Node`, a dataclass of four booleans that also converts to and from a
byte (`Node.from_byte`, `Node.to_byte`). Each cell carries a colour
(`get_node_color`, `set_node_color`). Points outside the grid raise
`IndexError`.

`clear()` closes every cell, resets the colours, the generators and the
timers; `step()` asks the selected generator (`MazeWorld.generator`) for one
step and stops the simulation when the generator reports no change;
`update(delta_time)` steps on a timer while `is_simulating` is set.

A generator subclasses `MazeGeneratorBase` and implements `step(world)`,
returning `True` when it changed the world, and `clear(world)`.

## Perlin noise

```python
from gridsims.perlin import PerlinNoise

noise = PerlinNoise()          # built-in permutation
noise.reseed(12345)            # or any callable returning 32-bit integers
value = noise.noise2d(0.5, 1.25)               # in [-1, 1]
height = noise.octave2d_01(0.5, 1.25, 4, 0.5)  # clamped to [0, 1]
state = noise.serialize()                      # the 256-entry permutation
noise.deserialize(state)
```

The module also exposes `fade`, `lerp`, `grad`, `shuffle` and
`max_amplitude`.

## Flocking

`gridsims.rules` provides an immutable `Vec2` and the rules
`SeparationRule`, `CohesionRule`, `AlignmentRule`, `MouseInfluenceRule`,
`BoundedAreaRule` and `WindRule`. Each computes a force for a boid from its
neighbourhood; `compute_weighted_force` scales it by the rule's weight and
base multiplier, caches it in `force`, and gives zero when the rule is
disabled. `BoundedAreaRule` reads `window_size` from its world and
`MouseInfluenceRule` reads `mouse_position` (a `Vec2` while the mouse is
held, `None` otherwise).

`gridsims.flock` provides `Particle`, `Boid` and `FlockWorld`. `start()`
installs the default rules and creates `nb_boids` boids, each with its own
copy of the rules. `update(delta_time, input_arrow)` pushes the first boid by
the arrow input, moves every boid and wraps those that left the window onto
the opposite side. `set_speed`, `set_detection_radius`,
`set_constant_speed` and `set_max_acceleration` change every boid at once;
`set_number_of_boids` adds or removes boids; `restore_default_weights` puts
the rule weights back to their starting values.

## What it does not do

- Nothing is drawn: there is no window, no graphics and no settings panel.
  Boards are shown only as text (`World.render`) and the flock only as the
  summary printed by `gridsims-flock`.
- The only maze generator included, `MazeGenerator`, never changes the walls;
  it counts its steps and reports no change. Carving a maze needs a
  generator of your own. There is no command for the maze.
- Nothing sets `FlockWorld.mouse_position` for you; it stays `None` unless
  your code assigns it.