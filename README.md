# cubray

A small first-person raycasting explorer. It reads a `.cub` scene file,
checks that the map is closed, and lets you walk around it in a
2200×1000 window with a 90° field of view and a top-down minimap.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
cubray path/to/scene.cub
```

The argument must be a single file name ending in `.cub`; anything else
is rejected with an error message and exit status 1. If the scene file
cannot be opened or is not valid, the reason is printed to standard error
and the exit status is 1.

### Controls

| Key              | Action               |
|------------------|----------------------|
| `W` / `Up`       | step forward         |
| `S` / `Down`     | step back            |
| `A`              | strafe left          |
| `D`              | strafe right         |
| `Left` / `Right` | turn                 |
| `Esc`            | quit                 |

Closing the window also quits. Movement stops at walls and at the edge of
the map.

## The `.cub` format

Blank lines (empty or whitespace only) are ignored everywhere. The first
six non-blank lines are the scene elements:

1. four wall textures, in any order, each a key (`NO`, `SO`, `WE`, `EA`)
   followed by the path of a file that must exist; relative paths are
   taken from the current working directory;
2. then two colours, `F` (floor) and `C` (ceiling), in either order, each
   as `R,G,B` with every component clamped to 0–255.

Every later non-blank line is a row of the map:

- `1` — wall
- `0` — empty floor
- ` ` — void outside the map
- `N`, `S`, `E`, `W` — the player's spawn cell and the direction they face

Any other character is an error. Exactly one spawn cell is allowed, and
every floor cell, including the spawn cell, must be enclosed by walls: no
floor may touch the first row, the first column, the last row, a space or
the end of a row. Example:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0

111111
100001
1000N1
111111
```

## What it does not do

The texture files are only checked for existence; they are not loaded or
drawn. Walls are drawn as grey columns that darken with distance, and the
game view uses a fixed sky-blue and brown background rather than the
scene's `C` and `F` colours (those are parsed and available as
`CubMap.ceiling_color` and `CubMap.floor_color`, and
`cubray.render.draw_colored_background` can paint them).

## Using it as a library

```python
from cubray.mapfile import load_map
from cubray.player import Player
from cubray.raycast import cast_rays

cub_map = load_map("scene.cub")
player = Player.spawn(cub_map)
columns = cast_rays(player)   # one (RayHit, WallSlice or None) per screen column
```

- `cubray.mapfile`: `load_map` and `parse_lines` build a `CubMap` and raise
  `MapError` when the scene is invalid; `check_file_name`, `parse_color`,
  `find_player`, `map_closed`, `check_valid_map` and `map_to_grid` are the
  individual checks and conversions.
- `cubray.player`: `Player` with `rotate`, `try_move`, `step_forward`,
  `step_back`, `strafe_left`, `strafe_right` and `apply_input`, which takes
  a set of `Action` values and returns False when `Action.QUIT` is held.
- `cubray.raycast`: `trace_ray` marches a single ray and returns a
  `RayHit`; `wall_slice` turns a distance into a `WallSlice`.
- `cubray.render`: `draw_frame`, `draw_minimap`, `draw_player_marker` and
  the background and line helpers draw onto a pygame surface.
- `cubray.geometry`, `cubray.colors` and `cubray.textutil` hold the vector,
  angle, colour-packing and text helpers used by the rest.