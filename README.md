# snakeworld

A classic snake game for the terminal. The snake, its body segments and the
food are entities in a small entity-component-system world. Each frame runs
the input, movement, collision and eating systems in turn, and the renderer
redraws only the cells that changed since the last frame, using ANSI escape
sequences.

## Installing

```
pip install .
```

## Playing

```
snakeworld
```

By default the field is 30 × 20 cells; the game runs at 8 frames per second.
The size can be changed:

```
snakeworld --width 40 --height 25
```

Both must be at least 3.

| Key       | Action     |
|-----------|------------|
| `w` / `W` | move up    |
| `a` / `A` | move left  |
| `s` / `S` | move down  |
| `d` / `D` | move right |
| `Esc`     | quit       |

The snake (`%` for the head, `+` for each body segment) starts out heading
down and wraps around the edges of the field. Food (`@`) appears on a random
free cell away from the edges. Each piece the head eats adds a segment and
one point to the score, shown on the top line. The game ends when two body
segments share a cell, and the final score is then printed.

Keyboard input puts the terminal into cbreak mode while the game runs and
restores it afterwards.

## Using it as a library

The pieces can be driven without a terminal:

```python
import random

from snakeworld.world import World
from snakeworld.systems import (
    collision_system,
    eating_system,
    input_system,
    movement_system,
)

world = World(30, 20, random.Random(0))
world.spawn_head()
world.spawn_follower()
world.spawn_food()

input_system(world, "d")        # steer right; "\x1b" raises QuitRequested
movement_system(world)
state = collision_system(world)  # GameState.PLAYING or GameState.GAME_OVER
points = eating_system(world)    # points gained this tick
```

- `snakeworld.components` holds the component types (`Position`, `Velocity`,
  `Renderable`, `Follows`, `Color`, `Direction`, `GameState`, …).
- `snakeworld.renderer.compose_frame(world)` builds the character grid for a
  frame; `Renderer(stream)` writes frames to any text stream and can be used
  as a context manager that restores the screen on exit.
- `snakeworld.game.Game` ties the world, the systems and a `Renderer`
  together. `Game.update(key)` advances one frame and returns the game state;
  `Game.run(keys)` plays until game over and returns the final score, calling
  `keys()` once per frame for the pressed key (or `None`).
- `snakeworld.game.KeyReader` is the non-blocking keyboard reader used by the
  command.

## What it does not do

There is no pausing (`GameState.PAUSED` exists but nothing sets it), no
high-score table and no saved games. Hitting the edge of the field never ends
the game; only the body overlapping itself does.

## Running the tests

```
pip install .[test]
pytest
```