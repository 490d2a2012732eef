# gomaze

gomaze is a small arcade game played on a fixed, tile-based maze. You steer
the yellow hero through the corridors and eat the apples. Four ghosts move
around the board while you play:

- the **red** ghost chases you: whenever it sits exactly on a tile it picks
  the open neighbouring tile closest to yours, never turning straight back,
  and moves one pixel every second frame;
- the **pink** ghost wanders from tile to tile in random directions, never
  turning straight back, and moves one pixel every third frame;
- the **blue** and **orange** ghosts jitter about at random by a couple of
  pixels each frame.

## Installing

```
pip install .
```

This also installs pygame, which draws the game window. For the tests:

```
pip install .[test]
pytest
```

## Playing

Start the game from the directory that holds the `assets` folder:

```
gomaze
```

or point it at another folder of pictures:

```
gomaze --assets path/to/pictures
```

The game looks for these pictures in that folder:

- `yellow-pacman.png` for the hero. The game exits with an error message
  if it is missing or cannot be read.
- `red-ghost.png`, `blue-ghost.png`, `orange-ghost.png` and
  `pink-ghost.png` for the ghosts. If one of these is missing or cannot be
  read, a warning is logged and that ghost still moves, but it is not drawn.

Each picture is scaled to fit one tile and is centred in it, keeping its
proportions. The window can be resized; the board is scaled to fill it. The
game runs at 60 frames per second until the window is closed.

### Controls

| Key                | Move  |
|--------------------|-------|
| Up arrow or `W`    | up    |
| Down arrow or `S`  | down  |
| Left arrow or `A`  | left  |
| Right arrow or `D` | right |

If several keys are held, up wins over down, down over left, and left over
right. Hold a key to keep moving: the hero moves one tile for every ten
frames the key is held, and after a frame with no key held the next press
moves at once. Walls stop you, and you collect an apple by stepping onto its
tile.

### What the game does not do

There is no score, no lives and no end: touching a ghost has no effect, and
eating every apple does not finish the level. Ghosts do not eat apples, and
the blue and orange ghosts are not stopped by walls.

## Using the pieces in code

The game logic does not need a window:

- `gomaze.board.is_walkable(maze, x, y)` tells you whether a tile lies inside
  the maze and is not a wall. `gomaze.board.MAZE` is the built-in board and
  `gomaze.board.Tile` names its cell kinds (`WALL`, `PATH`, `APPLE`).
- `gomaze.board.pixel_to_tile(value)` gives the tile index that holds the
  centre of a tile-sized sprite whose corner is at pixel `value`.
- `gomaze.apple.AppleManager().init_apples(maze)` places an `Apple` on every
  apple tile of a maze; `Apple.collect()` marks it eaten.
- `gomaze.ghost.Ghost(color, x, y)` is a ghost at a pixel position;
  `Ghost.update(pacman_x, pacman_y)` moves it by one frame according to its
  `GhostColor`. Pass `rng=random.Random(seed)` for repeatable movement.
- `gomaze.ghost_manager.load_ghost(color, tile_x, tile_y, asset_dir)` and
  `GhostManager.init_ghosts(asset_dir)` create ghosts at their start tiles.
- `gomaze.sprites.load_tile_image(path)` loads a picture fitted to one tile.
- `gomaze.pacman.Pacman` holds the hero's position and heading;
  `rotation_angle()` gives the clockwise rotation in degrees for the heading.
- `gomaze.game.Game.update(direction)` moves the game forward by one frame.
  `direction` is an `(dx, dy)` step, or `None` when no key is held.
  `gomaze.game.direction_from_keys(pressed)` turns pygame's held-key state
  into such a step, and `gomaze.game.run(asset_dir)` opens the window.