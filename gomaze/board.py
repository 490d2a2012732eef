"""Screen geometry, the maze layout and tile helpers."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

SCREEN_WIDTH = 640 * 2
SCREEN_HEIGHT = 480 * 2
TILE_SIZE = 32 * 2

WALL_COLOR = (200, 200, 200, 255)
FLOOR_COLOR = (100, 100, 100, 255)


class Tile(IntEnum):
    """Kinds of maze cells."""

    WALL = 0
    PATH = 1
    APPLE = 2


Maze = Sequence[Sequence[int]]

MAZE: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 2, 2, 2, 0, 2, 2, 2, 2, 2, 2, 2, 2, 2, 0, 2, 2, 2, 2, 0),
    (0, 2, 0, 2, 0, 2, 0, 0, 0, 2, 0, 0, 0, 2, 0, 2, 0, 2, 2, 0),
    (0, 2, 0, 2, 2, 2, 2, 0, 0, 2, 0, 0, 2, 2, 2, 2, 0, 2, 2, 0),
    (0, 2, 0, 0, 0, 0, 2, 0, 0, 2, 0, 0, 2, 0, 0, 0, 0, 0, 2, 0),
    (0, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 0),
    (0, 2, 0, 0, 0, 0, 2, 0, 0, 1, 0, 0, 2, 2, 0, 0, 0, 0, 2, 0),
    (0, 2, 2, 2, 2, 2, 2, 0, 1, 1, 1, 0, 2, 2, 2, 2, 2, 2, 2, 0),
    (0, 2, 0, 0, 0, 0, 2, 0, 0, 1, 0, 0, 2, 0, 0, 0, 0, 0, 2, 0),
    (0, 2, 2, 2, 2, 2, 2, 0, 0, 0, 0, 0, 2, 2, 2, 2, 2, 2, 2, 0),
    (0, 2, 0, 2, 0, 0, 0, 0, 2, 0, 0, 2, 0, 0, 0, 0, 2, 0, 2, 0),
    (0, 2, 2, 2, 2, 2, 2, 0, 2, 2, 2, 2, 0, 2, 2, 2, 2, 2, 2, 0),
    (0, 2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2, 0),
    (0, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
)


def is_walkable(maze: Maze, x: int, y: int) -> bool:
    """Return True if (x, y) lies inside the maze and is not a wall."""
    if y < 0 or x < 0 or y >= len(maze) or x >= len(maze[0]):
        return False
    return maze[y][x] != Tile.WALL


def pixel_to_tile(value: float) -> int:
    """Return the tile index whose cell holds the centre of a sprite at ``value``."""
    return int((value + TILE_SIZE / 2) / TILE_SIZE)