"""Ghosts and their movement strategies."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gomaze.board import MAZE, TILE_SIZE, Maze, is_walkable, pixel_to_tile

DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class GhostColor(str, Enum):
    RED = "red"
    BLUE = "blue"
    PINK = "pink"
    ORANGE = "orange"


@dataclass
class Ghost:
    """A ghost moving in pixel space over a tile maze."""

    color: GhostColor
    x: float
    y: float
    dir_x: int = 0
    dir_y: int = 0
    image: Any = None
    maze: Maze = MAZE
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _move_tick: int = field(default=0, init=False, repr=False)

    @property
    def tile(self) -> tuple[int, int]:
        return pixel_to_tile(self.x), pixel_to_tile(self.y)

    def update(self, pacman_x: float, pacman_y: float) -> None:
        match self.color:
            case GhostColor.RED:
                self._chase(pacman_x, pacman_y)
            case GhostColor.PINK:
                self._tile_random_move()
            case _:
                self._random_move()

    def draw(self, screen: Any) -> None:
        if self.image is None:
            return
        screen.blit(self.image, (self.x, self.y))

    def _tick(self, period: int) -> bool:
        """Advance the movement counter; True when this frame may move."""
        self._move_tick = (self._move_tick + 1) % period
        return self._move_tick == 0

    def _aligned(self) -> bool:
        return int(self.x) % TILE_SIZE == 0 and int(self.y) % TILE_SIZE == 0

    def _open_directions(self) -> list[tuple[int, int]]:
        """Walkable neighbouring directions, excluding turning back."""
        tile_x, tile_y = self.tile
        return [
            (dx, dy)
            for dx, dy in DIRECTIONS
            if is_walkable(self.maze, tile_x + dx, tile_y + dy)
            and not (self.dir_x == -dx and self.dir_y == -dy)
        ]

    def _step(self) -> None:
        self.x += self.dir_x
        self.y += self.dir_y

    def _tile_random_move(self) -> None:
        if not self._tick(3):
            return
        if self._aligned():
            options = self._open_directions()
            self.dir_x, self.dir_y = self.rng.choice(options) if options else (0, 0)
        self._step()

    def _chase(self, pacman_x: float, pacman_y: float) -> None:
        if not self._tick(2):
            return
        if self._aligned():
            tile_x, tile_y = self.tile
            target_x, target_y = pixel_to_tile(pacman_x), pixel_to_tile(pacman_y)
            best = (0, 0)
            min_dist = 999999.0
            for dx, dy in self._open_directions():
                dist = float(abs(tile_x + dx - target_x) + abs(tile_y + dy - target_y))
                if dist < min_dist:
                    min_dist = dist
                    best = (dx, dy)
            self.dir_x, self.dir_y = best
        self._step()

    def _random_move(self) -> None:
        self.x += (self.rng.randrange(3) - 1) * 2
        self.y += (self.rng.randrange(3) - 1) * 2