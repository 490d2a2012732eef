"""Apples placed on the maze and collected by the player."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from gomaze.board import TILE_SIZE, Maze, Tile

APPLE_COLOR = (255, 0, 0, 255)


def _offsets(r: float) -> Iterator[float]:
    """Yield -r, -r+1, ... up to and including r where reached."""
    steps = math.floor(2 * r) if r >= 0 else -1
    for i in range(steps + 1):
        yield -r + i


def draw_circle(screen: Any, cx: float, cy: float, r: float, color: Any) -> None:
    """Plot a filled circle pixel by pixel with ``screen.set_at``."""
    for dy in _offsets(r):
        for dx in _offsets(r):
            if dx * dx + dy * dy <= r * r:
                screen.set_at((int(cx + dx), int(cy + dy)), color)


@dataclass
class Apple:
    """An apple at a tile position."""

    x: int
    y: int
    eaten: bool = False

    def collect(self) -> None:
        self.eaten = True

    @property
    def center(self) -> tuple[float, float]:
        return (
            self.x * TILE_SIZE + TILE_SIZE / 2,
            self.y * TILE_SIZE + TILE_SIZE / 2,
        )

    def draw(self, screen: Any) -> None:
        if self.eaten:
            return
        cx, cy = self.center
        draw_circle(screen, cx, cy, TILE_SIZE * 0.2, APPLE_COLOR)


@dataclass
class AppleManager:
    """Holds every apple on the board."""

    apples: list[Apple] = field(default_factory=list)

    def init_apples(self, maze: Maze) -> None:
        self.apples = [
            Apple(x, y)
            for y, row in enumerate(maze)
            for x, tile in enumerate(row)
            if tile == Tile.APPLE
        ]

    def draw(self, screen: Any) -> None:
        for apple in self.apples:
            apple.draw(screen)