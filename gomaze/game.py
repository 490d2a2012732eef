"""Game state, per-frame update, drawing and the window loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Optional

import pygame

from gomaze.apple import AppleManager
from gomaze.board import (
    FLOOR_COLOR,
    MAZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_SIZE,
    WALL_COLOR,
    Maze,
    Tile,
    is_walkable,
)
from gomaze.ghost_manager import GhostManager
from gomaze.pacman import Pacman, load_pacman

TICKS_PER_SECOND = 60
WINDOW_TITLE = "Goman"

Direction = Optional[tuple[int, int]]

_KEY_DIRECTIONS: tuple[tuple[tuple[int, int], tuple[int, int]], ...] = (
    ((pygame.K_UP, pygame.K_w), (0, -1)),
    ((pygame.K_DOWN, pygame.K_s), (0, 1)),
    ((pygame.K_LEFT, pygame.K_a), (-1, 0)),
    ((pygame.K_RIGHT, pygame.K_d), (1, 0)),
)


def direction_from_keys(pressed: Any) -> Direction:
    """Map pressed keys to a direction; up, down, left, right take priority in that order."""
    for keys, direction in _KEY_DIRECTIONS:
        if any(pressed[key] for key in keys):
            return direction
    return None


@dataclass
class Game:
    """The player's tile position, apples, ghosts and movement timing."""

    pacman: Optional[Pacman] = None
    maze: Maze = MAZE
    tile_x: int = 1
    tile_y: int = 1
    apples: AppleManager = field(default_factory=AppleManager)
    ghosts: GhostManager = field(default_factory=GhostManager)
    move_delay: int = 10
    move_counter: int = 0

    def update(self, direction: Direction) -> None:
        """Advance one frame with the player pushing ``direction`` (or None)."""
        if self.pacman is not None:
            self.ghosts.update(self.pacman.x, self.pacman.y)
        else:
            self.ghosts.update(self.tile_x * TILE_SIZE, self.tile_y * TILE_SIZE)

        moving = direction is not None
        self.move_counter += 1

        if moving and self.move_counter >= self.move_delay:
            self.move_counter = 0
            new_x, new_y = self.tile_x + direction[0], self.tile_y + direction[1]
            if is_walkable(self.maze, new_x, new_y):
                self.tile_x, self.tile_y = new_x, new_y

        if not moving:
            self.move_counter = self.move_delay

        if self.pacman is not None:
            self.pacman.x = float(self.tile_x * TILE_SIZE)
            self.pacman.y = float(self.tile_y * TILE_SIZE)
            self.pacman.moving = moving
            if moving and direction != (0, 0):
                self.pacman.dir_x, self.pacman.dir_y = direction

        for apple in self.apples.apples:
            if (apple.x, apple.y) == (self.tile_x, self.tile_y) and not apple.eaten:
                apple.collect()

    def draw(self, screen: pygame.Surface) -> None:
        for y, row in enumerate(self.maze):
            for x, tile in enumerate(row):
                rect = pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
                if tile == Tile.WALL:
                    pygame.draw.rect(screen, WALL_COLOR, rect)
                elif tile in (Tile.PATH, Tile.APPLE):
                    pygame.draw.rect(screen, FLOOR_COLOR, rect)
        self.apples.draw(screen)
        self.ghosts.draw(screen)
        if self.pacman is not None:
            self.pacman.draw(screen)


def _new_game(pacman: Pacman, asset_dir: Path) -> Game:
    game = Game(pacman=pacman)
    game.apples.init_apples(game.maze)
    game.ghosts.init_ghosts(asset_dir)
    return game


def run(asset_dir: str | PathLike[str] = "assets") -> None:
    """Open the window and play until it is closed."""
    assets = Path(asset_dir)
    try:
        pacman = load_pacman(assets / "yellow-pacman.png", float(TILE_SIZE), float(TILE_SIZE))
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Failed to load Pacman image: {exc}") from exc
    game = _new_game(pacman, assets)

    pygame.init()
    try:
        window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        canvas = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
            game.update(direction_from_keys(pygame.key.get_pressed()))
            canvas.fill((0, 0, 0))
            game.draw(canvas)
            window.blit(pygame.transform.scale(canvas, window.get_size()), (0, 0))
            pygame.display.flip()
            clock.tick(TICKS_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gomaze", description="A small maze chase game.")
    parser.add_argument("--assets", default="assets", help="directory holding the sprite images")
    args = parser.parse_args(argv)
    run(args.assets)
    return 0