"""The player's sprite."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Any

import pygame

from gomaze.board import TILE_SIZE
from gomaze.sprites import load_tile_image

_ANGLES: dict[tuple[int, int], float] = {
    (1, 0): 0.0,
    (0, 1): 90.0,
    (-1, 0): 180.0,
    (0, -1): -90.0,
}


@dataclass
class Pacman:
    """The player's position in pixels, heading and image."""

    x: float
    y: float
    image: Any = None
    moving: bool = False
    dir_x: int = 0
    dir_y: int = 0

    def rotation_angle(self) -> float:
        """Clockwise rotation in degrees for the current heading."""
        return _ANGLES.get((self.dir_x, self.dir_y), 0.0)

    def draw(self, screen: Any) -> None:
        if self.image is None:
            return
        rotated = pygame.transform.rotate(self.image, -self.rotation_angle())
        centre = (self.x + TILE_SIZE / 2, self.y + TILE_SIZE / 2)
        screen.blit(rotated, rotated.get_rect(center=centre))


def load_pacman(path: str | PathLike[str], x: float, y: float) -> Pacman:
    """Create the player at (x, y) with an image fitted to one tile."""
    return Pacman(x=x, y=y, image=load_tile_image(path))