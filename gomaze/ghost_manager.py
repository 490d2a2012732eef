"""Creating, updating and drawing the set of ghosts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

from gomaze.board import TILE_SIZE
from gomaze.ghost import Ghost, GhostColor
from gomaze.sprites import load_tile_image

log = logging.getLogger(__name__)

GHOST_STARTS: tuple[tuple[GhostColor, int, int], ...] = (
    (GhostColor.RED, 8, 6),
    (GhostColor.BLUE, 8, 7),
    (GhostColor.ORANGE, 8, 8),
    (GhostColor.PINK, 9, 8),
)


def load_ghost(
    color: GhostColor | str,
    tile_x: int,
    tile_y: int,
    asset_dir: str | PathLike[str] = "assets",
) -> Ghost:
    """Create a ghost at a tile; it has no image if its picture cannot be loaded."""
    color = GhostColor(color)
    ghost = Ghost(color=color, x=float(tile_x * TILE_SIZE), y=float(tile_y * TILE_SIZE))
    path = Path(asset_dir) / f"{color.value}-ghost.png"
    try:
        ghost.image = load_tile_image(path)
    except (OSError, ValueError) as exc:
        log.warning("Could not load ghost image for %s: %s", color.value, exc)
    return ghost


@dataclass
class GhostManager:
    """Holds every ghost in play."""

    ghosts: list[Ghost] = field(default_factory=list)

    def init_ghosts(self, asset_dir: str | PathLike[str] = "assets") -> None:
        self.ghosts = [load_ghost(color, x, y, asset_dir) for color, x, y in GHOST_STARTS]

    def update(self, pacman_x: float, pacman_y: float) -> None:
        for ghost in self.ghosts:
            ghost.update(pacman_x, pacman_y)

    def draw(self, screen: Any) -> None:
        for ghost in self.ghosts:
            ghost.draw(screen)