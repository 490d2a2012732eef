"""Loading images scaled to fit a single maze tile."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

import pygame

from gomaze.board import TILE_SIZE


def load_tile_image(path: str | PathLike[str]) -> pygame.Surface:
    """Load an image and fit it, centred and aspect-preserving, into one tile.

    Raises FileNotFoundError when the file is missing and ValueError when it
    cannot be decoded as an image.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"no image file at {path}")
    try:
        source = pygame.image.load(str(path))
    except pygame.error as exc:
        raise ValueError(f"cannot decode image {path}: {exc}") from exc

    width, height = source.get_size()
    if width == 0 or height == 0:
        raise ValueError(f"image {path} is empty")

    scale = TILE_SIZE / max(width, height)
    scaled_w = max(1, round(width * scale))
    scaled_h = max(1, round(height * scale))
    scaled = pygame.transform.scale(source, (scaled_w, scaled_h))

    tile = pygame.Surface((TILE_SIZE, TILE_SIZE), pygame.SRCALPHA)
    offset = (round((TILE_SIZE - width * scale) / 2), round((TILE_SIZE - height * scale) / 2))
    tile.blit(scaled, offset)
    return tile