import logging

import pygame
import pytest

from gomaze.board import TILE_SIZE
from gomaze.ghost import GhostColor
from gomaze.ghost_manager import GhostManager, load_ghost


class FakeScreen:
    def __init__(self):
        self.blits = []

    def blit(self, image, position):
        self.blits.append((image, position))


def _save_png(path, size=(20, 20)):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill((0, 0, 255, 255))
    pygame.image.save(surface, str(path))


def test_init_ghosts_without_assets(tmp_path):
    manager = GhostManager()
    manager.init_ghosts(tmp_path)
    assert [g.color for g in manager.ghosts] == [
        GhostColor.RED,
        GhostColor.BLUE,
        GhostColor.ORANGE,
        GhostColor.PINK,
    ]
    assert [(g.x, g.y) for g in manager.ghosts] == [
        (8 * TILE_SIZE, 6 * TILE_SIZE),
        (8 * TILE_SIZE, 7 * TILE_SIZE),
        (8 * TILE_SIZE, 8 * TILE_SIZE),
        (9 * TILE_SIZE, 8 * TILE_SIZE),
    ]
    assert all(g.image is None for g in manager.ghosts)


def test_init_ghosts_loads_available_images(tmp_path):
    _save_png(tmp_path / "red-ghost.png")
    manager = GhostManager()
    manager.init_ghosts(tmp_path)
    red = manager.ghosts[0]
    assert red.image.get_size() == (TILE_SIZE, TILE_SIZE)
    assert manager.ghosts[1].image is None


def test_load_ghost_logs_missing_image(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        ghost = load_ghost("blue", 2, 3, tmp_path)
    assert ghost.color is GhostColor.BLUE
    assert (ghost.x, ghost.y) == (2 * TILE_SIZE, 3 * TILE_SIZE)
    assert "blue" in caplog.text


def test_load_ghost_rejects_unknown_colour(tmp_path):
    with pytest.raises(ValueError):
        load_ghost("green", 1, 1, tmp_path)


def test_update_moves_chasing_ghost(tmp_path):
    manager = GhostManager([load_ghost(GhostColor.RED, 8, 6, tmp_path)])
    ghost = manager.ghosts[0]
    start = (ghost.x, ghost.y)
    manager.update(TILE_SIZE, TILE_SIZE)
    assert (ghost.x, ghost.y) == start
    manager.update(TILE_SIZE, TILE_SIZE)
    assert abs(ghost.x - start[0]) + abs(ghost.y - start[1]) == 1


def test_draw_only_ghosts_with_images(tmp_path):
    _save_png(tmp_path / "pink-ghost.png")
    with_image = load_ghost(GhostColor.PINK, 9, 8, tmp_path)
    without_image = load_ghost(GhostColor.ORANGE, 8, 8, tmp_path)
    manager = GhostManager([with_image, without_image])
    screen = FakeScreen()
    manager.draw(screen)
    assert screen.blits == [(with_image.image, (with_image.x, with_image.y))]