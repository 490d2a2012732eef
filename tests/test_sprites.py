import pygame
import pytest

from gomaze.board import TILE_SIZE
from gomaze.sprites import load_tile_image

RED = (255, 0, 0, 255)


def _save_png(path, size, color=RED):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return path


def test_output_is_one_tile(tmp_path):
    image = load_tile_image(_save_png(tmp_path / "a.png", (10, 30)))
    assert image.get_size() == (TILE_SIZE, TILE_SIZE)


def test_wide_image_is_centred_vertically(tmp_path):
    image = load_tile_image(_save_png(tmp_path / "wide.png", (32, 16)))
    centre = TILE_SIZE // 2
    assert tuple(image.get_at((centre, centre))) == RED
    assert image.get_at((0, 0)).a == 0
    assert image.get_at((0, TILE_SIZE - 1)).a == 0
    assert tuple(image.get_at((0, centre))) == RED


def test_tall_image_is_centred_horizontally(tmp_path):
    image = load_tile_image(_save_png(tmp_path / "tall.png", (16, 32)))
    centre = TILE_SIZE // 2
    assert tuple(image.get_at((centre, centre))) == RED
    assert image.get_at((0, centre)).a == 0
    assert image.get_at((TILE_SIZE - 1, centre)).a == 0
    assert tuple(image.get_at((centre, 0))) == RED


def test_square_image_fills_tile(tmp_path):
    image = load_tile_image(_save_png(tmp_path / "sq.png", (8, 8)))
    assert tuple(image.get_at((0, 0))) == RED
    assert tuple(image.get_at((TILE_SIZE - 1, TILE_SIZE - 1))) == RED


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tile_image(tmp_path / "missing.png")


def test_undecodable_file_raises(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image at all")
    with pytest.raises(ValueError):
        load_tile_image(bad)