import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from solong.game import Game, Key
from solong.levelmap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, parse_map
from solong.render import (
    TEXTURE_FILES,
    TILE_HEIGHT,
    TILE_WIDTH,
    Renderer,
    image_to_surface,
    load_textures,
    tile_position,
)
from solong.xpm import TRANSPARENT, XpmError, XpmImage

LEVEL_TEXT = "111111\n1P0CE1\n111111\n"

COLOURS = {
    WALL: (255, 0, 0, 255),
    FLOOR: (0, 255, 0, 255),
    PLAYER: (0, 0, 255, 255),
    COLLECTIBLE: (255, 255, 0, 255),
    EXIT: (255, 255, 255, 255),
}

RED_XPM = '"1 1 1 1",\n"a c #FF0000",\n"a"\n'


def _solid(colour):
    surface = pygame.Surface((TILE_WIDTH, TILE_HEIGHT), pygame.SRCALPHA, 32)
    surface.fill(colour)
    return surface


@pytest.fixture
def game():
    return Game(parse_map(LEVEL_TEXT))


@pytest.fixture
def textures():
    return {tile: _solid(colour) for tile, colour in COLOURS.items()}


def test_tile_position_origin_and_steps():
    assert tile_position(0, 0) == (0, 0)
    assert tile_position(1, 0) == (TILE_WIDTH, 0)
    assert tile_position(0, 1) == (0, TILE_HEIGHT)


def test_tile_position_uses_128_pixel_tiles():
    assert tile_position(1, 1) == (128, 128)
    assert tile_position(3, 2) == (384, 256)


def test_image_to_surface_colours_and_alpha():
    image = XpmImage(2, 1, ((0x00FF0000, TRANSPARENT),))
    surface = image_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert surface.get_at((1, 0)).a == 0


def test_load_textures_reads_every_tile(tmp_path):
    for filename in TEXTURE_FILES.values():
        (tmp_path / filename).write_text(RED_XPM)
    loaded = load_textures(tmp_path)
    assert set(loaded) == set(TEXTURE_FILES)
    for surface in loaded.values():
        assert surface.get_size() == (1, 1)
        assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)


def test_load_textures_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        load_textures(tmp_path)


def test_renderer_size_matches_map(game, textures):
    renderer = Renderer(game, textures)
    assert renderer.size == tile_position(6, 3)


def test_draw_places_each_tile(game, textures):
    renderer = Renderer(game, textures)
    surface = pygame.Surface(renderer.size, pygame.SRCALPHA, 32)
    renderer.draw(surface)
    assert tuple(surface.get_at(tile_position(0, 0))) == COLOURS[WALL]
    assert tuple(surface.get_at(tile_position(1, 1))) == COLOURS[PLAYER]
    assert tuple(surface.get_at(tile_position(2, 1))) == COLOURS[FLOOR]
    assert tuple(surface.get_at(tile_position(3, 1))) == COLOURS[COLLECTIBLE]
    assert tuple(surface.get_at(tile_position(4, 1))) == COLOURS[EXIT]


def test_draw_follows_player_moves(game, textures):
    renderer = Renderer(game, textures)
    surface = pygame.Surface(renderer.size, pygame.SRCALPHA, 32)
    game.handle_key(Key.D)
    renderer.draw(surface)
    assert tuple(surface.get_at(tile_position(1, 1))) == COLOURS[FLOOR]
    assert tuple(surface.get_at(tile_position(2, 1))) == COLOURS[PLAYER]