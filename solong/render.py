"""Drawing a game on screen with pygame, and the window's event loop."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Mapping, Union

import pygame

from solong.game import FINISHED_EXIT, ON_EXIT, Game, Key
from solong.levelmap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL
from solong.xpm import XpmImage, load_xpm

__all__ = [
    "TILE_WIDTH",
    "TILE_HEIGHT",
    "WINDOW_TITLE",
    "TEXTURE_FILES",
    "Renderer",
    "tile_position",
    "image_to_surface",
    "load_textures",
    "run",
]

TILE_WIDTH = 128
TILE_HEIGHT = 128
WINDOW_TITLE = "So_long"

TEXTURE_FILES: dict[str, str] = {
    WALL: "wall.xpm",
    PLAYER: "player.xpm",
    FLOOR: "space.xpm",
    EXIT: "exit.xpm",
    COLLECTIBLE: "little.xpm",
    ON_EXIT: "on_exit.xpm",
    FINISHED_EXIT: "fin_exit.xpm",
}
"""Texture file for each tile that can appear on the map."""

_FRAME_RATE = 30


def tile_position(col: int, row: int) -> tuple[int, int]:
    """Return the pixel position of the top-left corner of a tile."""
    return col * TILE_WIDTH, row * TILE_HEIGHT


def image_to_surface(image: XpmImage) -> pygame.Surface:
    """Turn a decoded XPM image into a surface with per-pixel alpha.

    The top byte of a pixel is read as transparency: 0 is opaque and 0xFF,
    the value given to ``None`` colours, is fully transparent.
    """
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA, 32)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            alpha = 255 - ((value >> 24) & 0xFF)
            surface.set_at(
                (x, y),
                ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha),
            )
    return surface


def load_textures(directory: Union[str, PathLike]) -> dict[str, pygame.Surface]:
    """Load the texture of every tile from ``directory``.

    Raises ``XpmError`` when a texture file is missing or malformed.
    """
    base = Path(directory)
    return {
        tile: image_to_surface(load_xpm(base / filename))
        for tile, filename in TEXTURE_FILES.items()
    }


class Renderer:
    """Draws the tiles of a game using one texture per tile kind."""

    def __init__(self, game: Game, textures: Mapping[str, pygame.Surface]) -> None:
        self.game = game
        self.textures = dict(textures)

    @property
    def size(self) -> tuple[int, int]:
        """Window size in pixels that fits the whole map."""
        return tile_position(self.game.level.width, self.game.level.height)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every tile of the map onto ``surface``."""
        for row, line in enumerate(self.game.rows):
            for col, tile in enumerate(line):
                texture = self.textures.get(tile)
                if texture is not None:
                    surface.blit(texture, tile_position(col, row))


def _keysym(key: int) -> int:
    return Key.ESC if key == pygame.K_ESCAPE else key


def run(game: Game, texture_dir: Union[str, PathLike] = "textures") -> None:
    """Open a window and play ``game`` until it is closed."""
    pygame.init()
    try:
        renderer = Renderer(game, {})
        screen = pygame.display.set_mode(renderer.size)
        pygame.display.set_caption(WINDOW_TITLE)
        renderer.textures = load_textures(texture_dir)
        clock = pygame.time.Clock()
        while not game.closed:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.closed = True
                    break
                if event.type == pygame.KEYUP:
                    game.handle_key(_keysym(event.key))
                    if game.closed:
                        break
            renderer.draw(screen)
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()