"""Level maps: reading a ``.ber`` file, validating it and checking it can be won.

A map is a rectangle of tiles: ``1`` wall, ``0`` floor, ``C`` collectible,
``E`` exit and ``P`` the player. It must be closed in by walls, hold exactly
one exit, exactly one player and at least one collectible, and every
collectible and the exit must be reachable from the player.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

__all__ = [
    "WALL",
    "FLOOR",
    "COLLECTIBLE",
    "EXIT",
    "PLAYER",
    "ERROR_BANNER",
    "EMPTY_MESSAGE",
    "LOADING_MESSAGE",
    "NOT_SURROUNDED_MESSAGE",
    "IMPASSABLE_MESSAGE",
    "MapError",
    "LevelMap",
    "read_map_lines",
    "parse_map",
    "load_map",
    "validate_elements",
    "check_rectangular",
    "is_passable",
]

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"

ERROR_BANNER = "\n\033[6;91mError Error Error!\033[0m"
EMPTY_MESSAGE = ERROR_BANNER + "\n" + "\n\033[0;94mThe file is empty or not exist.\033[0m"
LOADING_MESSAGE = "\n\033[0;92mLoading!..\033[0m\n"
NOT_SURROUNDED_MESSAGE = "\033[6;91mError\nThe map is not surrounded by walls\033[0m"
IMPASSABLE_MESSAGE = "\033[6;91mError\nImpossibale to pass\033[0m"

INVALID_CHARACTERS_MESSAGE = "Error\nInvalid characters"
NO_COLLECTIBLE_MESSAGE = "Error\nThere is no collectible"
NO_EXIT_MESSAGE = "Error\nThere is no exit"
MANY_EXITS_MESSAGE = "Error\nThere must be only one exit"
NO_PLAYER_MESSAGE = "Error\nThere is no player"
MANY_PLAYERS_MESSAGE = "Error\nOnly one player on map "
NOT_RECTANGULAR_MESSAGE = "Error\nMap is not rectangular"

Position = tuple[int, int]


class MapError(Exception):
    """Raised when a map file is empty or describes an invalid level."""


@dataclass(frozen=True)
class LevelMap:
    """A validated level: its rows, the player's (row, col) and the collectible count."""

    rows: tuple[str, ...]
    player: Position
    collectibles: int

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0


def _split_lines(text: str) -> list[str]:
    """Split text into lines the way a line reader sees them.

    A final newline does not start another line; blank lines inside the
    text are kept as empty rows.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_map_lines(path: Union[str, PathLike]) -> list[str]:
    """Read the rows of a map file, without their line endings.

    Raises ``MapError`` when the file holds no lines at all; ``OSError``
    passes through when the file cannot be read.
    """
    text = Path(path).read_bytes().decode("latin-1")
    rows = _split_lines(text)
    if not rows:
        raise MapError(EMPTY_MESSAGE)
    return rows


def validate_elements(rows: list[str]) -> tuple[int, Position]:
    """Check the tiles of a map and count its elements.

    Returns the number of collectibles and the player's (row, col).
    """
    collectibles = exits = players = 0
    start: Position = (0, 0)
    for r, row in enumerate(rows):
        for c, tile in enumerate(row):
            if tile == COLLECTIBLE:
                collectibles += 1
            elif tile == EXIT:
                exits += 1
            elif tile == PLAYER:
                players += 1
                start = (r, c)
            elif tile not in (WALL, FLOOR):
                raise MapError(INVALID_CHARACTERS_MESSAGE)
    if collectibles == 0:
        raise MapError(NO_COLLECTIBLE_MESSAGE)
    if exits == 0:
        raise MapError(NO_EXIT_MESSAGE)
    if exits > 1:
        raise MapError(MANY_EXITS_MESSAGE)
    if players == 0:
        raise MapError(NO_PLAYER_MESSAGE)
    if players > 1:
        raise MapError(MANY_PLAYERS_MESSAGE)
    return collectibles, start


def check_rectangular(rows: list[str]) -> None:
    """Check that all rows have one length and the border is all walls."""
    if not rows:
        raise MapError(EMPTY_MESSAGE)
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError(NOT_RECTANGULAR_MESSAGE)
    if width == 0:
        return
    edges_closed = (
        set(rows[0]) == {WALL}
        and set(rows[-1]) == {WALL}
        and all(row[0] == WALL and row[-1] == WALL for row in rows)
    )
    if not edges_closed:
        raise MapError(NOT_SURROUNDED_MESSAGE)


def is_passable(rows: list[str], start: Position, collectibles: int) -> bool:
    """Tell whether every collectible and the exit can be reached from start.

    The exit does not block the way: tiles behind it count as reachable.
    """
    seen: set[Position] = set()
    queue: deque[Position] = deque([start])
    reached = 0
    exit_found = False
    while queue:
        r, c = queue.popleft()
        if (r, c) in seen or not (0 <= r < len(rows) and 0 <= c < len(rows[r])):
            continue
        tile = rows[r][c]
        if tile == WALL:
            continue
        seen.add((r, c))
        if tile == EXIT:
            exit_found = True
        elif tile == COLLECTIBLE:
            reached += 1
        queue.extend(((r + 1, c), (r, c + 1), (r - 1, c), (r, c - 1)))
    return exit_found and reached == collectibles


def _build_level(rows: list[str]) -> LevelMap:
    if not rows:
        raise MapError(EMPTY_MESSAGE)
    collectibles, start = validate_elements(rows)
    check_rectangular(rows)
    if not is_passable(rows, start, collectibles):
        raise MapError(IMPASSABLE_MESSAGE)
    return LevelMap(tuple(rows), start, collectibles)


def parse_map(text: str) -> LevelMap:
    """Validate the text of a map and return the level it describes."""
    return _build_level(_split_lines(text))


def load_map(path: Union[str, PathLike]) -> LevelMap:
    """Read and validate the map file at ``path``."""
    return _build_level(read_map_lines(path))