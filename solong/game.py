"""Game state and player movement."""

from __future__ import annotations

import enum

from solong.levelmap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, LevelMap

__all__ = [
    "ON_EXIT",
    "FINISHED_EXIT",
    "WON_MESSAGE",
    "Key",
    "Outcome",
    "Game",
    "format_step",
]

ON_EXIT = "O"
"""Tile shown while the player stands on the exit before collecting everything."""

FINISHED_EXIT = "F"
"""Tile shown once the player has reached the exit with everything collected."""

WON_MESSAGE = "\n\033[0;96mYou Won! To exit press any bottom on kyeboard\033[0m"


class Key(enum.IntEnum):
    """Key symbols the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    ESC = 65307


class Outcome(enum.Enum):
    """What a key press did."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    CLOSED = "closed"


_DIRECTIONS = {
    Key.A: (0, -1),
    Key.W: (-1, 0),
    Key.S: (1, 0),
    Key.D: (0, 1),
}


def format_step(n: int) -> str:
    """Return the line announcing step ``n``."""
    return f"Step: {n}"


class Game:
    """A level being played: the tiles, the player and the step count."""

    def __init__(self, level: LevelMap) -> None:
        self.level = level
        self._grid = [list(row) for row in level.rows]
        self.player = level.player
        self._collectibles = level.collectibles
        self.moves = 0
        self.finished = False
        self.closed = False

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple("".join(row) for row in self._grid)

    def tile_at(self, row: int, col: int) -> str:
        return self._grid[row][col]

    def collectibles_left(self) -> int:
        return self._collectibles

    def handle_key(self, keycode: int) -> Outcome:
        """Apply a key press and report what it did."""
        if self.closed or keycode == Key.ESC or self.finished:
            self.closed = True
            return Outcome.CLOSED
        delta = _DIRECTIONS.get(keycode)
        row, col = self.player
        if delta is None:
            return self._move((row, col), valid_key=False)
        return self._move((row + delta[0], col + delta[1]), valid_key=True)

    def _move(self, target: tuple[int, int], valid_key: bool) -> Outcome:
        r, c = target
        tile = self._grid[r][c]
        if tile == WALL:
            return Outcome.BLOCKED
        if tile == COLLECTIBLE:
            self._collectibles -= 1
        on_exit = winning = False
        if tile == EXIT:
            on_exit = self._collectibles > 0
            winning = not on_exit
        elif not valid_key:
            return Outcome.BLOCKED

        old_r, old_c = self.player
        self._grid[r][c] = ON_EXIT if on_exit else PLAYER
        self._grid[old_r][old_c] = EXIT if self._grid[old_r][old_c] == ON_EXIT else FLOOR
        self.player = target
        self.moves += 1
        print(format_step(self.moves))
        if winning:
            self._grid[r][c] = FINISHED_EXIT
            self.finished = True
            print(WON_MESSAGE)
            return Outcome.WON
        return Outcome.MOVED