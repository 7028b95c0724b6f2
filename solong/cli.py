"""Command line entry point: check the map argument, load it and play."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from solong.game import Game
from solong.levelmap import LOADING_MESSAGE, MapError, load_map, read_map_lines
from solong.render import run

__all__ = [
    "USAGE_MESSAGE",
    "INIT_FAILED_MESSAGE",
    "TEXTURE_DIR",
    "is_map_name",
    "main",
]

USAGE_MESSAGE = "\033[38;5;214mPut ./so_long maps/map?.ber\033[0m"
INIT_FAILED_MESSAGE = "\033[6;91mError\nFailed to initialize game\033[0m"
TEXTURE_DIR = Path("textures")

_MAP_PREFIX = "maps/"
_MAP_SUFFIX = ".ber"


def is_map_name(path: Optional[str]) -> bool:
    """Tell whether ``path`` names a map: ``maps/<name>.ber``."""
    if not path or len(path) < len(_MAP_PREFIX) + len(_MAP_SUFFIX):
        return False
    return path.startswith(_MAP_PREFIX) and path.endswith(_MAP_SUFFIX)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not is_map_name(args[0]):
        print(USAGE_MESSAGE)
        return 1
    path = args[0]
    try:
        read_map_lines(path)
    except OSError:
        print(INIT_FAILED_MESSAGE)
        return 1
    except MapError as exc:
        print(exc)
        return 0
    print(LOADING_MESSAGE)
    try:
        level = load_map(path)
    except OSError:
        print(INIT_FAILED_MESSAGE)
        return 1
    except MapError as exc:
        print(exc)
        return 0
    run(Game(level), TEXTURE_DIR)
    return 0


if __name__ == "__main__":
    sys.exit(main())