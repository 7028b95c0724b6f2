# solong

A small top-down puzzle game. You walk a player around a walled map, pick up
every collectible, and then step onto the exit to win. Every move is counted
and printed to the terminal as `Step: N`.

## Installing

```
pip install .
```

This installs the `so_long` command and its one dependency, pygame.

## Playing

```
so_long maps/level1.ber
```

The map path must start with `maps/` and end with `.ber`; anything else is
refused with a usage message and exit status 1. A file that cannot be read
gives "Failed to initialize game" and exit status 1. A map that is empty or
invalid is reported with the reason, and the command exits with status 0
without opening a window.

Controls (acted on when the key is released):

| Key   | Action      |
|-------|-------------|
| W     | move up     |
| A     | move left   |
| S     | move down   |
| D     | move right  |
| Esc   | quit        |

Walls block movement. Walking onto the exit before every collectible is taken
is allowed: the player stands on it and can walk off again. Stepping onto the
exit with every collectible taken prints a winning message; the next key press
closes the window. Closing the window also ends the game.

## Map format

A map is a plain text file, one row per line, built from these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is accepted only if:

- it holds at least one collectible, exactly one exit and exactly one player;
- it contains no other characters;
- every row has the same length;
- it is surrounded by walls;
- every collectible and the exit can be reached from the player's start.

For example:

```
1111111
1P0C0E1
1111111
```

## Textures

Tiles are drawn on a 128×128-pixel grid from XPM images read from
`./textures/` in the current directory: `wall.xpm`, `space.xpm`,
`player.xpm`, `little.xpm`, `exit.xpm`, `on_exit.xpm` (player standing on the
exit) and `fin_exit.xpm` (exit reached with everything collected). A missing
or malformed texture stops the game with `solong.xpm.XpmError`.

## What is not included

The package ships no maps and no texture images; you supply both.

## Using it as a library

```python
from solong.levelmap import load_map, MapError
from solong.game import Game, Key, Outcome

level = load_map("maps/level1.ber")   # raises MapError if the map is invalid
game = Game(level)
outcome = game.handle_key(Key.D)       # Outcome.MOVED, BLOCKED, WON or CLOSED
print(game.collectibles_left(), game.moves, game.player)
```

Other pieces:

- `solong.levelmap.parse_map(text)` validates map text held in a string.
- `solong.xpm.load_xpm(path)` and `solong.xpm.parse_xpm(text)` decode XPM
  images into an `XpmImage` with `width`, `height` and `pixel(x, y)`.
- `solong.colors.lookup_color(name)` turns an X11 colour name or `#rrggbb`
  into an RGB integer (`-1` for `none`, `0` for unknown names).
- `solong.render.run(game, texture_dir)` opens a pygame window and plays a
  `Game`.

## Running the tests

```
pip install .[test]
pytest
```