# solong

A small tile-based puzzle game. You walk through a walled map, pick up every
collectible and then reach the exit. Stepping onto an enemy ends the game.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Playing

```
solong [MAP]
```

`MAP` defaults to `map.ber` in the current directory. The sprites are read
from an `img/` directory in the current directory. Each sprite is looked up by
name with the extension `.xpm`, `.png` or `.bmp`, tried in that order:

| Name       | Used for                   |
|------------|----------------------------|
| `pl`       | player facing down         |
| `pl-back`  | player facing up           |
| `pl-left`  | player facing left         |
| `pl-right` | player facing right        |
| `en`, `en1`| the two enemy frames       |
| `tile`     | floor                      |
| `exit`     | exit                       |
| `obj`      | collectible                |
| `bg`       | background under each cell |

Each map cell is drawn as a 100×100 pixel square. If the map is invalid the
command prints `Error` and exits with status 1. If a sprite is missing it
prints `Failed to load image` and exits with status 1.

Controls:

| Key | Action     |
|-----|------------|
| W   | move up    |
| A   | move left  |
| S   | move down  |
| D   | move right |
| Esc | quit       |

Closing the window also quits. Every key press in a direction counts as a
move, bumping into a wall included. The move counter is drawn in the top-left
corner of the window. The terminal shows the direction of each move and, on
each pickup, the number of collectibles still left. It also shows
`You win!` or `You lose!` when the game ends. Enemies stay in place and
alternate between their two frames.

## Map format

A map is a rectangle of characters, one row per line:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |
| `X`  | enemy        |

`solong.gamemap.parse_map` raises `MapError` in any of these cases:

- the map has more than 99 rows;
- its rows differ in length;
- it is not closed by walls on every side;
- it does not hold exactly one player and exactly one exit;
- it holds no collectible;
- the exit or any collectible cannot be reached from the player. Walls block
  movement, and an enemy cell cannot be walked through.

```
11111
1P0C1
10X01
1E001
11111
```

## Using the library

The map loader and the game rules work without a window:

```python
from solong.gamemap import load_map, MapError
from solong.game import Game, Direction, Outcome

try:
    game_map = load_map("map.ber")
except MapError as exc:
    print("bad map:", exc)
else:
    game = Game(game_map, announce=print)
    outcome = game.move(Direction.RIGHT)
    print(outcome, game.moves, game.position, game.collectibles)
```

- `Game.move(direction)` returns an `Outcome`: `CONTINUE`, `WIN` or `LOSE`.
- `Game.handle_key(keycode)` accepts the key codes of `w`, `a`, `s` and `d`,
  and `solong.game.KEY_ESCAPE`, which gives `Outcome.QUIT`.
- `GameMap` holds the tile rows, the player and exit positions as
  `(row, col)` pairs, the collectible count and the enemy positions.
- `solong.render.Renderer` draws a `Game` onto any pygame surface.
- `solong.render.load_sprites(directory)` loads the sprites listed above.

## Helpers

The package also carries small helper modules:

- `solong.chars`: ASCII classification (`isalpha`, `isdigit`, ...), case
  conversion, `atoi` and `itoa`.
- `solong.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr`
  and `memcmp` on `bytearray` and bytes-like objects.
- `solong.strings`: bounded string routines (`strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, ...) that return indexes instead of pointers, plus `substr`,
  `strtrim`, `split`, `strmapi` and `striteri`.
- `solong.printf`: `sprintf` and `printf` with the conversions `c s p d i u x X %`.
- `solong.linereader`: `LineReader` reads lines from a file descriptor or a
  stream. `get_next_line(fd)` keeps separate pending data for each descriptor.
- `solong.linkedlist`: `LinkedList` and `Node`, a singly linked list.
- `solong.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream, standard output by default.