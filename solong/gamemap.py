"""Loading and validating game maps.

A map is a rectangle of characters: ``1`` walls, ``0`` floor, ``P`` the
player, ``E`` the exit, ``C`` collectibles and ``X`` enemies. It must be
closed by walls, hold exactly one player and one exit and at least one
collectible, and the exit and every collectible must be reachable from the
player without walking through walls or enemies.
"""

from dataclasses import dataclass, field

from .linereader import LineReader

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "X"

MAX_ROWS = 99
DEFAULT_MAP = "map.ber"


class MapError(ValueError):
    """Raised when a map cannot be read or is not a valid playing field."""


@dataclass
class GameMap:
    """A validated map. Tiles are addressed by ``(row, col)`` pairs."""

    rows: list
    player: tuple
    exit: tuple
    collectibles: int
    enemies: list = field(default_factory=list)

    @property
    def width(self):
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self):
        return len(self.rows)

    def __getitem__(self, position):
        row, col = position
        return self.rows[row][col]

    def __setitem__(self, position, tile):
        row, col = position
        self.rows[row][col] = tile

    def positions(self):
        """Yield every ``((row, col), tile)`` pair in row-major order."""
        for row_index, row in enumerate(self.rows):
            for col_index, tile in enumerate(row):
                yield (row_index, col_index), tile

    def __str__(self):
        return "\n".join("".join(row) for row in self.rows)


def read_lines(path=DEFAULT_MAP):
    """Read the lines of a map file, without their line endings."""
    try:
        with open(path, "rb") as stream:
            return [line.rstrip("\n") for line in LineReader(stream)]
    except OSError as exc:
        raise MapError(f"cannot read map {path}: {exc}") from exc


def check_walls(rows):
    """Check that rows form a rectangle closed by walls.

    Returns ``(width, height)``; raises MapError otherwise.
    """
    rows = [row.rstrip("\n") for row in rows]
    if not rows:
        raise MapError("the map is empty")
    width = len(rows[0])
    if width == 0:
        raise MapError("the map has an empty first row")
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if len(row) != width:
            raise MapError(f"row {index} has width {len(row)}, expected {width}")
        if index in (0, last):
            if any(tile != WALL for tile in row):
                raise MapError(f"row {index} is not entirely wall")
        elif row[0] != WALL or row[-1] != WALL:
            raise MapError(f"row {index} is not closed by walls")
    return width, len(rows)


def flood_fill(rows, start_row, start_col):
    """Return the set of cells reachable from the start cell.

    Walls are never entered. Enemy cells are reached but not walked through.
    """
    reached = set()
    stack = [(start_row, start_col)]
    while stack:
        row, col = stack.pop()
        if (row, col) in reached:
            continue
        if not (0 <= row < len(rows) and 0 <= col < len(rows[row])):
            continue
        tile = rows[row][col]
        if tile == WALL:
            continue
        reached.add((row, col))
        if tile == ENEMY:
            continue
        stack.extend(((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)))
    return reached


def _find(rows, wanted):
    return [
        (row_index, col_index)
        for row_index, row in enumerate(rows)
        for col_index, tile in enumerate(row)
        if tile == wanted
    ]


def parse_map(lines):
    """Validate the lines of a map and build a GameMap from them."""
    rows = [line.rstrip("\n") for line in lines]
    if len(rows) > MAX_ROWS:
        raise MapError(f"the map has {len(rows)} rows, at most {MAX_ROWS} are allowed")
    check_walls(rows)

    players = _find(rows, PLAYER)
    if len(players) != 1:
        raise MapError(f"expected exactly one player, found {len(players)}")
    exits = _find(rows, EXIT)
    if len(exits) != 1:
        raise MapError(f"expected exactly one exit, found {len(exits)}")
    collectibles = _find(rows, COLLECTIBLE)
    if not collectibles:
        raise MapError("the map has no collectibles")

    player, exit_ = players[0], exits[0]
    reachable = flood_fill(rows, *player)
    if exit_ not in reachable:
        raise MapError("the exit cannot be reached")
    unreachable = [cell for cell in collectibles if cell not in reachable]
    if unreachable:
        raise MapError(f"collectibles cannot be reached at {unreachable}")

    return GameMap(
        rows=[list(row) for row in rows],
        player=player,
        exit=exit_,
        collectibles=len(collectibles),
        enemies=_find(rows, ENEMY),
    )


def load_map(path=DEFAULT_MAP):
    """Read and validate the map stored in path."""
    return parse_map(read_lines(path))