"""Game state: moving the player, collecting items and reaching the exit."""

from enum import Enum

from .gamemap import COLLECTIBLE, ENEMY, EXIT, FLOOR, WALL

KEY_ESCAPE = 65307


class Direction(Enum):
    """A step the player can take, with its key and label."""

    UP = ("w", -1, 0, "up")
    LEFT = ("a", 0, -1, "left")
    DOWN = ("s", 1, 0, "down")
    RIGHT = ("d", 0, 1, "right")

    def __init__(self, key, drow, dcol, label):
        self.key = key
        self.drow = drow
        self.dcol = dcol
        self.label = label

    @property
    def keycode(self):
        return ord(self.key)


class Outcome(Enum):
    """State of the game after an action."""

    CONTINUE = "continue"
    WIN = "win"
    LOSE = "lose"
    QUIT = "quit"


_BY_KEYCODE = {direction.keycode: direction for direction in Direction}


def direction_for_key(keycode):
    """Return the Direction bound to keycode, or None."""
    return _BY_KEYCODE.get(keycode)


class Game:
    """A game in progress on a GameMap.

    The map is changed in place as collectibles are picked up. Messages
    are passed to announce, which prints by default.
    """

    def __init__(self, game_map, announce=print):
        self.map = game_map
        self.position = game_map.player
        self.collectibles = game_map.collectibles
        self.moves = 0
        self.facing = Direction.DOWN
        self.outcome = Outcome.CONTINUE
        self._announce = announce

    @property
    def finished(self):
        return self.outcome is not Outcome.CONTINUE

    def move(self, direction):
        """Take one step in direction and return the resulting Outcome.

        Every attempt counts as a move, including bumping into a wall.
        """
        if self.finished:
            raise RuntimeError("the game is over")
        self.moves += 1
        self.facing = direction
        row, col = self.position
        target = (row + direction.drow, col + direction.dcol)
        tile = self.map[target]
        if tile == WALL:
            return self.outcome
        self.position = target
        if tile == ENEMY:
            self.outcome = Outcome.LOSE
            self._announce("You lose!")
        elif tile == COLLECTIBLE:
            self.collectibles -= 1
            self.map[target] = FLOOR
            self._announce(f"Collectibles left: {self.collectibles}")
        elif tile == EXIT and self.collectibles == 0:
            self.outcome = Outcome.WIN
            self._announce("You win!")
        return self.outcome

    def handle_key(self, keycode):
        """React to a key press and return the resulting Outcome."""
        if keycode == KEY_ESCAPE:
            self.outcome = Outcome.QUIT
            self._announce(f"Window closed with keycode: {keycode}")
            return self.outcome
        direction = direction_for_key(keycode)
        if direction is None:
            return self.outcome
        outcome = self.move(direction)
        if outcome is Outcome.CONTINUE:
            self._announce(direction.label)
        return outcome