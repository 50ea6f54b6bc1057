"""Drawing the game with pygame, and the command that runs it."""

import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from .game import KEY_ESCAPE, Direction, Game, Outcome, direction_for_key
from .gamemap import COLLECTIBLE, DEFAULT_MAP, ENEMY, EXIT, FLOOR, PLAYER, MapError, load_map

TILE_SIZE = 100
ANIMATION_PERIOD = 400000
FRAMES_PER_SECOND = 60
WINDOW_TITLE = "so_long"
IMAGE_DIRECTORY = "img"
TEXT_COLOR = (255, 255, 255)

_EXTENSIONS = (".xpm", ".png", ".bmp")
_PLAYER_STEMS = ("pl", "pl-back", "pl-left", "pl-right")
_ENEMY_STEMS = ("en", "en1")
_PLAYER_INDEX = {
    Direction.DOWN: 0,
    Direction.UP: 1,
    Direction.LEFT: 2,
    Direction.RIGHT: 3,
}


@dataclass
class Sprites:
    """Images for every kind of tile.

    player holds the down, up, left and right facing images, in that order;
    enemy holds the two animation frames.
    """

    player: tuple
    enemy: tuple
    tile: pygame.Surface
    exit: pygame.Surface
    collectible: pygame.Surface
    background: pygame.Surface

    def player_facing(self, direction):
        """Return the player image for a direction."""
        return self.player[_PLAYER_INDEX[direction]]


def _load_image(directory, stem):
    for extension in _EXTENSIONS:
        path = directory / f"{stem}{extension}"
        if path.is_file():
            try:
                image = pygame.image.load(str(path))
            except pygame.error:
                continue
            if pygame.display.get_surface() is not None:
                image = image.convert()
            return image
    raise FileNotFoundError(f"Failed to load image {stem} from {directory}")


def load_sprites(directory=IMAGE_DIRECTORY):
    """Load every sprite from directory; raise FileNotFoundError if one is missing."""
    directory = Path(directory)
    return Sprites(
        player=tuple(_load_image(directory, stem) for stem in _PLAYER_STEMS),
        enemy=tuple(_load_image(directory, stem) for stem in _ENEMY_STEMS),
        tile=_load_image(directory, "tile"),
        exit=_load_image(directory, "exit"),
        collectible=_load_image(directory, "obj"),
        background=_load_image(directory, "bg"),
    )


class Renderer:
    """Draws a Game onto a surface, one tile_size square per map cell."""

    def __init__(self, surface, game, sprites, tile_size=TILE_SIZE, period=ANIMATION_PERIOD):
        if period < 2:
            raise ValueError(f"animation period must be at least 2, got {period}")
        self.surface = surface
        self.game = game
        self.sprites = sprites
        self.tile_size = tile_size
        self.period = period
        self.frame = 0
        self._font = None

    def _pixel(self, position):
        row, col = position
        return col * self.tile_size, row * self.tile_size

    def _blit(self, image, position):
        self.surface.blit(image, self._pixel(position))

    def draw_all(self):
        """Draw the whole map as it was loaded."""
        sprites = self.sprites
        for position, tile in self.game.map.positions():
            self._blit(sprites.background, position)
            if tile == FLOOR:
                self._blit(sprites.tile, position)
            elif tile == COLLECTIBLE:
                self._blit(sprites.collectible, position)
            elif tile == EXIT:
                self._blit(sprites.exit, position)
            elif tile == PLAYER:
                self._blit(sprites.player[0], position)
            elif tile == ENEMY:
                self._blit(sprites.enemy[0], position)

    def _draw_counter(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 18)
        self.surface.blit(self._font.render("Moves: ", True, TEXT_COLOR), (10, 10))
        self.surface.blit(self._font.render(str(self.game.moves), True, TEXT_COLOR), (60, 10))

    def draw_move(self, previous):
        """Redraw after a move from previous: the counter, the vacated cell and the player."""
        sprites = self.sprites
        self.surface.blit(sprites.background, (0, 0))
        self._draw_counter()
        self._blit(sprites.background, previous)
        self._blit(sprites.tile, previous)
        current = self.game.position
        self._blit(sprites.background, current)
        self._blit(sprites.tile, current)
        self._blit(sprites.player_facing(self.game.facing), current)

    def animate(self):
        """Advance the animation clock by one frame.

        Halfway through a period the enemies show their first frame, at the
        end of it their second. Returns the frame index drawn, or None.
        """
        self.frame += 1
        drawn = None
        if self.frame in (self.period // 2, self.period):
            drawn = 0 if self.frame < self.period else 1
            for position in self.game.map.enemies:
                self._blit(self.sprites.background, position)
                self._blit(self.sprites.tile, position)
                self._blit(self.sprites.enemy[drawn], position)
        if self.frame >= self.period:
            self.frame = 0
        return drawn


def _keycode(event_key):
    return KEY_ESCAPE if event_key == pygame.K_ESCAPE else event_key


def main(argv=None):
    """Run the game on the map named in argv (map.ber by default)."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else DEFAULT_MAP
    try:
        game_map = load_map(path)
    except MapError:
        print("Error")
        return 1
    print(game_map)
    row, col = game_map.player
    print(f"x: {col}\ny: {row}")
    print(f"x: {game_map.width}\ny: {game_map.height}")

    game = Game(game_map)
    try:
        pygame.init()
        try:
            window = pygame.display.set_mode(
                (game_map.width * TILE_SIZE, game_map.height * TILE_SIZE)
            )
        except pygame.error:
            print("Failed to create window")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            sprites = load_sprites(IMAGE_DIRECTORY)
        except FileNotFoundError:
            print("Failed to load image")
            return 1
        renderer = Renderer(window, game, sprites, period=FRAMES_PER_SECOND)
        renderer.draw_all()
        clock = pygame.time.Clock()
        while not game.finished:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                keycode = _keycode(event.key)
                previous = game.position
                outcome = game.handle_key(keycode)
                if outcome is Outcome.CONTINUE and direction_for_key(keycode) is not None:
                    renderer.draw_move(previous)
                if game.finished:
                    break
            renderer.animate()
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
        return 0
    finally:
        pygame.quit()