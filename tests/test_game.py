import pytest

from solong.game import KEY_ESCAPE, Direction, Game, Outcome, direction_for_key
from solong.gamemap import parse_map

SIMPLE = ["1111111", "1P0C0E1", "1111111"]
EXIT_FIRST = ["111111", "1PEC01", "111111"]
WITH_ENEMY = ["111111", "1PXCE1", "100001", "111111"]


def make_game(rows):
    messages = []
    return Game(parse_map(rows), announce=messages.append), messages


@pytest.mark.parametrize(
    "keycode, direction",
    [(119, Direction.UP), (97, Direction.LEFT), (115, Direction.DOWN), (100, Direction.RIGHT)],
)
def test_direction_for_key(keycode, direction):
    assert direction_for_key(keycode) is direction
    assert direction.keycode == keycode


def test_direction_for_unknown_key():
    assert direction_for_key(KEY_ESCAPE) is None


def test_move_onto_floor():
    game, _ = make_game(SIMPLE)
    assert game.move(Direction.RIGHT) is Outcome.CONTINUE
    assert game.position == (1, 2)
    assert game.moves == 1
    assert game.facing is Direction.RIGHT


def test_bumping_wall_counts_but_does_not_move():
    game, _ = make_game(SIMPLE)
    start = game.position
    game.move(Direction.UP)
    assert game.position == start
    assert game.moves == 1
    assert game.facing is Direction.UP


def test_collecting_updates_count_and_map():
    game, messages = make_game(SIMPLE)
    before = game.collectibles
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.position == (1, 3)
    assert game.collectibles == before - 1
    assert game.map[(1, 3)] == "0"
    assert messages[-1] == "Collectibles left: 0"


def test_reaching_exit_after_collecting_wins():
    game, messages = make_game(SIMPLE)
    outcomes = [game.move(Direction.RIGHT) for _ in range(4)]
    assert outcomes[-1] is Outcome.WIN
    assert game.finished
    assert messages[-1] == "You win!"


def test_exit_with_items_left_is_just_a_tile():
    game, _ = make_game(EXIT_FIRST)
    assert game.move(Direction.RIGHT) is Outcome.CONTINUE
    assert game.position == game.map.exit
    assert game.move(Direction.RIGHT) is Outcome.CONTINUE
    assert game.collectibles == 0
    assert game.move(Direction.LEFT) is Outcome.WIN


def test_enemy_loses():
    game, messages = make_game(WITH_ENEMY)
    assert game.move(Direction.RIGHT) is Outcome.LOSE
    assert messages == ["You lose!"]


def test_moving_after_game_over_raises():
    game, _ = make_game(WITH_ENEMY)
    game.move(Direction.RIGHT)
    with pytest.raises(RuntimeError):
        game.move(Direction.DOWN)


def test_handle_key_moves_and_announces_label():
    game, messages = make_game(SIMPLE)
    assert game.handle_key(Direction.RIGHT.keycode) is Outcome.CONTINUE
    assert game.position == (1, 2)
    assert messages == ["right"]


def test_handle_key_escape_quits():
    game, messages = make_game(SIMPLE)
    assert game.handle_key(KEY_ESCAPE) is Outcome.QUIT
    assert game.finished
    assert messages == [f"Window closed with keycode: {KEY_ESCAPE}"]


def test_handle_key_ignores_other_keys():
    game, messages = make_game(SIMPLE)
    assert game.handle_key(ord("q")) is Outcome.CONTINUE
    assert game.moves == 0
    assert messages == []


def test_handle_key_does_not_label_final_move():
    game, messages = make_game(WITH_ENEMY)
    assert game.handle_key(Direction.RIGHT.keycode) is Outcome.LOSE
    assert "right" not in messages


def test_default_announce_prints(capsys):
    game = Game(parse_map(SIMPLE))
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert capsys.readouterr().out == "Collectibles left: 0\n"