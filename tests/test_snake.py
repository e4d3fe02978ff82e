import io
import sys

import pytest

from bytecraft.snake import GameOver, SnakeGame, main


class _Sequence:
    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values, 0.1)


def _game():
    # First food at (5, 3); the second draw collides and is retried to (8, 8).
    return SnakeGame(_Sequence([0.45, 0.25, 0.45, 0.25, 0.8, 0.8]))


def _cells(game, row):
    return game.render().splitlines()[row][::2]


def test_initial_board():
    game = _game()
    assert game.body == ((3, 3),)
    assert game.food == (5, 3)
    lines = game.render().splitlines()
    assert len(lines) == 12
    assert lines[0][::2] == "*" * 12
    assert lines[11][::2] == "*" * 12
    row = _cells(game, 3)
    assert row[0] == "*" and row[11] == "*"
    assert row[3] == "O"
    assert row[5] == "$"


def test_move_without_eating():
    game = _game()
    game.step("d")
    assert game.body == ((4, 3),)
    assert _cells(game, 3)[4] == "O"
    assert _cells(game, 3)[3] == " "


def test_eating_grows_and_places_new_food():
    game = _game()
    game.step("d")
    game.step("D")
    assert game.body == ((4, 3), (5, 3))
    assert game.food == (8, 8)
    row = _cells(game, 3)
    assert row[4] == "X"
    assert row[5] == "O"
    assert _cells(game, 8)[8] == "$"


def test_body_follows_head():
    game = _game()
    game.step("d")
    game.step("d")
    game.step("s")
    assert game.body == ((5, 3), (5, 4))


def test_unknown_key_does_nothing():
    game = _game()
    before = game.render()
    game.step("q")
    game.step("")
    assert game.render() == before


def test_wall_ends_game():
    game = _game()
    game.step("w")
    game.step("w")
    with pytest.raises(GameOver):
        game.step("w")


def test_running_into_body_ends_game():
    game = _game()
    game.step("d")
    game.step("d")
    with pytest.raises(GameOver):
        game.step("a")


def test_food_never_on_snake():
    game = SnakeGame(_Sequence([0.25, 0.25, 0.25, 0.25, 0.6, 0.6]))
    assert game.food not in game.body
    assert game.food == (3, 3) or game.food == (6, 6)


def test_main_stops_at_wall(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("w\nw\nw\nw\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert len(out.splitlines()) == 24