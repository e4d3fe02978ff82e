"""A small snake game played on a 12 by 12 board with w/a/s/d moves."""

from __future__ import annotations

import random
import sys

SIZE = 12
WALL = "*"
BODY = "X"
HEAD = "O"
FOOD = "$"
EMPTY = " "
START = (3, 3)

_MOVES = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}


class GameOver(Exception):
    """Raised when the snake runs into a wall or into itself."""


class SnakeGame:
    """Board state: the snake from tail to head and one piece of food."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._body = [START]
        self.food: tuple[int, int] | None = None
        self._place_food()

    @property
    def body(self) -> tuple[tuple[int, int], ...]:
        """Snake cells from tail to head."""
        return tuple(self._body)

    @property
    def head(self) -> tuple[int, int]:
        return self._body[-1]

    def _cell(self, pos: tuple[int, int]) -> str:
        x, y = pos
        if x in (0, SIZE - 1) or y in (0, SIZE - 1):
            return WALL
        if pos == self.head:
            return HEAD
        if pos in self._body[:-1]:
            return BODY
        if pos == self.food:
            return FOOD
        return EMPTY

    def _random_coordinate(self) -> int:
        return int(self._rng.random() * 9 + 1)

    def _place_food(self) -> None:
        reachable = [(x, y) for x in range(1, 10) for y in range(1, 10)]
        if all(self._cell(pos) != EMPTY for pos in reachable):
            raise GameOver("no room left for food")
        while True:
            pos = (self._random_coordinate(), self._random_coordinate())
            if self._cell(pos) == EMPTY:
                self.food = pos
                return

    def step(self, key: str) -> None:
        """Move by the first character of ``key``; other keys leave the board as is."""
        move = _MOVES.get(key[:1].lower())
        if move is None:
            return
        x, y = self.head
        target = (x + move[0], y + move[1])
        cell = self._cell(target)
        if cell in (WALL, BODY):
            raise GameOver(f"hit {cell!r} at {target}")
        if cell == FOOD:
            self._body.append(target)
            self._place_food()
        else:
            self._body = self._body[1:] + [target]

    def render(self) -> str:
        """Return the board, one row per line, each cell followed by a space."""
        rows = (
            "".join(self._cell((x, y)) + " " for x in range(SIZE)) for y in range(SIZE)
        )
        return "\n".join(rows) + "\n"


def main(argv=None) -> int:
    """Play on standard input, one move per line, until the snake dies."""
    game = SnakeGame()
    for line in sys.stdin:
        try:
            game.step(line)
        except GameOver:
            return 0
        print(game.render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())