"""Collection of games kept in order of increasing difficulty."""

from __future__ import annotations

import copy
from bisect import bisect_right
from collections.abc import Iterator

from .game import Game


def difficulty(game: Game) -> int:
    """Cells per mine: the lower the value, the harder the game."""
    if game.mines == 0:
        raise ValueError("a game without mines has no difficulty")
    return game.cols * game.rows // game.mines


class GameList:
    """Games sorted by difficulty; ties keep their insertion order."""

    def __init__(self) -> None:
        self._games: list[Game] = []

    def __len__(self) -> int:
        return len(self._games)

    def __getitem__(self, pos: int) -> Game:
        return self._games[pos]

    def __iter__(self) -> Iterator[Game]:
        return iter(self._games)

    def insert(self, game: Game) -> int:
        """Store a copy of the game in its sorted place and return that place."""
        if self._games:
            pos = bisect_right(self._games, difficulty(game), key=difficulty)
        else:
            pos = 0
        self._games.insert(pos, copy.deepcopy(game))
        return pos

    def remove(self, pos: int) -> bool:
        """Drop the game at the position; positions off the list are ignored."""
        if 0 <= pos < len(self._games):
            del self._games[pos]
            return True
        return False