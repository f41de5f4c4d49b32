"""Loading, saving and listing the collection of stored games."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import IO

from .game import Game
from .game_list import GameList


def _next_int(tokens: Iterator[object]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of game data") from None
    try:
        return int(token)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        raise ValueError(f"expected an integer, got {token!r}") from None


def parse_game(tokens: Iterable[object]) -> Game:
    """Build a game from tokens: rows, cols, mine count, then mine positions."""
    tokens = iter(tokens)
    rows = _next_int(tokens)
    cols = _next_int(tokens)
    mines = _next_int(tokens)
    game = Game(rows, cols)
    for _ in range(mines):
        row = _next_int(tokens)
        col = _next_int(tokens)
        game.place_mine(row, col)
    return game


def read_games(stream: IO[str]) -> list[Game]:
    """Read a games file: the number of games followed by each game."""
    tokens = iter(stream.read().split())
    try:
        count = _next_int(tokens)
    except ValueError:
        count = 0
    if count <= 0:
        raise ValueError("El fichero seleccionado no contiene juegos")
    return [parse_game(tokens) for _ in range(count)]


def write_games(games: Iterable[Game], stream: IO[str]) -> None:
    """Write games in the format read by read_games."""
    games = list(games)
    stream.write(f"{len(games)}\n")
    for game in games:
        stream.write(f"{game.rows} {game.cols}\n")
        stream.write(f"{game.mines}\n")
        for row in range(game.rows):
            for col in range(game.cols):
                if game.has_mine(row, col):
                    stream.write(f"{row} {col}\n")


class GameManager:
    """The stored games, sorted by difficulty, with file persistence."""

    def __init__(self) -> None:
        self._games = GameList()

    def __len__(self) -> int:
        return len(self._games)

    def __getitem__(self, pos: int) -> Game:
        return self._games[pos]

    def has_games(self) -> bool:
        return len(self._games) > 0

    def insert(self, game: Game) -> int:
        """Store a copy of the game and return its position."""
        return self._games.insert(game)

    def remove(self, pos: int) -> bool:
        return self._games.remove(pos)

    def load(self, path: str | os.PathLike[str]) -> int:
        """Add every game in the file; return how many were added."""
        with open(path, encoding="utf-8") as stream:
            games = read_games(stream)
        for game in games:
            self.insert(game)
        return len(games)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write all stored games to the file."""
        with open(path, "w", encoding="utf-8") as stream:
            write_games(self._games, stream)

    def listing(self) -> str:
        """A description of every stored game, easiest first."""
        parts = ["Mostrando lista de juegos por orden de dificultad...\n"]
        for pos, game in enumerate(self._games):
            parts.append(
                f"Juego {pos}:\n"
                f"\tDimension: {game.rows} x {game.cols}\n"
                f"\tMinas: {game.mines}\n"
            )
        return "".join(parts)