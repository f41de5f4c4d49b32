"""Interactive terminal minesweeper."""

from __future__ import annotations

import argparse
import copy
import random
import sys
from collections.abc import Callable, Iterator
from typing import IO

from .display import RED, RESET, render_banner, render_game, render_prompt, render_result
from .game import Game
from .manager import GameManager
from .undo import UndoHistory

UNDO = (-3, -3)
FLAG = (-2, -2)
FORFEIT = (-1, -1)

MIN_SIDE = 3
MAX_SIDE = 20


def undo(game: Game, history: UndoHistory) -> None:
    """Cover again every cell revealed by the latest recorded move."""
    for row, col in history.pop_last():
        game.hide(row, col)


def play_turn(
    game: Game,
    row: int,
    col: int,
    history: UndoHistory,
    read_pair: Callable[[], tuple[int, int]],
    out: IO[str],
) -> bool:
    """Carry out one player command; return whether the game goes on."""
    keep_playing = True
    command = (row, col)
    if command == UNDO:
        undo(game, history)
    elif command == FORFEIT:
        keep_playing = False
    elif command == FLAG:
        game.swap_mode()
        out.write(render_game(game))
        out.write("Que casilla desea marcar:\n")
        flag_row, flag_col = read_pair()
        if 0 <= flag_row < game.rows and 0 <= flag_col < game.cols:
            game.toggle_flag(flag_row, flag_col)
        game.swap_mode()
    elif 0 <= row < game.rows and 0 <= col < game.cols:
        revealed = game.play(row, col)
        if revealed:
            history.push(revealed)
    else:
        out.write(f"{RED}Por favor, introduzca coordenadas validas{RESET}\n")
    out.write(render_game(game))
    if game.is_complete() or game.mine_exploded:
        keep_playing = False
    return keep_playing


def finish(manager: GameManager, pos: int, game: Game) -> str:
    """Return the result banner; a won game is dropped from the manager."""
    if not game.mine_exploded and game.is_complete():
        manager.remove(pos)
    return render_result(game)


class _Console:
    """Whitespace-separated tokens read from a text stream, with prompts."""

    def __init__(self, stream: IO[str], out: IO[str]) -> None:
        self._tokens = self._split(stream)
        self._out = out

    @staticmethod
    def _split(stream: IO[str]) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def word(self, prompt: str = "") -> str:
        if prompt:
            self._out.write(prompt)
            self._out.flush()
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("input ended") from None

    def integer(self, prompt: str = "") -> int:
        while True:
            token = self.word(prompt)
            try:
                return int(token)
            except ValueError:
                self._out.write("Por favor, introduzca un numero\n")

    def pair(self) -> tuple[int, int]:
        return self.integer(), self.integer()


def _play_loop(game: Game, history: UndoHistory, console: _Console, out: IO[str]) -> None:
    while True:
        out.write(render_prompt())
        row, col = console.pair()
        if not play_turn(game, row, col, history, console.pair, out):
            break


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _random_game(
    manager: GameManager,
    history: UndoHistory,
    console: _Console,
    out: IO[str],
    rng: random.Random,
) -> None:
    out.write("Generando juego aleatorio...\n")
    out.write("Numero de filas (>=3) y columnas (>=3) del tablero:\n")
    rows = _clamp(console.integer(), MIN_SIDE, MAX_SIDE)
    cols = _clamp(console.integer(), MIN_SIDE, MAX_SIDE)
    mines = console.integer(f"Numero de minas (<{rows * cols // 3}):")
    mines = _clamp(mines, 1, rows * cols)
    game = Game.random(rows, cols, mines, rng)
    pos = manager.insert(game)
    out.write(f"Juego con {mines}minas\n")
    out.write(render_game(game))
    _play_loop(game, history, console, out)
    out.write(finish(manager, pos, game))


def _existing_game(
    manager: GameManager, history: UndoHistory, console: _Console, out: IO[str]
) -> None:
    out.write(manager.listing())
    while True:
        pos = console.integer("Selecciona la partida:")
        if 0 <= pos < len(manager):
            break
        out.write(f"{RED}Por favor, introduzca una partida valida{RESET}\n")
    game = copy.deepcopy(manager[pos])
    out.write(render_game(game))
    _play_loop(game, history, console, out)
    out.write(finish(manager, pos, game))


def _load(manager: GameManager, console: _Console) -> bool:
    name = console.word("Por favor, introduzca el nombre del fichero de juegos escogido: ")
    try:
        manager.load(name)
    except OSError:
        print(f"Error: No se pudo abrir el archivo {name}", file=sys.stderr)
        return False
    except (ValueError, IndexError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return False
    return True


def _save(manager: GameManager, console: _Console) -> bool:
    name = console.word(
        "Por favor, introduzca el nombre del fichero donde quiere guardar los juegos: "
    )
    try:
        manager.save(name)
    except OSError:
        print(f"Error: No se pudo crear el archivo {name}", file=sys.stderr)
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Run an interactive session on standard input and output."""
    parser = argparse.ArgumentParser(prog="buscaminas", description="Terminal minesweeper.")
    parser.add_argument("--seed", type=int, default=None, help="seed for random boards")
    args = parser.parse_args(argv)

    out = sys.stdout
    console = _Console(sys.stdin, out)
    rng = random.Random(args.seed)
    manager = GameManager()
    history = UndoHistory()

    out.write(render_banner())
    try:
        if _load(manager, console):
            option = console.integer("Juego aleatorio (opcion 1) o juego existente (opcion 2):")
            if option != 2:
                _random_game(manager, history, console, out, rng)
            else:
                _existing_game(manager, history, console, out)
        else:
            _random_game(manager, history, console, out, rng)
        _save(manager, console)
    except EOFError:
        out.write("\n")
        print("Error: la entrada ha terminado", file=sys.stderr)
        return 1
    return 0