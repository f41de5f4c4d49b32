"""Minesweeper game state and moves."""

from __future__ import annotations

import random as _random

from .board import Board
from .cell import Cell

Position = tuple[int, int]


class Game:
    """A minesweeper game: board, move counter and mine bookkeeping."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        self._board = Board(rows, cols)
        self._moves = 0
        self._mines = 0
        self._revealed = 0
        self._mine_hit = False
        self._mode = False
        self._display_mines = 0

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        mines: int,
        rng: _random.Random | None = None,
    ) -> Game:
        """Create a game with mines placed at random distinct positions."""
        game = cls(rows, cols)
        if mines > rows * cols:
            raise ValueError(f"cannot place {mines} mines on a {rows}x{cols} board")
        rng = rng or _random.Random()
        for _ in range(mines):
            row, col = rng.randrange(rows), rng.randrange(cols)
            while game.has_mine(row, col):
                row, col = rng.randrange(rows), rng.randrange(cols)
            game.place_mine(row, col)
        return game

    @property
    def rows(self) -> int:
        return self._board.rows

    @property
    def cols(self) -> int:
        return self._board.cols

    @property
    def mines(self) -> int:
        return self._mines

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def display_mines(self) -> int:
        """Mines minus flags, as shown to the player."""
        return self._display_mines

    @property
    def mode(self) -> bool:
        """Whether flag mode is on."""
        return self._mode

    @property
    def mine_exploded(self) -> bool:
        return self._mine_hit

    def reset(self) -> None:
        """Clear the board and all counters."""
        self._board.reset()
        self._moves = 0
        self._mines = 0
        self._revealed = 0
        self._mine_hit = False
        self._mode = False
        self._display_mines = 0

    def place_mine(self, row: int, col: int) -> None:
        """Put a mine at the position and bump the numbers around it."""
        if not self._board.is_valid(row, col):
            raise IndexError(f"position ({row}, {col}) is outside the board")
        mine = Cell()
        mine.place_mine()
        self._board.set_cell(row, col, mine)
        self._mines += 1
        self._display_mines += 1
        for r in range(row - 1, row + 2):
            for c in range(col - 1, col + 2):
                if self._board.is_valid(r, c):
                    cell = self._board.cell(r, c)
                    if not cell.has_mine():
                        cell.set_number(cell.number + 1)

    def is_complete(self) -> bool:
        """True when every cell without a mine has been revealed."""
        return self._mines + self._revealed == self.rows * self.cols

    def has_mine(self, row: int, col: int) -> bool:
        return self._board.cell(row, col).has_mine()

    def is_revealed(self, row: int, col: int) -> bool:
        return self._board.cell(row, col).revealed

    def is_flagged(self, row: int, col: int) -> bool:
        return self._board.cell(row, col).flagged

    def is_empty(self, row: int, col: int) -> bool:
        return self._board.cell(row, col).is_empty()

    def has_number(self, row: int, col: int) -> bool:
        return self._board.cell(row, col).has_number()

    def number(self, row: int, col: int) -> int:
        return self._board.cell(row, col).number

    def toggle_flag(self, row: int, col: int) -> bool:
        """Flag or unflag the cell; return whether it is now flagged."""
        cell = self._board.cell(row, col)
        if cell.flagged:
            cell.flagged = False
            self._display_mines += 1
        else:
            cell.flagged = True
            self._display_mines -= 1
        return cell.flagged

    def hide(self, row: int, col: int) -> bool:
        """Cover a revealed cell again; return whether anything changed."""
        cell = self._board.cell(row, col)
        if not cell.revealed:
            return False
        cell.revealed = False
        self._revealed -= 1
        return True

    def swap_mode(self) -> bool:
        """Toggle flag mode and return the new value."""
        self._mode = not self._mode
        return self._mode

    def _reveal(self, row: int, col: int, out: list[Position]) -> None:
        self._board.cell(row, col).revealed = True
        self._revealed += 1
        out.append((row, col))

    def _flood(self, row: int, col: int, out: list[Position]) -> None:
        if not self._board.is_valid(row, col):
            return
        cell = self._board.cell(row, col)
        if cell.revealed or cell.flagged:
            return
        self._reveal(row, col, out)
        if cell.is_empty():
            for r in range(row - 1, row + 2):
                for c in range(col - 1, col + 2):
                    self._flood(r, c, out)

    def play(self, row: int, col: int) -> tuple[Position, ...]:
        """Reveal a cell, flooding through empty areas.

        Returns the positions revealed by the move, in reveal order; an
        empty tuple means the cell was already revealed or is flagged and
        nothing happened.
        """
        if not self._board.is_valid(row, col):
            raise IndexError(f"position ({row}, {col}) is outside the board")
        cell = self._board.cell(row, col)
        if cell.revealed or cell.flagged:
            return ()
        self._moves += 1
        revealed: list[Position] = []
        if cell.is_empty():
            self._flood(row, col, revealed)
        else:
            if cell.has_mine():
                self._mine_hit = True
            self._reveal(row, col, revealed)
        return tuple(revealed)