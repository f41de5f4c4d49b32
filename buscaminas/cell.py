"""A single square of a minesweeper board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CellState(Enum):
    """What a square holds."""

    NUMBER = "number"
    EMPTY = "empty"
    MINE = "mine"


@dataclass
class Cell:
    """A board square: its contents plus whether it is revealed or flagged."""

    state: CellState = CellState.EMPTY
    revealed: bool = False
    number: int = 0
    flagged: bool = False

    def reset(self) -> None:
        """Return the cell to its initial, empty and hidden state."""
        self.state = CellState.EMPTY
        self.revealed = False
        self.number = 0
        self.flagged = False

    def is_empty(self) -> bool:
        return self.state is CellState.EMPTY

    def has_mine(self) -> bool:
        return self.state is CellState.MINE

    def has_number(self) -> bool:
        return self.state is CellState.NUMBER

    def place_mine(self) -> None:
        """Put a mine in this cell."""
        self.state = CellState.MINE

    def set_number(self, number: int) -> None:
        """Store the count of adjacent mines and mark the cell as numbered."""
        self.number = number
        self.state = CellState.NUMBER