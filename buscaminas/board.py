"""Rectangular grid of cells."""

from __future__ import annotations

from .cell import Cell

MAX_ROWS = 20
MAX_COLS = 20


class Board:
    """A grid of at most MAX_ROWS x MAX_COLS cells."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        if not 0 <= rows <= MAX_ROWS:
            raise ValueError(f"rows must be between 0 and {MAX_ROWS}, got {rows}")
        if not 0 <= cols <= MAX_COLS:
            raise ValueError(f"cols must be between 0 and {MAX_COLS}, got {cols}")
        self._rows = rows
        self._cols = cols
        self._cells = [[Cell() for _ in range(cols)] for _ in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def reset(self) -> None:
        """Clear every cell and shrink the board to zero size."""
        for line in self._cells:
            for cell in line:
                cell.reset()
        self._cells = []
        self._rows = 0
        self._cols = 0

    def is_valid(self, row: int, col: int) -> bool:
        """Tell whether the coordinates lie on the board."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _check(self, row: int, col: int) -> None:
        if not self.is_valid(row, col):
            raise IndexError(f"position ({row}, {col}) is outside the board")

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at the given position."""
        self._check(row, col)
        return self._cells[row][col]

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        """Replace the cell at the given position."""
        self._check(row, col)
        self._cells[row][col] = cell