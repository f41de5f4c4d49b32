"""Bounded history of revealed positions, one entry per move."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

Position = tuple[int, int]

MAX_UNDO = 10


class UndoHistory:
    """Keeps the positions revealed by the latest moves, dropping the oldest."""

    def __init__(self, capacity: int = MAX_UNDO) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._entries: deque[tuple[Position, ...]] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, positions: Iterable[Position]) -> None:
        """Record the positions revealed by one move."""
        self._entries.append(tuple((row, col) for row, col in positions))

    def last(self) -> tuple[Position, ...]:
        """Return the latest move's positions, or an empty tuple."""
        return self._entries[-1] if self._entries else ()

    def pop_last(self) -> tuple[Position, ...]:
        """Remove and return the latest move's positions, or an empty tuple."""
        return self._entries.pop() if self._entries else ()