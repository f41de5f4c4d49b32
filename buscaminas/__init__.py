"""Terminal minesweeper with flags, undo and saved game lists."""

__version__ = "1.0.0"
__all__ = ["__version__"]