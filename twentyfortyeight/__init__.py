"""The 2048 sliding-tile puzzle: movement rules, the board, and a terminal front end."""

__version__ = "1.0.0"
__all__ = ["cli", "grid", "movement"]