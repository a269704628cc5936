"""
Exceptions raised by the Minesweeper engine.
"""


class MinegridError(Exception):
    """Base class for engine errors."""


class InvalidDifficulty(MinegridError, KeyError):
    """Raised when a board is requested for an unknown difficulty label."""

    def __init__(self, label: object, known: tuple = ()) -> None:
        self.label = label
        self.known = tuple(known)
        super().__init__(label)

    def __str__(self) -> str:
        choices = ", ".join(self.known)
        return f"Unknown difficulty {self.label!r} (expected one of: {choices})"


class OutOfBounds(MinegridError, IndexError):
    """Raised when a position lies outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        self.row = row
        self.col = col
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} board"
        )
