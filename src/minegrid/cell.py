"""
Cell module for Minesweeper game.

Represents individual cells on the game board: whether they hold a mine,
whether they have been revealed or flagged, and how many mines surround
them.
"""
from enum import Enum, auto
from dataclasses import dataclass, replace


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Immutable snapshot of a single cell in the Minesweeper grid.

    The board replaces cells instead of mutating them, so a Cell handed
    to a renderer can never change underneath it.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether this cell has been opened.
        is_flagged: Whether the player has marked this cell.
        neighbor_mines: Count of mines in neighboring cells (0-8).
            Only meaningful for cells that are not mines.
    """

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_mines: int = 0

    def reveal(self) -> "Cell":
        """
        Return a revealed copy of this cell.

        A flag does not prevent revealing; the flag mark is kept.
        """
        return replace(self, is_revealed=True)

    def toggle_flag(self) -> "Cell":
        """
        Return a copy with the flag flipped.

        Revealed cells are returned unchanged.
        """
        if self.is_revealed:
            return self
        return replace(self, is_flagged=not self.is_flagged)

    @property
    def state(self) -> CellState:
        """Visual state; a revealed cell shows as revealed even if flagged."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to an integer code for renderers and agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.neighbor_mines

    def to_char(self, show_mine: bool = False) -> str:
        """Single-character glyph used by text renderers."""
        if self.is_revealed:
            if self.is_mine:
                return "*"
            return str(self.neighbor_mines) if self.neighbor_mines else " "
        if show_mine and self.is_mine:
            return "*"
        if self.is_flagged:
            return "F"
        return "."
