"""
Game session for Minesweeper front ends.

Wraps a BoardEngine with the turn gating a user interface needs: once a
mine is hit or the board is cleared, further moves are ignored until a
new game starts.
"""
import logging
import random
from typing import Optional

from .board import BoardEngine

logger = logging.getLogger(__name__)


class GameSession:
    """
    One player's sequence of games.

    Attributes:
        difficulty: Label of the current preset.
        board: Engine for the current game.
        is_over: True once a mine has been revealed.
        is_won: True once every safe cell is revealed.
    """

    def __init__(
        self, difficulty: str = "easy", rng: Optional[random.Random] = None
    ) -> None:
        self.difficulty = difficulty
        self._rng = rng
        self.board = BoardEngine.from_difficulty(difficulty, rng=rng)
        self.is_over = False
        self.is_won = False
        logger.info("Started %s game", difficulty)

    @property
    def is_finished(self) -> bool:
        return self.is_over or self.is_won

    @property
    def status(self) -> str:
        if self.is_over:
            return "lost"
        if self.is_won:
            return "won"
        return "playing"

    def new_game(self, difficulty: Optional[str] = None) -> None:
        """
        Start over, optionally switching difficulty.

        Raises:
            InvalidDifficulty: If the label is not a known preset.
        """
        difficulty = difficulty or self.difficulty
        self.board = BoardEngine.from_difficulty(difficulty, rng=self._rng)
        self.difficulty = difficulty
        self.is_over = False
        self.is_won = False
        logger.info("Started %s game", difficulty)

    def click(self, row: int, col: int) -> bool:
        """
        Reveal a cell on behalf of the player.

        Ignored after the game ends, outside the board, and on revealed
        or flagged cells.

        Returns:
            True if the move was applied.
        """
        if self.is_finished or not self.board.is_valid_position(row, col):
            return False
        cell = self.board.cell(row, col)
        if cell.is_revealed or cell.is_flagged:
            return False

        if self.board.reveal(row, col):
            self.is_over = True
            logger.info("Game lost at (%d, %d)", row, col)
        elif self.board.check_win_condition():
            self.is_won = True
            logger.info("Game won")
        return True

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Flag or unflag a cell on behalf of the player.

        Returns:
            True if the flag changed.
        """
        if self.is_finished or not self.board.is_valid_position(row, col):
            return False
        if self.board.cell(row, col).is_revealed:
            return False
        self.board.toggle_flag(row, col)
        return True

    def render(self) -> str:
        """Text view of the board; mines are shown once the game is lost."""
        return self.board.to_text(show_mines=self.is_over)
