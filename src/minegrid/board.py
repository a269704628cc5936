"""
Board module for Minesweeper game.

Implements the board engine: mine placement, neighbor counting,
flood-fill revealing, flag toggling and win detection.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import (
    Deque, Iterable, List, Mapping, NamedTuple, Optional, Tuple,
)

import numpy as np

from .cell import Cell
from .errors import InvalidDifficulty, OutOfBounds

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game, derived from the board."""

    READY = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def num_cells(self) -> int:
        """Total cells on the board."""
        return self.rows * self.cols


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)

DIFFICULTIES: Mapping[str, BoardConfig] = MappingProxyType({
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
})


def get_config(difficulty: str) -> BoardConfig:
    """
    Look up the preset for a difficulty label.

    Raises:
        InvalidDifficulty: If the label is not a known preset.
    """
    try:
        return DIFFICULTIES[difficulty]
    except (KeyError, TypeError):
        raise InvalidDifficulty(difficulty, tuple(DIFFICULTIES)) from None


class RevealResult(NamedTuple):
    """Outcome of a reveal: whether a mine was hit and what was opened."""

    hit_mine: bool
    revealed: Tuple[Position, ...]


# ============================================================================
# Board Engine
# ============================================================================

class BoardEngine:
    """
    Minesweeper board engine.

    Owns the grid of cells and all mutation of it. Consumers read cells
    through immutable snapshots. The engine does not stop play after a
    win or loss; callers are expected to stop issuing moves.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        mine_positions: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Build a board, place its mines and count neighbors.

        Args:
            config: Board size and mine count (default: easy preset).
            rng: Random source with a ``sample`` method.
            mine_positions: Explicit mine layout; skips random placement.
        """
        self.config = config or EASY
        self._rng = rng or random.Random()
        self._grid: List[List[Cell]] = []

        self._init_grid()
        if mine_positions is None:
            self._place_mines()
        else:
            self._set_mines(mine_positions)
        self._calculate_neighbor_mines()

        logger.debug(
            "Created %dx%d board with %d mines",
            self.rows, self.cols, self.num_mines,
        )

    @classmethod
    def from_difficulty(
        cls, difficulty: str, rng: Optional[random.Random] = None
    ) -> "BoardEngine":
        """
        Create a board for a preset difficulty ("easy", "medium", "hard").

        Raises:
            InvalidDifficulty: If the label is not a known preset.
        """
        return cls(get_config(difficulty), rng=rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    def _place_mines(self) -> None:
        """Place mines on a uniformly random subset of positions."""
        positions = [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
        ]
        for row, col in self._rng.sample(positions, self.num_mines):
            self._grid[row][col] = Cell(is_mine=True)

    def _set_mines(self, mine_positions: Iterable[Position]) -> None:
        """Place mines at explicit positions."""
        positions = set()
        for row, col in mine_positions:
            self._check_position(row, col)
            positions.add((row, col))
        if len(positions) != self.num_mines:
            raise ValueError(
                f"Expected {self.num_mines} distinct mine positions, "
                f"got {len(positions)}"
            )
        for row, col in positions:
            self._grid[row][col] = Cell(is_mine=True)

    def _calculate_neighbor_mines(self) -> None:
        """Calculate neighbor mine counts for all non-mine cells."""
        for row in range(self.rows):
            for col in range(self.cols):
                if not self._grid[row][col].is_mine:
                    count = self._count_neighbor_mines(row, col)
                    self._grid[row][col] = Cell(neighbor_mines=count)

    def _count_neighbor_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors, excluding
            the center cell itself.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_position(self, row: int, col: int) -> None:
        """Raise OutOfBounds unless the position is on the board."""
        if not self.is_valid_position(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        Out-of-range positions and already revealed cells are ignored.
        Revealing a zero-count cell opens its whole connected empty region
        and the numbered cells bordering it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the revealed cell was a mine, False otherwise.
        """
        return self.reveal_region(row, col).hit_mine

    def reveal_region(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell and report every position opened by the call.

        Returns:
            RevealResult with the mine flag and the newly revealed
            positions in the order they were opened.
        """
        if not self.is_valid_position(row, col):
            return RevealResult(False, ())
        if self._grid[row][col].is_revealed:
            return RevealResult(False, ())

        cell = self._reveal_cell(row, col)
        if cell.is_mine:
            logger.debug("Mine hit at (%d, %d)", row, col)
            return RevealResult(True, ((row, col),))

        revealed = [(row, col)]
        if cell.neighbor_mines == 0:
            revealed.extend(self._flood_reveal(row, col))
        return RevealResult(False, tuple(revealed))

    def _reveal_cell(self, row: int, col: int) -> Cell:
        cell = self._grid[row][col].reveal()
        self._grid[row][col] = cell
        return cell

    def _flood_reveal(self, row: int, col: int) -> List[Position]:
        """Open the empty region around an already revealed zero cell."""
        revealed = []
        frontier: Deque[Position] = deque([(row, col)])
        while frontier:
            current_row, current_col = frontier.popleft()
            for neighbor_row, neighbor_col in self.neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_revealed:
                    continue
                # Zero-count cells are never adjacent to a mine.
                neighbor = self._reveal_cell(neighbor_row, neighbor_col)
                revealed.append((neighbor_row, neighbor_col))
                if neighbor.neighbor_mines == 0:
                    frontier.append((neighbor_row, neighbor_col))
        return revealed

    def toggle_flag(self, row: int, col: int) -> None:
        """
        Toggle flag on a cell. Revealed cells are left unchanged.

        Raises:
            OutOfBounds: If the position is outside the board.
        """
        self._check_position(row, col)
        self._grid[row][col] = self._grid[row][col].toggle_flag()

    def check_win_condition(self) -> bool:
        """Check if every non-mine cell is revealed. Flags do not matter."""
        return all(
            cell.is_mine or cell.is_revealed
            for grid_row in self._grid
            for cell in grid_row
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.config.rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.config.cols

    @property
    def num_mines(self) -> int:
        """Total mines on the board."""
        return self.config.num_mines

    @property
    def game_state(self) -> GameState:
        """Get current game state, derived from the cells."""
        if any(
            cell.is_mine and cell.is_revealed
            for grid_row in self._grid
            for cell in grid_row
        ):
            return GameState.LOST
        if self.check_win_condition():
            return GameState.WON
        if self.revealed_count == 0:
            return GameState.READY
        return GameState.PLAYING

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(
            cell.is_revealed for grid_row in self._grid for cell in grid_row
        )

    @property
    def flag_count(self) -> int:
        """Number of flagged cells, revealed or not."""
        return sum(
            cell.is_flagged for grid_row in self._grid for cell in grid_row
        )

    def cell(self, row: int, col: int) -> Cell:
        """
        Get the cell snapshot at a position.

        Raises:
            OutOfBounds: If the position is outside the board.
        """
        self._check_position(row, col)
        return self._grid[row][col]

    def cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Get a snapshot of the whole grid, row by row."""
        return tuple(tuple(grid_row) for grid_row in self._grid)

    def mine_positions(self) -> List[Position]:
        """Get positions of all mines."""
        return [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
            if self._grid[row][col].is_mine
        ]

    def hidden_positions(self) -> List[Position]:
        """
        Get list of cells a player may reveal.

        Returns:
            List of (row, col) positions that are neither revealed
            nor flagged.
        """
        return [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
            if self._grid[row][col].is_hidden
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def to_text(self, show_mines: bool = False) -> str:
        """Render the board as rows of space separated glyphs."""
        return "\n".join(
            " ".join(cell.to_char(show_mines) for cell in grid_row)
            for grid_row in self._grid
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rows={self.rows}, cols={self.cols}, "
            f"num_mines={self.num_mines}, state={self.game_state.name})"
        )
