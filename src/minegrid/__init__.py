"""
Minesweeper game module.

Provides the board engine, cell snapshots, difficulty presets and thin
front ends (game session, Gymnasium environment) built on them.
"""
from .cell import Cell, CellState
from .board import (
    BoardConfig,
    BoardEngine,
    GameState,
    RevealResult,
    DIFFICULTIES,
    EASY,
    MEDIUM,
    HARD,
    get_config,
)
from .errors import MinegridError, InvalidDifficulty, OutOfBounds
from .session import GameSession
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "BoardConfig",
    "BoardEngine",
    "GameState",
    "RevealResult",
    "DIFFICULTIES",
    "EASY",
    "MEDIUM",
    "HARD",
    "get_config",
    "MinegridError",
    "InvalidDifficulty",
    "OutOfBounds",
    "GameSession",
    "MinesweeperEnv",
    "make_vec_env",
]
