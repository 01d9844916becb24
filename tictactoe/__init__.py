"""
井字棋 (Tic-Tac-Toe)

3x3 井字棋引擎，电脑对手提供简单、中等、困难三档难度：
- 简单：随机落子，偶尔抓住制胜点或封堵
- 中等：必胜必堵，其余按位置偏好
- 困难：Minimax + Alpha-Beta 完整搜索
"""

from tictactoe.types import (
    BOARD_SIZE,
    DIFFICULTY_CONFIG,
    WINNING_LINES,
    Cell,
    Difficulty,
    DifficultyConfig,
    GameOutcome,
    GameResult,
)
from tictactoe.errors import IllegalMoveError, NoAvailableMovesError, TicTacToeError
from tictactoe.board import Board
from tictactoe.game import Game, GameConfig, Score

__version__ = "0.1.0"

__all__ = [
    "BOARD_SIZE",
    "DIFFICULTY_CONFIG",
    "WINNING_LINES",
    "Cell",
    "Difficulty",
    "DifficultyConfig",
    "GameOutcome",
    "GameResult",
    "IllegalMoveError",
    "NoAvailableMovesError",
    "TicTacToeError",
    "Board",
    "Game",
    "GameConfig",
    "Score",
]
