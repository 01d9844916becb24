"""
核心类型定义

定义井字棋中所有基础数据类型
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Cell(Enum):
    """格子状态"""

    EMPTY = "."
    # 先手（人类玩家）
    X = "X"
    # 后手（电脑玩家）
    O = "O"

    @property
    def opposite(self) -> "Cell":
        """获取对方标记"""
        if self == Cell.EMPTY:
            raise ValueError("Empty cell has no opposite mark")
        return Cell.O if self == Cell.X else Cell.X

    @property
    def is_mark(self) -> bool:
        return self != Cell.EMPTY


# 所有获胜连线：3 行、3 列、2 条对角线
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

BOARD_SIZE = 9
CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)


class GameResult(Enum):
    """游戏结果"""

    ONGOING = "ongoing"
    X_WIN = "x_win"
    O_WIN = "o_win"
    DRAW = "draw"


class GameOutcome(NamedTuple):
    """局面评估结果（派生数据，不单独存储）"""

    winner: Cell | None
    is_draw: bool
    is_game_over: bool
    available_moves: tuple[int, ...]

    @property
    def result(self) -> GameResult:
        if self.winner == Cell.X:
            return GameResult.X_WIN
        if self.winner == Cell.O:
            return GameResult.O_WIN
        if self.is_draw:
            return GameResult.DRAW
        return GameResult.ONGOING


@dataclass(frozen=True)
class DifficultyConfig:
    """难度配置"""

    name: str
    description: str
    # 本回合使用"聪明走法"的概率
    smart_move_chance: float
    # 实现该难度的 AI 策略名称
    strategy: str


class Difficulty(str, Enum):
    """AI 难度等级"""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def config(self) -> DifficultyConfig:
        return DIFFICULTY_CONFIG[self]


DIFFICULTY_CONFIG: dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(
        name="Easy",
        description="Random moves with basic blocking",
        smart_move_chance=0.3,
        strategy="random",
    ),
    Difficulty.MEDIUM: DifficultyConfig(
        name="Medium",
        description="Strategic play with win/block detection",
        smart_move_chance=0.7,
        strategy="heuristic",
    ),
    Difficulty.HARD: DifficultyConfig(
        name="Hard",
        description="Optimal play using minimax algorithm",
        smart_move_chance=1.0,
        strategy="minimax",
    ),
}
