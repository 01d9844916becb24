"""
AI 引擎基类和策略接口

定义可扩展的 AI 架构，支持策略模式和注册机制
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Protocol

from tictactoe.board import Board
from tictactoe.errors import NoAvailableMovesError
from tictactoe.types import Cell, Difficulty


class RandomSource(Protocol):
    """随机数来源

    只需要提供 [0, 1) 区间的均匀分布浮点数，测试中可以注入固定序列
    """

    def random(self) -> float: ...


@dataclass
class AIConfig:
    """AI 配置"""

    name: str = "AI"
    # 覆盖难度默认的聪明走法概率
    smart_move_chance: float | None = None
    # 随机种子（用于复现棋局）
    seed: int | None = None


class AIStrategy(ABC):
    """AI 策略接口

    所有 AI 实现必须继承此类，实现可插拔的 AI 策略。
    策略本身不保存棋局状态，每次决策只依赖传入的棋盘。
    """

    # 策略名称，用于注册和识别
    name: ClassVar[str] = "base"
    # 策略对应的难度
    difficulty: ClassVar[Difficulty]

    def __init__(self, config: AIConfig | None = None, rng: RandomSource | None = None):
        self.config = config or AIConfig()
        self.rng: RandomSource = rng or random.Random(self.config.seed)

    @property
    def smart_move_chance(self) -> float:
        if self.config.smart_move_chance is not None:
            return self.config.smart_move_chance
        return self.difficulty.config.smart_move_chance

    @abstractmethod
    def select_move(self, board: Board, mark: Cell = Cell.O) -> int:
        """选择一步走法

        Args:
            board: 当前棋盘
            mark: AI 执的标记

        Returns:
            要落子的格子下标

        Raises:
            NoAvailableMovesError: 棋盘上没有空格
        """

    def _require_moves(self, board: Board) -> list[int]:
        moves = board.available_moves()
        if not moves:
            raise NoAvailableMovesError(f"No available moves on board {board.to_string()}")
        return moves

    def _random_move(self, moves: list[int]) -> int:
        """均匀随机选择一个空格"""
        index = int(self.rng.random() * len(moves))
        return moves[min(index, len(moves) - 1)]


class AIEngine:
    """AI 引擎

    管理 AI 策略的注册和选择，提供统一的 AI 调用接口
    """

    # 已注册的策略
    _strategies: ClassVar[dict[str, type[AIStrategy]]] = {}

    def __init__(self, strategy: AIStrategy | None = None):
        self.strategy = strategy

    @classmethod
    def register(cls, strategy_class: type[AIStrategy]) -> type[AIStrategy]:
        """注册 AI 策略（可用作装饰器）"""
        cls._strategies[strategy_class.name] = strategy_class
        return strategy_class

    @classmethod
    def get_strategy(
        cls, name: str, config: AIConfig | None = None, rng: RandomSource | None = None
    ) -> AIStrategy:
        """获取指定名称的策略实例"""
        if name not in cls._strategies:
            available = ", ".join(cls._strategies.keys())
            raise ValueError(f"Unknown AI strategy: {name}. Available: {available}")
        return cls._strategies[name](config, rng)

    @classmethod
    def list_strategies(cls) -> list[str]:
        """列出所有已注册的策略"""
        return list(cls._strategies.keys())

    @classmethod
    def for_difficulty(
        cls,
        difficulty: Difficulty,
        config: AIConfig | None = None,
        rng: RandomSource | None = None,
    ) -> "AIEngine":
        """根据难度等级创建引擎"""
        return cls(cls.get_strategy(difficulty.config.strategy, config, rng))

    def select_move(self, board: Board, mark: Cell = Cell.O) -> int:
        """使用当前策略选择走法"""
        if self.strategy is None:
            raise ValueError("No AI strategy set")
        return self.strategy.select_move(board, mark)

    def set_strategy(self, strategy: AIStrategy) -> None:
        """设置 AI 策略"""
        self.strategy = strategy

    def set_strategy_by_name(self, name: str, config: AIConfig | None = None) -> None:
        """通过名称设置策略"""
        self.strategy = self.get_strategy(name, config)


def select_opponent_move(
    board: Board,
    difficulty: Difficulty,
    rng: RandomSource | None = None,
    mark: Cell = Cell.O,
) -> int:
    """为电脑方计算一步走法"""
    return AIEngine.for_difficulty(difficulty, rng=rng).select_move(board, mark)
