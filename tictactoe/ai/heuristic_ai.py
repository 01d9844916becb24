"""
启发式 AI 策略（中等难度）

必胜必堵，其余时候大概率按位置偏好落子
"""

from typing import ClassVar

from tictactoe.ai.base import AIEngine, AIStrategy
from tictactoe.ai.tactics import (
    find_blocking_move,
    find_winning_move,
    strategic_preference_order,
)
from tictactoe.board import Board
from tictactoe.logging import logger
from tictactoe.types import Cell, Difficulty


@AIEngine.register
class HeuristicAI(AIStrategy):
    """启发式 AI

    决策顺序：
    1. 能赢就赢
    2. 对手能赢就堵
    3. 以 smart_move_chance 的概率选位置最好的格子（中心 > 角 > 边）
    4. 否则随机
    """

    name: ClassVar[str] = "heuristic"
    difficulty: ClassVar[Difficulty] = Difficulty.MEDIUM

    def select_move(self, board: Board, mark: Cell = Cell.O) -> int:
        moves = self._require_moves(board)

        move = find_winning_move(board, mark)
        if move is not None:
            logger.debug(f"[{self.name}] winning move {move}")
            return move

        move = find_blocking_move(board, mark)
        if move is not None:
            logger.debug(f"[{self.name}] blocking move {move}")
            return move

        if self.rng.random() < self.smart_move_chance:
            strategic = strategic_preference_order(board)
            if strategic:
                return strategic[0]

        return self._random_move(moves)
