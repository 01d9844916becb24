"""
随机 AI 策略（简单难度）

大部分时候随机落子，偶尔会抓住制胜点或封堵对手
"""

from typing import ClassVar

from tictactoe.ai.base import AIEngine, AIStrategy
from tictactoe.ai.tactics import find_blocking_move, find_winning_move
from tictactoe.board import Board
from tictactoe.logging import logger
from tictactoe.types import Cell, Difficulty


@AIEngine.register
class RandomAI(AIStrategy):
    """随机 AI

    每回合掷一次骰子：低于 smart_move_chance 时先找制胜点再找封堵点，
    都找不到则直接随机落子，不会重新掷骰
    """

    name: ClassVar[str] = "random"
    difficulty: ClassVar[Difficulty] = Difficulty.EASY

    def select_move(self, board: Board, mark: Cell = Cell.O) -> int:
        moves = self._require_moves(board)

        if self.rng.random() < self.smart_move_chance:
            move = find_winning_move(board, mark)
            if move is None:
                move = find_blocking_move(board, mark)
            if move is not None:
                logger.debug(f"[{self.name}] tactical move {move} on {board.to_string()}")
                return move

        return self._random_move(moves)
