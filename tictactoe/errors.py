"""
异常定义

引擎只报告调用方违反约定的情况，不做重试或降级
"""

from tictactoe.types import Cell


class TicTacToeError(Exception):
    """井字棋引擎异常基类"""


class IllegalMoveError(TicTacToeError, ValueError):
    """在已占用（或不存在）的格子上落子"""

    def __init__(self, index: int, occupant: Cell | None = None):
        self.index = index
        self.occupant = occupant
        if occupant is None:
            message = f"Invalid move: cell {index} is out of range (0-8)"
        else:
            message = f"Invalid move: cell {index} already occupied by {occupant.value}"
        super().__init__(message)


class NoAvailableMovesError(TicTacToeError, ValueError):
    """棋盘已满时仍请求 AI 走棋"""

    def __init__(self, message: str = "No available moves"):
        super().__init__(message)
