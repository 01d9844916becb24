"""
战术辅助函数

一步制胜、一步封堵，以及中心 > 角 > 边的位置偏好
"""

from tictactoe.board import Board
from tictactoe.types import CENTER, CORNERS, EDGES, Cell


def find_winning_move(board: Board, mark: Cell) -> int | None:
    """按升序找第一个能让 mark 立即获胜的空格"""
    for move in board.available_moves():
        if board.apply_move(move, mark).check_winner() == mark:
            return move
    return None


def find_blocking_move(board: Board, mark: Cell) -> int | None:
    """找对手下一步的制胜点，mark 应该抢先占住"""
    return find_winning_move(board, mark.opposite)


def strategic_preference_order(board: Board) -> list[int]:
    """按位置强弱排列可用走法：中心、四角 (0,2,6,8)、四边 (1,3,5,7)"""
    available = set(board.available_moves())
    return [i for i in (CENTER, *CORNERS, *EDGES) if i in available]
