"""
Minimax AI 策略（困难难度）

带 Alpha-Beta 剪枝的完整博弈树搜索，确定性且不会输
"""

from typing import ClassVar, NamedTuple

from tictactoe.ai.base import AIConfig, AIEngine, AIStrategy, RandomSource
from tictactoe.ai.tactics import strategic_preference_order
from tictactoe.board import Board
from tictactoe.logging import logger
from tictactoe.types import Cell, Difficulty

# 获胜基础分，减去深度后越快获胜越好
WIN_SCORE = 10


class SearchResult(NamedTuple):
    """搜索结果"""

    score: float
    move: int | None


@AIEngine.register
class MinimaxAI(AIStrategy):
    """Minimax AI

    使用 Minimax 算法和 Alpha-Beta 剪枝搜索到终局。
    3x3 棋盘最多 9 层，不需要迭代加深或置换表。
    """

    name: ClassVar[str] = "minimax"
    difficulty: ClassVar[Difficulty] = Difficulty.HARD

    def __init__(self, config: AIConfig | None = None, rng: RandomSource | None = None):
        super().__init__(config, rng)
        self._nodes_searched = 0

    def select_move(self, board: Board, mark: Cell = Cell.O) -> int:
        moves = self._require_moves(board)
        self._nodes_searched = 0

        result = self._search_root(board, mark)
        if result.move is None:
            # 棋盘已分胜负却仍有空格，搜索没有可返回的走法
            logger.error(f"[{self.name}] search returned no move for {board.to_string()}")
            return moves[0]

        logger.debug(
            f"[{self.name}] evaluated {self._nodes_searched} positions. "
            f"Best move: {result.move} (score: {result.score})"
        )
        return result.move

    def _search_root(self, board: Board, mark: Cell) -> SearchResult:
        """根节点搜索

        每个根走法都用完整窗口求出精确分数，同分时按中心 > 角 > 边选择
        """
        if board.check_winner() is not None:
            return self.minimax(board, 0, True, maximizer=mark)

        scored: list[tuple[int, float]] = []
        for move in board.available_moves():
            child = board.apply_move(move, mark)
            result = self.minimax(child, 1, False, maximizer=mark)
            scored.append((move, result.score))

        best_score = max(score for _, score in scored)
        top_moves = [move for move, score in scored if score == best_score]
        preference = strategic_preference_order(board)
        return SearchResult(best_score, min(top_moves, key=preference.index))

    def minimax(
        self,
        board: Board,
        depth: int = 0,
        is_maximizing: bool = True,
        alpha: float = float("-inf"),
        beta: float = float("inf"),
        maximizer: Cell = Cell.O,
    ) -> SearchResult:
        """Minimax 搜索，带 Alpha-Beta 剪枝

        Args:
            board: 当前棋盘
            depth: 已经走过的层数
            is_maximizing: 当前是否轮到最大化一方
            alpha: 最大化一方已确保的下界
            beta: 最小化一方已确保的上界
            maximizer: 最大化一方的标记

        Returns:
            (分数, 最佳走法)。终局时走法为 None；同分取升序第一个
        """
        self._nodes_searched += 1
        minimizer = maximizer.opposite

        winner = board.check_winner()
        if winner == maximizer:
            return SearchResult(WIN_SCORE - depth, None)
        if winner == minimizer:
            return SearchResult(depth - WIN_SCORE, None)
        if board.is_full():
            return SearchResult(0, None)

        best_move: int | None = None

        if is_maximizing:
            best_score = float("-inf")
            for move in board.available_moves():
                child = board.apply_move(move, maximizer)
                score = self.minimax(child, depth + 1, False, alpha, beta, maximizer).score
                if score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
        else:
            best_score = float("inf")
            for move in board.available_moves():
                child = board.apply_move(move, minimizer)
                score = self.minimax(child, depth + 1, True, alpha, beta, maximizer).score
                if score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, score)
                if beta <= alpha:
                    break

        return SearchResult(best_score, best_move)

    @property
    def nodes_searched(self) -> int:
        """返回上次搜索的节点数"""
        return self._nodes_searched


def minimax(
    board: Board,
    depth: int = 0,
    is_maximizing: bool = True,
    alpha: float = float("-inf"),
    beta: float = float("inf"),
    maximizer: Cell = Cell.O,
) -> SearchResult:
    """函数式接口，等价于 MinimaxAI().minimax(...)"""
    return MinimaxAI().minimax(board, depth, is_maximizing, alpha, beta, maximizer)
