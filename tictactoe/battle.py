"""
AI 对战

让两个难度的 AI 互相对战，统计胜负
"""

import random
from collections.abc import Callable
from dataclasses import dataclass, field

from tictactoe.ai import AIEngine
from tictactoe.board import Board
from tictactoe.logging import logger
from tictactoe.types import Cell, Difficulty, GameResult


@dataclass
class MatchRecord:
    """单局对战记录"""

    x_difficulty: Difficulty
    o_difficulty: Difficulty
    result: GameResult
    moves: list[int]
    final_board: Board


@dataclass
class BattleStats:
    """多局对战统计"""

    x_difficulty: Difficulty
    o_difficulty: Difficulty
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0
    records: list[MatchRecord] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    @property
    def avg_moves(self) -> float:
        if not self.records:
            return 0.0
        return sum(len(r.moves) for r in self.records) / len(self.records)

    def rate(self, count: int) -> float:
        """占总局数的百分比，没有对局时为 0"""
        return count / self.total * 100 if self.total else 0.0

    def add(self, record: MatchRecord) -> None:
        if record.result == GameResult.X_WIN:
            self.x_wins += 1
        elif record.result == GameResult.O_WIN:
            self.o_wins += 1
        else:
            self.draws += 1
        self.records.append(record)

    def to_dict(self) -> dict:
        return {
            "x": self.x_difficulty.value,
            "o": self.o_difficulty.value,
            "x_wins": self.x_wins,
            "o_wins": self.o_wins,
            "draws": self.draws,
            "total": self.total,
        }


def play_match(
    x_difficulty: Difficulty, o_difficulty: Difficulty, seed: int | None = None
) -> MatchRecord:
    """运行单场对战，X 先手"""
    rng = random.Random(seed)
    engines = {
        Cell.X: AIEngine.for_difficulty(x_difficulty, rng=rng),
        Cell.O: AIEngine.for_difficulty(o_difficulty, rng=rng),
    }

    board = Board.empty()
    turn = Cell.X
    moves: list[int] = []
    while not board.is_game_over():
        move = engines[turn].select_move(board, turn)
        board = board.apply_move(move, turn)
        moves.append(move)
        turn = turn.opposite

    return MatchRecord(
        x_difficulty=x_difficulty,
        o_difficulty=o_difficulty,
        result=board.evaluate().result,
        moves=moves,
        final_board=board,
    )


def run_battle(
    x_difficulty: Difficulty,
    o_difficulty: Difficulty,
    games: int = 10,
    seed: int | None = None,
    on_game: Callable[[MatchRecord], None] | None = None,
) -> BattleStats:
    """运行多场对战

    Args:
        x_difficulty: X 方（先手）难度
        o_difficulty: O 方难度
        games: 对局数
        seed: 随机种子，第 i 局使用 seed + i
        on_game: 每局结束后的回调（例如更新进度条）

    Returns:
        对战统计
    """
    stats = BattleStats(x_difficulty, o_difficulty)
    for i in range(games):
        game_seed = None if seed is None else seed + i
        record = play_match(x_difficulty, o_difficulty, game_seed)
        stats.add(record)
        if on_game is not None:
            on_game(record)

    logger.info(
        f"Battle {x_difficulty.value} (X) vs {o_difficulty.value} (O): "
        f"{stats.x_wins}-{stats.o_wins}-{stats.draws}"
    )
    return stats
