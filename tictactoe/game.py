"""
游戏管理类

管理棋盘、玩家回合、难度、比分和历史记录。
引擎本身无状态，这里是持有对局状态的一方。
"""

import random
import threading
from dataclasses import dataclass, field
from uuid import uuid4

from tictactoe.ai import AIEngine
from tictactoe.ai.base import RandomSource
from tictactoe.board import Board
from tictactoe.errors import IllegalMoveError
from tictactoe.logging import logger
from tictactoe.types import Cell, Difficulty, GameOutcome, GameResult


@dataclass
class Score:
    """累计比分，开新局时保留"""

    player_wins: int = 0
    computer_wins: int = 0
    draws: int = 0

    def record(self, outcome: GameOutcome, human_mark: Cell) -> None:
        """记录一局结果"""
        if outcome.winner == human_mark:
            self.player_wins += 1
        elif outcome.winner is not None:
            self.computer_wins += 1
        elif outcome.is_draw:
            self.draws += 1

    def reset(self) -> None:
        self.player_wins = 0
        self.computer_wins = 0
        self.draws = 0

    def to_dict(self) -> dict:
        return {
            "player_wins": self.player_wins,
            "computer_wins": self.computer_wins,
            "draws": self.draws,
        }


@dataclass
class MoveRecord:
    """走棋记录"""

    index: int
    mark: Cell
    by_ai: bool


@dataclass
class GameConfig:
    """游戏配置"""

    difficulty: Difficulty = Difficulty.MEDIUM
    # 人类玩家执的标记，X 先手
    human_mark: Cell = Cell.X
    seed: int | None = None  # 随机种子（用于复现棋局）
    # 电脑"思考"展示延迟范围（毫秒），只影响展示，不影响走法
    thinking_delay_ms: tuple[int, int] = field(default=(500, 1300))


class Game:
    """井字棋对局"""

    def __init__(
        self,
        game_id: str | None = None,
        config: GameConfig | None = None,
        rng: RandomSource | None = None,
    ):
        self.game_id = game_id or str(uuid4())
        self.config = config or GameConfig()
        if self.config.human_mark == Cell.EMPTY:
            raise ValueError("Human player must play X or O")
        self.rng: RandomSource = rng or random.Random(self.config.seed)
        # 延迟使用独立的随机数，不消耗 AI 的随机序列
        self._delay_rng = random.Random(self.config.seed)
        self.score = Score()
        # 同一局的走棋在 HTTP 服务的线程池里可能并发到达，检查和落子必须一起完成
        self._lock = threading.RLock()
        # 最近一次被拒绝的操作原因
        self.last_error: str | None = None
        self.difficulty = self.config.difficulty
        self._engine = AIEngine.for_difficulty(self.difficulty, rng=self.rng)
        self.new_game()

    @property
    def lock(self):
        """对局锁，调用方需要把多步检查和操作合成一步时使用"""
        return self._lock

    @property
    def human_mark(self) -> Cell:
        return self.config.human_mark

    @property
    def ai_mark(self) -> Cell:
        return self.config.human_mark.opposite

    @property
    def result(self) -> GameResult:
        return self.outcome.result

    @property
    def winner(self) -> Cell | None:
        return self.outcome.winner

    @property
    def is_draw(self) -> bool:
        return self.outcome.is_draw

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_game_over

    def is_ai_turn(self) -> bool:
        """是否轮到电脑走棋"""
        return not self.is_game_over and self.current_turn == self.ai_mark

    def new_game(self) -> None:
        """重置棋盘，X 先手，比分保留"""
        with self._lock:
            self.board = Board.empty()
            self.current_turn = Cell.X
            self.move_history: list[MoveRecord] = []
            self.outcome = self.board.evaluate()
            self.last_error = None

    def set_difficulty(self, difficulty: Difficulty) -> None:
        """切换难度并开始新局"""
        with self._lock:
            self.difficulty = difficulty
            self._engine = AIEngine.for_difficulty(difficulty, rng=self.rng)
            logger.info(f"Game {self.game_id}: difficulty set to {difficulty.value}")
            self.new_game()

    def reset_score(self) -> None:
        with self._lock:
            self.score.reset()

    def make_move(self, index: int) -> bool:
        """人类玩家落子

        非法操作（已结束、不是人类回合、格子已占用）会被记录并忽略，
        对局状态保持不变

        返回：是否成功；失败原因见 last_error
        """
        with self._lock:
            if self.is_game_over:
                return self._reject(f"Move {index} rejected: game has ended")
            if self.current_turn != self.human_mark:
                return self._reject(f"Move {index} rejected: it's the computer's turn")
            return self._play(index, self.human_mark, by_ai=False)

    def play_ai_move(self) -> int | None:
        """让电脑走一步，返回落子位置；不是电脑回合时返回 None"""
        with self._lock:
            if not self.is_ai_turn():
                return None
            move = self._engine.select_move(self.board, self.ai_mark)
            self._play(move, self.ai_mark, by_ai=True)
            return move

    def _reject(self, reason: str) -> bool:
        logger.warning(f"Game {self.game_id}: {reason}")
        self.last_error = reason
        return False

    def _play(self, index: int, mark: Cell, by_ai: bool) -> bool:
        try:
            board = self.board.apply_move(index, mark)
        except IllegalMoveError as e:
            return self._reject(str(e))

        self.last_error = None
        self.board = board
        self.move_history.append(MoveRecord(index, mark, by_ai))
        self.current_turn = mark.opposite
        self.outcome = board.evaluate()

        if self.outcome.is_game_over:
            self.score.record(self.outcome, self.human_mark)
            logger.info(f"Game {self.game_id} finished: {self.result.value}")
        return True

    def thinking_delay(self) -> float:
        """电脑"思考"的展示延迟（秒）"""
        low, high = self.config.thinking_delay_ms
        return (low + self._delay_rng.random() * (high - low)) / 1000

    def status_message(self, thinking: bool = False) -> str:
        """当前状态提示"""
        if thinking:
            return "Computer is thinking..."
        if self.winner == self.human_mark:
            return "You won!"
        if self.winner == self.ai_mark:
            return "Computer wins!"
        if self.is_draw:
            return "It's a draw!"
        if self.is_ai_turn():
            return "Computer's turn"
        return "Your turn"

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {
            "game_id": self.game_id,
            "board": self.board.to_dict(),
            "current_turn": self.current_turn.value,
            "difficulty": self.difficulty.value,
            "result": self.result.value,
            "move_count": len(self.move_history),
            "score": self.score.to_dict(),
            "status": self.status_message(),
        }

    def __repr__(self) -> str:
        return (
            f"Game({self.game_id}, turn={self.current_turn.value}, "
            f"difficulty={self.difficulty.value}, moves={len(self.move_history)})"
        )
