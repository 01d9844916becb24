"""
AI 引擎单元测试
"""

import pytest

from tictactoe.ai import (
    AIConfig,
    AIEngine,
    HeuristicAI,
    MinimaxAI,
    RandomAI,
    find_blocking_move,
    find_winning_move,
    minimax,
    select_opponent_move,
    strategic_preference_order,
)
from tictactoe.board import Board
from tictactoe.errors import NoAvailableMovesError
from tictactoe.types import Cell, Difficulty


class ScriptedRandom:
    """按固定序列返回随机数，用于确定性测试"""

    def __init__(self, *values: float):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls]
        self.calls += 1
        return value


class TestAIEngine:
    """AI 引擎测试"""

    def test_register_strategy(self):
        """测试策略注册"""
        strategies = AIEngine.list_strategies()
        assert "random" in strategies
        assert "heuristic" in strategies
        assert "minimax" in strategies

    def test_get_strategy(self):
        """测试获取策略"""
        assert isinstance(AIEngine.get_strategy("random"), RandomAI)
        assert isinstance(AIEngine.get_strategy("heuristic"), HeuristicAI)
        assert isinstance(AIEngine.get_strategy("minimax"), MinimaxAI)

    def test_get_strategy_with_config(self):
        """测试获取策略并配置"""
        config = AIConfig(smart_move_chance=0.5)
        strategy = AIEngine.get_strategy("random", config)
        assert strategy.smart_move_chance == 0.5

    def test_default_smart_move_chance_follows_difficulty(self):
        """测试默认概率来自难度配置"""
        assert RandomAI().smart_move_chance == 0.3
        assert HeuristicAI().smart_move_chance == 0.7
        assert MinimaxAI().smart_move_chance == 1.0

    def test_unknown_strategy(self):
        """测试未知策略"""
        with pytest.raises(ValueError):
            AIEngine.get_strategy("unknown_strategy")

    def test_for_difficulty(self):
        """测试按难度创建引擎"""
        assert isinstance(AIEngine.for_difficulty(Difficulty.EASY).strategy, RandomAI)
        assert isinstance(AIEngine.for_difficulty(Difficulty.MEDIUM).strategy, HeuristicAI)
        assert isinstance(AIEngine.for_difficulty(Difficulty.HARD).strategy, MinimaxAI)

    def test_engine_without_strategy(self):
        """测试未设置策略"""
        with pytest.raises(ValueError):
            AIEngine().select_move(Board.empty())

    def test_set_strategy_by_name(self):
        engine = AIEngine()
        engine.set_strategy_by_name("minimax")
        assert engine.select_move(Board.empty()) == 4

    def test_seeded_strategies_are_reproducible(self):
        """测试相同种子走法相同"""
        board = Board.from_string("X........")
        moves1 = [RandomAI(AIConfig(seed=7)).select_move(board) for _ in range(5)]
        moves2 = [RandomAI(AIConfig(seed=7)).select_move(board) for _ in range(5)]
        assert moves1 == moves2

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_full_board_raises(self, difficulty):
        """测试满盘请求走法"""
        board = Board.from_string("XOXXOOOXX")
        with pytest.raises(NoAvailableMovesError):
            select_opponent_move(board, difficulty)

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_selected_move_is_available(self, difficulty):
        """测试选出的走法一定是空格"""
        board = Board.from_string("X.O.X....")
        for _ in range(20):
            assert select_opponent_move(board, difficulty) in board.available_moves()


class TestTactics:
    """战术辅助函数测试"""

    def test_find_winning_move(self):
        """测试找制胜点"""
        board = Board.from_string("XX.OO....")
        assert find_winning_move(board, Cell.X) == 2
        assert find_winning_move(board, Cell.O) == 5

    def test_find_winning_move_none(self):
        """测试没有制胜点"""
        assert find_winning_move(Board.from_string("X...O...."), Cell.X) is None

    def test_find_winning_move_first_in_order(self):
        """测试多个制胜点时取最小下标"""
        board = Board.from_string("OO.O.....")
        assert find_winning_move(board, Cell.O) == 2

    def test_find_blocking_move(self):
        """测试找封堵点"""
        board = Board.from_string("XX..O....")
        assert find_blocking_move(board, Cell.O) == 2
        assert find_blocking_move(board, Cell.X) is None

    def test_strategic_order_empty_board(self):
        """测试空棋盘的位置偏好"""
        assert strategic_preference_order(Board.empty()) == [4, 0, 2, 6, 8, 1, 3, 5, 7]

    def test_strategic_order_skips_occupied(self):
        """测试跳过已占用格子"""
        board = Board.from_string("X...O...X")
        assert strategic_preference_order(board) == [2, 6, 1, 3, 5, 7]


class TestRandomAI:
    """随机 AI（简单）测试"""

    def test_smart_roll_takes_win(self):
        """测试掷骰成功时抓住制胜点"""
        board = Board.from_string("OO.XX....")
        rng = ScriptedRandom(0.1)
        assert RandomAI(rng=rng).select_move(board) == 2
        assert rng.calls == 1

    def test_smart_roll_blocks(self):
        """测试掷骰成功时封堵"""
        board = Board.from_string("XX..O....")
        assert RandomAI(rng=ScriptedRandom(0.29)).select_move(board) == 2

    def test_failed_roll_plays_random_not_winning_move(self):
        """测试掷骰失败时随机落子，而不是制胜点"""
        board = Board.from_string("OO.XX....")
        # 可用走法 [2, 5, 6, 7, 8]，0.9 * 5 -> 下标 4
        rng = ScriptedRandom(0.3, 0.9)
        assert RandomAI(rng=rng).select_move(board) == 8
        assert rng.calls == 2

    def test_smart_roll_without_tactics_falls_through(self):
        """测试掷骰成功但无战术走法时直接随机，不重新掷骰"""
        board = Board.from_string("X........")
        rng = ScriptedRandom(0.0, 0.5)
        # 可用走法 [1..8]，0.5 * 8 -> 下标 4
        assert RandomAI(rng=rng).select_move(board) == 5
        assert rng.calls == 2

    def test_random_move_upper_bound(self):
        """测试随机数接近 1 时取最后一个走法"""
        board = Board.from_string("X........")
        assert RandomAI(rng=ScriptedRandom(0.5, 0.9999999)).select_move(board) == 8

    def test_random_moves_vary(self):
        """测试多次选择走法（验证随机性）"""
        ai = RandomAI()
        moves = {ai.select_move(Board.empty()) for _ in range(100)}
        assert len(moves) > 1


class TestHeuristicAI:
    """启发式 AI（中等）测试"""

    def test_prefers_win_over_block(self):
        """测试双方都有威胁时优先获胜"""
        board = Board.from_string("XX.OO....")
        rng = ScriptedRandom()
        assert HeuristicAI(rng=rng).select_move(board) == 5
        assert rng.calls == 0

    def test_blocks_before_strategic(self):
        """测试封堵优先于位置偏好"""
        board = Board.from_string("XX..O....")
        assert HeuristicAI(rng=ScriptedRandom()).select_move(board) == 2

    def test_strategic_takes_center(self):
        """测试掷骰成功时占中心"""
        board = Board.from_string("X........")
        assert HeuristicAI(rng=ScriptedRandom(0.69)).select_move(board) == 4

    def test_strategic_takes_corner_when_center_taken(self):
        """测试中心被占时占角"""
        board = Board.from_string("....X....")
        assert HeuristicAI(rng=ScriptedRandom(0.1)).select_move(board) == 0

    def test_failed_roll_plays_random(self):
        """测试掷骰失败时随机落子"""
        board = Board.from_string("X........")
        rng = ScriptedRandom(0.7, 0.0)
        assert HeuristicAI(rng=rng).select_move(board) == 1
        assert rng.calls == 2

    def test_plays_as_x(self):
        """测试 AI 执 X"""
        board = Board.from_string("XX.OO....")
        assert HeuristicAI(rng=ScriptedRandom()).select_move(board, Cell.X) == 2


class TestMinimaxAI:
    """Minimax AI（困难）测试"""

    def test_empty_board_opens_center(self):
        """测试空棋盘先手占中心"""
        assert MinimaxAI().select_move(Board.empty()) == 4

    def test_deterministic(self):
        """测试相同局面走法相同"""
        board = Board.from_string("X...O...X")
        moves = {MinimaxAI().select_move(board) for _ in range(5)}
        assert len(moves) == 1

    def test_takes_win(self):
        """测试选择立即获胜"""
        board = Board.from_string("XX.OO....")
        assert MinimaxAI().select_move(board) == 5

    def test_blocks(self):
        """测试封堵对手"""
        board = Board.from_string("XX..O....")
        assert MinimaxAI().select_move(board) == 2

    def test_plays_as_x(self):
        """测试 AI 执 X"""
        board = Board.from_string("XX.OO....")
        assert MinimaxAI().select_move(board, Cell.X) == 2

    def test_answers_corner_opening_with_center(self):
        """测试对手占角时占中心"""
        assert MinimaxAI().select_move(Board.from_string("X........")) == 4

    def test_nodes_searched(self):
        """测试搜索节点计数"""
        ai = MinimaxAI()
        ai.select_move(Board.from_string("X........"))
        assert ai.nodes_searched > 0

    def test_terminal_scores(self):
        """测试终局分数"""
        ai = MinimaxAI()
        assert ai.minimax(Board.from_string("OOOXX...."), depth=3) == (7, None)
        assert ai.minimax(Board.from_string("XXXOO...."), depth=2) == (-8, None)
        assert ai.minimax(Board.from_string("XOXXOOOXX"), depth=9) == (0, None)

    def test_minimax_prefers_faster_win(self):
        """测试越快获胜分数越高"""
        result = minimax(Board.from_string("OO.XX.X.."), 0, True)
        assert result.move == 2
        assert result.score == 9

    def test_minimax_empty_board_is_draw(self):
        """测试完美对弈是平局，同分取最小下标"""
        result = minimax(Board.empty(), 0, True)
        assert result.score == 0
        assert result.move == 0

    def test_minimizing_side(self):
        """测试最小化一方封堵"""
        result = minimax(Board.from_string("OO..X...."), 0, False)
        assert result.move == 2

    def test_decided_board_falls_back_to_first_move(self):
        """测试已分胜负但有空格时退回第一个空格"""
        assert MinimaxAI().select_move(Board.from_string("OOOXX....")) == 5


def _hard_never_loses(board: Board, human: Cell, ai: MinimaxAI) -> None:
    """穷举人类所有走法，困难 AI 不能输"""
    winner = board.check_winner()
    assert winner != human, f"Hard lost on {board.to_string()}"
    if board.is_game_over():
        return
    x_count = sum(1 for c in board if c == Cell.X)
    o_count = sum(1 for c in board if c == Cell.O)
    turn = Cell.X if x_count == o_count else Cell.O
    if turn == human:
        for move in board.available_moves():
            _hard_never_loses(board.apply_move(move, human), human, ai)
    else:
        move = ai.select_move(board, human.opposite)
        _hard_never_loses(board.apply_move(move, human.opposite), human, ai)


class TestHardNeverLoses:
    """困难 AI 不败测试"""

    def test_hard_as_o_never_loses(self):
        """测试困难 AI 后手面对任何走法都不输"""
        _hard_never_loses(Board.empty(), Cell.X, MinimaxAI())

    def test_hard_as_x_never_loses(self):
        """测试困难 AI 先手面对任何走法都不输"""
        _hard_never_loses(Board.empty(), Cell.O, MinimaxAI())
