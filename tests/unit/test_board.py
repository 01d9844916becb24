"""
棋盘单元测试
"""

import pytest

from tictactoe.board import (
    Board,
    apply_move,
    available_moves,
    check_winner,
    evaluate_board,
    is_board_full,
    is_game_over,
    reset_board,
)
from tictactoe.errors import IllegalMoveError
from tictactoe.types import WINNING_LINES, Cell


def reachable_boards() -> set[Board]:
    """从空棋盘出发、按合法顺序能到达的所有局面"""
    seen: set[Board] = set()
    stack = [(Board.empty(), Cell.X)]
    while stack:
        board, turn = stack.pop()
        if board in seen:
            continue
        seen.add(board)
        if board.is_game_over():
            continue
        for move in board.available_moves():
            stack.append((board.apply_move(move, turn), turn.opposite))
    return seen


class TestBoardInitialization:
    """棋盘初始化测试"""

    def test_empty_board(self):
        """测试空棋盘"""
        board = Board.empty()
        assert len(board) == 9
        assert all(cell == Cell.EMPTY for cell in board)
        assert board.available_moves() == list(range(9))

    def test_from_string(self):
        """测试从文本解析"""
        board = Board.from_string("XX.OO....")
        assert board[0] == Cell.X
        assert board[1] == Cell.X
        assert board[2] == Cell.EMPTY
        assert board[3] == Cell.O
        assert board.to_string() == "XX.OO...."

    def test_from_string_accepts_alternate_empty_symbols(self):
        """测试其他空格符号和小写标记"""
        assert Board.from_string("x-_ o....").to_string() == "X...O...."

    def test_from_list_with_none(self):
        """测试从列表解析"""
        board = Board.from_list(["X", "X", None, "O", "O", None, None, None, None])
        assert board == Board.from_string("XX.OO....")
        assert board.to_list() == ["X", "X", None, "O", "O", None, None, None, None]

    def test_wrong_size_rejected(self):
        """测试格子数不是 9"""
        with pytest.raises(ValueError):
            Board.from_string("XO")
        with pytest.raises(ValueError):
            Board.from_string("." * 10)

    def test_unknown_symbol_rejected(self):
        """测试未知符号"""
        with pytest.raises(ValueError):
            Board.from_string("XXZ......")

    def test_board_is_hashable_value(self):
        """测试棋盘是值对象"""
        assert Board.from_string("X........") == Board.empty().apply_move(0, Cell.X)
        assert len({Board.empty(), Board.empty()}) == 1

    def test_board_is_frozen(self):
        """测试棋盘不可修改"""
        board = Board.empty()
        with pytest.raises(AttributeError):
            board.cells = ()


class TestApplyMove:
    """落子测试"""

    def test_apply_move_returns_new_board(self):
        """测试落子返回新棋盘，原棋盘不变"""
        board = Board.empty()
        new_board = board.apply_move(4, Cell.X)

        assert new_board[4] == Cell.X
        assert board[4] == Cell.EMPTY
        for i in range(9):
            if i != 4:
                assert new_board[i] == board[i]

    def test_apply_move_to_occupied_cell(self):
        """测试在已占用格子落子"""
        board = Board.from_string("X........")
        with pytest.raises(IllegalMoveError) as exc_info:
            board.apply_move(0, Cell.O)
        assert exc_info.value.index == 0
        assert exc_info.value.occupant == Cell.X
        assert board == Board.from_string("X........")

    def test_illegal_move_is_value_error(self):
        """测试非法落子也是 ValueError"""
        with pytest.raises(ValueError):
            Board.from_string("X........").apply_move(0, Cell.X)

    def test_apply_move_out_of_range(self):
        """测试越界落子"""
        with pytest.raises(IllegalMoveError):
            Board.empty().apply_move(9, Cell.X)
        with pytest.raises(IllegalMoveError):
            Board.empty().apply_move(-1, Cell.X)

    def test_apply_empty_mark(self):
        """测试不能落空标记"""
        with pytest.raises(ValueError):
            Board.empty().apply_move(0, Cell.EMPTY)

    def test_every_occupied_cell_rejects(self):
        """测试每个已占用格子都拒绝落子"""
        board = Board.from_string("XOX.O.X..")
        for index, cell in enumerate(board):
            if cell.is_mark:
                with pytest.raises(IllegalMoveError):
                    board.apply_move(index, Cell.O)


class TestAvailableMoves:
    """走法枚举测试"""

    def test_ascending_order(self):
        """测试升序"""
        board = Board.from_string("X...O...X")
        assert board.available_moves() == [1, 2, 3, 5, 6, 7]

    def test_moves_plus_occupied_is_nine(self):
        """测试空格数 + 占用数 == 9"""
        for board in reachable_boards():
            assert len(board.available_moves()) + board.occupied_count() == 9


class TestWinDetection:
    """胜负判定测试"""

    @pytest.mark.parametrize("line", WINNING_LINES)
    def test_every_line_wins(self, line):
        """测试每条连线都能判胜"""
        cells = ["."] * 9
        for i in line:
            cells[i] = "O"
        board = Board.from_string("".join(cells))
        assert board.check_winner() == Cell.O
        assert board.winning_line() == line

    def test_no_winner(self):
        """测试无人获胜"""
        board = Board.from_string("XO..X...O")
        assert board.check_winner() is None
        assert board.winning_line() is None
        assert not board.is_game_over()

    def test_full_board_draw(self):
        """测试满盘无连线即平局"""
        board = Board.from_string("XOXXOOOXX")
        outcome = board.evaluate()
        assert board.check_winner() is None
        assert board.is_full()
        assert outcome.is_draw
        assert outcome.is_game_over
        assert outcome.available_moves == ()

    def test_win_on_full_board_is_not_draw(self):
        """测试最后一步获胜不算平局"""
        board = Board.from_string("XXXOOXOXO")
        outcome = board.evaluate()
        assert outcome.winner == Cell.X
        assert not outcome.is_draw

    def test_only_winner_completes_lines(self):
        """测试合法局面中只有赢家占满连线（最后一步可能同时连成两条）"""
        for board in reachable_boards():
            winner = board.check_winner()
            if winner is None:
                continue
            lines = [line for line in WINNING_LINES if all(board[i] == winner for i in line)]
            assert len(lines) >= 1
            other = [
                line
                for line in WINNING_LINES
                if all(board[i] == winner.opposite for i in line)
            ]
            assert other == []

    def test_reachable_position_count(self):
        """测试合法局面总数"""
        assert len(reachable_boards()) == 5478


class TestFunctionalInterface:
    """函数式接口测试"""

    def test_functions_match_methods(self):
        board = Board.from_string("XX.OO....")
        assert check_winner(board) is None
        assert not is_board_full(board)
        assert not is_game_over(board)
        assert available_moves(board) == [2, 5, 6, 7, 8]
        assert apply_move(board, 2, Cell.X).check_winner() == Cell.X
        assert evaluate_board(board).available_moves == (2, 5, 6, 7, 8)
        assert reset_board() == Board.empty()

    def test_to_dict(self):
        """测试序列化"""
        data = Board.from_string("OOOXX....").to_dict()
        assert data["winner"] == "O"
        assert data["winning_line"] == [0, 1, 2]
        assert data["is_game_over"] is True
        assert data["available_moves"] == [5, 6, 7, 8]
