"""
棋盘类定义

不可变的 3x3 棋盘，以及胜负判定、走法枚举和落子规则
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from tictactoe.errors import IllegalMoveError
from tictactoe.types import BOARD_SIZE, WINNING_LINES, Cell, GameOutcome

# 文本格式中视为空格的字符
_EMPTY_SYMBOLS = frozenset(".-_ ")


def _to_cell(value: Cell | str | None) -> Cell:
    """把单个格子的各种表示统一为 Cell"""
    if isinstance(value, Cell):
        return value
    if value is None or value in _EMPTY_SYMBOLS or value == "":
        return Cell.EMPTY
    symbol = str(value).upper()
    if symbol == "X":
        return Cell.X
    if symbol == "O":
        return Cell.O
    raise ValueError(f"Unknown cell symbol: {value!r}")


@dataclass(frozen=True)
class Board:
    """井字棋棋盘

    坐标系统：0-8 按行优先排列
    - 0, 1, 2 是第一行
    - 6, 7, 8 是最后一行

    棋盘是不可变值对象，每次落子都返回新棋盘，搜索时无需撤销
    """

    cells: tuple[Cell, ...] = field(default=(Cell.EMPTY,) * BOARD_SIZE)

    def __post_init__(self):
        cells = tuple(_to_cell(c) for c in self.cells)
        if len(cells) != BOARD_SIZE:
            raise ValueError(f"Board must have exactly {BOARD_SIZE} cells, got {len(cells)}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        """创建空棋盘"""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """从文本解析，例如 XX.OO...."""
        return cls(tuple(text))

    @classmethod
    def from_list(cls, values: Iterable[Cell | str | None]) -> "Board":
        """从列表解析，空格可以是 None"""
        return cls(tuple(values))

    def to_string(self) -> str:
        return "".join(c.value for c in self.cells)

    def to_list(self) -> list[str | None]:
        """序列化为 JSON 友好的列表"""
        return [c.value if c.is_mark else None for c in self.cells]

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return BOARD_SIZE

    def __str__(self) -> str:
        rows = []
        for row in range(3):
            rows.append(
                " | ".join(
                    c.value if c.is_mark else str(row * 3 + col)
                    for col, c in enumerate(self.cells[row * 3 : row * 3 + 3])
                )
            )
        return "\n---------\n".join(rows)

    # ------------------------------------------------------------------
    # 走法
    # ------------------------------------------------------------------

    def available_moves(self) -> list[int]:
        """所有空格的下标，升序

        顺序决定了走法偏好和搜索顺序
        """
        return [i for i, c in enumerate(self.cells) if c == Cell.EMPTY]

    def occupied_count(self) -> int:
        return sum(1 for c in self.cells if c.is_mark)

    def apply_move(self, index: int, mark: Cell) -> "Board":
        """落子，返回新棋盘

        Raises:
            IllegalMoveError: 目标格子越界或已被占用
            ValueError: mark 不是 X/O
        """
        if not mark.is_mark:
            raise ValueError("Cannot play an empty mark")
        if not 0 <= index < BOARD_SIZE:
            raise IllegalMoveError(index)
        occupant = self.cells[index]
        if occupant != Cell.EMPTY:
            raise IllegalMoveError(index, occupant)

        cells = list(self.cells)
        cells[index] = mark
        return Board(tuple(cells))

    # ------------------------------------------------------------------
    # 胜负判定
    # ------------------------------------------------------------------

    def check_winner(self) -> Cell | None:
        """检查赢家

        只要任意一条连线三格相同且非空即返回该标记。
        不校验棋局历史是否合法。
        """
        line = self.winning_line()
        if line is None:
            return None
        return self.cells[line[0]]

    def winning_line(self) -> tuple[int, int, int] | None:
        """返回第一条被占满的获胜连线"""
        for a, b, c in WINNING_LINES:
            if self.cells[a] != Cell.EMPTY and self.cells[a] == self.cells[b] == self.cells[c]:
                return (a, b, c)
        return None

    def is_full(self) -> bool:
        return Cell.EMPTY not in self.cells

    def is_game_over(self) -> bool:
        return self.check_winner() is not None or self.is_full()

    def evaluate(self) -> GameOutcome:
        """评估局面"""
        winner = self.check_winner()
        is_draw = winner is None and self.is_full()
        return GameOutcome(
            winner=winner,
            is_draw=is_draw,
            is_game_over=winner is not None or is_draw,
            available_moves=tuple(self.available_moves()),
        )

    def to_dict(self) -> dict:
        """序列化为字典"""
        outcome = self.evaluate()
        return {
            "cells": self.to_list(),
            "winner": outcome.winner.value if outcome.winner else None,
            "winning_line": list(self.winning_line() or ()),
            "is_draw": outcome.is_draw,
            "is_game_over": outcome.is_game_over,
            "available_moves": list(outcome.available_moves),
        }


# 与方法等价的函数式接口


def check_winner(board: Board) -> Cell | None:
    return board.check_winner()


def is_board_full(board: Board) -> bool:
    return board.is_full()


def is_game_over(board: Board) -> bool:
    return board.is_game_over()


def available_moves(board: Board) -> list[int]:
    return board.available_moves()


def apply_move(board: Board, index: int, mark: Cell) -> Board:
    return board.apply_move(index, mark)


def evaluate_board(board: Board) -> GameOutcome:
    return board.evaluate()


def reset_board() -> Board:
    return Board.empty()
