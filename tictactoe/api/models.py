"""
API 请求/响应模型

Pydantic models for API validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tictactoe.types import Difficulty


class CreateGameRequest(BaseModel):
    """创建游戏请求"""

    difficulty: Difficulty = Difficulty.MEDIUM
    seed: int | None = None


class MoveRequest(BaseModel):
    """走棋请求"""

    index: int = Field(ge=0, le=8)
    # 为 False 时电脑不自动应手，由客户端在展示延迟后调用 /ai-move
    auto_ai: bool = True


class DifficultyRequest(BaseModel):
    """切换难度请求"""

    difficulty: Difficulty


class EvaluateRequest(BaseModel):
    """局面评估请求"""

    board: str = Field(min_length=9, max_length=9, examples=["XX.OO...."])

    @field_validator("board")
    @classmethod
    def check_symbols(cls, value: str) -> str:
        if any(ch.upper() not in "XO.-_ " for ch in value):
            raise ValueError("board may only contain X, O and . (or -, _, space)")
        return value


class ScoreModel(BaseModel):
    """比分"""

    player_wins: int
    computer_wins: int
    draws: int


class OutcomeResponse(BaseModel):
    """局面评估结果"""

    cells: list[str | None]
    winner: str | None
    winning_line: list[int]
    is_draw: bool
    is_game_over: bool
    available_moves: list[int]


class GameStateResponse(BaseModel):
    """游戏状态响应"""

    game_id: str
    board: OutcomeResponse
    current_turn: str
    difficulty: Difficulty
    result: str
    move_count: int
    score: ScoreModel
    status: str


class MoveResponse(BaseModel):
    """走棋响应"""

    success: bool
    game_state: GameStateResponse | None = None
    error: str | None = None
    ai_move: int | None = None
    # 建议客户端展示电脑走法前等待的时间
    thinking_delay_ms: int | None = None


class DifficultyModel(BaseModel):
    """难度信息"""

    model_config = ConfigDict(use_enum_values=True)

    level: Difficulty
    name: str
    description: str
    smart_move_chance: float
    strategy: str


class AIInfoResponse(BaseModel):
    """AI 信息响应"""

    available_strategies: list[str]
    levels: list[DifficultyModel]
