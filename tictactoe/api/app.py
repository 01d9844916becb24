"""
FastAPI 应用

主应用和路由定义
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from tictactoe import __version__
from tictactoe.ai import AIEngine
from tictactoe.api.game_manager import GameManager, game_manager
from tictactoe.api.models import (
    AIInfoResponse,
    CreateGameRequest,
    DifficultyModel,
    DifficultyRequest,
    EvaluateRequest,
    GameStateResponse,
    MoveRequest,
    MoveResponse,
    OutcomeResponse,
)
from tictactoe.board import Board
from tictactoe.game import Game
from tictactoe.types import DIFFICULTY_CONFIG


def create_app(manager: GameManager | None = None) -> FastAPI:
    """创建 FastAPI 应用"""
    manager = manager or game_manager

    app = FastAPI(
        title="Tic-Tac-Toe API",
        description="Tic-tac-toe engine API with three AI difficulty tiers",
        version=__version__,
    )

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_game_or_404(game_id: str) -> Game:
        game = manager.get_game(game_id)
        if not game:
            raise HTTPException(status_code=404, detail="Game not found")
        return game

    # 路由
    @app.get("/")
    def root():
        """API 根路径"""
        return {"message": "Tic-Tac-Toe API", "version": __version__}

    @app.get("/health")
    def health():
        """健康检查"""
        return {"status": "healthy"}

    @app.get("/ai/info", response_model=AIInfoResponse)
    def get_ai_info():
        """获取 AI 信息"""
        return AIInfoResponse(
            available_strategies=AIEngine.list_strategies(),
            levels=[
                DifficultyModel(
                    level=level,
                    name=config.name,
                    description=config.description,
                    smart_move_chance=config.smart_move_chance,
                    strategy=config.strategy,
                )
                for level, config in DIFFICULTY_CONFIG.items()
            ],
        )

    @app.post("/evaluate", response_model=OutcomeResponse)
    def evaluate(request: EvaluateRequest):
        """评估任意局面（无状态）"""
        return OutcomeResponse(**Board.from_string(request.board).to_dict())

    @app.post("/games", response_model=GameStateResponse)
    def create_game(request: CreateGameRequest):
        """创建新游戏"""
        game = manager.create_game(difficulty=request.difficulty, seed=request.seed)
        return _game_to_response(game)

    @app.get("/games/{game_id}", response_model=GameStateResponse)
    def get_game(game_id: str):
        """获取游戏状态"""
        return _game_to_response(get_game_or_404(game_id))

    @app.post("/games/{game_id}/move", response_model=MoveResponse)
    def make_move(game_id: str, request: MoveRequest):
        """执行走棋"""
        game = get_game_or_404(game_id)
        # 整个检查和落子在对局锁内完成，同一局的并发请求依次执行
        with game.lock:
            # 检查游戏是否结束
            if game.is_game_over:
                return MoveResponse(success=False, error="Game has ended")

            # 检查是否是 AI 的回合
            if game.is_ai_turn():
                return MoveResponse(success=False, error="It's AI's turn")

            if not game.make_move(request.index):
                return MoveResponse(
                    success=False,
                    error=game.last_error,
                    game_state=_game_to_response(game),
                )

            # 如果游戏还在进行且是 AI 回合，让 AI 走棋
            ai_move = None
            delay_ms = None
            if request.auto_ai and game.is_ai_turn():
                delay_ms = int(game.thinking_delay() * 1000)
                ai_move = game.play_ai_move()

            return MoveResponse(
                success=True,
                game_state=_game_to_response(game),
                ai_move=ai_move,
                thinking_delay_ms=delay_ms,
            )

    @app.post("/games/{game_id}/ai-move", response_model=MoveResponse)
    def request_ai_move(game_id: str):
        """请求 AI 走棋（用于客户端延迟展示电脑走法）"""
        game = get_game_or_404(game_id)
        with game.lock:
            if game.is_game_over:
                return MoveResponse(success=False, error="Game has ended")

            if not game.is_ai_turn():
                return MoveResponse(success=False, error="Not AI's turn")

            ai_move = game.play_ai_move()
            return MoveResponse(
                success=ai_move is not None,
                game_state=_game_to_response(game),
                ai_move=ai_move,
            )

    @app.post("/games/{game_id}/new", response_model=GameStateResponse)
    def new_game(game_id: str):
        """开始新局（比分保留）"""
        game = get_game_or_404(game_id)
        game.new_game()
        return _game_to_response(game)

    @app.put("/games/{game_id}/difficulty", response_model=GameStateResponse)
    def set_difficulty(game_id: str, request: DifficultyRequest):
        """切换难度，同时开始新局"""
        game = get_game_or_404(game_id)
        game.set_difficulty(request.difficulty)
        return _game_to_response(game)

    @app.post("/games/{game_id}/score/reset", response_model=GameStateResponse)
    def reset_score(game_id: str):
        """比分清零"""
        game = get_game_or_404(game_id)
        game.reset_score()
        return _game_to_response(game)

    @app.delete("/games/{game_id}")
    def delete_game(game_id: str):
        """删除游戏"""
        if not manager.delete_game(game_id):
            raise HTTPException(status_code=404, detail="Game not found")
        return {"message": "Game deleted"}

    @app.get("/games")
    def list_games():
        """列出所有游戏"""
        return {"games": manager.list_games()}

    return app


def _game_to_response(game: Game) -> GameStateResponse:
    """将游戏对象转换为响应模型"""
    return GameStateResponse(**game.to_dict())
