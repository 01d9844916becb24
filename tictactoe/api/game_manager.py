"""
游戏管理器

管理内存中的对局实例
"""

from tictactoe.game import Game, GameConfig
from tictactoe.logging import logger
from tictactoe.types import Difficulty


class GameManager:
    """游戏管理器

    管理多个游戏实例，对局只保存在内存中
    """

    def __init__(self):
        self._games: dict[str, Game] = {}

    def create_game(
        self, difficulty: Difficulty = Difficulty.MEDIUM, seed: int | None = None
    ) -> Game:
        """创建新游戏"""
        game = Game(config=GameConfig(difficulty=difficulty, seed=seed))
        self._games[game.game_id] = game
        logger.info(f"Created game {game.game_id} (difficulty={difficulty.value})")
        return game

    def get_game(self, game_id: str) -> Game | None:
        """获取游戏实例"""
        return self._games.get(game_id)

    def delete_game(self, game_id: str) -> bool:
        """删除游戏"""
        if game_id not in self._games:
            return False

        del self._games[game_id]
        logger.info(f"Deleted game {game_id}")
        return True

    def list_games(self) -> list[str]:
        """列出所有游戏 ID"""
        return list(self._games.keys())


# 全局游戏管理器实例
game_manager = GameManager()
