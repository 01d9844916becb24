"""
AI Engine Module

Extensible AI engine with pluggable strategies, one per difficulty tier.
"""

from tictactoe.ai.base import AIConfig, AIEngine, AIStrategy, RandomSource, select_opponent_move
from tictactoe.ai.heuristic_ai import HeuristicAI
from tictactoe.ai.minimax_ai import MinimaxAI, SearchResult, minimax
from tictactoe.ai.random_ai import RandomAI
from tictactoe.ai.tactics import (
    find_blocking_move,
    find_winning_move,
    strategic_preference_order,
)

__all__ = [
    "AIConfig",
    "AIEngine",
    "AIStrategy",
    "RandomSource",
    "select_opponent_move",
    "RandomAI",
    "HeuristicAI",
    "MinimaxAI",
    "SearchResult",
    "minimax",
    "find_winning_move",
    "find_blocking_move",
    "strategic_preference_order",
]
