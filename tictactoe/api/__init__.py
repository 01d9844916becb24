"""
API Module

FastAPI endpoints for the Tic-Tac-Toe game.
"""

from tictactoe.api.app import create_app

__all__ = ["create_app"]
