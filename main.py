"""
井字棋 HTTP 服务入口

    uvicorn main:app --port 8000
    python main.py            # 读取 TICTACTOE_HOST / TICTACTOE_PORT
"""

import os

import uvicorn

from tictactoe.api import create_app
from tictactoe.logging import logger, setup_logging

log_file = setup_logging()
app = create_app()


if __name__ == "__main__":
    host = os.environ.get("TICTACTOE_HOST", "127.0.0.1")
    port = int(os.environ.get("TICTACTOE_PORT", "8000"))
    logger.info(f"Serving Tic-Tac-Toe API on {host}:{port}, logs in {log_file}")
    uvicorn.run(app, host=host, port=port)
