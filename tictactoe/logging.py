"""
日志配置

库代码只通过 loguru 的全局 logger 输出，导入时不创建任何文件。
文件日志由入口（HTTP 服务、命令行、对战脚本）调用 setup_logging() 开启。

日志目录优先级：显式参数 > 环境变量 TICTACTOE_LOG_DIR > 当前工作目录下的 logs/
"""

import os
from pathlib import Path

from loguru import logger

LOG_DIR_ENV = "TICTACTOE_LOG_DIR"
LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
LOG_FILE_NAME = "tictactoe.log"

# 当前文件 sink 的 handler id，未开启时为 None
_file_handler_id: int | None = None


def resolve_log_dir(log_dir: str | Path | None = None) -> Path:
    """确定日志目录（不创建）"""
    if log_dir is not None:
        return Path(log_dir)
    env_dir = os.environ.get(LOG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.cwd() / "logs"


def setup_logging(log_dir: str | Path | None = None, level: str | None = None) -> Path:
    """开启文件日志，返回日志文件路径

    重复调用会替换之前的文件 sink，不会重复写入
    """
    global _file_handler_id

    shutdown_logging()
    directory = resolve_log_dir(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / LOG_FILE_NAME
    _file_handler_id = logger.add(
        log_file,
        rotation="10 MB",
        retention="7 days",
        level=level or os.environ.get(LOG_LEVEL_ENV, "DEBUG"),
    )
    return log_file


def shutdown_logging() -> None:
    """关闭文件日志"""
    global _file_handler_id

    if _file_handler_id is not None:
        logger.remove(_file_handler_id)
        _file_handler_id = None


__all__ = ["logger", "setup_logging", "shutdown_logging", "resolve_log_dir"]
