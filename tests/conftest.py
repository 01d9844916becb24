"""
测试公共配置
"""

import pytest

from tictactoe.logging import LOG_DIR_ENV, shutdown_logging


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    """入口开启的文件日志写到临时目录，测试结束后关闭"""
    directory = tmp_path / "logs"
    monkeypatch.setenv(LOG_DIR_ENV, str(directory))
    yield directory
    shutdown_logging()
