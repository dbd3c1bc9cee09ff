"""情书引擎的日志配置

日志级别、日志文件与调试开关全部来自 ``GameConfig``
（即 ``LOVE_LETTER_LOG_LEVEL`` / ``LOVE_LETTER_LOG_FILE`` / ``LOVE_LETTER_DEBUG``），
本模块不再读取环境变量。

- 文件日志：UTF-8 滚动文件，默认 ``logs/love_letter.log``，级别为 ``config.log_level``
- 控制台日志：热座界面下默认关闭，避免打乱终端画面；
  ``config.debug_mode`` 时以 DEBUG 级别打开，便于跟踪每一个事件
- 重复调用只更新已有 handler 的级别，不会重复添加

用法::

    from logging_config import setup_logging
    setup_logging(get_config())
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from logging.handlers import RotatingFileHandler
from pathlib import Path

from love_letter.config import GameConfig, get_config

FILE_HANDLER_NAME = "love_letter_file"
CONSOLE_HANDLER_NAME = "love_letter_console"
DEFAULT_LOG_PATH = Path("logs") / "love_letter.log"

# 单个日志文件上限与保留的历史文件数
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s %(levelname)-8s %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def parse_level(level: str | int) -> int:
    """把 ``"debug"`` / ``"INFO"`` / 整数级别统一为整数，无法识别时为 INFO"""
    if isinstance(level, int):
        return level
    return logging._nameToLevel.get((level or "").strip().upper(), logging.INFO)


def log_path_for(config: GameConfig) -> Path:
    """解析日志文件路径（相对路径基于当前目录），并确保目录存在"""
    path = Path(config.log_file) if config.log_file else DEFAULT_LOG_PATH
    if not path.is_absolute():
        path = Path.cwd() / path
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _named_handler(
    root: logging.Logger, name: str, factory: Callable[[], logging.Handler]
) -> logging.Handler:
    for handler in root.handlers:
        if handler.name == name:
            return handler
    handler = factory()
    handler.name = name
    handler.setFormatter(_FORMATTER)
    root.addHandler(handler)
    return handler


def setup_logging(config: GameConfig | None = None, *, console: bool = False) -> logging.Logger:
    """按引擎配置初始化根 logger

    Args:
        config: 引擎配置，缺省使用全局配置
        console: 是否额外输出 WARNING 及以上日志到控制台；
            ``config.debug_mode`` 时总是输出，且级别为 DEBUG

    Returns:
        根 logger
    """
    config = config or get_config()
    level = parse_level(config.log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    path = log_path_for(config)
    file_handler = _named_handler(
        root,
        FILE_HANDLER_NAME,
        lambda: RotatingFileHandler(
            str(path), maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        ),
    )
    file_handler.setLevel(level)

    if console or config.debug_mode:
        console_handler = _named_handler(root, CONSOLE_HANDLER_NAME, logging.StreamHandler)
        console_handler.setLevel(logging.DEBUG if config.debug_mode else logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging initialized | level=%s file=%s debug=%s",
        logging.getLevelName(level),
        path,
        config.debug_mode,
    )
    return root
