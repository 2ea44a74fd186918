"""
日誌與計時工具

所有 logger 皆掛在 `hanzipinyin` 命名空間下，函式庫預設不輸出任何訊息
（只掛 NullHandler），由使用者透過標準 logging 或 verbose 參數開啟。

使用方式:
    from hanzipinyin.utils.logger import get_logger, TimingContext

    logger = get_logger("converter")
    with TimingContext("load_tables", logger):
        ...

    # 開啟詳細日誌
    from hanzipinyin import enable_debug_logging
    enable_debug_logging()
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "hanzipinyin"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None
_timing_enabled = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 hanzipinyin 命名空間下的 logger

    Args:
        name: 子 logger 名稱，例如 "converter" 或 __name__

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    設定根 logger 的輸出 handler 與等級

    重複呼叫只會調整等級，不會重複掛 handler。
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_handler)
    _handler.setLevel(level)
    logger.setLevel(level)
    return logger


def enable_debug_logging() -> None:
    """開啟 DEBUG 等級日誌（包含查表降級、多音字命中等細節）"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """讓 TimingContext 以 INFO 等級輸出計時結果"""
    global _timing_enabled
    _timing_enabled = True
    setup_logger(level=logging.INFO)


class TimingContext:
    """
    計時 context manager

    Args:
        operation: 操作名稱，會出現在日誌與回呼中
        logger: 輸出用 logger，預設為根 logger
        level: 日誌等級（enable_timing_logging() 後至少為 INFO）
        callback: 計時回呼 (operation, elapsed_seconds) -> None
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger()
        self.level = max(level, logging.INFO) if _timing_enabled else level
        self.callback = callback
        self.elapsed: float = 0.0
        self._start: float = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        status = "failed" if exc_type is not None else "done"
        self.logger.log(
            self.level,
            f"[Timing] {self.operation} {status} in {self.elapsed * 1000:.2f}ms",
        )
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    範例:
        >>> @log_timing("build_tables")
        ... def build():
        ...     ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__
        logger = get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, logger, level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
