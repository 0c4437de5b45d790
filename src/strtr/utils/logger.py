"""
日誌與計時工具

所有模組統一透過 `get_logger()` 取得 `strtr.*` 命名空間下的 logger。
函式庫本身只掛 NullHandler，不主動輸出；需要時由使用者開啟：

    from strtr import enable_debug_logging
    enable_debug_logging()

或直接使用標準 logging：

    import logging
    logging.getLogger("strtr").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "strtr"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 strtr 命名空間下的 logger

    Args:
        name: 子 logger 名稱（例如 "replacer"），None 表示根 logger

    Returns:
        logging.Logger: 名稱為 "strtr" 或 "strtr.<name>" 的 logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    name: Optional[str] = None,
) -> logging.Logger:
    """
    為 strtr logger 掛上 stderr handler（重複呼叫不會重複掛載）

    Args:
        level: 日誌等級
        fmt: 輸出格式
        name: 子 logger 名稱，None 表示 strtr 根 logger
    """
    logger = get_logger(name)
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, "_strtr_handler", False):
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    handler._strtr_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌（包含每一筆替換與計時資訊）"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時日誌（strtr.timing），其餘 strtr logger 的等級維持不變"""
    return setup_logger(level=logging.DEBUG, name="timing")


class TimingContext:
    """
    計時 context manager

    離開區塊時把耗時寫入 logger，並呼叫（可選的）callback。

    使用範例:
        with TimingContext("Replacer.replace", logger, logging.DEBUG):
            ...
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed: float = 0.0
        self._start: float = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.3f}ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False
