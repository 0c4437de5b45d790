"""
全域配置模組

提供統一的配置類別，控制日誌、計時與預設排序模式。

使用方式:
    from strtr import Replacer

    # 簡單開啟 verbose 模式
    replacer = Replacer({"cat": "dog"}, verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("strtr").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .core.ordering import OrderingMode
from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    # 不主動設定，讓使用者可以透過標準 logging 控制


@dataclass
class ReplacerConfig:
    """
    Replacer 配置類別 (進階用途)

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        mode: 預設的 needle 排序模式

    使用範例:
        def my_callback(op, elapsed):
            print(f"{op} took {elapsed:.3f}s")

        config = ReplacerConfig(verbose=True, on_timing=my_callback)
        replacer = Replacer({"a": "b"}, config=config)
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    mode: Union[OrderingMode, str] = OrderingMode.LENGTH_DESCENDING_THEN_LEXICOGRAPHIC

    def __post_init__(self):
        self.mode = OrderingMode.coerce(self.mode)
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = ReplacerConfig(verbose=False)
