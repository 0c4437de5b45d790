"""
strtr - 多 needle、不重疊的字串替換 (Multi-Needle String Substitution)

核心概念：
- 使用者提供替換表（needle -> replacement）
- 依排序模式決定 needle 優先順序（預設長者優先，同長度依字典序）
- 先到先得：已被佔用的區間不會再被其他 needle 替換
- 每次呼叫都產生新字串，原文不會被修改

官方入口（穩定 API）：
- `strtr.replace_using_map`
- `strtr.replace_using_chars`
- `strtr.strtr`
- `strtr.Replacer`
"""

# =============================================================================
# 替換入口（官方入口）
# =============================================================================
from strtr.replacer import Replacer, replace_using_chars, replace_using_map, strtr

# =============================================================================
# 資料模型與例外
# =============================================================================
from strtr.core import (
    ConfigurationError,
    InvalidArgumentError,
    InvariantViolationError,
    Occurrence,
    OrderingMode,
    ReplacementEvent,
    StrtrError,
)

# =============================================================================
# 配置與日誌工具
# =============================================================================
from strtr.config import DEFAULT_CONFIG, ReplacerConfig
from strtr.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Entry points
    "replace_using_map",
    "replace_using_chars",
    "strtr",
    "Replacer",
    # Data model
    "OrderingMode",
    "Occurrence",
    "ReplacementEvent",
    # Errors
    "StrtrError",
    "InvalidArgumentError",
    "ConfigurationError",
    "InvariantViolationError",
    # Config
    "ReplacerConfig",
    "DEFAULT_CONFIG",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
