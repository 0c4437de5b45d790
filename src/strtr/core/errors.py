"""
例外階層

所有錯誤都在產生任何輸出之前拋出，不存在「部分成功」的結果。
同時繼承對應的內建例外，方便呼叫端以 ValueError / RuntimeError 捕捉。
"""


class StrtrError(Exception):
    """strtr 所有例外的基類"""


class InvalidArgumentError(StrtrError, ValueError):
    """呼叫參數不合法（例如 from/to 長度不一致、未知的排序模式）"""


class ConfigurationError(StrtrError, ValueError):
    """替換表設定錯誤（例如 needle 沒有對應的 replacement）"""


class InvariantViolationError(StrtrError, RuntimeError):
    """內部不變量被破壞（正常掃描流程下不應發生）"""
