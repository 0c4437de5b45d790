"""
替換表正規化

支援兩種輸入格式：

1. Mapping（例如 dict）:
    {"cat": "dog", "ab": "1"}

2. (needle, replacement) 配對的 iterable:
    [("cat", "dog"), ("ab", "1")]
    同一個 needle 出現多次時後者覆蓋前者，但保留第一次出現的位置（與 dict 相同）。

正規化結果是保持插入順序的 dict。空字串 needle 一律略過，
其餘 needle 的 replacement 必須是字串，否則視為設定錯誤。
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from .errors import ConfigurationError

ReplacementTable = Mapping[str, Optional[str]]
TableInput = Union[ReplacementTable, Iterable[Tuple[str, Optional[str]]]]


def _iter_entries(table: TableInput) -> Iterable[Tuple[object, object]]:
    if isinstance(table, Mapping):
        return table.items()
    if isinstance(table, (str, bytes)):
        raise ConfigurationError(f"替換表必須是 mapping 或 (needle, replacement) 配對，收到 {type(table).__name__}")
    return table


def normalize_table(table: TableInput) -> Dict[str, str]:
    """
    將替換表正規化為 needle -> replacement 的 dict

    Args:
        table: Mapping 或 (needle, replacement) 配對

    Returns:
        Dict[str, str]: 已去除空字串 needle、保持插入順序的替換表

    Raises:
        ConfigurationError: needle 不是字串、或非空 needle 的 replacement 缺失/不是字串
    """
    normalized: Dict[str, str] = {}
    for entry in _iter_entries(table):
        try:
            needle, replacement = entry
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid table entry {entry!r}: expected (needle, replacement)") from exc

        if not isinstance(needle, str):
            raise ConfigurationError(f"Needle must be str, got {type(needle).__name__} ({needle!r})")
        if needle == "":
            continue
        if replacement is None:
            raise ConfigurationError(f"Map value of None found in key ['{needle}']")
        if not isinstance(replacement, str):
            raise ConfigurationError(
                f"Replacement for key ['{needle}'] must be str, got {type(replacement).__name__}"
            )
        normalized[needle] = replacement
    return normalized
