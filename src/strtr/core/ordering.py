"""
Needle 排序

決定 needle 的掃描優先順序。排在前面的 needle 先佔用區間，
後面的 needle 若與已佔用區間重疊就會被拒絕。
"""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import List, Mapping, Tuple, Union

from .errors import InvalidArgumentError


class OrderingMode(Enum):
    """needle 掃描順序"""
    LENGTH_DESCENDING_THEN_LEXICOGRAPHIC = "length_desc"   # 長者優先，同長度依字典序
    INSERTION_ORDER = "insertion"                         # 依呼叫端給定的順序

    @classmethod
    def coerce(cls, value: Union["OrderingMode", str, None]) -> "OrderingMode":
        """接受 enum 成員、其字串值或成員名稱；None 代表預設（長者優先）"""
        if value is None:
            return cls.LENGTH_DESCENDING_THEN_LEXICOGRAPHIC
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for mode in cls:
                if value == mode.value or value.upper() == mode.name:
                    return mode
        raise InvalidArgumentError(f"Unknown ordering mode: {value!r}")


def compare_needles(a: str, b: str) -> int:
    """長度遞減；長度相同時依 code point 字典序遞增"""
    if len(a) > len(b):
        return -1
    if len(a) < len(b):
        return 1
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def order_needles(
    table: Mapping[str, str],
    mode: OrderingMode = OrderingMode.LENGTH_DESCENDING_THEN_LEXICOGRAPHIC,
) -> List[Tuple[str, str]]:
    """
    依排序模式產生 (needle, replacement) 清單

    空字串 needle 不論模式都會被排除。

    Args:
        table: needle -> replacement（保持插入順序）
        mode: 排序模式

    Returns:
        List[Tuple[str, str]]: 依掃描優先順序排列的配對
    """
    pairs = [(needle, replacement) for needle, replacement in table.items() if needle]
    if mode is OrderingMode.INSERTION_ORDER:
        return pairs
    key = cmp_to_key(compare_needles)
    return sorted(pairs, key=lambda pair: key(pair[0]))
