"""
輸出組裝

將已接受的 Occurrence 依起始位置排序，再把未命中的片段與替換文字
依序拼接成新字串。原文不會被修改。
"""

from __future__ import annotations

from typing import Iterable, List

from .occurrence import Occurrence


def sort_occurrences(occurrences: Iterable[Occurrence]) -> List[Occurrence]:
    """依 start 遞增排序（區間互不重疊，不需要穩定排序）"""
    return sorted(occurrences, key=lambda occ: occ.start)


def assemble(text: str, occurrences: List[Occurrence]) -> str:
    """
    以排序後的 Occurrence 重建字串

    Args:
        text: 原文
        occurrences: 依 start 排序、互不重疊的 Occurrence

    Returns:
        str: 替換後的新字串；沒有任何 Occurrence 時直接回傳原文
    """
    if not occurrences:
        return text

    parts: List[str] = []
    last_pos = 0
    for occ in occurrences:
        # 未命中片段
        parts.append(text[last_pos:occ.start])
        parts.append(occ.replacement)
        last_pos = occ.end + 1

    parts.append(text[last_pos:])
    return "".join(parts)
