"""
Occurrence 掃描

依優先順序逐一搜尋 needle 在原文中的每個位置（純子字串搜尋，由左而右），
每找到一個位置就嘗試加入 OccurrenceSet；與已接受區間重疊者被拒絕。

同一個 needle 的搜尋從上一次命中的「起始位置 + 1」繼續，
因此自我重疊的命中（例如 "aa" 於 "aaa" 的 0 與 1）都會成為候選，
由最左邊的先佔用。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

from .occurrence import Occurrence, OccurrenceSet


@dataclass
class ScanResult:
    """
    掃描結果

    Attributes:
        occurrences: 已接受的 Occurrence（互不重疊）
        length_delta: 所有已接受 Occurrence 的長度差總和（僅作為輸出大小提示）
        candidates: 被檢查過的候選數量
        rejected: 因重疊被拒絕的候選數量
    """

    occurrences: OccurrenceSet = field(default_factory=OccurrenceSet)
    length_delta: int = 0
    candidates: int = 0
    rejected: int = 0


def iter_positions(text: str, needle: str) -> Iterator[int]:
    """逐一輸出 needle 在 text 中的所有起始位置（允許自我重疊）"""
    index = text.find(needle)
    while index != -1:
        yield index
        index = text.find(needle, index + 1)


def scan_occurrences(text: str, ordered_pairs: Iterable[Tuple[str, str]]) -> ScanResult:
    """
    掃描所有 needle 並以先到先得規則建立不重疊的 OccurrenceSet

    Args:
        text: 原文
        ordered_pairs: 已依優先順序排列的 (needle, replacement)

    Returns:
        ScanResult
    """
    result = ScanResult()
    for needle, replacement in ordered_pairs:
        if not needle:
            continue
        for position in iter_positions(text, needle):
            result.candidates += 1
            occurrence = Occurrence.at(position, needle, replacement)
            if result.occurrences.try_add(occurrence):
                result.length_delta += occurrence.length_delta
            else:
                result.rejected += 1
    return result
