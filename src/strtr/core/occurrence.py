"""
Occurrence 與 OccurrenceSet

Occurrence 是一次被接受的命中，區間 [start, end] 為含頭含尾的 offset。
OccurrenceSet 保存已接受、彼此不重疊的 Occurrence，並依 start 排序，
重疊檢查以二分搜尋完成。
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterator, List

from .errors import InvariantViolationError


@dataclass(frozen=True)
class Occurrence:
    """
    一次被接受的命中

    Attributes:
        start: 起始 offset（含）
        end: 結束 offset（含）
        needle: 命中的 needle 文字
        replacement: 用來取代 needle 的文字
    """

    start: int
    end: int
    needle: str
    replacement: str

    def __post_init__(self):
        if self.start > self.end:
            raise InvariantViolationError(
                f"start [{self.start}] should be smaller or equal to end [{self.end}]"
            )

    @classmethod
    def at(cls, position: int, needle: str, replacement: str) -> "Occurrence":
        """由 needle 的起始位置建立 Occurrence"""
        return cls(position, position + len(needle) - 1, needle, replacement)

    @property
    def length_delta(self) -> int:
        return len(self.replacement) - len(self.needle)

    def overlaps(self, other: "Occurrence") -> bool:
        """兩個區間共用任一 offset 即為重疊；首尾相接不算"""
        lies_before = self.end < other.start
        lies_after = self.start > other.end
        return not (lies_before or lies_after)

    def __str__(self) -> str:
        return f"{{{self.start},{self.end},{self.needle},{self.replacement}}}"


class OccurrenceSet:
    """
    已接受的 Occurrence 集合（先到先得）

    內部以 start 排序；因為集合中的區間互不重疊，候選區間只可能與
    插入點左右兩側的鄰居重疊，因此只需檢查這兩個位置。
    """

    def __init__(self) -> None:
        self._starts: List[int] = []
        self._items: List[Occurrence] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Occurrence]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def conflicts_with(self, candidate: Occurrence) -> bool:
        index = bisect_left(self._starts, candidate.start)
        if index > 0 and self._items[index - 1].overlaps(candidate):
            return True
        if index < len(self._items) and self._items[index].overlaps(candidate):
            return True
        return False

    def try_add(self, candidate: Occurrence) -> bool:
        """候選不與任何已接受區間重疊時加入並回傳 True，否則回傳 False"""
        if self.conflicts_with(candidate):
            return False
        index = bisect_left(self._starts, candidate.start)
        self._starts.insert(index, candidate.start)
        self._items.insert(index, candidate)
        return True
