"""
多 needle、不重疊的字串替換

對外提供三個函式與一個可重複使用的 Replacer：

    from strtr import replace_using_map, replace_using_chars, strtr

    replace_using_map("xaby", {"a": "1", "ab": "2"})   # 'x2y'
    replace_using_chars("hello", "el", "ip")          # 'hippo'
    strtr("abc", {"ab": "1", "bc": "2"})              # '1c'

同一張替換表要套用到大量文本時，建立 Replacer 只需正規化與排序一次：

    replacer = Replacer({"cat": "dog"})
    replacer.replace("the cat sat")                   # 'the dog sat'

替換規則：
- 先依排序模式決定 needle 優先順序（預設長者優先、同長度依字典序）
- 依序找出每個 needle 的所有位置，與已接受區間重疊的候選一律拒絕
- 已接受的區間依起始位置排序後重建字串，每個位置只會被替換一次
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, List, Optional, Tuple, Union

from .config import ReplacerConfig
from .core.assembler import assemble, sort_occurrences
from .core.errors import InvalidArgumentError
from .core.events import ReplacementEvent, ReplacementEventHandler
from .core.occurrence import Occurrence
from .core.ordering import OrderingMode, order_needles
from .core.scanner import ScanResult, scan_occurrences
from .core.table import TableInput, normalize_table
from .utils.logger import TimingContext, get_logger, setup_logger

ModeInput = Union[OrderingMode, str, None]


class Replacer:
    """
    已編譯的替換器

    建立時即完成替換表的驗證、正規化與 needle 排序；之後每次 replace()
    只在區域變數中建立 OccurrenceSet，因此同一實例可安全地在多執行緒間共用。

    Raises:
        ConfigurationError: 替換表中有非空 needle 沒有對應的 replacement
        InvalidArgumentError: 未知的排序模式
    """

    def __init__(
        self,
        table: TableInput,
        mode: ModeInput = None,
        *,
        on_event: Optional[ReplacementEventHandler] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        config: Optional[ReplacerConfig] = None,
    ):
        if config is not None:
            verbose = verbose or config.verbose
            on_timing = on_timing or config.on_timing
            if mode is None:
                mode = config.mode

        self._logger = get_logger("replacer")
        self._timing_logger = get_logger("timing")
        self._timing_callback = on_timing
        self._on_event = on_event
        if verbose:
            setup_logger(level=logging.DEBUG)

        with self._log_timing("Replacer.__init__"):
            self._mode = OrderingMode.coerce(mode)
            self._pairs: Tuple[Tuple[str, str], ...] = tuple(
                order_needles(normalize_table(table), self._mode)
            )
            self._logger.debug(f"Replacer compiled with {len(self._pairs)} needles (mode={self._mode.value})")

    @property
    def mode(self) -> OrderingMode:
        return self._mode

    @property
    def needles(self) -> List[str]:
        """實際使用的 needle 掃描順序"""
        return [needle for needle, _ in self._pairs]

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"Replacer(needles={len(self._pairs)}, mode={self._mode.value!r})"

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._timing_logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    def scan(self, text: str) -> ScanResult:
        """掃描 text，回傳已接受的 Occurrence 與統計資訊"""
        return scan_occurrences(text, self._pairs)

    def find_occurrences(self, text: str) -> List[Occurrence]:
        """回傳依起始位置排序、互不重疊的 Occurrence 清單"""
        return sort_occurrences(self.scan(text).occurrences)

    def replace(self, text: str, *, silent: bool = False, trace_id: Optional[str] = None) -> str:
        """
        執行替換

        Args:
            text: 原文（不會被修改）
            silent: 是否靜默模式（不觸發 on_event、不輸出替換日誌）
            trace_id: 事件追蹤 ID，預設自動產生

        Returns:
            str: 替換後的新字串；沒有任何命中時回傳原文
        """
        if not self._pairs or not text:
            return text

        with self._log_timing("Replacer.replace"):
            result = self.scan(text)
            if not result.occurrences:
                return text

            occurrences = sort_occurrences(result.occurrences)
            self._logger.debug(
                f"  [Scan] candidates={result.candidates}, accepted={len(occurrences)}, "
                f"rejected={result.rejected}, expected_length={len(text) + result.length_delta}"
            )

            if not silent:
                trace_id_value = trace_id or uuid.uuid4().hex
                for occ in occurrences:
                    self._emit_replacement(occ, trace_id=trace_id_value)

            return assemble(text, occurrences)

    __call__ = replace

    def _emit_replacement(self, occ: Occurrence, *, trace_id: str) -> None:
        self._logger.debug(f"  [Match] '{occ.needle}' -> '{occ.replacement}' at [{occ.start}, {occ.end}]")
        if self._on_event is None:
            return

        event: ReplacementEvent = {
            "type": "replacement",
            "trace_id": trace_id,
            "start": occ.start,
            "end": occ.end,
            "needle": occ.needle,
            "replacement": occ.replacement,
        }
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")


def replace_using_map(haystack: str, table: TableInput, mode: ModeInput = None) -> str:
    """
    以替換表取代 haystack 中所有不重疊的 needle

    空字串 needle 會被忽略；替換表為空時直接回傳 haystack。

    Args:
        haystack: 原文
        table: needle -> replacement
        mode: needle 排序模式，預設長者優先

    Returns:
        str: 替換後的新字串

    Raises:
        ConfigurationError: 非空 needle 的 replacement 為 None
    """
    return Replacer(table, mode).replace(haystack, silent=True)


def replace_using_chars(haystack: str, from_chars: str, to_chars: str) -> str:
    """
    逐字元替換：from_chars 中的字元依序被 to_chars 中同位置的字元取代

    from_chars 中重複的字元以最後一次出現的對應為準。

    Raises:
        InvalidArgumentError: from_chars 與 to_chars 長度不同
    """
    if len(from_chars) != len(to_chars):
        raise InvalidArgumentError("from and to should have same number of characters.")

    table = {}
    for source, target in zip(from_chars, to_chars):
        table[source] = target
    return replace_using_map(haystack, table, OrderingMode.LENGTH_DESCENDING_THEN_LEXICOGRAPHIC)


def strtr(haystack: str, *args) -> str:
    """
    類似 PHP strtr 的便利入口

        strtr(text, table)
        strtr(text, from_chars, to_chars)
    """
    if len(args) == 1:
        return replace_using_map(haystack, args[0])
    if len(args) == 2:
        return replace_using_chars(haystack, args[0], args[1])
    raise InvalidArgumentError(f"strtr() takes 2 or 3 arguments ({len(args) + 1} given)")
