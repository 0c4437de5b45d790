"""
核心模組

替換流程的四個階段：
- ordering: Needle 排序
- scanner: Occurrence 掃描（先到先得，拒絕重疊）
- assembler: Occurrence 排序與輸出組裝
"""

from .assembler import assemble, sort_occurrences
from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    InvariantViolationError,
    StrtrError,
)
from .events import ReplacementEvent, ReplacementEventHandler
from .occurrence import Occurrence, OccurrenceSet
from .ordering import OrderingMode, compare_needles, order_needles
from .scanner import ScanResult, iter_positions, scan_occurrences
from .table import ReplacementTable, TableInput, normalize_table

__all__ = [
    # Errors
    "StrtrError",
    "InvalidArgumentError",
    "ConfigurationError",
    "InvariantViolationError",
    # Events
    "ReplacementEvent",
    "ReplacementEventHandler",
    # Data model
    "Occurrence",
    "OccurrenceSet",
    "ReplacementTable",
    "TableInput",
    "normalize_table",
    # Pipeline
    "OrderingMode",
    "compare_needles",
    "order_needles",
    "ScanResult",
    "iter_positions",
    "scan_occurrences",
    "sort_occurrences",
    "assemble",
]
