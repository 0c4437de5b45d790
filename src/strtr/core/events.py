"""
事件模型（Event Model）

Replacer 不直接輸出到 stdout。
若需要取得「本次替換了哪些片段」，請傳入 on_event 回呼。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class ReplacementEvent(TypedDict, total=False):
    type: Literal["replacement"]
    trace_id: str

    # 原文中的區間（含頭含尾）
    start: int
    end: int
    needle: str
    replacement: str


ReplacementEventHandler = Callable[[ReplacementEvent], None]
