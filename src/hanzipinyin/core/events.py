"""
事件模型（Event Model）

converter 預設不輸出到 stdout。
若需要知道「哪些字查無資料被原樣輸出」「哪些多音字規則被套用」，請使用事件回呼。

設計原則：允許降級（查無資料時原樣輸出），但不允許「默默」降級。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class ConversionEvent(TypedDict, total=False):
    type: Literal["word", "heteronym", "passthrough"]

    # 在原文中的位置；convert_char 單字轉換沒有原文，不含這兩個欄位
    start: int
    end: int
    original: str

    # word / heteronym
    pinyin: str

    # heteronym
    prev: str
    next: str


ConversionEventHandler = Callable[[ConversionEvent], None]
