"""
文本切段

把文本切成「連續漢字」與「連續非漢字」交替的片段，
片段依序串接後與原文完全相同。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

# CJK 統一表意文字基本區；擴充區、標點、全形字元都不算漢字
CHINESE_CHAR_START = 0x4E00
CHINESE_CHAR_END = 0x9FFF


def is_chinese_char(char: str) -> bool:
    """
    判斷是否為漢字 (U+4E00 ~ U+9FFF)

    Args:
        char: 單個字元；長度不是 1 的字串一律回傳 False
    """
    if not char or len(char) != 1:
        return False
    return CHINESE_CHAR_START <= ord(char) <= CHINESE_CHAR_END


@dataclass(frozen=True)
class Segment:
    """文本片段"""

    text: str
    is_chinese: bool
    start: int = 0

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    def __len__(self) -> int:
        return len(self.text)


def segment_text(text: Optional[str]) -> Iterator[Segment]:
    """
    依漢字/非漢字切段

    Args:
        text: 輸入文本；空字串或 None 不產生任何片段

    Yields:
        Segment: 依原文順序的片段
    """
    if not text:
        return

    start = 0
    chinese_mode = is_chinese_char(text[0])
    for i in range(1, len(text)):
        current = is_chinese_char(text[i])
        if current != chinese_mode:
            yield Segment(text[start:i], chinese_mode, start)
            start = i
            chinese_mode = current

    yield Segment(text[start:], chinese_mode, start)
