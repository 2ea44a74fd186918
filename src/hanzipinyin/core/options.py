"""
拼音轉換選項

每次呼叫 convert() 時傳入，不可變；未指定的欄位使用預設值。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class PinyinFormat(str, Enum):
    """拼音輸出格式"""

    WITH_TONE = "with_tone"                # zhōng guó
    WITHOUT_TONE = "without_tone"          # zhong guo
    WITH_TONE_NUMBER = "with_tone_number"  # zhong1 guo2
    FIRST_LETTER = "first_letter"          # z g


class PinyinCase(str, Enum):
    """拼音大小寫"""

    LOWER = "lower"
    UPPER = "upper"


@dataclass(frozen=True)
class PinyinOptions:
    """
    拼音轉換選項

    Attributes:
        format: 輸出格式，預設帶聲調標記
        heteronym: 是否依上下文判斷多音字，預設開啟
        separator: 相鄰漢字拼音之間的分隔符，預設為一個空白
        case: 大小寫，預設小寫

    enum 欄位也接受字串值，例如 PinyinOptions(format="with_tone_number", case="upper")。
    """

    format: Union[PinyinFormat, str] = PinyinFormat.WITH_TONE
    heteronym: bool = True
    separator: str = " "
    case: Union[PinyinCase, str] = PinyinCase.LOWER

    def __post_init__(self):
        object.__setattr__(self, "format", PinyinFormat(self.format))
        object.__setattr__(self, "case", PinyinCase(self.case))
        if self.separator is None:
            object.__setattr__(self, "separator", " ")


DEFAULT_OPTIONS = PinyinOptions()
