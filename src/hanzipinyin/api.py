"""
模組層級便利函式

以一個延遲建立、執行緒安全的預設 PinyinConverter 提供最簡單的呼叫方式:

    import hanzipinyin

    hanzipinyin.convert("你好世界")        # 'nǐ hǎo shì jiè'
    hanzipinyin.first_letters("你好世界")  # 'n h s j'

需要自備資料或多組設定時，請直接建立 PinyinConverter。
"""

from __future__ import annotations

import threading
from typing import Optional

from hanzipinyin.converter import PinyinConverter
from hanzipinyin.core.options import PinyinOptions
from hanzipinyin.core.segmenter import is_chinese_char

_default_converter: Optional[PinyinConverter] = None
_default_lock = threading.Lock()


def get_default_converter() -> PinyinConverter:
    """
    取得預設轉換器（首次呼叫時載入預設資料）

    Raises:
        DataSourceNotFoundError: 未安裝 pypinyin
    """
    global _default_converter

    if _default_converter is None:
        with _default_lock:
            if _default_converter is None:
                _default_converter = PinyinConverter()
    return _default_converter


def reset_default_converter() -> None:
    """丟棄預設轉換器（測試隔離用），下次呼叫時重新建立"""
    global _default_converter

    with _default_lock:
        _default_converter = None


def convert(text: Optional[str], options: Optional[PinyinOptions] = None) -> str:
    """將文本轉為拼音，見 PinyinConverter.convert"""
    if not text:
        return ""
    return get_default_converter().convert(text, options)


def convert_char(
    char: str,
    options: Optional[PinyinOptions] = None,
    prev: Optional[str] = None,
    next: Optional[str] = None,
) -> str:
    """轉換單一字元，見 PinyinConverter.convert_char"""
    if not is_chinese_char(char):
        return char
    return get_default_converter().convert_char(char, options, prev, next)


def first_letters(text: Optional[str]) -> str:
    """取得拼音首字母，見 PinyinConverter.first_letters"""
    if not text:
        return ""
    return get_default_converter().first_letters(text)


__all__ = [
    "convert",
    "convert_char",
    "first_letters",
    "is_chinese_char",
    "get_default_converter",
    "reset_default_converter",
]
