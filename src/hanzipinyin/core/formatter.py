"""
拼音格式化

依 PinyinOptions 將單一音節或整個詞的拼音轉成輸出格式。
"""

from __future__ import annotations

from functools import lru_cache

from .options import PinyinCase, PinyinFormat, PinyinOptions
from .tone import strip_tone, to_numbered_form


# 音節種類有限（約 1500 個帶調音節），快取後幾乎全部命中
@lru_cache(maxsize=8192)
def _format(syllable: str, fmt: PinyinFormat, case: PinyinCase) -> str:
    if fmt is PinyinFormat.WITH_TONE:
        result = syllable
    elif fmt is PinyinFormat.WITHOUT_TONE:
        result = strip_tone(syllable)
    elif fmt is PinyinFormat.WITH_TONE_NUMBER:
        result = to_numbered_form(syllable)
    elif fmt is PinyinFormat.FIRST_LETTER:
        result = strip_tone(syllable)[:1]
    else:
        raise ValueError(f"未知的拼音格式: {fmt!r}")

    if case is PinyinCase.UPPER:
        result = result.upper()
    return result


def format_syllable(syllable: str, options: PinyinOptions) -> str:
    """
    格式化單一音節

    先套用格式（保留聲調/去聲調/數字聲調/首字母），再套用大小寫。

    >>> format_syllable("hǎo", PinyinOptions(format=PinyinFormat.WITH_TONE_NUMBER))
    'hao3'
    """
    return _format(syllable, options.format, options.case)


def format_word(word_pinyin: str, options: PinyinOptions) -> str:
    """
    格式化詞語拼音

    Args:
        word_pinyin: 以空白分隔的逐字拼音，例如 "yín háng"
        options: 轉換選項；各音節以 options.separator 連接
    """
    return options.separator.join(
        format_syllable(syllable, options) for syllable in word_pinyin.split()
    )


def format_cache_info():
    """音節格式化快取統計 (functools.lru_cache 的 CacheInfo)"""
    return _format.cache_info()
