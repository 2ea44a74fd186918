"""
核心轉換元件

聲調編解碼、切段、多音字判斷與格式化；皆為不依賴資料載入方式的純邏輯。
"""

from .errors import DataSourceFormatError, DataSourceNotFoundError, PinyinDataError
from .events import ConversionEvent, ConversionEventHandler
from .formatter import format_syllable, format_word
from .heteronym import HeteronymResolver
from .options import DEFAULT_OPTIONS, PinyinCase, PinyinFormat, PinyinOptions
from .segmenter import Segment, is_chinese_char, segment_text
from .tone import strip_tone, to_numbered_form, tone_number

__all__ = [
    "PinyinDataError",
    "DataSourceNotFoundError",
    "DataSourceFormatError",
    "ConversionEvent",
    "ConversionEventHandler",
    "format_syllable",
    "format_word",
    "HeteronymResolver",
    "DEFAULT_OPTIONS",
    "PinyinCase",
    "PinyinFormat",
    "PinyinOptions",
    "Segment",
    "is_chinese_char",
    "segment_text",
    "strip_tone",
    "tone_number",
    "to_numbered_form",
]
