"""
拼音資料來源

查詢表的結構定義 (PinyinTables) 與載入函式。
"""

from .loader import (
    load_default_heteronyms,
    load_default_readings,
    load_pypinyin_tables,
    load_tables,
)
from .tables import PinyinTables

__all__ = [
    "PinyinTables",
    "load_tables",
    "load_pypinyin_tables",
    "load_default_heteronyms",
    "load_default_readings",
]
