"""
資料後端

管理預設查詢表的一次性載入（單例）。
"""

from .pinyin_backend import PinyinDataBackend, get_pinyin_backend

__all__ = [
    "PinyinDataBackend",
    "get_pinyin_backend",
]
