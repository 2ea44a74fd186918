"""
預設拼音資料後端 (PinyinDataBackend)

負責預設查詢表（pypinyin 字典 + 內附多音字規則）的一次性載入。
實作為執行緒安全的單例模式。
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from hanzipinyin.data import PinyinTables, load_pypinyin_tables
from hanzipinyin.utils.logger import get_logger

# =============================================================================
# 全域狀態
# =============================================================================

_instance: Optional["PinyinDataBackend"] = None
_instance_lock = threading.Lock()


class PinyinDataBackend:
    """
    預設拼音資料後端 (單例)

    職責:
    - 載入預設查詢表（只做一次）
    - 之後以唯讀方式提供給所有 PinyinConverter 共用

    使用方式:
        backend = get_pinyin_backend()  # 取得單例
        tables = backend.get_tables()
    """

    def __init__(self):
        """
        初始化後端

        注意：請使用 get_pinyin_backend() 取得單例，不要直接呼叫此建構函數。
        """
        self._tables: Optional[PinyinTables] = None
        self._init_lock = threading.Lock()
        self._logger = get_logger("backend")

    def initialize(self) -> None:
        """
        載入預設查詢表

        此方法是執行緒安全的，多次呼叫不會重複載入。
        載入失敗時例外直接往外拋，後端維持未初始化狀態。

        Raises:
            DataSourceNotFoundError: 未安裝 pypinyin 或找不到內附規則
            DataSourceFormatError: 資料格式錯誤
        """
        if self._tables is not None:
            return

        with self._init_lock:
            if self._tables is not None:
                return
            self._tables = load_pypinyin_tables()
            self._logger.info(f"PinyinDataBackend initialized: {self._tables.stats()}")

    def is_initialized(self) -> bool:
        """檢查是否已初始化"""
        return self._tables is not None

    def get_tables(self) -> PinyinTables:
        """取得預設查詢表（未初始化時先初始化）"""
        self.initialize()
        return self._tables

    def get_stats(self) -> Dict[str, Any]:
        if self._tables is None:
            return {"initialized": False}
        return {"initialized": True, **self._tables.stats()}


def get_pinyin_backend() -> PinyinDataBackend:
    """
    取得 PinyinDataBackend 單例

    Returns:
        PinyinDataBackend: 單例實例（尚未載入資料，首次 get_tables() 時才載入）
    """
    global _instance

    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = PinyinDataBackend()
    return _instance
