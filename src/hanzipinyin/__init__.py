"""
hanzipinyin - 漢字轉拼音 (Hanzi to Pinyin Converter)

核心概念：
- 文本依「漢字/非漢字」切段，非漢字原樣保留
- 整段命中詞語表時使用詞語讀音，否則逐字查表
- 多音字依前後一字的上下文規則判斷，查無規則時取最常用讀音
- 輸出格式：帶聲調、不帶聲調、數字聲調、首字母；可設定分隔符與大小寫

官方入口（穩定 API）：
- `hanzipinyin.convert` / `hanzipinyin.first_letters`（預設資料）
- `hanzipinyin.PinyinConverter`（自備資料或多組設定）
"""

# =============================================================================
# 便利函式（官方入口）
# =============================================================================
from hanzipinyin.api import (
    convert,
    convert_char,
    first_letters,
    get_default_converter,
    is_chinese_char,
    reset_default_converter,
)

# =============================================================================
# Converter 與選項
# =============================================================================
from hanzipinyin.converter import PinyinConverter
from hanzipinyin.config import ConverterConfig
from hanzipinyin.core.options import PinyinCase, PinyinFormat, PinyinOptions

# =============================================================================
# 資料來源
# =============================================================================
from hanzipinyin.data import PinyinTables, load_pypinyin_tables, load_tables
from hanzipinyin.core.errors import (
    DataSourceFormatError,
    DataSourceNotFoundError,
    PinyinDataError,
)

# =============================================================================
# 日誌工具
# =============================================================================
from hanzipinyin.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from hanzipinyin.utils.lazy_imports import check_pypinyin_dependencies, is_pypinyin_available

__all__ = [
    # Functions
    "convert",
    "convert_char",
    "first_letters",
    "is_chinese_char",
    "get_default_converter",
    "reset_default_converter",
    # Converter
    "PinyinConverter",
    "ConverterConfig",
    "PinyinOptions",
    "PinyinFormat",
    "PinyinCase",
    # Data
    "PinyinTables",
    "load_tables",
    "load_pypinyin_tables",
    "PinyinDataError",
    "DataSourceNotFoundError",
    "DataSourceFormatError",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependency checks
    "is_pypinyin_available",
    "check_pypinyin_dependencies",
]

__version__ = "0.1.0"
