"""
延遲導入工具

pypinyin 的字典模組載入成本不低（數萬筆詞條），只有在真正需要預設資料來源時才載入。
"""

from __future__ import annotations

import importlib
import importlib.util
from types import ModuleType
from typing import Optional

PYPINYIN_INSTALL_HINT = (
    "缺少 pypinyin，無法建立預設拼音資料。請執行:\n"
    "  pip install pypinyin\n"
    "或改用 load_tables(directory) 載入自備的 JSON 資料。"
)

_pypinyin: Optional[ModuleType] = None


def is_pypinyin_available() -> bool:
    """檢查 pypinyin 是否已安裝（不實際載入）"""
    return importlib.util.find_spec("pypinyin") is not None


def check_pypinyin_dependencies() -> None:
    """
    檢查 pypinyin 依賴

    Raises:
        ImportError: 未安裝 pypinyin
    """
    if not is_pypinyin_available():
        raise ImportError(PYPINYIN_INSTALL_HINT)


def _get_pypinyin() -> ModuleType:
    """延遲載入 pypinyin 模組"""
    global _pypinyin

    if _pypinyin is not None:
        return _pypinyin
    try:
        _pypinyin = importlib.import_module("pypinyin")
    except ImportError as e:
        raise ImportError(PYPINYIN_INSTALL_HINT) from e
    return _pypinyin


def _get_pypinyin_dicts() -> tuple[dict, dict]:
    """
    取得 pypinyin 內建的單字與詞語字典

    Returns:
        (pinyin_dict, phrases_dict)：
        - pinyin_dict: {code point: "hǎo,hào"}
        - phrases_dict: {"你好": [["nǐ"], ["hǎo"]]}
    """
    _get_pypinyin()
    pinyin_dict_module = importlib.import_module("pypinyin.pinyin_dict")
    phrases_dict_module = importlib.import_module("pypinyin.phrases_dict")
    return pinyin_dict_module.pinyin_dict, phrases_dict_module.phrases_dict
