"""
拼音資料載入

兩種資料來源:
- load_tables(directory): 讀取目錄下的三個 JSON 檔
- load_pypinyin_tables(): 由 pypinyin 內建字典建表，常用讀音與多音字規則使用套件內附的
  default_readings.json 與 heteronyms.json

任何載入失敗都是致命錯誤，呼叫端不應在此狀態下繼續提供轉換服務。
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from hanzipinyin.core.errors import DataSourceFormatError, DataSourceNotFoundError
from hanzipinyin.core.segmenter import CHINESE_CHAR_END, CHINESE_CHAR_START, is_chinese_char
from hanzipinyin.utils.lazy_imports import _get_pypinyin_dicts
from hanzipinyin.utils.logger import TimingContext, get_logger

from .tables import PinyinTables

logger = get_logger("data")

CHARS_FILE = "pinyin-dict.json"
WORDS_FILE = "word-pinyin-dict.json"
HETERONYMS_FILE = "multiple-dict.json"
DEFAULT_HETERONYMS_RESOURCE = "heteronyms.json"
DEFAULT_READINGS_RESOURCE = "default_readings.json"


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise DataSourceNotFoundError(f"找不到拼音資料檔: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise DataSourceFormatError(f"拼音資料檔不是合法的 JSON: {path} ({e})") from e


def load_tables(
    directory: Union[str, Path],
    *,
    chars_file: str = CHARS_FILE,
    words_file: str = WORDS_FILE,
    heteronyms_file: str = HETERONYMS_FILE,
) -> PinyinTables:
    """
    從目錄載入三個 JSON 資料檔

    格式:
        pinyin-dict.json       {"好": "hǎo hào"}
        word-pinyin-dict.json  {"银行": "yín háng"}
        multiple-dict.json     {"长": {"大": "zhǎng"}}

    Raises:
        DataSourceNotFoundError: 目錄或任一檔案不存在
        DataSourceFormatError: JSON 或結構錯誤
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DataSourceNotFoundError(f"找不到拼音資料目錄: {directory}")

    with TimingContext(f"load_tables({directory})", logger):
        tables = PinyinTables.from_mappings(
            chars=_read_json(directory / chars_file),
            words=_read_json(directory / words_file),
            heteronyms=_read_json(directory / heteronyms_file),
        )
    logger.debug(f"Loaded tables from {directory}: {tables.stats()}")
    return tables


def _read_resource(name: str) -> Any:
    resource = resources.files("hanzipinyin.data").joinpath(name)
    try:
        text = resource.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DataSourceNotFoundError(f"找不到內附資料檔: {name}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DataSourceFormatError(f"內附資料檔不是合法的 JSON: {name} ({e})") from e


def load_default_heteronyms() -> Dict[str, Dict[str, str]]:
    """讀取套件內附的多音字規則"""
    return _read_resource(DEFAULT_HETERONYMS_RESOURCE)


def load_default_readings() -> Dict[str, str]:
    """
    讀取套件內附的常用讀音

    pypinyin 的讀音順序並非依使用頻率 (例如「长」排第一的是 zhǎng)，
    多音字規則又只在上下文命中時才會改變讀音，
    因此這些字的預設讀音必須另外指定，規則才有意義。
    """
    return _read_resource(DEFAULT_READINGS_RESOURCE)


def _apply_default_reading(readings: List[str], default: str) -> List[str]:
    return [default] + [r for r in readings if r != default]


def load_pypinyin_tables(
    heteronyms: Optional[Mapping[str, Mapping[str, str]]] = None,
    default_readings: Optional[Mapping[str, str]] = None,
) -> PinyinTables:
    """
    以 pypinyin 內建字典建立查詢表

    - 單字表只保留 U+4E00 ~ U+9FFF，讀音以逗號分隔、順序沿用 pypinyin
    - default_readings 中的字，以指定讀音排第一 (pypinyin 未收錄的讀音會補上)
    - 詞語表只保留全為漢字、且讀音數與字數相同的多字詞，每字取第一個候選讀音

    Args:
        heteronyms: 多音字規則；None 時使用套件內附規則
        default_readings: 字 → 預設讀音；None 時使用套件內附的常用讀音

    Raises:
        DataSourceNotFoundError: 未安裝 pypinyin
    """
    try:
        pinyin_dict, phrases_dict = _get_pypinyin_dicts()
    except ImportError as e:
        raise DataSourceNotFoundError(str(e)) from e

    with TimingContext("load_pypinyin_tables", logger):
        chars = {
            chr(code): [p for p in value.split(",") if p]
            for code, value in pinyin_dict.items()
            if CHINESE_CHAR_START <= code <= CHINESE_CHAR_END
        }

        if default_readings is None:
            default_readings = load_default_readings()
        for char, default in default_readings.items():
            if char in chars:
                chars[char] = _apply_default_reading(chars[char], default)
            else:
                logger.debug(f"Default reading for {char!r} skipped: not in pypinyin")

        words = {}
        for word, readings in phrases_dict.items():
            if len(word) < 2 or len(readings) != len(word):
                continue
            if not all(is_chinese_char(c) for c in word):
                continue
            if not all(readings):
                continue
            words[word] = " ".join(r[0] for r in readings)

        if heteronyms is None:
            heteronyms = load_default_heteronyms()

        tables = PinyinTables.from_mappings(chars=chars, words=words, heteronyms=heteronyms)

    logger.debug(f"Built tables from pypinyin: {tables.stats()}")
    return tables
