"""
漢字轉拼音轉換器 (PinyinConverter)

流程：切段 -> 整段詞語查表 -> 逐字（多音字規則 / 預設讀音 / 原樣輸出）-> 格式化 -> 串接。

使用方式:
    from hanzipinyin import PinyinConverter, PinyinOptions, PinyinFormat

    # 應用程式啟動時建立一次（載入預設資料）
    converter = PinyinConverter()

    converter.convert("你好世界")  # 'nǐ hǎo shì jiè'
    converter.convert("你好世界", PinyinOptions(format=PinyinFormat.WITH_TONE_NUMBER))
    converter.first_letters("你好世界")  # 'n h s j'

    # 測試或自備資料
    tables = PinyinTables.from_mappings(chars={...}, words={...}, heteronyms={...})
    converter = PinyinConverter(tables)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from hanzipinyin.backend import get_pinyin_backend
from hanzipinyin.config import ConverterConfig
from hanzipinyin.core.events import ConversionEvent, ConversionEventHandler
from hanzipinyin.core.formatter import format_cache_info, format_syllable, format_word
from hanzipinyin.core.heteronym import HeteronymResolver
from hanzipinyin.core.options import DEFAULT_OPTIONS, PinyinFormat, PinyinOptions
from hanzipinyin.core.segmenter import Segment, is_chinese_char, segment_text
from hanzipinyin.data import PinyinTables, load_tables
from hanzipinyin.utils.logger import TimingContext, get_logger, setup_logger

FIRST_LETTER_OPTIONS = PinyinOptions(format=PinyinFormat.FIRST_LETTER)


class PinyinConverter:
    """
    漢字轉拼音轉換器

    持有唯讀的查詢表，本身不保存任何每次呼叫的狀態，
    可在多執行緒間共用同一個實例。

    Args:
        tables: 查詢表；None 時使用預設資料後端（pypinyin）
        verbose: 是否開啟 DEBUG 日誌
        on_timing: 計時回呼 (operation, elapsed_seconds)
        on_event: 轉換事件回呼，見 hanzipinyin.core.events

    Raises:
        DataSourceNotFoundError / DataSourceFormatError: 預設資料載入失敗
    """

    def __init__(
        self,
        tables: Optional[PinyinTables] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[ConversionEventHandler] = None,
    ):
        self._init_logger(verbose=verbose, on_timing=on_timing)
        self._on_event = on_event

        with self._log_timing("PinyinConverter.__init__"):
            if tables is None:
                tables = get_pinyin_backend().get_tables()
            self._tables = tables
            self._resolver = HeteronymResolver(tables.heteronyms)

        self._logger.info(f"PinyinConverter initialized: {tables.stats()}")

    @classmethod
    def from_config(
        cls,
        config: ConverterConfig,
        tables: Optional[PinyinTables] = None,
    ) -> "PinyinConverter":
        """依 ConverterConfig 建立；config.data_dir 有值且未提供 tables 時從該目錄載入"""
        if tables is None and config.data_dir is not None:
            tables = load_tables(config.data_dir)
        return cls(
            tables,
            verbose=config.verbose,
            on_timing=config.on_timing,
            on_event=config.on_event,
        )

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger("converter")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @property
    def tables(self) -> PinyinTables:
        return self._tables

    # ========== 公開 API ==========

    def convert(self, text: Optional[str], options: Optional[PinyinOptions] = None) -> str:
        """
        將文本轉為拼音

        Args:
            text: 輸入文本；空字串或 None 回傳空字串
            options: 轉換選項，None 時使用預設值

        Returns:
            拼音字串；非漢字原樣保留，且不會在其旁邊插入分隔符
        """
        if not text:
            return ""

        options = options or DEFAULT_OPTIONS
        result: List[str] = []
        for segment in segment_text(text):
            word_pinyin = self._match_word(segment)
            if word_pinyin is not None:
                result.append(format_word(word_pinyin, options))
            else:
                result.extend(self._convert_chars(segment, options))
        return "".join(result)

    def get_pinyin_list(
        self,
        text: Optional[str],
        options: Optional[PinyinOptions] = None,
    ) -> List[str]:
        """
        將文本轉為拼音列表

        每個漢字一個元素（整段命中詞語時逐字拆開），連續的非漢字合併為一個元素。

        >>> converter.get_pinyin_list("银行ATM")
        ['yín', 'háng', 'ATM']
        """
        if not text:
            return []

        options = options or DEFAULT_OPTIONS
        units: List[str] = []
        for segment in segment_text(text):
            if not segment.is_chinese:
                units.append(segment.text)
                continue
            word_pinyin = self._match_word(segment)
            if word_pinyin is not None:
                units.extend(format_syllable(s, options) for s in word_pinyin.split())
            else:
                units.extend(
                    self._char_pinyin(char, options, prev, nxt, segment.start + i)
                    for i, char, prev, nxt in _with_context(segment)
                )
        return units

    def convert_char(
        self,
        char: str,
        options: Optional[PinyinOptions] = None,
        prev: Optional[str] = None,
        next: Optional[str] = None,
    ) -> str:
        """
        轉換單一字元

        Args:
            char: 要轉換的字元
            options: 轉換選項
            prev: 前一個字元（多音字判斷用）
            next: 後一個字元（多音字判斷用）

        Returns:
            格式化後的拼音；非漢字或查無資料時原樣回傳

        Note:
            此處發出的事件沒有 start/end 欄位（字元不屬於任何原文）
        """
        return self._char_pinyin(char, options or DEFAULT_OPTIONS, prev, next)

    def first_letters(self, text: Optional[str]) -> str:
        """取得拼音首字母，例如 "你好世界" -> "n h s j" """
        return self.convert(text, FIRST_LETTER_OPTIONS)

    @staticmethod
    def is_chinese_char(char: str) -> bool:
        return is_chinese_char(char)

    def get_stats(self) -> Dict[str, Any]:
        cache_info = format_cache_info()
        return {
            "tables": self._tables.stats(),
            "format_cache": {
                "hits": cache_info.hits,
                "misses": cache_info.misses,
                "currsize": cache_info.currsize,
                "maxsize": cache_info.maxsize,
            },
        }

    # ========== 內部流程 ==========

    def _match_word(self, segment: Segment) -> Optional[str]:
        """多字片段整段命中詞語表時回傳詞語讀音（詞語優先於多音字規則）"""
        if len(segment) <= 1:
            return None
        word_pinyin = self._tables.words.get(segment.text)
        if word_pinyin is not None:
            self._emit_event(
                {
                    "type": "word",
                    "start": segment.start,
                    "end": segment.end,
                    "original": segment.text,
                    "pinyin": word_pinyin,
                }
            )
        return word_pinyin

    def _convert_chars(self, segment: Segment, options: PinyinOptions) -> Iterator[str]:
        for i, char, prev, nxt in _with_context(segment):
            yield self._char_pinyin(char, options, prev, nxt, segment.start + i)
            if (
                options.separator
                and nxt is not None
                and is_chinese_char(char)
                and is_chinese_char(nxt)
            ):
                yield options.separator

    def _char_pinyin(
        self,
        char: str,
        options: PinyinOptions,
        prev: Optional[str],
        next: Optional[str],
        position: Optional[int] = None,
    ) -> str:
        if not is_chinese_char(char):
            return char

        pinyin = None
        if options.heteronym:
            pinyin = self._resolver.resolve(char, prev, next)
            if pinyin is not None:
                event: ConversionEvent = {
                    "type": "heteronym",
                    "original": char,
                    "pinyin": pinyin,
                    "prev": prev or "",
                    "next": next or "",
                }
                self._emit_event(_with_span(event, position))

        if pinyin is None:
            pinyin = self._tables.default_pinyin(char)

        if pinyin is None:
            self._logger.debug(f"[Passthrough] 查無拼音資料: {char!r} (U+{ord(char):04X})")
            self._emit_event(_with_span({"type": "passthrough", "original": char}, position))
            return char

        return format_syllable(pinyin, options)

    def _emit_event(self, event: ConversionEvent) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")


def _with_context(segment: Segment):
    """逐字列出 (index, char, prev, next)；片段邊界的 prev/next 為 None"""
    text = segment.text
    last = len(text) - 1
    for i, char in enumerate(text):
        prev = text[i - 1] if i > 0 else None
        nxt = text[i + 1] if i < last else None
        yield i, char, prev, nxt


def _with_span(event: ConversionEvent, position: Optional[int]) -> ConversionEvent:
    """加上 start/end；單字轉換沒有原文位置，不加"""
    if position is not None:
        event["start"] = position
        event["end"] = position + 1
    return event
