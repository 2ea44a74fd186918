"""
拼音查詢表

三張表在啟動時載入一次，之後唯讀、可跨執行緒共享：
- chars: 單字 -> 讀音序列（第一個為預設/最常用讀音）
- words: 詞語 -> 以空白分隔、與字逐一對齊的讀音
- heteronyms: 多音字 -> {上下文 key: 讀音}（保留宣告順序）
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from hanzipinyin.core.errors import DataSourceFormatError


@dataclass(frozen=True)
class PinyinTables:
    chars: Mapping[str, Tuple[str, ...]]
    words: Mapping[str, str]
    heteronyms: Mapping[str, Mapping[str, str]]

    @classmethod
    def from_mappings(
        cls,
        chars: Any,
        words: Any = None,
        heteronyms: Any = None,
    ) -> "PinyinTables":
        """
        驗證並凍結原始資料

        Args:
            chars: {字: "hǎo hào"} 或 {字: ["hǎo", "hào"]}
            words: {詞: "nǐ hǎo"}，可省略
            heteronyms: {字: {上下文: 讀音}}，可省略

        Raises:
            DataSourceFormatError: 結構不符
        """
        return cls(
            chars=MappingProxyType(_validate_chars(chars)),
            words=MappingProxyType(_validate_words(words if words is not None else {})),
            heteronyms=MappingProxyType(
                _validate_heteronyms(heteronyms if heteronyms is not None else {})
            ),
        )

    def default_pinyin(self, char: str) -> Optional[str]:
        """單字的預設讀音；查無資料回傳 None"""
        pinyins = self.chars.get(char)
        return pinyins[0] if pinyins else None

    def stats(self) -> Dict[str, int]:
        return {
            "chars": len(self.chars),
            "words": len(self.words),
            "heteronyms": len(self.heteronyms),
        }


def _require_mapping(value: Any, table: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise DataSourceFormatError(
            f"{table} 應為 mapping，實際為 {type(value).__name__}"
        )
    return value


def _validate_chars(raw: Any) -> Dict[str, Tuple[str, ...]]:
    table: Dict[str, Tuple[str, ...]] = {}
    for char, value in _require_mapping(raw, "chars").items():
        if not isinstance(char, str) or len(char) != 1:
            raise DataSourceFormatError(f"chars 的 key 必須是單一字元: {char!r}")
        if isinstance(value, str):
            pinyins = tuple(value.split())
        elif isinstance(value, (list, tuple)) and all(isinstance(p, str) for p in value):
            pinyins = tuple(p for p in value if p)
        else:
            raise DataSourceFormatError(f"chars[{char!r}] 的讀音格式錯誤: {value!r}")
        if not pinyins:
            raise DataSourceFormatError(f"chars[{char!r}] 沒有任何讀音")
        table[char] = pinyins
    return table


def _validate_words(raw: Any) -> Dict[str, str]:
    table: Dict[str, str] = {}
    for word, pinyin in _require_mapping(raw, "words").items():
        if not isinstance(word, str) or not word:
            raise DataSourceFormatError(f"words 的 key 必須是非空字串: {word!r}")
        if not isinstance(pinyin, str) or not pinyin.strip():
            raise DataSourceFormatError(f"words[{word!r}] 的讀音格式錯誤: {pinyin!r}")
        table[word] = pinyin
    return table


def _validate_heteronyms(raw: Any) -> Dict[str, Mapping[str, str]]:
    table: Dict[str, Mapping[str, str]] = {}
    for char, rules in _require_mapping(raw, "heteronyms").items():
        if not isinstance(char, str) or not char:
            raise DataSourceFormatError(f"heteronyms 的 key 必須是非空字串: {char!r}")
        rules = _require_mapping(rules, f"heteronyms[{char!r}]")
        for key, pinyin in rules.items():
            if not isinstance(key, str) or not key:
                raise DataSourceFormatError(
                    f"heteronyms[{char!r}] 的上下文 key 必須是非空字串: {key!r}"
                )
            if not isinstance(pinyin, str) or not pinyin:
                raise DataSourceFormatError(
                    f"heteronyms[{char!r}][{key!r}] 的讀音格式錯誤: {pinyin!r}"
                )
        table[char] = MappingProxyType(dict(rules))
    return table
