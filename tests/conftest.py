"""
共用測試資料

以小型固定資料建表，測試不依賴 pypinyin 的字典內容。
"""

import pytest

from hanzipinyin import PinyinConverter, PinyinTables

SAMPLE_CHARS = {
    "你": "nǐ",
    "好": "hǎo hào",
    "世": "shì",
    "界": "jiè",
    "我": "wǒ",
    "长": "cháng zhǎng",
    "大": "dà dài",
    "了": "le liǎo",
    "头": "tóu",
    "发": "fā fà",
    "很": "hěn",
    "银": "yín",
    "行": "xíng háng",
    "为": "wéi wèi",
    "因": "yīn",
    "绿": "lǜ lù",
    "中": "zhōng zhòng",
    "国": "guó",
    "的": "de dí dì",
}

SAMPLE_WORDS = {
    "银行": "yín háng",
    "中国": "zhōng guó",
    "行为": "xíng wéi",
}

SAMPLE_HETERONYMS = {
    "长": {"大": "zhǎng"},
    "行": {"银": "háng"},
    "为": {"因": "wèi", "行": "wèi"},
    "好": {"爱": "hào"},
}


@pytest.fixture
def tables():
    return PinyinTables.from_mappings(
        chars=SAMPLE_CHARS,
        words=SAMPLE_WORDS,
        heteronyms=SAMPLE_HETERONYMS,
    )


@pytest.fixture
def converter(tables):
    return PinyinConverter(tables)
