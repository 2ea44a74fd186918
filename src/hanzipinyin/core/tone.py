"""
聲調編解碼

在「帶聲調標記的拼音」「無聲調拼音」「數字聲調拼音」之間轉換。
使用單一對照表（帶調字元 -> (無調字元, 聲調)），不依賴 Unicode 正規化。
"""

from __future__ import annotations

from typing import Dict, Tuple

NEUTRAL_TONE = 5

# 帶調字元 -> (無調字元, 聲調)；聲調 0 表示字元本身不帶調（例如 ü）
TONE_MARKS: Dict[str, Tuple[str, int]] = {
    "ā": ("a", 1), "á": ("a", 2), "ǎ": ("a", 3), "à": ("a", 4),
    "ē": ("e", 1), "é": ("e", 2), "ě": ("e", 3), "è": ("e", 4),
    "ī": ("i", 1), "í": ("i", 2), "ǐ": ("i", 3), "ì": ("i", 4),
    "ō": ("o", 1), "ó": ("o", 2), "ǒ": ("o", 3), "ò": ("o", 4),
    "ū": ("u", 1), "ú": ("u", 2), "ǔ": ("u", 3), "ù": ("u", 4),
    "ǖ": ("v", 1), "ǘ": ("v", 2), "ǚ": ("v", 3), "ǜ": ("v", 4),
    "ü": ("v", 0),
    # 成音節鼻音（嗯、呣）
    "ń": ("n", 2), "ň": ("n", 3), "ǹ": ("n", 4),
    "ḿ": ("m", 2),
}


def strip_tone(syllable: str) -> str:
    """
    移除聲調標記

    >>> strip_tone("zhōng")
    'zhong'
    >>> strip_tone("lǜ")
    'lv'
    """
    return "".join(TONE_MARKS.get(c, (c, 0))[0] for c in syllable)


def tone_number(syllable: str) -> int:
    """
    取得聲調數字

    回傳第一個帶調字元的聲調 (1-4)，沒有任何聲調標記時為輕聲 5。
    """
    for c in syllable:
        tone = TONE_MARKS.get(c, (c, 0))[1]
        if tone > 0:
            return tone
    return NEUTRAL_TONE


def to_numbered_form(syllable: str) -> str:
    """
    轉為數字聲調格式

    >>> to_numbered_form("hǎo")
    'hao3'
    >>> to_numbered_form("de")
    'de5'
    """
    return f"{strip_tone(syllable)}{tone_number(syllable)}"
