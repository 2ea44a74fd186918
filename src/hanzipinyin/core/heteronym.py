"""
多音字判斷

以相鄰字元做簡單的子字串觸發：把前一字與後一字串成上下文，
依規則宣告順序逐一檢查，第一個出現在上下文中的 key 決定讀音。

這只是啟發式規則，不保證語言學上的正確性；短 key 可能誤觸發，
但行為必須與既有資料的預期一致，因此不做任何邊界修正。
"""

from __future__ import annotations

from typing import Mapping, Optional


class HeteronymResolver:
    """
    多音字讀音解析器

    Args:
        rules: {字: {上下文 key: 讀音}}，內層 mapping 的迭代順序即比對順序
    """

    def __init__(self, rules: Mapping[str, Mapping[str, str]]):
        self._rules = rules

    def __contains__(self, char: str) -> bool:
        return char in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def resolve(
        self,
        char: str,
        prev: Optional[str] = None,
        next: Optional[str] = None,
    ) -> Optional[str]:
        """
        依上下文決定讀音

        Args:
            char: 要判斷的字
            prev: 前一個字元（片段開頭為 None）
            next: 後一個字元（片段結尾為 None）

        Returns:
            命中規則的讀音；該字沒有規則或無規則命中時回傳 None
        """
        context_rules = self._rules.get(char)
        if not context_rules:
            return None

        context = (prev or "") + (next or "")
        for key, pinyin in context_rules.items():
            if key in context:
                return pinyin
        return None
