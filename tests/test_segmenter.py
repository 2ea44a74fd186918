"""
切段測試
"""

import pytest

from hanzipinyin.core.segmenter import Segment, is_chinese_char, segment_text


class TestIsChineseChar:
    def test_range_bounds(self):
        assert is_chinese_char(chr(0x4E00))
        assert is_chinese_char(chr(0x9FFF))
        assert not is_chinese_char(chr(0x4DFF))
        assert not is_chinese_char(chr(0xA000))

    def test_non_chinese(self):
        """標點、數字、拉丁字母、擴充區都不算漢字"""
        for char in ["，", "。", "1", "a", " ", "\U00020000", "あ"]:
            assert not is_chinese_char(char), char

    def test_not_single_char(self):
        assert not is_chinese_char("")
        assert not is_chinese_char("你好")


class TestSegmentText:
    def test_empty_input(self):
        assert list(segment_text("")) == []
        assert list(segment_text(None)) == []

    def test_single_char(self):
        assert list(segment_text("你")) == [Segment("你", True, 0)]

    def test_alternating_runs(self):
        segments = list(segment_text("Hi你好, 世界!"))
        assert [(s.text, s.is_chinese) for s in segments] == [
            ("Hi", False),
            ("你好", True),
            (", ", False),
            ("世界", True),
            ("!", False),
        ]
        assert [s.start for s in segments] == [0, 2, 4, 6, 8]
        assert segments[-1].end == len("Hi你好, 世界!")

    @pytest.mark.parametrize(
        "text",
        ["你好世界", "abc", "中文ABC中文", "1,2,3", "a你b好c", "你", "，你好。"],
    )
    def test_segments_concatenate_to_input(self, text):
        segments = list(segment_text(text))
        assert "".join(s.text for s in segments) == text

    @pytest.mark.parametrize("text", ["中文ABC中文", "a你b好c", "，你好。"])
    def test_adjacent_segments_alternate(self, text):
        segments = list(segment_text(text))
        for left, right in zip(segments, segments[1:]):
            assert left.is_chinese != right.is_chinese

    def test_is_lazy(self):
        iterator = segment_text("你好abc")
        assert next(iterator).text == "你好"
        assert next(iterator).text == "abc"
        with pytest.raises(StopIteration):
            next(iterator)
