"""
PinyinConverter 測試
"""

import pytest

from hanzipinyin import PinyinCase, PinyinConverter, PinyinFormat, PinyinOptions, PinyinTables
from hanzipinyin.config import ConverterConfig


class TestBasicConversion:
    def test_default_options(self, converter):
        assert converter.convert("你好世界") == "nǐ hǎo shì jiè"

    def test_tone_number(self, converter):
        options = PinyinOptions(format=PinyinFormat.WITH_TONE_NUMBER)
        assert converter.convert("你好世界", options) == "ni3 hao3 shi4 jie4"

    def test_without_tone_upper(self, converter):
        options = PinyinOptions(format=PinyinFormat.WITHOUT_TONE, case=PinyinCase.UPPER)
        assert converter.convert("你好世界", options) == "NI HAO SHI JIE"

    def test_first_letters(self, converter):
        assert converter.first_letters("你好世界") == "n h s j"

    def test_custom_separator(self, converter):
        assert converter.convert("你好世界", PinyinOptions(separator="-")) == "nǐ-hǎo-shì-jiè"

    def test_empty_separator(self, converter):
        assert converter.convert("你好世界", PinyinOptions(separator="")) == "nǐhǎoshìjiè"

    @pytest.mark.parametrize(
        "options",
        [
            None,
            PinyinOptions(format=PinyinFormat.FIRST_LETTER),
            PinyinOptions(separator="-", case=PinyinCase.UPPER),
            PinyinOptions(heteronym=False),
        ],
    )
    def test_empty_input(self, converter, options):
        assert converter.convert("", options) == ""
        assert converter.convert(None, options) == ""

    def test_neutral_tone_and_umlaut(self, converter):
        options = PinyinOptions(format=PinyinFormat.WITH_TONE_NUMBER)
        assert converter.convert("绿的", options) == "lv4 de5"
        assert converter.convert("绿", PinyinOptions(format=PinyinFormat.WITHOUT_TONE)) == "lv"

    def test_deterministic(self, converter):
        options = PinyinOptions(format=PinyinFormat.WITH_TONE_NUMBER, separator="_")
        assert converter.convert("我长大了, 中国", options) == converter.convert(
            "我长大了, 中国", options
        )


class TestMixedText:
    def test_punctuation_passthrough(self, converter):
        assert converter.convert("你好,世界!") == "nǐ hǎo,shì jiè!"

    def test_latin_passthrough(self, converter):
        assert converter.convert("Hello你好") == "Hellonǐ hǎo"
        assert converter.convert("abc 123") == "abc 123"

    def test_no_separator_next_to_non_chinese(self, converter):
        result = converter.convert("你a好", PinyinOptions(separator="|"))
        assert result == "nǐahǎo"
        assert "|" not in result

    def test_unknown_hanzi_passthrough(self, converter):
        """查無資料的漢字原樣輸出，仍視為漢字參與分隔"""
        assert converter.convert("鑫") == "鑫"
        assert converter.convert("你鑫好") == "nǐ 鑫 hǎo"

    def test_separator_count(self, converter):
        text = "我很好你好"
        result = converter.convert(text, PinyinOptions(separator="|"))
        assert result.count("|") == len(text) - 1


class TestWordsAndHeteronyms:
    def test_word_match(self, converter):
        assert converter.convert("银行") == "yín háng"
        options = PinyinOptions(format=PinyinFormat.WITH_TONE_NUMBER, separator="-")
        assert converter.convert("中国", options) == "zhong1-guo2"

    def test_word_must_match_whole_segment(self, converter):
        """片段多於詞語時逐字轉換，多音字規則仍生效"""
        assert converter.convert("中国银行") == "zhōng guó yín háng"
        assert converter.convert("银行ATM") == "yín hángATM"

    def test_word_takes_precedence_over_rules(self, converter):
        """行为 整段命中詞語表，不套用「为」的上下文規則"""
        assert converter.convert("行为") == "xíng wéi"
        assert converter.convert("因为") == "yīn wèi"

    def test_heteronym_context(self, converter):
        assert converter.convert("我长大了") == "wǒ zhǎng dà le"
        assert converter.convert("头发很长") == "tóu fā hěn cháng"

    def test_heteronym_disabled(self, converter):
        options = PinyinOptions(heteronym=False)
        assert converter.convert("我长大了", options) == "wǒ cháng dà le"

    def test_context_stops_at_segment_boundary(self, converter):
        """上下文只看同一片段內的相鄰字"""
        assert converter.convert("长,大") == "cháng,dà"


class TestConvertChar:
    def test_with_context(self, converter):
        assert converter.convert_char("长", prev="我", next="大") == "zhǎng"
        assert converter.convert_char("长") == "cháng"

    def test_with_options(self, converter):
        options = PinyinOptions(format=PinyinFormat.FIRST_LETTER, case=PinyinCase.UPPER)
        assert converter.convert_char("长", options, next="大") == "Z"

    def test_passthrough(self, converter):
        assert converter.convert_char("a") == "a"
        assert converter.convert_char("，") == "，"
        assert converter.convert_char("鑫") == "鑫"

    def test_is_chinese_char(self, converter):
        assert converter.is_chinese_char("中")
        assert not converter.is_chinese_char("A")


class TestPinyinList:
    def test_list_per_character(self, converter):
        assert converter.get_pinyin_list("你好,世界") == ["nǐ", "hǎo", ",", "shì", "jiè"]

    def test_word_split_into_syllables(self, converter):
        assert converter.get_pinyin_list("银行ATM") == ["yín", "háng", "ATM"]

    def test_list_with_options(self, converter):
        options = PinyinOptions(format=PinyinFormat.WITH_TONE_NUMBER)
        assert converter.get_pinyin_list("我长大了", options) == ["wo3", "zhang3", "da4", "le5"]

    def test_empty(self, converter):
        assert converter.get_pinyin_list("") == []


class TestEventsAndTiming:
    def test_events(self, tables):
        events = []
        converter = PinyinConverter(tables, on_event=events.append)

        converter.convert("银行")
        converter.convert("我长大了")
        converter.convert("a鑫")

        assert [e["type"] for e in events] == ["word", "heteronym", "passthrough"]
        assert events[0]["original"] == "银行"
        assert events[1]["original"] == "长"
        assert events[1]["start"] == 1
        assert events[1]["pinyin"] == "zhǎng"
        assert events[1]["next"] == "大"
        assert events[2]["original"] == "鑫"
        assert events[2]["start"] == 1

    def test_convert_char_events_have_no_span(self, tables):
        """單字轉換沒有原文位置，事件不應帶 start/end"""
        events = []
        converter = PinyinConverter(tables, on_event=events.append)

        assert converter.convert_char("长", prev="我", next="大") == "zhǎng"
        assert converter.convert_char("鑫") == "鑫"

        assert [e["type"] for e in events] == ["heteronym", "passthrough"]
        assert all("start" not in e and "end" not in e for e in events)
        assert events[0]["prev"] == "我"

        # convert 路徑仍帶原文位置
        converter.convert("好鑫")
        assert events[-1]["start"] == 1
        assert events[-1]["end"] == 2

    def test_failing_event_handler_does_not_break_conversion(self, tables):
        def handler(event):
            raise RuntimeError("boom")

        converter = PinyinConverter(tables, on_event=handler)
        assert converter.convert("银行") == "yín háng"

    def test_timing_callback(self, tables):
        timings = []
        PinyinConverter(tables, on_timing=lambda op, elapsed: timings.append((op, elapsed)))
        assert timings[0][0] == "PinyinConverter.__init__"
        assert timings[0][1] >= 0

    def test_stats(self, converter):
        converter.convert("你好")
        stats = converter.get_stats()
        assert stats["tables"]["words"] == 3
        assert stats["tables"]["heteronyms"] == 4
        assert stats["format_cache"]["maxsize"] > 0


class TestFromConfig:
    def test_from_config_with_tables(self, tables):
        events = []
        converter = PinyinConverter.from_config(ConverterConfig(on_event=events.append), tables)
        assert converter.convert("鑫") == "鑫"
        assert events[0]["type"] == "passthrough"

    def test_from_config_data_dir(self, tmp_path):
        (tmp_path / "pinyin-dict.json").write_text('{"中": "zhōng zhòng"}', encoding="utf-8")
        (tmp_path / "word-pinyin-dict.json").write_text("{}", encoding="utf-8")
        (tmp_path / "multiple-dict.json").write_text('{"中": {"打": "zhòng"}}', encoding="utf-8")

        converter = PinyinConverter.from_config(ConverterConfig(data_dir=tmp_path))
        assert converter.convert("中") == "zhōng"
        assert converter.convert_char("中", prev="打") == "zhòng"

    def test_tables_are_shared_read_only(self, tables):
        first = PinyinConverter(tables)
        second = PinyinConverter(tables)
        assert first.tables is second.tables
        assert isinstance(first.tables, PinyinTables)
