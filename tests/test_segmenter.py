"""Test sentence segmentation."""

import pytest

from guidereader import segment
from guidereader.segmenters.sentence import (
    SentenceSegmenter, BOUNDARY_MARKERS, BASIC_MARKERS,
    normalize_newlines, is_decimal_point,
)


def _content(text: str) -> str:
    """Text with every boundary marker and whitespace character removed."""
    return "".join(ch for ch in text if ch not in BOUNDARY_MARKERS and not ch.isspace())


class TestBasicSplitting:
    """Test the documented segmentation behaviour."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\r\n\t", "　"])
    def test_blank_input(self, text):
        assert segment(text) == []

    def test_latin_sentences(self):
        assert segment("Hello. World.") == ["Hello.", "World."]

    def test_decimal_point_is_not_a_boundary(self):
        assert segment("温度是3.14度。今天天气好。") == ["温度是3.14度。", "今天天气好。"]

    def test_no_terminal_punctuation(self):
        assert segment("No terminal punctuation") == ["No terminal punctuation"]

    def test_bare_newline_is_a_boundary(self):
        assert segment("Line one\nLine two") == ["Line one", "Line two"]

    def test_consecutive_markers_merge(self):
        assert segment("Wow!!! Really?") == ["Wow!!!", "Really?"]

    def test_mixed_scripts(self):
        text = "欢迎来到故宫！Welcome to the Forbidden City. 请随我来？OK!"
        assert segment(text) == [
            "欢迎来到故宫！",
            "Welcome to the Forbidden City.",
            "请随我来？",
            "OK!",
        ]

    def test_no_whitespace_after_marker(self):
        assert segment("Hello.World") == ["Hello.", "World"]

    def test_module_function_matches_default_segmenter(self):
        text = "第一句。第二句！Third?"
        assert segment(text) == SentenceSegmenter().segment(text)


class TestLineEndings:
    """Test newline normalization."""

    def test_normalize_newlines(self):
        assert normalize_newlines("a\r\nb\rc\nd") == "a\nb\nc\nd"

    def test_crlf_and_cr_are_boundaries(self):
        assert segment("Line one\r\nLine two\rLine three") == [
            "Line one", "Line two", "Line three"
        ]

    def test_blank_lines_collapse(self):
        assert segment("第一段\n\n\n第二段") == ["第一段", "第二段"]

    def test_marker_then_newline(self):
        assert segment("第一句。\r\n\r\n第二句。") == ["第一句。", "第二句。"]

    def test_indented_lines(self):
        assert segment("  indented line  \n   next") == ["indented line", "next"]


class TestDecimalPoints:
    """Test the decimal-point exception and its edge cases."""

    def test_is_decimal_point(self):
        assert is_decimal_point("3.14", 1)
        assert not is_decimal_point("3.", 1)
        assert not is_decimal_point(".5", 0)
        assert not is_decimal_point("a.5", 1)
        assert not is_decimal_point("3,14", 1)

    def test_year_with_fraction(self):
        assert segment("2024.5年开放。") == ["2024.5年开放。"]

    def test_number_at_sentence_end(self):
        assert segment("pi is 3.14. Next") == ["pi is 3.14.", "Next"]

    def test_dotted_version_protects_every_period(self):
        assert segment("版本1.2.3 发布。") == ["版本1.2.3 发布。"]

    def test_double_period_between_digits_splits(self):
        assert segment("版本3..4") == ["版本3..", "4"]

    def test_fullwidth_digits_are_not_protected(self):
        assert segment("３.１４") == ["３.", "１４"]

    def test_ellipsis_after_number(self):
        assert segment("高35.05米...真高") == ["高35.05米...", "真高"]


class TestSeparators:
    """Test how separators attach to sentences."""

    @pytest.mark.parametrize("text", ["......", "?!。", "…—", " . ! ? "])
    def test_only_markers(self, text):
        assert segment(text) == []

    def test_leading_markers_dropped(self):
        assert segment("...Hello") == ["Hello"]
        assert segment("  . x") == ["x"]

    def test_spaced_markers_attach_to_previous_sentence(self):
        assert segment("Hello. . . World") == ["Hello. . .", "World"]

    def test_newline_after_separator_attaches(self):
        assert segment("Hi\n.\nBye") == ["Hi .", "Bye"]

    def test_full_markers_split_on_ellipsis_and_dash(self):
        assert segment("Wait… 什么——真的？") == ["Wait…", "什么——", "真的？"]

    def test_basic_markers_keep_ellipsis_and_dash(self):
        segmenter = SentenceSegmenter(BASIC_MARKERS)
        assert segmenter.segment("Wait… 什么——真的？") == ["Wait… 什么——真的？"]

    def test_comma_is_not_a_boundary(self):
        assert segment("各位游客，大家好。") == ["各位游客，大家好。"]


class TestNormalization:
    """Test whitespace cleanup invariants."""

    def test_internal_whitespace_collapsed(self):
        assert segment("a   b\t\tc.") == ["a b c."]

    def test_ideographic_space_collapsed(self):
        assert segment("故宫　　太和殿。") == ["故宫 太和殿。"]

    @pytest.mark.parametrize("text", [
        "  Hello.   World  \n\n  Again!!  ",
        "温度是 3.14 度。\r\n\r\n  今天\t天气好。",
        "A\n \n \nB . . C",
    ])
    def test_sentences_are_trimmed_and_collapsed(self, text):
        for sentence in segment(text):
            assert sentence
            assert sentence == sentence.strip()
            assert "  " not in sentence
            assert "\n" not in sentence and "\t" not in sentence

    @pytest.mark.parametrize("text", [
        "Hello. World.",
        "温度是3.14度。今天天气好。",
        "...Leading? and trailing",
        "版本1.2.3\r\n发布了！！ 真的？……是的——",
        "Hello. . . World\n\n\n",
    ])
    def test_content_preserved_in_order(self, text):
        assert _content("".join(segment(text))) == _content(text)


class TestTotality:
    """Test that pathological inputs terminate with sane output."""

    def test_many_periods(self):
        assert segment("." * 100000) == []

    def test_many_short_sentences(self):
        result = segment("a. " * 50000)
        assert len(result) == 50000
        assert set(result) == {"a."}

    def test_long_digit_run(self):
        text = ".".join(["1"] * 1000)
        assert segment(text) == [text]
