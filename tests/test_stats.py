"""Tests for text statistics and title generation."""

import pytest

from readsplit import TextStats, format_stats, get_text_stats
from readsplit.utils import TextNormalizer, generate_title_from_content


class TestTextStats:
    """Tests for get_text_stats."""

    def test_english_sentence(self):
        stats = get_text_stats("Hello world.", ["Hello world."])
        assert stats == TextStats(
            word_count=2, sentence_count=1, char_count=11, avg_words_per_sentence=2
        )

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text(self, text):
        assert get_text_stats(text, []) == TextStats(0, 0, 0, 0)

    def test_cjk_characters_count_as_words(self):
        stats = get_text_stats("你好，世界。", ["你好，世界。"])
        assert stats.word_count == 4
        assert stats.char_count == 6
        assert stats.avg_words_per_sentence == 4

    def test_mixed_script_words(self):
        stats = get_text_stats("我爱Python。", ["我爱Python。"])
        assert stats.word_count == 3
        assert stats.char_count == 9

    def test_no_sentences_gives_zero_average(self):
        stats = get_text_stats("some words here", [])
        assert stats.word_count == 3
        assert stats.sentence_count == 0
        assert stats.avg_words_per_sentence == 0

    def test_average_rounds_half_up(self):
        stats = get_text_stats("a b c d e", ["a b c.", "d e."])
        assert stats.avg_words_per_sentence == 3

    def test_whitespace_excluded_from_char_count(self):
        stats = get_text_stats(" a\tb\nc  ", ["a b c"])
        assert stats.char_count == 3


class TestFormatStats:
    """Tests for format_stats."""

    def test_format(self):
        stats = TextStats(word_count=2, sentence_count=1, char_count=11, avg_words_per_sentence=2)
        assert format_stats(stats) == "共 1 句，2 词，11 字符 | 平均每句 2 词"

    def test_format_empty(self):
        assert format_stats(TextStats()) == "共 0 句，0 词，0 字符 | 平均每句 0 词"


class TestTextNormalizer:
    """Tests for whitespace normalization."""

    def test_line_endings(self):
        assert TextNormalizer.normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"

    def test_paragraphs(self):
        assert TextNormalizer.normalize_paragraphs("a  \t b\n \n\n c ") == "a b\n\nc"

    def test_collapse_whitespace(self):
        assert TextNormalizer.collapse_whitespace(" a\n\n b\tc ") == "a b c"


class TestTitleGeneration:
    """Tests for generate_title_from_content."""

    def test_first_five_words(self):
        title = generate_title_from_content("One two three four five six")
        assert title == "One two three four five..."

    def test_short_content(self):
        assert generate_title_from_content("Short title") == "Short title"

    def test_whitespace_collapsed(self):
        assert generate_title_from_content("Line\n\n  breaks here") == "Line breaks here"

    def test_long_title_truncated(self):
        title = generate_title_from_content("a" * 60)
        assert title == "a" * 47 + "..."
        assert len(title) == 50

    @pytest.mark.parametrize("content", ["", "   ", None])
    def test_default_title(self, content):
        assert generate_title_from_content(content) == "未命名文章"
