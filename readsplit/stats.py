"""Text statistics for segmented documents."""

import math
import re
from typing import Sequence

from .models import TextStats

ENGLISH_WORD_PATTERN = re.compile(r"\b[a-zA-Z]+\b", re.ASCII)
CJK_CHAR_PATTERN = re.compile(r"[\u4e00-\u9fa5]")
WHITESPACE_PATTERN = re.compile(r"\s")

STATS_TEMPLATE = (
    "共 {sentence_count} 句，{word_count} 词，{char_count} 字符 | "
    "平均每句 {avg_words_per_sentence} 词"
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_text_stats(text, sentences: Sequence[str]) -> TextStats:
    """Count words, sentences and characters of a document.

    Words are English letter runs plus individual CJK characters. Characters
    exclude all whitespace.

    Args:
        text: Original document text
        sentences: Sentences produced for that text

    Returns:
        TextStats; all zeros for empty or non-string text
    """
    if not isinstance(text, str) or not text:
        return TextStats()

    sentences = sentences or ()
    english_words = ENGLISH_WORD_PATTERN.findall(text)
    chinese_chars = CJK_CHAR_PATTERN.findall(text)
    word_count = len(english_words) + len(chinese_chars)

    char_count = len(WHITESPACE_PATTERN.sub("", text))
    sentence_count = len(sentences)
    avg = _round_half_up(word_count / sentence_count) if sentence_count else 0

    return TextStats(
        word_count=word_count,
        sentence_count=sentence_count,
        char_count=char_count,
        avg_words_per_sentence=avg,
    )


def format_stats(stats: TextStats) -> str:
    """Render stats as the one-line summary shown next to a document."""
    return STATS_TEMPLATE.format(**stats.to_dict())
