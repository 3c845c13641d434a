"""Sentence and paragraph splitting for mixed Chinese/English reading material."""

from .config import Config, OutputConfig, SplitterConfig
from .models import Article, SegmentationResult, TextStats
from .splitter import (
    SentenceSplitter,
    split_into_sentences,
    split_into_sentences_with_breaks,
)
from .stats import format_stats, get_text_stats

__all__ = [
    "Article",
    "Config",
    "OutputConfig",
    "SegmentationResult",
    "SentenceSplitter",
    "SplitterConfig",
    "TextStats",
    "format_stats",
    "get_text_stats",
    "split_into_sentences",
    "split_into_sentences_with_breaks",
]
