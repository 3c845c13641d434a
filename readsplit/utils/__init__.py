"""Utility functions."""

from .text_normalizer import TextNormalizer, generate_title_from_content

__all__ = [
    "TextNormalizer",
    "generate_title_from_content",
]
