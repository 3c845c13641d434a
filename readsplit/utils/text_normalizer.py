"""Text normalization utilities for mixed Chinese/English text."""

import re
import logging

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "未命名文章"  # "Untitled article"


class TextNormalizer:
    """Normalize line endings and whitespace before segmentation."""

    LINE_ENDINGS = re.compile(r"\r\n?")
    BLANK_LINES = re.compile(r"\n\s*\n")
    INLINE_SPACES = re.compile(r"[ \t]+")
    SPACES_AROUND_NEWLINE = re.compile(r"[ \t]*\n[ \t]*")
    ANY_WHITESPACE = re.compile(r"\s+")

    @classmethod
    def normalize_line_endings(cls, text: str) -> str:
        """Convert ``\\r\\n`` and lone ``\\r`` to ``\\n``."""
        if not text:
            return text
        return cls.LINE_ENDINGS.sub("\n", text)

    @classmethod
    def normalize_paragraphs(cls, text: str) -> str:
        """
        Prepare prose text while keeping paragraph structure.

        This does:
        - Collapse any run of blank lines to exactly one blank line (``\\n\\n``)
        - Collapse runs of spaces and tabs to a single space
        - Drop spaces and tabs around line breaks
        - Trim the result

        Args:
            text: Text with normalized line endings

        Returns:
            Normalized text
        """
        if not text:
            return text

        text = cls.BLANK_LINES.sub("\n\n", text)
        text = cls.INLINE_SPACES.sub(" ", text)
        text = cls.SPACES_AROUND_NEWLINE.sub("\n", text)

        return text.strip()

    @classmethod
    def collapse_whitespace(cls, text: str) -> str:
        """Replace every whitespace run (newlines included) with one space."""
        if not text:
            return text
        return cls.ANY_WHITESPACE.sub(" ", text).strip()


def generate_title_from_content(
    content: str, max_words: int = 5, max_length: int = 50
) -> str:
    """
    Build a display title from the first words of a document.

    Args:
        content: Document text
        max_words: Number of leading words to keep
        max_length: Maximum title length, ellipsis included

    Returns:
        Title string, or the default title for empty content
    """
    clean_text = TextNormalizer.collapse_whitespace(content or "")
    words = clean_text.split(" ") if clean_text else []

    title = " ".join(words[:max_words])
    if len(words) > max_words:
        title += "..."

    if len(title) > max_length:
        title = title[: max_length - 3] + "..."

    if not title:
        logger.debug("Empty content, using default title")
        return DEFAULT_TITLE
    return title
