"""Sentence and paragraph splitting for mixed Chinese/English text."""

import logging
from dataclasses import dataclass, field
from functools import lru_cache

from .config import SplitterConfig
from .models import SegmentationResult
from .rules import (
    ABBREVIATIONS,
    NUMBERED_LINE_PATTERN,
    SENTENCE_ENDERS,
    is_abbreviation,
    is_boundary_lookahead,
    is_cjk_boundary,
    is_uppercase_latin,
    is_valid_sentence,
    should_merge,
)
from .utils.text_normalizer import TextNormalizer

logger = logging.getLogger(__name__)


@dataclass
class _ScanState:
    """Mutable state threaded through a single scan."""

    buffer: list[str] = field(default_factory=list)
    token_start: int = 0  # buffer position where the trailing token begins
    sentences: list[str] = field(default_factory=list)
    pending_breaks: set[int] = field(default_factory=set)

    def trailing_token(self) -> str:
        return "".join(self.buffer[self.token_start:])

    def take_buffer(self) -> str:
        text = "".join(self.buffer).strip()
        self.buffer = []
        self.token_start = 0
        return text


class SentenceSplitter:
    """Split raw text into sentences and paragraph breaks.

    The abbreviation table is built from the config when the splitter is
    created; later edits to that config do not reach an existing splitter.
    Scanning keeps no state on the instance, so one splitter can be shared
    between threads.
    """

    def __init__(self, config: SplitterConfig | None = None):
        """Initialize sentence splitter.

        Args:
            config: Splitting heuristics; defaults are used when omitted
        """
        self.config = config or SplitterConfig()
        self.abbreviations = ABBREVIATIONS | frozenset(
            abbr.lower() for abbr in self.config.extra_abbreviations
        )

    def split_into_sentences_with_breaks(self, text) -> SegmentationResult:
        """Split text into sentences, keeping paragraph structure.

        Args:
            text: Raw document text. ``None`` or non-string input yields an
                empty result.

        Returns:
            SegmentationResult with sentences and paragraph break indices
        """
        if not isinstance(text, str) or not text.strip():
            return SegmentationResult()

        text = TextNormalizer.normalize_line_endings(text)

        if self.is_numbered_list(text):
            logger.debug("Numbered list detected, splitting line by line")
            return self._split_numbered_list(text)

        return self._split_prose(text)

    def split_into_sentences(self, text) -> list[str]:
        """Split text into a flat list of sentences, ignoring paragraphs."""
        if not isinstance(text, str) or not text.strip():
            return []
        return self._split_line(text)

    def is_numbered_list(self, text: str) -> bool:
        """Return True when most non-empty lines start with ``<digits>.``."""
        lines = [line.strip() for line in text.split("\n") if line.strip()]
        if not lines:
            return False
        numbered = sum(1 for line in lines if NUMBERED_LINE_PATTERN.match(line))
        return numbered > len(lines) * self.config.list_detection_ratio

    def _keep(self, sentence: str) -> bool:
        if not sentence:
            return False
        if self.config.filter_degenerate_sentences:
            return is_valid_sentence(sentence)
        return True

    @staticmethod
    def _paragraph_follows(text: str, pos: int) -> bool:
        """A blank line, or a line break before a capital, starts at pos."""
        if text.startswith("\n\n", pos):
            return True
        if text.startswith("\n", pos) and pos + 1 < len(text):
            return is_uppercase_latin(text[pos + 1])
        return False

    def _scan(self, text: str) -> tuple[list[str], set[int]]:
        """Walk text once and cut it at confirmed sentence boundaries.

        Returns:
            Tuple of (raw sentences, indices of raw sentences followed by a
            paragraph break)
        """
        state = _ScanState()
        length = len(text)

        for i, char in enumerate(text):
            state.buffer.append(char)

            if char.isspace():
                state.token_start = len(state.buffer)
                continue
            if char not in SENTENCE_ENDERS:
                continue

            next_char = text[i + 1] if i + 1 < length else None

            # CJK punctuation into CJK text is always a boundary
            if not is_cjk_boundary(char, next_char):
                if is_abbreviation(state.trailing_token(), self.abbreviations):
                    continue
                if not is_boundary_lookahead(char, next_char):
                    continue

            sentence = state.take_buffer()
            paragraph_follows = self._paragraph_follows(text, i + 1)

            if self._keep(sentence):
                if paragraph_follows:
                    state.pending_breaks.add(len(state.sentences))
                state.sentences.append(sentence)
            elif paragraph_follows and state.sentences:
                # Dropped sentence: the paragraph still ends at the previous one
                state.pending_breaks.add(len(state.sentences) - 1)

        tail = state.take_buffer()
        if self._keep(tail):
            state.sentences.append(tail)

        return state.sentences, state.pending_breaks

    def _merge(self, raw: list[str]) -> tuple[list[str], dict[int, int]]:
        """Merge short fragments into their neighbours.

        Args:
            raw: Sentences as produced by the scan

        Returns:
            Tuple of (merged sentences, map from raw index to merged index)
        """
        merged = []
        index_map = {}
        min_length = self.config.min_sentence_length
        short_length = self.config.short_fragment_length

        i = 0
        while i < len(raw):
            sentence = raw[i]
            index_map[i] = len(merged)

            if len(sentence) < min_length and i + 1 < len(raw):
                following = raw[i + 1]
                if should_merge(sentence, following, short_length):
                    sentence = f"{sentence} {following}"
                    i += 1
                    index_map[i] = len(merged)

            merged.append(sentence)
            i += 1

        return merged, index_map

    @staticmethod
    def _remap_breaks(
        pending: set[int], index_map: dict[int, int], sentence_count: int
    ) -> tuple[int, ...]:
        """Translate raw break indices to final ones, dropping a trailing break."""
        breaks = {index_map[idx] for idx in pending if idx in index_map}
        return tuple(sorted(idx for idx in breaks if idx < sentence_count - 1))

    def _split_line(self, text: str) -> list[str]:
        text = TextNormalizer.collapse_whitespace(text)
        raw, _ = self._scan(text)
        sentences, _ = self._merge(raw)
        return sentences

    def _split_prose(self, text: str) -> SegmentationResult:
        text = TextNormalizer.normalize_paragraphs(text)
        raw, pending = self._scan(text)
        sentences, index_map = self._merge(raw)
        breaks = self._remap_breaks(pending, index_map, len(sentences))

        if len(raw) != len(sentences):
            logger.debug(f"Merged {len(raw)} raw sentences into {len(sentences)}")

        return SegmentationResult(sentences=tuple(sentences), paragraph_breaks=breaks)

    def _split_numbered_list(self, text: str) -> SegmentationResult:
        """Split each line on its own and keep the numbering on its first sentence."""
        lines = text.split("\n")
        sentences = []
        breaks = set()

        for line_num, line in enumerate(lines):
            stripped = line.strip()
            if not stripped:
                continue

            match = NUMBERED_LINE_PATTERN.match(stripped)
            remainder = stripped[match.end():] if match else stripped
            line_sentences = self._split_line(remainder)

            if match:
                # Original marker text, spacing included
                numbering = match.group(1)
                if line_sentences:
                    line_sentences[0] = numbering + line_sentences[0]
                elif self._keep(numbering.strip()):
                    line_sentences = [numbering.strip()]

            if not line_sentences:
                continue
            sentences.extend(line_sentences)

            if line_num + 1 < len(lines):
                next_line = lines[line_num + 1].strip()
                if not next_line or NUMBERED_LINE_PATTERN.match(next_line):
                    breaks.add(len(sentences) - 1)

        final_breaks = tuple(sorted(idx for idx in breaks if idx < len(sentences) - 1))
        return SegmentationResult(sentences=tuple(sentences), paragraph_breaks=final_breaks)


@lru_cache(maxsize=1)
def get_default_splitter() -> SentenceSplitter:
    """Return a shared splitter with default configuration."""
    return SentenceSplitter()


def split_into_sentences_with_breaks(text) -> SegmentationResult:
    """Split text with the default splitter. See SentenceSplitter."""
    return get_default_splitter().split_into_sentences_with_breaks(text)


def split_into_sentences(text) -> list[str]:
    return get_default_splitter().split_into_sentences(text)
