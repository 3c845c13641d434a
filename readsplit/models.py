"""Data models for the sentence splitter."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SegmentationResult:
    """Sentences of a document plus the paragraph breaks between them.

    ``paragraph_breaks`` holds sentence indices after which a paragraph
    boundary occurs. Indices always refer to ``sentences`` as returned.
    """

    sentences: tuple[str, ...] = ()
    paragraph_breaks: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.sentences)

    def has_break_after(self, index: int) -> bool:
        return index in self.paragraph_breaks

    def paragraphs(self) -> list[list[str]]:
        """Group sentences into paragraphs using the break set."""
        paragraphs = []
        current = []
        breaks = set(self.paragraph_breaks)
        for idx, sentence in enumerate(self.sentences):
            current.append(sentence)
            if idx in breaks:
                paragraphs.append(current)
                current = []
        if current:
            paragraphs.append(current)
        return paragraphs

    def to_dict(self) -> dict:
        return {
            "sentences": list(self.sentences),
            "paragraph_breaks": list(self.paragraph_breaks),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SegmentationResult":
        """Rebuild a result from a stored record.

        Accepts the legacy ``paragraphBreaks`` key used by older records.
        """
        breaks = data.get("paragraph_breaks")
        if breaks is None:
            breaks = data.get("paragraphBreaks", [])
        return cls(
            sentences=tuple(data.get("sentences", [])),
            paragraph_breaks=tuple(sorted(set(breaks))),
        )


@dataclass(frozen=True)
class TextStats:
    """Word, sentence and character counts for a document."""

    word_count: int = 0
    sentence_count: int = 0
    char_count: int = 0
    avg_words_per_sentence: int = 0

    def to_dict(self) -> dict:
        return {
            "word_count": self.word_count,
            "sentence_count": self.sentence_count,
            "char_count": self.char_count,
            "avg_words_per_sentence": self.avg_words_per_sentence,
        }


@dataclass
class Article:
    """An imported document ready to be stored."""

    title: str
    content: str
    result: SegmentationResult
    stats: TextStats
    timestamp: int  # milliseconds since epoch
    source: Optional[str] = None  # file path or record id

    @property
    def sentences(self) -> tuple[str, ...]:
        return self.result.sentences

    @property
    def paragraph_breaks(self) -> tuple[int, ...]:
        return self.result.paragraph_breaks

    def to_record(self) -> dict:
        """Flatten into the record shape the persistence layer stores."""
        return {
            "title": self.title,
            "content": self.content,
            **self.result.to_dict(),
            "stats": self.stats.to_dict(),
            "timestamp": self.timestamp,
            "source": self.source,
        }
