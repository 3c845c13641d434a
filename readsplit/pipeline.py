"""Article import and batch splitting pipeline."""

import json
import logging
import re
import time
from pathlib import Path
from typing import Optional

import pandas as pd
from tqdm import tqdm

from .config import Config
from .models import Article
from .splitter import SentenceSplitter
from .stats import get_text_stats
from .utils.text_normalizer import generate_title_from_content

logger = logging.getLogger(__name__)

# Control characters except tab, newline and carriage return
ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


class EmptyDocumentError(ValueError):
    """Raised when a document has no text to split."""


def sanitize_text(text: str) -> str:
    """Remove control characters that may interfere with CSV/Excel.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return text
    return ILLEGAL_CHARS.sub("", text)


def title_from_filename(path: Path) -> str:
    name = path.name
    if name.lower().endswith(".txt"):
        name = name[:-4]
    return name


class ImportPipeline:
    """Turn raw documents into stored articles."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize import pipeline.

        Args:
            config: Pipeline configuration
        """
        self.config = config or Config()
        self.splitter = SentenceSplitter(self.config.splitter)

    def import_text(
        self,
        content: str,
        title: Optional[str] = None,
        source: Optional[str] = None,
    ) -> Article:
        """Split pasted or loaded text into an article.

        Args:
            content: Raw document text
            title: Custom title; generated from the content when blank
            source: Where the text came from (file path, record id)

        Returns:
            Article with sentences, paragraph breaks and stats

        Raises:
            EmptyDocumentError: If the content is blank or yields no sentences
        """
        if not isinstance(content, str):
            raise EmptyDocumentError(
                f"Document content must be text, got {type(content).__name__}"
            )
        if not content.strip():
            raise EmptyDocumentError("Document content is empty")

        content = content.strip()
        result = self.splitter.split_into_sentences_with_breaks(content)
        if not result.sentences:
            raise EmptyDocumentError("Document produced no sentences")

        stats = get_text_stats(content, result.sentences)
        if isinstance(title, str) and title.strip():
            title = title.strip()
        else:
            title = generate_title_from_content(content)

        return Article(
            title=title,
            content=content,
            result=result,
            stats=stats,
            timestamp=int(time.time() * 1000),
            source=source,
        )

    def import_file(self, path: str | Path) -> Article:
        """Import a UTF-8 text file, titled after its file name."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        return self.import_text(content, title=title_from_filename(path), source=str(path))

    def _setup_output_dir(self) -> Path:
        output_dir = self.config.output.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir

    @staticmethod
    def _sentence_rows(doc_id: str, article: Article) -> list[dict]:
        breaks = set(article.paragraph_breaks)
        return [
            {
                "Document_ID": doc_id,
                "Title": article.title,
                "Sentence_Index": idx,
                "Sentence": sentence,
                "Paragraph_Break_After": idx in breaks,
                "Length": len(sentence),
            }
            for idx, sentence in enumerate(article.sentences)
        ]

    def _read_articles(self, input_path: Path) -> list[tuple[str, Article]]:
        """Read a JSONL file and import every usable record."""
        with open(input_path, "r", encoding="utf-8") as infile:
            total_lines = sum(1 for _ in infile)
        articles = []

        with open(input_path, "r", encoding="utf-8") as infile:
            for line_num, line in tqdm(
                enumerate(infile, 1), total=total_lines, desc="Splitting documents"
            ):
                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    logger.warning(f"Skipping line {line_num}: invalid JSON")
                    continue
                if not isinstance(record, dict):
                    logger.warning(f"Skipping line {line_num}: not a JSON object")
                    continue

                text_content = record.get("text") or record.get("content") or ""
                doc_id = str(record.get("id", line_num))
                try:
                    article = self.import_text(
                        text_content, title=record.get("title"), source=doc_id
                    )
                except EmptyDocumentError as e:
                    logger.warning(f"Skipping line {line_num}: {e}")
                    continue
                articles.append((doc_id, article))

        return articles

    def _save_csv(self, output_dir: Path, articles: list[tuple[str, Article]]) -> None:
        rows = []
        for doc_id, article in articles:
            rows.extend(self._sentence_rows(doc_id, article))
        df = pd.DataFrame(
            rows,
            columns=[
                "Document_ID",
                "Title",
                "Sentence_Index",
                "Sentence",
                "Paragraph_Break_After",
                "Length",
            ],
        )
        for col in df.select_dtypes(include=["object", "string"]).columns:
            df[col] = df[col].apply(lambda x: sanitize_text(x) if isinstance(x, str) else x)
        save_path = output_dir / "sentences.csv"
        df.to_csv(save_path, index=False)
        logger.info(f"Saved {len(df)} sentences to {save_path}")

    def _save_jsonl(self, output_dir: Path, articles: list[tuple[str, Article]]) -> None:
        save_path = output_dir / "articles.jsonl"
        with open(save_path, "w", encoding="utf-8") as outfile:
            for _, article in articles:
                outfile.write(json.dumps(article.to_record(), ensure_ascii=False) + "\n")
        logger.info(f"Saved {len(articles)} articles to {save_path}")

    def process_file(self, input_path: Path) -> int:
        """Process a JSONL file and write the split output.

        Args:
            input_path: Path to input JSONL file

        Returns:
            Number of documents imported
        """
        output_dir = self._setup_output_dir()
        logger.info(f"Reading from: {input_path}")

        articles = self._read_articles(input_path)

        if self.config.output.save_csv:
            self._save_csv(output_dir, articles)
        if self.config.output.save_jsonl:
            self._save_jsonl(output_dir, articles)

        return len(articles)

    def run(self) -> int:
        """Run the import pipeline.

        Returns:
            Number of documents imported
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)
