"""Configuration management for the sentence splitter and import pipeline."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SplitterConfig(BaseModel):
    """Configuration for sentence splitting heuristics."""

    model_config = ConfigDict(validate_assignment=True)

    min_sentence_length: int = Field(
        default=20, ge=1, description="Sentences shorter than this are merge candidates"
    )
    short_fragment_length: int = Field(
        default=15, ge=1, description="Unterminated fragments shorter than this are merged"
    )
    list_detection_ratio: float = Field(
        default=0.5,
        gt=0.0,
        lt=1.0,
        description="Share of numbered lines above which text is treated as a list",
    )
    filter_degenerate_sentences: bool = Field(
        default=False,
        description="Drop punctuation-only, numeric-only and very short sentences",
    )
    extra_abbreviations: list[str] = Field(default_factory=list)

    @field_validator("extra_abbreviations")
    @classmethod
    def require_trailing_period(cls, v):
        """Abbreviations are matched with their final period."""
        for abbr in v:
            if not abbr.endswith("."):
                raise ValueError(f"Abbreviation must end with a period: {abbr!r}")
        return v


class OutputConfig(BaseModel):
    """Configuration for output options."""

    model_config = ConfigDict(validate_assignment=True)

    output_dir: Path = Path("data/split_output")
    save_csv: bool = True  # One row per sentence
    save_jsonl: bool = True  # One article record per line


class Config(BaseModel):
    """Main configuration for the import pipeline."""

    model_config = ConfigDict(validate_assignment=True)

    input_file: Optional[Path] = None
    splitter: SplitterConfig = Field(default_factory=SplitterConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
