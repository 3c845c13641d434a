"""Command-line interface for the sentence splitter."""

import argparse
import logging
import sys
from pathlib import Path

from .config import Config
from .pipeline import ImportPipeline
from .stats import format_stats

COMMANDS = ("split", "stats")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Split Chinese/English text into sentences and paragraphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using a config file
  readsplit --config config.yaml

  # Direct arguments
  readsplit split --input data/docs.jsonl --output data/split_output

  # Show stats for a text file
  readsplit stats article.txt
        """,
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Split command (default)
    split_parser = subparsers.add_parser("split", help="Split a JSONL file of documents")
    setup_split_parser(split_parser)

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Print stats for a text file")
    setup_stats_parser(stats_parser)

    # If no command specified, treat as split command
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in COMMANDS + ("-h", "--help"):
        argv = ["split", *argv]

    return parser.parse_args(argv)


def setup_split_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for split command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )

    # Input/Output
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input JSONL file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for split files",
    )

    # Splitter options
    parser.add_argument(
        "--filter-degenerate",
        action="store_true",
        help="Drop punctuation-only, numeric-only and very short sentences",
    )
    parser.add_argument(
        "--min-sentence-length",
        type=int,
        help="Sentences shorter than this are merge candidates (default: 20)",
    )

    # Output options
    parser.add_argument(
        "--no-csv",
        action="store_true",
        help="Skip writing sentences.csv",
    )
    parser.add_argument(
        "--no-jsonl",
        action="store_true",
        help="Skip writing articles.jsonl",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_stats_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for stats command."""
    parser.add_argument("file", type=Path, help="UTF-8 text file")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    # Start with config file if provided
    if getattr(args, "config", None):
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # Override with command-line arguments
    if getattr(args, "input", None):
        config.input_file = args.input
    if getattr(args, "output", None):
        config.output.output_dir = args.output

    if getattr(args, "filter_degenerate", False):
        config.splitter.filter_degenerate_sentences = True
    if getattr(args, "min_sentence_length", None) is not None:
        config.splitter.min_sentence_length = args.min_sentence_length

    if getattr(args, "no_csv", False):
        config.output.save_csv = False
    if getattr(args, "no_jsonl", False):
        config.output.save_jsonl = False

    return config


def handle_stats(args: argparse.Namespace) -> int:
    """Handle stats command."""
    try:
        pipeline = ImportPipeline(build_config(args))
        article = pipeline.import_file(args.file)
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(article.title)
    print(format_stats(article.stats))
    return 0


def handle_split(args: argparse.Namespace) -> int:
    """Handle split command."""
    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    try:
        pipeline = ImportPipeline(config)
        doc_count = pipeline.run()
        print(f"\nImported {doc_count} documents")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Splitting failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(getattr(args, "verbose", False))

    if args.command == "stats":
        return handle_stats(args)
    return handle_split(args)


if __name__ == "__main__":
    sys.exit(main())
