"""CLI configuration and argument parsing."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

STDIN_PATH = Path("-")


@dataclass
class ParseConfig:
    """Configuration for parsing ticket documents."""

    input_paths: list[Path]
    output_dir: Path | None = None
    output_format: str = "summary"
    compact: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ParseConfig:
        """Create config from parsed arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            ParseConfig instance
        """
        return cls(
            input_paths=[Path(p) for p in args.input_paths],
            output_dir=args.output_dir,
            output_format=args.format,
            compact=args.compact,
        )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and return command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description=(
            "Parse ticket translation documents (field rules, your ticket and "
            "nearby tickets) and print their structure."
        ),
        allow_abbrev=False,
    )

    parser.add_argument(
        "input_paths",
        nargs="+",
        help=(
            "Path(s) to one or more documents to parse. Use '-' to read from "
            "standard input. Files ending in .gz or .bz2 are decompressed, and "
            ".json files saved with --output-dir are loaded instead of parsed."
        ),
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help=(
            "Directory to save one <name>.json file per parsed document. "
            "If omitted, nothing is written to disk."
        ),
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--format",
        choices=["summary", "json", "text"],
        default="summary",
        help=(
            "How to print each parsed document to stdout: a summary, its JSON "
            "form, or the document layout itself (default: summary)."
        ),
    )
    output_group.add_argument(
        "--compact",
        action="store_true",
        help="Emit JSON on a single line instead of indented.",
    )
    output_group.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO).",
    )

    return parser.parse_args(argv)
