"""Main CLI entry point for the ticket document parser."""

import logging
import sys
from pathlib import Path

from ticket_translation.cli import (
    ParseConfig,
    format_syntax_error,
    load_document_json,
    parse_arguments,
    print_summary,
    read_document_text,
    save_document_json,
)
from ticket_translation.cli.config import STDIN_PATH
from ticket_translation.parser import Document, DocumentSyntaxError, parse_document

logger = logging.getLogger(__name__)


def _setup_logging(log_level: str) -> None:
    """Configure logging based on level.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _validate_input_path(input_path: Path) -> bool:
    """Validate that the input file exists.

    Args:
        input_path: Path to the document, or "-" for stdin

    Returns:
        True if the input can be read, False otherwise
    """
    if input_path == STDIN_PATH:
        return True
    if not input_path.exists():
        logger.error("File not found: %s", input_path)
        return False
    return True


def _print_document(config: ParseConfig, document: Document, source: str) -> None:
    if config.output_format == "json":
        print(document.model_dump_json(indent=None if config.compact else 2))
    elif config.output_format == "text":
        print(document.to_text())
    else:
        print_summary(document, source=source)


def _process_document(config: ParseConfig, input_path: Path) -> int:
    """Parse a single document with the given configuration.

    Args:
        config: Parse configuration
        input_path: Path to the document to parse

    Returns:
        Exit code (0 for success, 1 for a syntax error, 2 if the input cannot
        be read)
    """
    source = "<stdin>" if input_path == STDIN_PATH else str(input_path)
    logger.info("Parsing: %s", source)

    try:
        text = read_document_text(input_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read %s: %s", source, e)
        return 2

    try:
        document = parse_document(text)
    except DocumentSyntaxError as e:
        logger.error("Failed to parse %s: %s", source, e)
        print(format_syntax_error(e, text, source), file=sys.stderr)
        return 1

    _print_document(config, document, source)

    if config.output_dir is not None:
        save_document_json(
            document, config.output_dir, input_path, compact=config.compact
        )

    return 0


def _process_json(config: ParseConfig, json_path: Path) -> int:
    """Load a previously saved document JSON file and print it.

    Args:
        config: Parse configuration
        json_path: Path to the JSON file

    Returns:
        Exit code (0 for success, 2 if the file is not a valid document)
    """
    logger.info("Loading JSON: %s", json_path)
    try:
        document = load_document_json(json_path)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 2

    _print_document(config, document, str(json_path))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ticket document parser CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = parse_arguments(argv)
    _setup_logging(args.log_level)

    config = ParseConfig.from_args(args)

    # Validate inputs
    for input_path in config.input_paths:
        if not _validate_input_path(input_path):
            return 2

    if config.output_dir is not None:
        config.output_dir.mkdir(parents=True, exist_ok=True)

    for input_path in config.input_paths:
        if ".json" in input_path.suffixes:
            exit_code = _process_json(config, input_path)
        else:
            exit_code = _process_document(config, input_path)
        if exit_code != 0:
            return exit_code

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
