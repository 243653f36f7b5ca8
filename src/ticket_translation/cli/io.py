"""Input/Output operations for ticket documents."""

import bz2
import gzip
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from ticket_translation.cli.config import STDIN_PATH
from ticket_translation.parser import Document

logger = logging.getLogger(__name__)


def open_compressed(path: Path, mode: str = "rt", **kwargs):
    """Open ``path``, decompressing ``.gz`` and ``.bz2`` inputs by suffix.

    Keyword arguments such as ``encoding`` and ``newline`` are passed through
    to the opener, so text-mode reads behave like the built-in open().
    """
    if path.suffix == ".bz2":
        return bz2.open(path, mode, **kwargs)
    elif path.suffix == ".gz":
        return gzip.open(path, mode, **kwargs)
    else:
        return open(path, mode, **kwargs)


def read_document_text(path: Path) -> str:
    """Read the raw text of a ticket document.

    ``-`` reads standard input. A single trailing newline, as left by most
    editors, is removed; the text is otherwise returned unchanged.

    Args:
        path: Path to the document (compressed or uncompressed), or ``-``

    Returns:
        The document text
    """
    if path == STDIN_PATH:
        logger.debug("Reading document from stdin")
        text = sys.stdin.read()
    else:
        logger.debug("Reading document from %s", path)
        with open_compressed(path, "rt", encoding="utf-8", newline="") as f:
            text = f.read()

    return text.removesuffix("\n")


def save_document_json(
    document: Document,
    output_dir: Path,
    input_path: Path,
    *,
    compact: bool = False,
) -> Path:
    """Save a parsed document as JSON.

    Args:
        document: The parsed document
        output_dir: Directory where JSON should be saved
        input_path: Original document path (used for naming the JSON file)
        compact: If True, write the JSON on a single line

    Returns:
        Path to the written JSON file
    """
    stem = "stdin" if input_path == STDIN_PATH else input_path.name.split(".")[0]
    output_path = output_dir / f"{stem}.json"
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(document.model_dump_json(indent=None if compact else 2))
        f.write("\n")
    logger.info("Saved document JSON to %s", output_path)
    return output_path


def load_document_json(path: Path) -> Document:
    """Load a document previously saved with save_document_json().

    Args:
        path: Path to JSON file (compressed or uncompressed)

    Returns:
        The validated Document

    Raises:
        ValueError: If the file is not valid JSON or not a valid document
    """
    with open_compressed(path, "rt", encoding="utf-8") as f:
        data = f.read()
    try:
        return Document.model_validate_json(data)
    except ValidationError as e:
        raise ValueError(f"Failed to load document from {path}: {e}") from e
