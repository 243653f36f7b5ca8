"""Tests for io module."""

import bz2
import gzip
import io
import json
from pathlib import Path

import pytest

from ticket_translation.cli.io import (
    load_document_json,
    open_compressed,
    read_document_text,
    save_document_json,
)
from ticket_translation.parser import Document, FieldRange, Rule

DOCUMENT_TEXT = (
    "class: 1-3 or 5-7\n\nyour ticket:\n7,1,14\n\nnearby tickets:\n7,3,47\n40,4,50"
)


def _document() -> Document:
    return Document(
        rules=(
            Rule(
                name="class",
                range_a=FieldRange(start=1, end=3),
                range_b=FieldRange(start=5, end=7),
            ),
        ),
        your_ticket=(7, 1, 14),
        nearby_tickets=((7, 3, 47), (40, 4, 50)),
    )


def test_open_compressed_with_uncompressed(tmp_path: Path) -> None:
    """Test opening uncompressed file."""
    path = tmp_path / "input.txt"
    path.write_text("Hello, World!", encoding="utf-8")

    with open_compressed(path, "rt", encoding="utf-8") as f:
        assert f.read() == "Hello, World!"


def test_open_compressed_with_bz2(tmp_path: Path) -> None:
    """Test opening bz2 compressed file."""
    path = tmp_path / "input.txt.bz2"
    with bz2.open(path, "wt", encoding="utf-8") as f:
        f.write("Compressed with bz2!")

    with open_compressed(path, "rt", encoding="utf-8") as f:
        assert f.read() == "Compressed with bz2!"


def test_open_compressed_with_gz(tmp_path: Path) -> None:
    """Test opening gzip compressed file."""
    path = tmp_path / "input.txt.gz"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write("Compressed with gzip!")

    with open_compressed(path, "rt", encoding="utf-8") as f:
        assert f.read() == "Compressed with gzip!"


class TestReadDocumentText:
    """Test read_document_text() function."""

    def test_strips_single_trailing_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "input.txt"
        path.write_text(DOCUMENT_TEXT + "\n", encoding="utf-8")

        assert read_document_text(path) == DOCUMENT_TEXT

    def test_keeps_text_without_trailing_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "input.txt"
        path.write_text(DOCUMENT_TEXT, encoding="utf-8")

        assert read_document_text(path) == DOCUMENT_TEXT

    def test_only_one_newline_is_stripped(self, tmp_path: Path) -> None:
        """Test a trailing blank line is left for the parser to reject."""
        path = tmp_path / "input.txt"
        path.write_text(DOCUMENT_TEXT + "\n\n", encoding="utf-8")

        assert read_document_text(path) == DOCUMENT_TEXT + "\n"

    def test_carriage_returns_are_preserved(self, tmp_path: Path) -> None:
        """Test line endings are not translated."""
        path = tmp_path / "input.txt"
        path.write_bytes(b"a\r\nb")

        assert read_document_text(path) == "a\r\nb"

    def test_reads_compressed(self, tmp_path: Path) -> None:
        path = tmp_path / "input.txt.gz"
        with gzip.open(path, "wt", encoding="utf-8") as f:
            f.write(DOCUMENT_TEXT + "\n")

        assert read_document_text(path) == DOCUMENT_TEXT

    def test_reads_stdin(self, monkeypatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(DOCUMENT_TEXT + "\n"))

        assert read_document_text(Path("-")) == DOCUMENT_TEXT


class TestSaveDocumentJson:
    """Test save_document_json() function."""

    def test_writes_named_after_input(self, tmp_path: Path) -> None:
        output_path = save_document_json(
            _document(), tmp_path, Path("inputs/day16.txt.gz")
        )

        assert output_path == tmp_path / "day16.json"
        data = json.loads(output_path.read_text())
        assert data["your_ticket"] == [7, 1, 14]
        assert data["rules"][0] == {
            "name": "class",
            "range_a": {"start": 1, "end": 3},
            "range_b": {"start": 5, "end": 7},
        }

    def test_stdin_input_name(self, tmp_path: Path) -> None:
        output_path = save_document_json(_document(), tmp_path, Path("-"))
        assert output_path == tmp_path / "stdin.json"

    def test_compact(self, tmp_path: Path) -> None:
        output_path = save_document_json(
            _document(), tmp_path, Path("day16.txt"), compact=True
        )
        assert output_path.read_text().count("\n") == 1

    def test_indented_by_default(self, tmp_path: Path) -> None:
        output_path = save_document_json(_document(), tmp_path, Path("day16.txt"))
        assert output_path.read_text().count("\n") > 1


class TestLoadDocumentJson:
    """Test load_document_json() function."""

    def test_loads_saved_document(self, tmp_path: Path) -> None:
        output_path = save_document_json(_document(), tmp_path, Path("day16.txt"))

        assert load_document_json(output_path) == _document()

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ValueError, match="Failed to load document"):
            load_document_json(path)

    def test_not_a_document(self, tmp_path: Path) -> None:
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"rules": []}))

        with pytest.raises(ValueError, match="Failed to load document"):
            load_document_json(path)
