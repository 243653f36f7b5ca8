"""CLI support for the ticket document parser."""

from .config import ParseConfig, parse_arguments
from .io import (
    load_document_json,
    open_compressed,
    read_document_text,
    save_document_json,
)
from .reporting import format_syntax_error, print_summary

__all__ = [
    "ParseConfig",
    "parse_arguments",
    "load_document_json",
    "open_compressed",
    "read_document_text",
    "save_document_json",
    "format_syntax_error",
    "print_summary",
]
