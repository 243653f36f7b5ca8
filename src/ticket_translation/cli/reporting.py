"""Reporting and output formatting for parsed ticket documents."""

import logging

from ticket_translation.parser import Document, DocumentSyntaxError

logger = logging.getLogger(__name__)

# ANSI color codes
GREY = "\033[90m"
RESET = "\033[0m"


def format_syntax_error(error: DocumentSyntaxError, text: str, source: str) -> str:
    """Format a syntax error for display.

    Args:
        error: The syntax error raised by parse_document()
        text: The text that failed to parse
        source: Name of the input, e.g. its file path

    Returns:
        A multi-line diagnostic naming the location, the expected constructs
        and the offending line.
    """
    expected = ", ".join(error.expected) if error.expected else "nothing"
    lines = [
        f"{source}:{error.line}:{error.column}: syntax error",
        f"  expected: {expected}",
    ]
    lines.extend(f"  | {line}" for line in error.context(text).splitlines())
    return "\n".join(lines)


def print_summary(document: Document, *, source: str) -> None:
    """Print a human-readable summary of a parsed document to stdout.

    Args:
        document: The parsed document
        source: Name of the input, e.g. its file path
    """
    field_counts = sorted(
        {len(document.your_ticket)} | {len(t) for t in document.nearby_tickets}
    )

    print(f"=== {source} ===")
    print(f"Rules: {len(document.rules)}")
    for rule in document.rules:
        print(f"  {rule}")
    print(f"Your ticket: {','.join(str(v) for v in document.your_ticket)}")
    print(f"Nearby tickets: {len(document.nearby_tickets)}")

    if len(field_counts) == 1:
        print(f"Fields per ticket: {field_counts[0]}")
    else:
        # Not an error, the grammar does not require equal lengths
        logger.debug("%s has tickets of differing lengths: %s", source, field_counts)
        print(
            f"Fields per ticket: {', '.join(str(c) for c in field_counts)} "
            f"{GREY}(varies){RESET}"
        )
