"""Parser for ticket translation documents.

The grammar lives in ``ticket_document.lark`` and is compiled once into an
LALR(1) parser. The grammar ignores no terminals, so every space and newline in
the input must match the expected layout exactly.
"""

from __future__ import annotations

import logging

from lark import Lark, Transformer, v_args
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
)

from ticket_translation.parser.models import Document, FieldRange, Rule

logger = logging.getLogger(__name__)

END_OF_INPUT = "$END"

# Human readable names for grammar terminals, used in error messages
TERMINAL_DESCRIPTIONS: dict[str, str] = {
    "RULE_NAME": "rule name",
    "INT": "digits",
    "_RULE_SEPARATOR": '": "',
    "_OR": '" or "',
    "_DASH": '"-"',
    "_COMMA": '","',
    "_NEWLINE": "newline",
    "_YOUR_TICKET": '"your ticket:"',
    "_NEARBY_TICKETS": '"nearby tickets:"',
    END_OF_INPUT: "end of input",
}


class DocumentSyntaxError(ValueError):
    """Raised when a document does not match the ticket document grammar.

    Attributes:
        position: 0-based character offset where matching stopped.
        line: 1-based line number of ``position``.
        column: 1-based column number of ``position``.
        expected: Descriptions of the constructs acceptable at ``position``.
    """

    def __init__(
        self, position: int, line: int, column: int, expected: tuple[str, ...]
    ):
        self.position = position
        self.line = line
        self.column = column
        self.expected = expected
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f"line {self.line}, column {self.column}"
        if not self.expected:
            return f"Syntax error at {where}"
        if len(self.expected) == 1:
            return f"Syntax error at {where}: expected {self.expected[0]}"
        return f"Syntax error at {where}: expected one of {', '.join(self.expected)}"

    def context(self, text: str) -> str:
        """Return the offending line of ``text`` with a caret under the error."""
        start = text.rfind("\n", 0, self.position) + 1
        end = text.find("\n", self.position)
        if end == -1:
            end = len(text)
        return f"{text[start:end]}\n{' ' * (self.position - start)}^"


def _token_to_int(token) -> int:
    # Digit runs longer than sys.get_int_max_str_digits() cannot be converted
    try:
        return int(token)
    except ValueError as e:
        raise DocumentSyntaxError(
            position=token.start_pos,
            line=token.line,
            column=token.column,
            expected=("digits",),
        ) from e


@v_args(inline=True)
class _DocumentTransformer(Transformer):
    """Builds the pydantic models bottom-up while the parser reduces rules."""

    def field_range(self, start, end) -> FieldRange:
        return FieldRange(start=_token_to_int(start), end=_token_to_int(end))

    def ticket_rule(self, name, range_a: FieldRange, range_b: FieldRange) -> Rule:
        return Rule(name=str(name), range_a=range_a, range_b=range_b)

    def ticket_rules(self, *rules: Rule) -> tuple[Rule, ...]:
        return rules

    def ticket_values(self, *values) -> tuple[int, ...]:
        return tuple(_token_to_int(v) for v in values)

    def your_ticket(self, values: tuple[int, ...]) -> tuple[int, ...]:
        return values

    def nearby_tickets(self, *tickets: tuple[int, ...]) -> tuple[tuple[int, ...], ...]:
        return tickets

    def document(self, rules, your_ticket, nearby_tickets) -> Document:
        return Document(
            rules=rules, your_ticket=your_ticket, nearby_tickets=nearby_tickets
        )


_parser = Lark.open(
    "ticket_document.lark",
    rel_to=__file__,
    start="document",
    parser="lalr",
    lexer="contextual",
    transformer=_DocumentTransformer(),
)


def _line_and_column(text: str, position: int) -> tuple[int, int]:
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column


def _describe_terminals(names) -> tuple[str, ...]:
    descriptions = set()
    for name in names or ():
        # UnexpectedEOF may carry terminal definitions rather than names
        name = getattr(name, "name", name)
        descriptions.add(TERMINAL_DESCRIPTIONS.get(name, name))
    return tuple(sorted(descriptions))


def _to_syntax_error(error: UnexpectedInput, text: str) -> DocumentSyntaxError:
    """Convert a lark error into a DocumentSyntaxError for ``text``."""
    if isinstance(error, UnexpectedCharacters):
        position = error.pos_in_stream
        expected = error.allowed
    elif isinstance(error, UnexpectedToken):
        if error.token.type == END_OF_INPUT:
            position = len(text)
        else:
            position = error.pos_in_stream
        expected = error.accepts or error.expected
    elif isinstance(error, UnexpectedEOF):
        position = len(text)
        expected = error.expected
    else:
        position = error.pos_in_stream
        expected = ()

    if position is None:
        position = len(text)

    line, column = _line_and_column(text, position)
    return DocumentSyntaxError(
        position=position,
        line=line,
        column=column,
        expected=_describe_terminals(expected),
    )


def parse_document(text: str) -> Document:
    """Parse a ticket translation document.

    The whole text must match the document layout: rule lines, a blank line,
    the "your ticket:" section, a blank line, then the "nearby tickets:"
    section running to the end of the text.

    Args:
        text: The complete document text.

    Returns:
        The parsed Document.

    Raises:
        DocumentSyntaxError: If the text does not match the grammar. No partial
            document is produced.
            A number with more digits than Python can convert to an int is
            reported the same way, at the start of the number.
    """
    logger.debug("Parsing ticket document (%d characters)", len(text))
    try:
        document = _parser.parse(text)
    except UnexpectedInput as e:
        raise _to_syntax_error(e, text) from e

    logger.debug(
        "Parsed %d rule(s), %d field(s) on your ticket, %d nearby ticket(s)",
        len(document.rules),
        len(document.your_ticket),
        len(document.nearby_tickets),
    )
    return document
