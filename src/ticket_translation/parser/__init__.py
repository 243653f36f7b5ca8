from .models import Document, FieldRange, Rule, TicketValues
from .parser import DocumentSyntaxError, parse_document

__all__ = [
    "Document",
    "DocumentSyntaxError",
    "FieldRange",
    "Rule",
    "TicketValues",
    "parse_document",
]
