"""JSON Schema generation for parsed ticket documents."""

from .generate_schema import generate_document_schema, write_schema

__all__ = [
    "generate_document_schema",
    "write_schema",
]
