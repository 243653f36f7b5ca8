"""JSON Schema for the JSON written by ``ticket-translation --output-dir``.

Run as ``ticket-translation-schema OUTPUT``; a .yaml or .yml suffix selects YAML.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from ticket_translation.parser.models import Document


def generate_document_schema() -> dict[str, Any]:
    """Generate JSON Schema for parsed ticket documents.

    Returns:
        A JSON Schema dict with all model definitions for parsed documents.
    """
    schema = Document.model_json_schema(mode="serialization")

    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    schema["title"] = "Ticket Document Schema"
    schema["description"] = (
        "JSON Schema for parsed ticket translation documents, generated from "
        "Pydantic models. A document holds named field rules of two ranges "
        "each, your ticket, and the nearby tickets."
    )

    return schema


def write_schema(schema: dict[str, Any], output_path: Path) -> None:
    """Write ``schema`` to ``output_path``, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        if output_path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(schema, f, sort_keys=False, width=88)
        else:
            json.dump(schema, f, indent=2)
            f.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Write the document schema to the path given on the command line."""
    parser = argparse.ArgumentParser(
        description="Write the JSON Schema of parsed ticket documents."
    )
    parser.add_argument(
        "output",
        type=Path,
        help="Where to write the schema; .yaml or .yml selects YAML, else JSON.",
    )
    args = parser.parse_args(argv)

    schema = generate_document_schema()
    write_schema(schema, args.output)

    definitions = sorted(schema.get("$defs", {}))
    print(f"Wrote {schema['title']} to {args.output}")
    print(f"  definitions: {', '.join(definitions) or 'none'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
