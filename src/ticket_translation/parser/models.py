"""Pydantic models for parsed ticket translation documents.

A document lists named field rules, the owner's ticket and a batch of nearby
tickets. All models are frozen: a parsed document is never modified after
construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

TicketValues = tuple[NonNegativeInt, ...]


class FieldRange(BaseModel):
    """An inclusive range of field values, as written in the document.

    The bounds are kept exactly as parsed. No ordering is implied, so
    ``start`` may be greater than ``end``.
    """

    model_config = ConfigDict(frozen=True)

    start: NonNegativeInt
    end: NonNegativeInt

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class Rule(BaseModel):
    """A named field rule made of two ranges joined by "or"."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Rule name, lowercase letters and spaces.")
    range_a: FieldRange = Field(..., description="First range of the rule.")
    range_b: FieldRange = Field(..., description="Second range of the rule.")

    def __str__(self) -> str:
        return f"{self.name}: {self.range_a} or {self.range_b}"


def _format_ticket(values: TicketValues) -> str:
    return ",".join(str(v) for v in values)


class Document(BaseModel):
    """A fully parsed ticket translation document."""

    model_config = ConfigDict(frozen=True)

    rules: tuple[Rule, ...] = Field(
        ..., min_length=1, description="Field rules in document order."
    )
    your_ticket: TicketValues = Field(
        ..., min_length=1, description="Field values of the owner's ticket."
    )
    nearby_tickets: tuple[TicketValues, ...] = Field(
        ..., min_length=1, description="Field values of each nearby ticket."
    )

    @property
    def rule_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)

    def to_text(self) -> str:
        """Render the document back into its text layout.

        The result has no trailing newline, so it parses back to an equal
        document.
        """
        rules = "\n".join(str(rule) for rule in self.rules)
        nearby = "\n".join(_format_ticket(t) for t in self.nearby_tickets)
        return (
            f"{rules}\n\n"
            f"your ticket:\n{_format_ticket(self.your_ticket)}\n\n"
            f"nearby tickets:\n{nearby}"
        )

    def __str__(self) -> str:
        return self.to_text()
