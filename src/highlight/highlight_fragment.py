"""Marked-up text produced by highlighting."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HighlightFragment:
    """HTML markup for a block of source text."""

    markup: str  # HTML; safe to embed inside a <pre> element
    highlighted: bool  # False if the markup is escaped plain text
    language: str

    @property
    def is_empty(self) -> bool:
        return self.markup == ""

    def __str__(self) -> str:
        return self.markup
