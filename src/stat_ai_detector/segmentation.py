from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from .textutils import word_tokens

MISSING_SPACE_RE = re.compile(r"([.!?])(\S)")
SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+|\n+")
PARAGRAPH_BOUNDARY_RE = re.compile(r"\n{2,}")


@dataclass(slots=True)
class Segments:
    """Sentences, paragraphs and tokens of a single text."""

    text: str
    sentences: list[str]
    paragraphs: list[str]
    tokens: list[str]


def split_sentences(text: str) -> List[str]:
    """Split text on sentence terminators followed by whitespace, or on newlines."""
    repaired = MISSING_SPACE_RE.sub(r"\1 \2", text)
    pieces = (piece.strip() for piece in SENTENCE_BOUNDARY_RE.split(repaired))
    return [piece for piece in pieces if piece]


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank-line paragraph breaks."""
    pieces = (piece.strip() for piece in PARAGRAPH_BOUNDARY_RE.split(text))
    return [piece for piece in pieces if piece]


def segment_text(text: str) -> Segments:
    """Segment an already-normalized text."""
    return Segments(
        text=text,
        sentences=split_sentences(text),
        paragraphs=split_paragraphs(text),
        tokens=word_tokens(text),
    )
