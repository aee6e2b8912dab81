from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Tuple

AI_SCORE_THRESHOLD = 0.6


class Label(str, Enum):
    """Binary verdict attached to a statistical assessment."""

    HUMAN = "Human"
    AI = "AI"


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


# Python field name -> serialized name used in JSON payloads.
FEATURE_WIRE_NAMES: Dict[str, str] = {
    "length": "length",
    "sentences": "sentences",
    "avg_sentence_len": "avgSentenceLen",
    "sentence_len_std": "sentenceLenStd",
    "paragraphs": "paragraphs",
    "paragraph_len_std": "paragraphLenStd",
    "type_token_ratio": "typeTokenRatio",
    "function_word_ratio": "functionWordRatio",
    "punctuation_rate": "punctuationRate",
    "uppercase_rate": "uppercaseRate",
    "digit_rate": "digitRate",
    "char_entropy": "charEntropy",
    "sentence_entropy_std": "sentenceEntropyStd",
    "gzip_ratio": "gzipRatio",
    "repetition1": "repetition1",
    "repetition2": "repetition2",
    "repetition3": "repetition3",
}


@dataclass(frozen=True, slots=True)
class StatFeatures:
    """Statistical profile of one normalized text."""

    length: int
    sentences: int
    avg_sentence_len: float
    sentence_len_std: float
    paragraphs: int
    paragraph_len_std: float
    type_token_ratio: float
    function_word_ratio: float
    punctuation_rate: float
    uppercase_rate: float
    digit_rate: float
    char_entropy: float
    sentence_entropy_std: float
    gzip_ratio: float
    repetition1: float
    repetition2: float
    repetition3: float

    def to_payload(self) -> dict[str, float]:
        """Return the record keyed by its wire names."""
        return {
            FEATURE_WIRE_NAMES[f.name]: getattr(self, f.name) for f in fields(self)
        }


@dataclass(frozen=True, slots=True)
class StatAssessment:
    """Score, label and reasons derived from a StatFeatures record."""

    score: float
    reasons: Tuple[str, ...]

    @property
    def label(self) -> Label:
        return Label.AI if self.score > AI_SCORE_THRESHOLD else Label.HUMAN

    def to_payload(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label.value,
            "reasons": list(self.reasons),
        }
