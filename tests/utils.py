from __future__ import annotations

from dataclasses import replace
from typing import Any

from stat_ai_detector.models import StatFeatures

HUMAN_TEXT = (
    "I missed my train again and ended up walking home in the drizzle. "
    "The city smelled like wet dust and something vaguely metallic, the way it "
    "always does after rain. A guy outside the deli was playing a saxophone badly, "
    "still, I tipped him because there's something admirable about trying to create "
    "beauty in a place like this, even if the notes don't quite land. Mom called "
    "about the basil plant. It's thriving; I'm not. She laughed when I told her that, "
    "but I think she understood what I meant. Not that I'm dying or anything dramatic "
    "like that. Just tired. The kind of tired that doesn't go away with sleep. "
    "Tomorrow I'll try the early bus, assuming I can drag myself out of bed before seven."
)

_ADJECTIVES = ["fast", "safe", "smart", "stable", "modern", "secure", "simple", "scalable"]
FORMULAIC_TEXT = " ".join(
    f"The system is {adjective}." for adjective in _ADJECTIVES * 5
)

# Sub-scores all sit below their reason triggers for this record.
_NEUTRAL = StatFeatures(
    length=800,
    sentences=12,
    avg_sentence_len=10.0,
    sentence_len_std=6.0,
    paragraphs=1,
    paragraph_len_std=0.0,
    type_token_ratio=0.6,
    function_word_ratio=0.4,
    punctuation_rate=0.03,
    uppercase_rate=0.02,
    digit_rate=0.0,
    char_entropy=4.1,
    sentence_entropy_std=0.8,
    gzip_ratio=0.3,
    repetition1=0.05,
    repetition2=0.02,
    repetition3=0.01,
)


def make_features(**overrides: Any) -> StatFeatures:
    """Return a human-leaning feature record with selected fields replaced."""
    return replace(_NEUTRAL, **overrides)
