from __future__ import annotations

import re
import statistics
import unicodedata
from typing import Iterable, Sequence, Tuple

from ..stopwords import is_stopword
from ..textutils import word_tokens

UPPERCASE_RE = re.compile(r"[A-ZÁÉÍÓÚÀÈÌÒÙÄËÏÖÜÑÇ]")
DIGIT_RE = re.compile(r"[0-9]")


def type_token_ratio(tokens: Sequence[str]) -> float:
    """Distinct tokens over total tokens."""
    if not tokens:
        return 0.0
    return len(set(tokens)) / len(tokens)


def function_word_ratio(tokens: Sequence[str]) -> float:
    """Share of tokens found in the stopword list."""
    if not tokens:
        return 0.0
    return sum(1 for token in tokens if is_stopword(token)) / len(tokens)


def punctuation_rate(text: str) -> float:
    """Unicode punctuation characters (categories P*) per character."""
    if not text:
        return 0.0
    count = sum(1 for ch in text if unicodedata.category(ch).startswith("P"))
    return count / len(text)


def uppercase_rate(text: str) -> float:
    if not text:
        return 0.0
    return len(UPPERCASE_RE.findall(text)) / len(text)


def digit_rate(text: str) -> float:
    if not text:
        return 0.0
    return len(DIGIT_RE.findall(text)) / len(text)


def mean_and_pstdev(values: Sequence[float]) -> Tuple[float, float]:
    """
    Mean and population standard deviation of the values.
    The deviation is 0.0 for fewer than two values; the mean is 0.0 when empty.
    """
    if not values:
        return 0.0, 0.0
    mean = float(statistics.fmean(values))
    std = float(statistics.pstdev(values)) if len(values) > 1 else 0.0
    return mean, std


def length_stats(segments: Iterable[str]) -> Tuple[float, float]:
    """Mean and population std of token counts across text segments."""
    return mean_and_pstdev([len(word_tokens(segment)) for segment in segments])
