from __future__ import annotations

import logging

from ..models import StatFeatures
from ..segmentation import Segments, segment_text
from ..textutils import normalize_whitespace
from .compression import gzip_ratio, schedule_gzip_ratio
from .entropy import sentence_entropy_std, shannon_entropy
from .lexical import (
    digit_rate,
    function_word_ratio,
    length_stats,
    punctuation_rate,
    type_token_ratio,
    uppercase_rate,
)
from .ngrams import ngram_repetition

logger = logging.getLogger(__name__)


def compute_stat_features(text: str) -> StatFeatures:
    """Normalize, segment and measure a text. Raises CompressionError."""
    normalized = normalize_whitespace(text)
    segments = segment_text(normalized)
    return _assemble(segments, gzip_ratio(normalized))


async def compute_stat_features_async(text: str) -> StatFeatures:
    """
    Awaitable form of compute_stat_features.

    Compression runs on the default executor while the remaining statistics
    are computed; the record is assembled only after it completes.
    """
    normalized = normalize_whitespace(text)
    pending = schedule_gzip_ratio(normalized)
    try:
        segments = segment_text(normalized)
    except BaseException:
        pending.cancel()
        raise
    ratio = await pending
    return _assemble(segments, ratio)


def _assemble(segments: Segments, ratio: float) -> StatFeatures:
    text = segments.text
    tokens = segments.tokens
    avg_sentence_len, sentence_len_std = length_stats(segments.sentences)
    _, paragraph_len_std = length_stats(segments.paragraphs)

    features = StatFeatures(
        length=len(text),
        sentences=len(segments.sentences),
        avg_sentence_len=avg_sentence_len,
        sentence_len_std=sentence_len_std,
        paragraphs=len(segments.paragraphs),
        paragraph_len_std=paragraph_len_std,
        type_token_ratio=type_token_ratio(tokens),
        function_word_ratio=function_word_ratio(tokens),
        punctuation_rate=punctuation_rate(text),
        uppercase_rate=uppercase_rate(text),
        digit_rate=digit_rate(text),
        char_entropy=shannon_entropy(text),
        sentence_entropy_std=sentence_entropy_std(segments.sentences),
        gzip_ratio=ratio,
        repetition1=ngram_repetition(tokens, 1),
        repetition2=ngram_repetition(tokens, 2),
        repetition3=ngram_repetition(tokens, 3),
    )
    logger.debug(
        "Computed features: length=%d sentences=%d tokens=%d gzip_ratio=%.4f",
        features.length,
        features.sentences,
        len(tokens),
        features.gzip_ratio,
    )
    return features
