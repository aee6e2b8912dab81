from __future__ import annotations

import math
from dataclasses import dataclass

from .models import StatAssessment, StatFeatures

EPSILON = 1e-6

# Sub-score shaping.
VARIANCE_SCALE = 1.2
TTR_SCALE = 2.0
GZIP_FLOOR = 0.15
GZIP_SPAN = 0.35
BIGRAM_REPETITION_WEIGHT = 4.0
TRIGRAM_REPETITION_WEIGHT = 6.0
ENTROPY_STD_SCALE = 1.2
PUNCTUATION_TARGET = 0.07
PUNCTUATION_TOLERANCE = 0.4

# Weighted sum; the weights add up to 1.0.
WEIGHT_LOW_VARIANCE = 0.24
WEIGHT_LOW_TTR = 0.22
WEIGHT_HIGH_GZIP = 0.20
WEIGHT_REPETITION = 0.18
WEIGHT_LOW_ENTROPY_VAR = 0.10
WEIGHT_PUNCT_REGULARITY = 0.06

# Short texts carry little signal, so the score is pulled down below this length.
LENGTH_PENALTY_CHARS = 600.0
LENGTH_PENALTY_MAX = 0.25

# Reason triggers, evaluated on un-penalized sub-scores.
LOW_VARIANCE_TRIGGER = 0.6
LOW_TTR_TRIGGER = 0.6
HIGH_GZIP_TRIGGER = 0.6
REPETITION_TRIGGER = 0.5
LOW_ENTROPY_VAR_TRIGGER = 0.6

REASON_LOW_VARIANCE = "Low sentence-length variability suggests machine-regular pacing"
REASON_LOW_TTR = "Limited lexical diversity relative to length"
REASON_HIGH_GZIP = "High compressibility indicates repetition and formulaic phrasing"
REASON_REPETITION = "Repeated n-grams beyond typical human usage"
REASON_LOW_ENTROPY_VAR = "Uniform character-level entropy across sentences"
REASON_FALLBACK = "Statistical signals favor human-like variability"


@dataclass(frozen=True, slots=True)
class SubScores:
    """Bounded signals that approach 1.0 for machine-like patterns."""

    low_variance: float
    low_ttr: float
    high_gzip: float
    repetition: float
    low_entropy_var: float
    punct_regularity: float


def compute_sub_scores(features: StatFeatures) -> SubScores:
    f = features
    relative_spread = f.sentence_len_std / (f.avg_sentence_len + EPSILON)
    return SubScores(
        low_variance=1 - math.tanh(relative_spread * VARIANCE_SCALE),
        low_ttr=1 - min(1.0, f.type_token_ratio * TTR_SCALE),
        high_gzip=min(1.0, max(0.0, (f.gzip_ratio - GZIP_FLOOR) / GZIP_SPAN)),
        repetition=min(
            1.0,
            f.repetition2 * BIGRAM_REPETITION_WEIGHT
            + f.repetition3 * TRIGRAM_REPETITION_WEIGHT,
        ),
        low_entropy_var=1 - min(1.0, f.sentence_entropy_std / ENTROPY_STD_SCALE),
        punct_regularity=max(
            0.0, PUNCTUATION_TOLERANCE - abs(f.punctuation_rate - PUNCTUATION_TARGET)
        )
        / PUNCTUATION_TOLERANCE,
    )


def raw_score(sub: SubScores) -> float:
    """Weighted sum of the sub-scores before the length penalty."""
    return (
        WEIGHT_LOW_VARIANCE * sub.low_variance
        + WEIGHT_LOW_TTR * sub.low_ttr
        + WEIGHT_HIGH_GZIP * sub.high_gzip
        + WEIGHT_REPETITION * sub.repetition
        + WEIGHT_LOW_ENTROPY_VAR * sub.low_entropy_var
        + WEIGHT_PUNCT_REGULARITY * sub.punct_regularity
    )


def length_penalty(length: float) -> float:
    return max(0.0, 1 - min(1.0, length / LENGTH_PENALTY_CHARS)) * LENGTH_PENALTY_MAX


def build_reasons(sub: SubScores) -> list[str]:
    """Reasons in fixed priority order, with a fallback when nothing triggers."""
    reasons: list[str] = []
    if sub.low_variance > LOW_VARIANCE_TRIGGER:
        reasons.append(REASON_LOW_VARIANCE)
    if sub.low_ttr > LOW_TTR_TRIGGER:
        reasons.append(REASON_LOW_TTR)
    if sub.high_gzip > HIGH_GZIP_TRIGGER:
        reasons.append(REASON_HIGH_GZIP)
    if sub.repetition > REPETITION_TRIGGER:
        reasons.append(REASON_REPETITION)
    if sub.low_entropy_var > LOW_ENTROPY_VAR_TRIGGER:
        reasons.append(REASON_LOW_ENTROPY_VAR)
    if not reasons:
        reasons.append(REASON_FALLBACK)
    return reasons


def assess_stats(features: StatFeatures) -> StatAssessment:
    """Map a feature record to a bounded AI-likelihood score and reasons."""
    sub = compute_sub_scores(features)
    penalized = raw_score(sub) - length_penalty(features.length)
    score = max(0.0, min(1.0, penalized))
    return StatAssessment(score=score, reasons=tuple(build_reasons(sub)))
