import pytest

from stat_ai_detector import scoring
from stat_ai_detector.analyzer.features import compute_stat_features
from stat_ai_detector.models import AI_SCORE_THRESHOLD, Label, StatAssessment
from stat_ai_detector.scoring import (
    REASON_FALLBACK,
    REASON_HIGH_GZIP,
    REASON_LOW_ENTROPY_VAR,
    REASON_LOW_TTR,
    REASON_LOW_VARIANCE,
    REASON_REPETITION,
    assess_stats,
    compute_sub_scores,
    length_penalty,
    raw_score,
)
from tests.utils import FORMULAIC_TEXT, HUMAN_TEXT, make_features


def test_named_constants():
    assert AI_SCORE_THRESHOLD == 0.6
    assert scoring.LENGTH_PENALTY_CHARS == 600.0
    assert scoring.LENGTH_PENALTY_MAX == 0.25
    weights = [
        scoring.WEIGHT_LOW_VARIANCE,
        scoring.WEIGHT_LOW_TTR,
        scoring.WEIGHT_HIGH_GZIP,
        scoring.WEIGHT_REPETITION,
        scoring.WEIGHT_LOW_ENTROPY_VAR,
        scoring.WEIGHT_PUNCT_REGULARITY,
    ]
    assert weights == [0.24, 0.22, 0.20, 0.18, 0.10, 0.06]
    assert sum(weights) == pytest.approx(1.0)


def test_sub_scores_follow_formulas():
    features = make_features(
        avg_sentence_len=10.0,
        sentence_len_std=5.0,
        type_token_ratio=0.25,
        gzip_ratio=0.325,
        repetition2=0.05,
        repetition3=0.02,
        sentence_entropy_std=0.6,
        punctuation_rate=0.17,
    )
    sub = compute_sub_scores(features)
    assert sub.low_variance == pytest.approx(1 - 0.5370495669980353, rel=1e-6)
    assert sub.low_ttr == pytest.approx(0.5)
    assert sub.high_gzip == pytest.approx(0.5)
    assert sub.repetition == pytest.approx(0.32)
    assert sub.low_entropy_var == pytest.approx(0.5)
    assert sub.punct_regularity == pytest.approx(0.75)


def test_high_gzip_is_clamped_to_unit_interval():
    assert compute_sub_scores(make_features(gzip_ratio=0.05)).high_gzip == 0.0
    assert compute_sub_scores(make_features(gzip_ratio=20.0)).high_gzip == 1.0


def test_fallback_reason_when_nothing_triggers():
    assessment = assess_stats(make_features())
    assert assessment.reasons == (REASON_FALLBACK,)
    assert assessment.label is Label.HUMAN
    assert assessment.score < AI_SCORE_THRESHOLD


def test_reasons_follow_priority_order():
    features = make_features(
        sentence_len_std=0.0,
        type_token_ratio=0.1,
        gzip_ratio=0.5,
        repetition2=0.2,
        repetition3=0.1,
        sentence_entropy_std=0.0,
    )
    assert assess_stats(features).reasons == (
        REASON_LOW_VARIANCE,
        REASON_LOW_TTR,
        REASON_HIGH_GZIP,
        REASON_REPETITION,
        REASON_LOW_ENTROPY_VAR,
    )


def test_reasons_ignore_length_penalty():
    """Reasons come from un-penalized sub-scores, so a tiny text keeps them."""
    features = make_features(length=10, sentence_len_std=0.0)
    assessment = assess_stats(features)
    assert REASON_LOW_VARIANCE in assessment.reasons


def test_length_penalty_is_subtracted_then_clamped():
    features = make_features(length=30, sentence_len_std=0.0, type_token_ratio=0.1)
    sub = compute_sub_scores(features)
    penalty = length_penalty(features.length)
    assert penalty == pytest.approx(0.25 * (1 - 30 / 600))
    assert assess_stats(features).score == pytest.approx(raw_score(sub) - penalty)

    flat = make_features(
        length=10,
        avg_sentence_len=1.0,
        sentence_len_std=50.0,
        type_token_ratio=1.0,
        gzip_ratio=0.1,
        repetition2=0.0,
        repetition3=0.0,
        sentence_entropy_std=2.0,
        punctuation_rate=0.5,
    )
    assert raw_score(compute_sub_scores(flat)) == pytest.approx(0.0, abs=1e-9)
    assert assess_stats(flat).score == 0.0


def test_length_penalty_vanishes_for_long_texts():
    assert length_penalty(0) == 0.25
    assert length_penalty(600) == 0.0
    assert length_penalty(5000) == 0.0


def test_label_cutover_is_strict():
    assert StatAssessment(score=0.6, reasons=("x",)).label is Label.HUMAN
    assert StatAssessment(score=0.6000001, reasons=("x",)).label is Label.AI


def test_assess_stats_is_pure():
    features = compute_stat_features(HUMAN_TEXT)
    first = assess_stats(features)
    second = assess_stats(features)
    assert first == second
    assert first.to_payload() == second.to_payload()


def test_identical_one_word_sentences_note_low_variance():
    assessment = assess_stats(compute_stat_features("A. A. A. A. A."))
    assert assessment.reasons[0] == REASON_LOW_VARIANCE


def test_natural_text_reads_as_human():
    features = compute_stat_features(HUMAN_TEXT)
    assert features.length > 600
    assert features.type_token_ratio > 0.5
    assessment = assess_stats(features)
    assert assessment.score < AI_SCORE_THRESHOLD
    assert assessment.label is Label.HUMAN


def test_formulaic_text_reads_as_ai():
    features = compute_stat_features(FORMULAIC_TEXT)
    assert features.length > 600
    assessment = assess_stats(features)
    assert assessment.label is Label.AI
    assert REASON_LOW_VARIANCE in assessment.reasons
    assert REASON_REPETITION in assessment.reasons
