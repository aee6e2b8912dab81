from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from .analyzer.compression import CompressionError
from .analyzer.features import compute_stat_features, compute_stat_features_async
from .config import DetectorConfig
from .judges import ExternalJudgment, StatsOnlyPolicy, Verdict, VerdictPolicy
from .models import Document, StatAssessment, StatFeatures
from .scoring import assess_stats

logger = logging.getLogger(__name__)

ANALYSIS_FAILED_MESSAGE = "Analysis failed"


class InputLengthError(ValueError):
    """Raised when a text is outside the configured length bounds."""


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Everything the caller returns for one analyzed document."""

    doc_id: str
    verdict: Verdict
    features: StatFeatures
    stats: StatAssessment
    judgment: ExternalJudgment | None = None

    def to_payload(self, config: DetectorConfig | None = None) -> dict[str, Any]:
        cfg = config or DetectorConfig()
        payload: dict[str, Any] = {
            "label": self.verdict.label.value,
            "confidence": self.verdict.confidence,
            "reasons": list(self.verdict.reasons),
        }
        if cfg.include_features:
            all_features = self.features.to_payload()
            payload["features"] = {
                key: all_features[key] for key in cfg.feature_keys if key in all_features
            }
        payload["sources"] = {
            "stats": {"score": self.stats.score},
            "llm": (
                {
                    "label": self.judgment.label.value,
                    "confidence": self.judgment.confidence,
                }
                if self.judgment is not None
                else None
            ),
        }
        return payload


def validate_text(text: str, config: DetectorConfig) -> None:
    """Reject texts outside [min_chars, max_chars] after trimming."""
    length = len(text.strip())
    if length < config.min_chars:
        message = f"Text has {length} characters; at least {config.min_chars} are required."
    elif config.max_chars is not None and length > config.max_chars:
        message = f"Text has {length} characters; at most {config.max_chars} are allowed."
    else:
        return
    logger.warning("Rejected text: %s", message)
    raise InputLengthError(message)


def analyze_document(
    doc: Document,
    config: DetectorConfig,
    policy: VerdictPolicy | None = None,
    judgment: ExternalJudgment | None = None,
) -> AnalysisReport:
    """Validate, measure, score and combine a single document."""
    validate_text(doc.text, config)
    features = compute_stat_features(doc.text)
    return _build_report(doc, features, policy, judgment)


async def analyze_document_async(
    doc: Document,
    config: DetectorConfig,
    policy: VerdictPolicy | None = None,
    judgment: ExternalJudgment | None = None,
) -> AnalysisReport:
    validate_text(doc.text, config)
    features = await compute_stat_features_async(doc.text)
    return _build_report(doc, features, policy, judgment)


def analyze_corpus(
    documents: Sequence[Document],
    config: DetectorConfig,
    policy: VerdictPolicy | None = None,
) -> Dict[str, AnalysisReport | Exception]:
    """
    Analyze all documents concurrently.
    Length and compression failures are returned in place of the report for
    that document; other exceptions propagate.
    """
    return asyncio.run(_analyze_corpus(documents, config, policy))


async def _analyze_corpus(
    documents: Sequence[Document],
    config: DetectorConfig,
    policy: VerdictPolicy | None,
) -> Dict[str, AnalysisReport | Exception]:
    outcomes: List[AnalysisReport | BaseException] = await asyncio.gather(
        *(analyze_document_async(doc, config, policy) for doc in documents),
        return_exceptions=True,
    )
    results: Dict[str, AnalysisReport | Exception] = {}
    for doc, outcome in zip(documents, outcomes):
        if isinstance(outcome, InputLengthError):
            results[doc.doc_id] = outcome
        elif isinstance(outcome, CompressionError):
            logger.warning("Analysis of %s failed: %s", doc.doc_id, outcome)
            results[doc.doc_id] = outcome
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results[doc.doc_id] = outcome
    return results


def error_payload(error: Exception) -> dict[str, str]:
    """Map a per-document failure to the message reported to callers."""
    if isinstance(error, CompressionError):
        return {"error": ANALYSIS_FAILED_MESSAGE}
    return {"error": str(error)}


def _build_report(
    doc: Document,
    features: StatFeatures,
    policy: VerdictPolicy | None,
    judgment: ExternalJudgment | None,
) -> AnalysisReport:
    stats = assess_stats(features)
    verdict = (policy or StatsOnlyPolicy()).combine(stats, judgment)
    logger.info(
        "Analyzed doc=%s label=%s confidence=%.3f stats_score=%.3f",
        doc.doc_id,
        verdict.label.value,
        verdict.confidence,
        stats.score,
    )
    return AnalysisReport(
        doc_id=doc.doc_id,
        verdict=verdict,
        features=features,
        stats=stats,
        judgment=judgment,
    )
