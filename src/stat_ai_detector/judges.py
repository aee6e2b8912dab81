from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Tuple

from .models import Label, StatAssessment

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExternalJudgment:
    """An opinion produced outside the statistical core, e.g. by an LLM judge."""

    label: Label
    confidence: float


@dataclass(frozen=True, slots=True)
class Verdict:
    """Final label and confidence reported to the caller."""

    label: Label
    confidence: float
    reasons: Tuple[str, ...]


class VerdictPolicy(ABC):
    """Combines a statistical assessment with an optional external judgment."""

    name: str = "abstract"

    @abstractmethod
    def combine(
        self, stats: StatAssessment, judgment: ExternalJudgment | None = None
    ) -> Verdict:
        """Return the verdict for one document."""
        raise NotImplementedError


class StatsOnlyPolicy(VerdictPolicy):
    """Reports the statistical assessment as-is and ignores external judgments."""

    name = "stats_only"

    def combine(
        self, stats: StatAssessment, judgment: ExternalJudgment | None = None
    ) -> Verdict:
        if judgment is not None:
            logger.debug(
                "Ignoring external judgment %s (%.2f) under stats_only policy",
                judgment.label.value,
                judgment.confidence,
            )
        return Verdict(label=stats.label, confidence=stats.score, reasons=stats.reasons)


class CallablePolicy(VerdictPolicy):
    """Adapt an arbitrary callable into the VerdictPolicy interface."""

    name = "callable"

    def __init__(
        self, func: Callable[[StatAssessment, ExternalJudgment | None], Verdict]
    ) -> None:
        self._func = func

    def combine(
        self, stats: StatAssessment, judgment: ExternalJudgment | None = None
    ) -> Verdict:
        return self._func(stats, judgment)


def create_policy(name: str) -> VerdictPolicy:
    """Factory for building verdict policies by name."""
    normalized = name.lower().strip()
    if normalized in {"stats_only", "stats"}:
        return StatsOnlyPolicy()
    raise ValueError(f"Unknown verdict policy '{name}'.")
