"""
stat_ai_detector package exports the statistical core and its caller helpers.
"""

from __future__ import annotations

from .analyzer import CompressionError, compute_stat_features, compute_stat_features_async
from .config import DetectorConfig, config_from_dict, config_from_yaml, load_config
from .judges import ExternalJudgment, StatsOnlyPolicy, VerdictPolicy, create_policy
from .models import Label, StatAssessment, StatFeatures
from .pipeline import InputLengthError, analyze_corpus, analyze_document
from .scoring import assess_stats

__all__ = [
    "CompressionError",
    "DetectorConfig",
    "ExternalJudgment",
    "InputLengthError",
    "Label",
    "StatAssessment",
    "StatFeatures",
    "StatsOnlyPolicy",
    "VerdictPolicy",
    "analyze_corpus",
    "analyze_document",
    "assess_stats",
    "compute_stat_features",
    "compute_stat_features_async",
    "config_from_dict",
    "config_from_yaml",
    "create_policy",
    "load_config",
]

__version__ = "0.1.0"
