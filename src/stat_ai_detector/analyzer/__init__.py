from __future__ import annotations

from .compression import CompressionError
from .features import compute_stat_features, compute_stat_features_async

__all__ = [
    "CompressionError",
    "compute_stat_features",
    "compute_stat_features_async",
]
