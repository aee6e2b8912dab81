from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

DEFAULT_FEATURE_KEYS: tuple[str, ...] = (
    "avgSentenceLen",
    "sentenceLenStd",
    "typeTokenRatio",
    "gzipRatio",
    "repetition2",
    "repetition3",
    "sentenceEntropyStd",
    "punctuationRate",
)


@dataclass(slots=True)
class DetectorConfig:
    """Caller-side options for running the statistical detector."""

    min_chars: int = 20
    max_chars: int | None = None
    include_features: bool = True
    feature_keys: List[str] = field(default_factory=lambda: list(DEFAULT_FEATURE_KEYS))
    policy_name: str = "stats_only"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {f.name for f in fields(DetectorConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "feature_keys" in kwargs:
        kwargs["feature_keys"] = [str(key) for key in kwargs["feature_keys"] or []]
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> DetectorConfig:
    """Build a DetectorConfig from a dictionary-like input."""
    if data is None:
        return DetectorConfig()
    return DetectorConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> DetectorConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> DetectorConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return DetectorConfig()
    return config_from_yaml(path)
