from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

import click

from ..scoring import assess_stats, compute_sub_scores, length_penalty, raw_score
from .compression import CompressionError
from .features import compute_stat_features

FEATURE_LABELS: dict[str, str] = {
    "length": "Length (chars)",
    "sentences": "Sentences",
    "avgSentenceLen": "Avg sentence length",
    "sentenceLenStd": "Sentence length stddev",
    "paragraphs": "Paragraphs",
    "paragraphLenStd": "Paragraph length stddev",
    "typeTokenRatio": "Type-token ratio",
    "functionWordRatio": "Function-word ratio",
    "punctuationRate": "Punctuation rate",
    "uppercaseRate": "Uppercase rate",
    "digitRate": "Digit rate",
    "charEntropy": "Character entropy",
    "sentenceEntropyStd": "Sentence entropy stddev",
    "gzipRatio": "Gzip compressibility",
    "repetition1": "Unigram repetition",
    "repetition2": "Bigram repetition",
    "repetition3": "Trigram repetition",
}


@click.group(name="inspect")
def inspect_group() -> None:
    """Detailed breakdown of the statistical signals behind a score."""


@inspect_group.command("text")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", type=click.Path(), default=None)
def inspect_text(input_file: str, json_output: str | None) -> None:
    """Print every feature, sub-score and the final assessment for a text file."""
    path = Path(input_file)
    text = path.read_text(encoding="utf-8")
    try:
        features = compute_stat_features(text)
    except CompressionError as exc:
        raise click.ClickException(str(exc)) from exc
    sub_scores = compute_sub_scores(features)
    raw = raw_score(sub_scores)
    penalty = length_penalty(features.length)
    assessment = assess_stats(features)

    click.echo(f"File: {input_file}")
    for key, value in features.to_payload().items():
        click.echo(f"{FEATURE_LABELS.get(key, key)}: {value:.4f}")
    for name, value in asdict(sub_scores).items():
        click.echo(f"Sub-score {name}: {value:.4f}")
    click.echo(f"Raw score: {raw:.4f}")
    click.echo(f"Length penalty: {penalty:.4f}")
    click.echo(f"Score: {assessment.score:.4f} ({assessment.label.value})")
    for reason in assessment.reasons:
        click.echo(f"- {reason}")

    if json_output is not None:
        payload = {
            "file": str(path),
            "features": features.to_payload(),
            "sub_scores": asdict(sub_scores),
            "raw_score": raw,
            "length_penalty": penalty,
            "assessment": assessment.to_payload(),
        }
        json_path = Path(json_output)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        click.echo(f"Wrote detailed JSON to {json_output}")
