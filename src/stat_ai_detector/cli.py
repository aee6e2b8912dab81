from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import click
import typer
import yaml

from .analyzer.cli import inspect_group
from .config import DetectorConfig, load_config
from .judges import create_policy
from .models import Document
from .pipeline import AnalysisReport, analyze_corpus, error_payload

app = typer.Typer(help="Statistical AI-text detector CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    min_chars: int | None = typer.Option(
        None, "--min-chars", help="Override the minimum trimmed text length."
    ),
    max_chars: int | None = typer.Option(
        None, "--max-chars", help="Override the maximum trimmed text length."
    ),
    include_features: bool | None = typer.Option(
        None,
        "--include-features/--no-include-features",
        help="Include the configured feature values in the output.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Score every document under the input path and emit a JSON summary."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    cfg = load_config(config)
    _apply_overrides(cfg, min_chars, max_chars, include_features)
    try:
        policy = create_policy(cfg.policy_name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    documents = _load_documents(input_path)
    results = analyze_corpus(documents, cfg, policy)
    typer.echo(json.dumps({"documents": _build_summary(results, cfg)}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = DetectorConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def build_command() -> click.Group:
    """The typer app as a click group with the inspect commands attached."""
    command = typer.main.get_command(app)
    command.add_command(inspect_group)
    return command


def main() -> None:
    build_command()()


def _apply_overrides(
    config: DetectorConfig,
    min_chars: int | None,
    max_chars: int | None,
    include_features: bool | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if min_chars is not None:
        config.min_chars = min_chars
    if max_chars is not None:
        config.max_chars = max_chars
    if include_features is not None:
        config.include_features = include_features


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(p, str(p.relative_to(input_path))) for p in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(
    results: Dict[str, AnalysisReport | Exception], config: DetectorConfig
) -> List[Dict[str, Any]]:
    """Create a JSON-serializable entry per document, sorted by doc_id."""
    summary: List[Dict[str, Any]] = []
    for doc_id, outcome in sorted(results.items(), key=lambda item: item[0]):
        if isinstance(outcome, Exception):
            entry: Dict[str, Any] = {"doc_id": doc_id, **error_payload(outcome)}
        else:
            entry = {"doc_id": doc_id, **outcome.to_payload(config)}
        summary.append(entry)
    return summary


if __name__ == "__main__":
    main()
