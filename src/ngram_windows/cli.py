from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, List, TypedDict

import typer
import yaml

from .adapters import records_to_dicts, records_to_frame, records_to_strings
from .benchmark import benchmark_strategies
from .config import NgramConfig, load_config
from .corpus import load_documents
from .errors import NgramError
from .models import NgramRecord
from .pipeline import DEFAULT_DOCUMENT_ID, collect_documents, process_corpus
from .tokenization import split_tokens

app = typer.Typer(help="N-gram windows CLI.", no_args_is_help=True)

OUTPUT_FORMATS = ("json", "jsonl", "csv", "text")


class BenchmarkPayload(TypedDict):
    name: str
    n: int
    num_tokens: int
    num_ngrams: int
    best_seconds: float
    mean_seconds: float
    matches_direct: bool


@app.callback()
def _root(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log progress to stderr."
    ),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command()
def generate(
    input_path: Path | None = typer.Option(
        None,
        exists=True,
        readable=True,
        dir_okay=True,
        file_okay=True,
        help="A .txt/.jsonl/.csv file or a directory of them.",
    ),
    text: str | None = typer.Option(
        None, "--text", "-t", help="Inline text to treat as a single document."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    n: int | None = typer.Option(None, "-n", "--n", help="Window size."),
    separator: str | None = typer.Option(
        None, "--separator", "-s", help="Token join delimiter."
    ),
    token_split_pattern: str | None = typer.Option(
        None, "--token-split-pattern", help="Regex matching token boundaries."
    ),
    strategy: str | None = typer.Option(
        None, "--strategy", help="Window strategy: direct, nested or shifted."
    ),
    workers: int | None = typer.Option(
        None, "--workers", "-w", help="Documents processed in parallel."
    ),
    id_field: str | None = typer.Option(
        None, "--id-field", help="Identifier field of JSONL/CSV records."
    ),
    text_field: str | None = typer.Option(
        None, "--text-field", help="Text field of JSONL/CSV records."
    ),
    output_format: str = typer.Option(
        "json", "--format", "-f", help="One of: json, jsonl, csv, text."
    ),
) -> None:
    """Emit the n-grams of every input document."""
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unknown format '{output_format}'. "
            f"Expected one of: {', '.join(OUTPUT_FORMATS)}.",
            param_hint="--format",
        )
    cfg = _load_cli_config(config)
    _apply_overrides(
        cfg,
        n,
        separator,
        token_split_pattern,
        strategy,
        workers,
        id_field,
        text_field,
    )
    documents = _resolve_documents(input_path, text, cfg)
    try:
        records = process_corpus(documents, cfg)
    except NgramError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(_render(records, output_format), nl=False)


@app.command()
def benchmark(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t"),
    config: Path | None = typer.Option(None, "--config", "-c"),
    n: int | None = typer.Option(None, "-n", "--n", help="Window size."),
    repeats: int = typer.Option(5, "--repeats", "-r", help="Timed runs per builder."),
    reference: bool = typer.Option(
        False,
        "--reference/--no-reference",
        help="Also time scikit-learn's CountVectorizer analyzer.",
    ),
) -> None:
    """Time each window strategy over the concatenated input tokens."""
    cfg = _load_cli_config(config)
    _apply_overrides(cfg, n, None, None, None, None, None, None)
    documents = _resolve_documents(input_path, text, cfg)
    try:
        cfg.validate()
        pattern = cfg.compiled_pattern()
        tokens: List[str] = []
        for doc in collect_documents(documents, cfg.id_field, cfg.text_field):
            tokens.extend(split_tokens(doc.text, pattern))
        results = benchmark_strategies(
            tokens,
            cfg.n,
            repeats=repeats,
            include_reference=reference,
            separator=cfg.separator,
        )
    except NgramError as exc:
        raise typer.BadParameter(str(exc)) from exc
    payload: List[BenchmarkPayload] = [
        BenchmarkPayload(**asdict(result)) for result in results
    ]
    typer.echo(json.dumps({"results": payload}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    typer.echo(yaml.safe_dump(NgramConfig().to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_cli_config(path: Path | None) -> NgramConfig:
    try:
        return load_config(path)
    except (NgramError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _apply_overrides(
    config: NgramConfig,
    n: int | None,
    separator: str | None,
    token_split_pattern: str | None,
    strategy: str | None,
    workers: int | None,
    id_field: str | None,
    text_field: str | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if n is not None:
        config.n = n
    if separator is not None:
        config.separator = separator
    if token_split_pattern is not None:
        config.token_split_pattern = token_split_pattern
    if strategy:
        config.strategy = strategy
    if workers is not None:
        config.workers = workers
    if id_field:
        config.id_field = id_field
    if text_field:
        config.text_field = text_field


def _resolve_documents(
    input_path: Path | None, text: str | None, config: NgramConfig
) -> List[Any]:
    """Turn --input-path or --text into document entries."""
    if (input_path is None) == (text is None):
        raise typer.BadParameter("Provide exactly one of --input-path or --text.")
    if text is not None:
        return [{config.id_field: DEFAULT_DOCUMENT_ID, config.text_field: text}]
    try:
        return load_documents(input_path, config.id_field, config.text_field)
    except NgramError as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc


def _render(records: List[NgramRecord], output_format: str) -> str:
    """Serialize records in the requested output format."""
    if output_format == "text":
        return "".join(f"{line}\n" for line in records_to_strings(records))
    if output_format == "jsonl":
        return "".join(
            json.dumps(row, ensure_ascii=False) + "\n"
            for row in records_to_dicts(records)
        )
    if output_format == "csv":
        return records_to_frame(records).to_csv(index=False)
    return json.dumps({"ngrams": records_to_dicts(records)}, indent=2) + "\n"


if __name__ == "__main__":
    main()
