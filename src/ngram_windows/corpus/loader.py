from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

import pandas as pd

from ..errors import InvalidInput

LOGGER = logging.getLogger(__name__)

# File types that expand into document entries.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".jsonl", ".csv"}


def load_documents(
    input_path: str | Path,
    id_field: str = "doc_id",
    text_field: str = "text",
) -> List[Any]:
    """
    Expand a file or directory into document entries for process_corpus.

    Plain-text files become one entry keyed by their (relative) path under
    the configured id and text fields. JSONL and CSV rows are returned as
    they are, so the pipeline applies its own field checks to them.
    """
    path = Path(input_path)
    if path.is_file():
        return _entries_from_file(path, path.name, id_field, text_field)
    if not path.is_dir():
        raise InvalidInput(f"Input path does not exist: {path}")

    # Sorted so document order is stable across runs.
    files = sorted(
        p
        for p in path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    entries: List[Any] = []
    for file in files:
        relative_id = file.relative_to(path).as_posix()
        entries.extend(_entries_from_file(file, relative_id, id_field, text_field))
    LOGGER.info(
        "Loaded %d documents from %d files under %s", len(entries), len(files), path
    )
    return entries


def _entries_from_file(
    path: Path, doc_id: str, id_field: str, text_field: str
) -> List[Any]:
    suffix = path.suffix.lower()
    if suffix == ".txt":
        return [{id_field: doc_id, text_field: path.read_text(encoding="utf-8")}]
    if suffix == ".jsonl":
        return _read_jsonl(path)
    if suffix == ".csv":
        return _read_csv(path)
    raise InvalidInput(
        f"Unsupported input type '{path.suffix}' for {path}; "
        f"expected one of {', '.join(sorted(SUPPORTED_INPUT_EXTENSIONS))}."
    )


def _read_jsonl(path: Path) -> List[Any]:
    entries: List[Any] = []
    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                entries.append(json.loads(line))
            except json.JSONDecodeError as exc:
                raise InvalidInput(
                    f"{path}:{line_number}: invalid JSON ({exc.msg})."
                ) from exc
    return entries


def _read_csv(path: Path) -> List[Any]:
    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise InvalidInput(f"{path}: unreadable CSV ({exc}).") from exc
    return frame.to_dict(orient="records")
