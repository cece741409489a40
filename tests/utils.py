from __future__ import annotations

import json
from pathlib import Path

SAMPLE_SENTENCE = "My short and exquisite sentence"


def write_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus containing .txt, .jsonl and .csv sources."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "a.txt").write_text("one two three", encoding="utf-8")
    (corpus_dir / "nested" / "b.txt").write_text("four five", encoding="utf-8")
    (corpus_dir / "records.jsonl").write_text(
        "\n".join(
            [
                json.dumps({"doc_id": "j1", "text": "six seven eight"}),
                "",
                json.dumps({"doc_id": "j2", "text": "nine"}),
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    (corpus_dir / "notes.md").write_text("ignored entirely", encoding="utf-8")
    return corpus_dir
