"""
Example: build trigrams for a small batch and tabulate them with pandas.

Usage:
    python examples/run_batch_ngrams.py
"""

from __future__ import annotations

from ngram_windows import NgramConfig, process_corpus, records_to_frame

DOCUMENTS = [
    {"doc_id": "austen", "text": "It is a truth universally acknowledged"},
    {"doc_id": "melville", "text": "Call me Ishmael"},
    {"doc_id": "tiny", "text": "Hi"},
]


def main() -> None:
    records = process_corpus(DOCUMENTS, NgramConfig(n=3, strategy="shifted"))
    frame = records_to_frame(records)
    print(frame.to_string(index=False))
    print()
    print(frame.groupby("document_id").size().rename("ngrams").to_string())


if __name__ == "__main__":
    main()
