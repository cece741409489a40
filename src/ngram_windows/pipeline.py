from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterator, List, Pattern

from .adapters import records_to_strings
from .assembly import assemble_ngram
from .config import NgramConfig
from .errors import InvalidInput, MissingFieldError
from .models import Document, DocumentId, NgramRecord
from .tokenization import tokenize
from .windowing import WindowStrategy, create_strategy, generate_windows

LOGGER = logging.getLogger(__name__)

# Identifier given to a bare text string passed in place of a collection.
DEFAULT_DOCUMENT_ID: DocumentId = 0

_MISSING = object()


def process_document(
    document: Document, config: NgramConfig | None = None
) -> List[NgramRecord]:
    """Tokenize, window, and assemble one document into tagged records."""
    cfg = (config or NgramConfig()).validate()
    _check_text(document.text, 0)
    return _build_records(
        document, cfg, cfg.compiled_pattern(), create_strategy(cfg.strategy)
    )


def process_corpus(
    documents: Any, config: NgramConfig | None = None
) -> List[NgramRecord]:
    """
    Produce the n-gram records of every document, in input order.

    documents may be an iterable of Document objects, mappings, or objects
    exposing the configured id/text fields; a single mapping holding both
    of those fields; any other mapping, read as id to text; or a single text
    string. Every entry is validated before any document is processed, so
    callers receive either all records or one error.
    """
    cfg = (config or NgramConfig()).validate()
    docs = collect_documents(documents, cfg.id_field, cfg.text_field)
    pattern = cfg.compiled_pattern()
    strategy = create_strategy(cfg.strategy)

    if cfg.workers > 1 and len(docs) > 1:
        with ThreadPoolExecutor(max_workers=cfg.workers) as executor:
            # map() yields in submission order whatever the completion order.
            per_document = list(
                executor.map(
                    lambda doc: _build_records(doc, cfg, pattern, strategy), docs
                )
            )
        records = [record for batch in per_document for record in batch]
    else:
        records = []
        for doc in docs:
            records.extend(_build_records(doc, cfg, pattern, strategy))

    LOGGER.info(
        "Built %d %d-gram records from %d documents", len(records), cfg.n, len(docs)
    )
    return records


def iter_corpus_records(
    documents: Any, config: NgramConfig | None = None
) -> Iterator[NgramRecord]:
    """Lazily yield the records of process_corpus, one document at a time."""
    cfg = (config or NgramConfig()).validate()
    docs = collect_documents(documents, cfg.id_field, cfg.text_field)
    pattern = cfg.compiled_pattern()
    strategy = create_strategy(cfg.strategy)
    return (
        record
        for doc in docs
        for record in _build_records(doc, cfg, pattern, strategy)
    )


def generate_ngrams(
    text: str,
    n: int = 2,
    separator: str = " ",
    strategy: str = "direct",
    token_split_pattern: str | Pattern[str] | None = None,
) -> List[str]:
    """Return the n-gram strings of a single text."""
    cfg = NgramConfig(n=n, separator=separator, strategy=strategy)
    if token_split_pattern is not None:
        cfg.token_split_pattern = token_split_pattern
    records = process_document(Document(DEFAULT_DOCUMENT_ID, text), cfg)
    return records_to_strings(records)


def collect_documents(
    documents: Any, id_field: str = "doc_id", text_field: str = "text"
) -> List[Document]:
    """Materialize and validate the input collection as Document objects."""
    if isinstance(documents, str):
        return [Document(DEFAULT_DOCUMENT_ID, documents)]
    if isinstance(documents, (bytes, bytearray)):
        raise InvalidInput(
            "Documents must be text or a collection, "
            f"got {type(documents).__name__}."
        )
    if isinstance(documents, Document):
        documents = [documents]
    elif isinstance(documents, Mapping) and {id_field, text_field} <= set(
        documents
    ):
        # A single entry in field shape, not a keyed collection.
        documents = [documents]
    if isinstance(documents, Mapping):
        entries: Iterable[Any] = [
            Document(doc_id, text) for doc_id, text in documents.items()
        ]
    elif isinstance(documents, Iterable):
        entries = documents
    else:
        raise InvalidInput(
            f"Documents must be iterable, got {type(documents).__name__}."
        )

    collected: List[Document] = []
    for index, entry in enumerate(entries):
        collected.append(_coerce_document(entry, index, id_field, text_field))
    return collected


def _coerce_document(
    entry: Any, index: int, id_field: str, text_field: str
) -> Document:
    if isinstance(entry, Document):
        doc_id, text = entry.doc_id, entry.text
    else:
        doc_id = _read_field(entry, id_field)
        text = _read_field(entry, text_field)
    if doc_id is _MISSING or doc_id is None:
        raise MissingFieldError(index, id_field)
    if text is _MISSING or text is None:
        raise MissingFieldError(index, text_field)
    _check_text(text, index)
    if isinstance(entry, Document):
        return entry
    return Document(doc_id=doc_id, text=text)


def _read_field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name, _MISSING)
    return getattr(entry, name, _MISSING)


def _check_text(text: Any, index: int) -> None:
    if not isinstance(text, str):
        raise InvalidInput(
            f"Document at position {index} has non-string text "
            f"({type(text).__name__})."
        )


def _build_records(
    doc: Document,
    config: NgramConfig,
    pattern: Pattern[str],
    strategy: WindowStrategy,
) -> List[NgramRecord]:
    words = [token.text for token in tokenize(doc.text, pattern)]
    records = [
        NgramRecord(
            document_id=doc.doc_id,
            text=assemble_ngram(window, config.separator),
            position=position,
        )
        for position, window in enumerate(generate_windows(words, config.n, strategy))
    ]
    LOGGER.debug(
        "Document %r: %d tokens, %d windows", doc.doc_id, len(words), len(records)
    )
    return records
