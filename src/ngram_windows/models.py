from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DocumentId = Union[str, int]


@dataclass(frozen=True, slots=True)
class Document:
    """Represents an input document."""

    doc_id: DocumentId
    text: str


@dataclass(frozen=True, slots=True)
class Token:
    """A whitespace-free substring, its index, and inclusive-exclusive offsets."""

    text: str
    position: int
    start_char: int
    end_char: int


@dataclass(frozen=True, slots=True)
class NgramRecord:
    """One assembled n-gram tagged with its source document and start index."""

    document_id: DocumentId
    text: str
    position: int
