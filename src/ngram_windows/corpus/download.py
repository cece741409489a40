from __future__ import annotations

import logging
from pathlib import Path

import requests

from ..models import Document, DocumentId

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


def fetch_text(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download a text resource and decode it."""
    LOGGER.info("Fetching text from %s", url)
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    encoding = response.encoding or "utf-8"
    return response.content.decode(encoding, errors="replace")


def download_text(
    url: str,
    dest: str | Path,
    timeout: float = DEFAULT_TIMEOUT,
    chunk_size: int = 1 << 14,
) -> Path:
    """Stream url into dest, replacing it only once the download completes."""
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Downloading %s to %s", url, dest)
    with requests.get(url, stream=True, timeout=timeout) as response:
        response.raise_for_status()
        tmp_path = dest.with_suffix(dest.suffix + ".tmp")
        with tmp_path.open("wb") as handle:
            for chunk in response.iter_content(chunk_size=chunk_size):
                if chunk:
                    handle.write(chunk)
        tmp_path.replace(dest)
    return dest


def document_from_url(
    url: str, doc_id: DocumentId | None = None, timeout: float = DEFAULT_TIMEOUT
) -> Document:
    """Fetch url and wrap its text in a Document (the id defaults to the URL)."""
    return Document(
        doc_id=url if doc_id is None else doc_id, text=fetch_text(url, timeout)
    )
