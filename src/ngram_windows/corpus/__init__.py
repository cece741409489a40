from __future__ import annotations

from .download import document_from_url, download_text, fetch_text
from .loader import SUPPORTED_INPUT_EXTENSIONS, load_documents

__all__ = [
    "SUPPORTED_INPUT_EXTENSIONS",
    "document_from_url",
    "download_text",
    "fetch_text",
    "load_documents",
]
