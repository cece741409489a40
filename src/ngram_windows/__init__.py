"""
ngram_windows package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .adapters import records_to_dicts, records_to_frame, records_to_strings
from .assembly import assemble_ngram
from .config import NgramConfig, config_from_dict, config_from_yaml, load_config
from .errors import InvalidConfiguration, InvalidInput, MissingFieldError, NgramError
from .models import Document, NgramRecord, Token
from .pipeline import (
    generate_ngrams,
    iter_corpus_records,
    process_corpus,
    process_document,
)
from .tokenization import split_tokens, tokenize
from .windowing import create_strategy, generate_windows

__all__ = [
    "NgramConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "NgramError",
    "InvalidConfiguration",
    "InvalidInput",
    "MissingFieldError",
    "Document",
    "Token",
    "NgramRecord",
    "tokenize",
    "split_tokens",
    "generate_windows",
    "create_strategy",
    "assemble_ngram",
    "process_document",
    "process_corpus",
    "iter_corpus_records",
    "generate_ngrams",
    "records_to_strings",
    "records_to_dicts",
    "records_to_frame",
]

__version__ = "0.1.0"
