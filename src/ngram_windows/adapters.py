"""
Output-shape adapters over the canonical NgramRecord sequence.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Iterable, List

import pandas as pd

from .models import NgramRecord

RECORD_COLUMNS = ["document_id", "text", "position"]


def records_to_strings(records: Iterable[NgramRecord]) -> List[str]:
    """Flatten records to their n-gram text, in order."""
    return [record.text for record in records]


def records_to_dicts(records: Iterable[NgramRecord]) -> List[Dict[str, Any]]:
    """Convert records into JSON-serializable dictionaries."""
    return [asdict(record) for record in records]


def records_to_frame(records: Iterable[NgramRecord]) -> pd.DataFrame:
    """Tabulate records with one row per n-gram."""
    rows = records_to_dicts(records)
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)
