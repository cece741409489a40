from ngram_windows.adapters import (
    RECORD_COLUMNS,
    records_to_dicts,
    records_to_frame,
    records_to_strings,
)
from ngram_windows.models import NgramRecord

RECORDS = [
    NgramRecord("A", "a b", 0),
    NgramRecord("A", "b c", 1),
    NgramRecord("B", "c d", 0),
]


def test_records_to_strings_keeps_order():
    assert records_to_strings(RECORDS) == ["a b", "b c", "c d"]


def test_records_to_dicts():
    assert records_to_dicts(RECORDS[:1]) == [
        {"document_id": "A", "text": "a b", "position": 0}
    ]


def test_records_to_frame_one_row_per_record():
    frame = records_to_frame(RECORDS)
    assert list(frame.columns) == RECORD_COLUMNS
    assert frame["text"].tolist() == ["a b", "b c", "c d"]
    assert frame.groupby("document_id").size().to_dict() == {"A": 2, "B": 1}


def test_records_to_frame_empty_keeps_columns():
    frame = records_to_frame([])
    assert frame.empty
    assert list(frame.columns) == RECORD_COLUMNS
