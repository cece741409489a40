import pytest

from ngram_windows.assembly import assemble_ngram, assemble_ngrams
from ngram_windows.errors import InvalidInput


def test_assemble_ngram_joins_in_order():
    assert assemble_ngram(("short", "and", "exquisite")) == "short and exquisite"
    assert assemble_ngram(["a", "b"], separator="_") == "a_b"
    assert assemble_ngram(["solo"], separator="|") == "solo"


def test_assemble_ngram_rejects_empty_window():
    with pytest.raises(InvalidInput):
        assemble_ngram(())


def test_assemble_ngrams_maps_each_window():
    windows = [("a", "b"), ("b", "c")]
    assert list(assemble_ngrams(windows, "-")) == ["a-b", "b-c"]
