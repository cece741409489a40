import re

import pytest

from ngram_windows.errors import InvalidConfiguration, InvalidInput
from ngram_windows.tokenization import split_tokens, tokenize


def test_tokenize_returns_positions_and_offsets():
    text = "  Hello,\tworld!\n It's  sunny "
    tokens = tokenize(text)

    assert [token.text for token in tokens] == ["Hello,", "world!", "It's", "sunny"]
    assert [token.position for token in tokens] == [0, 1, 2, 3]
    assert tokens[0].start_char == 2
    assert tokens[0].end_char == 8
    assert text[tokens[-1].start_char : tokens[-1].end_char] == "sunny"


def test_tokenize_empty_and_blank_text():
    assert tokenize("") == []
    assert tokenize(" \t\n ") == []


def test_split_tokens_matches_str_split():
    text = "a  b c\r\nd"
    assert split_tokens(text) == text.split()


def test_tokenize_custom_pattern():
    """A custom boundary pattern may be a string or a compiled regex."""
    assert split_tokens("a,b,,c", ",+") == ["a", "b", "c"]
    assert split_tokens("a;b", re.compile(";")) == ["a", "b"]


def test_tokenize_rejects_non_string():
    with pytest.raises(InvalidInput):
        tokenize(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidInput):
        tokenize(b"bytes text")  # type: ignore[arg-type]


def test_tokenize_rejects_pattern_matching_empty_string():
    with pytest.raises(InvalidConfiguration):
        tokenize("a b", r"\s*")
    with pytest.raises(InvalidConfiguration):
        tokenize("a b", "(")
