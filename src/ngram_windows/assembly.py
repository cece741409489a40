from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .errors import InvalidInput


def assemble_ngram(window: Sequence[str], separator: str = " ") -> str:
    """Join a window's tokens with separator, keeping their order."""
    if not window:
        raise InvalidInput("Cannot assemble an n-gram from an empty window.")
    return separator.join(window)


def assemble_ngrams(
    windows: Iterable[Sequence[str]], separator: str = " "
) -> Iterator[str]:
    """Assemble every window produced by a window generator."""
    for window in windows:
        yield assemble_ngram(window, separator)
