from __future__ import annotations

from typing import List, Pattern

from .config import DEFAULT_SPLIT_PATTERN, compile_split_pattern
from .errors import InvalidInput
from .models import Token


def tokenize(
    text: str, pattern: str | Pattern[str] = DEFAULT_SPLIT_PATTERN
) -> List[Token]:
    """Split text on maximal runs matched by pattern into positioned tokens."""
    if not isinstance(text, str):
        raise InvalidInput(f"Text must be a string, got {type(text).__name__}.")
    boundary = compile_split_pattern(pattern)

    tokens: List[Token] = []
    cursor = 0
    for match in boundary.finditer(text):
        if match.start() > cursor:
            tokens.append(
                Token(
                    text=text[cursor : match.start()],
                    position=len(tokens),
                    start_char=cursor,
                    end_char=match.start(),
                )
            )
        cursor = match.end()
    if cursor < len(text):
        tokens.append(
            Token(
                text=text[cursor:],
                position=len(tokens),
                start_char=cursor,
                end_char=len(text),
            )
        )
    return tokens


def split_tokens(
    text: str, pattern: str | Pattern[str] = DEFAULT_SPLIT_PATTERN
) -> List[str]:
    """Return only the token strings of ``tokenize``."""
    return [token.text for token in tokenize(text, pattern)]
