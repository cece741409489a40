from __future__ import annotations


class NgramError(Exception):
    """Base class for errors raised while building n-grams."""


class InvalidConfiguration(NgramError, ValueError):
    """Raised when window size, separator, or split pattern are unusable."""


class InvalidInput(NgramError, TypeError):
    """Raised when documents or their text have the wrong shape."""


class MissingFieldError(NgramError, KeyError):
    """Raised when a document entry lacks its identifier or text field."""

    def __init__(self, index: int, field: str) -> None:
        self.index = index
        self.field = field
        super().__init__(f"Document at position {index} is missing field '{field}'.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
