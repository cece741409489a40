"""
Sliding-window generation over token sequences.

Every strategy yields the same windows in the same order: for a sequence of
length L and window size n, the tuples ``tokens[i:i+n]`` for ``i`` in
``0..L-n``. They differ only in how each window is built.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import islice
from typing import Dict, Iterator, Sequence, Tuple, Type, TypeVar

from .errors import InvalidConfiguration

T = TypeVar("T")


def count_windows(length: int, n: int) -> int:
    """Number of complete windows of size n over length tokens."""
    return max(0, length - n + 1)


def validate_window_size(n: object) -> int:
    """Return n unchanged when it is a positive integer, else raise."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidConfiguration(f"n must be a positive integer, got {n!r}.")
    return n


class WindowStrategy(ABC):
    """Abstract producer of consecutive fixed-size token windows."""

    name: str = ""

    @abstractmethod
    def windows(self, tokens: Sequence[T], n: int) -> Iterator[Tuple[T, ...]]:
        """Yield every window of size n in increasing start order."""
        raise NotImplementedError


class DirectIndexStrategy(WindowStrategy):
    """Slice ``tokens[i:i+n]`` for each start index."""

    name = "direct"

    def windows(self, tokens: Sequence[T], n: int) -> Iterator[Tuple[T, ...]]:
        for start in range(count_windows(len(tokens), n)):
            yield tuple(tokens[start : start + n])


class NestedIndexStrategy(WindowStrategy):
    """Build each window by indexing the n offsets from its start."""

    name = "nested"

    def windows(self, tokens: Sequence[T], n: int) -> Iterator[Tuple[T, ...]]:
        for start in range(count_windows(len(tokens), n)):
            yield tuple(tokens[start + offset] for offset in range(n))


class ShiftedSequenceStrategy(WindowStrategy):
    """
    Zip n views of the sequence, view k advanced by k positions.

    Each view is an ``islice`` over the shared sequence bounded to exactly
    ``L - n + 1`` items, so the views hold references rather than copies and
    the final window is never dropped.
    """

    name = "shifted"

    def windows(self, tokens: Sequence[T], n: int) -> Iterator[Tuple[T, ...]]:
        total = count_windows(len(tokens), n)
        if total == 0:
            return iter(())
        views = [islice(tokens, shift, shift + total) for shift in range(n)]
        return zip(*views)


STRATEGIES: Dict[str, Type[WindowStrategy]] = {
    DirectIndexStrategy.name: DirectIndexStrategy,
    NestedIndexStrategy.name: NestedIndexStrategy,
    ShiftedSequenceStrategy.name: ShiftedSequenceStrategy,
}


def create_strategy(name: str) -> WindowStrategy:
    """Factory for building window strategies by name."""
    normalized = name.lower().strip() if isinstance(name, str) else ""
    if normalized not in STRATEGIES:
        raise InvalidConfiguration(
            f"Unknown window strategy '{name}'. "
            f"Expected one of: {', '.join(sorted(STRATEGIES))}."
        )
    return STRATEGIES[normalized]()


def generate_windows(
    tokens: Sequence[T],
    n: int,
    strategy: str | WindowStrategy = "direct",
) -> Iterator[Tuple[T, ...]]:
    """
    Return an iterator over the windows of size n.

    n and the strategy are checked eagerly so configuration errors surface
    before any window is produced. n larger than the sequence yields nothing.
    """
    validate_window_size(n)
    impl = strategy if isinstance(strategy, WindowStrategy) else create_strategy(strategy)
    return impl.windows(tokens, n)
