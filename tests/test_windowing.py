import pytest

from ngram_windows.errors import InvalidConfiguration
from ngram_windows.windowing import (
    STRATEGIES,
    ShiftedSequenceStrategy,
    WindowStrategy,
    count_windows,
    create_strategy,
    generate_windows,
)

TOKENS = ["My", "short", "and", "exquisite", "sentence"]


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
@pytest.mark.parametrize("length", [0, 1, 2, 5, 9])
@pytest.mark.parametrize("n", [1, 2, 3, 5, 10])
def test_strategies_produce_exact_slices(strategy, length, n):
    """Every strategy yields max(0, L-n+1) windows equal to tokens[i:i+n]."""
    tokens = [f"t{i}" for i in range(length)]
    windows = list(generate_windows(tokens, n, strategy))

    assert len(windows) == max(0, length - n + 1) == count_windows(length, n)
    for start, window in enumerate(windows):
        assert window == tuple(tokens[start : start + n])


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_consecutive_windows_overlap(strategy):
    windows = list(generate_windows(TOKENS, 3, strategy))
    for current, following in zip(windows, windows[1:]):
        assert current[1:] == following[:-1]


def test_single_token_windows():
    assert list(generate_windows(TOKENS, 1)) == [(token,) for token in TOKENS]


def test_shifted_strategy_keeps_last_window():
    """The final window survives even when n equals the sequence length."""
    strategy = ShiftedSequenceStrategy()
    assert list(strategy.windows(TOKENS, 5)) == [tuple(TOKENS)]
    assert list(strategy.windows(TOKENS, 4))[-1] == tuple(TOKENS[1:])
    assert list(strategy.windows(TOKENS, 6)) == []


def test_strategies_accept_any_sequence():
    assert list(generate_windows("abcd", 2, "shifted")) == [
        ("a", "b"),
        ("b", "c"),
        ("c", "d"),
    ]
    assert list(generate_windows((1, 2, 3), 2, "nested")) == [(1, 2), (2, 3)]


@pytest.mark.parametrize("n", [0, -1, 1.5, True, "2"])
def test_invalid_window_size_raises_eagerly(n):
    """Errors surface on the call itself, before iteration starts."""
    with pytest.raises(InvalidConfiguration):
        generate_windows(TOKENS, n)


def test_create_strategy_by_name():
    assert isinstance(create_strategy(" Shifted "), ShiftedSequenceStrategy)
    with pytest.raises(InvalidConfiguration):
        create_strategy("bogus")


def test_generate_windows_accepts_strategy_instance():
    class FirstWindowOnly(WindowStrategy):
        name = "custom"

        def windows(self, tokens, n):
            yield tuple(tokens[:n])

    assert list(generate_windows(TOKENS, 2, FirstWindowOnly())) == [("My", "short")]
