from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from statistics import mean
from typing import Callable, List, Sequence

from .assembly import assemble_ngrams
from .windowing import STRATEGIES, count_windows, generate_windows, validate_window_size

LOGGER = logging.getLogger(__name__)

REFERENCE_NAME = "sklearn"


@dataclass(slots=True)
class BenchmarkResult:
    """Timing summary for one way of building n-grams."""

    name: str
    n: int
    num_tokens: int
    num_ngrams: int
    best_seconds: float
    mean_seconds: float
    matches_direct: bool = True


def reference_ngrams(
    tokens: Sequence[str], n: int, separator: str = " "
) -> List[str]:
    """
    Build n-grams with scikit-learn's word analyzer.

    The analyzer sees positional placeholders rather than the tokens, so
    tokens containing spaces survive its space-joined output; each placeholder
    n-gram is mapped back to its tokens and joined with separator.
    """
    from sklearn.feature_extraction.text import CountVectorizer

    placeholders = [str(index) for index in range(len(tokens))]
    analyzer = CountVectorizer(
        tokenizer=lambda text: placeholders,
        token_pattern=None,
        lowercase=False,
        ngram_range=(n, n),
    ).build_analyzer()
    return [
        separator.join(tokens[int(index)] for index in gram.split(" "))
        for gram in analyzer("")
    ]


def benchmark_strategies(
    tokens: Sequence[str],
    n: int,
    repeats: int = 5,
    strategies: Sequence[str] | None = None,
    include_reference: bool = False,
    separator: str = " ",
) -> List[BenchmarkResult]:
    """Time every requested strategy building the full n-gram list."""
    validate_window_size(n)
    repeats = max(1, repeats)
    names = list(strategies) if strategies else sorted(STRATEGIES)
    expected = list(assemble_ngrams(generate_windows(tokens, n, "direct"), separator))

    builders: List[tuple[str, Callable[[], List[str]]]] = [
        (name, _strategy_builder(tokens, n, name, separator)) for name in names
    ]
    if include_reference:
        builders.append(
            (REFERENCE_NAME, lambda: reference_ngrams(tokens, n, separator))
        )

    results: List[BenchmarkResult] = []
    for name, build in builders:
        timings: List[float] = []
        output: List[str] = []
        for _ in range(repeats):
            started = time.perf_counter()
            output = build()
            timings.append(time.perf_counter() - started)
        result = BenchmarkResult(
            name=name,
            n=n,
            num_tokens=len(tokens),
            num_ngrams=len(output),
            best_seconds=min(timings),
            mean_seconds=mean(timings),
            matches_direct=output == expected,
        )
        LOGGER.info(
            "%s: %d %d-grams, best %.6fs over %d runs",
            name,
            result.num_ngrams,
            n,
            result.best_seconds,
            repeats,
        )
        results.append(result)

    if any(r.num_ngrams != count_windows(len(tokens), n) for r in results):
        LOGGER.warning("At least one builder produced an unexpected n-gram count.")
    return results


def _strategy_builder(
    tokens: Sequence[str], n: int, name: str, separator: str
) -> Callable[[], List[str]]:
    def build() -> List[str]:
        return list(assemble_ngrams(generate_windows(tokens, n, name), separator))

    return build
