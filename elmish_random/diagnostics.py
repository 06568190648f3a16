"""
Diagnostics: draw many values from a Generator and summarise them.

No effect on the Generator itself beyond consuming draws from its Source.
"""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .generator import Generator


@dataclass(frozen=True)
class SampleMetrics:
    """Snapshot of one sampling run."""

    sample_count: int
    distinct_count: int
    minimum: Optional[Any]
    maximum: Optional[Any]
    latency_ms: float
    warnings: list


def sample(generator: Generator, n: int) -> List[Any]:
    """Return `n` fresh draws."""
    return [generator.next() for _ in range(n)]


def frequencies(generator: Generator, n: int) -> Counter:
    """Count how often each value shows up in `n` draws. Values must be hashable."""
    return Counter(sample(generator, n))


def collect_metrics(generator: Generator, n: int) -> SampleMetrics:
    """
    Draw `n` values and report count, spread, and timing.

    minimum/maximum are None when the values cannot be ordered.
    """
    start = time.perf_counter()
    values = sample(generator, n)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    try:
        distinct = len(set(values))
    except TypeError:
        # unhashable values (lists, dicts)
        distinct = len({repr(v) for v in values})

    minimum = maximum = None
    if values:
        try:
            minimum, maximum = min(values), max(values)
        except TypeError:
            pass

    warnings: list[str] = []
    if n >= 100 and distinct == 1:
        warnings.append(
            f"Single distinct value across {n} draws: constant generator or stuck source"
        )

    return SampleMetrics(
        sample_count=len(values),
        distinct_count=distinct,
        minimum=minimum,
        maximum=maximum,
        latency_ms=round(elapsed_ms, 2),
        warnings=warnings,
    )


def compare_to_weights(
    generator: Generator,
    candidates: Sequence[Tuple[Any, float]],
    n: int,
) -> Dict[str, Any]:
    """
    Compare observed frequencies of `n` draws against the distribution
    implied by `candidates` (value, weight).

    n == 0 reports every observed frequency as 0.0; all-zero weights
    report every expected frequency as 0.0.

    Returns dict with:
        expected, observed   {value: relative frequency}
        max_abs_deviation    largest |observed - expected|
        unexpected           values drawn that are not candidates
    """
    total = sum(w for _, w in candidates)
    expected: Dict[Any, float] = {}
    for value, weight in candidates:
        share = weight / total if total else 0.0
        expected[value] = expected.get(value, 0.0) + share

    counts = frequencies(generator, n)
    observed = {value: counts.get(value, 0) / n if n else 0.0 for value in expected}
    unexpected = sorted((v for v in counts if v not in expected), key=repr)

    deviation = max(abs(observed[v] - expected[v]) for v in expected)

    return {
        "expected": expected,
        "observed": observed,
        "max_abs_deviation": round(deviation, 4),
        "unexpected": unexpected,
    }
