from __future__ import annotations

import random

from patterncraft.core.summary import EMPTY_SUMMARY, compute_summary


def test_summary_values():
    summary = compute_summary([4.0, 1.0, 7.0])
    assert summary.min == 1.0
    assert summary.max == 7.0
    assert summary.avg == 4.0
    assert not summary.is_empty


def test_empty_series_uses_explicit_marker():
    summary = compute_summary([])
    assert summary is EMPTY_SUMMARY
    assert summary.is_empty
    assert summary.to_dict() == {"min": None, "max": None, "avg": None}


def test_average_stays_within_bounds():
    assert compute_summary([0.1, 0.1, 0.1]).avg == 0.1
    rng = random.Random(7)
    for _ in range(50):
        values = [rng.uniform(-1e6, 1e6) for _ in range(rng.randint(1, 40))]
        summary = compute_summary(values)
        assert summary.min <= summary.avg <= summary.max
