"""Tests for duration statistics."""

import pytest

from file_server_bench.stats import DurationStats


def test_empty_stats_have_no_average():
    stats = DurationStats("upload")

    assert stats.count == 0
    assert stats.average is None
    assert stats.summary() is None
    assert not stats


def test_average_is_arithmetic_mean():
    stats = DurationStats("download")
    for duration in (1.0, 2.0, 4.5):
        stats.record(duration)

    assert stats.count == 3
    assert stats.average == pytest.approx(2.5)


def test_summary():
    stats = DurationStats("download")
    for duration in (2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0):
        stats.record(duration)

    summary = stats.summary()

    assert summary.count == 8
    assert summary.average == pytest.approx(5.0)
    assert summary.minimum == 2.0
    assert summary.maximum == 9.0
    assert summary.std_deviation == pytest.approx(2.0)
