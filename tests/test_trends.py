from datetime import date, timedelta

import pytest

from scoreline.data.dto import Bucket, Summary
from scoreline.logic.trends import TrendAnalyzer


def series_of(*values):
    start = date(2024, 6, 1)
    return [
        Bucket(label=str(i), qs=v, secondary_count=0, start=start + timedelta(days=i))
        for i, v in enumerate(values)
    ]


@pytest.fixture
def analyzer():
    return TrendAnalyzer()


def test_average_excludes_zeros(analyzer):
    assert analyzer.average(series_of(0, 0, 6, 8)) == 7


def test_average_of_empty_or_all_zero(analyzer):
    assert analyzer.average([]) == 0
    assert analyzer.average(series_of(0, 0, 0)) == 0


def test_trend_first_to_last_non_zero(analyzer):
    assert analyzer.trend(series_of(0, 4, 0, 0, 8, 0)) == 100


def test_trend_negative(analyzer):
    assert analyzer.trend(series_of(8, 0, 6)) == -25


def test_trend_uses_positions_among_non_zero(analyzer):
    # a lone middle point counts as first when earlier buckets are empty
    assert analyzer.trend(series_of(0, 0, 5, 0, 0, 0, 0, 10, 0)) == 100


def test_trend_needs_two_points(analyzer):
    assert analyzer.trend(series_of(0, 7, 0)) == 0
    assert analyzer.trend([]) == 0


def test_summarize(analyzer):
    summary = analyzer.summarize(series_of(6, 0, 8, 0, 0, 0, 0))
    assert summary.average == 7
    assert summary.trend_percent == pytest.approx(33.333, rel=1e-3)
    assert analyzer.summarize([]) == Summary(average=0, trend_percent=0)
