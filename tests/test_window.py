from datetime import date, timedelta

import pytest

from scoreline.logic.window import week_start, window_dates


@pytest.mark.parametrize("days", [1, 7, 30, 90, 365])
def test_window_is_contiguous_and_ends_at_reference(days):
    ref = date(2024, 6, 7)
    dates = window_dates(ref, days)
    assert len(dates) == days
    assert dates[-1] == ref
    assert dates[0] == ref - timedelta(days=days - 1)
    assert all(b - a == timedelta(days=1) for a, b in zip(dates, dates[1:]))


def test_window_crosses_year_boundary():
    dates = window_dates(date(2024, 1, 2), 4)
    assert dates == [date(2023, 12, 30), date(2023, 12, 31), date(2024, 1, 1), date(2024, 1, 2)]


@pytest.mark.parametrize("days", [0, -7, 7.5, "7", True])
def test_window_rejects_non_positive_or_non_int(days):
    with pytest.raises(ValueError):
        window_dates(date(2024, 6, 7), days)


def test_week_start_is_monday():
    assert week_start(date(2024, 6, 3)) == date(2024, 6, 3)   # Monday
    assert week_start(date(2024, 6, 7)) == date(2024, 6, 3)   # Friday
    assert week_start(date(2024, 6, 9)) == date(2024, 6, 3)   # Sunday
    assert week_start(date(2024, 1, 3)) == date(2024, 1, 1)
    assert week_start(date(2023, 1, 1)) == date(2022, 12, 26)
