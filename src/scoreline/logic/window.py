from datetime import date, timedelta
from typing import List


def window_dates(reference_now: date, window_days: int) -> List[date]:
    """
    The contiguous run of `window_days` dates ending at `reference_now` (inclusive).
    Every date is present whether or not any score exists for it.
    """
    if isinstance(window_days, bool) or not isinstance(window_days, int) or window_days <= 0:
        raise ValueError(f"window_days must be a positive integer, got {window_days!r}")
    start = reference_now - timedelta(days=window_days - 1)
    return [start + timedelta(days=offset) for offset in range(window_days)]


def week_start(day: date) -> date:
    """Monday of the ISO week containing `day`."""
    return day - timedelta(days=day.weekday())
