import re
from datetime import date
from typing import Any, Optional

from scoreline.data.dto import Granularity

# day.month.year as delivered by the score endpoints, e.g. "05.03.2024"
_SCORE_DATE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")

# Windows at least this long show the year in daily labels.
YEAR_LABEL_MIN_DAYS = 360

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def parse_score_date(value: Any) -> Optional[date]:
    """
    Parse a "dd.MM.yyyy" score date.
    Returns None for any other shape or for a calendar-invalid date (31.13.2024, 31.04.2024).
    """
    if not isinstance(value, str):
        return None
    match = _SCORE_DATE.match(value.strip())
    if not match:
        return None
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def to_key(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def _short(day: date) -> str:
    return f"{_MONTHS[day.month - 1]} {day.day}"


def to_display(day: date, granularity: Granularity = Granularity.DAILY, window_days: int = 0) -> str:
    """
    Chart label for a bucket.
    Daily: "Jun 1" (or "Jun 1, 2024" for windows of a year). Weekly: the short form of `day`,
    which callers pass as the week's Monday.
    """
    if granularity == Granularity.DAILY and window_days >= YEAR_LABEL_MIN_DAYS:
        return f"{_short(day)}, {day.year}"
    return _short(day)
