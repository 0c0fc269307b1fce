from dataclasses import dataclass
from datetime import date
from typing import Dict, List

from scoreline.data.dto import Bucket, Granularity, NormalizedPoint
from scoreline.logic.dates import to_display, to_key
from scoreline.logic.window import week_start

# Windows longer than this are folded into weeks. Not configurable.
WEEKLY_THRESHOLD_DAYS = 30

_MISSING = NormalizedPoint(date_key="", qs=0.0, secondary_count=0)


def select_granularity(window_days: int) -> Granularity:
    return Granularity.WEEKLY if window_days > WEEKLY_THRESHOLD_DAYS else Granularity.DAILY


def resolve(index: Dict[str, NormalizedPoint], day: date) -> NormalizedPoint:
    """Value for one window day; days without a score are zero-filled."""
    return index.get(to_key(day), _MISSING)


def aggregate_daily(index: Dict[str, NormalizedPoint], days: List[date]) -> List[Bucket]:
    window_days = len(days)
    buckets = []
    for day in days:
        point = resolve(index, day)
        buckets.append(Bucket(
            label=to_display(day, Granularity.DAILY, window_days),
            qs=point.qs,
            secondary_count=point.secondary_count,
            start=day,
        ))
    return buckets


@dataclass
class _WeekAccumulator:
    qs_sum: float = 0.0
    days: int = 0
    secondary_count: int = 0


def aggregate_weekly(index: Dict[str, NormalizedPoint], days: List[date]) -> List[Bucket]:
    """
    Fold window days into Monday-started weeks.
    The mean counts every window day of the week, zero-filled ones included, and the
    secondary count is the one of the last day seen in that week.
    """
    weeks: Dict[date, _WeekAccumulator] = {}
    for day in days:
        point = resolve(index, day)
        acc = weeks.setdefault(week_start(day), _WeekAccumulator())
        acc.qs_sum += point.qs
        acc.days += 1
        acc.secondary_count = point.secondary_count

    return [
        Bucket(
            label=to_display(monday, Granularity.WEEKLY),
            qs=acc.qs_sum / acc.days if acc.days else 0.0,
            secondary_count=acc.secondary_count,
            start=monday,
        )
        for monday, acc in weeks.items()
    ]


def aggregate(index: Dict[str, NormalizedPoint], days: List[date]) -> List[Bucket]:
    if select_granularity(len(days)) == Granularity.WEEKLY:
        return aggregate_weekly(index, days)
    return aggregate_daily(index, days)
