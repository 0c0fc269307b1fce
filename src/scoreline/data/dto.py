from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class Granularity(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"


@dataclass(frozen=True)
class NormalizedPoint:
    """A raw record after date normalization, keyed by "yyyy-MM-dd"."""
    date_key: str
    qs: float
    secondary_count: int


@dataclass(frozen=True)
class Bucket:
    """One aggregated point of a series: a single day or one ISO week."""
    label: str      # chart-ready text
    qs: float
    secondary_count: int
    start: date     # the day itself, or the week's Monday


@dataclass(frozen=True)
class Summary:
    average: float = 0.0
    trend_percent: float = 0.0


@dataclass
class SparklineView:
    """Everything a chart row needs for one entity."""
    level: str
    window_days: int
    granularity: Granularity
    points: List[Bucket] = field(default_factory=list)
    summary: Summary = field(default_factory=Summary)
    has_data: bool = False
    reference_date: Optional[date] = None


@dataclass
class RankedEntity:
    """Entity ordered by its mean raw QS (keyword tables' top/bottom lists)."""
    entity_id: str
    name: str
    avg_qs: float
    band: str
