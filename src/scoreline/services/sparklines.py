import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union
from zoneinfo import ZoneInfo

from scoreline.config import settings
from scoreline.data.adapters import to_records
from scoreline.data.dto import SparklineView
from scoreline.domain.models import DateRange, EntityLevel, RawScoreRecord, parse_window
from scoreline.logic.aggregation import select_granularity
from scoreline.logic.series import assemble_series
from scoreline.logic.trends import TrendAnalyzer

logger = logging.getLogger("scoreline.services.sparklines")


def today(tz_name: Optional[str] = None) -> date:
    return datetime.now(ZoneInfo(tz_name or settings.window.timezone)).date()


class SparklineService:
    """
    Single entry point used for every hierarchy level (global, account, campaign,
    ad group, keyword). Reads the clock only when no reference date is given.
    """

    def __init__(self, analyzer: Optional[TrendAnalyzer] = None, allowed_days: Optional[List[int]] = None):
        self.analyzer = analyzer or TrendAnalyzer()
        self.allowed_days = allowed_days or settings.window.allowed_days

    def resolve_window(self, window: Union[int, str, DateRange, None]) -> int:
        if window is None:
            window = settings.window.default_range
        return parse_window(window, allowed=self.allowed_days)

    def build(
        self,
        level: Union[EntityLevel, str],
        items: List[Dict[str, Any]],
        window: Union[int, str, DateRange, None] = None,
        reference_now: Optional[date] = None,
    ) -> SparklineView:
        level = EntityLevel(level)
        return self.build_from_records(level, to_records(items, level), window, reference_now)

    def build_from_records(
        self,
        level: Union[EntityLevel, str],
        records: List[RawScoreRecord],
        window: Union[int, str, DateRange, None] = None,
        reference_now: Optional[date] = None,
    ) -> SparklineView:
        level = EntityLevel(level)
        window_days = self.resolve_window(window)
        reference_now = reference_now or today()

        points = assemble_series(records, window_days, reference_now)
        summary = self.analyzer.summarize(points)
        logger.debug(
            "Built %s sparkline: %d records -> %d buckets (%d days)",
            level.value, len(records), len(points), window_days,
        )
        return SparklineView(
            level=level.value,
            window_days=window_days,
            granularity=select_granularity(window_days),
            points=points,
            summary=summary,
            has_data=bool(records),
            reference_date=reference_now,
        )

    @staticmethod
    def serialize(view: SparklineView) -> Dict[str, Any]:
        return {
            "level": view.level,
            "window_days": view.window_days,
            "granularity": view.granularity.value,
            "reference_date": view.reference_date.isoformat() if view.reference_date else None,
            "has_data": view.has_data,
            "points": [
                {
                    "label": p.label,
                    "start": p.start.isoformat(),
                    "qs": p.qs,
                    "secondary_count": p.secondary_count,
                }
                for p in view.points
            ],
            "summary": {
                "average": view.summary.average,
                "trend_percent": view.summary.trend_percent,
            },
        }
