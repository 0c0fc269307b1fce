from scoreline.logic.aggregation import (
    WEEKLY_THRESHOLD_DAYS,
    aggregate,
    aggregate_daily,
    aggregate_weekly,
    select_granularity,
)
from scoreline.logic.dates import parse_score_date, to_display, to_key
from scoreline.logic.index import build_score_index
from scoreline.logic.scoring import EntityScores, ScoringConfig, ScoringEngine
from scoreline.logic.series import assemble_series
from scoreline.logic.trends import TrendAnalyzer
from scoreline.logic.window import week_start, window_dates

__all__ = [
    "WEEKLY_THRESHOLD_DAYS",
    "EntityScores",
    "ScoringConfig",
    "ScoringEngine",
    "TrendAnalyzer",
    "aggregate",
    "aggregate_daily",
    "aggregate_weekly",
    "assemble_series",
    "build_score_index",
    "parse_score_date",
    "select_granularity",
    "to_display",
    "to_key",
    "week_start",
    "window_dates",
]
