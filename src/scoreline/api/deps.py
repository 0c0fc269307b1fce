from __future__ import annotations

from typing import Generator, Optional

from scoreline.logic.scoring import ScoringEngine
from scoreline.logic.trends import TrendAnalyzer
from scoreline.services.exporter import SeriesExporter
from scoreline.services.sparklines import SparklineService

# Global/Cached instances
_sparkline_instance: Optional[SparklineService] = None


def get_sparkline_service() -> SparklineService:
    global _sparkline_instance
    if _sparkline_instance is None:
        _sparkline_instance = SparklineService(analyzer=TrendAnalyzer())
    return _sparkline_instance


def get_scoring_engine() -> Generator[ScoringEngine, None, None]:
    yield ScoringEngine()


def get_exporter() -> Generator[SeriesExporter, None, None]:
    yield SeriesExporter()
