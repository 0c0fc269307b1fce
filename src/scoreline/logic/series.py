from datetime import date
from typing import Iterable, List

from scoreline.data.dto import Bucket
from scoreline.domain.models import RawScoreRecord
from scoreline.logic.aggregation import aggregate
from scoreline.logic.index import build_score_index
from scoreline.logic.window import window_dates


def assemble_series(records: Iterable[RawScoreRecord], window_days: int, reference_now: date) -> List[Bucket]:
    """
    Dense, chronological bucket list for the window ending at `reference_now`.
    Buckets are returned as aggregated; values outside 0-10 pass through untouched.
    """
    index = build_score_index(records)
    return aggregate(index, window_dates(reference_now, window_days))
