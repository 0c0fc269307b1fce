import logging
from typing import Dict, Iterable

from scoreline.data.dto import NormalizedPoint
from scoreline.domain.models import RawScoreRecord
from scoreline.logic.dates import parse_score_date, to_key

logger = logging.getLogger("scoreline.logic.index")


def build_score_index(records: Iterable[RawScoreRecord]) -> Dict[str, NormalizedPoint]:
    """
    Map "yyyy-MM-dd" -> point for every record with a valid date.
    Records with unparseable dates are dropped with a warning; a later record for the
    same day replaces an earlier one.
    """
    index: Dict[str, NormalizedPoint] = {}
    for record in records:
        day = parse_score_date(record.date)
        if day is None:
            logger.warning("Invalid date in score data: %r", record.date)
            continue
        key = to_key(day)
        index[key] = NormalizedPoint(date_key=key, qs=record.qs, secondary_count=record.secondary_count)
    return index
