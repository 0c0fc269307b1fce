import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from scoreline.data.dto import RankedEntity
from scoreline.domain.models import RawScoreRecord
from scoreline.logic.dates import parse_score_date

logger = logging.getLogger("scoreline.logic.scoring")


@dataclass
class ScoringConfig:
    # Lower bounds of the QS bands, highest first
    excellent_min: float = 9.0
    good_min: float = 7.0
    average_min: float = 4.0
    default_top_n: int = 5


@dataclass
class EntityScores:
    entity_id: str
    name: str
    records: Sequence[RawScoreRecord]


class ScoringEngine:
    """
    Per-entity score helpers used by tables: bands, latest change and rankings.
    Works on raw records, not on the densified series.
    """
    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def quality_band(self, qs: float) -> str:
        if qs >= self.config.excellent_min: return "9-10"
        if qs >= self.config.good_min: return "7-8"
        if qs >= self.config.average_min: return "4-6"
        return "1-3"

    def latest_change(self, records: Iterable[RawScoreRecord]) -> Tuple[float, float]:
        """
        (current, change %) from the two most recent dated records.
        Change is 0 unless both scores are non-zero; rounded to one decimal.
        """
        dated = []
        for record in records:
            day = parse_score_date(record.date)
            if day is None:
                logger.warning("Invalid date in score data: %r", record.date)
                continue
            dated.append((day, record.qs))
        dated.sort(key=lambda item: item[0], reverse=True)

        current = dated[0][1] if dated else 0.0
        previous = dated[1][1] if len(dated) > 1 else 0.0
        if not (current and previous):
            return current, 0.0
        return current, round(((current - previous) / previous) * 100, 1)

    def rank_entities(
        self,
        entities: Iterable[EntityScores],
        top_n: Optional[int] = None,
        ascending: bool = False,
    ) -> List[RankedEntity]:
        """Top (or bottom, with ascending=True) entities by mean raw QS; entities without scores are skipped."""
        limit = self.config.default_top_n if top_n is None else top_n
        ranked = []
        for entity in entities:
            if not entity.records:
                continue
            avg = sum(r.qs for r in entity.records) / len(entity.records)
            ranked.append(RankedEntity(
                entity_id=entity.entity_id,
                name=entity.name,
                avg_qs=avg,
                band=self.quality_band(avg),
            ))
        ranked.sort(key=lambda r: r.avg_qs, reverse=not ascending)
        return ranked[:limit]
