from dataclasses import asdict
from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from scoreline.api.deps import get_exporter, get_scoring_engine, get_sparkline_service
from scoreline.data.adapters import extract_scores, to_records
from scoreline.domain.models import EntityLevel, RawScoreRecord
from scoreline.logic.scoring import EntityScores, ScoringEngine
from scoreline.services.exporter import SeriesExporter
from scoreline.services.sparklines import SparklineService

router = APIRouter()


class SeriesRequest(BaseModel):
    scores: Optional[list[dict[str, Any]]] = None
    envelope: Optional[dict[str, Any]] = None  # raw {success, data, ...} response
    days: Optional[int] = None
    range: Optional[str] = Field(None, description="7d|30d|90d|1y")
    reference_date: Optional[date] = None

    def items(self) -> list[dict[str, Any]]:
        if self.envelope is not None:
            return extract_scores(self.envelope)
        return self.scores or []


class RankedEntityRequest(BaseModel):
    id: str
    name: str = ""
    scores: list[dict[str, Any]] = Field(default_factory=list)


class RankingRequest(BaseModel):
    entities: list[RankedEntityRequest] = Field(default_factory=list)


def _build(level: EntityLevel, body: SeriesRequest, records: list[RawScoreRecord], svc: SparklineService):
    window = body.days if body.days is not None else body.range
    try:
        return svc.build_from_records(level, records, window=window, reference_now=body.reference_date)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/series/{level}")
def build_series(
    level: EntityLevel,
    body: SeriesRequest,
    svc: SparklineService = Depends(get_sparkline_service),
    engine: ScoringEngine = Depends(get_scoring_engine),
):
    records = to_records(body.items(), level)
    view = _build(level, body, records, svc)
    current, change = engine.latest_change(records)
    payload = svc.serialize(view)
    payload["latest"] = {"qs": current, "change_percent": change, "band": engine.quality_band(current)}
    return payload


@router.post("/series/{level}/export")
def export_series(
    level: EntityLevel,
    body: SeriesRequest,
    name: str = Query("series", description="Entity name used in the file name"),
    svc: SparklineService = Depends(get_sparkline_service),
    exporter: SeriesExporter = Depends(get_exporter),
):
    view = _build(level, body, to_records(body.items(), level), svc)
    path = exporter.export(view, name=name)
    return {"path": str(path), "buckets": len(view.points)}


@router.post("/rankings/{level}")
def rank_entities(
    level: EntityLevel,
    body: RankingRequest,
    top_n: int = Query(5, ge=1, le=100),
    ascending: bool = Query(False, description="True for the lowest scoring entities"),
    engine: ScoringEngine = Depends(get_scoring_engine),
):
    entities = [
        EntityScores(entity_id=e.id, name=e.name, records=to_records(e.scores, level))
        for e in body.entities
    ]
    return [asdict(r) for r in engine.rank_entities(entities, top_n=top_n, ascending=ascending)]
