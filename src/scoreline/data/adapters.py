from __future__ import annotations

import logging
from typing import Any, List

from pydantic import ValidationError

from scoreline.domain.models import EntityLevel, RawScoreRecord, ScoreEnvelope
from scoreline.exceptions import DataSourceError

logger = logging.getLogger("scoreline.data.adapters")


def extract_scores(envelope: ScoreEnvelope | dict[str, Any]) -> List[dict[str, Any]]:
    """
    Pull the score items out of an API response wrapper.
    `data` is either the list itself or {"scores": [...], "total": n}.
    """
    if isinstance(envelope, dict):
        try:
            envelope = ScoreEnvelope.model_validate(envelope)
        except ValidationError as exc:
            raise DataSourceError(f"Malformed score envelope: {exc}") from exc

    if not envelope.success:
        detail = envelope.message or "; ".join(envelope.errors) or "upstream reported failure"
        raise DataSourceError(f"Score request failed: {detail}")

    data = envelope.data
    if data is None:
        return []
    if isinstance(data, dict):
        if "scores" not in data:
            raise DataSourceError("Score envelope data has no 'scores' list")
        data = data["scores"] or []
    if not isinstance(data, list):
        raise DataSourceError(f"Score envelope data must be a list, got {type(data).__name__}")
    return [item for item in data if isinstance(item, dict)]


def to_records(items: List[Any], level: EntityLevel) -> List[RawScoreRecord]:
    records = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning(
                "Skipping %s score item %d: expected an object, got %s",
                level.value, position, type(item).__name__,
            )
            continue
        records.append(RawScoreRecord.from_payload(item, level))
    logger.debug("Normalized %d %s score items", len(records), level.value)
    return records
