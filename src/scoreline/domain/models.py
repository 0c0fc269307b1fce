from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger("scoreline.domain")


class EntityLevel(str, Enum):
    """
    Level of the account hierarchy a score series belongs to.
    Each level reports a different secondary count alongside its QS.
    """
    GLOBAL = "global"
    ACCOUNT = "account"
    CAMPAIGN = "campaign"
    AD_GROUP = "ad_group"
    KEYWORD = "keyword"

    @property
    def count_field(self) -> str:
        return _COUNT_FIELDS[self]


_COUNT_FIELDS = {
    EntityLevel.GLOBAL: "accountCount",
    EntityLevel.ACCOUNT: "campaignCount",
    EntityLevel.CAMPAIGN: "adGroupCount",
    EntityLevel.AD_GROUP: "keywordCount",
    EntityLevel.KEYWORD: "impressionCount",
}


class DateRange(str, Enum):
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"
    LAST_YEAR = "1y"

    @property
    def days(self) -> int:
        return {"7d": 7, "30d": 30, "90d": 90, "1y": 365}[self.value]


def parse_window(value: Any, allowed: Optional[Iterable[int]] = None) -> int:
    """
    Resolve a window from a range label ("90d") or a day count (90, "90").
    Raises ValueError for anything outside the allowed set.
    """
    allowed_days = set(allowed) if allowed is not None else {r.days for r in DateRange}
    if isinstance(value, DateRange):
        days = value.days
    elif isinstance(value, str) and value.strip() in {r.value for r in DateRange}:
        days = DateRange(value.strip()).days
    else:
        try:
            days = int(str(value).strip())
        except ValueError:
            raise ValueError(f"Unknown window: {value!r}") from None
    if days not in allowed_days:
        raise ValueError(f"Window of {days} days is not one of {sorted(allowed_days)}")
    return days


def _coerce_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Non-numeric %s in score record: %r; using 0", field_name, value)
        return 0.0
    if not math.isfinite(number):
        logger.warning("Non-finite %s in score record: %r; using 0", field_name, value)
        return 0.0
    return number


class RawScoreRecord(BaseModel):
    """
    One daily measurement as delivered by the score endpoints.
    `date` is kept as the raw "dd.MM.yyyy" string; parsing happens in the index.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str
    qs: float = 0.0
    secondary_count: int = Field(default=0, alias="secondaryCount")

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("qs", mode="before")
    @classmethod
    def _coerce_qs(cls, value: Any) -> float:
        return _coerce_number(value, "qs")

    @field_validator("secondary_count", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int:
        return int(_coerce_number(value, "secondary count"))

    @classmethod
    def from_payload(cls, item: dict[str, Any], level: EntityLevel) -> "RawScoreRecord":
        """Map a level-specific score item (campaignCount, keywordCount, ...) onto a record."""
        count = item.get(level.count_field)
        if count is None:
            count = item.get("secondaryCount", item.get("secondary_count", 0))
        return cls(date=item.get("date"), qs=item.get("qs", 0), secondary_count=count)


class ScoreEnvelope(BaseModel):
    """Standard response wrapper used by the score endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    data: Any = None
    message: Optional[str] = None
    errors: list[str] = Field(default_factory=list)
    status_code: Optional[int] = Field(default=None, alias="statusCode")
    timestamp: Optional[str] = None
