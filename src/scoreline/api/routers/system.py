from fastapi import APIRouter

from scoreline.config import settings
from scoreline.domain.models import DateRange
from scoreline.logic.aggregation import select_granularity

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok", "version": settings.app.version}


@router.get("/ranges")
def ranges():
    """Range picker options with the bucket granularity each one renders with."""
    return [
        {"label": r.value, "days": r.days, "granularity": select_granularity(r.days).value}
        for r in DateRange
        if r.days in settings.window.allowed_days
    ]
