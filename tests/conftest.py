from datetime import date

import pytest
from fastapi.testclient import TestClient

from scoreline.api.main import create_app
from scoreline.domain.models import RawScoreRecord
from scoreline.services.sparklines import SparklineService

# Friday; a 7-day window ending here covers 01.06.2024 - 07.06.2024
REFERENCE_NOW = date(2024, 6, 7)


def make_records(*rows):
    """rows of (date, qs) or (date, qs, secondary_count)."""
    records = []
    for row in rows:
        day, qs = row[0], row[1]
        count = row[2] if len(row) > 2 else 0
        records.append(RawScoreRecord(date=day, qs=qs, secondary_count=count))
    return records


@pytest.fixture
def reference_now():
    return REFERENCE_NOW


@pytest.fixture
def sample_records():
    return make_records(("01.06.2024", 6, 2), ("03.06.2024", 8, 3))


@pytest.fixture
def sparkline_service():
    return SparklineService()


@pytest.fixture
def client():
    return TestClient(create_app())
