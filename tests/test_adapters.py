import logging

import pytest

from scoreline.data.adapters import extract_scores, to_records
from scoreline.domain.models import DateRange, EntityLevel, RawScoreRecord, parse_window
from scoreline.exceptions import DataSourceError


@pytest.mark.parametrize("level,field", [
    (EntityLevel.GLOBAL, "accountCount"),
    (EntityLevel.ACCOUNT, "campaignCount"),
    (EntityLevel.CAMPAIGN, "adGroupCount"),
    (EntityLevel.AD_GROUP, "keywordCount"),
    (EntityLevel.KEYWORD, "impressionCount"),
])
def test_from_payload_reads_level_count(level, field):
    record = RawScoreRecord.from_payload({"id": 1, "date": "01.06.2024", "qs": 7.5, field: "12"}, level)
    assert record.date == "01.06.2024"
    assert record.qs == 7.5
    assert record.secondary_count == 12


def test_from_payload_falls_back_to_secondary_count():
    record = RawScoreRecord.from_payload({"date": "01.06.2024", "qs": 5, "secondaryCount": 4}, EntityLevel.ACCOUNT)
    assert record.secondary_count == 4


def test_record_coerces_bad_numbers():
    record = RawScoreRecord(date=None, qs=float("nan"), secondaryCount=None)
    assert record.date == ""
    assert record.qs == 0
    assert record.secondary_count == 0


def test_record_is_immutable():
    record = RawScoreRecord(date="01.06.2024", qs=5)
    with pytest.raises(Exception):
        record.qs = 6


def test_extract_scores_list_and_paged_shapes():
    item = {"date": "01.06.2024", "qs": 6}
    assert extract_scores({"success": True, "data": [item]}) == [item]
    assert extract_scores({"success": True, "data": {"scores": [item], "total": 1}}) == [item]
    assert extract_scores({"success": True}) == []
    assert extract_scores({"success": True, "data": {"scores": None, "total": 0}}) == []


def test_extract_scores_failures():
    with pytest.raises(DataSourceError, match="boom"):
        extract_scores({"success": False, "message": "boom", "statusCode": 500})
    with pytest.raises(DataSourceError):
        extract_scores({"success": True, "data": {"total": 3}})
    with pytest.raises(DataSourceError):
        extract_scores({"success": True, "data": "oops"})


def test_to_records():
    records = to_records([{"date": "01.06.2024", "qs": 6, "campaignCount": 2}], EntityLevel.ACCOUNT)
    assert records == [RawScoreRecord(date="01.06.2024", qs=6, secondary_count=2)]


def test_date_range_days():
    assert [r.days for r in DateRange] == [7, 30, 90, 365]


@pytest.mark.parametrize("value,days", [("7d", 7), ("1y", 365), (90, 90), ("30", 30), (DateRange.LAST_90_DAYS, 90)])
def test_parse_window(value, days):
    assert parse_window(value) == days


@pytest.mark.parametrize("value", [14, "2w", "", None])
def test_parse_window_rejects_unknown(value):
    with pytest.raises(ValueError):
        parse_window(value)


def test_to_records_skips_non_objects(caplog):
    items = [{"date": "01.06.2024", "qs": 6}, "garbage", None, 5]
    with caplog.at_level(logging.WARNING, logger="scoreline.data.adapters"):
        records = to_records(items, EntityLevel.CAMPAIGN)
    assert records == [RawScoreRecord(date="01.06.2024", qs=6)]
    assert len(caplog.records) == 3
