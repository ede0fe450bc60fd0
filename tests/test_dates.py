"""Tests for the date helpers."""

from datetime import date, datetime, timedelta, timezone

import pytest

from utils.dates import parse_date, today, utcnow, week_end
from utils.errors import ValidationError


def test_utcnow_is_naive_utc():
    before = datetime.now(timezone.utc).replace(tzinfo=None)
    stamp = utcnow()
    after = datetime.now(timezone.utc).replace(tzinfo=None)

    assert stamp.tzinfo is None
    assert before <= stamp <= after
    assert today() in (before.date(), after.date())


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-02-29", date(2024, 2, 29)),
        ("2024-02-29T23:00:00Z", date(2024, 2, 29)),
        (datetime(2024, 3, 1, 8, 30), date(2024, 3, 1)),
        (date(2024, 3, 2), date(2024, 3, 2)),
        ("", None),
        (None, None),
    ],
)
def test_parse_date(raw, expected):
    assert parse_date(raw) == expected


def test_parse_date_names_the_field():
    with pytest.raises(ValidationError) as excinfo:
        parse_date("next tuesday", "weekStart")

    assert excinfo.value.field == "weekStart"


def test_week_end_is_six_days_later():
    start = date(2024, 12, 30)

    assert week_end(start) == date(2025, 1, 5)
    assert week_end(start) - start == timedelta(days=6)
