"""Date helpers used for timestamps and date-range filters."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from .errors import ValidationError


def utcnow() -> datetime:
    """Naive UTC timestamp, the format stored in DateTime columns."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


def today() -> date:
    return utcnow().date()


def parse_date(value, field: str = "date") -> date | None:
    """Parse an ISO date (or datetime) string. Empty values yield ``None``."""

    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError:
        raise ValidationError(
            f"{field} must be an ISO 8601 date.", field=field
        ) from None


def week_end(week_start: date) -> date:
    """Last day of the seven-day week starting at ``week_start``."""

    return week_start + timedelta(days=6)


def build_date_range_filter(
    start: date | None = None, end: date | None = None, field: str = "date"
) -> dict:
    """Return an inclusive range filter for the query engine."""

    bounds = {}
    if start is not None:
        bounds["gte"] = start
    if end is not None:
        bounds["lte"] = end
    return {field: bounds} if bounds else {}
