from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

ISO_DATE_FORMAT = "%Y%m%dT%H%M%S"


def is_date_value(value: Any) -> bool:
    return isinstance(value, (datetime, date))


def as_utc(value: date | datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC."""

    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso_date(value: date | datetime) -> str:
    """Format a date/datetime in the compact ISO form used by the commerce UI.

    - naive datetime -> "20240115T103000"
    - aware datetime -> converted to UTC, "20240115T093000Z"
    - plain date     -> midnight, "20240115T000000"
    """

    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if value.tzinfo is not None and value.utcoffset() is not None:
        return value.astimezone(timezone.utc).strftime(ISO_DATE_FORMAT) + "Z"
    return value.strftime(ISO_DATE_FORMAT)


def parse_date(value: Any) -> Any:
    """Parse an ISO-8601 string into a datetime; other values pass through.

    Both the extended form ("2024-01-15T10:30:00Z") and the compact form
    written by `to_iso_date` ("20240115T103000Z") are accepted. Strings that
    are not ISO dates are returned unchanged.
    """

    if not isinstance(value, str) or not value.strip():
        return value
    text = value.strip()
    utc = text.endswith("Z")
    if utc:
        text = text[:-1]

    try:
        parsed = datetime.strptime(text, ISO_DATE_FORMAT)
    except ValueError:
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return value

    if utc:
        if parsed.tzinfo is not None:
            return value
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
