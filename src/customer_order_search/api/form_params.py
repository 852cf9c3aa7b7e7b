"""Parsing of the flat form fields sent by the customer/order grid."""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..search.models import ASCENDING, DESCENDING

ENVIRONMENT_HEADER = "Environment"


def parse_sorting(sorting: Optional[str]) -> Tuple[str, str]:
    """Split a sorting value into (direction, field).

    The first character encodes the direction ('a' -> "Asc", 'd' -> "Desc",
    anything else -> ""); the rest is the field name.

    >>> parse_sorting("alast_name")
    ('Asc', 'last_name')
    """

    if not sorting or not sorting.strip():
        return "", ""

    direction = {"a": ASCENDING, "d": DESCENDING}.get(sorting[0], "")
    field = sorting[1:] if len(sorting) > 1 else ""
    return direction, field


def parse_int(value: Optional[str], default: int = 0) -> int:
    if not value or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def parse_fields(delimited: Optional[str]) -> List[str]:
    if not delimited or not delimited.strip():
        return []
    return [f for f in delimited.split("|") if f.strip()]


def parse_environment(headers: Optional[str]) -> str:
    """Return the Environment value from "name:value|name:value" pairs."""

    if not headers or not headers.strip():
        return ""
    for item in headers.split("|"):
        name, sep, value = item.partition(":")
        if name == ENVIRONMENT_HEADER:
            # only the segment up to the next ':' is the value
            return value.split(":", 1)[0] if sep else ""
    return ""


def clean_optional(value: Optional[str]) -> str:
    if value and value.strip():
        return value
    return ""
