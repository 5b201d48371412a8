from __future__ import annotations
from datetime import datetime, timezone
from numbers import Number
from typing import Any, Optional

from dateutil import parser as dateutil_parser
from pydantic import TypeAdapter, ValidationError

from .models import InvalidFilterFormat, ValueKind

_DATETIME = TypeAdapter(datetime)

# Two defaults that disagree on year and month; a string that names a real
# calendar date parses to the same value under both.
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 1))


def _parse_free_form(text: str) -> Optional[datetime]:
    try:
        first, second = (dateutil_parser.parse(text, default=d) for d in _DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if first != second:
        return None
    return first


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse `value` as a calendar date, returning None when it is not one.

    ISO 8601 dates and datetimes, and numeric strings taken as Unix time,
    are read by pydantic's lax datetime parsing. Anything else goes to
    dateutil, so "2024/01/15", "January 15, 2024" and "Jan 1 2024" are
    dates too; a missing day defaults to the 1st, while a string without
    a year and month ("May", "10:00") is not a date.
    """
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        return _DATETIME.validate_python(text)
    except ValidationError:
        return _parse_free_form(text)


def to_timestamp(value: datetime) -> float:
    """Epoch milliseconds; naive datetimes are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp() * 1000


def classify_value(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.NULL

    # bool is an int subclass but is not a supported filter value
    if isinstance(value, bool) or not isinstance(value, (str, Number)):
        raise InvalidFilterFormat(
            "Filter values must be a number, string, date, or null."
        )

    if isinstance(value, str):
        if parse_date(value) is not None:
            return ValueKind.DATE
        return ValueKind.STRING

    return ValueKind.NUMBER
