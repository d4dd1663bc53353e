"""RFC 3339 date-time text as used by Atom (RFC 4287 section 3.3)."""

import re
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as date_parser

from .errors import TimestampInvalid

# date-time = full-date "T" full-time; fractional seconds are optional.
_RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt](?:[01]\d|2[0-3]):[0-5]\d:[0-5]\d(?:\.\d+)?"
    r"(?:[Zz]|[+-](?:[01]\d|2[0-3]):[0-5]\d)",
    re.ASCII,
)


def parse_timestamp(text: str) -> datetime:
    """Parse RFC 3339 text into a timezone-aware UTC datetime.

    Accepts the same instant with or without fractional seconds. Digits
    beyond microsecond precision are truncated.

    Raises:
        TimestampInvalid: If the text does not match the profile
    """
    if not isinstance(text, str) or not _RFC3339_PATTERN.fullmatch(text):
        raise TimestampInvalid(text)

    try:
        return date_parser.isoparse(text).astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise TimestampInvalid(text) from e


def _to_utc(value: datetime) -> datetime:
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as e:
        raise TimestampInvalid(value, f"Timestamp is out of range in UTC: {value!r}") from e


def format_timestamp(value: datetime) -> str:
    """Format an aware datetime as RFC 3339 text in UTC.

    Milliseconds are written when they carry the whole fraction, otherwise
    microseconds, so that ``parse_timestamp`` restores the same instant.

    Raises:
        TimestampInvalid: If the datetime is naive or not representable in UTC
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise TimestampInvalid(value, f"Timestamp must be timezone-aware: {value!r}")

    utc_value = _to_utc(value)
    timespec = "milliseconds" if utc_value.microsecond % 1000 == 0 else "microseconds"
    return utc_value.isoformat(timespec=timespec).replace("+00:00", "Z")


def coerce_timestamp(value: Any) -> datetime:
    """Accept an aware datetime or RFC 3339 text."""
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            raise TimestampInvalid(value, f"Timestamp must be timezone-aware: {value!r}")
        # Must be representable in UTC.
        _to_utc(value)
        return value
    if isinstance(value, str):
        return parse_timestamp(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a timestamp")


def optional_timestamp(value: Any) -> datetime | None:
    if value is None:
        return None
    return coerce_timestamp(value)
