"""Conversions between stored timestamps and epoch milliseconds."""

from datetime import datetime, timezone


def to_millis(value: datetime) -> int:
    # SQLite hands back naive datetimes; everything is written in UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)
