"""
Timezone-aware time handling with ISO 8601 'Z' formatting.
"""

import re
from datetime import datetime, timezone
from typing import Any, Optional

# YYYY-MM-DDThh:mm:ss(.fraction)?Z
ISO8601_Z_PATTERN = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?Z$"
)


def now() -> datetime:
    """
    Get current UTC datetime with timezone awareness.

    Returns:
        datetime: Current UTC datetime with timezone info
    """
    return datetime.now(timezone.utc)


def to_iso8601_z(dt: datetime) -> str:
    """
    Convert datetime to ISO 8601 string with 'Z' suffix for UTC.

    Millisecond precision is used when it is lossless, microseconds otherwise.

    Example:
        "2025-09-15T14:30:00.000Z"
    """
    if dt.tzinfo is None:
        # Assume UTC if no timezone info
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    timespec = "milliseconds" if dt.microsecond % 1000 == 0 else "microseconds"
    return dt.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"


def parse_iso8601_z(iso_string: str) -> Optional[datetime]:
    """
    Parse a strict ISO 8601 UTC string to a timezone-aware datetime.

    Returns:
        The datetime, or None if the string does not match the pattern or
        names an impossible date (e.g. month 13).

    Example:
        parse_iso8601_z("2025-09-15T14:30:00Z") -> datetime(2025, 9, 15, 14, 30, 0, tzinfo=timezone.utc)
    """
    match = ISO8601_Z_PATTERN.match(iso_string)
    if not match:
        return None

    seconds_part, fraction = match.groups()
    try:
        dt = datetime.strptime(seconds_part, "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        return None

    if fraction:
        # Sub-microsecond digits are dropped
        dt = dt.replace(microsecond=int(fraction[:6].ljust(6, "0")))

    return dt.replace(tzinfo=timezone.utc)


def serialize_timestamps(data: Any) -> Any:
    """Copy of ``data`` with every datetime, at any depth, as an ISO 8601 string."""
    if isinstance(data, datetime):
        return to_iso8601_z(data)
    if isinstance(data, list):
        return [serialize_timestamps(value) for value in data]
    if isinstance(data, dict):
        return {key: serialize_timestamps(value) for key, value in data.items()}
    return data


def deserialize_timestamps(data: Any) -> Any:
    """Copy of ``data`` with every valid ISO 8601 'Z' string parsed to a datetime.

    Strings that match the pattern but name an impossible date stay strings.
    """
    if isinstance(data, str):
        parsed = parse_iso8601_z(data)
        return parsed if parsed is not None else data
    if isinstance(data, list):
        return [deserialize_timestamps(value) for value in data]
    if isinstance(data, dict):
        return {key: deserialize_timestamps(value) for key, value in data.items()}
    return data
