"""Tests for ISO 8601 timestamp helpers."""

from datetime import datetime, timedelta, timezone

from onegoal.util.timestamps import (
    deserialize_timestamps,
    now,
    parse_iso8601_z,
    serialize_timestamps,
    to_iso8601_z,
)


def test_now_is_timezone_aware():
    """now() is timezone aware."""
    assert now().tzinfo is not None


def test_to_iso8601_z_uses_milliseconds():
    """Millisecond precision is used when lossless."""
    dt = datetime(2025, 9, 15, 14, 30, 0, 123000, tzinfo=timezone.utc)
    assert to_iso8601_z(dt) == "2025-09-15T14:30:00.123Z"


def test_to_iso8601_z_keeps_microseconds_when_needed():
    """Microseconds are kept when needed."""
    dt = datetime(2025, 9, 15, 14, 30, 0, 123456, tzinfo=timezone.utc)
    assert to_iso8601_z(dt) == "2025-09-15T14:30:00.123456Z"


def test_to_iso8601_z_converts_to_utc():
    """Offsets are converted to UTC."""
    dt = datetime(2025, 9, 15, 16, 30, tzinfo=timezone(timedelta(hours=2)))
    assert to_iso8601_z(dt) == "2025-09-15T14:30:00.000Z"


def test_naive_datetime_is_treated_as_utc():
    """Naive datetimes are UTC."""
    assert to_iso8601_z(datetime(2025, 1, 1)) == "2025-01-01T00:00:00.000Z"


def test_parse_without_fraction():
    """Test parsing without a fraction."""
    assert parse_iso8601_z("2025-09-15T14:30:00Z") == datetime(
        2025, 9, 15, 14, 30, tzinfo=timezone.utc
    )


def test_parse_with_long_fraction_truncates_to_microseconds():
    """Long fractions are truncated."""
    parsed = parse_iso8601_z("2025-09-15T14:30:00.1234567Z")
    assert parsed.microsecond == 123456


def test_parse_rejects_non_matching_and_impossible_dates():
    """Other formats and impossible dates give None."""
    assert parse_iso8601_z("2025-09-15") is None
    assert parse_iso8601_z("2025-09-15T14:30:00+02:00") is None
    assert parse_iso8601_z("2025-13-45T00:00:00Z") is None
    assert parse_iso8601_z("not a date") is None


def test_walkers_reach_nested_values():
    """Both walkers recurse into lists and dicts."""
    dt = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    data = {"a": [dt, {"b": dt}], "c": 1, "d": None, "e": "text"}

    serialized = serialize_timestamps(data)
    assert serialized == {
        "a": ["2025-01-02T03:04:05.000Z", {"b": "2025-01-02T03:04:05.000Z"}],
        "c": 1,
        "d": None,
        "e": "text",
    }
    assert deserialize_timestamps(serialized) == data
