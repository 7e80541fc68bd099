"""Tests for version stamps."""

from datetime import datetime, timedelta, timezone

from ssh_resource.services.version import build_version


def test_utc_timestamp() -> None:
    """UTC instants are formatted as RFC 3339 with microseconds."""
    instant = datetime(2026, 10, 19, 12, 0, 0, 123456, tzinfo=timezone.utc)

    assert build_version(instant).timestamp == "2026-10-19T12:00:00.123456+00:00"


def test_converts_to_utc() -> None:
    """Other offsets are converted to UTC."""
    instant = datetime(2026, 10, 19, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))

    assert build_version(instant).timestamp == "2026-10-19T12:00:00.000000+00:00"


def test_naive_taken_as_utc() -> None:
    """Naive datetimes are treated as UTC."""
    instant = datetime(2026, 10, 19, 12, 0, 0)

    assert build_version(instant).timestamp == "2026-10-19T12:00:00.000000+00:00"


def test_later_instant_sorts_later() -> None:
    """Timestamps order the same way as the instants."""
    first = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
    second = first + timedelta(microseconds=1)

    assert build_version(first).timestamp < build_version(second).timestamp
