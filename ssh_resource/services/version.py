"""Version stamp for completed executions."""

from datetime import datetime, timezone

from ssh_resource.models import Version


def build_version(completed_at: datetime) -> Version:
    """Stamp a version with the completion time.

    The timestamp is RFC 3339 in UTC with microsecond precision, e.g.
    ``2026-10-19T12:00:00.123456+00:00``. Naive datetimes are taken as UTC.
    """
    if completed_at.tzinfo is None:
        completed_at = completed_at.replace(tzinfo=timezone.utc)
    else:
        completed_at = completed_at.astimezone(timezone.utc)
    return Version(timestamp=completed_at.isoformat(timespec="microseconds"))
