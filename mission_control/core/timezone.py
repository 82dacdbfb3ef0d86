"""Timestamp normalization utilities.

All timestamps are stored as naive UTC datetimes. Anything arriving with an
offset is converted before it reaches the database so that comparisons in
range queries line up.
"""

from datetime import UTC, datetime


def to_utc_naive(dt: datetime | None) -> datetime | None:
    """Convert a datetime to naive UTC.

    Naive input is assumed to already be UTC and is returned unchanged.

    Examples:
        >>> to_utc_naive(datetime.fromisoformat("2026-02-08T10:30:00-07:00"))
        datetime.datetime(2026, 2, 8, 17, 30)
    """
    if dt is None or dt.tzinfo is None:
        return dt
    return dt.astimezone(UTC).replace(tzinfo=None)


def utc_now() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_utc_iso(dt: datetime) -> str:
    """Render a stored timestamp as ISO 8601 UTC with a ``Z`` suffix.

    Examples:
        >>> to_utc_iso(datetime(2026, 3, 2, 10, 0))
        '2026-03-02T10:00:00Z'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")
