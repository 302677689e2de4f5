"""Clock helpers - all timestamps are UTC."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def db_utcnow() -> datetime:
    """Naive UTC now, matching the TIMESTAMP columns in DuckDB."""
    return utcnow().replace(tzinfo=None)
