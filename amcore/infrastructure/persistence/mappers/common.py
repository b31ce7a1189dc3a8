from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on the way back; stored values are always UTC."""
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value
