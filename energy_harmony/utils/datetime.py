from datetime import datetime, timedelta, timezone


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(value: datetime) -> datetime:
    """Midnight of the most recent Sunday, `value`'s own day included."""
    days_since_sunday = (value.weekday() + 1) % 7
    return start_of_day(value) - timedelta(days=days_since_sunday)


def day_of_week(value: datetime) -> int:
    """Sunday-first weekday number, Sun=0 .. Sat=6."""
    return (value.weekday() + 1) % 7


def to_naive_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; aware inputs are converted to match."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
