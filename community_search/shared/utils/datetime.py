"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def parse_timestamp(value: datetime | str | int | float | None) -> datetime | None:
    """
    Coerce a source timestamp into a UTC-aware datetime.

    Content items arrive from different stores: ISO-8601 strings (with or
    without a trailing 'Z'), datetimes, or millisecond Unix timestamps.

    Args:
        value: Raw timestamp value

    Returns:
        UTC-aware datetime, or None when value is empty

    Raises:
        ValueError: If a string is not valid ISO-8601
        TypeError: If value is not a string, number or datetime
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, (int, float)):
        return from_timestamp_ms_utc(int(value))
    if not isinstance(value, str):
        raise TypeError(f"unsupported timestamp type: {type(value).__name__}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def from_timestamp_ms_utc(timestamp_ms: int) -> datetime:
    """
    Create a UTC-aware datetime from a millisecond Unix timestamp.
    Common in JavaScript/APIs that use milliseconds.

    Args:
        timestamp_ms: Unix timestamp in milliseconds

    Returns:
        UTC-aware datetime
    """
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)


def days_between(earlier: datetime, later: datetime) -> float:
    """Return the (fractional) number of days from earlier to later."""
    return (later - earlier).total_seconds() / 86400
