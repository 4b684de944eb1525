"""
DateTime utilities for consistent timezone handling.
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get the current UTC time with timezone awareness.

    Returns:
        datetime: Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def milliseconds_since(start: datetime) -> int:
    """
    Whole milliseconds elapsed since a point in time.

    Args:
        start: Start of the interval; a naive datetime is taken as UTC

    Returns:
        int: Elapsed milliseconds (negative if start is in the future)
    """
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)

    return int((utc_now() - start).total_seconds() * 1000)
