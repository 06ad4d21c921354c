"""Formatting helpers for timestamps, durations and text display."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def ns_to_datetime(timestamp_ns: int) -> datetime:
    """Convert Unix nanoseconds timestamp to a UTC datetime."""
    seconds, remainder = divmod(timestamp_ns, 1_000_000_000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(microseconds=remainder // 1000)


def format_datetime(dt: datetime) -> str:
    """Format datetime as ISO-8601 with millisecond precision, e.g. '2024-05-01T12:00:00.000Z'."""
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def format_duration(duration_ns: int) -> str:
    """Render a nanosecond duration as '850ms', '3.2s' or '4m05s'."""
    if duration_ns < 0:
        return "-"
    ms = duration_ns // 1_000_000
    if ms < 1000:
        return f"{ms}ms"
    seconds = duration_ns / 1_000_000_000
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m{secs:02d}s"

