"""
Timestamp helpers: UTC clock and ISO-8601 parsing/formatting
"""
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MonotonicClock:
    """UTC clock at millisecond precision that never returns the same instant twice"""

    def __init__(self, source: Clock = utcnow):
        self._source = source
        self._last: Optional[datetime] = None

    def __call__(self) -> datetime:
        now = self._source()
        now = now.replace(microsecond=now.microsecond // 1000 * 1000)
        if self._last is not None and now <= self._last:
            now = self._last + timedelta(milliseconds=1)
        self._last = now
        return now


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string; values without an offset are taken as UTC.

    Raises ValueError for anything that is not a parseable string.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"not an ISO-8601 timestamp: {value!r}")
    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render as ISO-8601 UTC with millisecond precision and a trailing Z"""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"
