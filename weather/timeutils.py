from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo


def get_zone(tz_str: str) -> ZoneInfo:
    """Return a ZoneInfo instance or raise for invalid input."""

    try:
        return ZoneInfo(tz_str)
    except Exception as exc:
        raise ValueError(f"Invalid timezone: {tz_str}") from exc


def ensure_aware(dt: datetime, tz: tzinfo) -> datetime:
    """Attach or convert timezone information to a datetime."""

    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def local_today(now: datetime, tz: tzinfo | None = None) -> date:
    """Return the calendar date of `now` as seen in `tz` (UTC default)."""

    utc = timezone.utc  # noqa: UP017
    return ensure_aware(now, utc).astimezone(tz or utc).date()
