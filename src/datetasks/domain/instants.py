"""Date-time value helpers: epoch milliseconds and timezone anchoring.

A date-time value is a plain :class:`datetime.datetime`. Naive values are
read in the zone passed explicitly, or in the host zone when none is.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

LOCAL = "local"
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

_ONE_MS = timedelta(milliseconds=1)
_UTC_NAMES = frozenset({"utc", "z", "gmt"})


def resolve_timezone(name: str) -> tzinfo | None:
    """Map a timezone name to a tzinfo.

    Returns None for ``"local"``, which callers treat as the host zone.

    Raises:
        ValueError: If *name* is not a known IANA zone.
    """
    key = name.strip()
    if key.lower() == LOCAL:
        return None
    if key.lower() in _UTC_NAMES:
        return UTC
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Unknown timezone: {name!r}"
        raise ValueError(msg) from exc


def _default_zone(default_tz: tzinfo | str | None) -> tzinfo | None:
    if default_tz is None or isinstance(default_tz, tzinfo):
        return default_tz
    return resolve_timezone(default_tz)


def ensure_aware(value: datetime, default_tz: tzinfo | str | None = None) -> datetime:
    """Return *value* unchanged if it carries an offset, else anchor it.

    Naive values are placed in *default_tz* (a tzinfo or zone name), or
    in the host zone when *default_tz* is None.
    """
    if value.tzinfo is not None and value.utcoffset() is not None:
        return value
    zone = _default_zone(default_tz)
    if zone is None:
        return value.astimezone()
    return value.replace(tzinfo=zone)


def to_epoch_ms(value: datetime) -> int:
    """Milliseconds since 1970-01-01T00:00:00Z, floored."""
    return (ensure_aware(value) - EPOCH) // _ONE_MS


def from_epoch_ms(ms: int, tz: tzinfo = UTC) -> datetime:
    """Build an aware datetime from epoch milliseconds.

    Examples:
        >>> from_epoch_ms(0).isoformat()
        '1970-01-01T00:00:00+00:00'
    """
    return (EPOCH + timedelta(milliseconds=ms)).astimezone(tz)
