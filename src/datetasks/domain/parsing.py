"""RFC 2822 and ISO 8601 parsing.

Both parsers share one shape: hand the string to the free-form parser
first (it accepts the many legal variants of each format), and only when
that fails fall back to a fixed positional decomposition from
:mod:`datetasks.domain.tokens`.

INVARIANT: A parser either returns a timezone-aware datetime or raises
:class:`InvalidFormat`. There is no "invalid date" return value.
"""

from __future__ import annotations

import logging
import re
import warnings
from datetime import UTC, datetime, timedelta, tzinfo

from dateutil import parser as date_parser

from datetasks.domain.errors import BAD_FIELD, UNPARSEABLE, FormatError, InvalidFormat
from datetasks.domain.instants import ensure_aware
from datetasks.domain.tokens import (
    Iso8601Fields,
    TokenError,
    tokenize_iso8601,
    tokenize_rfc2822,
)

logger = logging.getLogger(__name__)

# "GMT+01" means one hour east of GMT. dateutil reads it POSIX-style
# (sign inverted), so such designators are rewritten to "+0100" first.
_ZONE_WITH_OFFSET = re.compile(
    r"\b(?:GMT|UTC|UT)\s*([+-])(\d{1,2})(?::?(\d{2}))?\b",
    re.IGNORECASE,
)

# Obsolete North American zone names from RFC 2822 section 4.3.
RFC2822_ZONES: dict[str, int] = {
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}


def _numeric_offset(match: re.Match[str]) -> str:
    sign, hours, minutes = match.groups()
    return f"{sign}{int(hours):02d}{minutes or '00'}"


def normalize_zone_offsets(text: str) -> str:
    """Rewrite ``GMT+hh[:mm]`` style designators as ``+hhmm``.

    Examples:
        >>> normalize_zone_offsets("Sun, 17 May 1998 03:00:00 GMT+01")
        'Sun, 17 May 1998 03:00:00 +0100'
    """
    return _ZONE_WITH_OFFSET.sub(_numeric_offset, text)


def parse_freeform(text: str, *, default_tz: tzinfo | str | None = None) -> datetime | None:
    """Parse *text* with dateutil's free-form parser.

    Returns None when the string is not recognised, including when it
    names a zone abbreviation outside :data:`RFC2822_ZONES` (dateutil
    would otherwise drop the zone and hand back a naive value). Naive
    results are anchored to *default_tz*, or the host zone when None.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("error", date_parser.UnknownTimezoneWarning)
        try:
            parsed = date_parser.parse(normalize_zone_offsets(text), tzinfos=RFC2822_ZONES)
        except (ValueError, OverflowError, date_parser.UnknownTimezoneWarning):
            return None
    return ensure_aware(parsed, default_tz)


def _fallback(fmt: str, text: str) -> None:
    logger.debug("parse.fallback", extra={"date_format": fmt, "date_text": text})


def _reject(fmt: str, text: str, error: FormatError) -> InvalidFormat:
    logger.debug(
        "parse.rejected",
        extra={"date_format": fmt, "date_text": text, "error_code": error.code},
    )
    return InvalidFormat(error)


def parse_rfc2822(text: str, *, default_tz: tzinfo | str | None = None) -> datetime:
    """Parse an RFC 2822 date, e.g. ``"Tue, 26 Jan 2016 13:48:02 GMT"``.

    Raises:
        InvalidFormat: If the fallback tokenizer cannot find every field,
            or the reassembled string is still not a date.
    """
    parsed = parse_freeform(text, default_tz=default_tz)
    if parsed is not None:
        return parsed

    _fallback("rfc2822", text)
    result = tokenize_rfc2822(text)
    if isinstance(result, TokenError):
        raise _reject("rfc2822", text, result.error)

    canonical = result.fields.canonical()
    reparsed = parse_freeform(canonical, default_tz=default_tz)
    if reparsed is None:
        error = FormatError(
            code=UNPARSEABLE,
            message=f"Not a recognizable RFC 2822 date: {canonical!r}",
            detail={"value": text, "canonical": canonical},
        )
        raise _reject("rfc2822", text, error)
    return reparsed


def _from_iso_fields(text: str, fields: Iso8601Fields) -> datetime:
    """Build the instant from positional fields plus the offset minutes."""
    try:
        base = datetime(
            fields.year,
            fields.month,
            fields.day,
            fields.hours,
            fields.minutes,
            fields.seconds,
            tzinfo=UTC,
        )
    except ValueError as exc:
        error = FormatError(
            code=BAD_FIELD,
            message=f"ISO 8601 fields out of range: {exc}",
            detail={"value": text},
        )
        raise _reject("iso8601", text, error) from exc
    return base + timedelta(minutes=fields.offset_total_minutes)


def parse_iso8601(text: str, *, default_tz: tzinfo | str | None = None) -> datetime:
    """Parse an ISO 8601 date, e.g. ``"2016-01-19T16:07:37+00:00"``.

    Raises:
        InvalidFormat: If the fallback cannot find the date or time
            component, or a positional field is not a valid number.
    """
    parsed = parse_freeform(text, default_tz=default_tz)
    if parsed is not None:
        return parsed

    _fallback("iso8601", text)
    result = tokenize_iso8601(text)
    if isinstance(result, TokenError):
        raise _reject("iso8601", text, result.error)
    return _from_iso_fields(text, result.fields)


def format_iso8601(value: datetime) -> str:
    """Render *value* as ``YYYY-MM-DDTHH:MM:SS.sssZ`` in UTC.

    Naive values are read in the host zone.
    """
    utc = ensure_aware(value).astimezone(UTC)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
        f".{utc.microsecond // 1000:03d}Z"
    )
