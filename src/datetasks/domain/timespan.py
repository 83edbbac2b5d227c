"""Timespan formatting, the distance between two instants as HH:mm:ss.sss.

Hours are never wrapped at 24; padding only guarantees a minimum width.
A span whose end precedes its start is formatted by magnitude with a
leading ``-``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from datetasks.domain.instants import MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND, to_epoch_ms


@dataclass(frozen=True)
class TimespanParts:
    """Broken-down span; every field is non-negative."""

    negative: bool
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        return (
            f"{sign}{self.hours:02d}:{self.minutes:02d}:"
            f"{self.seconds:02d}.{self.milliseconds:03d}"
        )


def split_ms(delta: int) -> TimespanParts:
    """Split a millisecond count with truncating integer divisions."""
    magnitude = abs(delta)
    return TimespanParts(
        negative=delta < 0,
        hours=magnitude // MS_PER_HOUR,
        minutes=(magnitude % MS_PER_HOUR) // MS_PER_MINUTE,
        seconds=(magnitude % MS_PER_MINUTE) // MS_PER_SECOND,
        milliseconds=magnitude % MS_PER_SECOND,
    )


def split_timespan(start: datetime, end: datetime) -> TimespanParts:
    """Break ``end - start`` into hours, minutes, seconds, and milliseconds."""
    return split_ms(to_epoch_ms(end) - to_epoch_ms(start))


def format_timespan(start: datetime, end: datetime) -> str:
    """Format the span between *start* and *end* as ``HH:mm:ss.sss``.

    Examples:
        >>> from datetime import datetime
        >>> format_timespan(datetime(2000, 1, 1, 10), datetime(2000, 1, 1, 15, 20, 10, 453000))
        '05:20:10.453'
    """
    return str(split_timespan(start, end))
