"""Clock angle: the angle between the hands of an analog clock face.

All intermediate work is in degrees; the conversion to radians happens
once, on the final value.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime

from datetasks.domain.instants import ensure_aware

DEGREES_PER_HOUR = 30
DEGREES_PER_MINUTE = 6


def hands_angle_degrees(hours: int, minutes: int) -> float:
    """Smaller angle between the hands at *hours*:*minutes*, in [0, 180]."""
    hour_hand = (hours % 12) * DEGREES_PER_HOUR + minutes / 2
    minute_hand = minutes * DEGREES_PER_MINUTE
    angle = abs(hour_hand - minute_hand)
    while angle > 180:
        angle = 360 - angle
    return angle


def clock_angle(value: datetime) -> float:
    """Angle in radians between the clock hands at the UTC time of *value*.

    Naive values are read in the host zone before
    converting to UTC.

    Examples:
        >>> from datetime import UTC, datetime
        >>> clock_angle(datetime(2016, 3, 5, 18, 0, tzinfo=UTC)) == math.pi
        True
    """
    utc = ensure_aware(value).astimezone(UTC)
    return hands_angle_degrees(utc.hour, utc.minute) / 180 * math.pi
