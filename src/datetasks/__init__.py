"""datetasks — standalone date/time utilities.

RFC 2822 and ISO 8601 parsing, leap years, timespan formatting, and
the clock-hand angle. Call :func:`configure_logging` to see the library's
debug output rendered through structlog.
"""

from datetasks.config.logging import configure_logging
from datetasks.domain.calendar import is_leap_year
from datetasks.domain.clock import clock_angle
from datetasks.domain.errors import InvalidFormat
from datetasks.domain.parsing import format_iso8601, parse_iso8601, parse_rfc2822
from datetasks.domain.timespan import format_timespan

__version__ = "0.1.0"

__all__ = [
    "InvalidFormat",
    "clock_angle",
    "configure_logging",
    "format_iso8601",
    "format_timespan",
    "is_leap_year",
    "parse_iso8601",
    "parse_rfc2822",
]
