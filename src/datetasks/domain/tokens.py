"""Fallback tokenizers for RFC 2822 and ISO 8601 date strings.

Both tokenizers run only after the free-form parser has rejected the
input. They never raise: every outcome is either a success model
(:class:`Rfc2822Tokens` / :class:`Iso8601Tokens`) holding the extracted
fields, or a :class:`TokenError` carrying a :class:`FormatError` that
names the field which could not be found. ``ok`` tags which one it is.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from datetasks.domain.errors import BAD_FIELD, MISSING_FIELD, FormatError

RFC2822_TOKEN_NAMES = ("weekday", "day", "month", "year", "time", "timezone")

# Fixed character offsets into the ISO 8601 date and time components.
ISO_DATE_SLICES: dict[str, slice] = {
    "year": slice(0, 4),
    "month": slice(5, 7),
    "day": slice(8, 10),
}
ISO_TIME_SLICES: dict[str, slice] = {
    "hours": slice(0, 2),
    "minutes": slice(3, 5),
    "seconds": slice(6, 8),
}
ISO_OFFSET_SLICES: dict[str, slice] = {
    "offset_hours": slice(0, 2),
    "offset_minutes": slice(3, 5),
}


class Rfc2822Fields(BaseModel):
    """Raw textual fields of an RFC 2822 date, weekday dropped."""

    model_config = {"frozen": True}

    day: str
    month: str
    year: str
    hours: str
    minutes: str
    seconds: str
    timezone: str

    def canonical(self) -> str:
        """Reassemble as ``"day month year hh:mm:ss zone"``."""
        return (
            f"{self.day} {self.month} {self.year} "
            f"{self.hours}:{self.minutes}:{self.seconds} {self.timezone}"
        )


class Iso8601Fields(BaseModel):
    """Numeric fields of an ISO 8601 date-time; month is 1-based."""

    model_config = {"frozen": True}

    year: int
    month: int
    day: int
    hours: int
    minutes: int
    seconds: int
    offset_hours: int = 0
    offset_minutes: int = 0

    @property
    def offset_total_minutes(self) -> int:
        return self.offset_hours * 60 + self.offset_minutes


class TokenError(BaseModel):
    """Failed tokenizer outcome carrying the reason."""

    model_config = {"frozen": True}

    ok: Literal[False] = False
    error: FormatError

    @classmethod
    def build(cls, code: str, message: str, **detail: object) -> TokenError:
        return cls(error=FormatError(code=code, message=message, detail=detail))


class Rfc2822Tokens(BaseModel):
    """Successful RFC 2822 tokenizer outcome."""

    model_config = {"frozen": True}

    ok: Literal[True] = True
    fields: Rfc2822Fields


class Iso8601Tokens(BaseModel):
    """Successful ISO 8601 tokenizer outcome."""

    model_config = {"frozen": True}

    ok: Literal[True] = True
    fields: Iso8601Fields


def tokenize_rfc2822(text: str) -> Rfc2822Tokens | TokenError:
    """Split an RFC 2822 string into its positional fields.

    The string is split on single spaces into
    ``[weekday, day, month, year, time, timezone]``; the weekday is
    discarded and a trailing comma on the day is stripped. The time token
    is split on ``:`` into hours, minutes, and seconds.

    Examples:
        >>> tokenize_rfc2822("Sun, 17 May 1998 03:00:00 GMT").fields.canonical()
        '17 May 1998 03:00:00 GMT'
    """
    parts = text.split(" ")
    if len(parts) > len(RFC2822_TOKEN_NAMES):
        return TokenError.build(
            BAD_FIELD,
            f"Expected {len(RFC2822_TOKEN_NAMES)} space-separated tokens, got {len(parts)}",
            value=text,
        )
    parts += [""] * (len(RFC2822_TOKEN_NAMES) - len(parts))
    tokens = dict(zip(RFC2822_TOKEN_NAMES, parts, strict=True))

    time_parts = tokens["time"].split(":")
    time_parts += [""] * (3 - len(time_parts))
    hours, minutes, seconds = time_parts[:3]

    candidate = {
        "day": tokens["day"].replace(",", "", 1),
        "month": tokens["month"],
        "year": tokens["year"],
        "hours": hours,
        "minutes": minutes,
        "seconds": seconds,
        "timezone": tokens["timezone"],
    }
    missing = [name for name, value in candidate.items() if not value]
    if missing:
        return TokenError.build(
            MISSING_FIELD,
            f"Missing RFC 2822 field(s): {', '.join(missing)}",
            missing=missing,
            value=text,
        )
    return Rfc2822Tokens(fields=Rfc2822Fields(**candidate))


def _slice_numeric(
    source: str,
    slices: dict[str, slice],
    *,
    required: bool,
) -> tuple[dict[str, int], FormatError | None]:
    """Cut fixed-width numeric fields out of *source*.

    Empty optional fields become 0. Empty required fields and non-numeric
    fields produce an error.
    """
    values: dict[str, int] = {}
    for name, span in slices.items():
        raw = source[span]
        if not raw:
            if required:
                msg = f"Missing ISO 8601 field: {name}"
                return values, FormatError(code=MISSING_FIELD, message=msg, detail={"field": name})
            values[name] = 0
            continue
        if not raw.isdecimal():
            msg = f"ISO 8601 field {name} is not numeric: {raw!r}"
            return values, FormatError(
                code=BAD_FIELD, message=msg, detail={"field": name, "value": raw}
            )
        values[name] = int(raw)
    return values, None


def tokenize_iso8601(text: str) -> Iso8601Tokens | TokenError:
    """Split an ISO 8601 string into numeric fields by fixed offsets.

    The string is split on ``T`` into date and time-with-zone parts. A
    trailing ``Z`` is dropped and the remainder split on ``+`` into the
    time component and a positive UTC offset. Offsets written with ``-``
    are not recognised and leave the offset at zero.
    """
    parts = text.split("T")
    date_part = parts[0]
    zone_part = parts[1] if len(parts) > 1 else ""
    if zone_part.endswith("Z"):
        zone_part = zone_part[:-1]
    time_part, _, offset_part = zone_part.partition("+")

    missing = [
        name for name, value in (("date", date_part), ("time", time_part)) if not value
    ]
    if missing:
        return TokenError.build(
            MISSING_FIELD,
            f"Missing ISO 8601 component(s): {', '.join(missing)}",
            missing=missing,
            value=text,
        )

    values: dict[str, int] = {}
    for source, slices, required in (
        (date_part, ISO_DATE_SLICES, True),
        (time_part, ISO_TIME_SLICES, True),
        (offset_part, ISO_OFFSET_SLICES, False),
    ):
        sliced, error = _slice_numeric(source, slices, required=required)
        if error is not None:
            return TokenError(error=error)
        values.update(sliced)
    return Iso8601Tokens(fields=Iso8601Fields(**values))
