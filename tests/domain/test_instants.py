"""Tests for epoch milliseconds and timezone anchoring."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta, timezone

import pytest

from datetasks.domain.instants import (
    EPOCH,
    ensure_aware,
    from_epoch_ms,
    resolve_timezone,
    to_epoch_ms,
)

PLUS_TWO = timezone(timedelta(hours=2))


class TestResolveTimezone:
    def test_local_is_none(self) -> None:
        assert resolve_timezone("local") is None
        assert resolve_timezone("LOCAL") is None

    @pytest.mark.parametrize("name", ["UTC", "utc", "Z", "GMT"])
    def test_utc_aliases(self, name: str) -> None:
        assert resolve_timezone(name) is UTC

    def test_unknown_zone_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown timezone"):
            resolve_timezone("Not/AZone")


class TestEnsureAware:
    def test_aware_value_untouched(self) -> None:
        value = datetime(2016, 1, 19, 8, 0, tzinfo=PLUS_TWO)
        assert ensure_aware(value) is value

    def test_naive_with_tzinfo(self) -> None:
        anchored = ensure_aware(datetime(2016, 1, 19, 8, 0), PLUS_TWO)
        assert anchored.tzinfo is PLUS_TWO
        assert anchored.hour == 8

    def test_naive_with_zone_name(self) -> None:
        anchored = ensure_aware(datetime(2016, 1, 19, 8, 0), "UTC")
        assert anchored == datetime(2016, 1, 19, 8, 0, tzinfo=UTC)

    def test_naive_uses_host_zone(self, host_tz: Callable[[str], None]) -> None:
        host_tz("XXX-2")
        anchored = ensure_aware(datetime(2016, 1, 19, 8, 0))
        assert anchored.utcoffset() == timedelta(hours=2)
        assert anchored == datetime(2016, 1, 19, 6, 0, tzinfo=UTC)

    def test_environment_does_not_pick_zone(
        self, host_tz: Callable[[str], None], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        host_tz("XXX-2")
        monkeypatch.setenv("DATETASKS_DEFAULT_TIMEZONE", "UTC")
        anchored = ensure_aware(datetime(2016, 1, 19, 8, 0))
        assert anchored.utcoffset() == timedelta(hours=2)

    def test_naive_local(self) -> None:
        anchored = ensure_aware(datetime(2016, 1, 19, 8, 0), "local")
        assert anchored.utcoffset() is not None
        assert anchored.hour == 8


class TestEpochMs:
    def test_epoch_is_zero(self) -> None:
        assert to_epoch_ms(EPOCH) == 0

    def test_known_instant(self) -> None:
        value = datetime(2016, 1, 19, 8, 7, 37, tzinfo=UTC)
        assert to_epoch_ms(value) == 1_453_190_857_000

    def test_offset_does_not_change_instant(self) -> None:
        utc = datetime(2016, 1, 19, 8, 7, 37, tzinfo=UTC)
        assert to_epoch_ms(utc.astimezone(PLUS_TWO)) == to_epoch_ms(utc)

    def test_sub_millisecond_floors(self) -> None:
        assert to_epoch_ms(datetime(1970, 1, 1, 0, 0, 1, 500, tzinfo=UTC)) == 1000
        assert to_epoch_ms(datetime(1969, 12, 31, 23, 59, 59, 999500, tzinfo=UTC)) == -1

    def test_from_epoch_ms(self) -> None:
        assert from_epoch_ms(1_453_190_857_250) == datetime(
            2016, 1, 19, 8, 7, 37, 250000, tzinfo=UTC
        )

    def test_from_epoch_ms_in_zone(self) -> None:
        value = from_epoch_ms(0, PLUS_TWO)
        assert value.hour == 2
        assert value == EPOCH
