"""Tests for the public export surface."""

import math
from datetime import UTC, datetime

import datetasks


class TestExports:
    def test_all_names_resolve(self) -> None:
        for name in datetasks.__all__:
            assert hasattr(datetasks, name), name

    def test_version(self) -> None:
        assert isinstance(datetasks.__version__, str)

    def test_end_to_end(self) -> None:
        start = datetasks.parse_iso8601("2016-01-19T10:00:00Z")
        end = datetasks.parse_rfc2822("Tue, 19 Jan 2016 15:20:10 GMT")
        assert datetasks.format_timespan(start, end) == "05:20:10.000"
        assert datetasks.is_leap_year(start) is True
        assert datetasks.clock_angle(datetime(2016, 3, 5, 3, 0, tzinfo=UTC)) == math.pi / 2
        assert datetasks.format_iso8601(start) == "2016-01-19T10:00:00.000Z"

    def test_invalid_format_exported(self) -> None:
        assert issubclass(datetasks.InvalidFormat, ValueError)
