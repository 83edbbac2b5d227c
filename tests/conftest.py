"""Shared pytest fixtures for datetasks tests."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Generator

import pytest


def _apply_tz(monkeypatch: pytest.MonkeyPatch, spec: str) -> None:
    monkeypatch.setenv("TZ", spec)
    time.tzset()


@pytest.fixture(autouse=True)
def _pinned_host(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test on a UTC host with no ``DATETASKS_*`` env vars.

    Naive values are read in the host zone, so the zone is fixed to keep
    results independent of the machine. The ``datetasks`` logger is
    restored afterwards.
    """
    monkeypatch.delenv("DATETASKS_VERBOSE", raising=False)
    monkeypatch.delenv("DATETASKS_LOG_JSON", raising=False)
    if hasattr(time, "tzset"):
        _apply_tz(monkeypatch, "UTC0")
    pkg = logging.getLogger("datetasks")
    handlers, level, propagate = pkg.handlers[:], pkg.level, pkg.propagate
    yield
    pkg.handlers, pkg.propagate = handlers, propagate
    pkg.setLevel(level)
    monkeypatch.undo()
    if hasattr(time, "tzset"):
        time.tzset()


@pytest.fixture
def host_tz(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Switch the host zone to a POSIX TZ spec, e.g. ``"XXX-2"`` for UTC+2."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    return lambda spec: _apply_tz(monkeypatch, spec)
