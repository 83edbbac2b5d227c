"""Logging settings — init kwargs over ``DATETASKS_*`` env vars over defaults.

These knobs only decide how the library's own log records are rendered.
Parsing and formatting never read them.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    """How :func:`datetasks.configure_logging` renders log records.

    Attributes:
        verbose: Enable DEBUG-level output for ``datetasks``.
        log_json: Emit JSON lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DATETASKS_",
    }

    verbose: bool = False
    log_json: bool = False
