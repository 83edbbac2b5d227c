"""structlog rendering for the ``datetasks`` logger.

The library logs through stdlib ``logging`` and attaches no handler of its
own on import. :func:`configure_logging` opts in to rendered output:

- Human (default): console-formatted lines to stderr
- JSON (``log_json=True``): one JSON object per line to stderr

Only the ``datetasks`` logger is touched; the root logger and any global
structlog configuration belong to the host application.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from datetasks.config.settings import LoggingSettings

LOGGER_NAME = "datetasks"


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> LoggingSettings:
    """Attach a structlog-rendered stderr handler to the ``datetasks`` logger.

    Arguments left as None fall back to ``DATETASKS_VERBOSE`` and
    ``DATETASKS_LOG_JSON``, then to False. Calling again replaces the
    handler rather than adding another.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Returns:
        The settings that were applied.
    """
    overrides: dict[str, Any] = {}
    if verbose is not None:
        overrides["verbose"] = verbose
    if log_json is not None:
        overrides["log_json"] = log_json
    settings = LoggingSettings(**overrides)

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    pkg_logger = logging.getLogger(LOGGER_NAME)
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if settings.verbose else logging.WARNING)
    pkg_logger.propagate = False
    return settings
