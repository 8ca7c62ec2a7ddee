"""structlog configuration for envscope.

Two output modes:
- Human (default): colored console output to stderr
- JSON (--log-json): Structured JSON lines to stderr

Resolution events (``env.resolved`` / ``env.default``) additionally get a
one-line ``summary`` field such as ``CI_TIMEOUT=30 -> 30``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

RESOLUTION_EVENTS = frozenset({"env.resolved", "env.default"})


def add_resolution_summary(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Attach a compact ``summary`` to resolution events."""
    event = event_dict.get("event")
    if event not in RESOLUTION_EVENTS:
        return event_dict
    key = event_dict.get("key")
    if event == "env.resolved":
        event_dict["summary"] = f"{key}={event_dict.get('raw')} -> {event_dict.get('value')!r}"
    else:
        annotation = event_dict.get("annotation", "default")
        event_dict["summary"] = f"{key} not set -> {event_dict.get('default')!r} ({annotation})"
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output (every resolution is logged).
            When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Destination stream, stderr by default.
    """
    out = stream if stream is not None else sys.stderr
    pkg_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_resolution_summary,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(default=repr)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("envscope").setLevel(pkg_level)
