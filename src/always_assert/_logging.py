"""Structured logging for invariant violations.

A lenient-mode violation goes out as one structlog error record: the event is
the formatted message, and ``polarity``, ``file`` and ``line`` locate the
failed check. ``configure_logging`` renders those records to a stream.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

__all__ = [
    'VIOLATION_LOGGER',
    'configure_logging',
    'get_logger',
]

VIOLATION_LOGGER = 'always_assert'


def _add_location(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Join a violation's ``file`` and ``line`` into a ``file:line`` location."""
    file = event_dict.get('file')
    if file is not None:
        event_dict['location'] = f'{file}:{event_dict.get("line")}'
    return event_dict


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> None:
    """Configure structlog to render violation records.

    Args:
        level: Lowest level emitted ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit one JSON object per line. If False, use colored console output.
        stream: Where records go. Defaults to stderr.
    """
    output = stream if stream is not None else sys.stderr
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=output.isatty())
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            _add_location,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(output),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = VIOLATION_LOGGER) -> Any:
    """Get the structlog logger violations are emitted on."""
    return structlog.get_logger(name, logger=name)
