"""JSON debug logging with structlog, written to a file so the TUI keeps the terminal."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

import structlog

from restaurant_order.config import debug_log_path

_configured = False
_sink: TextIO | None = None
_sink_path: Path | None = None


def _open_sink(path: Path) -> TextIO:
    """Reuse the open handle for `path`, closing a handle to any other file."""
    global _sink, _sink_path
    if _sink is not None and not _sink.closed and _sink_path == path:
        return _sink

    if _sink is not None and _sink is not sys.stderr and not _sink.closed:
        _sink.close()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _sink = path.open("a", encoding="utf-8")
        _sink_path = path
    except OSError:
        # Logging must never interfere with app flow.
        _sink = sys.stderr
        _sink_path = None
    return _sink


def configure_logging(level: int = logging.DEBUG) -> None:
    """Route structlog output to the debug log file as JSON lines."""
    global _configured
    sink = _open_sink(debug_log_path())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.WriteLoggerFactory(file=sink),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """
    Return a lazy logger, configuring the file sink on first use.

    The logger resolves the current configuration on every call, so module
    level loggers follow a later `configure_logging()` to a new sink.
    """
    if not _configured:
        configure_logging()
    if name:
        return structlog.get_logger(component=name)
    return structlog.get_logger()
