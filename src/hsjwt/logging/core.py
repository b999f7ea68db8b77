"""
structlog configuration: processors, sink fan-out and logger access.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TextIO

import structlog
from structlog.typing import EventDict, WrappedLogger

from .sinks import BaseSink, FileSink, LogFormat, StdioSink

_sinks: list[BaseSink] = []


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(_name=name or "hsjwt")


# =============================================================================
# Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["logger"] = event_dict.pop("_name", "hsjwt")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename structlog's 'event' to 'message'."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def multi_sink_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Hand the event to every configured sink; nothing is returned to structlog."""
    for sink in _sinks:
        try:
            sink.emit(event_dict)
        except Exception:
            pass  # sink failures never reach the caller
    return ""


# =============================================================================
# Configuration
# =============================================================================


def _initialize_sinks(sinks: str, fmt: str, file_path: str, stream: TextIO | None) -> None:
    close_sinks()
    log_format: LogFormat = "json" if fmt.lower() == "json" else "console"
    for name in (s.strip().lower() for s in sinks.split(",")):
        if name == "stdio":
            _sinks.append(StdioSink(fmt=log_format, stream=stream))
        elif name == "file":
            _sinks.append(FileSink(file_path))


def close_sinks() -> None:
    for sink in _sinks:
        sink.close()
    _sinks.clear()


def configure_logging(
    *,
    level: str = "WARNING",
    sinks: str = "stdio",
    fmt: str = "console",
    file_path: str = "logs/hsjwt.log",
    stream: TextIO | None = None,
) -> None:
    """
    Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        sinks: Comma-separated sink names (stdio, file)
        fmt: Output format for the stdio sink (console, json)
        file_path: Path for the file sink
        stream: Stream for the stdio sink, stderr when omitted
    """
    _initialize_sinks(sinks, fmt, file_path, stream)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            add_timestamp,
            add_logger_name,
            rename_event_key,
            structlog.processors.format_exc_info,
            multi_sink_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.WARNING)),
        context_class=dict,
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def reset_logging() -> None:
    """Close all sinks and restore structlog defaults."""
    close_sinks()
    structlog.reset_defaults()
