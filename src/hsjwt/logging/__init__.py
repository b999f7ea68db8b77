"""
Structured logging for hsjwt.

Sinks:
- stdio: console text or JSON lines on a stream
- file: JSON lines with size-based rotation

Library: structlog + orjson for JSON serialization.
"""

from .core import configure_logging, get_logger, reset_logging

__all__ = ["configure_logging", "get_logger", "reset_logging"]
