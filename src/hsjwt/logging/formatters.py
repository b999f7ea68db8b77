"""
Console rendering for log events.
"""

from __future__ import annotations

from datetime import datetime, timezone

from structlog.typing import EventDict


class ConsoleFormatter:
    """Renders an event as aligned ``timestamp | level | logger | message`` columns."""

    _RESET = "\x1b[0m"
    _DIM = "\x1b[2m"
    _LEVEL_COLORS = {
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[1;31m",
    }

    EXCLUDED_KEYS = {"level", "message", "event", "logger", "timestamp", "_name"}
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    LEVEL_WIDTH = 8
    LOGGER_WIDTH = 20
    SEPARATOR = " | "

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if len(text) > width:
            text = "..." + text[-(width - 3) :] if width > 3 else text[-width:]
        return f"{text:>{width}}"

    @classmethod
    def _format_timestamp(cls, raw: str | None) -> str:
        if raw:
            try:
                moment = datetime.fromisoformat(raw.replace("Z", "+00:00"))
                if moment.tzinfo is None:
                    moment = moment.replace(tzinfo=timezone.utc)
                return moment.astimezone().strftime(cls.TIMESTAMP_FORMAT)
            except (ValueError, TypeError):
                pass
        return datetime.now().strftime(cls.TIMESTAMP_FORMAT)

    @classmethod
    def format(cls, event_dict: EventDict, *, use_color: bool = False) -> str:
        level = str(event_dict.get("level", "info")).upper()
        message = str(event_dict.get("message", event_dict.get("event", "")))
        extras = [f"{k}={v}" for k, v in event_dict.items() if k not in cls.EXCLUDED_KEYS]
        if extras:
            message = f"{message} " + " ".join(extras)

        level_text = cls._fit_right(level, cls.LEVEL_WIDTH)
        timestamp = cls._format_timestamp(event_dict.get("timestamp"))
        if use_color:
            level_text = f"{cls._LEVEL_COLORS.get(level, '')}{level_text}{cls._RESET}"
            timestamp = f"{cls._DIM}{timestamp}{cls._RESET}"

        return cls.SEPARATOR.join(
            [
                timestamp,
                level_text,
                cls._fit_right(str(event_dict.get("logger", "root")), cls.LOGGER_WIDTH),
                message,
            ]
        )
