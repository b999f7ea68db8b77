"""
Log sinks: where rendered events end up.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Literal

import orjson
from structlog.typing import EventDict

from .formatters import ConsoleFormatter

LogFormat = Literal["console", "json"]


def orjson_dumps(v: Any) -> str:
    return orjson.dumps(v, default=str, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


class BaseSink(ABC):
    @abstractmethod
    def emit(self, event_dict: EventDict) -> None:
        ...

    @abstractmethod
    def close(self) -> None:
        ...


class StdioSink(BaseSink):
    """Diagnostics for the ``hsjwt`` command.

    Stdout carries the token or decoded JSON, so events go to stderr unless
    another stream is given. ``json`` emits one object per line for log
    shippers; ``console`` is colored only when the stream is a terminal.
    """

    def __init__(self, fmt: LogFormat = "console", stream: Any = None):
        self._stream = stream or sys.stderr
        self._as_json = fmt == "json"
        isatty = getattr(self._stream, "isatty", None)
        self._use_color = bool(isatty()) if callable(isatty) else False

    def _render(self, event_dict: EventDict) -> str:
        if self._as_json:
            return orjson_dumps(event_dict)
        return ConsoleFormatter.format(event_dict, use_color=self._use_color)

    def emit(self, event_dict: EventDict) -> None:
        self._stream.write(self._render(event_dict) + "\n")
        self._stream.flush()

    def close(self) -> None:
        # The stream belongs to the caller.
        pass


class FileSink(BaseSink):
    """Appends JSON lines to a file, rotating it once it grows past ``max_bytes``."""

    def __init__(self, path: str | Path, max_bytes: int = 10 * 1024 * 1024, backup_count: int = 3):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._max_bytes = max_bytes
        self._backup_count = backup_count
        self._file = open(self._path, "a", encoding="utf-8")

    def emit(self, event_dict: EventDict) -> None:
        self._file.write(orjson_dumps(event_dict) + "\n")
        self._file.flush()
        if self._path.stat().st_size > self._max_bytes:
            self._rotate()

    def _rotate(self) -> None:
        self._file.close()
        for i in range(self._backup_count - 1, 0, -1):
            src = self._path.with_suffix(f".{i}.log")
            if src.exists():
                src.replace(self._path.with_suffix(f".{i + 1}.log"))
        self._path.replace(self._path.with_suffix(".1.log"))
        self._file = open(self._path, "a", encoding="utf-8")

    def close(self) -> None:
        self._file.close()
