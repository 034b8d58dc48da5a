"""A levelled logger that writes timestamped lines to a file and a stream."""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime
from enum import IntEnum
from os import PathLike
from typing import IO

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(IntEnum):
    """Syslog-style severities; a lower value is more severe."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


def level_name(level: int) -> str:
    """Return the upper-case name of a level, or ``"UNKNOWN"``."""
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


class Logger:
    """Writes messages at or above a severity threshold.

    Every accepted message goes to the output stream (standard output by
    default) and, when a file name was given, is appended to that file.
    """

    def __init__(
        self,
        filename: str | PathLike[str] | None = None,
        level: int = LogLevel.DEBUG,
        *,
        stream: IO[str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._level = int(level)
        self._stream = stream
        self._clock = clock or datetime.now
        self._file: IO[str] | None = None
        if filename is not None:
            self._file = open(filename, "a", encoding="utf-8")

    @property
    def level(self) -> int:
        """The least severe level that is still written."""
        return self._level

    def set_level(self, level: int) -> None:
        """Change the threshold for later messages."""
        self._level = int(level)

    def log(self, level: int, message: str) -> str | None:
        """Write ``message`` if ``level`` passes the threshold.

        Returns the line written, without its newline, or ``None`` when the
        message was filtered out.
        """
        if int(level) > self._level:
            return None
        stamp = self._clock().strftime(TIMESTAMP_FORMAT)
        line = f"[{stamp}] [{level_name(level)}] {message}"
        if self._file is not None:
            self._file.write(line + "\n")
            self._file.flush()
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")
        return line

    def close(self) -> None:
        """Close the log file, if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()