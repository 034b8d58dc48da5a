"""Command that exercises the logger with one message of each kind."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from embedsim.logger import Logger, LogLevel


def main(argv: Sequence[str] | None = None) -> int:
    """Log sample messages to a file and standard output."""
    parser = argparse.ArgumentParser(description="Write sample log messages.")
    parser.add_argument(
        "logfile", nargs="?", default="logfile.txt", help="file to append to"
    )
    args = parser.parse_args(argv)

    with Logger(args.logfile, LogLevel.DEBUG) as logger:
        logger.log(LogLevel.INFO, "This is an info message.")
        logger.log(LogLevel.WARNING, "This is a warning message.")
        logger.log(LogLevel.ERROR, "This is an error message.")
        logger.log(LogLevel.DEBUG, "This is a debug message.")
        logger.log(LogLevel.ALERT, "This is an alert message.")
        logger.log(LogLevel.EMERGENCY, "This is an emergency message.")

        logger.set_level(LogLevel.ERROR)
        logger.log(LogLevel.DEBUG, "This debug message should not appear.")
        logger.log(LogLevel.ERROR, "This error message should appear.")
    return 0