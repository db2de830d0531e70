# logger_utils.py - logging setup, colored console output and timing metrics

from __future__ import annotations

import logging
import sys
import time
from typing import Optional, TextIO

LOGGER_NAME = "freq_trie"
LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Formatter wrapping each line in an ANSI color picked by level."""
    COLORS = {
        "DEBUG": "\033[90m",
        "INFO": "\033[94m",
        "WARNING": "\033[93m",
        "ERROR": "\033[91m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return line
        return f"{color}{line}{self.COLORS['RESET']}"


def setup_logging(
    level: str = "INFO",
    path: Optional[str] = None,
    use_color: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the package logger: one console handler and, when `path` is
    given, a file handler appending plain lines to it.
    Calling it again replaces the handlers installed by a previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream or sys.stderr)
    fmt_cls = ColorFormatter if use_color else logging.Formatter
    console.setFormatter(fmt_cls(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(console)

    if path:
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)
    return logger


class Log:
    """Small facade over the package logger, plus metrics and timing."""

    _logger = logging.getLogger(LOGGER_NAME)

    @classmethod
    def debug(cls, msg: str) -> None:
        cls._logger.debug(msg)

    @classmethod
    def info(cls, msg: str) -> None:
        cls._logger.info(msg)

    @classmethod
    def warning(cls, msg: str) -> None:
        cls._logger.warning(msg)

    @classmethod
    def error(cls, msg: str) -> None:
        cls._logger.error(msg)

    @classmethod
    def metric(cls, tag: str, value, unit: str = "") -> None:
        """Log `tag: value<unit>` at INFO, e.g. "load words.txt done: 0.041s"."""
        cls._logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str) -> "_Stopwatch":
        """`with Log.time_block("load words.txt"): ...` reports the elapsed seconds on exit."""
        return _Stopwatch(label)


class _Stopwatch:
    """Wall-clock seconds spent inside a with-block, reported through Log.metric."""

    def __init__(self, label: str):
        self.label = label
        self.started = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "_Stopwatch":
        self.started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = round(time.perf_counter() - self.started, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
