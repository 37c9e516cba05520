"""Package wide logging.

All messages go through a single `conterm.logging.Logger`. By default only warnings and
errors are written to stderr; the CLI lowers the level with `--verbose`.
"""
from __future__ import annotations

import sys

from conterm.logging import Logger, LogLevel

__all__ = ["LogLevel", "configure", "info", "warn", "error"]

FORMAT = "[{code}] {msg}"

_logger_ = Logger(fmt=FORMAT, out=sys.stderr, min_level=LogLevel.Warn)


def configure(min_level: int = LogLevel.Warn, out=None) -> Logger:
    """Replace the package logger.

    Args
        min_level (int): Minimum `LogLevel` that is written. Defaults to `LogLevel.Warn`.
        out (TextIO | str | Path | None): Where to write. Defaults to stderr.
    """
    global _logger_
    _logger_ = Logger(fmt=FORMAT, out=out or sys.stderr, min_level=min_level)
    return _logger_


def info(*msg: str):
    _logger_.log(*msg, level=LogLevel.Info)


def warn(*msg: str):
    _logger_.log(*msg, level=LogLevel.Warn)


def error(*msg: str):
    _logger_.log(*msg, level=LogLevel.Error)
